"""Unit tests for loading markdown writings into a content collection."""

from pathlib import Path

import pytest

from folio.contexts.content.collection import (
    ContentCollection,
    load_content_collection,
    post_from_markdown,
)
from folio.contexts.content.exceptions import (
    ContentCollectionError,
    DuplicateSlugError,
    PostValidationError,
)

FIXTURES_PATH = Path(__file__).resolve().parent.parent / "fixtures"


def write_post(directory: Path, filename: str, frontmatter: str, body: str = "Body.") -> Path:
    path = directory / filename
    path.write_text(f"---\n{frontmatter.strip()}\n---\n\n{body}\n", encoding="utf-8")
    return path


@pytest.mark.unit
def test_load_fixture_collection_skips_drafts():
    collection = load_content_collection(FIXTURES_PATH / "writings")

    assert isinstance(collection, ContentCollection)
    assert len(collection) == 4
    assert "unfinished" not in collection
    # Source order is sorted by file path
    assert collection.slugs() == ["first-post", "new-year", "reading-time", "spring-cleaning"]


@pytest.mark.unit
def test_include_drafts():
    collection = load_content_collection(FIXTURES_PATH / "writings", include_drafts=True)

    assert len(collection) == 5
    assert collection.get("unfinished").title == "Unfinished"


@pytest.mark.unit
def test_fixture_post_fields():
    collection = load_content_collection(FIXTURES_PATH / "writings")
    post = collection.get("new-year")

    assert post.title == "New Year Notes"
    assert post.date == "2024-01-01"
    assert post.read_time == "2 min read"
    assert post.description == "Plans for the year."
    assert post.body.strip() == "Short and sweet."
    assert post.source_path == FIXTURES_PATH / "writings" / "new-year.md"


@pytest.mark.unit
def test_get_unknown_slug_raises_key_error():
    collection = load_content_collection(FIXTURES_PATH / "writings")

    with pytest.raises(KeyError, match="no-such-post"):
        collection.get("no-such-post")


@pytest.mark.unit
def test_slug_defaults_to_file_stem_and_yaml_dates_become_iso_strings(tmp_path):
    write_post(tmp_path, "my-first-post.md", "title: Mine\ndate: 2021-07-04")

    post = load_content_collection(tmp_path).get("my-first-post")

    assert post.date == "2021-07-04"
    assert isinstance(post.date, str)


@pytest.mark.unit
def test_frontmatter_slug_overrides_file_stem(tmp_path):
    write_post(tmp_path, "2021-07-04-notes.md", "title: Notes\ndate: 2021-07-04\nslug: notes")

    assert load_content_collection(tmp_path).slugs() == ["notes"]


@pytest.mark.unit
def test_quoted_datetime_is_kept_verbatim(tmp_path):
    write_post(tmp_path, "timed.md", 'title: Timed\ndate: "2021-07-04T09:15:00Z"')

    assert load_content_collection(tmp_path).get("timed").date == "2021-07-04T09:15:00Z"


@pytest.mark.unit
def test_read_time_computed_when_absent(tmp_path):
    write_post(tmp_path, "long.md", "title: Long\ndate: 2021-07-04", body="word " * 450)
    write_post(tmp_path, "short.md", "title: Short\ndate: 2021-07-05", body="Tiny.")

    collection = load_content_collection(tmp_path)

    assert collection.get("long").read_time == "3 min read"
    assert collection.get("short").read_time == "1 min read"


@pytest.mark.unit
def test_snake_case_read_time_accepted(tmp_path):
    write_post(tmp_path, "post.md", "title: Post\ndate: 2021-07-04\nread_time: 9 min read")

    assert load_content_collection(tmp_path).get("post").read_time == "9 min read"


@pytest.mark.unit
def test_duplicate_slugs_rejected(tmp_path):
    first = write_post(tmp_path, "a.md", "title: A\ndate: 2021-01-01\nslug: same")
    second = write_post(tmp_path, "b.md", "title: B\ndate: 2021-01-02\nslug: same")

    with pytest.raises(DuplicateSlugError) as exc_info:
        load_content_collection(tmp_path)

    assert exc_info.value.slug == "same"
    assert exc_info.value.paths == [first, second]


@pytest.mark.unit
def test_missing_title_rejected(tmp_path):
    path = write_post(tmp_path, "untitled.md", "date: 2021-01-01")

    with pytest.raises(PostValidationError, match="'title'") as exc_info:
        load_content_collection(tmp_path)

    assert exc_info.value.source_path == path


@pytest.mark.unit
def test_missing_date_rejected(tmp_path):
    write_post(tmp_path, "undated.md", "title: Undated")

    with pytest.raises(PostValidationError, match="'date'"):
        load_content_collection(tmp_path)


@pytest.mark.unit
def test_unparsable_date_rejected_with_file(tmp_path):
    path = write_post(tmp_path, "bad-date.md", "title: Bad\ndate: last tuesday")

    with pytest.raises(PostValidationError, match="Unparsable") as exc_info:
        load_content_collection(tmp_path)

    assert exc_info.value.slug == "bad-date"
    assert exc_info.value.source_path == path


@pytest.mark.unit
@pytest.mark.parametrize("slug", ["Has-Capitals", "under_score", "double--hyphen", "-leading"])
def test_invalid_slug_rejected(tmp_path, slug):
    write_post(tmp_path, "post.md", f"title: Post\ndate: 2021-01-01\nslug: '{slug}'")

    with pytest.raises(PostValidationError, match="Slug"):
        load_content_collection(tmp_path)


@pytest.mark.unit
def test_malformed_frontmatter_rejected(tmp_path):
    write_post(tmp_path, "broken.md", "title: [unclosed\ndate: 2021-01-01")

    with pytest.raises(PostValidationError, match="Malformed frontmatter"):
        load_content_collection(tmp_path)


@pytest.mark.unit
def test_empty_directory_gives_empty_collection(tmp_path):
    collection = load_content_collection(tmp_path)

    assert len(collection) == 0
    assert collection.posts == ()


@pytest.mark.unit
def test_missing_directory_raises(tmp_path):
    with pytest.raises(ContentCollectionError):
        load_content_collection(tmp_path / "nope")


@pytest.mark.unit
def test_nested_directories_are_scanned(tmp_path):
    nested = tmp_path / "2024"
    nested.mkdir()
    write_post(nested, "nested-post.md", "title: Nested\ndate: 2024-04-04")

    assert load_content_collection(tmp_path).slugs() == ["nested-post"]


@pytest.mark.unit
def test_post_from_markdown_without_path_requires_slug():
    with pytest.raises(PostValidationError, match="Missing slug"):
        post_from_markdown("---\ntitle: T\ndate: 2020-01-01\n---\nBody")

    post, is_draft = post_from_markdown("---\ntitle: T\ndate: 2020-01-01\nslug: t\n---\nBody")
    assert post.slug == "t"
    assert is_draft is False


@pytest.mark.unit
def test_incomplete_draft_is_skipped_without_validation(tmp_path):
    write_post(tmp_path, "ok.md", "title: OK\ndate: 2024-02-02")
    write_post(tmp_path, "wip.md", "title: WIP\ndraft: true")

    assert load_content_collection(tmp_path).slugs() == ["ok"]


@pytest.mark.unit
def test_incomplete_draft_fails_when_drafts_included(tmp_path):
    write_post(tmp_path, "ok.md", "title: OK\ndate: 2024-02-02")
    write_post(tmp_path, "wip.md", "title: WIP\ndraft: true")

    with pytest.raises(PostValidationError, match="'date'"):
        load_content_collection(tmp_path, include_drafts=True)


@pytest.mark.unit
@pytest.mark.parametrize("flag", ['"false"', '"true"', "1", "yes please"])
def test_draft_flag_must_be_a_boolean(tmp_path, flag):
    write_post(tmp_path, "ok.md", f"title: OK\ndate: 2024-02-02\ndraft: {flag}")

    with pytest.raises(PostValidationError, match="'draft' must be true or false") as exc_info:
        load_content_collection(tmp_path)

    assert exc_info.value.source_path == tmp_path / "ok.md"


@pytest.mark.unit
def test_unquoted_false_draft_flag_is_published(tmp_path):
    write_post(tmp_path, "ok.md", "title: OK\ndate: 2024-02-02\ndraft: false")

    assert load_content_collection(tmp_path).slugs() == ["ok"]
