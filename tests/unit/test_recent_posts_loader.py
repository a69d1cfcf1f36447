"""Unit tests for recent-post selection."""

import pytest

from folio.contexts.content.exceptions import PostValidationError
from folio.contexts.content.loader import (
    RECENT_POSTS_LIMIT,
    load_recent_posts,
    parse_post_date,
    sort_posts_by_date,
)
from folio.contexts.content.post_data_structure import DisplayPost, Post


def make_post(slug: str, date: str, title: str = None, read_time: str = "1 min read") -> Post:
    return Post(
        title=title or slug.replace("-", " ").title(),
        date=date,
        slug=slug,
        read_time=read_time,
        body=f"Body of {slug}",
    )


@pytest.fixture
def example_posts():
    return [
        make_post("new-year", "2024-01-01"),
        make_post("reading-time", "2024-09-06"),
        make_post("spring-cleaning", "2023-05-05"),
        make_post("first-post", "2022-01-01"),
    ]


@pytest.mark.unit
def test_returns_three_most_recent_in_descending_order(example_posts):
    recent = load_recent_posts(example_posts)

    assert [post.date for post in recent] == ["2024-09-06", "2024-01-01", "2023-05-05"]
    assert [post.slug for post in recent] == ["reading-time", "new-year", "spring-cleaning"]


@pytest.mark.unit
@pytest.mark.parametrize("count", [0, 1, 2, 3, 4, 7])
def test_result_length_is_min_of_limit_and_input(count):
    posts = [make_post(f"post-{i}", f"2024-01-{i + 1:02d}") for i in range(count)]

    recent = load_recent_posts(posts)

    assert len(recent) == min(RECENT_POSTS_LIMIT, count)


@pytest.mark.unit
def test_adjacent_results_are_non_increasing_by_date():
    posts = [
        make_post("a", "2021-03-01"),
        make_post("b", "2024-06-30"),
        make_post("c", "2019-12-31"),
        make_post("d", "2024-06-30T12:00:00"),
        make_post("e", "2023-01-15"),
    ]

    recent = load_recent_posts(posts, limit=5)
    dates = [parse_post_date(post.date) for post in recent]

    assert all(earlier >= later for earlier, later in zip(dates, dates[1:]))


@pytest.mark.unit
def test_single_post_is_projected_unchanged():
    post = make_post("only-one", "2020-02-02", title="Only One", read_time="7 min read")

    recent = load_recent_posts([post])

    assert recent == [
        DisplayPost(title="Only One", slug="only-one", date="2020-02-02", read_time="7 min read")
    ]


@pytest.mark.unit
def test_empty_collection_returns_empty_list():
    assert load_recent_posts([]) == []


@pytest.mark.unit
def test_projection_matches_source_fields(example_posts):
    by_slug = {post.slug: post for post in example_posts}

    for display in load_recent_posts(example_posts):
        source = by_slug[display.slug]
        assert isinstance(display, DisplayPost)
        assert display.title == source.title
        assert display.date == source.date
        assert display.read_time == source.read_time
        assert not hasattr(display, "body")


@pytest.mark.unit
def test_is_idempotent_and_does_not_reorder_input(example_posts):
    original_order = [post.slug for post in example_posts]

    first = load_recent_posts(example_posts)
    second = load_recent_posts(example_posts)

    assert first == second
    assert [post.slug for post in example_posts] == original_order


@pytest.mark.unit
def test_equal_dates_keep_input_order():
    posts = [
        make_post("older", "2023-01-01"),
        make_post("tie-first", "2024-05-05"),
        make_post("tie-second", "2024-05-05"),
        make_post("tie-third", "2024-05-05"),
    ]

    recent = load_recent_posts(posts)

    assert [post.slug for post in recent] == ["tie-first", "tie-second", "tie-third"]


@pytest.mark.unit
def test_custom_limit():
    posts = [make_post(f"post-{i}", f"2024-02-{i + 1:02d}") for i in range(6)]

    assert len(load_recent_posts(posts, limit=5)) == 5
    assert load_recent_posts(posts, limit=0) == []


@pytest.mark.unit
def test_negative_limit_rejected(example_posts):
    with pytest.raises(ValueError, match="non-negative"):
        load_recent_posts(example_posts, limit=-1)


@pytest.mark.unit
def test_accepts_any_iterable(example_posts):
    recent = load_recent_posts(post for post in example_posts)

    assert [post.slug for post in recent] == ["reading-time", "new-year", "spring-cleaning"]


@pytest.mark.unit
@pytest.mark.parametrize("bad_date", ["", "   ", "not-a-date", "2024-13-01", "06/09/2024"])
def test_unparsable_date_fails_fast(bad_date):
    posts = [make_post("fine", "2024-01-01"), make_post("broken", bad_date)]

    with pytest.raises(PostValidationError) as exc_info:
        load_recent_posts(posts)

    assert exc_info.value.slug == "broken"


@pytest.mark.unit
def test_missing_date_fails_fast():
    posts = [make_post("fine", "2024-01-01"), make_post("broken", None)]

    with pytest.raises(PostValidationError, match="Missing post date"):
        load_recent_posts(posts)


@pytest.mark.unit
def test_parse_post_date_normalises_offsets_to_utc():
    assert parse_post_date("2024-09-06T10:30:00+02:00") == parse_post_date("2024-09-06T08:30:00Z")
    assert parse_post_date("2024-09-06").isoformat() == "2024-09-06T00:00:00"


@pytest.mark.unit
def test_mixed_naive_and_aware_dates_sort_together():
    posts = [
        make_post("naive", "2024-03-01"),
        make_post("aware", "2024-03-02T09:00:00+00:00"),
        make_post("zulu", "2024-02-28T23:59:59Z"),
    ]

    assert [post.slug for post in sort_posts_by_date(posts)] == ["aware", "naive", "zulu"]
