"""Unit tests for Post and DisplayPost."""

import dataclasses

import pytest

from folio.contexts.content.post_data_structure import DisplayPost, Post, post_url


@pytest.fixture
def post():
    return Post(
        title="Estimating Reading Time",
        date="2024-09-06",
        slug="reading-time",
        read_time="3 min read",
        description="Two hundred words a minute.",
        body="# Heading\n\nBody text.",
    )


@pytest.mark.unit
def test_post_url_scheme():
    assert post_url("hello-world") == "/writings/hello-world"


@pytest.mark.unit
def test_to_display_keeps_only_display_fields(post):
    display = post.to_display()

    assert display == DisplayPost(
        title="Estimating Reading Time",
        slug="reading-time",
        date="2024-09-06",
        read_time="3 min read",
    )
    assert {f.name for f in dataclasses.fields(display)} == {"title", "slug", "date", "read_time"}
    assert display.url == post.url == "/writings/reading-time"


@pytest.mark.unit
def test_display_post_is_a_separate_value(post):
    display = post.to_display()

    with pytest.raises(dataclasses.FrozenInstanceError):
        display.title = "Changed"

    changed = dataclasses.replace(display, title="Changed")
    assert changed.title == "Changed"
    assert post.title == "Estimating Reading Time"


@pytest.mark.unit
def test_post_is_immutable(post):
    with pytest.raises(dataclasses.FrozenInstanceError):
        post.slug = "other"


@pytest.mark.unit
def test_display_post_to_dict_uses_read_time_wire_key(post):
    assert post.to_display().to_dict() == {
        "title": "Estimating Reading Time",
        "slug": "reading-time",
        "date": "2024-09-06",
        "readTime": "3 min read",
    }
