"""
Markdown Utilities

Rendering post bodies to HTML and estimating how long they take to read.
"""

import math
import re

import markdown as md_lib

WORDS_PER_MINUTE = 200

MARKDOWN_EXTENSIONS = ["extra", "toc", "sane_lists", "smarty"]

# Fenced code blocks count toward reading time, but their fences don't
_FENCE_PATTERN = re.compile(r"^(```|~~~).*$", re.MULTILINE)
_LINK_PATTERN = re.compile(r"!?\[([^\]]*)\]\([^)]*\)")
_HTML_TAG_PATTERN = re.compile(r"<[^>]+>")
_WORD_PATTERN = re.compile(r"[\w'’-]+")


def markdown_to_html(markdown_text: str) -> str:
    """
    Convert a markdown post body to an HTML fragment.

    Args:
        markdown_text: Markdown source (frontmatter already stripped)

    Returns:
        HTML5 fragment
    """
    if not markdown_text:
        return ""

    return md_lib.markdown(
        markdown_text,
        extensions=MARKDOWN_EXTENSIONS,
        output_format="html",
    )


def markdown_to_inline_html(markdown_text: str) -> str:
    """
    Convert a one-line markdown snippet (bio line, list item) to inline HTML.

    The wrapping <p> that markdown adds around a single paragraph is removed.
    """
    html = markdown_to_html(markdown_text).strip()
    if html.startswith("<p>") and html.endswith("</p>") and html.count("<p>") == 1:
        html = html[3:-4]
    return html


def count_words(markdown_text: str) -> int:
    """
    Count readable words in markdown source.

    Link targets, image URLs, HTML tags and code fences are ignored; link text
    and code contents are counted.
    """
    if not markdown_text:
        return 0

    text = _FENCE_PATTERN.sub("", markdown_text)
    text = _LINK_PATTERN.sub(r"\1", text)
    text = _HTML_TAG_PATTERN.sub(" ", text)

    return len(_WORD_PATTERN.findall(text))


def estimate_read_time(markdown_text: str, words_per_minute: int = WORDS_PER_MINUTE) -> str:
    """
    Estimate reading time for a post body.

    Args:
        markdown_text: Markdown source
        words_per_minute: Reading speed

    Returns:
        Display string such as "4 min read" (never less than one minute)

    Examples:
        estimate_read_time("word " * 450)
        # "3 min read"
    """
    if words_per_minute <= 0:
        raise ValueError(f"words_per_minute must be positive, got {words_per_minute}")

    minutes = max(1, math.ceil(count_words(markdown_text) / words_per_minute))
    return f"{minutes} min read"
