from __future__ import annotations

import pytest

from snudown_parser.exceptions import MalformedInputError
from snudown_parser.scanning import (
    extract_attributes,
    extract_tag,
    find_entity,
    skip_tags,
    substitute_entity,
)


def test_extract_tag_reads_through_closing_bracket():
    assert extract_tag("x<p>rest", 1) == ("<p>", 4)


def test_extract_tag_unterminated_consumes_input():
    assert extract_tag("<p", 0) == ("<p", 2)


def test_find_entity():
    assert find_entity("a&amp;b", 1) == ("&amp;", 6)
    assert find_entity("&amp", 0) == ("&amp", 4)


def test_substitute_entity():
    assert substitute_entity("&gt;") == ">"
    assert substitute_entity("&nbsp;") == "\u00a0"
    assert substitute_entity("&unknown;") == "&unknown;"


def test_skip_tags():
    html = "</em></strong>tail"
    assert skip_tags(html, 0, 0) == 0
    assert html[skip_tags(html, 0, 2):] == "tail"
    assert skip_tags(html, 0, 5) == len(html)


def test_extract_attributes_escaped_quotes():
    html = r'<img src=\"https://x/y.png\" width=\"10\" height=\"20\">after'
    attributes, pos = extract_attributes(html, 0, 2)

    assert attributes == {"src": "https://x/y.png", "width": "10", "height": "20"}
    assert html[pos:] == "after"


def test_extract_attributes_plain_quotes():
    attributes, pos = extract_attributes('<a href="u">', 0, 1)

    assert attributes == {"href": "u"}
    assert pos == len('<a href="u">')


def test_extract_attributes_without_attributes():
    assert extract_attributes("<a>x", 0, 2) == ({}, 3)


@pytest.mark.parametrize(
    "html",
    [
        r'<a href=\"never-closed\"',
        "<a download>",
        '<a href="">',
        "<a href=",
    ],
)
def test_extract_attributes_malformed(html: str):
    with pytest.raises(MalformedInputError):
        extract_attributes(html, 0, 2)


def test_malformed_error_reports_position():
    with pytest.raises(MalformedInputError) as excinfo:
        extract_attributes("<a href", 0, 2)

    assert excinfo.value.position == len("<a href")
    assert "position 7" in str(excinfo.value)
