from __future__ import annotations

import pytest

from snudown_parser.config import ParserConfig
from snudown_parser.links import build_image, handle_link_or_image
from snudown_parser.models import Image, LinkRange, Text
from snudown_parser.parser import parse_html
from snudown_parser.state import ScanState


def test_link_range_covers_anchor_text():
    result = parse_html(r'<p>see <a href=\"https://a.example\">this page</a> now</p>')

    paragraph = result.components[0].content
    assert paragraph.text == "see this page now"
    assert paragraph.links == (LinkRange("https://a.example", 4, 13),)
    assert result.link_order == ["https://a.example"]


def test_links_are_deduplicated_in_first_seen_order():
    html = (
        r'<p><a href=\"https://b.example\">b</a> <a href=\"https://a.example\">a</a> '
        r'<a href=\"https://b.example\">b again</a></p>'
        r'<p><a href=\"https://c.example\">c</a> <a href=\"https://a.example\">a</a></p>'
    )
    result = parse_html(html)

    assert result.link_order == ["https://b.example", "https://a.example", "https://c.example"]
    assert result.unique_links == set(result.link_order)
    assert [link.href for link in result.components[0].content.links] == [
        "https://b.example",
        "https://a.example",
        "https://b.example",
    ]


def test_anchor_without_href_uses_default_link():
    result = parse_html(r'<p><a title=\"t\">x</a></p>')

    assert result.link_order == ["https://google.com"]
    assert result.components[0].content.links == (LinkRange("https://google.com", 0, 1),)


def test_anchor_without_attributes_uses_configured_default():
    result = parse_html("<p><a>x</a></p>", ParserConfig(default_link="https://example.com"))

    assert result.link_order == ["https://example.com"]


def test_plain_quote_convention():
    result = parse_html('<p><a href="https://plain.example">x</a></p>', ParserConfig(escaped_quotes=False))

    assert result.link_order == ["https://plain.example"]


def test_inline_image_is_emitted_directly():
    html = (
        r'<p>before <a href=\"https://i.example/full.png\">'
        r'<img src=\"https://i.example/thumb.png\" width=\"640\" height=\"480\"></a> after</p>'
    )
    result = parse_html(html)

    image, paragraph = result.components
    assert image == Image("https://i.example/thumb.png", 640.0, 480.0)
    assert isinstance(paragraph, Text)
    assert paragraph.content.text == "before  after"
    assert paragraph.content.links == ()
    assert result.link_order == ["https://i.example/full.png"]


@pytest.mark.parametrize(
    "attributes",
    [
        {"width": "1", "height": "2"},
        {"src": "https://x", "height": "2"},
        {"src": "https://x", "width": "wide", "height": "2"},
        {"src": "", "width": "1", "height": "2"},
        {"src": "http://[broken", "width": "1", "height": "2"},
    ],
)
def test_build_image_omits_incomplete_images(attributes):
    assert build_image(attributes) is None


def test_build_image_parses_dimensions():
    assert build_image({"src": "https://x", "width": "12.5", "height": "3"}) == Image("https://x", 12.5, 3.0)


def test_image_with_bad_size_is_omitted_but_link_is_registered():
    html = r'<p><a href=\"https://l\"><img src=\"https://i\" width=\"big\" height=\"1\"></a>t</p>'
    result = parse_html(html)

    assert [type(component) for component in result.components] == [Text]
    assert result.link_order == ["https://l"]


def test_handle_link_marks_builder_offset():
    ctx = ScanState()
    ctx.builder.append("abc")
    html = r'<a href=\"https://x\">rest'

    pos = handle_link_or_image(html, 0, ctx)

    assert html[pos:] == "rest"
    assert ctx.marked_index == 3
    assert ctx.last_link == "https://x"


def test_tags_sharing_the_anchor_prefix_are_not_links():
    result = parse_html("<p><abbr>x</abbr> <address>y</address></p>")

    assert result.link_order == []
    assert result.components[0].content.text == "x y"
    assert result.components[0].content.links == ()


def test_anchor_wrapping_non_image_tag_keeps_its_text():
    result = parse_html(r'<p><a href=\"https://x\"><ins>t</ins></a></p>')

    assert [type(component) for component in result.components] == [Text]
    assert result.components[0].content.links == (LinkRange("https://x", 0, 1),)
