from __future__ import annotations

import os

import pytest
from snudown_parser.exceptions import MalformedInputError
from snudown_parser.parser import parse_html

atheris = pytest.importorskip("atheris")

FRAGMENTS = [
    "<p>",
    "</p>",
    "<strong>",
    "</strong>",
    "<em>",
    "</em>",
    "<ol>",
    "</ol>",
    "<ul>",
    "</ul>",
    "<li>",
    "</li>",
    "<blockquote>",
    "</blockquote>",
    '<a href=\\"https://x\\">',
    "</a>",
    "&amp;",
    "\\n",
]


def test_parse_html_with_fuzzed_text():
    data = os.urandom(4096)
    provider = atheris.FuzzedDataProvider(data)

    for _ in range(64):
        if provider.remaining_bytes() == 0:
            break
        html = provider.ConsumeUnicodeNoSurrogates(128)
        try:
            parse_html(html)
        except MalformedInputError:
            continue


def test_parse_html_with_fuzzed_tag_soup():
    data = os.urandom(4096)
    provider = atheris.FuzzedDataProvider(data)
    parts: list[str] = []

    while provider.remaining_bytes() > 0 and len(parts) < 256:
        if provider.ConsumeBool():
            parts.append(FRAGMENTS[provider.ConsumeIntInRange(0, len(FRAGMENTS) - 1)])
        else:
            parts.append(provider.ConsumeUnicodeNoSurrogates(8))

    html = "".join(parts)
    try:
        result = parse_html(html)
    except MalformedInputError:
        return
    assert len(result.link_order) == len(result.unique_links)
