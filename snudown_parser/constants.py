"""Tag, style and entity tables for the Snudown HTML vocabulary."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .models import StyleFlag, TagAction

ESCAPED_QUOTE = '\\"'
PLAIN_QUOTE = '"'

DEFAULT_LINK = "https://google.com"

# Exact openings of anchor and inline image tags, so <abbr> or <ins> never match.
ANCHOR_PREFIXES = ("<a ", "<a>")
IMAGE_PREFIXES = ("<img ", "<img>")

# Tags opening a text container enable capture; closing them disables it.
_OPEN_CONTAINER = TagAction.NEW_BUILDER | TagAction.ALLOW_APPEND
_CLOSE_HEADER = TagAction.CLOSE_HEADER | TagAction.DISALLOW_APPEND


def build_action_table(quote: str) -> Mapping[str, TagAction]:
    """Build the structural tag table for one attribute quoting convention.

    Args:
        quote: Delimiter wrapping attribute values, `ESCAPED_QUOTE` or
            `PLAIN_QUOTE`.

    Returns:
        Mapping[str, TagAction]: Read-only mapping from full tag text to the
            actions it triggers.
    """
    table: dict[str, TagAction] = {
        "<p>": _OPEN_CONTAINER,
        "</p>": TagAction.POP_BUILDER | TagAction.DISALLOW_APPEND,
        f"<span class={quote}md-spoiler-text{quote}>": TagAction.MARK_INDEX,
        "</span>": TagAction.MARK_INDEX_AS_SPOILER,
        "</a>": TagAction.MARK_INDEX_AS_LINK,
        "<pre>": TagAction.MARK_CODE_BLOCK,
        "</th>": TagAction.CLOSE_TABLE_HEADER | TagAction.DISALLOW_APPEND,
        "</td>": TagAction.CLOSE_TABLE_ROW | TagAction.DISALLOW_APPEND,
        "<table>": TagAction.NEW_TABLE,
        "</table>": TagAction.CLOSE_TABLE,
        "<ul>": TagAction.NEW_UNORDERED_LIST | TagAction.DISALLOW_APPEND,
        "<ol>": TagAction.NEW_ORDERED_LIST | TagAction.DISALLOW_APPEND,
        "</ul>": TagAction.CLOSE_LIST,
        "</ol>": TagAction.CLOSE_LIST,
        "<li>": _OPEN_CONTAINER,
        "</li>": TagAction.CLOSE_LIST_ELEMENT | TagAction.DISALLOW_APPEND,
        "<blockquote>": TagAction.OPEN_BLOCK_QUOTE,
        "</blockquote>": TagAction.CLOSE_BLOCK_QUOTE,
    }
    for level in range(1, 7):
        table[f"<h{level}>"] = _OPEN_CONTAINER
        table[f"</h{level}>"] = _CLOSE_HEADER
    for cell in ("th", "td"):
        table[f"<{cell}>"] = _OPEN_CONTAINER
        for align in ("left", "center", "right"):
            table[f"<{cell} align={quote}{align}{quote}>"] = _OPEN_CONTAINER
    return MappingProxyType(table)


ESCAPED_ACTIONS = build_action_table(ESCAPED_QUOTE)
PLAIN_ACTIONS = build_action_table(PLAIN_QUOTE)

STYLES: Mapping[str, StyleFlag] = MappingProxyType(
    {
        "<strong>": StyleFlag.BOLD,
        "</strong>": StyleFlag.BOLD,
        "<em>": StyleFlag.ITALIC,
        "</em>": StyleFlag.ITALIC,
        "<del>": StyleFlag.STRIKETHROUGH,
        "</del>": StyleFlag.STRIKETHROUGH,
        "<sup>": StyleFlag.SUPERSCRIPT,
        "</sup>": StyleFlag.SUPERSCRIPT,
        "<code>": StyleFlag.INLINE_CODE,
        "</code>": StyleFlag.INLINE_CODE,
    }
)

ENTITIES: Mapping[str, str] = MappingProxyType(
    {
        "&#39;": "'",
        "&#039;": "'",
        "&#x27;": "'",
        "&amp;": "&",
        "&quot;": '"',
        "&#32;": " ",
        "&lt;": "<",
        "&gt;": ">",
        "&nbsp;": "\u00a0",
        "&#x200B;": "",
    }
)


def action_table(escaped_quotes: bool) -> Mapping[str, TagAction]:
    """Return the structural tag table for a quoting convention."""
    return ESCAPED_ACTIONS if escaped_quotes else PLAIN_ACTIONS
