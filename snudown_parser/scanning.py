"""Low-level cursor helpers shared by the scanner and its handlers.

Every helper takes the input and a cursor position and returns the position
just past whatever it consumed. None of them ever moves the cursor backwards.
"""

from __future__ import annotations

from .constants import ENTITIES
from .exceptions import MalformedInputError


def extract_tag(html: str, pos: int) -> tuple[str, int]:
    """Read a tag starting at `pos` through the next ``>``.

    An unterminated tag consumes the rest of the input.

    Examples:
        extract_tag("<p>hi", 0)  # ("<p>", 3)
    """
    end = html.find(">", pos)
    if end == -1:
        return html[pos:], len(html)
    return html[pos : end + 1], end + 1


def find_entity(html: str, pos: int) -> tuple[str, int]:
    """Read an entity starting at `pos` through the next ``;``.

    Examples:
        find_entity("&amp; x", 0)  # ("&amp;", 5)
    """
    end = html.find(";", pos)
    if end == -1:
        return html[pos:], len(html)
    return html[pos : end + 1], end + 1


def substitute_entity(entity: str) -> str:
    """Return the literal for a known entity, or the entity unchanged."""
    return ENTITIES.get(entity, entity)


def skip_tags(html: str, pos: int, count: int) -> int:
    """Advance past the next `count` ``>`` characters.

    Stops at the end of input when fewer remain.
    """
    for _ in range(count):
        end = html.find(">", pos)
        if end == -1:
            return len(html)
        pos = end + 1
    return pos


def extract_attributes(html: str, pos: int, quote_width: int) -> tuple[dict[str, str], int]:
    """Scan ``name=value`` attributes of the tag starting at `pos`.

    Attributes are separated by spaces and the scan ends at ``>``. Each value
    loses `quote_width` delimiter characters from both ends, so values may not
    contain spaces.

    Args:
        html: Full input.
        pos: Position of the tag's ``<``.
        quote_width: Delimiter characters wrapping each value.

    Returns:
        tuple[dict[str, str], int]: Attributes by name and the position after
            the closing ``>``.

    Raises:
        MalformedInputError: If the tag never closes, an attribute has no
            ``=``, or a value is shorter than its delimiters.

    Examples:
        extract_attributes('<img width="4">', 0, 1)  # ({"width": "4"}, 15)
    """
    length = len(html)

    # Skip the tag name.
    while pos < length and html[pos] not in " >":
        pos += 1

    attributes: dict[str, str] = {}
    while True:
        while pos < length and html[pos] == " ":
            pos += 1
        if pos >= length:
            raise MalformedInputError("unterminated tag attributes", pos)
        if html[pos] == ">":
            return attributes, pos + 1

        name_start = pos
        while pos < length and html[pos] not in "= >":
            pos += 1
        if pos >= length or html[pos] != "=":
            raise MalformedInputError(f"attribute {html[name_start:pos]!r} has no value", pos)
        name = html[name_start:pos]
        pos += 1

        value_start = pos
        while pos < length and html[pos] not in " >":
            pos += 1
        raw_value = html[value_start:pos]
        if len(raw_value) < 2 * quote_width:
            raise MalformedInputError(f"value of attribute {name!r} is not quoted", value_start)
        attributes[name] = raw_value[quote_width : len(raw_value) - quote_width]
