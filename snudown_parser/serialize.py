"""Conversion of parse results into JSON-ready structures."""

from __future__ import annotations

from typing import Any

from .models import (
    Blockquote,
    Code,
    Component,
    Image,
    MarkdownList,
    ParseResult,
    StyledText,
    Table,
    Text,
)


def styled_text_to_dict(styled: StyledText) -> dict[str, Any]:
    return {
        "text": styled.text,
        "base": styled.base.name.lower(),
        "styles": [
            {
                "flags": sorted(flag.name.lower() for flag in style.flags),
                "start": style.start,
                "end": style.end,
            }
            for style in styled.styles
        ],
        "spoilers": [
            {"id": spoiler.spoiler_id, "start": spoiler.start, "end": spoiler.end}
            for spoiler in styled.spoilers
        ],
        "links": [
            {"href": link.href, "start": link.start, "end": link.end} for link in styled.links
        ],
    }


def list_to_dict(markdown_list: MarkdownList) -> dict[str, Any]:
    return {
        "type": "list",
        "kind": markdown_list.kind.name.lower(),
        "children": [
            {
                "content": styled_text_to_dict(node.content),
                "sublist": None if node.sublist is None else list_to_dict(node.sublist),
            }
            for node in markdown_list.children
        ],
    }


def component_to_dict(component: Component) -> dict[str, Any]:
    """Convert one component into a dict tagged with its ``type``.

    Raises:
        TypeError: If `component` is not a known component type.
    """
    if isinstance(component, Text):
        return {"type": "text", "content": styled_text_to_dict(component.content)}
    if isinstance(component, Code):
        return {"type": "code", "text": component.text}
    if isinstance(component, Image):
        return {
            "type": "image",
            "url": component.url,
            "width": component.width,
            "height": component.height,
        }
    if isinstance(component, Table):
        return {
            "type": "table",
            "headers": [styled_text_to_dict(cell) for cell in component.headers],
            "rows": [[styled_text_to_dict(cell) for cell in row] for row in component.rows],
        }
    if isinstance(component, MarkdownList):
        return list_to_dict(component)
    if isinstance(component, Blockquote):
        return {
            "type": "blockquote",
            "depth": component.depth,
            "fragments": [styled_text_to_dict(fragment) for fragment in component.fragments],
        }
    raise TypeError(f"Unsupported component: {component!r}")


def result_to_dict(result: ParseResult) -> dict[str, Any]:
    """Convert a `ParseResult` into plain dicts and lists.

    Links are emitted in first-seen order only; the unique set is implied.
    """
    return {
        "components": [component_to_dict(component) for component in result.components],
        "links": list(result.link_order),
    }
