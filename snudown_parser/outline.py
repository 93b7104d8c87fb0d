"""Plain-text outline rendering of parse results."""

from __future__ import annotations

from .config import ParserConfig
from .models import (
    Blockquote,
    Code,
    Component,
    Image,
    ListKind,
    MarkdownList,
    ParseResult,
    Table,
    Text,
)

CODE_FENCE = "```"


def render_outline(result: ParseResult, config: ParserConfig | None = None) -> list[str]:
    """Render a parse result as outline lines.

    Components are separated by a blank line. Headings get ``#`` markers,
    lists are indented by `config.outline_indent` per nesting level, and
    blockquote fragments are prefixed with ``> `` once per depth.

    Args:
        result: Parsed document.
        config: Formatting configuration; defaults to a new `ParserConfig`.

    Returns:
        list[str]: Lines, each ending with a newline.

    Examples:
        render_outline(parse_html("<ol><li>x</li></ol>"))  # ["1. x\\n"]
    """
    config = config or ParserConfig()
    lines: list[str] = []
    for index, component in enumerate(result.components):
        if index:
            lines.append("\n")
        lines.extend(_render_component(component, config))
    return lines


def _render_component(component: Component, config: ParserConfig) -> list[str]:
    if isinstance(component, Text):
        level = component.content.base.header_level
        prefix = f"{'#' * level} " if level else ""
        return [f"{prefix}{component.content.text}\n"]
    if isinstance(component, Code):
        body = component.text if component.text.endswith("\n") else f"{component.text}\n"
        return [f"{CODE_FENCE}\n", body, f"{CODE_FENCE}\n"]
    if isinstance(component, Image):
        return [f"![image]({component.url}) {component.width:g}x{component.height:g}\n"]
    if isinstance(component, Table):
        return _render_table(component)
    if isinstance(component, MarkdownList):
        return _render_list(component, config, depth=0)
    if isinstance(component, Blockquote):
        marker = "> " * component.depth
        return [f"{marker}{fragment.text}\n" for fragment in component.fragments]
    raise TypeError(f"Unsupported component: {component!r}")


def _render_table(table: Table) -> list[str]:
    lines = [
        "| " + " | ".join(cell.text for cell in table.headers) + " |\n",
        "|" + "---|" * len(table.headers) + "\n",
    ]
    for row in table.rows:
        lines.append("| " + " | ".join(cell.text for cell in row) + " |\n")
    return lines


def _render_list(markdown_list: MarkdownList, config: ParserConfig, depth: int) -> list[str]:
    indent = config.outline_indent * depth
    lines: list[str] = []
    for number, node in enumerate(markdown_list.children, start=1):
        marker = f"{number}." if markdown_list.kind is ListKind.ORDERED else "-"
        lines.append(f"{indent}{marker} {node.content.text}\n")
        if node.sublist is not None:
            lines.extend(_render_list(node.sublist, config, depth + 1))
    return lines
