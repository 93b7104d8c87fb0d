"""Structural actions triggered by recognised tags."""

from __future__ import annotations

from .codeblock import read_code_block
from .exceptions import MalformedInputError
from .models import (
    Blockquote,
    ListKind,
    StyledText,
    StyleKind,
    Table,
    TagAction,
    Text,
    header_kind,
)
from .state import ListItemRecord, ScanState


def apply_actions(html: str, pos: int, tag: str, actions: TagAction, ctx: ScanState) -> int:
    """Run every action in `actions` for `tag`, which ended just before `pos`.

    Append toggling and index marking come first, then code-block entry, then
    builder finalisation, then list, table and blockquote effects, so that
    pending text is flushed before the structure it belongs to changes.

    Args:
        html: Full input.
        pos: Cursor position after the tag.
        tag: Full tag text, used for the header level.
        actions: Actions mapped to the tag.
        ctx: Scan state to update.

    Returns:
        int: Cursor position, moved past a code block when one was read.

    Raises:
        MalformedInputError: If the tag closes or fills a structure that is not
            open.
    """
    if TagAction.ALLOW_APPEND in actions:
        ctx.allow_append = True
    elif TagAction.DISALLOW_APPEND in actions:
        ctx.allow_append = False

    builder = ctx.builder
    if TagAction.MARK_INDEX in actions:
        ctx.marked_index = builder.length
    elif TagAction.MARK_INDEX_AS_SPOILER in actions:
        builder.add_spoiler(ctx.marked_index)
    elif TagAction.MARK_INDEX_AS_LINK in actions:
        builder.add_link(ctx.last_link, ctx.marked_index)

    if TagAction.MARK_CODE_BLOCK in actions:
        pos = read_code_block(html, pos, ctx)

    if TagAction.NEW_BUILDER in actions:
        builder.clear()

    if TagAction.POP_BUILDER in actions:
        _pop_builder(ctx, StyleKind.DEFAULT)

    if TagAction.CLOSE_HEADER in actions:
        # "</h3>": the level digit sits just before ">".
        _pop_builder(ctx, header_kind(tag[-2:-1]))

    if actions & (TagAction.NEW_ORDERED_LIST | TagAction.NEW_UNORDERED_LIST):
        if ctx.open_lists:
            _open_nested_list_item(ctx, pos)
        kind = ListKind.UNORDERED if TagAction.NEW_UNORDERED_LIST in actions else ListKind.ORDERED
        ctx.push_list(kind)
    elif TagAction.CLOSE_LIST in actions:
        _close_list(ctx, pos)
    elif TagAction.CLOSE_LIST_ELEMENT in actions:
        _pop_list_element(ctx, pos)

    if TagAction.NEW_TABLE in actions:
        ctx.table_headers = []
        ctx.table_rows = []
    elif TagAction.CLOSE_TABLE in actions:
        table = Table(
            headers=tuple(ctx.table_headers),
            rows=tuple(tuple(row) for row in ctx.table_rows),
        )
        ctx.result.components.append(table)
    elif TagAction.CLOSE_TABLE_HEADER in actions:
        ctx.table_headers.append(builder.pop())
    elif TagAction.CLOSE_TABLE_ROW in actions:
        _add_table_cell(ctx, pos)

    if TagAction.OPEN_BLOCK_QUOTE in actions:
        if ctx.blockquote_depth > 0:
            _flush_blockquote(ctx)
        ctx.blockquote_depth += 1
    elif TagAction.CLOSE_BLOCK_QUOTE in actions:
        if ctx.blockquote_depth == 0:
            raise MalformedInputError("blockquote closed without being opened", pos)
        _flush_blockquote(ctx)
        ctx.blockquote_depth -= 1

    return pos


def _pop_builder(ctx: ScanState, base: StyleKind) -> None:
    styled = ctx.builder.pop(base)
    if ctx.blockquote_depth > 0:
        ctx.blockquote_fragments.append(styled)
    else:
        ctx.result.components.append(Text(styled))


def _pop_list_element(ctx: ScanState, pos: int) -> None:
    """Flush pending text as an item of the innermost open list."""
    if ctx.builder.length == 0:
        return
    if not ctx.open_lists:
        raise MalformedInputError("list item outside of a list", pos)
    frame = ctx.list_frames[ctx.open_lists[-1]]
    frame.items.append(ListItemRecord(ctx.builder.pop()))


def _open_nested_list_item(ctx: ScanState, pos: int) -> None:
    """Record the item a nested list hangs from.

    An item whose only content is the nested list gets an empty text record.
    """
    if ctx.builder.length:
        _pop_list_element(ctx, pos)
    else:
        frame = ctx.list_frames[ctx.open_lists[-1]]
        frame.items.append(ListItemRecord(StyledText("")))


def _close_list(ctx: ScanState, pos: int) -> None:
    if not ctx.open_lists:
        raise MalformedInputError("list closed without being opened", pos)

    index = ctx.open_lists.pop()
    if not ctx.open_lists:
        ctx.result.components.append(ctx.materialize_list(index))
        ctx.list_frames.clear()
        return

    ctx.list_frames[ctx.open_lists[-1]].items[-1].sublist = index


def _add_table_cell(ctx: ScanState, pos: int) -> None:
    """Append a body cell, starting a new row at the header width."""
    header_count = len(ctx.table_headers)
    if header_count == 0:
        raise MalformedInputError("table cell before any table header", pos)

    cell = ctx.builder.pop()
    if not ctx.table_rows or len(ctx.table_rows[-1]) % header_count == 0:
        ctx.table_rows.append([])
    ctx.table_rows[-1].append(cell)


def _flush_blockquote(ctx: ScanState) -> None:
    if not ctx.blockquote_fragments:
        return
    ctx.result.components.append(
        Blockquote(tuple(ctx.blockquote_fragments), ctx.blockquote_depth)
    )
    ctx.blockquote_fragments = []
