"""Mutable scan state owned by a single parse call."""

from __future__ import annotations

from dataclasses import dataclass, field

from .builder import TextBuilder
from .config import ParserConfig
from .models import ListKind, ListNode, MarkdownList, ParseResult, StyledText, StyleFlag


@dataclass
class ListItemRecord:
    """Arena entry for one list item; `sublist` indexes `ScanState.list_frames`."""

    content: StyledText
    sublist: int | None = None


@dataclass
class ListFrame:
    """Construction record of one list in the arena."""

    kind: ListKind
    items: list[ListItemRecord] = field(default_factory=list)


@dataclass
class ScanState:
    """Encapsulate scan state while walking Snudown HTML.

    Attributes:
        config: Configuration for this parse.
        allow_append: Whether literal characters are captured.
        builder: Text accumulator for the current block.
        active_styles: Style flags currently open.
        active_style_count: Number of style tags opened since the set was empty.
        style_start: Accumulator offset where the active set became non-empty.
        marked_index: Offset where the pending spoiler or link span starts.
        last_link: Most recently opened href.
        blockquote_depth: Current blockquote nesting.
        blockquote_fragments: Fragments waiting to be emitted as a blockquote.
        table_headers: Header cells of the table under construction.
        table_rows: Body rows of the table under construction.
        list_frames: Arena of lists seen since the outermost open list began.
        open_lists: Indices into `list_frames`, innermost last.
        result: Output being assembled.
    """

    config: ParserConfig = field(default_factory=ParserConfig)
    allow_append: bool = False
    builder: TextBuilder = field(default_factory=TextBuilder)
    active_styles: StyleFlag = StyleFlag(0)
    active_style_count: int = 0
    style_start: int = 0
    marked_index: int = 0
    last_link: str = ""
    blockquote_depth: int = 0
    blockquote_fragments: list[StyledText] = field(default_factory=list)
    table_headers: list[StyledText] = field(default_factory=list)
    table_rows: list[list[StyledText]] = field(default_factory=list)
    list_frames: list[ListFrame] = field(default_factory=list)
    open_lists: list[int] = field(default_factory=list)
    result: ParseResult = field(default_factory=ParseResult)

    def push_list(self, kind: ListKind) -> int:
        """Open a new list frame and return its arena index."""
        self.list_frames.append(ListFrame(kind))
        index = len(self.list_frames) - 1
        self.open_lists.append(index)
        return index

    def materialize_list(self, index: int) -> MarkdownList:
        """Build the immutable list tree rooted at arena entry `index`."""
        frame = self.list_frames[index]
        children = tuple(
            ListNode(
                item.content,
                None if item.sublist is None else self.materialize_list(item.sublist),
            )
            for item in frame.items
        )
        return MarkdownList(frame.kind, children)
