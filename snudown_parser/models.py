"""Data models for snudown-parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, Flag, auto


class TagAction(Flag):
    """Structural actions triggered by a recognised tag.

    A tag maps to a combination of these flags; `apply_actions` runs every
    member of the combination.
    """

    NEW_BUILDER = auto()
    POP_BUILDER = auto()
    ALLOW_APPEND = auto()
    DISALLOW_APPEND = auto()
    MARK_INDEX = auto()
    MARK_INDEX_AS_SPOILER = auto()
    MARK_INDEX_AS_LINK = auto()
    MARK_CODE_BLOCK = auto()
    CLOSE_HEADER = auto()
    CLOSE_TABLE_HEADER = auto()
    CLOSE_TABLE_ROW = auto()
    NEW_TABLE = auto()
    CLOSE_TABLE = auto()
    NEW_ORDERED_LIST = auto()
    NEW_UNORDERED_LIST = auto()
    CLOSE_LIST = auto()
    CLOSE_LIST_ELEMENT = auto()
    OPEN_BLOCK_QUOTE = auto()
    CLOSE_BLOCK_QUOTE = auto()


class StyleFlag(Flag):
    """Inline emphasis kinds that can be active at the same time."""

    BOLD = auto()
    ITALIC = auto()
    STRIKETHROUGH = auto()
    SUPERSCRIPT = auto()
    INLINE_CODE = auto()


class StyleKind(Enum):
    """Style kinds handed to a presentation resolver.

    Attributes:
        DEFAULT: Body text.
        BOLD_ITALIC: Bold and italic at once; takes precedence over either.
        HEADER_1 .. HEADER_6: Heading levels.
    """

    DEFAULT = auto()
    BOLD = auto()
    ITALIC = auto()
    BOLD_ITALIC = auto()
    STRIKETHROUGH = auto()
    SUPERSCRIPT = auto()
    INLINE_CODE = auto()
    HEADER_1 = auto()
    HEADER_2 = auto()
    HEADER_3 = auto()
    HEADER_4 = auto()
    HEADER_5 = auto()
    HEADER_6 = auto()

    @property
    def header_level(self) -> int | None:
        """Heading level for header kinds, otherwise None."""
        if self.name.startswith("HEADER_"):
            return int(self.name[-1])
        return None


HEADER_KINDS = {
    "1": StyleKind.HEADER_1,
    "2": StyleKind.HEADER_2,
    "3": StyleKind.HEADER_3,
    "4": StyleKind.HEADER_4,
    "5": StyleKind.HEADER_5,
    "6": StyleKind.HEADER_6,
}


def header_kind(digit: str) -> StyleKind:
    """Return the header style kind for a heading digit, defaulting to level 1."""
    return HEADER_KINDS.get(digit, StyleKind.HEADER_1)


@dataclass(frozen=True)
class StyleRange:
    """Span where every flag in `flags` was active. `end` is exclusive."""

    flags: StyleFlag
    start: int
    end: int


@dataclass(frozen=True)
class SpoilerRange:
    """Spoiler span with its id, sequential within one styled-text unit."""

    spoiler_id: int
    start: int
    end: int


@dataclass(frozen=True)
class LinkRange:
    """Span of text linked to `href`."""

    href: str
    start: int
    end: int


@dataclass(frozen=True)
class StyledText:
    """Plain text plus the style, spoiler and link ranges recorded for it.

    Ranges keep the order in which their closing tags were seen.

    Attributes:
        text: Accumulated characters.
        base: Style kind of the whole unit, body text or a heading level.
        styles: Inline style ranges.
        spoilers: Spoiler ranges, ids counting from 0.
        links: Link ranges.
    """

    text: str
    base: StyleKind = StyleKind.DEFAULT
    styles: tuple[StyleRange, ...] = ()
    spoilers: tuple[SpoilerRange, ...] = ()
    links: tuple[LinkRange, ...] = ()

    def __len__(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text


class ListKind(Enum):
    """Ordered (``<ol>``) or unordered (``<ul>``) list."""

    ORDERED = auto()
    UNORDERED = auto()


@dataclass(frozen=True)
class ListNode:
    """One list item and the sub-list nested directly under it, if any."""

    content: StyledText
    sublist: MarkdownList | None = None


@dataclass(frozen=True)
class MarkdownList:
    kind: ListKind
    children: tuple[ListNode, ...] = ()


@dataclass(frozen=True)
class Text:
    """Paragraph or heading."""

    content: StyledText


@dataclass(frozen=True)
class Code:
    """Verbatim code block."""

    text: str


@dataclass(frozen=True)
class Image:
    url: str
    width: float
    height: float


@dataclass(frozen=True)
class Table:
    """Header cells plus body rows wrapped at the header width."""

    headers: tuple[StyledText, ...] = ()
    rows: tuple[tuple[StyledText, ...], ...] = ()


@dataclass(frozen=True)
class Blockquote:
    """Fragments collected inside a blockquote at `depth` (1 or more)."""

    fragments: tuple[StyledText, ...]
    depth: int


Component = Text | Code | Image | Table | MarkdownList | Blockquote


@dataclass
class ParseResult:
    """Structured result of parsing Snudown HTML.

    Attributes:
        components: Content blocks in document order.
        unique_links: Every distinct link target seen.
        link_order: The same targets in order of first appearance.
    """

    components: list[Component] = field(default_factory=list)
    unique_links: set[str] = field(default_factory=set)
    link_order: list[str] = field(default_factory=list)

    def add_link(self, href: str) -> bool:
        """Register a link target; return True when it was not seen before."""
        if href in self.unique_links:
            return False
        self.unique_links.add(href)
        self.link_order.append(href)
        return True
