"""Interface to the caller-supplied presentation resolver.

Parsing only records which spans carry which style flags. Turning those into
fonts, colours or baseline offsets is the job of a resolver object supplied by
the caller; the helpers here translate recorded flags into `StyleKind` values
and ask the resolver for the matching attributes.
"""

from __future__ import annotations

from typing import NamedTuple, Protocol

from .models import StyledText, StyleFlag, StyleKind


class PresentationResolver(Protocol):
    """Maps a style kind to whatever attributes the host renders with."""

    def resolve(self, kind: StyleKind) -> object: ...


class StyleRun(NamedTuple):
    start: int
    end: int
    attributes: object


def style_kinds(flags: StyleFlag) -> list[StyleKind]:
    """Translate a recorded flag combination into style kinds.

    Bold and italic together resolve to a single `BOLD_ITALIC`; the remaining
    kinds follow in the order a renderer should layer them.

    Examples:
        style_kinds(StyleFlag.BOLD | StyleFlag.ITALIC)  # [StyleKind.BOLD_ITALIC]
    """
    kinds: list[StyleKind] = []
    if StyleFlag.BOLD in flags and StyleFlag.ITALIC in flags:
        kinds.append(StyleKind.BOLD_ITALIC)
    elif StyleFlag.BOLD in flags:
        kinds.append(StyleKind.BOLD)
    elif StyleFlag.ITALIC in flags:
        kinds.append(StyleKind.ITALIC)

    if StyleFlag.STRIKETHROUGH in flags:
        kinds.append(StyleKind.STRIKETHROUGH)
    if StyleFlag.INLINE_CODE in flags:
        kinds.append(StyleKind.INLINE_CODE)
    if StyleFlag.SUPERSCRIPT in flags:
        kinds.append(StyleKind.SUPERSCRIPT)
    return kinds


def resolve_runs(styled: StyledText, resolver: PresentationResolver) -> list[StyleRun]:
    """Resolve the presentation runs for a styled-text unit.

    The first run covers the whole text with the unit's base kind; each style
    range then contributes one run per kind, in recording order. Later runs are
    meant to be applied on top of earlier ones.

    Args:
        styled: Parsed text unit.
        resolver: Caller-supplied resolver.

    Returns:
        list[StyleRun]: Runs with resolved attributes.
    """
    runs = [StyleRun(0, len(styled.text), resolver.resolve(styled.base))]
    for style_range in styled.styles:
        for kind in style_kinds(style_range.flags):
            runs.append(StyleRun(style_range.start, style_range.end, resolver.resolve(kind)))
    return runs
