"""Inline style tracking.

Style tags toggle membership in an active set instead of forming a stack. The
first close of any active flag emits a single range carrying every flag that
was active, then the closing tags of the other open styles are skipped. Nested
``<strong><em>x</em></strong>`` therefore produces one bold-italic range.
"""

from __future__ import annotations

from .models import StyleFlag
from .scanning import skip_tags
from .state import ScanState


def handle_style(html: str, pos: int, flag: StyleFlag, ctx: ScanState) -> int:
    """Apply a style tag whose text ended just before `pos`.

    Args:
        html: Full input.
        pos: Cursor position after the style tag.
        flag: Style flag the tag stands for.
        ctx: Scan state to update.

    Returns:
        int: Cursor position after any skipped closing tags.
    """
    if flag in ctx.active_styles:
        ctx.builder.add_style(ctx.active_styles, ctx.style_start)
        pos = skip_tags(html, pos, ctx.active_style_count - 1)
        ctx.active_style_count = 0
        ctx.active_styles = StyleFlag(0)
        return pos

    if not ctx.active_styles:
        ctx.style_start = ctx.builder.length
    ctx.active_styles |= flag
    ctx.active_style_count += 1
    return pos
