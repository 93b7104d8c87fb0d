"""Anchor and inline image extraction."""

from __future__ import annotations

from urllib.parse import urlsplit

from .constants import IMAGE_PREFIXES
from .logger import get_logger
from .models import Image
from .scanning import extract_attributes, skip_tags
from .state import ScanState

logger = get_logger(__name__)


def handle_link_or_image(html: str, pos: int, ctx: ScanState) -> int:
    """Handle an anchor open tag starting at `pos`.

    Marks the start of the link span, registers the href in the result's link
    registry, and, when the anchor wraps an inline image, emits the image and
    skips the anchor's closing tag.

    Args:
        html: Full input.
        pos: Position of the anchor's ``<``.
        ctx: Scan state to update.

    Returns:
        int: Cursor position after the consumed tags.

    Raises:
        MalformedInputError: If an attribute scan fails.
    """
    quote_width = ctx.config.quote_width
    attributes, pos = extract_attributes(html, pos, quote_width)
    ctx.marked_index = ctx.builder.length
    ctx.last_link = attributes.get("href", ctx.config.default_link)
    ctx.result.add_link(ctx.last_link)

    if html.startswith(IMAGE_PREFIXES, pos):
        image_attributes, pos = extract_attributes(html, pos, quote_width)
        image = build_image(image_attributes)
        if image is not None:
            ctx.result.components.append(image)
        pos = skip_tags(html, pos, 1)

    return pos


def build_image(attributes: dict[str, str]) -> Image | None:
    """Build an `Image` from ``src``/``width``/``height`` attributes.

    Returns None when an attribute is missing, ``src`` does not parse as a URL,
    or a dimension is not numeric.
    """
    src = attributes.get("src")
    width = attributes.get("width")
    height = attributes.get("height")
    if not src or width is None or height is None:
        logger.debug("Omitting inline image with attributes %r", attributes)
        return None

    try:
        urlsplit(src)
    except ValueError:
        logger.debug("Omitting inline image with unparseable src %r", src)
        return None

    try:
        return Image(src, float(width), float(height))
    except ValueError:
        logger.debug("Omitting inline image with non-numeric size %r x %r", width, height)
        return None
