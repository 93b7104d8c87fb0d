"""Snudown HTML scanning."""

from __future__ import annotations

from pathlib import Path

from .actions import apply_actions
from .config import ConfigError, ParserConfig, validate_config
from .constants import ANCHOR_PREFIXES, STYLES, action_table
from .exceptions import ParseError
from .links import handle_link_or_image
from .logger import get_logger
from .models import ParseResult
from .scanning import extract_tag, find_entity, substitute_entity
from .state import ScanState
from .styles import handle_style

logger = get_logger(__name__)


def parse_html(html: str, config: ParserConfig | None = None) -> ParseResult:
    """Convert Snudown HTML into a `ParseResult` in one forward pass.

    ``&`` starts an entity, ``<a`` an anchor (possibly wrapping an inline
    image), any other ``<`` a tag that is looked up in the structural table and
    then the style table. Unknown tags are ignored. Other characters are kept
    only while a text container (paragraph, heading, table cell, list item) is
    open.

    Args:
        html: Complete input text.
        config: Configuration controlling link defaults and attribute quoting.
            Defaults to a new `ParserConfig` when omitted.

    Returns:
        ParseResult: Components in document order plus the link registry.

    Raises:
        ConfigError: If the configuration fails validation.
        MalformedInputError: If an attribute scan or structural tag cannot be
            resolved.

    Examples:
        parse_html("<p>a <strong>b</strong> c</p>")
    """
    config = config or ParserConfig()
    validate_config(config)
    actions = action_table(config.escaped_quotes)

    ctx = ScanState(config=config)
    pos = 0
    length = len(html)

    while pos < length:
        char = html[pos]
        if char == "&":
            entity, pos = find_entity(html, pos)
            ctx.builder.append(substitute_entity(entity))
        elif char == "<":
            if html.startswith(ANCHOR_PREFIXES, pos):
                pos = handle_link_or_image(html, pos, ctx)
                continue

            tag, pos = extract_tag(html, pos)
            tag_actions = actions.get(tag)
            if tag_actions is not None:
                pos = apply_actions(html, pos, tag, tag_actions, ctx)
            elif tag in STYLES:
                pos = handle_style(html, pos, STYLES[tag], ctx)
            else:
                logger.debug("Ignoring unrecognized tag %r", tag)
        else:
            if ctx.allow_append:
                ctx.builder.append(char)
            pos += 1

    result = ctx.result
    logger.debug(
        "Parsed %d characters into %d components and %d links",
        length,
        len(result.components),
        len(result.link_order),
    )
    return result


class ParseFileError(Exception):
    """Raised when parsing a Snudown HTML file fails."""


def parse_file(filepath: Path, config: ParserConfig | None = None) -> ParseResult:
    """Read a UTF-8 file and parse its contents.

    Args:
        filepath: Path to the file holding Snudown HTML.
        config: Configuration; defaults to a new `ParserConfig` when omitted.

    Returns:
        ParseResult: Parsed document.

    Raises:
        ParseFileError: If the configuration is invalid, the file is too large,
            cannot be read or decoded, or its contents are malformed.

    Examples:
        result = parse_file(Path("comment.html"))
    """
    config = config or ParserConfig()
    try:
        validate_config(config)
    except ConfigError as error:
        raise ParseFileError(str(error)) from error

    try:
        size = filepath.stat().st_size
    except OSError as error:
        raise ParseFileError(f"Error accessing {filepath}: {error}") from error
    if size > config.max_file_size:
        raise ParseFileError(
            f"{filepath} exceeds the maximum allowed size of {config.max_file_size} bytes."
        )

    try:
        content = filepath.read_text(encoding="utf-8")
    except UnicodeDecodeError as error:
        raise ParseFileError(f"Invalid UTF-8 sequence in {filepath}: {error}") from error
    except OSError as error:
        raise ParseFileError(f"Error accessing {filepath}: {error}") from error

    try:
        return parse_html(content, config)
    except ParseError as error:
        raise ParseFileError(f"{filepath}: {error}") from error
