"""
snudown-parser: structured documents from Snudown HTML.

Converts the fixed HTML vocabulary emitted by the Snudown markdown converter
into typed content blocks (paragraphs, headings, code blocks, images, tables,
nested lists and blockquotes) plus an ordered registry of the links seen.

Library Usage:
    from snudown_parser import parse_html

    result = parse_html("<p>a <strong>b</strong> c</p>")
    paragraph = result.components[0].content
    paragraph.text  # "a b c"

CLI Usage:
    snudown-parse comment.html --format json
"""

from .config import ConfigError, ParserConfig
from .exceptions import MalformedInputError, ParseError
from .models import (
    Blockquote,
    Code,
    Component,
    Image,
    LinkRange,
    ListKind,
    ListNode,
    MarkdownList,
    ParseResult,
    SpoilerRange,
    StyledText,
    StyleFlag,
    StyleKind,
    StyleRange,
    Table,
    Text,
)
from .parser import ParseFileError, parse_file, parse_html
from .presentation import PresentationResolver, StyleRun, resolve_runs, style_kinds

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "parse_html",
    "parse_file",
    # Data models
    "ParseResult",
    "Component",
    "Text",
    "Code",
    "Image",
    "Table",
    "MarkdownList",
    "ListNode",
    "ListKind",
    "Blockquote",
    "StyledText",
    "StyleRange",
    "SpoilerRange",
    "LinkRange",
    "StyleFlag",
    "StyleKind",
    # Presentation
    "PresentationResolver",
    "StyleRun",
    "resolve_runs",
    "style_kinds",
    # Configuration
    "ParserConfig",
    # Exceptions
    "ConfigError",
    "MalformedInputError",
    "ParseError",
    "ParseFileError",
    # Version
    "__version__",
]
