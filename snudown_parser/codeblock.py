"""Verbatim scan mode for ``<pre><code>`` blocks."""

from __future__ import annotations

from .exceptions import MalformedInputError
from .models import Code
from .scanning import find_entity, skip_tags, substitute_entity
from .state import ScanState


def read_code_block(html: str, pos: int, ctx: ScanState) -> int:
    """Consume a code block whose ``<pre>`` ended just before `pos`.

    Skips the ``<code>`` tag, reads characters up to the next ``<``, then skips
    ``</code></pre>`` and appends a `Code` component. Inside the block ``\\n``
    becomes a newline, any other backslash escape is kept verbatim, and
    entities are substituted. Style and append state are left alone.

    Raises:
        MalformedInputError: If the input ends in the middle of an escape.
    """
    pos = skip_tags(html, pos, 1)
    length = len(html)
    chunks: list[str] = []

    while pos < length and html[pos] != "<":
        char = html[pos]
        if char == "\\":
            if pos + 1 >= length:
                raise MalformedInputError("code block ends inside an escape", pos)
            escaped = html[pos + 1]
            chunks.append("\n" if escaped == "n" else char + escaped)
            pos += 2
        elif char == "&":
            entity, pos = find_entity(html, pos)
            chunks.append(substitute_entity(entity))
        else:
            chunks.append(char)
            pos += 1

    pos = skip_tags(html, pos, 2)
    ctx.result.components.append(Code("".join(chunks)))
    return pos
