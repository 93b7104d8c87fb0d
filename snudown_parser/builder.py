"""Text accumulation and styled-text assembly."""

from __future__ import annotations

from .models import LinkRange, SpoilerRange, StyledText, StyleFlag, StyleKind, StyleRange


class TextBuilder:
    """In-progress text for the block being assembled, with pending ranges.

    Offsets are character counts into the accumulated text.
    """

    def __init__(self) -> None:
        self._parts: list[str] = []
        self.length = 0
        self.style_ranges: list[StyleRange] = []
        self.spoiler_ranges: list[tuple[int, int]] = []
        self.link_ranges: list[LinkRange] = []

    def __len__(self) -> int:
        return self.length

    def append(self, text: str) -> None:
        if text:
            self._parts.append(text)
            self.length += len(text)

    def add_style(self, flags: StyleFlag, start: int) -> None:
        self.style_ranges.append(StyleRange(flags, start, self.length))

    def add_spoiler(self, start: int) -> None:
        self.spoiler_ranges.append((start, self.length))

    def add_link(self, href: str, start: int) -> None:
        self.link_ranges.append(LinkRange(href, start, self.length))

    @property
    def text(self) -> str:
        return "".join(self._parts)

    def build(self, base: StyleKind = StyleKind.DEFAULT) -> StyledText:
        """Finalise the accumulated text into a `StyledText`.

        Spoiler ids are assigned here, counting from 0 in closing order, so
        they are scoped to this builder's contents.
        """
        spoilers = tuple(
            SpoilerRange(spoiler_id, start, end)
            for spoiler_id, (start, end) in enumerate(self.spoiler_ranges)
        )
        return StyledText(
            text=self.text,
            base=base,
            styles=tuple(self.style_ranges),
            spoilers=spoilers,
            links=tuple(self.link_ranges),
        )

    def clear(self) -> None:
        self._parts.clear()
        self.length = 0
        self.style_ranges.clear()
        self.spoiler_ranges.clear()
        self.link_ranges.clear()

    def pop(self, base: StyleKind = StyleKind.DEFAULT) -> StyledText:
        """Build the current contents and reset the builder."""
        styled = self.build(base)
        self.clear()
        return styled
