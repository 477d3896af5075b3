"""Vertical-cursor paginator.

Tracks the remaining space on the current page and opens a new page when
the next line would sit on or below the bottom margin. Coordinates are
PDF points with the origin at the bottom-left corner, so the cursor moves
downward by decreasing ``cursor_y``.
"""

from __future__ import annotations

from typing import Optional

from lexdoc.domain.models.enums import FontVariant
from lexdoc.domain.models.layout import Page, PositionedRun


class Paginator:
    """Position lines top to bottom across as many pages as needed.

    A fresh instance is created for every render; nothing here is shared
    between documents.
    """

    def __init__(
        self,
        page_height: float,
        top_margin: float,
        bottom_margin: float,
        line_height: float,
        left_margin: float,
    ) -> None:
        self.page_height = page_height
        self.top_margin = top_margin
        self.bottom_margin = bottom_margin
        self.line_height = line_height
        self.left_margin = left_margin

        self._pages: list[list[PositionedRun]] = [[]]
        self.cursor_y = self._top_of_page

    @property
    def _top_of_page(self) -> float:
        return self.page_height - self.top_margin

    @property
    def page_count(self) -> int:
        return len(self._pages)

    # -- Transitions ---------------------------------------------------------

    def _ensure_room(self) -> None:
        if self.cursor_y <= self.bottom_margin:
            self._pages.append([])
            self.cursor_y = self._top_of_page

    def place(self, text: str, variant: FontVariant, size: float, x: float) -> PositionedRun:
        """Put a run at the cursor without moving it."""
        self._ensure_room()
        run = PositionedRun(text=text, x=x, y=self.cursor_y, variant=variant, size=size)
        self._pages[-1].append(run)
        return run

    def emit_line(
        self,
        text: str,
        variant: FontVariant,
        size: float,
        x: Optional[float] = None,
    ) -> PositionedRun:
        """Put a run at the cursor and move down one line."""
        run = self.place(text, variant, size, self.left_margin if x is None else x)
        self.cursor_y -= self.line_height
        return run

    def advance_gap(self, extra: float) -> None:
        """Move the cursor down; the page break waits for the next line."""
        self.cursor_y -= extra

    # -- Result --------------------------------------------------------------

    def pages(self) -> tuple[Page, ...]:
        return tuple(
            Page(number=index, runs=tuple(runs))
            for index, runs in enumerate(self._pages, start=1)
        )
