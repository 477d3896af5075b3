"""Layout primitives produced by the renderers.

Fixed-layout output is a tuple of :class:`Page`, each holding absolutely
positioned runs (PDF points, origin bottom-left). Flow output is a tuple of
:class:`FlowParagraph` that the word processor reflows on its own.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from lexdoc.domain.models.enums import Alignment, FontVariant


@dataclass(frozen=True)
class MeasuredLine:
    """One wrapped line and its measured width."""

    text: str
    width: float


@dataclass(frozen=True)
class PositionedRun:
    """A single line of text placed on a page."""

    text: str
    x: float
    y: float
    variant: FontVariant
    size: float

    @property
    def bold(self) -> bool:
        return self.variant == FontVariant.BOLD


@dataclass(frozen=True)
class Page:
    """A finished page of fixed-layout output."""

    number: int
    runs: tuple[PositionedRun, ...] = ()


@dataclass(frozen=True)
class TextRun:
    """A span of uniformly styled text inside a flow paragraph."""

    text: str
    bold: bool = False
    underline: bool = False
    size: Optional[float] = None  # None = document default


@dataclass(frozen=True)
class FlowParagraph:
    """A reflowable paragraph (spacing in points)."""

    runs: tuple[TextRun, ...]
    alignment: Alignment = Alignment.LEFT
    spacing_before: float = 0.0
    spacing_after: float = 0.0

    @property
    def text(self) -> str:
        return "".join(run.text for run in self.runs)
