"""Glyph metrics backed by fpdf2's core-font width tables."""

from __future__ import annotations

from fpdf import FPDF

from lexdoc.domain.models.enums import FontVariant
from lexdoc.domain.ports.text_measurer import TextMeasurerPort


class FpdfTextMeasurer(TextMeasurerPort):
    """Measure strings with the same fonts the PDF is written in.

    Holds a private, page-less ``FPDF`` instance purely for metrics, so
    one measurer must not be shared across threads.
    """

    def __init__(self, font_family: str = "Times") -> None:
        self._pdf = FPDF(unit="pt")
        self._font_family = font_family

    def measure(self, text: str, variant: FontVariant, size: float) -> float:
        style = "B" if variant == FontVariant.BOLD else ""
        self._pdf.set_font(self._font_family, style, size)
        # Raises for glyphs outside the core font encoding
        return self._pdf.get_string_width(text)
