"""Fixed-layout renderer — turns a DocumentModel into positioned pages.

Orchestrates the normalizer, the greedy wrapper and the paginator. The
result is pure data; :mod:`lexdoc.infrastructure.renderers.pdf_renderer`
serializes it to PDF with fpdf2.
"""

from __future__ import annotations

from lexdoc.config.models import PageLayout
from lexdoc.domain.models.document import DocumentModel, Section
from lexdoc.domain.models.enums import FontVariant, NormalizationPolicy
from lexdoc.domain.models.layout import Page
from lexdoc.domain.ports.text_measurer import TextMeasurerPort
from lexdoc.layout.normalizer import clean_preformatted_line, normalize, split_preformatted
from lexdoc.layout.paginator import Paginator
from lexdoc.layout.wrapper import wrap

PARTIES_HEADING = "PARTIES:"


class FixedLayoutRenderer:
    """Lay a document out on fixed-size pages.

    The renderer itself is stateless between calls: every :meth:`render`
    builds its own :class:`Paginator`.
    """

    def __init__(self, layout: PageLayout, measurer: TextMeasurerPort) -> None:
        self._layout = layout
        self._measurer = measurer

    def render(self, document: DocumentModel) -> tuple[Page, ...]:
        """Return the ordered pages for *document*."""
        layout = self._layout
        paginator = Paginator(
            page_height=layout.height_pt,
            top_margin=layout.margin_top_pt,
            bottom_margin=layout.margin_bottom_pt,
            line_height=layout.line_height_pt,
            left_margin=layout.margin_left_pt,
        )

        self._emit_title(paginator, document.title)

        self._emit_text(paginator, f"Date: {document.effective_date}")
        paginator.advance_gap(layout.line_height_pt)

        self._emit_text(paginator, PARTIES_HEADING, FontVariant.BOLD)
        for line in document.party_lines:
            self._emit_text(paginator, line)
        paginator.advance_gap(layout.line_height_pt)

        for section in document.sections:
            self._emit_section(paginator, section)

        return paginator.pages()

    # ------------------------------------------------------------------
    # Blocks
    # ------------------------------------------------------------------

    def _emit_title(self, paginator: Paginator, title: str) -> None:
        layout = self._layout
        text = normalize(title)
        width = self._measurer.measure(text, FontVariant.BOLD, layout.title_size_pt)
        x = (layout.width_pt - width) / 2
        paginator.place(text, FontVariant.BOLD, layout.title_size_pt, x)
        paginator.advance_gap(layout.title_size_pt + layout.title_gap_pt)

    def _emit_section(self, paginator: Paginator, section: Section) -> None:
        self._emit_text(paginator, section.title, FontVariant.BOLD)
        if section.is_preformatted:
            self._emit_preformatted(paginator, section.content)
        else:
            self._emit_text(paginator, section.content)
        paginator.advance_gap(self._layout.line_height_pt)

    def _emit_text(
        self,
        paginator: Paginator,
        raw: str,
        variant: FontVariant = FontVariant.REGULAR,
    ) -> None:
        """Normalize, wrap and emit a block; blank input still takes a line."""
        layout = self._layout
        size = layout.font_size_pt

        def measure(text: str) -> float:
            return self._measurer.measure(text, variant, size)

        lines = wrap(normalize(raw, NormalizationPolicy.FULL), layout.text_width_pt, measure)
        for line in lines or [""]:
            paginator.emit_line(line, variant, size)
        paginator.advance_gap(layout.paragraph_gap_pt)

    def _emit_preformatted(self, paginator: Paginator, content: str) -> None:
        """One run per source line, blank lines included, never wrapped."""
        layout = self._layout
        for line in split_preformatted(content):
            paginator.emit_line(
                clean_preformatted_line(line), FontVariant.REGULAR, layout.font_size_pt
            )
        paginator.advance_gap(layout.paragraph_gap_pt)
