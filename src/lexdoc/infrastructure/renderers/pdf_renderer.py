"""PDF renderer — implements DocumentRendererPort using fpdf2.

Layout (measuring, wrapping, pagination) is done up front by
:class:`~lexdoc.layout.fixed.FixedLayoutRenderer`; this module only
paints the resulting runs onto fpdf2 pages.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from fpdf import FPDF

from lexdoc.config import get_config
from lexdoc.config.models import PageLayout
from lexdoc.domain.models.document import DocumentModel
from lexdoc.domain.models.enums import OutputFormat
from lexdoc.domain.models.layout import Page
from lexdoc.domain.ports.document_renderer import DocumentRendererPort
from lexdoc.infrastructure.metrics import FpdfTextMeasurer
from lexdoc.layout.fixed import FixedLayoutRenderer
from lexdoc.layout.normalizer import normalize

logger = logging.getLogger(__name__)


class PdfRenderer(DocumentRendererPort):
    """Render legal documents as paginated PDF files."""

    def __init__(self, layout: Optional[PageLayout] = None) -> None:
        self._layout = layout or get_config().page

    @property
    def output_format(self) -> OutputFormat:
        return OutputFormat.PDF

    def layout(self, document: DocumentModel) -> tuple[Page, ...]:
        """Compute the pages without writing anything."""
        measurer = FpdfTextMeasurer(self._layout.font_family)
        return FixedLayoutRenderer(self._layout, measurer).render(document)

    def render(self, document: DocumentModel, output_path: Path) -> Path:
        """Lay out *document* and save it to *output_path*."""
        output_path = Path(output_path)
        if not output_path.suffix:
            output_path = output_path.with_suffix(OutputFormat.PDF.extension)

        pages = self.layout(document)
        pdf = self._paint(pages, title=normalize(document.title))
        pdf.output(str(output_path))
        logger.info("Wrote %d-page PDF to %s", len(pages), output_path)
        return output_path

    # ------------------------------------------------------------------
    # Internal Helpers
    # ------------------------------------------------------------------

    def _paint(self, pages: tuple[Page, ...], title: str) -> FPDF:
        layout = self._layout
        pdf = FPDF(unit="pt", format=(layout.width_pt, layout.height_pt))
        pdf.set_auto_page_break(auto=False)
        pdf.set_title(title)
        pdf.set_creator("lexdoc")

        for page in pages:
            pdf.add_page()
            for run in page.runs:
                if not run.text:
                    continue
                pdf.set_font(layout.font_family, "B" if run.bold else "", run.size)
                # Runs are positioned from the bottom edge; fpdf2 measures from the top
                pdf.text(run.x, layout.height_pt - run.y, run.text)

        return pdf
