"""DOCX renderer — implements DocumentRendererPort using python-docx.

Paragraph structure and styling come from
:class:`~lexdoc.layout.flow.FlowRenderer`; this module maps each
``FlowParagraph`` onto a Word paragraph and lets Word do the wrapping.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Optional

from docx import Document
from docx.enum.section import WD_ORIENT
from docx.enum.text import WD_ALIGN_PARAGRAPH, WD_UNDERLINE
from docx.shared import Pt, RGBColor

from lexdoc.config import get_config
from lexdoc.config.models import FlowLayout, PageLayout
from lexdoc.domain.models.document import DocumentModel
from lexdoc.domain.models.enums import Alignment, NormalizationPolicy, OutputFormat
from lexdoc.domain.models.layout import FlowParagraph
from lexdoc.domain.ports.document_renderer import DocumentRendererPort
from lexdoc.layout.flow import FlowRenderer

logger = logging.getLogger(__name__)

# Control characters that are not legal in WordprocessingML text
_XML_ILLEGAL = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")

_ALIGNMENT = {
    Alignment.LEFT: WD_ALIGN_PARAGRAPH.LEFT,
    Alignment.CENTER: WD_ALIGN_PARAGRAPH.CENTER,
}


class DocxRenderer(DocumentRendererPort):
    """Render legal documents as .docx files."""

    def __init__(
        self,
        flow: Optional[FlowLayout] = None,
        page: Optional[PageLayout] = None,
        prose_policy: Optional[NormalizationPolicy] = None,
    ) -> None:
        config = get_config() if flow is None or page is None else None
        self._flow = flow or config.flow
        self._page = page or config.page
        self._prose_policy = prose_policy

    @property
    def output_format(self) -> OutputFormat:
        return OutputFormat.DOCX

    def layout(self, document: DocumentModel) -> tuple[FlowParagraph, ...]:
        """Compute the paragraphs without writing anything."""
        return FlowRenderer(self._flow, self._prose_policy).render(document)

    def render(self, document: DocumentModel, output_path: Path) -> Path:
        """Build the Word document for *document* and save it to *output_path*."""
        output_path = Path(output_path)
        if not output_path.suffix:
            output_path = output_path.with_suffix(OutputFormat.DOCX.extension)

        paragraphs = self.layout(document)
        docx = Document()
        self._setup_page_layout(docx)
        self._setup_default_style(docx)
        docx.core_properties.title = self._clean(document.title)

        for paragraph in paragraphs:
            self._add_paragraph(docx, paragraph)

        docx.save(str(output_path))
        logger.info("Wrote %d-paragraph DOCX to %s", len(paragraphs), output_path)
        return output_path

    # ------------------------------------------------------------------
    # Page Layout & Default Style
    # ------------------------------------------------------------------

    def _setup_page_layout(self, docx) -> None:
        """Match the PDF page size and margins."""
        page = self._page
        section = docx.sections[0]
        section.orientation = WD_ORIENT.PORTRAIT
        section.page_width = Pt(page.width_pt)
        section.page_height = Pt(page.height_pt)
        section.top_margin = Pt(page.margin_top_pt)
        section.bottom_margin = Pt(page.margin_bottom_pt)
        section.left_margin = Pt(page.margin_left_pt)
        section.right_margin = Pt(page.margin_right_pt)

    def _setup_default_style(self, docx) -> None:
        style = docx.styles["Normal"]
        font = style.font
        font.name = self._flow.font_name
        font.size = Pt(self._flow.font_size_pt)
        font.color.rgb = RGBColor(0, 0, 0)

        pf = style.paragraph_format
        pf.space_before = Pt(0)
        pf.space_after = Pt(0)

    # ------------------------------------------------------------------
    # Paragraphs
    # ------------------------------------------------------------------

    def _add_paragraph(self, docx, paragraph: FlowParagraph) -> None:
        p = docx.add_paragraph()
        p.alignment = _ALIGNMENT[paragraph.alignment]
        p.paragraph_format.space_before = Pt(paragraph.spacing_before)
        p.paragraph_format.space_after = Pt(paragraph.spacing_after)

        for text_run in paragraph.runs:
            # python-docx turns "\n" into line breaks inside the run
            run = p.add_run(self._clean(text_run.text))
            run.bold = text_run.bold
            if text_run.underline:
                run.underline = WD_UNDERLINE.SINGLE
            if text_run.size is not None:
                run.font.size = Pt(text_run.size)

    @staticmethod
    def _clean(text: str) -> str:
        return _XML_ILLEGAL.sub("", text)
