"""Document renderers — write PDF and Word output files."""

from lexdoc.infrastructure.renderers.docx_renderer import DocxRenderer
from lexdoc.infrastructure.renderers.pdf_renderer import PdfRenderer

__all__ = ["DocxRenderer", "PdfRenderer"]
