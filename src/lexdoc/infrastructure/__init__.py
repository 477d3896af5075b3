"""Infrastructure layer — external framework adapters."""

from lexdoc.infrastructure.clock import SystemClock
from lexdoc.infrastructure.metrics import FpdfTextMeasurer
from lexdoc.infrastructure.renderers.docx_renderer import DocxRenderer
from lexdoc.infrastructure.renderers.pdf_renderer import PdfRenderer
from lexdoc.infrastructure.storage.local_store import LocalOutputStore

__all__ = [
    "DocxRenderer",
    "FpdfTextMeasurer",
    "LocalOutputStore",
    "PdfRenderer",
    "SystemClock",
]
