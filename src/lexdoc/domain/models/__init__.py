"""Domain models — public API.

Provides convenient imports for the most commonly used domain entities.
"""

from lexdoc.domain.models.document import DocumentModel, Section
from lexdoc.domain.models.enums import (
    DOCUMENT_CATEGORIES,
    Alignment,
    DocumentCategory,
    DocumentType,
    FontVariant,
    NormalizationPolicy,
    OutputFormat,
    SectionKind,
)
from lexdoc.domain.models.layout import (
    FlowParagraph,
    MeasuredLine,
    Page,
    PositionedRun,
    TextRun,
)

__all__ = [
    # Document
    "DocumentModel",
    "Section",
    # Enums
    "Alignment",
    "DocumentCategory",
    "DocumentType",
    "DOCUMENT_CATEGORIES",
    "FontVariant",
    "NormalizationPolicy",
    "OutputFormat",
    "SectionKind",
    # Layout
    "FlowParagraph",
    "MeasuredLine",
    "Page",
    "PositionedRun",
    "TextRun",
]
