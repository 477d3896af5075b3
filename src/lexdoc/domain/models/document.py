"""Document structure models.

Contains Section and DocumentModel, the input handed to both renderers.

This module belongs to the Domain layer. It only depends on:
- Python stdlib (typing)
- Pydantic (pragmatic exception for validation)
- Domain enums
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from lexdoc.domain.models.enums import SectionKind


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------


class Section(BaseModel):
    """A titled block of document text."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Section heading, rendered bold")
    content: str = Field("", description="Section body; may contain newlines")
    kind: SectionKind = SectionKind.PROSE

    @property
    def is_preformatted(self) -> bool:
        return self.kind == SectionKind.PREFORMATTED


# ---------------------------------------------------------------------------
# Full Document (Aggregate Root)
# ---------------------------------------------------------------------------


class DocumentModel(BaseModel):
    """Complete legal document, immutable once built."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Headline (bold, centered)")
    effective_date: str = Field(..., description="Date line shown under the title")
    party_lines: tuple[str, ...] = Field(default_factory=tuple)
    sections: tuple[Section, ...] = Field(default_factory=tuple)
