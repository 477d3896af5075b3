"""Base contract for per-document-type generators.

A generator turns a typed user input plus optional pre-generated content
(e.g. text drafted upstream) into the title, party lines and sections of a
:class:`~lexdoc.domain.models.document.DocumentModel`. Sections whose
pre-generated text is missing or empty fall back to text synthesized from
the user input.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import Any, Callable, ClassVar, Mapping, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from lexdoc.domain.models.document import DocumentModel, Section
from lexdoc.domain.models.enums import DocumentType, SectionKind


class GeneratorInput(BaseModel):
    """Fields shared by every document type.

    Accepts both ``snake_case`` and the ``camelCase`` keys used by
    upstream JSON payloads.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    effective_date: Optional[str] = None
    governing_state: Optional[str] = None
    additional_terms: Optional[str] = None


class DocumentGenerator(ABC):
    """Produce the content of one document type."""

    document_type: ClassVar[DocumentType]
    input_model: ClassVar[type[GeneratorInput]] = GeneratorInput

    # -- Contract ------------------------------------------------------------

    @abstractmethod
    def document_title(self, user_input: GeneratorInput) -> str:
        """Headline of the document."""

    @abstractmethod
    def base_filename(self, user_input: GeneratorInput) -> str:
        """Name stem for output files (sanitized again by the assembler)."""

    @abstractmethod
    def party_lines(self, user_input: GeneratorInput) -> list[str]:
        """Lines of the PARTIES block; empty strings become blank lines."""

    @abstractmethod
    def sections(
        self, user_input: GeneratorInput, generated: Mapping[str, Any]
    ) -> list[Section]:
        """Ordered body sections."""

    # -- Shared behaviour ----------------------------------------------------

    def parse_input(self, raw: Mapping[str, Any] | GeneratorInput) -> GeneratorInput:
        """Validate a raw mapping against this generator's input model."""
        if isinstance(raw, self.input_model):
            return raw
        if isinstance(raw, BaseModel):
            raw = raw.model_dump()
        return self.input_model.model_validate(raw)

    def build_model(
        self,
        user_input: Mapping[str, Any] | GeneratorInput,
        generated: Optional[Mapping[str, Any]] = None,
    ) -> DocumentModel:
        """Assemble the full document model for *user_input*."""
        parsed = self.parse_input(user_input)
        return DocumentModel(
            title=self.document_title(parsed),
            effective_date=parsed.effective_date or date.today().isoformat(),
            party_lines=tuple(self.party_lines(parsed)),
            sections=tuple(self.sections(parsed, generated or {})),
        )

    @staticmethod
    def _pick(generated: Mapping[str, Any], key: str, fallback: Callable[[], str]) -> str:
        """Pre-generated text for *key*, or *fallback()* when absent/falsy."""
        value = generated.get(key)
        return value if value else fallback()

    @staticmethod
    def _signature_section(content: str, title: str = "SIGNATURES") -> Section:
        return Section(title=title, content=content, kind=SectionKind.PREFORMATTED)
