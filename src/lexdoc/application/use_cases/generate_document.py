"""Use Case: Generate Document.

Looks up the generator for a document type, builds the document model from
user input and pre-generated content, and hands it to the assembler.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional

from pydantic import ValidationError

from lexdoc.application.generator_registry import GeneratorRegistry
from lexdoc.application.use_cases.assemble_document import DocumentAssembler
from lexdoc.domain.errors import DocumentGenerationError
from lexdoc.domain.models.enums import DocumentType, OutputFormat

logger = logging.getLogger(__name__)


class GenerateDocumentUseCase:
    """Orchestrate generator lookup, model building and rendering."""

    def __init__(self, registry: GeneratorRegistry, assembler: DocumentAssembler) -> None:
        self._registry = registry
        self._assembler = assembler

    def execute(
        self,
        document_type: DocumentType | str,
        user_input: Mapping[str, Any],
        generated: Optional[Mapping[str, Any]] = None,
        formats: Iterable[OutputFormat] = (OutputFormat.PDF, OutputFormat.DOCX),
    ) -> list[Path]:
        """Produce the requested files for one document.

        Raises:
            UnsupportedDocumentTypeError: If no generator handles *document_type*.
            DocumentGenerationError: If the input is invalid or rendering fails.
        """
        with self._registry.lease(document_type) as generator:
            try:
                parsed = generator.parse_input(user_input)
            except ValidationError as exc:
                raise DocumentGenerationError(f"Invalid input: {exc}") from exc

            model = generator.build_model(parsed, generated)
            identifier = generator.base_filename(parsed)
            logger.debug("Built %s with %d section(s)", model.title, len(model.sections))
            return self._assembler.assemble(model, identifier, formats)
