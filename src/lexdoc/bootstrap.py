"""Composition Root — Dependency Injection Container.

This module is the ONLY place where concrete infrastructure classes are
imported and wired together. All other layers refer to ports.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from lexdoc.config import (
    OUTPUT_DIR_ENV,
    LexdocConfig,
    default_output_dir,
    load_settings,
    resolve_output_dir,
)
from lexdoc.domain.models.enums import OutputFormat
from lexdoc.domain.ports.clock import ClockPort
from lexdoc.domain.ports.document_renderer import DocumentRendererPort
from lexdoc.domain.ports.output_store import OutputStorePort

from lexdoc.infrastructure.clock import SystemClock
from lexdoc.infrastructure.renderers.docx_renderer import DocxRenderer
from lexdoc.infrastructure.renderers.pdf_renderer import PdfRenderer
from lexdoc.infrastructure.storage.local_store import LocalOutputStore

from lexdoc.application.generator_registry import CachePolicy, GeneratorRegistry
from lexdoc.application.use_cases.assemble_document import DocumentAssembler
from lexdoc.application.use_cases.generate_document import GenerateDocumentUseCase
from lexdoc.generators import DEFAULT_FACTORIES

__all__ = ["OUTPUT_DIR_ENV", "Container", "default_output_dir", "resolve_output_dir"]


class Container:
    """Simple dependency injection container.

    Usage::

        container = Container()
        paths = container.generate_document().execute(
            DocumentType.NON_COMPETE_AGREEMENT, user_input
        )
    """

    def __init__(
        self,
        config_path: Optional[Path | str] = None,
        output_dir: Optional[Path | str] = None,
        clock: Optional[ClockPort] = None,
    ) -> None:
        self._config = load_settings(config_path)

        # -- Infrastructure singletons ---------------------------------------
        self._store = LocalOutputStore(resolve_output_dir(self._config, output_dir))
        self._pdf_renderer = PdfRenderer(self._config.page)
        self._docx_renderer = DocxRenderer(self._config.flow, self._config.page)
        self._assembler = DocumentAssembler(
            self._store, [self._pdf_renderer, self._docx_renderer]
        )

        policy = CachePolicy(
            ttl_seconds=self._config.registry.ttl_seconds,
            sweep_interval_seconds=self._config.registry.sweep_interval_seconds,
        )
        self._registry = GeneratorRegistry(DEFAULT_FACTORIES, policy, clock or SystemClock())

    # -- Port accessors ------------------------------------------------------

    @property
    def config(self) -> LexdocConfig:
        return self._config

    @property
    def store(self) -> OutputStorePort:
        return self._store

    @property
    def output_dir(self) -> Path:
        return self._store.base_dir

    @property
    def registry(self) -> GeneratorRegistry:
        return self._registry

    @property
    def assembler(self) -> DocumentAssembler:
        return self._assembler

    def get_renderer(self, fmt: OutputFormat) -> DocumentRendererPort:
        """Return the renderer for the given output format."""
        if fmt == OutputFormat.PDF:
            return self._pdf_renderer
        return self._docx_renderer

    # -- Use Case factories --------------------------------------------------

    def generate_document(self) -> GenerateDocumentUseCase:
        """Create a use case for generating documents by type."""
        return GenerateDocumentUseCase(registry=self._registry, assembler=self._assembler)
