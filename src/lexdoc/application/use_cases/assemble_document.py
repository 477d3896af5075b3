"""Use Case: Assemble Document.

Renders one document model into every requested encoding and stores the
files side by side under a shared, timestamped base name::

    assembler = DocumentAssembler(store, [PdfRenderer(), DocxRenderer()])
    paths = assembler.assemble(model, "Non_Compete_Acme_Doe",
                               [OutputFormat.PDF, OutputFormat.DOCX])
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Iterable, Optional

from lexdoc.domain.errors import DocumentGenerationError
from lexdoc.domain.models.document import DocumentModel
from lexdoc.domain.models.enums import OutputFormat
from lexdoc.domain.ports.document_renderer import DocumentRendererPort
from lexdoc.domain.ports.output_store import OutputStorePort

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9]")


def sanitize_identifier(identifier: str) -> str:
    """Replace every non-alphanumeric character with an underscore."""
    return _UNSAFE_CHARS.sub("_", identifier)


def filename_timestamp(moment: datetime) -> str:
    """ISO-8601 UTC timestamp with ``:`` and ``.`` made filename-safe."""
    iso = moment.astimezone(timezone.utc).isoformat(timespec="microseconds")
    iso = iso.replace("+00:00", "Z")
    return iso.replace(":", "-").replace(".", "-")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class DocumentAssembler:
    """Drive the renderers and persist their output.

    Receives the renderers at construction time, keyed by the format each
    one produces, so callers pick encodings per request.
    """

    def __init__(
        self,
        store: OutputStorePort,
        renderers: Iterable[DocumentRendererPort],
        now: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self._store = store
        self._renderers = {renderer.output_format: renderer for renderer in renderers}
        self._now = now or _utc_now

    @property
    def supported_formats(self) -> list[OutputFormat]:
        return list(self._renderers)

    def base_name(self, identifier: str) -> str:
        """Collision-resistant base name for one generation request."""
        return f"{sanitize_identifier(identifier)}_{filename_timestamp(self._now())}"

    def assemble(
        self,
        document: DocumentModel,
        identifier: str,
        formats: Iterable[OutputFormat],
    ) -> list[Path]:
        """Render *document* in each of *formats* and return the written paths.

        Args:
            document: The document model to render.
            identifier: Caller-chosen name stem (sanitized before use).
            formats: Requested encodings; duplicates are ignored.

        Returns:
            Paths of the written files, in request order.

        Raises:
            DocumentGenerationError: If any format fails. Remaining formats
                are not attempted and files already written are kept.
        """
        requested = list(dict.fromkeys(OutputFormat(fmt) for fmt in formats))
        base = self.base_name(identifier)
        written: list[Path] = []

        for fmt in requested:
            renderer = self._renderers.get(fmt)
            if renderer is None:
                raise DocumentGenerationError(f"No renderer configured for format: {fmt.value}")

            target = self._store.path_for(f"{base}{fmt.extension}")
            try:
                written.append(renderer.render(document, target))
            except Exception as exc:
                logger.error("Failed to generate %s for %s: %s", fmt.value, base, exc)
                raise DocumentGenerationError(f"Failed to generate documents: {exc}") from exc

        logger.info("Generated %s", ", ".join(path.name for path in written))
        return written

    # -- Store utilities -----------------------------------------------------

    def path_for(self, filename: str) -> Path:
        return self._store.path_for(filename)

    def exists(self, filename: str) -> bool:
        return self._store.exists(filename)

    def delete(self, filename: str) -> None:
        self._store.delete(filename)
