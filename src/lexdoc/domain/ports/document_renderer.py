"""Port: Document renderer — writes one output encoding of a document.

This is a domain-level contract. Infrastructure adapters (docx, pdf)
implement this interface.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from lexdoc.domain.models.document import DocumentModel
from lexdoc.domain.models.enums import OutputFormat


class DocumentRendererPort(ABC):
    """Contract for rendering a document model to a file."""

    @property
    @abstractmethod
    def output_format(self) -> OutputFormat:
        """The encoding this renderer produces."""

    @abstractmethod
    def render(self, document: DocumentModel, output_path: Path) -> Path:
        """Generate the formatted document and return the output path."""
        ...
