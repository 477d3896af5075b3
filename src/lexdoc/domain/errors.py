"""Domain errors — custom exceptions for lexdoc.

These exceptions are raised by domain services and caught by application
or presentation layers. They carry no infrastructure dependencies.
"""


class LexdocError(Exception):
    """Base exception for all lexdoc errors."""


class DocumentGenerationError(LexdocError):
    """Raised when rendering or writing an output artifact fails."""


class UnsupportedDocumentTypeError(LexdocError):
    """Raised when no generator is registered for a document type."""

    def __init__(self, key: str) -> None:
        super().__init__(f"No generator found for document type: {key}")
        self.key = key


class ConfigurationError(LexdocError):
    """Raised when configuration is invalid or missing."""
