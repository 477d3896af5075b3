"""Port: Text measurer — glyph metrics for hand-rolled line wrapping."""

from abc import ABC, abstractmethod

from lexdoc.domain.models.enums import FontVariant


class TextMeasurerPort(ABC):
    """Contract for measuring the rendered width of a string.

    Implementations may raise for text they cannot measure (e.g. glyphs
    missing from the font); the line wrapper skips such words.
    """

    @abstractmethod
    def measure(self, text: str, variant: FontVariant, size: float) -> float:
        """Return the width of *text* in points."""
        ...
