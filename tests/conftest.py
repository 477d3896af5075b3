"""Shared fixtures for the lexdoc test suite."""

from __future__ import annotations

import pytest

from lexdoc.config import clear_cache
from lexdoc.domain.models.document import DocumentModel, Section
from lexdoc.domain.models.enums import FontVariant, SectionKind
from lexdoc.domain.ports.clock import ClockPort
from lexdoc.domain.ports.text_measurer import TextMeasurerPort


class MonospaceMeasurer(TextMeasurerPort):
    """Every glyph is half the font size wide, bold included."""

    def __init__(self, ratio: float = 0.5) -> None:
        self.ratio = ratio
        self.calls = 0

    def measure(self, text: str, variant: FontVariant, size: float) -> float:
        self.calls += 1
        return len(text) * size * self.ratio


class FakeClock(ClockPort):
    """Manually advanced clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.current = start

    def now(self) -> float:
        return self.current

    def advance(self, seconds: float) -> None:
        self.current += seconds


@pytest.fixture(autouse=True)
def _fresh_config_cache():
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def measurer() -> MonospaceMeasurer:
    return MonospaceMeasurer()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def sample_document() -> DocumentModel:
    """Small agreement with one prose and one signature section."""
    return DocumentModel(
        title="NON-COMPETE AGREEMENT",
        effective_date="2024-01-01",
        party_lines=("Employer Information:", "Name: Acme Corp", "", "Employee: Jane Doe"),
        sections=(
            Section(title="CONSIDERATION", content="one **two** three"),
            Section(title="SIGNATURES", content="A\n\nB", kind=SectionKind.PREFORMATTED),
        ),
    )
