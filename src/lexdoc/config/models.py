"""Pydantic models for lexdoc configuration.

These models validate and type the JSON configuration file that drives
page geometry, typography and registry timing for both renderers.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from lexdoc.domain.models.enums import NormalizationPolicy


# ---------------------------------------------------------------------------
# Fixed layout (PDF)
# ---------------------------------------------------------------------------


class PageLayout(BaseModel):
    """Page geometry and typography for the paginated renderer (points)."""

    width_pt: float = Field(595.28, gt=0, description="Page width (A4)")
    height_pt: float = Field(841.89, gt=0, description="Page height (A4)")
    margin_top_pt: float = Field(50.0, ge=0)
    margin_bottom_pt: float = Field(50.0, ge=0)
    margin_left_pt: float = Field(50.0, ge=0)
    margin_right_pt: float = Field(50.0, ge=0)
    font_family: str = Field("Times", description="fpdf2 core font family")
    font_size_pt: float = Field(12.0, gt=0)
    title_size_pt: float = Field(16.0, gt=0)
    line_height_pt: float = Field(14.0, gt=0)
    title_gap_pt: float = Field(10.0, ge=0, description="Extra space under the headline")
    paragraph_gap_pt: float = Field(5.0, ge=0, description="Space after each text block")

    @property
    def text_width_pt(self) -> float:
        return self.width_pt - self.margin_left_pt - self.margin_right_pt


# ---------------------------------------------------------------------------
# Flow layout (DOCX)
# ---------------------------------------------------------------------------


class FlowSpacing(BaseModel):
    """Paragraph spacing in points."""

    title_after_pt: float = 20.0
    date_after_pt: float = 10.0
    parties_heading_after_pt: float = 10.0
    party_line_after_pt: float = 5.0
    heading_before_pt: float = 20.0
    heading_after_pt: float = 10.0
    prose_after_pt: float = 10.0
    preformatted_line_after_pt: float = 2.5
    preformatted_blank_after_pt: float = 5.0


class FlowLayout(BaseModel):
    """Typography for the reflowable renderer."""

    font_name: str = "Times New Roman"
    font_size_pt: float = Field(12.0, gt=0)
    title_size_pt: float = Field(16.0, gt=0)
    heading_size_pt: float = Field(12.0, gt=0)
    spacing: FlowSpacing = Field(default_factory=FlowSpacing)
    prose_normalization: NormalizationPolicy = Field(
        NormalizationPolicy.MARKUP_ONLY,
        description="How prose bodies are cleaned before becoming paragraphs",
    )


# ---------------------------------------------------------------------------
# Output & Registry
# ---------------------------------------------------------------------------


class OutputConfig(BaseModel):
    """Where generated files are written."""

    directory: Optional[str] = Field(
        None, description="Output directory; None = per-user data directory"
    )


class RegistryConfig(BaseModel):
    """Idle-eviction timing for cached generators."""

    ttl_seconds: float = Field(1800.0, gt=0)
    sweep_interval_seconds: float = Field(300.0, gt=0)


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------


class LexdocConfig(BaseModel):
    """Root configuration model."""

    page: PageLayout = Field(default_factory=PageLayout)
    flow: FlowLayout = Field(default_factory=FlowLayout)
    output: OutputConfig = Field(default_factory=OutputConfig)
    registry: RegistryConfig = Field(default_factory=RegistryConfig)
