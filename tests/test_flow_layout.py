"""Tests for the flow (word-processor) renderer."""

from __future__ import annotations

import pytest

from lexdoc.config.models import FlowLayout
from lexdoc.domain.models.document import DocumentModel, Section
from lexdoc.domain.models.enums import Alignment, NormalizationPolicy
from lexdoc.layout.flow import FlowRenderer


@pytest.fixture
def layout() -> FlowLayout:
    return FlowLayout()


def _after(paragraphs, heading):
    index = next(i for i, p in enumerate(paragraphs) if p.text == heading)
    return paragraphs[index + 1 :]


class TestHeader:
    def test_title_paragraph(self, layout, sample_document):
        title = FlowRenderer(layout).render(sample_document)[0]
        run = title.runs[0]
        assert title.alignment == Alignment.CENTER
        assert run.text == "NON-COMPETE AGREEMENT"
        assert run.bold and run.underline
        assert run.size == layout.title_size_pt
        assert title.spacing_after == layout.spacing.title_after_pt

    def test_date_and_parties_heading(self, layout, sample_document):
        paragraphs = FlowRenderer(layout).render(sample_document)
        assert paragraphs[1].text == "Date: 2024-01-01"
        assert paragraphs[1].runs[0].bold
        assert paragraphs[2].text == "PARTIES:"

    def test_party_lines_verbatim(self, layout):
        doc = DocumentModel(
            title="T", effective_date="2024-01-01", party_lines=("Name: **Acme**", "")
        )
        paragraphs = FlowRenderer(layout).render(doc)
        assert [p.text for p in paragraphs[3:]] == ["Name: **Acme**", ""]


class TestSections:
    def test_heading_spacing(self, layout, sample_document):
        paragraphs = FlowRenderer(layout).render(sample_document)
        heading = next(p for p in paragraphs if p.text == "CONSIDERATION")
        assert heading.runs[0].bold
        assert heading.spacing_before == layout.spacing.heading_before_pt
        assert heading.spacing_after == layout.spacing.heading_after_pt

    def test_signature_paragraphs(self, layout, sample_document):
        paragraphs = FlowRenderer(layout).render(sample_document)
        after = _after(paragraphs, "SIGNATURES")
        assert [p.text for p in after] == ["A", "", "B"]
        assert after[1].spacing_after == layout.spacing.preformatted_blank_after_pt
        assert after[0].spacing_after == layout.spacing.preformatted_line_after_pt

    def test_prose_markup_only_by_default(self, layout):
        doc = DocumentModel(
            title="T",
            effective_date="2024-01-01",
            sections=(Section(title="TERMS", content="one **two**\nthree"),),
        )
        paragraphs = FlowRenderer(layout).render(doc)
        assert _after(paragraphs, "TERMS")[0].text == "one two\nthree"

    def test_prose_full_policy(self, layout):
        doc = DocumentModel(
            title="T",
            effective_date="2024-01-01",
            sections=(Section(title="TERMS", content="one **two**\nthree"),),
        )
        paragraphs = FlowRenderer(layout, NormalizationPolicy.FULL).render(doc)
        assert _after(paragraphs, "TERMS")[0].text == "one two three"

    def test_policy_from_config(self):
        layout = FlowLayout(prose_normalization=NormalizationPolicy.FULL)
        doc = DocumentModel(
            title="T",
            effective_date="2024-01-01",
            sections=(Section(title="TERMS", content="a\nb"),),
        )
        assert _after(FlowRenderer(layout).render(doc), "TERMS")[0].text == "a b"

    def test_section_order_preserved(self, layout):
        titles = ["ALPHA", "BRAVO", "CHARLIE"]
        doc = DocumentModel(
            title="T",
            effective_date="2024-01-01",
            sections=tuple(Section(title=t, content="x") for t in titles),
        )
        headings = [p.text for p in FlowRenderer(layout).render(doc) if p.text in titles]
        assert headings == titles
