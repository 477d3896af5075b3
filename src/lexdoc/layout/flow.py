"""Flow renderer — turns a DocumentModel into styled, reflowable paragraphs.

No wrapping or pagination happens here; the word processor reflows the
paragraphs itself. :mod:`lexdoc.infrastructure.renderers.docx_renderer`
serializes the result with python-docx.
"""

from __future__ import annotations

from typing import Optional

from lexdoc.config.models import FlowLayout
from lexdoc.domain.models.document import DocumentModel, Section
from lexdoc.domain.models.enums import Alignment, NormalizationPolicy
from lexdoc.domain.models.layout import FlowParagraph, TextRun
from lexdoc.layout.fixed import PARTIES_HEADING
from lexdoc.layout.normalizer import normalize, split_preformatted


class FlowRenderer:
    """Build the paragraph sequence for word-processor output."""

    def __init__(
        self,
        layout: FlowLayout,
        prose_policy: Optional[NormalizationPolicy] = None,
    ) -> None:
        self._layout = layout
        self._prose_policy = prose_policy or layout.prose_normalization

    def render(self, document: DocumentModel) -> tuple[FlowParagraph, ...]:
        """Return the ordered paragraphs for *document*."""
        layout = self._layout
        spacing = layout.spacing
        paragraphs: list[FlowParagraph] = [
            FlowParagraph(
                runs=(
                    TextRun(
                        document.title,
                        bold=True,
                        underline=True,
                        size=layout.title_size_pt,
                    ),
                ),
                alignment=Alignment.CENTER,
                spacing_after=spacing.title_after_pt,
            ),
            FlowParagraph(
                runs=(TextRun(f"Date: {document.effective_date}", bold=True),),
                spacing_after=spacing.date_after_pt,
            ),
            FlowParagraph(
                runs=(TextRun(PARTIES_HEADING, bold=True, size=layout.heading_size_pt),),
                spacing_after=spacing.parties_heading_after_pt,
            ),
        ]

        # Party lines go out verbatim; the word processor wraps them.
        paragraphs.extend(
            FlowParagraph(runs=(TextRun(line),), spacing_after=spacing.party_line_after_pt)
            for line in document.party_lines
        )

        for section in document.sections:
            paragraphs.extend(self._section(section))

        return tuple(paragraphs)

    def _section(self, section: Section) -> list[FlowParagraph]:
        layout = self._layout
        spacing = layout.spacing
        result = [
            FlowParagraph(
                runs=(TextRun(section.title, bold=True, size=layout.heading_size_pt),),
                spacing_before=spacing.heading_before_pt,
                spacing_after=spacing.heading_after_pt,
            )
        ]

        if section.is_preformatted:
            for line in split_preformatted(section.content):
                blank = not line.strip()
                result.append(
                    FlowParagraph(
                        runs=(TextRun(line),),
                        spacing_after=(
                            spacing.preformatted_blank_after_pt
                            if blank
                            else spacing.preformatted_line_after_pt
                        ),
                    )
                )
        else:
            result.append(
                FlowParagraph(
                    runs=(TextRun(normalize(section.content, self._prose_policy)),),
                    spacing_after=spacing.prose_after_pt,
                )
            )

        return result
