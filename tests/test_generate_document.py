"""Tests for the generate use case and the composition root."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from docx import Document

from lexdoc.bootstrap import (
    OUTPUT_DIR_ENV,
    Container,
    default_output_dir,
    resolve_output_dir,
)
from lexdoc.config.models import LexdocConfig, OutputConfig
from lexdoc.domain.errors import (
    ConfigurationError,
    DocumentGenerationError,
    UnsupportedDocumentTypeError,
)
from lexdoc.domain.models.enums import DocumentType, OutputFormat
from lexdoc.infrastructure.renderers.docx_renderer import DocxRenderer
from lexdoc.infrastructure.renderers.pdf_renderer import PdfRenderer

USER_INPUT = {"employerName": "Acme Corp", "employeeName": "Jane Doe"}


@pytest.fixture
def container(tmp_path: Path, clock) -> Container:
    return Container(output_dir=tmp_path / "out", clock=clock)


# ---------------------------------------------------------------------------
# Output directory resolution
# ---------------------------------------------------------------------------


class TestOutputDirectory:
    def test_explicit_override_wins(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv(OUTPUT_DIR_ENV, str(tmp_path / "env"))
        assert resolve_output_dir(LexdocConfig(), tmp_path / "arg") == tmp_path / "arg"

    def test_environment_variable(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv(OUTPUT_DIR_ENV, str(tmp_path / "env"))
        config = LexdocConfig(output=OutputConfig(directory=str(tmp_path / "cfg")))
        assert resolve_output_dir(config) == tmp_path / "env"

    def test_config_file(self, tmp_path: Path, monkeypatch):
        monkeypatch.delenv(OUTPUT_DIR_ENV, raising=False)
        config = LexdocConfig(output=OutputConfig(directory=str(tmp_path / "cfg")))
        assert resolve_output_dir(config) == tmp_path / "cfg"

    def test_platform_default(self, monkeypatch):
        monkeypatch.delenv(OUTPUT_DIR_ENV, raising=False)
        assert resolve_output_dir(LexdocConfig()) == default_output_dir()
        assert default_output_dir().name == "generated-documents"


# ---------------------------------------------------------------------------
# Container
# ---------------------------------------------------------------------------


class TestContainer:
    def test_wiring(self, container, tmp_path: Path):
        assert container.output_dir == tmp_path / "out"
        assert container.output_dir.is_dir()
        assert isinstance(container.get_renderer(OutputFormat.PDF), PdfRenderer)
        assert isinstance(container.get_renderer(OutputFormat.DOCX), DocxRenderer)
        assert container.registry.policy.ttl_seconds == 1800

    def test_registry_policy_from_config(self, tmp_path: Path):
        path = tmp_path / "cfg.json"
        path.write_text(json.dumps({"registry": {"ttl_seconds": 60, "sweep_interval_seconds": 10}}))
        container = Container(config_path=path, output_dir=tmp_path / "out")
        assert container.registry.policy.ttl_seconds == 60

    def test_missing_config_file(self, tmp_path: Path):
        with pytest.raises(ConfigurationError):
            Container(config_path=tmp_path / "missing.json", output_dir=tmp_path)

    def test_invalid_config_file(self, tmp_path: Path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(ConfigurationError):
            Container(config_path=path, output_dir=tmp_path)


# ---------------------------------------------------------------------------
# Generate use case
# ---------------------------------------------------------------------------


class TestGenerateDocument:
    def test_generates_both_formats(self, container):
        paths = container.generate_document().execute(
            DocumentType.NON_COMPETE_AGREEMENT, USER_INPUT
        )
        assert [p.suffix for p in paths] == [".pdf", ".docx"]
        assert all(p.exists() for p in paths)
        assert paths[0].name.startswith("Non_Compete_Agreement_Acme_Corp_Jane_Doe_")

    def test_single_format_with_generated_text(self, container):
        paths = container.generate_document().execute(
            "NON_COMPETE_AGREEMENT",
            USER_INPUT,
            {"consideration": "A one-time payment of $1,000."},
            [OutputFormat.DOCX],
        )
        texts = [p.text for p in Document(str(paths[0])).paragraphs]
        assert "A one-time payment of $1,000." in texts

    def test_settlement(self, container):
        paths = container.generate_document().execute(
            DocumentType.SETTLEMENT_AGREEMENT,
            {"disputeParty1Name": "Alpha", "disputeParty2Name": "Beta"},
            formats=[OutputFormat.PDF],
        )
        assert paths[0].name.startswith("Settlement_Agreement_Alpha_Beta_")

    def test_unsupported_type(self, container):
        with pytest.raises(UnsupportedDocumentTypeError):
            container.generate_document().execute(DocumentType.LEASE_AGREEMENT, {})

    def test_invalid_input(self, container):
        with pytest.raises(DocumentGenerationError, match="Invalid input"):
            container.generate_document().execute(
                DocumentType.NON_COMPETE_AGREEMENT, {"employerName": "Acme"}
            )

    def test_generator_released_after_use(self, container, clock):
        container.generate_document().execute(
            DocumentType.NON_COMPETE_AGREEMENT, USER_INPUT, formats=[OutputFormat.DOCX]
        )
        clock.advance(1801)
        assert container.registry.sweep() == 1
