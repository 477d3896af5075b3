"""Thin CLI wrapper — Typer commands that delegate to Use Cases.

All domain logic is accessed through the Container (bootstrap.py).
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, Any, Optional

import typer

from lexdoc.domain.errors import LexdocError
from lexdoc.domain.models.enums import OutputFormat
from lexdoc.presentation.cli.formatters import (
    console,
    error_message,
    generated_files_panel,
    json_panel,
    success_panel,
    types_table,
)

app = typer.Typer(
    name="lexdoc",
    help="📄 Legal document generator — PDF and Word (.docx)",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

# Sub-app for config commands
config_app = typer.Typer(
    name="config",
    help="⚙️  Inspect lexdoc configuration",
    rich_markup_mode="rich",
    no_args_is_help=True,
)
app.add_typer(config_app, name="config")

ConfigOption = Annotated[
    Optional[str],
    typer.Option("--config", "-c", help="Path to a JSON configuration file"),
]
OutputDirOption = Annotated[
    Optional[str],
    typer.Option("--output-dir", "-o", help="Directory for generated files"),
]


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
) -> None:
    """Generate legal documents from structured input."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _read_json(path: Path, label: str) -> dict[str, Any]:
    if not path.exists():
        error_message(f"{label} file not found: {path}")
        raise typer.Exit(code=1)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        error_message(f"{label} file is not valid JSON: {exc}")
        raise typer.Exit(code=1)
    if not isinstance(data, dict):
        error_message(f"{label} file must contain a JSON object")
        raise typer.Exit(code=1)
    return data


def _container(config: Optional[str], output_dir: Optional[str] = None):
    from lexdoc.bootstrap import Container

    try:
        return Container(config_path=config, output_dir=output_dir)
    except LexdocError as exc:
        error_message(str(exc))
        raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# lexdoc generate
# ---------------------------------------------------------------------------


@app.command()
def generate(
    document_type: Annotated[
        str, typer.Argument(help="Document type, e.g. NON_COMPETE_AGREEMENT")
    ],
    input_file: Annotated[
        Path, typer.Option("--input", "-i", help="JSON file with the user input")
    ],
    content_file: Annotated[
        Optional[Path],
        typer.Option("--content", help="JSON file with pre-generated section text"),
    ] = None,
    formats: Annotated[
        Optional[list[OutputFormat]],
        typer.Option("--format", "-f", help="Output format (repeatable)"),
    ] = None,
    output_dir: OutputDirOption = None,
    config: ConfigOption = None,
) -> None:
    """Generate a document in one or more formats."""
    user_input = _read_json(input_file, "Input")
    generated = _read_json(content_file, "Content") if content_file else None
    key = document_type.strip().upper().replace("-", "_")

    container = _container(config, output_dir)
    try:
        paths = container.generate_document().execute(
            key,
            user_input,
            generated,
            formats or [OutputFormat.PDF, OutputFormat.DOCX],
        )
    except LexdocError as exc:
        error_message(str(exc))
        raise typer.Exit(code=1)
    finally:
        container.registry.shutdown()

    generated_files_panel(paths)


# ---------------------------------------------------------------------------
# lexdoc types
# ---------------------------------------------------------------------------


@app.command()
def types(config: ConfigOption = None) -> None:
    """List the document types that can be generated."""
    container = _container(config)
    registry = container.registry
    rows = []
    for doc_type in registry.list_supported():
        category = registry.category_of(doc_type)
        rows.append((doc_type.value, category.value if category else None))
    types_table(rows)


# ---------------------------------------------------------------------------
# lexdoc delete
# ---------------------------------------------------------------------------


@app.command()
def delete(
    filename: Annotated[str, typer.Argument(help="Name of a generated file")],
    output_dir: OutputDirOption = None,
    config: ConfigOption = None,
) -> None:
    """Delete a generated file (no-op when it does not exist)."""
    container = _container(config, output_dir)
    assembler = container.assembler
    try:
        existed = assembler.exists(filename)
        assembler.delete(filename)
    except ValueError as exc:
        error_message(str(exc))
        raise typer.Exit(code=1)

    if existed:
        success_panel(f"🗑️  Deleted: [bold]{filename}[/]", title="lexdoc delete")
    else:
        console.print(f"[yellow]Nothing to delete:[/] {filename}")


# ---------------------------------------------------------------------------
# lexdoc config show / validate
# ---------------------------------------------------------------------------


@config_app.command("show")
def config_show(config: ConfigOption = None) -> None:
    """Print the active configuration as JSON."""
    from lexdoc.config import load_settings
    from lexdoc.domain.errors import ConfigurationError

    try:
        cfg = load_settings(config)
    except ConfigurationError as exc:
        error_message(str(exc))
        raise typer.Exit(code=1)
    json_panel(cfg.model_dump_json(indent=2))


@config_app.command("validate")
def config_validate(
    config_file: Annotated[str, typer.Argument(help="JSON configuration file to validate")],
) -> None:
    """Validate a lexdoc JSON configuration file."""
    from lexdoc.config import load_settings
    from lexdoc.domain.errors import ConfigurationError

    path = Path(config_file)
    if not path.exists():
        error_message(f"File not found: {path}")
        raise typer.Exit(code=1)

    try:
        cfg = load_settings(path)
    except ConfigurationError as e:
        console.print(f"[bold red]❌ Validation error:[/]\n\n{e}")
        raise typer.Exit(code=1)

    success_panel(
        f"✅ Valid configuration\n\n"
        f"  Page: [cyan]{cfg.page.width_pt} × {cfg.page.height_pt} pt[/]\n"
        f"  Flow font: [cyan]{cfg.flow.font_name} {cfg.flow.font_size_pt}pt[/]\n"
        f"  Registry TTL: [cyan]{cfg.registry.ttl_seconds}s[/]",
        title="✅ Validation",
    )


if __name__ == "__main__":
    app()
