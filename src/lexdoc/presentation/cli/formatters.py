"""Rich formatting utilities for the CLI.

Knows how to print panels and tables; knows nothing about domain logic.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

console = Console()


# ---------------------------------------------------------------------------
# Success / error panels
# ---------------------------------------------------------------------------


def success_panel(message: str, title: str = "lexdoc") -> None:
    """Print a green success panel."""
    console.print(Panel(message, title=title, border_style="green"))


def error_message(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]❌ {message}[/]")


# ---------------------------------------------------------------------------
# JSON / config rendering
# ---------------------------------------------------------------------------


def json_panel(raw_json: str, title: str = "⚙️  Active configuration") -> None:
    """Render JSON inside a syntax-highlighted panel."""
    console.print(
        Panel(
            Syntax(raw_json, "json", theme="monokai", line_numbers=True),
            title=title,
            border_style="blue",
        )
    )


# ---------------------------------------------------------------------------
# Document types / generated files
# ---------------------------------------------------------------------------


def types_table(rows: Iterable[tuple[str, Optional[str]]]) -> None:
    """Print supported document types with their category."""
    table = Table(title="📄 Supported document types", show_header=True, border_style="blue")
    table.add_column("Type", style="cyan")
    table.add_column("Category", style="green")

    for doc_type, category in rows:
        table.add_row(doc_type, category or "-")

    console.print(table)


def generated_files_panel(paths: list[Path]) -> None:
    """List the written files inside a success panel."""
    lines = "\n".join(f"  📤 [bold green]{p.name}[/]" for p in paths)
    footer = f"\n\n[dim]{paths[0].parent}[/]" if paths else ""
    success_panel(f"✅ Documents generated:\n{lines}{footer}", title="📄 lexdoc generate")
