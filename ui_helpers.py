import os
import json
from typing import List, Any, Dict
from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from book import Book

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"
OUTPUT_MODES = {"plain", "json", "rich"}

_console = Console()

def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode in OUTPUT_MODES:
        os.environ[OUTPUT_MODE_ENV] = mode

def get_output_mode() -> str:
    mode = os.environ.get(OUTPUT_MODE_ENV, "plain").lower()
    return mode if mode in OUTPUT_MODES else "plain"

def print_book_list(books: List[Book], empty_message: str, title: str = "Books") -> None:
    """Print books in the current output mode.
    - plain: ' - <description>' lines
    - json: JSON array of book dicts
    - rich: Rich table
    The empty message is printed as-is in every mode.
    """
    mode = get_output_mode()

    if not books:
        print(empty_message)
        return

    if mode == "json":
        print(json.dumps([b.to_dict() for b in books], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title=f"📚 {title}", show_lines=True, header_style="bold cyan")
        table.add_column("Title", style="white")
        table.add_column("Author", style="white")
        table.add_column("Genre", style="magenta")
        table.add_column("Status", no_wrap=True)
        for b in books:
            status = "[green]Available[/]" if b.available else "[red]Checked Out[/]"
            table.add_row(b.title, b.author, b.genre, status)
        _console.print(table)
    else:
        for b in books:
            print(f" - {b.describe()}")

def print_stats_result(stats: Dict[str, Any]) -> None:
    """Print catalog statistics in the current output mode."""
    mode = get_output_mode()

    if not stats:
        print("No statistics available.")
        return

    total = stats.get("total_books", 0)
    available = stats.get("available_books", 0)
    checked_out = stats.get("checked_out_books", 0)
    genres = stats.get("genres", {})

    if mode == "json":
        print(json.dumps(stats, ensure_ascii=False))
    elif mode == "rich":
        lines = [
            f"[bold]Total Books:[/] {total}",
            f"[bold]Available:[/] {available}",
            f"[bold]Checked Out:[/] {checked_out}",
        ]
        lines.extend(f"[dim]{genre}:[/] {count}" for genre, count in genres.items())
        _console.print(Panel.fit("\n".join(lines), title="📊 Stats", border_style="blue"))
    else:
        print(f"Total Books: {total}")
        print(f"Available: {available}")
        print(f"Checked Out: {checked_out}")
        for genre, count in genres.items():
            print(f"{genre}: {count}")
