import logging
import sys
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box

from book import AlreadyCheckedOut
from checkout import is_premium_answer, policy_for
from config import settings
from library import BookNotFound, Catalog, seed_catalog
from patron import Patron
from ui_helpers import set_output_mode, get_output_mode, print_book_list, print_stats_result

APP_NAME = settings.app_name

MENU_ITEMS = [
    ("1", "View available books"),
    ("2", "Checkout a book"),
    ("3", "Return a book"),
    ("4", "Exit"),
]

console = Console()
logger = logging.getLogger(__name__)


def configure_logging(level: str = settings.log_level) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


# --- Typer CLI application ---
app = typer.Typer(help=APP_NAME)

@app.callback(invoke_without_command=True)
def _global_options(
    ctx: typer.Context,
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    ),
):
    """Browse, check out and return books. Starts the interactive menu when no command is given."""
    configure_logging()
    if output:
        set_output_mode(output)
    if ctx.invoked_subcommand is None:
        run_menu()

@app.command("menu")
def cli_menu(
    name: str = typer.Option(settings.default_patron_name, "--name", "-n", help="Patron name for this session"),
    premium: Optional[bool] = typer.Option(None, "--premium/--regular", help="Skip the premium prompt"),
):
    """Start the interactive menu."""
    run_menu(name=name, premium=premium)

@app.command("list")
def cli_list():
    """List every book in the catalog."""
    catalog = seed_catalog()
    print_book_list(catalog.all_books(), "No books in catalog.", title="Catalog")

@app.command("browse")
def cli_browse(genre: str = typer.Argument(..., help="Genre to browse (exact match)")):
    """List the available books in a genre."""
    catalog = seed_catalog()
    if get_output_mode() != "json":
        print(f"Available books in genre '{genre}':")
    print_book_list(list(catalog.genre_view(genre)), "No available books in this genre.", title=genre)

@app.command("find")
def cli_find(title: str = typer.Argument(..., help="Book title (case-insensitive)")):
    """Show a book's status in the starter catalog."""
    catalog = seed_catalog()
    try:
        book = catalog.find_by_title(title)
    except BookNotFound as e:
        print(e)
        return
    print(book.describe())

@app.command("genres")
def cli_genres():
    """List the genres in the catalog."""
    catalog = seed_catalog()
    genres = catalog.genres()
    print(f"Genres ({len(genres)}):")
    for genre in genres:
        print(f"- {genre}")

@app.command("stats")
def cli_stats():
    """Show catalog statistics."""
    print_stats_result(seed_catalog().get_statistics())


# --- Interactive menu ---
def _ask(prompt: str) -> str:
    return input(prompt).strip()

def render_menu() -> None:
    if get_output_mode() == "rich":
        table = Table.grid(padding=(0, 2))
        table.add_column(justify="right", style="bold cyan", width=4)
        table.add_column(justify="left", style="white")
        for key, label in MENU_ITEMS:
            table.add_row(f"[reverse]{key}[/]", label)
        console.print(Panel(table, title=APP_NAME, border_style="cyan", box=box.HEAVY, padding=(1, 2)))
        return
    print("\nMenu:")
    for key, label in MENU_ITEMS:
        print(f"{key}. {label}")

def browse(catalog: Catalog) -> None:
    """Show the available books of one genre."""
    genre = _ask("Enter genre to browse: ")
    print(f"Available books in genre '{genre}':")
    print_book_list(list(catalog.genre_view(genre)), "No available books in this genre.", title=genre)

def checkout(catalog: Catalog, patron: Patron) -> None:
    """Check out a book by title through the patron's policy."""
    title = _ask("Enter book title to checkout: ")
    try:
        book = catalog.find_by_title(title)
        patron.borrow(book)
    except (BookNotFound, AlreadyCheckedOut) as e:
        print(e)
        return
    print(f"Successfully checked out: {book.describe()}")

def return_book(catalog: Catalog, patron: Patron) -> None:
    """Return a book by title."""
    title = _ask("Enter book title to return: ")
    try:
        book = catalog.find_by_title(title)
    except BookNotFound as e:
        print(e)
        return
    patron.return_book(book)
    print(f"Returned: {book.describe()}")

def run_menu(catalog: Optional[Catalog] = None, name: Optional[str] = None, premium: Optional[bool] = None) -> None:
    """Interactive menu loop over a single session's catalog and patron."""
    catalog = catalog if catalog is not None else seed_catalog()
    try:
        if premium is None:
            premium = is_premium_answer(_ask("Are you a premium user? (yes/no): "))
        patron = Patron(name or settings.default_patron_name, policy_for(premium))
        logger.info("Session started for %s (%s)", patron.name, "premium" if patron.is_premium else "regular")

        while True:
            render_menu()
            choice = _ask("Choose an option: ")

            if choice == "1":
                browse(catalog)
            elif choice == "2":
                checkout(catalog, patron)
            elif choice == "3":
                return_book(catalog, patron)
            elif choice == "4":
                print("Thanks for visiting the library.")
                break
            else:
                print("Invalid option.")
    except EOFError:
        # Input closed: end the session quietly.
        print()
        logger.info("Input closed, ending session")


if __name__ == "__main__":
    app()
