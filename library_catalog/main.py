import logging
from functools import wraps
from pathlib import Path
from typing import Optional

import typer
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from library_catalog.config import settings
from library_catalog.exceptions import InvalidEmailError, PersistenceError
from library_catalog.library import Library
from library_catalog.search import BookField
from library_catalog.ui_helpers import print_book_list, print_member_list, print_stats_result, set_output_mode
from library_catalog.validators import TextValidator

console = Console()

FIELD_CHOICES = {"1": BookField.TITLE, "2": BookField.AUTHOR, "3": BookField.CATEGORY}


def report_errors(func):
    """Print failures of a shell action instead of letting them end the session."""
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except PersistenceError as e:
            print(f"Error saving data: {e}")
        except Exception as e:
            print(f"Operation failed: {e}")
        return None
    return wrapper


# ------------------------- Actions ------------------------- #
@report_errors
def add_book(lib: Library, title: str, author: str, category: str) -> None:
    book = lib.add_book(title.strip(), author.strip(), category.strip())
    print(f"Book added successfully with ID: {book.book_id}")


@report_errors
def add_member(lib: Library, name: str, email: str) -> None:
    try:
        member = lib.add_member(name.strip(), email.strip())
    except InvalidEmailError as e:
        print(f"Error: {e}")
        return
    print(f"Member added successfully with ID: {member.member_id}")


@report_errors
def issue_book(lib: Library, book_id: int, member_id: int) -> None:
    print(lib.issue_book(book_id, member_id).message)


@report_errors
def return_book(lib: Library, book_id: int, member_id: int) -> None:
    print(lib.return_book(book_id, member_id).message)


@report_errors
def search_books(lib: Library, field: BookField, query: str) -> None:
    results = lib.search_books(field, query.strip())
    print_book_list(results, empty_message="No books match your search.", title=f"Search by {field.value}")


@report_errors
def sort_books(lib: Library, field: BookField) -> None:
    print_book_list(lib.sort_books(field), title=f"Sorted by {field.value}")


@report_errors
def save_and_exit(lib: Library) -> None:
    print("Saving and exiting...")
    lib.save_all()


# ------------------------- Typer CLI ------------------------- #
app = typer.Typer(help="Library catalog CLI", add_completion=False)


@app.callback(invoke_without_command=True)
def _global_options(
    ctx: typer.Context,
    books_file: Optional[Path] = typer.Option(None, "--books-file", help="Books data file (default: books.txt)"),
    members_file: Optional[Path] = typer.Option(None, "--members-file", help="Members data file (default: members.txt)"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Output format: plain | json | rich"),
):
    """Load the catalog; without a subcommand, start the interactive menu."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    set_output_mode(output or settings.output_mode)

    lib = Library(books_file, members_file)
    if lib.load_warning:
        print(lib.load_warning)
    ctx.obj = lib

    if ctx.invoked_subcommand is None:
        run_menu(lib)


@app.command("add-book")
def cli_add_book(ctx: typer.Context, title: str, author: str, category: str):
    """Add a book to the catalog."""
    add_book(ctx.obj, title, author, category)


@app.command("add-member")
def cli_add_member(ctx: typer.Context, name: str, email: str):
    """Register a new member."""
    add_member(ctx.obj, name, email)


@app.command("issue")
def cli_issue(ctx: typer.Context, book_id: int, member_id: int):
    """Issue a book to a member."""
    issue_book(ctx.obj, book_id, member_id)


@app.command("return")
def cli_return(ctx: typer.Context, book_id: int, member_id: int):
    """Return an issued book."""
    return_book(ctx.obj, book_id, member_id)


@app.command("search")
def cli_search(
    ctx: typer.Context,
    field: BookField = typer.Argument(..., help="Field to search: title | author | category"),
    query: str = typer.Argument("", help="Case-insensitive text to look for"),
):
    """Search books by title, author or category."""
    search_books(ctx.obj, field, query)


@app.command("sort")
def cli_sort(ctx: typer.Context, field: BookField = typer.Argument(..., help="Sort key: title | author | category")):
    """List every book ordered by title, author or category."""
    sort_books(ctx.obj, field)


@app.command("list-books")
def cli_list_books(ctx: typer.Context):
    """List all books."""
    print_book_list(ctx.obj.list_books())


@app.command("list-members")
def cli_list_members(ctx: typer.Context):
    """List all members."""
    print_member_list(ctx.obj.list_members())


@app.command("categories")
def cli_categories(ctx: typer.Context):
    """List the categories seen so far."""
    categories = sorted(ctx.obj.get_categories(), key=str.lower)
    if not categories:
        print("No categories available.")
        return
    print(f"Categories ({len(categories)}):")
    for category in categories:
        print(f"- {category}")


@app.command("stats")
def cli_stats(ctx: typer.Context):
    """Show catalog statistics."""
    print_stats_result(ctx.obj.get_statistics())


@app.command("menu")
def cli_menu(ctx: typer.Context):
    """Start the interactive menu."""
    run_menu(ctx.obj)


# ------------------------- Interactive menu ------------------------- #
def _ask_id(label: str) -> Optional[int]:
    raw = Prompt.ask(label)
    value = TextValidator.parse_id(raw)
    if value is None:
        print(f"Operation failed: '{raw}' is not a valid ID.")
    return value


def _ask_field(label: str) -> BookField:
    choice = Prompt.ask(f"{label} by: 1) Title 2) Author 3) Category", choices=list(FIELD_CHOICES))
    return FIELD_CHOICES[choice]


def run_menu(lib: Library) -> None:
    """Numbered menu over the catalog; option 7 saves and exits."""
    def render_menu() -> None:
        menu_items = [
            ("1", "Add Book", "➕"),
            ("2", "Add Member", "👤"),
            ("3", "Issue Book", "📤"),
            ("4", "Return Book", "📥"),
            ("5", "Search Books", "🔎"),
            ("6", "Sort Books", "🔤"),
            ("7", "Exit", "🚪"),
            ("8", "Debug: List all Books", "📚"),
            ("9", "Debug: List all Members", "👥"),
        ]

        table = Table.grid(padding=(0, 2))
        table.add_column(justify="right", style="bold cyan", width=4)
        table.add_column(justify="left", style="white")
        for key, label, icon in menu_items:
            table.add_row(f"[reverse]{key}[/]", f"{icon} {label}")

        console.print(Panel(table, title=settings.app_name, border_style="cyan", box=box.HEAVY, padding=(1, 2)))

    print(f"Welcome to {settings.app_name} CLI")
    while True:
        render_menu()
        try:
            choice = Prompt.ask("Enter your choice", choices=[str(i) for i in range(1, 10)])
            if choice == "1":
                title = Prompt.ask("Enter Book Title")
                author = Prompt.ask("Enter Author")
                category = Prompt.ask("Enter Category")
                add_book(lib, title, author, category)
            elif choice == "2":
                name = Prompt.ask("Enter Member Name")
                email = Prompt.ask("Enter Member Email")
                add_member(lib, name, email)
            elif choice in ("3", "4"):
                verb = "issue" if choice == "3" else "return"
                book_id = _ask_id(f"Enter Book ID to {verb}")
                if book_id is None:
                    continue
                member_id = _ask_id("Enter Member ID")
                if member_id is None:
                    continue
                if choice == "3":
                    issue_book(lib, book_id, member_id)
                else:
                    return_book(lib, book_id, member_id)
            elif choice == "5":
                field = _ask_field("Search")
                query = Prompt.ask("Enter search query", default="", show_default=False)
                search_books(lib, field, query)
            elif choice == "6":
                sort_books(lib, _ask_field("Sort"))
            elif choice == "7":
                save_and_exit(lib)
                return
            elif choice == "8":
                print_book_list(lib.list_books())
            elif choice == "9":
                print_member_list(lib.list_members())
        except (EOFError, KeyboardInterrupt):
            print()
            save_and_exit(lib)
            return
        print()


if __name__ == "__main__":
    app()
