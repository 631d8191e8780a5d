import json
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from library_catalog.book import Book, Member

OUTPUT_MODES = {"plain", "json", "rich"}

_console = Console()
_output_mode = "plain"


def set_output_mode(mode: Optional[str]) -> None:
    global _output_mode
    mode = (mode or "").lower().strip()
    if mode in OUTPUT_MODES:
        _output_mode = mode
    # Unknown values keep the current mode


def get_output_mode() -> str:
    return _output_mode


def print_book_list(books: List[Book], empty_message: str = "No books available.", title: str = "Books") -> None:
    """Print books in the current output mode.
    - plain: one 'ID: ... | Title: ...' line per book
    - json: JSON array of book dicts
    - rich: Rich table
    """
    if not books:
        print(empty_message)
        return

    mode = get_output_mode()
    if mode == "json":
        print(json.dumps([b.to_dict() for b in books], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title=f"📚 {title}", show_lines=True, header_style="bold cyan")
        table.add_column("ID", style="magenta", no_wrap=True)
        table.add_column("Title", style="white")
        table.add_column("Author", style="white")
        table.add_column("Category", style="white")
        table.add_column("Issued", style="yellow")
        for b in books:
            table.add_row(str(b.book_id), b.title, b.author, b.category, "Yes" if b.is_issued else "No")
        _console.print(table)
    else:
        for b in books:
            print(b)


def print_member_list(members: List[Member], empty_message: str = "No members available.") -> None:
    if not members:
        print(empty_message)
        return

    mode = get_output_mode()
    if mode == "json":
        print(json.dumps([m.to_dict() for m in members], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title="👥 Members", show_lines=True, header_style="bold cyan")
        table.add_column("ID", style="magenta", no_wrap=True)
        table.add_column("Name", style="white")
        table.add_column("Email", style="white")
        table.add_column("Issued Books", style="yellow")
        for m in members:
            table.add_row(str(m.member_id), m.name, m.email, ", ".join(str(i) for i in m.issued_books))
        _console.print(table)
    else:
        for m in members:
            print(m)


def print_stats_result(stats: Dict[str, Any]) -> None:
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps(stats, ensure_ascii=False))
    elif mode == "rich":
        content = (
            f"[bold]Total Books:[/] {stats.get('total_books', 0)}\n"
            f"[bold]Issued Books:[/] {stats.get('issued_books', 0)}\n"
            f"[bold]Members:[/] {stats.get('total_members', 0)}\n"
            f"[bold]Categories:[/] {stats.get('total_categories', 0)}"
        )
        _console.print(Panel.fit(content, title="📊 Stats", border_style="blue"))
    else:
        print(f"Total Books: {stats.get('total_books', 0)}")
        print(f"Issued Books: {stats.get('issued_books', 0)}")
        print(f"Available Books: {stats.get('available_books', 0)}")
        print(f"Members: {stats.get('total_members', 0)}")
        print(f"Categories: {stats.get('total_categories', 0)}")
