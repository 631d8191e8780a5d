from enum import Enum
from typing import Iterable, List

from library_catalog.book import Book


class BookField(str, Enum):
    """Book fields that can be searched or sorted on."""
    TITLE = "title"
    AUTHOR = "author"
    CATEGORY = "category"


def _field_value(book: Book, field: BookField) -> str:
    return getattr(book, BookField(field).value) or ""


def search_books(books: Iterable[Book], field: BookField, query: str) -> List[Book]:
    """Case-insensitive substring match on one field. An empty query matches every book."""
    needle = (query or "").lower()
    return [b for b in books if needle in _field_value(b, field).lower()]


def sort_books(books: Iterable[Book], field: BookField) -> List[Book]:
    """Return a new list ordered case-insensitively by the field; ties keep their input order."""
    return sorted(books, key=lambda b: _field_value(b, field).lower())
