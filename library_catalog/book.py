from __future__ import annotations

from typing import Iterable


class Book:
    """A single book in the catalog. Equality is by identifier only."""

    def __init__(self, book_id: int, title: str, author: str, category: str, is_issued: bool = False) -> None:
        self.book_id = int(book_id)
        self.title = (title or "").strip()
        self.author = (author or "").strip()
        self.category = (category or "").strip()
        self.is_issued = bool(is_issued)

    def mark_as_issued(self) -> None:
        self.is_issued = True

    def mark_as_returned(self) -> None:
        self.is_issued = False

    def __str__(self) -> str:
        return (
            f"ID: {self.book_id} | Title: {self.title} | Author: {self.author} | "
            f"Category: {self.category} | Issued: {'Yes' if self.is_issued else 'No'}"
        )

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return f"Book(book_id={self.book_id!r}, title={self.title!r}, is_issued={self.is_issued!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Book):
            return NotImplemented
        return self.book_id == other.book_id

    def __hash__(self) -> int:
        return hash(("book", self.book_id))

    def to_dict(self) -> dict:
        return {
            "book_id": self.book_id,
            "title": self.title,
            "author": self.author,
            "category": self.category,
            "is_issued": self.is_issued,
        }


class Member:
    """A library member and the ids of the books currently issued to them."""

    def __init__(self, member_id: int, name: str, email: str, issued_books: Iterable[int] | None = None) -> None:
        self.member_id = int(member_id)
        self.name = (name or "").strip()
        self.email = (email or "").strip()
        self.issued_books: list[int] = []
        for book_id in issued_books or []:
            self.add_issued_book(book_id)

    def add_issued_book(self, book_id: int) -> None:
        if book_id not in self.issued_books:
            self.issued_books.append(book_id)

    def return_issued_book(self, book_id: int) -> None:
        # Missing ids are ignored
        if book_id in self.issued_books:
            self.issued_books.remove(book_id)

    def __str__(self) -> str:
        return f"ID: {self.member_id} | Name: {self.name} | Email: {self.email} | IssuedBooks: {self.issued_books}"

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return f"Member(member_id={self.member_id!r}, name={self.name!r}, issued_books={self.issued_books!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Member):
            return NotImplemented
        return self.member_id == other.member_id

    def __hash__(self) -> int:
        return hash(("member", self.member_id))

    def to_dict(self) -> dict:
        return {
            "member_id": self.member_id,
            "name": self.name,
            "email": self.email,
            "issued_books": list(self.issued_books),
        }
