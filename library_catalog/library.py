import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Set

from library_catalog.book import Book, Member
from library_catalog.database import CatalogDatabase, PathLike
from library_catalog.exceptions import InvalidEmailError, PersistenceError
from library_catalog.search import BookField, search_books, sort_books
from library_catalog.validators import EmailValidator, TextValidator

logger = logging.getLogger(__name__)


class Outcome(Enum):
    """Result of an issue or return request, valued by the message shown to the user."""
    ISSUED = "Book issued successfully."
    RETURNED = "Book returned successfully."
    BOOK_NOT_FOUND = "Book not found."
    MEMBER_NOT_FOUND = "Member not found."
    ALREADY_ISSUED = "Book is already issued."
    NOT_ISSUED = "Book is not marked as issued."

    @property
    def message(self) -> str:
        return self.value

    @property
    def succeeded(self) -> bool:
        return self in (Outcome.ISSUED, Outcome.RETURNED)


class Library:
    """Catalog of books and members, kept in memory and written through to disk.

    Every mutating operation rewrites the affected backing file(s) before it
    returns. If a write fails a ``PersistenceError`` is raised, but the
    in-memory change has already been applied and is kept.
    """

    FIRST_BOOK_ID = 100
    FIRST_MEMBER_ID = 200

    def __init__(self, books_file: Optional[PathLike] = None, members_file: Optional[PathLike] = None,
                 *, autoload: bool = True) -> None:
        self.database = CatalogDatabase(books_file, members_file)
        self.books: Dict[int, Book] = {}
        self.members: Dict[int, Member] = {}
        self.categories: Set[str] = set()
        self.load_warning: Optional[str] = None
        if autoload:
            self.load()

    # ------------------------- Persistence ------------------------- #
    def load(self) -> Optional[str]:
        """Populate the catalog from the backing files.

        Never raises: a read failure is logged, kept in ``load_warning`` and
        returned, and whatever was read before the failure stays loaded.
        """
        self.load_warning = None
        try:
            self.database.initialize()
            for book in self.database.load_books():
                self.books[book.book_id] = book
                self.categories.add(book.category)
            for member in self.database.load_members():
                self.members[member.member_id] = member
        except PersistenceError as e:
            self.load_warning = f"Could not load data: {e}"
            logger.warning(self.load_warning)
            return self.load_warning
        logger.info(f"Loaded {len(self.books)} books and {len(self.members)} members")
        return None

    def save_books(self) -> None:
        self.database.save_books(self.books.values())

    def save_members(self) -> None:
        self.database.save_members(self.members.values())

    def save_all(self) -> None:
        self.save_books()
        self.save_members()

    # ------------------------- Identifiers ------------------------- #
    def next_book_id(self) -> int:
        return max(self.books, default=self.FIRST_BOOK_ID) + 1

    def next_member_id(self) -> int:
        return max(self.members, default=self.FIRST_MEMBER_ID) + 1

    # ------------------------- Core operations ------------------------- #
    def add_book(self, title: str, author: str, category: str) -> Book:
        title, author, category = (TextValidator.single_line(t) for t in (title, author, category))
        book = Book(self.next_book_id(), title, author, category, is_issued=False)
        self.books[book.book_id] = book
        self.categories.add(book.category)
        logger.info(f"Book added | book_id={book.book_id} title={book.title}")
        self.save_books()
        return book

    def add_member(self, name: str, email: str) -> Member:
        email = EmailValidator.normalize_email(email)
        if not EmailValidator.is_valid_email(email):
            raise InvalidEmailError("Invalid email format.")
        member = Member(self.next_member_id(), TextValidator.single_line(name), email)
        self.members[member.member_id] = member
        logger.info(f"Member added | member_id={member.member_id}")
        self.save_members()
        return member

    def issue_book(self, book_id: int, member_id: int) -> Outcome:
        book = self.books.get(book_id)
        member = self.members.get(member_id)
        if book is None:
            return Outcome.BOOK_NOT_FOUND
        if member is None:
            return Outcome.MEMBER_NOT_FOUND
        if book.is_issued:
            return Outcome.ALREADY_ISSUED

        book.mark_as_issued()
        member.add_issued_book(book_id)
        logger.info(f"Book issued | book_id={book_id} member_id={member_id}")
        self.save_all()
        return Outcome.ISSUED

    def return_book(self, book_id: int, member_id: int) -> Outcome:
        """Return a book.

        Only the book's issued flag is checked: a member who does not hold
        the book can still return it, which clears the flag and leaves the
        actual borrower's list untouched.
        """
        book = self.books.get(book_id)
        member = self.members.get(member_id)
        if book is None:
            return Outcome.BOOK_NOT_FOUND
        if member is None:
            return Outcome.MEMBER_NOT_FOUND
        if not book.is_issued:
            return Outcome.NOT_ISSUED

        book.mark_as_returned()
        member.return_issued_book(book_id)
        logger.info(f"Book returned | book_id={book_id} member_id={member_id}")
        self.save_all()
        return Outcome.RETURNED

    def get_book(self, book_id: int) -> Optional[Book]:
        return self.books.get(book_id)

    def get_member(self, member_id: int) -> Optional[Member]:
        return self.members.get(member_id)

    def list_books(self) -> List[Book]:
        return list(self.books.values())

    def list_members(self) -> List[Member]:
        return list(self.members.values())

    def get_categories(self) -> Set[str]:
        return set(self.categories)

    # ------------------------- Queries ------------------------- #
    def search_books(self, field: BookField, query: str) -> List[Book]:
        return search_books(self.books.values(), field, query)

    def sort_books(self, field: BookField) -> List[Book]:
        return sort_books(self.books.values(), field)

    def get_statistics(self) -> Dict[str, Any]:
        issued = sum(1 for b in self.books.values() if b.is_issued)
        return {
            "total_books": len(self.books),
            "issued_books": issued,
            "available_books": len(self.books) - issued,
            "total_members": len(self.members),
            "total_categories": len(self.categories),
        }
