import logging
import os
from typing import Iterable, Iterator, Optional, Union

from library_catalog.book import Book, Member
from library_catalog.codec import decode_book, decode_member, encode_book, encode_member
from library_catalog.config import settings
from library_catalog.exceptions import PersistenceError

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


class CatalogDatabase:
    """Reads and rewrites the two flat backing files.

    Every save replaces the whole file; there are no appends or partial
    updates. Lines that do not decode are skipped on load.
    """

    def __init__(self, books_file: Optional[PathLike] = None, members_file: Optional[PathLike] = None) -> None:
        self.books_file = os.fspath(books_file or settings.books_file)
        self.members_file = os.fspath(members_file or settings.members_file)

    def initialize(self) -> None:
        """Create empty backing files if they do not exist yet."""
        for path in (self.books_file, self.members_file):
            if os.path.exists(path):
                continue
            try:
                directory = os.path.dirname(path)
                if directory:
                    os.makedirs(directory, exist_ok=True)
                with open(path, "a", encoding="utf-8"):
                    pass
                logger.info(f"Created empty data file {path}")
            except OSError as e:
                raise PersistenceError(f"Could not create {path}: {e}") from e

    # ------------------------- Loading ------------------------- #
    def load_books(self) -> Iterator[Book]:
        return self._read(self.books_file, decode_book)

    def load_members(self) -> Iterator[Member]:
        return self._read(self.members_file, decode_member)

    def _read(self, path: str, decode) -> Iterator:
        """Yield decoded records one line at a time.

        Records are handed out as they are read, so a failure part-way
        through a file still leaves the caller with everything before it.
        """
        skipped = 0
        try:
            with open(path, "r", encoding="utf-8") as f:
                for line in f:
                    line = line.rstrip("\r\n")
                    if not line.strip():
                        continue
                    record = decode(line)
                    if record is None:
                        skipped += 1
                        continue
                    yield record
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceError(f"Could not read {path}: {e}") from e
        if skipped:
            logger.debug(f"Skipped {skipped} malformed line(s) in {path}")

    # ------------------------- Saving ------------------------- #
    def save_books(self, books: Iterable[Book]) -> None:
        self._write(self.books_file, (encode_book(b) for b in books))

    def save_members(self, members: Iterable[Member]) -> None:
        self._write(self.members_file, (encode_member(m) for m in members))

    @staticmethod
    def _write(path: str, lines: Iterable[str]) -> None:
        try:
            with open(path, "w", encoding="utf-8") as f:
                for line in lines:
                    f.write(line)
                    f.write("\n")
        except OSError as e:
            logger.error(f"Failed to write {path}: {e}")
            raise PersistenceError(f"Could not write {path}: {e}") from e
