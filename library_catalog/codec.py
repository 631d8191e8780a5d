"""Line codec for the books and members backing files.

Books:   ``id,title,author,category,issued``
Members: ``id,name,email,id1|id2|...``

Commas inside free-text fields are replaced by ``COMMA_TOKEN`` before the
fields are joined. The replacement is a plain substring swap, so text that
already contains the token will not survive a round trip.

Decoding is tolerant: a malformed line yields ``None`` instead of raising,
and callers are expected to skip it.
"""
import re
from typing import List, Optional

from library_catalog.book import Book, Member

FIELD_SEPARATOR = ","
ID_SEPARATOR = "|"
COMMA_TOKEN = "&#44;"

_INTEGER = re.compile(r"[+-]?[0-9]+")


def escape(text: Optional[str]) -> str:
    if text is None:
        return ""
    return text.replace(FIELD_SEPARATOR, COMMA_TOKEN)


def unescape(text: Optional[str]) -> str:
    if text is None:
        return ""
    return text.replace(COMMA_TOKEN, FIELD_SEPARATOR)


def parse_int(text: str) -> int:
    """Strict integer parse: optional sign and ASCII digits only, no surrounding spaces."""
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"not an integer: {text!r}")
    return int(text)


def encode_book(book: Book) -> str:
    return FIELD_SEPARATOR.join([
        str(book.book_id),
        escape(book.title),
        escape(book.author),
        escape(book.category),
        "true" if book.is_issued else "false",
    ])


def decode_book(line: str) -> Optional[Book]:
    parts = line.split(FIELD_SEPARATOR, 4)
    if len(parts) < 5:
        return None
    try:
        book_id = parse_int(parts[0])
    except ValueError:
        return None
    return Book(
        book_id=book_id,
        title=unescape(parts[1]),
        author=unescape(parts[2]),
        category=unescape(parts[3]),
        is_issued=parts[4].lower() == "true",
    )


def encode_member(member: Member) -> str:
    issued = ID_SEPARATOR.join(str(book_id) for book_id in member.issued_books)
    return FIELD_SEPARATOR.join([
        str(member.member_id),
        escape(member.name),
        escape(member.email),
        issued,
    ])


def decode_member(line: str) -> Optional[Member]:
    parts = line.split(FIELD_SEPARATOR, 3)
    if len(parts) < 3:
        return None
    try:
        member_id = parse_int(parts[0])
        issued: List[int] = []
        if len(parts) == 4 and parts[3].strip():
            for token in parts[3].split(ID_SEPARATOR):
                if token.strip():
                    issued.append(parse_int(token))
    except ValueError:
        return None
    return Member(
        member_id=member_id,
        name=unescape(parts[1]),
        email=unescape(parts[2]),
        issued_books=issued,
    )
