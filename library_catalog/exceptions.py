class LibraryError(Exception):
    """Base exception for catalog errors."""


class InvalidEmailError(LibraryError, ValueError):
    """Member email does not look like local@domain.tld."""


class PersistenceError(LibraryError):
    """A backing file could not be read or written."""
