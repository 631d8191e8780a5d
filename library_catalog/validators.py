import re
from typing import Optional

EMAIL_PATTERN = re.compile(r"^[\w.-]+@[\w.-]+\.[A-Za-z]{2,}$", re.ASCII)


class EmailValidator:
    """Basic local@domain.tld check used before registering a member."""

    @staticmethod
    def normalize_email(raw: Optional[str]) -> str:
        if raw is None:
            return ""
        return raw.strip()

    @staticmethod
    def is_valid_email(email: Optional[str]) -> bool:
        if not email:
            return False
        # fullmatch so a trailing newline is not accepted by "$"
        return EMAIL_PATTERN.fullmatch(email) is not None


class TextValidator:
    """Checks for values typed into the shell."""

    @staticmethod
    def single_line(text: Optional[str]) -> str:
        """Collapse line breaks to spaces; each record must stay on one line of its backing file."""
        if text is None:
            return ""
        return re.sub(r"\r\n|[\r\n]", " ", text)

    @staticmethod
    def parse_id(raw: Optional[str]) -> Optional[int]:
        """Parse a record identifier typed by the user, or None if it is not a number."""
        if raw is None:
            return None
        s = raw.strip()
        if not re.fullmatch(r"[+-]?[0-9]+", s):
            return None
        return int(s)
