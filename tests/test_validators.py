import pytest

from library_catalog.validators import EmailValidator, TextValidator


@pytest.mark.parametrize("email", ["a@b.com", "first.last@mail.example.org", "user-1@sub-domain.io", "x_y@z.co"])
def test_valid_emails(email):
    assert EmailValidator.is_valid_email(email)


@pytest.mark.parametrize("email", ["not-an-email", "", None, "a@b", "a@b.c", "a b@c.com", "a@b.com\n", "@b.com", "josé@example.com"])
def test_invalid_emails(email):
    assert not EmailValidator.is_valid_email(email)


def test_normalize_email_strips_whitespace():
    assert EmailValidator.normalize_email("  a@b.com ") == "a@b.com"
    assert EmailValidator.normalize_email(None) == ""


def test_parse_id():
    assert TextValidator.parse_id(" 101 ") == 101
    assert TextValidator.parse_id("abc") is None
    assert TextValidator.parse_id("") is None
    assert TextValidator.parse_id(None) is None
    assert TextValidator.parse_id("١٠١") is None


def test_single_line_replaces_line_breaks():
    assert TextValidator.single_line("Du\nne") == "Du ne"
    assert TextValidator.single_line("a\r\nb\rc") == "a b c"
    assert TextValidator.single_line(None) == ""
