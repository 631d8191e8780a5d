import pytest

from library_catalog.library import Library


@pytest.fixture
def data_files(tmp_path):
    # Her test için ayrı veri dosyaları
    return tmp_path / "books.txt", tmp_path / "members.txt"


@pytest.fixture
def lib(data_files):
    books_file, members_file = data_files
    return Library(books_file=books_file, members_file=members_file)
