"""Library Catalog - Core Application Package

This package contains the catalog manager modules:
- Data models (book.py)
- Line codec for the backing files (codec.py)
- Backing file persistence (database.py)
- Catalog store with issue/return rules (library.py)
- Search and sort helpers (search.py)
- CLI interface (main.py)
"""

__version__ = "1.0.0"
