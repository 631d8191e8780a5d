import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass
class Settings:
    # Backing files (working-directory-relative)
    books_file: str = os.getenv("LIBRARY_BOOKS_FILE", "books.txt")
    members_file: str = os.getenv("LIBRARY_MEMBERS_FILE", "members.txt")

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "WARNING").upper()

    # CLI output: plain | json | rich
    output_mode: str = os.getenv("LIB_CLI_OUTPUT", "plain").lower()

    # Application
    app_name: str = os.getenv("APP_NAME", "City Library Digital Management System")


settings = Settings()
