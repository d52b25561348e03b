"""Custom exceptions for the tracking context."""

from pathlib import Path
from typing import Optional


class DataStoreError(Exception):
    """
    Exception raised when a data file cannot be read or parsed.

    Attributes:
        message: Error description
        path: Data file that failed to load
    """

    def __init__(self, message: str, path: Optional[Path] = None):
        self.message = message
        self.path = path

        if path is not None:
            message = f"{message}\nData file: {path}"
        super().__init__(message)


class DuplicateUserError(ValueError):
    """Raised when registering an email that already has an account."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"A user with email '{email}' already exists")
