"""Exception taxonomy: wiring and dataset errors. No-match is never an exception."""

from __future__ import annotations

from pathlib import Path


class CrossRefError(Exception):
    """Base class for every error raised by this project."""


class DatasetError(CrossRefError):
    """A dataset file is missing, unreadable or does not match its schema."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Dataset error in {self.path}: {reason}")


class NotInitializedError(CrossRefError):
    """Services were requested before init_services() wired them."""
