"""Exceptions raised by materials-lint.

Only file I/O fails. Malformed lines, missing fields and repeated keys are
tolerated by the parser, and repetitions are reported, not raised.
"""

from __future__ import annotations

from pathlib import Path


class MaterialsError(Exception):
    """Base class for materials-lint errors."""


class ReadFailure(MaterialsError):
    """The materials list could not be read."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"Cannot read {self.path}: {reason}")


class WriteFailure(MaterialsError):
    """The exported table could not be written."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"Cannot write {self.path}: {reason}")
