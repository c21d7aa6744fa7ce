"""Error types raised by codedef."""

from pathlib import Path
from typing import Optional


class CodedefError(Exception):
    """Base class for codedef failures."""


class ReadFailure(CodedefError):
    """Source text could not be read."""

    def __init__(self, path: Path, cause: Optional[BaseException] = None):
        self.path = path
        self.cause = cause
        message = f"Failed to read file: {path}"
        if cause is not None:
            message += f" ({cause})"
        super().__init__(message)


class ParseFailure(CodedefError):
    """The parser could not produce a syntax tree."""

    def __init__(self, language: str, cause: Optional[BaseException] = None):
        self.language = language
        self.cause = cause
        message = f"Failed to parse {language} source"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)
