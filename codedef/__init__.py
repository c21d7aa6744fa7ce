"""codedef - find the enclosing definition for a source line, or outline a file."""

from .definitions import (
    Definition,
    FindResult,
    OutlineEntry,
    OutlineResult,
    find,
    find_in_file,
    outline,
    outline_file,
)
from .errors import CodedefError, ParseFailure, ReadFailure
from .languages import Lang, LanguageProfile, detect_language, profile_for

__version__ = "0.1.0"

__all__ = [
    "Definition",
    "FindResult",
    "OutlineEntry",
    "OutlineResult",
    "find",
    "find_in_file",
    "outline",
    "outline_file",
    "CodedefError",
    "ParseFailure",
    "ReadFailure",
    "Lang",
    "LanguageProfile",
    "detect_language",
    "profile_for",
]
