"""Definition search: tree walks, innermost resolution and outlines."""

from .finder import find, find_in_file, outline, outline_file, resolve_file_language
from .models import ClassifiedDefinition, Definition, FindResult, OutlineEntry, OutlineResult

__all__ = [
    "find",
    "find_in_file",
    "outline",
    "outline_file",
    "resolve_file_language",
    "ClassifiedDefinition",
    "Definition",
    "FindResult",
    "OutlineEntry",
    "OutlineResult",
]
