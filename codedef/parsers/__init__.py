"""Code parsers for supported languages."""

from ..languages import Lang
from .base import BaseParser, SyntaxNode
from .c import CParser


def get_parser(lang: Lang) -> BaseParser:
    """Get parser for specified language."""
    if Lang(lang) == Lang.C:
        return CParser()
    raise ValueError(f"Unsupported language: {lang}")


__all__ = [
    "BaseParser",
    "SyntaxNode",
    "CParser",
    "get_parser",
]
