"""Base parser interface and the syntax node surface used by the core."""

from abc import ABC, abstractmethod
from typing import List, Optional, Protocol, Tuple, Union


class SyntaxNode(Protocol):
    """Node surface the definition search relies on.

    tree-sitter nodes satisfy this structurally.
    """
    type: str
    start_point: Tuple[int, int]
    end_point: Tuple[int, int]
    start_byte: int
    end_byte: int
    children: List["SyntaxNode"]

    def child_by_field_name(self, name: str) -> Optional["SyntaxNode"]:
        ...

    def children_by_field_name(self, name: str) -> List["SyntaxNode"]:
        ...


class BaseParser(ABC):
    """Abstract base class for language parsers."""
    
    def __init__(self, language_name: str):
        self.language_name = language_name
        self.parser = None
        self.language = None
    
    @abstractmethod
    def initialize(self) -> None:
        """Initialize the parser and language."""
        pass
    
    @abstractmethod
    def parse(self, source: Union[str, bytes]):
        """Parse source text and return the syntax tree."""
        pass
    
    @staticmethod
    def encode(source: Union[str, bytes]) -> bytes:
        """Source as UTF-8 bytes (node offsets are byte offsets)."""
        if isinstance(source, bytes):
            return source
        return source.encode("utf-8")
