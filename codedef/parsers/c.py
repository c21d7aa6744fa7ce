"""C parser using tree-sitter."""

import logging
from typing import Union

from tree_sitter import Language, Parser

from ..errors import ParseFailure
from .base import BaseParser

logger = logging.getLogger(__name__)


class CParser(BaseParser):
    """Parser for C source files."""
    
    def __init__(self):
        super().__init__("c")
        self.initialize()
    
    def initialize(self) -> None:
        """Initialize tree-sitter C parser."""
        try:
            import tree_sitter_c
            self.language = Language(tree_sitter_c.language())
            self.parser = Parser(self.language)
        except Exception as e:
            raise ParseFailure(
                self.language_name,
                RuntimeError(
                    "Failed to initialize C parser. "
                    "Make sure tree-sitter-c is installed: pip install tree-sitter-c. "
                    f"Error: {e}"
                ),
            ) from e
    
    def parse(self, source: Union[str, bytes]):
        """Parse C source and return the tree-sitter tree.

        Syntax errors do not fail the parse; tree-sitter returns a
        best-effort tree with ERROR nodes.
        """
        if not self.parser:
            raise ParseFailure(self.language_name, RuntimeError("Parser not initialized"))
        
        source_bytes = self.encode(source)
        try:
            tree = self.parser.parse(source_bytes)
        except Exception as e:
            logger.error(f"tree-sitter failed on {len(source_bytes)} bytes of C: {e}")
            raise ParseFailure(self.language_name, e) from e
        
        if tree is None or tree.root_node is None:
            raise ParseFailure(self.language_name, RuntimeError("Failed to parse source code"))
        
        if tree.root_node.has_error:
            logger.debug("C source contains syntax errors; using partial tree")
        return tree
