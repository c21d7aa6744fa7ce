"""Definition records produced by tree walks and returned to callers."""

from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional, Tuple


@dataclass
class ClassifiedDefinition:
    """A node classified as a definition during one walk."""
    kind: str
    start_line: int
    end_line: int
    byte_span_size: int
    is_typedef_child: bool = False
    text: str = ""  # source slice; empty for outline walks
    node: Any = field(default=None, repr=False, compare=False)


@dataclass
class Definition:
    """Innermost definition enclosing a queried line."""
    text: str
    start_line: int
    end_line: int
    kind: str

    def lines(self) -> Iterator[Tuple[int, str]]:
        """Yield (line_number, line) pairs for the definition's source."""
        # Only "\n" ends a line; \f and friends stay inside it
        lines = self.text.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        for offset, line in enumerate(lines):
            if line.endswith("\r"):
                line = line[:-1]
            yield self.start_line + offset, line


@dataclass(frozen=True)
class OutlineEntry:
    """One row of a file outline."""
    start_line: int
    end_line: int
    kind: str
    signature: str

    def to_dict(self) -> dict:
        return {
            "start_line": self.start_line,
            "end_line": self.end_line,
            "kind": self.kind,
            "signature": self.signature,
        }


@dataclass
class FindResult:
    """Outcome of a point query. definition is None when nothing encloses the line."""
    line: int
    definition: Optional[Definition] = None

    @property
    def found(self) -> bool:
        return self.definition is not None


@dataclass
class OutlineResult:
    """Outcome of an outline query."""
    entries: List[OutlineEntry] = field(default_factory=list)

    @property
    def empty(self) -> bool:
        return not self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[OutlineEntry]:
        return iter(self.entries)
