"""Shared fixtures for codedef tests."""

import pytest

from codedef.languages import C_PROFILE
from codedef.parsers.c import CParser


class FakeNode:
    """Hand-built syntax node with the surface the walker uses."""
    
    def __init__(self, type, start=(0, 0), end=(0, 0), start_byte=0, end_byte=0, children=None, fields=None):
        self.type = type
        self.start_point = start
        self.end_point = end
        self.start_byte = start_byte
        self.end_byte = end_byte
        self.children = list(children or [])
        self.fields = dict(fields or {})
    
    def child_by_field_name(self, name):
        values = self.fields.get(name) or []
        return values[0] if values else None
    
    def children_by_field_name(self, name):
        return list(self.fields.get(name) or [])


@pytest.fixture
def fake_node():
    """Factory for hand-built syntax nodes."""
    return FakeNode


@pytest.fixture
def c_profile():
    """C classification profile."""
    return C_PROFILE


@pytest.fixture
def parse_c():
    """Parse C source; returns (source_bytes, root_node)."""
    parser = CParser()
    
    def _parse(text):
        source = text.encode("utf-8")
        tree = parser.parse(source)
        return source, tree.root_node
    
    return _parse


SAMPLE_C = """#define MAX_SIZE 100

struct Node {
    int value;
    struct Node *next;
};

typedef struct {
    int x;
    int y;
} Point;

int add(int a, int b) {
    return a + b;
}
"""


@pytest.fixture
def sample_c():
    """Macro, plain struct, typedef'd anonymous struct and a function."""
    return SAMPLE_C
