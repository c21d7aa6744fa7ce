"""Build a file outline from an outline walk."""

from typing import Callable, List

from .models import ClassifiedDefinition, OutlineEntry


def build_outline(
    definitions: List[ClassifiedDefinition],
    render: Callable[[ClassifiedDefinition], str],
) -> List[OutlineEntry]:
    """Drop typedef payloads, order by start line and render signatures."""
    kept = [d for d in definitions if not d.is_typedef_child]
    # sorted() is stable, so pre-order survives among equal start lines
    kept = sorted(kept, key=lambda d: d.start_line)
    
    entries = []
    for definition in kept:
        signature = render(definition)
        entries.append(OutlineEntry(
            start_line=definition.start_line,
            end_line=definition.end_line,
            kind=definition.kind,
            signature=signature,
        ))
    return entries
