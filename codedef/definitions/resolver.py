"""Pick the innermost definition from a point walk."""

import logging
from typing import List, Optional

from .models import ClassifiedDefinition, Definition

logger = logging.getLogger(__name__)


def resolve_innermost(definitions: List[ClassifiedDefinition], line: int) -> Optional[Definition]:
    """Return the smallest-span definition that is not a typedef payload.

    Structs/unions/enums nested in a typedef are dropped; the typedef is the
    answer for lines inside them. Ties keep traversal order.
    """
    candidates = [d for d in definitions if not d.is_typedef_child]
    if not candidates:
        logger.debug(f"No enclosing definition for line {line} ({len(definitions)} typedef payload(s) skipped)")
        return None
    
    best = min(candidates, key=lambda d: d.byte_span_size)
    return Definition(
        text=best.text,
        start_line=best.start_line,
        end_line=best.end_line,
        kind=best.kind,
    )
