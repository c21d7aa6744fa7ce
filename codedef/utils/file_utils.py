"""File reading and language detection utilities."""

import logging
from pathlib import Path
from typing import Optional

from ..errors import ReadFailure
from ..languages import Lang, detect_language

logger = logging.getLogger(__name__)


def detect_language_for_path(file_path: Path) -> Optional[Lang]:
    """Detect programming language from file extension."""
    return detect_language(Path(file_path).suffix)


def read_source_file(file_path: Path) -> bytes:
    """Read a source file as raw bytes.

    Raises:
        ReadFailure: if the path is missing, is a directory, or cannot be read
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise ReadFailure(file_path, FileNotFoundError(f"File not found: {file_path}"))
    if file_path.is_dir():
        raise ReadFailure(
            file_path,
            IsADirectoryError(f"Expected a file but received a directory: {file_path}"),
        )
    
    try:
        with open(file_path, "rb") as f:
            return f.read()
    except OSError as e:
        logger.error(f"Failed to read file {file_path}: {e}")
        raise ReadFailure(file_path, e) from e
