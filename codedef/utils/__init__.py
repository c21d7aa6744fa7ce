"""Utility functions for codedef."""

from .file_utils import detect_language_for_path, read_source_file

__all__ = ["detect_language_for_path", "read_source_file"]
