"""Point and outline queries over source text or files."""

import logging
from pathlib import Path
from typing import Optional, Tuple, Union

from ..languages import Lang, parse_language, profile_for
from ..parsers import BaseParser, get_parser
from ..utils.file_utils import detect_language_for_path, read_source_file
from .models import FindResult, OutlineResult
from .outline import build_outline
from .resolver import resolve_innermost
from .signatures import render_signature
from .walker import walk_outline, walk_point

logger = logging.getLogger(__name__)

Source = Union[str, bytes]


def _coerce_language(language: Union[Lang, str]) -> Lang:
    if isinstance(language, Lang):
        return language
    return parse_language(language)


def _parse(source_text: Source, lang: Lang) -> Tuple[bytes, object]:
    source = BaseParser.encode(source_text)
    tree = get_parser(lang).parse(source)
    return source, tree


def find(source_text: Source, language: Union[Lang, str], target_line: int) -> FindResult:
    """Find the innermost definition enclosing a 1-based line.

    Returns a FindResult whose definition is None when no definition
    encloses the line.

    Raises:
        ValueError: if target_line is below 1 or the language is unsupported
        ParseFailure: if the parser cannot produce a tree
    """
    if target_line < 1:
        raise ValueError(f"Line numbers start at 1, got {target_line}")
    
    lang = _coerce_language(language)
    profile = profile_for(lang)
    source, tree = _parse(source_text, lang)
    
    definitions = walk_point(tree.root_node, source, target_line - 1, profile)
    logger.debug(f"Line {target_line}: {len(definitions)} enclosing definition(s)")
    
    return FindResult(line=target_line, definition=resolve_innermost(definitions, target_line))


def outline(source_text: Source, language: Union[Lang, str]) -> OutlineResult:
    """List every definition in the source, ordered by start line.

    Raises:
        ValueError: if the language is unsupported
        ParseFailure: if the parser cannot produce a tree
    """
    lang = _coerce_language(language)
    profile = profile_for(lang)
    source, tree = _parse(source_text, lang)
    
    definitions = walk_outline(tree.root_node, profile)
    entries = build_outline(
        definitions,
        lambda definition: render_signature(definition.node, source, lang),
    )
    logger.debug(f"Outline: {len(entries)} of {len(definitions)} definition(s) kept")
    return OutlineResult(entries=entries)


def resolve_file_language(
    file_path: Path,
    language: Optional[Union[Lang, str]] = None,
    default: Union[Lang, str] = Lang.C,
) -> Lang:
    """Pick the language for a file: explicit choice, then extension, then default."""
    if language:
        return _coerce_language(language)
    detected = detect_language_for_path(file_path)
    if detected is not None:
        return detected
    logger.debug(f"No language for extension of {file_path}; using {default}")
    return _coerce_language(default)


def find_in_file(
    file_path: Path,
    line: int,
    language: Optional[Union[Lang, str]] = None,
    default_language: Union[Lang, str] = Lang.C,
) -> FindResult:
    """Read a file and find the innermost definition enclosing a line."""
    lang = resolve_file_language(file_path, language, default_language)
    return find(read_source_file(file_path), lang, line)


def outline_file(
    file_path: Path,
    language: Optional[Union[Lang, str]] = None,
    default_language: Union[Lang, str] = Lang.C,
) -> OutlineResult:
    """Read a file and build its outline."""
    lang = resolve_file_language(file_path, language, default_language)
    return outline(read_source_file(file_path), lang)
