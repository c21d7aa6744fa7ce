"""Language profiles: which syntax node kinds count as definitions."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Lang(str, Enum):
    """Supported languages."""
    C = "c"


@dataclass(frozen=True)
class LanguageProfile:
    """Node-kind classification table for one grammar."""
    lang: Lang
    definition_kinds: frozenset
    compound_kinds: frozenset
    body_kinds: frozenset
    alias_kind: Optional[str] = None  # definition kind that wraps a compound body


C_PROFILE = LanguageProfile(
    lang=Lang.C,
    definition_kinds=frozenset({
        "function_definition",
        "type_definition",       # typedef
        "preproc_def",           # #define
        "preproc_function_def",  # #define with parameters
    }),
    compound_kinds=frozenset({
        "struct_specifier",
        "union_specifier",
        "enum_specifier",
    }),
    body_kinds=frozenset({
        "field_declaration_list",
        "enumerator_list",
    }),
    alias_kind="type_definition",
)

_PROFILES = {
    Lang.C: C_PROFILE,
}

_EXTENSIONS = {
    "c": Lang.C,
    "h": Lang.C,
}


def profile_for(lang: Lang) -> LanguageProfile:
    """Get the classification profile for a language."""
    return _PROFILES[Lang(lang)]


def detect_language(extension: str) -> Optional[Lang]:
    """Detect language from a file extension ("c", ".h", "C", ...)."""
    return _EXTENSIONS.get(extension.lstrip(".").lower())


def parse_language(name: str) -> Lang:
    """Turn a user-supplied language tag into a Lang."""
    try:
        return Lang(name.strip().lower())
    except ValueError:
        supported = ", ".join(lang.value for lang in Lang)
        raise ValueError(f"Unsupported language: {name} (supported: {supported})")
