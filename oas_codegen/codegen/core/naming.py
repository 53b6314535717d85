"""
Naming utilities for safe code generation.

Handles word splitting, case conversions and keyword escaping for the
identifiers emitted by every target language.

Leading digits are handled differently for the two identifier kinds:
type names split the first character into its own segment (``1test`` ->
``_1_Test``) while field names only get an underscore prefix (``1test``
-> ``_1Test`` / ``_1_test``). Generated code in the wild depends on both
spellings, so the asymmetry is kept on purpose.
"""

import re
from typing import Dict, List, Optional, Set
from enum import Enum


class NamingCase(Enum):
    """Different naming case styles."""

    SNAKE_CASE = "snake"  # user_name
    CAMEL_CASE = "camel"  # userName
    PASCAL_CASE = "pascal"  # UserName


# Acronym run before a capitalized word, a (capitalized) lowercase word,
# a bare acronym, or a run of digits
_WORD_PATTERN = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|[0-9]+")
_SEPARATOR_PATTERN = re.compile(r"[^A-Za-z0-9]+")


def split_words(name: str) -> List[str]:
    """
    Split a raw identifier into words.

    Boundaries are non-alphanumeric separators, lower-to-upper case
    transitions, the end of an acronym and letter/digit transitions.
    """
    words = []
    for chunk in _SEPARATOR_PATTERN.split(name):
        words.extend(_WORD_PATTERN.findall(chunk))
    return words


def _fallback_words(name: str) -> List[str]:
    """Words for names that contain no ASCII letter or digit at all."""
    if not name:
        return ["empty"]
    # "+" -> "u002B"
    return split_words("u" + "".join(f"{ord(char):04X}" for char in name))


def convert_case(words: List[str], target_case: NamingCase) -> str:
    """Join words using the given case style."""
    if target_case == NamingCase.SNAKE_CASE:
        return "_".join(word.lower() for word in words)
    elif target_case == NamingCase.CAMEL_CASE:
        if not words:
            return ""
        return words[0].lower() + "".join(word.capitalize() for word in words[1:])
    elif target_case == NamingCase.PASCAL_CASE:
        return "".join(word.capitalize() for word in words)
    else:
        raise ValueError(f"Unsupported naming case: {target_case}")


class NameSanitizer:
    """Converts raw schema identifiers into legal target identifiers."""

    def __init__(
        self,
        reserved_words: Optional[Set[str]] = None,
        field_case: NamingCase = NamingCase.SNAKE_CASE,
        type_case: NamingCase = NamingCase.PASCAL_CASE,
        suffix_on_conflict: str = "_",
        reserved_type_names: Optional[Set[str]] = None,
    ):
        """
        Initialize name sanitizer.

        Args:
            reserved_words: Set of language reserved words
            field_case: Case style for field and variable names
            type_case: Case style for type and enum variant names
            suffix_on_conflict: Suffix appended to reserved words
            reserved_type_names: Names reserved for type declarations only
        """
        self.reserved_words = reserved_words or set()
        self.field_case = field_case
        self.type_case = type_case
        self.suffix_on_conflict = suffix_on_conflict
        self.reserved_type_names = reserved_type_names or set()
        self._name_cache: Dict[str, str] = {}

    def to_type_name(self, name: str) -> str:
        """Sanitize a name for a type declaration or enum variant."""
        cache_key = f"type:{name}"
        if cache_key in self._name_cache:
            return self._name_cache[cache_key]

        converted = convert_case(self._words(name), self.type_case)
        if converted[0].isdigit():
            converted = f"_{converted[0]}_{converted[1:]}"

        if converted in self.reserved_type_names:
            final_name = f"{converted}{self.suffix_on_conflict}"
        else:
            final_name = self._escape_reserved(converted)
        self._name_cache[cache_key] = final_name
        return final_name

    def to_field_name(self, name: str) -> str:
        """Sanitize a name for a struct field or variable."""
        cache_key = f"field:{name}"
        if cache_key in self._name_cache:
            return self._name_cache[cache_key]

        converted = convert_case(self._words(name), self.field_case)
        if converted[0].isdigit():
            converted = f"_{converted}"

        final_name = self._escape_reserved(converted)
        self._name_cache[cache_key] = final_name
        return final_name

    def is_reserved(self, name: str) -> bool:
        """Check whether a name is a reserved word of the target language."""
        return name in self.reserved_words

    def _words(self, name: str) -> List[str]:
        return split_words(name) or _fallback_words(name)

    def _escape_reserved(self, name: str) -> str:
        if self.is_reserved(name):
            return f"{name}{self.suffix_on_conflict}"
        return name
