"""
Rust-specific naming utilities and sanitization.

Handles Rust keywords and naming conventions.
"""

from ...core.naming import NameSanitizer, NamingCase


# Rust strict and reserved keywords
RUST_RESERVED_WORDS = {
    "abstract",
    "as",
    "async",
    "await",
    "become",
    "box",
    "break",
    "const",
    "continue",
    "crate",
    "do",
    "dyn",
    "else",
    "enum",
    "extern",
    "false",
    "final",
    "fn",
    "for",
    "gen",
    "if",
    "impl",
    "in",
    "let",
    "loop",
    "macro",
    "match",
    "mod",
    "move",
    "mut",
    "override",
    "priv",
    "pub",
    "ref",
    "return",
    "self",
    "Self",
    "static",
    "struct",
    "super",
    "trait",
    "true",
    "try",
    "type",
    "typeof",
    "unsafe",
    "unsized",
    "use",
    "virtual",
    "where",
    "while",
    "yield",
}


# Prelude types the generated code refers to
RUST_PRELUDE_TYPES = {"Box", "Option", "Result", "String", "Vec"}


def create_rust_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for Rust."""
    return NameSanitizer(
        RUST_RESERVED_WORDS,
        field_case=NamingCase.SNAKE_CASE,
        type_case=NamingCase.PASCAL_CASE,
        reserved_type_names=RUST_PRELUDE_TYPES,
    )
