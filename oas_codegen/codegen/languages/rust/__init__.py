"""
Rust code generator for OpenAPI component schemas.
"""

from .generator import (
    RustGenerator,
    create_rust_generator,
    create_minimal_rust_generator,
    rust_string_literal,
)
from .naming import RUST_PRELUDE_TYPES, RUST_RESERVED_WORDS, create_rust_sanitizer
from .types import RustTypeConfig, RustTypeMapper

__all__ = [
    "RustGenerator",
    "create_rust_generator",
    "create_minimal_rust_generator",
    "rust_string_literal",
    "RUST_PRELUDE_TYPES",
    "RUST_RESERVED_WORDS",
    "create_rust_sanitizer",
    "RustTypeConfig",
    "RustTypeMapper",
]
