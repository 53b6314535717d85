"""
Language-specific code generators.

This module contains generators for different programming languages.
"""

from .rust import RustGenerator, create_rust_generator, create_minimal_rust_generator
from .typescript import (
    TypeScriptGenerator,
    create_typescript_generator,
    create_readonly_typescript_generator,
)

__all__ = [
    "RustGenerator",
    "create_rust_generator",
    "create_minimal_rust_generator",
    "TypeScriptGenerator",
    "create_typescript_generator",
    "create_readonly_typescript_generator",
]
