"""
Rust code generator implementation.

Generates Rust structs and serde-friendly enums from OpenAPI schemas.
"""

from typing import Callable, Dict, Any, Optional
from pathlib import Path

from ...core.config import GeneratorConfig, load_config
from ...core.generator import CodeGenerator
from ...core.naming import NameSanitizer
from .naming import create_rust_sanitizer
from .types import RustTypeMapper


_RUST_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t", "\0": "\\0"}


def rust_string_literal(value: Any) -> str:
    """Render a value as a Rust string literal, e.g. "a\\u{1}"."""
    chars = []
    for char in str(value):
        if char in _RUST_ESCAPES:
            chars.append(_RUST_ESCAPES[char])
        elif ord(char) < 0x20 or ord(char) == 0x7F:
            chars.append(f"\\u{{{ord(char):x}}}")
        else:
            chars.append(char)
    return '"' + "".join(chars) + '"'


class RustGenerator(CodeGenerator):
    """Code generator for Rust structs and enums."""

    struct_template = "struct.rs.j2"
    enum_template = "enum.rs.j2"
    header_template = "header.rs.j2"

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "rust"

    @property
    def file_extension(self) -> str:
        """Return Rust file extension."""
        return ".rs"

    def get_template_directory(self) -> Path:
        """Return the Rust templates directory."""
        return Path(__file__).parent / "templates"

    def template_filters(self) -> Dict[str, Callable[..., str]]:
        return {"quote": rust_string_literal}

    def create_sanitizer(self) -> NameSanitizer:
        return create_rust_sanitizer()

    def create_type_mapper(self) -> RustTypeMapper:
        return RustTypeMapper()

    def template_options(self) -> Dict[str, Any]:
        """Add derive lists and reference boxing to the template options."""
        options = super().template_options()
        custom = self.config.custom
        enum_derives = custom.get("enum_derives", [])

        options["struct_derives"] = custom.get("struct_derives", [])
        options["enum_derives"] = enum_derives
        # Box<T> for non-array references
        options["box_references"] = custom.get("box_references", True)
        options["serde"] = any(
            "Serialize" in derive or "Deserialize" in derive for derive in enum_derives
        )
        return options


def create_rust_generator(config: Optional[Dict[str, Any]] = None) -> RustGenerator:
    """Create a Rust generator with default configuration plus overrides."""
    generator_config: GeneratorConfig = load_config("rust", custom_config=config)
    return RustGenerator(generator_config)


def create_minimal_rust_generator() -> RustGenerator:
    """
    Create a Rust generator without serde or doc comments.

    Features:
    - Plain std derives on enums
    - No doc comments and no module header
    - References are still boxed
    """
    return create_rust_generator(
        {
            "add_comments": False,
            "add_header": False,
            "custom": {
                "enum_derives": ["Debug", "Clone", "Copy", "PartialEq", "Eq", "Hash"]
            },
        }
    )
