"""
Rust-specific type system for code generation.

Rust has fixed-width numeric primitives, so `number` and `integer` are
resolved from the `format` hint, and integers bounded below by zero
become unsigned.
"""

from dataclasses import dataclass
from typing import Optional

from ...core.types import Number, TypeConfig, TypeMapper, is_zero_minimum


@dataclass
class RustTypeConfig(TypeConfig):
    """Configuration for Rust type mapping behavior."""

    string_type: str = "String"
    bool_type: str = "bool"
    array_type: str = "Vec"

    # Floating point widths
    float32_type: str = "f32"
    float64_type: str = "f64"

    # Integer widths, signed and unsigned
    int32_type: str = "i32"
    uint32_type: str = "u32"
    int64_type: str = "i64"
    uint64_type: str = "u64"


class RustTypeMapper(TypeMapper):
    """Maps OpenAPI primitives to Rust types."""

    @classmethod
    def default_config(cls) -> RustTypeConfig:
        return RustTypeConfig()

    def map_number(self, format: Optional[str]) -> str:
        # double and unknown formats fall back to 64 bits
        if format == "float":
            return self.config.float32_type
        return self.config.float64_type

    def map_integer(self, format: Optional[str], minimum: Optional[Number]) -> str:
        # int32 and unknown formats fall back to 32 bits
        unsigned = is_zero_minimum(minimum)
        if format == "int64":
            return self.config.uint64_type if unsigned else self.config.int64_type
        return self.config.uint32_type if unsigned else self.config.int32_type
