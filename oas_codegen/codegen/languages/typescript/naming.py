"""
TypeScript-specific naming utilities.

Property names may be any identifier, keywords included, and declaration
names are PascalCase, so no reserved word escaping is needed.
"""

from ...core.naming import NameSanitizer, NamingCase


def create_typescript_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for TypeScript."""
    return NameSanitizer(
        field_case=NamingCase.CAMEL_CASE,
        type_case=NamingCase.PASCAL_CASE,
    )
