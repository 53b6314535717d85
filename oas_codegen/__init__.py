"""
oas-codegen: typed data models from OpenAPI 3 component schemas.
"""

__version__ = "0.1.0"
