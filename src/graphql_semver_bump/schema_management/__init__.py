"""Schema management exports."""

from .declaration_extraction import (
    declarations_from_schema,
    extract_declarations,
    extract_type_declarations,
)
from .schema_models import (
    NO_PARENT,
    Declaration,
    ExtractionResult,
    SchemaDocument,
    UnsupportedConstruct,
)
from .schema_projection import SchemaError, load_schema_document, project_type_definitions
from .type_notation import args_notation, type_notation

__all__ = [
    "NO_PARENT",
    "Declaration",
    "ExtractionResult",
    "SchemaDocument",
    "SchemaError",
    "UnsupportedConstruct",
    "args_notation",
    "declarations_from_schema",
    "extract_declarations",
    "extract_type_declarations",
    "load_schema_document",
    "project_type_definitions",
    "type_notation",
]
