"""Schema management entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

NO_PARENT = "@"


class TypeKind(str, Enum):
    """Introspection kinds of named types and type wrappers."""

    SCALAR = "SCALAR"
    OBJECT = "OBJECT"
    INTERFACE = "INTERFACE"
    UNION = "UNION"
    ENUM = "ENUM"
    INPUT_OBJECT = "INPUT_OBJECT"
    LIST = "LIST"
    NON_NULL = "NON_NULL"


@dataclass(frozen=True)
class SchemaDocument:
    """Introspection result of one parsed schema text."""

    introspection: Any


@dataclass(frozen=True)
class NamedTypeRef:
    """Reference to a named type, `kind` as reported by introspection."""

    kind: str
    name: str


@dataclass(frozen=True)
class ListTypeRef:
    of_type: TypeRef


@dataclass(frozen=True)
class NonNullTypeRef:
    of_type: TypeRef


TypeRef = NamedTypeRef | ListTypeRef | NonNullTypeRef


@dataclass(frozen=True)
class InputValueDefinition:
    """Argument or input-object field."""

    name: str
    type_ref: TypeRef


@dataclass(frozen=True)
class FieldDefinition:
    """Output field of an object or interface type."""

    name: str
    type_ref: TypeRef
    args: tuple[InputValueDefinition, ...] = ()


@dataclass(frozen=True)
class PossibleType:
    """Concrete member of a union or implementation of an interface."""

    kind: str
    name: str


@dataclass(frozen=True)
class ScalarTypeDefinition:
    name: str


@dataclass(frozen=True)
class ObjectTypeDefinition:
    name: str
    interfaces: tuple[str, ...] = ()
    fields: tuple[FieldDefinition, ...] = ()


@dataclass(frozen=True)
class InterfaceTypeDefinition:
    name: str
    interfaces: tuple[str, ...] = ()
    fields: tuple[FieldDefinition, ...] = ()
    possible_types: tuple[PossibleType, ...] = ()


@dataclass(frozen=True)
class UnionTypeDefinition:
    name: str
    possible_types: tuple[PossibleType, ...] = ()


@dataclass(frozen=True)
class EnumTypeDefinition:
    name: str
    values: tuple[str, ...] = ()


@dataclass(frozen=True)
class InputObjectTypeDefinition:
    name: str
    input_fields: tuple[InputValueDefinition, ...] = ()


@dataclass(frozen=True)
class OpaqueTypeDefinition:
    """Named type whose kind the extractor does not recognise."""

    name: str
    kind: str


TypeDefinition = (
    ScalarTypeDefinition
    | ObjectTypeDefinition
    | InterfaceTypeDefinition
    | UnionTypeDefinition
    | EnumTypeDefinition
    | InputObjectTypeDefinition
    | OpaqueTypeDefinition
)


@dataclass(frozen=True)
class Declaration:
    """Atomic, comparable fact about schema shape.

    Identity between two snapshots is the `(field, notation)` pair. `parent`
    names the enclosing type when adding this declaration to an existing type
    breaks consumers on its own, `NO_PARENT` otherwise.
    """

    field: str
    notation: str
    parent: str = NO_PARENT

    @property
    def identity(self) -> tuple[str, str]:
        return (self.field, self.notation)

    @property
    def is_parent_sensitive(self) -> bool:
        return self.parent != NO_PARENT


@dataclass(frozen=True)
class UnsupportedConstruct:
    """Type or field type kind that has no declaration policy."""

    category: str
    owner: str
    kind: str

    def describe(self) -> str:
        return f"Unsupported {self.category} '{self.kind}' at {self.owner}"


@dataclass(frozen=True)
class ExtractionResult:
    """Declarations of one schema snapshot plus every construct that was skipped."""

    declarations: tuple[Declaration, ...]
    unsupported: tuple[UnsupportedConstruct, ...] = field(default=())

    @property
    def is_complete(self) -> bool:
        return not self.unsupported
