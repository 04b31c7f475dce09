"""Turn typed schema definitions into flat, comparable declarations."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .schema_models import (
    NO_PARENT,
    Declaration,
    EnumTypeDefinition,
    ExtractionResult,
    FieldDefinition,
    InputObjectTypeDefinition,
    InterfaceTypeDefinition,
    NonNullTypeRef,
    ObjectTypeDefinition,
    OpaqueTypeDefinition,
    PossibleType,
    ScalarTypeDefinition,
    TypeDefinition,
    UnionTypeDefinition,
    UnsupportedConstruct,
)
from .schema_projection import load_schema_document, project_type_definitions
from .type_notation import UnsupportedTypeRefError, args_notation, type_notation

ENUM_VALUE_NOTATION = "ENUM_VALUE"
POSSIBLE_TYPE_PREFIX = "POSSIBLE_"

UNSUPPORTED_TYPE = "type"
UNSUPPORTED_FIELD_TYPE = "field type"


@dataclass
class _Collector:
    """Mutable collector of declarations and unsupported constructs for one snapshot."""

    declarations: list[Declaration] = field(default_factory=list)
    unsupported: list[UnsupportedConstruct] = field(default_factory=list)

    def add(self, path: str, notation: str, parent: str = NO_PARENT) -> None:
        self.declarations.append(Declaration(field=path, notation=notation, parent=parent))

    def skip(self, category: str, owner: str, kind: str) -> None:
        self.unsupported.append(UnsupportedConstruct(category=category, owner=owner, kind=kind))

    def result(self) -> ExtractionResult:
        return ExtractionResult(
            declarations=tuple(self.declarations), unsupported=tuple(self.unsupported)
        )


def extract_type_declarations(definition: TypeDefinition) -> ExtractionResult:
    """Return the declarations describing one named type and its members."""
    collector = _Collector()
    _collect_type(definition, collector)
    return collector.result()


def extract_declarations(definitions: Iterable[TypeDefinition]) -> ExtractionResult:
    """Concatenate the declarations of every definition, in order."""
    collector = _Collector()
    for definition in definitions:
        _collect_type(definition, collector)
    return collector.result()


def declarations_from_schema(text: str) -> ExtractionResult:
    """Parse SDL text and flatten all of its types into one declaration set."""
    document = load_schema_document(text)
    return extract_declarations(project_type_definitions(document))


def _collect_type(definition: TypeDefinition, collector: _Collector) -> None:
    if isinstance(definition, (ObjectTypeDefinition, InterfaceTypeDefinition)):
        kind = "OBJECT" if isinstance(definition, ObjectTypeDefinition) else "INTERFACE"
        collector.add(definition.name, kind + ":" + ",".join(definition.interfaces))
        _collect_fields(definition.name, definition.fields, collector)
        if isinstance(definition, InterfaceTypeDefinition):
            _collect_possible_types(definition.name, definition.possible_types, collector)
    elif isinstance(definition, UnionTypeDefinition):
        collector.add(definition.name, "UNION")
        _collect_possible_types(definition.name, definition.possible_types, collector)
    elif isinstance(definition, EnumTypeDefinition):
        collector.add(definition.name, "ENUM")
        for value in definition.values:
            collector.add(f"{definition.name}.{value}", ENUM_VALUE_NOTATION, definition.name)
    elif isinstance(definition, InputObjectTypeDefinition):
        collector.add(definition.name, "INPUT_OBJECT")
        for input_field in definition.input_fields:
            owner = f"{definition.name}.{input_field.name}"
            try:
                notation = type_notation(input_field.type_ref)
            except UnsupportedTypeRefError as exc:
                collector.skip(UNSUPPORTED_FIELD_TYPE, owner, exc.type_ref.kind)
                continue
            # A newly required input field breaks every existing caller.
            required = isinstance(input_field.type_ref, NonNullTypeRef)
            collector.add(owner, notation, definition.name if required else NO_PARENT)
    elif isinstance(definition, ScalarTypeDefinition):
        collector.add(definition.name, "SCALAR")
    elif isinstance(definition, OpaqueTypeDefinition):
        collector.skip(UNSUPPORTED_TYPE, definition.name, definition.kind)
    else:  # pragma: no cover
        raise TypeError(f"Unhandled type definition: {definition!r}")


def _collect_fields(
    type_name: str, fields: Iterable[FieldDefinition], collector: _Collector
) -> None:
    for field_definition in fields:
        owner = f"{type_name}.{field_definition.name}"
        try:
            prefix = args_notation(field_definition.args)
            notation = prefix + type_notation(field_definition.type_ref)
        except UnsupportedTypeRefError as exc:
            collector.skip(UNSUPPORTED_FIELD_TYPE, owner, exc.type_ref.kind)
            continue
        collector.add(owner, notation)


def _collect_possible_types(
    type_name: str, possible_types: Iterable[PossibleType], collector: _Collector
) -> None:
    for member in possible_types:
        collector.add(
            f"{type_name}.{member.name}", POSSIBLE_TYPE_PREFIX + member.kind, type_name
        )
