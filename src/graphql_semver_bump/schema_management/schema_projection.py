"""Schema loading and introspection projection service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from graphql import GraphQLError, build_schema
from graphql.utilities import introspection_from_schema

from .schema_models import (
    EnumTypeDefinition,
    FieldDefinition,
    InputObjectTypeDefinition,
    InputValueDefinition,
    InterfaceTypeDefinition,
    ListTypeRef,
    NamedTypeRef,
    NonNullTypeRef,
    ObjectTypeDefinition,
    OpaqueTypeDefinition,
    PossibleType,
    ScalarTypeDefinition,
    SchemaDocument,
    TypeDefinition,
    TypeKind,
    TypeRef,
    UnionTypeDefinition,
)


class SchemaError(Exception):
    """Raised for schema parsing or introspection failures."""


def load_schema_document(text: str) -> SchemaDocument:
    """Parse SDL text and return its introspection."""
    try:
        schema = build_schema(text)
        introspection = introspection_from_schema(schema)
    except (GraphQLError, TypeError) as exc:
        raise SchemaError(f"Invalid GraphQL schema: {exc}") from exc

    return SchemaDocument(introspection=introspection)


def project_type_definitions(document: SchemaDocument) -> list[TypeDefinition]:
    """Return one typed definition per introspected type, in introspection order."""
    root = document.introspection
    if not isinstance(root, Mapping) or not isinstance(root.get("__schema"), Mapping):
        raise SchemaError("Introspection result must contain a __schema object.")

    raw_types = root["__schema"].get("types") or []
    if not isinstance(raw_types, Sequence):
        raise SchemaError("Introspection __schema.types must be a list.")

    return [project_type_definition(raw_type) for raw_type in raw_types]


def project_type_definition(raw_type: Any) -> TypeDefinition:
    """Map one introspected type onto its typed definition."""
    if not isinstance(raw_type, Mapping):
        raise SchemaError("Introspected types must be objects.")
    name = _require_name(raw_type, "type")
    kind = raw_type.get("kind")

    if kind == TypeKind.SCALAR:
        return ScalarTypeDefinition(name=name)
    if kind == TypeKind.OBJECT:
        return ObjectTypeDefinition(
            name=name,
            interfaces=_interface_names(raw_type),
            fields=_field_definitions(raw_type, name),
        )
    if kind == TypeKind.INTERFACE:
        return InterfaceTypeDefinition(
            name=name,
            interfaces=_interface_names(raw_type),
            fields=_field_definitions(raw_type, name),
            possible_types=_possible_types(raw_type, name),
        )
    if kind == TypeKind.UNION:
        return UnionTypeDefinition(name=name, possible_types=_possible_types(raw_type, name))
    if kind == TypeKind.ENUM:
        values = tuple(
            _require_name(value, f"{name} enum value")
            for value in _sequence(raw_type.get("enumValues"), f"{name}.enumValues")
        )
        return EnumTypeDefinition(name=name, values=values)
    if kind == TypeKind.INPUT_OBJECT:
        input_fields = tuple(
            _input_value(value, name)
            for value in _sequence(raw_type.get("inputFields"), f"{name}.inputFields")
        )
        return InputObjectTypeDefinition(name=name, input_fields=input_fields)
    return OpaqueTypeDefinition(name=name, kind=str(kind))


def project_type_ref(raw_ref: Any, owner: str) -> TypeRef:
    """Map an introspection type reference, outermost wrapper first."""
    if not isinstance(raw_ref, Mapping):
        raise SchemaError(f"Type reference of {owner} must be an object.")
    kind = raw_ref.get("kind")
    if kind == TypeKind.NON_NULL:
        return NonNullTypeRef(of_type=project_type_ref(raw_ref.get("ofType"), owner))
    if kind == TypeKind.LIST:
        return ListTypeRef(of_type=project_type_ref(raw_ref.get("ofType"), owner))
    return NamedTypeRef(kind=str(kind), name=_require_name(raw_ref, f"{owner} type reference"))


def _field_definitions(raw_type: Mapping[str, Any], type_name: str) -> tuple[FieldDefinition, ...]:
    fields: list[FieldDefinition] = []
    for raw_field in _sequence(raw_type.get("fields"), f"{type_name}.fields"):
        field_name = _require_name(raw_field, f"{type_name} field")
        owner = f"{type_name}.{field_name}"
        args = tuple(
            _input_value(raw_arg, owner) for raw_arg in _sequence(raw_field.get("args"), owner)
        )
        fields.append(
            FieldDefinition(
                name=field_name,
                type_ref=project_type_ref(raw_field.get("type"), owner),
                args=args,
            )
        )
    return tuple(fields)


def _input_value(raw_value: Any, owner: str) -> InputValueDefinition:
    value_name = _require_name(raw_value, f"{owner} input value")
    return InputValueDefinition(
        name=value_name,
        type_ref=project_type_ref(raw_value.get("type"), f"{owner}.{value_name}"),
    )


def _interface_names(raw_type: Mapping[str, Any]) -> tuple[str, ...]:
    interfaces = raw_type.get("interfaces") or []
    return tuple(_require_name(item, "interface") for item in interfaces)


def _possible_types(raw_type: Mapping[str, Any], type_name: str) -> tuple[PossibleType, ...]:
    return tuple(
        PossibleType(kind=str(item.get("kind")), name=_require_name(item, f"{type_name} member"))
        for item in _sequence(raw_type.get("possibleTypes"), f"{type_name}.possibleTypes")
    )


def _sequence(value: Any, label: str) -> Sequence[Any]:
    if value is None:
        return ()
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise SchemaError(f"Introspection {label} must be a list.")
    return value


def _require_name(value: Any, label: str) -> str:
    if not isinstance(value, Mapping):
        raise SchemaError(f"Introspected {label} must be an object.")
    name = value.get("name")
    if not isinstance(name, str) or not name:
        raise SchemaError(f"Introspected {label} requires a name.")
    return name
