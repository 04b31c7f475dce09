"""Canonical string notation of type references and argument lists."""

from __future__ import annotations

from collections.abc import Sequence

from .schema_models import (
    InputValueDefinition,
    ListTypeRef,
    NamedTypeRef,
    NonNullTypeRef,
    TypeKind,
    TypeRef,
)

NAMED_KINDS = frozenset(
    kind.value
    for kind in (
        TypeKind.SCALAR,
        TypeKind.UNION,
        TypeKind.ENUM,
        TypeKind.OBJECT,
        TypeKind.INPUT_OBJECT,
    )
)


class UnsupportedTypeRefError(Exception):
    """Raised when a type reference names a kind without a notation."""

    def __init__(self, type_ref: NamedTypeRef) -> None:
        super().__init__(f"Unsupported field type kind: {type_ref.kind} ({type_ref.name})")
        self.type_ref = type_ref


def type_notation(type_ref: TypeRef) -> str:
    """Render `type_ref` so that equal shapes render equal strings.

    `String!` for a non-null scalar, `[User]` for a list of objects and so on.
    """
    if isinstance(type_ref, NonNullTypeRef):
        return type_notation(type_ref.of_type) + "!"
    if isinstance(type_ref, ListTypeRef):
        return "[" + type_notation(type_ref.of_type) + "]"
    if type_ref.kind in NAMED_KINDS:
        return type_ref.name
    raise UnsupportedTypeRefError(type_ref)


def args_notation(args: Sequence[InputValueDefinition]) -> str:
    """Render an argument list as a `(name: Type,...) => ` prefix, or nothing."""
    if not args:
        return ""
    rendered = ",".join(f"{arg.name}: {type_notation(arg.type_ref)}" for arg in args)
    return f"({rendered}) => "
