"""Type notation tests."""

from __future__ import annotations

import pytest
from graphql_semver_bump.schema_management.schema_models import (
    InputValueDefinition,
    ListTypeRef,
    NamedTypeRef,
    NonNullTypeRef,
)
from graphql_semver_bump.schema_management.type_notation import (
    UnsupportedTypeRefError,
    args_notation,
    type_notation,
)


def _scalar(name: str) -> NamedTypeRef:
    return NamedTypeRef(kind="SCALAR", name=name)


def test_named_types_render_their_name() -> None:
    for kind in ("SCALAR", "UNION", "ENUM", "OBJECT", "INPUT_OBJECT"):
        assert type_notation(NamedTypeRef(kind=kind, name="Thing")) == "Thing"


def test_wrappers_render_outermost_first() -> None:
    non_null_list_of_nullable = NonNullTypeRef(ListTypeRef(_scalar("String")))
    list_of_non_null = ListTypeRef(NonNullTypeRef(_scalar("String")))

    assert type_notation(NonNullTypeRef(_scalar("ID"))) == "ID!"
    assert type_notation(non_null_list_of_nullable) == "[String]!"
    assert type_notation(list_of_non_null) == "[String!]"
    assert type_notation(NonNullTypeRef(ListTypeRef(list_of_non_null))) == "[[String!]]!"


def test_unknown_named_kind_raises_with_offending_reference() -> None:
    reference = NamedTypeRef(kind="MYSTERY", name="Widget")

    with pytest.raises(UnsupportedTypeRefError, match="MYSTERY") as excinfo:
        type_notation(ListTypeRef(reference))

    assert excinfo.value.type_ref == reference


def test_interface_typed_reference_has_no_notation() -> None:
    reference = NamedTypeRef(kind="INTERFACE", name="Node")

    with pytest.raises(UnsupportedTypeRefError, match="INTERFACE"):
        type_notation(NonNullTypeRef(reference))


def test_args_notation_is_empty_without_arguments() -> None:
    assert args_notation(()) == ""


def test_args_notation_keeps_argument_order() -> None:
    args = (
        InputValueDefinition(name="first", type_ref=_scalar("Int")),
        InputValueDefinition(name="after", type_ref=NonNullTypeRef(_scalar("String"))),
    )

    assert args_notation(args) == "(first: Int,after: String!) => "
    assert args_notation(tuple(reversed(args))) == "(after: String!,first: Int) => "
