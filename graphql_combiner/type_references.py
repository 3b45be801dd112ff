# Copyright 2026-present Kensho Technologies, LLC.
"""Canonical textual form of type references, e.g. "Foo", "[Foo]", "Foo!", "[Foo!]!"."""
from graphql import GraphQLList, GraphQLNamedType, GraphQLNonNull
from graphql.error import GraphQLSyntaxError
from graphql.language import parse_type
from graphql.language.ast import ListTypeNode, NamedTypeNode, NonNullTypeNode, TypeNode

from .exceptions import GraphQLParsingError
from .type_graph.typedefs import NamedTypeDefinition, TypeReference


def canonicalize_type_reference(reference: TypeReference) -> str:
    """Return the canonical string form of a type reference.

    Accepts an already-canonical string (returned unmodified), graphql-core list/non-null
    wrappers and named types, graphql-core AST type nodes, and type definitions from this package.
    Wrappers may be nested arbitrarily deep.

    Args:
        reference: the type reference to canonicalize

    Returns:
        canonical string form of the reference

    Raises:
        AssertionError if the reference is not of any supported kind
    """
    if isinstance(reference, str):
        return reference
    elif isinstance(reference, GraphQLNonNull):
        return canonicalize_type_reference(reference.of_type) + "!"
    elif isinstance(reference, GraphQLList):
        return "[" + canonicalize_type_reference(reference.of_type) + "]"
    elif isinstance(reference, NonNullTypeNode):
        return canonicalize_type_reference(reference.type) + "!"
    elif isinstance(reference, ListTypeNode):
        return "[" + canonicalize_type_reference(reference.type) + "]"
    elif isinstance(reference, NamedTypeNode):
        return reference.name.value
    elif isinstance(reference, (GraphQLNamedType, NamedTypeDefinition)):
        return reference.name
    else:
        raise AssertionError(
            f"Received a value that is not a recognized type reference: {reference!r}"
        )


def parse_type_reference(reference_string: str) -> TypeNode:
    """Parse a textual type reference into its AST form, reraising GraphQL library errors."""
    try:
        return parse_type(reference_string, no_location=True)
    except GraphQLSyntaxError as e:
        raise GraphQLParsingError(e) from e


def get_named_type_name(reference: TypeReference) -> str:
    """Return the name of the named type at the core of a possibly-wrapped type reference."""
    return canonicalize_type_reference(reference).strip("[]!")
