# Copyright 2026-present Kensho Technologies, LLC.
"""Commonly-used functions and data types from this package."""
from typing import Optional

from .exceptions import GraphQLCombinerError, GraphQLParsingError, SchemaStructureError  # noqa
from .schema_combination import (  # noqa
    ArgumentMergeUnsupportedError,
    CombinationSettings,
    ConflictPolicy,
    MergeError,
    MergePrecedence,
    ScalarMismatchError,
    TypeMismatchError,
    UnknownTypeCategoryError,
    always_merge,
    combine_type_graphs,
    copy_type,
    merge_types,
    prefer_first,
    prefer_second,
    skip_conflicts,
)
from .type_graph import (  # noqa
    ArgumentDefinition,
    EnumTypeDefinition,
    EnumValueDefinition,
    FieldDefinition,
    InputTypeDefinition,
    ObjectTypeDefinition,
    Resolver,
    ResolverFieldDefinition,
    ScalarTypeDefinition,
    TypeCategory,
    TypeDefinition,
    TypeGraph,
)
from .type_graph.schema_conversion import (  # noqa
    build_schema_from_type_graph,
    print_type_graph,
    type_graph_from_schema,
    type_graph_from_sdl,
)
from .type_references import canonicalize_type_reference, parse_type_reference  # noqa


__package_name__ = "graphql-combiner"
__version__ = "1.0.0"


def combine_schemas(
    first_schema_string: str,
    second_schema_string: str,
    conflict_policy: ConflictPolicy = always_merge,
    settings: Optional[CombinationSettings] = None,
) -> str:
    """Combine two schemas given in schema definition language, returning the combined schema.

    Args:
        first_schema_string: str, the first schema to combine
        second_schema_string: str, the second schema to combine
        conflict_policy: decides what to do with each type name defined in both schemas; by
                         default, both definitions are merged
        settings: combination settings; the defaults are used if None

    Returns:
        str, the combined schema in schema definition language
    """
    combined_graph = combine_type_graphs(
        type_graph_from_sdl(first_schema_string),
        type_graph_from_sdl(second_schema_string),
        conflict_policy=conflict_policy,
        settings=settings,
    )
    return print_type_graph(combined_graph)
