# Copyright 2026-present Kensho Technologies, LLC.
from itertools import chain
from typing import Callable, Dict, Optional

import funcy

from ..global_utils import assert_set_equality, merge_extensions
from ..type_graph.type_graph import TypeGraph
from ..type_graph.typedefs import (
    CompositeTypeDefinition,
    EnumTypeDefinition,
    InputTypeDefinition,
    NamedTypeDefinition,
    ObjectTypeDefinition,
    ScalarTypeDefinition,
    TypeCategory,
)
from ..type_references import canonicalize_type_reference
from .copy_types import copy_enum_value, get_type_category
from .fields import merge_fields
from .resolvers import ResolverIndex, clone_resolver
from .utils import DEFAULT_SETTINGS, CombinationSettings, ScalarMismatchError, TypeMismatchError


def _merge_composite_contents(
    destination_type: CompositeTypeDefinition,
    losing_type: CompositeTypeDefinition,
    winning_type: CompositeTypeDefinition,
) -> None:
    """Merge description, extensions, resolvers and fields shared by object and input types."""
    destination_type.description = winning_type.description or losing_type.description or ""
    destination_type.extensions = merge_extensions(losing_type.extensions, winning_type.extensions)

    for resolver_name, resolver in winning_type.resolvers.items():
        clone_resolver(destination_type, resolver_name, resolver)
    for resolver_name, resolver in losing_type.resolvers.items():
        if not destination_type.has_resolver(resolver_name):
            clone_resolver(destination_type, resolver_name, resolver)

    losing_index = ResolverIndex(losing_type)
    winning_index = ResolverIndex(winning_type)
    for field_name in losing_type.field_names():
        merge_fields(
            destination_type, field_name, losing_type, winning_type, losing_index, winning_index
        )
    for field_name in winning_type.field_names():
        if not destination_type.has_field(field_name):
            merge_fields(
                destination_type,
                field_name,
                losing_type,
                winning_type,
                losing_index,
                winning_index,
            )


def _merge_object_types(
    destination: TypeGraph, losing_type: ObjectTypeDefinition, winning_type: ObjectTypeDefinition
) -> None:
    destination_type = destination.create_object_type(winning_type.name)

    interface_names = funcy.ldistinct(
        canonicalize_type_reference(interface)
        for interface in chain(losing_type.interfaces, winning_type.interfaces)
    )
    for interface_name in interface_names:
        destination_type.add_interface(interface_name)

    _merge_composite_contents(destination_type, losing_type, winning_type)


def _merge_input_types(
    destination: TypeGraph,
    losing_type: InputTypeDefinition,
    winning_type: InputTypeDefinition,
) -> None:
    destination_type = destination.create_input_type(winning_type.name)
    _merge_composite_contents(destination_type, losing_type, winning_type)


def _merge_enum_types(
    destination: TypeGraph, losing_type: EnumTypeDefinition, winning_type: EnumTypeDefinition
) -> None:
    destination_type = destination.create_enum_type(winning_type.name)
    destination_type.description = winning_type.description or losing_type.description

    for value_name, enum_value in winning_type.values.items():
        destination_type.set_value(value_name, copy_enum_value(enum_value))
    for value_name, enum_value in losing_type.values.items():
        if not destination_type.has_value(value_name):
            destination_type.set_value(value_name, copy_enum_value(enum_value))


def _merge_scalar_types(
    destination: TypeGraph, losing_type: ScalarTypeDefinition, winning_type: ScalarTypeDefinition
) -> None:
    if losing_type.name != winning_type.name:
        raise ScalarMismatchError(
            f'Cannot merge scalar types with different names "{losing_type.name}" and '
            f'"{winning_type.name}". Choose one of them with the conflict policy instead.'
        )
    destination.create_scalar_type(winning_type.name)


_MERGE_HANDLERS: Dict[TypeCategory, Callable[..., None]] = {
    TypeCategory.OBJECT: _merge_object_types,
    TypeCategory.INPUT: _merge_input_types,
    TypeCategory.ENUM: _merge_enum_types,
    TypeCategory.SCALAR: _merge_scalar_types,
}
assert_set_equality(set(_MERGE_HANDLERS), set(TypeCategory))


def merge_types(
    destination: TypeGraph,
    first_type: NamedTypeDefinition,
    second_type: NamedTypeDefinition,
    settings: Optional[CombinationSettings] = None,
) -> None:
    """Merge two type definitions of the same category into one new destination type.

    One of the two types wins, as given by the precedence in the settings: by default, the second
    type. The merged type is named after the winning type. Object and input types get the union
    of both sides' interfaces, resolvers and fields; enums get the union of both sides' members.
    On name collisions, the winning side's resolver, member value or field template is used.
    Scalars can only be merged with scalars of the same name.

    Args:
        destination: graph to create the merged type in
        first_type: definition from the first graph
        second_type: definition from the second graph
        settings: combination settings; the defaults are used if None

    Raises:
        - UnknownTypeCategoryError if either input is not an object, input, enum or scalar type
        - TypeMismatchError if the inputs are of different categories
        - ScalarMismatchError if the inputs are scalars with different names
        - ArgumentMergeUnsupportedError if some field is defined on both sides with different
          arguments
    """
    if settings is None:
        settings = DEFAULT_SETTINGS

    first_category = get_type_category(first_type)
    second_category = get_type_category(second_type)
    if first_category != second_category:
        raise TypeMismatchError(
            f'Cannot merge type "{first_type.name}" of category {first_category.value} with '
            f'type "{second_type.name}" of category {second_category.value}.'
        )

    losing_type, winning_type = settings.order_by_precedence(first_type, second_type)
    _MERGE_HANDLERS[first_category](destination, losing_type, winning_type)
