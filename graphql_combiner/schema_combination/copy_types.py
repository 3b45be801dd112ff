# Copyright 2026-present Kensho Technologies, LLC.
from typing import Callable, Dict, Optional

from ..global_utils import assert_set_equality
from ..type_graph.type_graph import TypeGraph
from ..type_graph.typedefs import (
    TYPE_DEFINITION_CLASSES,
    CompositeTypeDefinition,
    EnumTypeDefinition,
    EnumValueDefinition,
    InputTypeDefinition,
    NamedTypeDefinition,
    ObjectTypeDefinition,
    ScalarTypeDefinition,
    TypeCategory,
)
from ..type_references import canonicalize_type_reference
from .fields import copy_field
from .resolvers import ResolverIndex, clone_resolver
from .utils import DEFAULT_SETTINGS, CombinationSettings, UnknownTypeCategoryError


def get_type_category(type_definition: NamedTypeDefinition) -> TypeCategory:
    """Return the category of the type definition.

    Raises:
        UnknownTypeCategoryError if the value is not an object, input, enum or scalar type
        defined by this package
    """
    category = getattr(type(type_definition), "category", None)
    if category not in TYPE_DEFINITION_CLASSES or not isinstance(
        type_definition, TYPE_DEFINITION_CLASSES[category]
    ):
        raise UnknownTypeCategoryError(
            f"Expected an object, input, enum or scalar type definition, but got "
            f"{type(type_definition).__name__}: {type_definition!r}"
        )
    return category


def copy_enum_value(enum_value: EnumValueDefinition) -> EnumValueDefinition:
    """Return a copy of the enum member with the same value, description and metadata."""
    return EnumValueDefinition(
        value=enum_value.value,
        deprecation_reason=enum_value.deprecation_reason,
        description=enum_value.description,
        extensions=None if enum_value.extensions is None else dict(enum_value.extensions),
    )


def _copy_composite_contents(
    destination_type: CompositeTypeDefinition, source_type: CompositeTypeDefinition
) -> None:
    """Copy description, extensions, resolvers and fields shared by object and input types."""
    destination_type.description = source_type.description or ""
    destination_type.extensions = dict(source_type.extensions)

    for resolver_name, resolver in source_type.resolvers.items():
        clone_resolver(destination_type, resolver_name, resolver)

    source_index = ResolverIndex(source_type)
    for field_name in source_type.field_names():
        copy_field(destination_type, field_name, source_type, source_index)


def _copy_object_type(
    destination: TypeGraph, source_type: ObjectTypeDefinition, settings: CombinationSettings
) -> None:
    existing_type = destination.find(source_type.name)
    if source_type.name in settings.root_type_names and isinstance(
        existing_type, ObjectTypeDefinition
    ):
        destination_type = existing_type
    else:
        destination_type = destination.create_object_type(source_type.name)

    for interface in source_type.interfaces:
        destination_type.add_interface(canonicalize_type_reference(interface))
    _copy_composite_contents(destination_type, source_type)


def _copy_input_type(
    destination: TypeGraph, source_type: InputTypeDefinition, settings: CombinationSettings
) -> None:
    _copy_composite_contents(destination.create_input_type(source_type.name), source_type)


def _copy_enum_type(
    destination: TypeGraph, source_type: EnumTypeDefinition, settings: CombinationSettings
) -> None:
    destination_type = destination.create_enum_type(source_type.name)
    destination_type.description = source_type.description
    for value_name, enum_value in source_type.values.items():
        destination_type.set_value(value_name, copy_enum_value(enum_value))


def _copy_scalar_type(
    destination: TypeGraph, source_type: ScalarTypeDefinition, settings: CombinationSettings
) -> None:
    destination.create_scalar_type(source_type.name)


_COPY_HANDLERS: Dict[TypeCategory, Callable[..., None]] = {
    TypeCategory.OBJECT: _copy_object_type,
    TypeCategory.INPUT: _copy_input_type,
    TypeCategory.ENUM: _copy_enum_type,
    TypeCategory.SCALAR: _copy_scalar_type,
}
assert_set_equality(set(_COPY_HANDLERS), set(TypeCategory))


def copy_type(
    destination: TypeGraph,
    source_type: NamedTypeDefinition,
    settings: Optional[CombinationSettings] = None,
) -> None:
    """Deep-copy a type definition from a source graph into the destination graph.

    Exactly one new type named after the source type is created in the destination, except that
    root object types already present in the destination are reused. Every type reference in
    the copy is canonicalized. The source type is not modified.

    Args:
        destination: graph to create the copy in
        source_type: type definition to copy
        settings: combination settings; the defaults are used if None

    Raises:
        UnknownTypeCategoryError if the source type is not an object, input, enum or scalar type
    """
    if settings is None:
        settings = DEFAULT_SETTINGS

    category = get_type_category(source_type)
    _COPY_HANDLERS[category](destination, source_type, settings)
