# Copyright 2026-present Kensho Technologies, LLC.
from typing import Any, Dict, Optional, Sequence, Tuple

from ..global_utils import merge_extensions
from ..type_graph.typedefs import (
    AnyFieldDefinition,
    ArgumentDefinition,
    CompositeTypeDefinition,
    FieldDefinition,
    ResolverFieldDefinition,
)
from ..type_references import canonicalize_type_reference
from .resolvers import ResolverIndex, clone_arguments, find_or_clone_resolver
from .utils import ArgumentMergeUnsupportedError


def _clone_field_definition(
    destination_type: CompositeTypeDefinition,
    field_definition: AnyFieldDefinition,
    source_indexes: Sequence[ResolverIndex],
    description: Optional[str],
    extensions: Optional[Dict[str, Any]],
) -> AnyFieldDefinition:
    """Build the destination counterpart of a field, using the given description and extensions.

    Description and extensions only apply to standard fields: a resolver-backed field takes
    everything from its resolver.
    """
    if isinstance(field_definition, ResolverFieldDefinition):
        return ResolverFieldDefinition(
            find_or_clone_resolver(destination_type, field_definition.resolver, source_indexes)
        )
    elif isinstance(field_definition, FieldDefinition):
        return FieldDefinition(
            type=canonicalize_type_reference(field_definition.type),
            args=clone_arguments(field_definition.args),
            resolve=field_definition.resolve,
            subscribe=field_definition.subscribe,
            default_value=field_definition.default_value,
            description=description,
            deprecation_reason=field_definition.deprecation_reason,
            extensions=extensions,
            ast_node=field_definition.ast_node,
        )
    else:
        raise AssertionError(
            f"Unreachable code reached: field on type {destination_type.name} is neither a "
            f"standard nor a resolver-backed field: {field_definition!r}"
        )


def copy_field(
    destination_type: CompositeTypeDefinition,
    field_name: str,
    source_type: CompositeTypeDefinition,
    source_index: ResolverIndex,
) -> None:
    """Copy a single field verbatim from the source type into the destination type.

    Args:
        destination_type: type to add the field to
        field_name: name of the field to copy
        source_type: type currently holding the field
        source_index: resolver index of the source type
    """
    field_definition = source_type.get_field(field_name)
    if field_definition is None:
        raise AssertionError(f"Type {source_type.name} unexpectedly has no field {field_name}.")

    extensions = None
    description = None
    if isinstance(field_definition, FieldDefinition):
        description = field_definition.description
        if field_definition.extensions is not None:
            extensions = dict(field_definition.extensions)

    destination_type.set_field(
        field_name,
        _clone_field_definition(
            destination_type, field_definition, [source_index], description, extensions
        ),
    )


def _get_argument_shape(
    args: Optional[Dict[str, ArgumentDefinition]]
) -> Dict[str, Tuple[str, Any]]:
    """Return a comparable description of argument names, types and default values."""
    return {
        arg_name: (canonicalize_type_reference(arg.type), arg.default_value)
        for arg_name, arg in (args or {}).items()
    }


def merge_fields(
    destination_type: CompositeTypeDefinition,
    field_name: str,
    losing_type: CompositeTypeDefinition,
    winning_type: CompositeTypeDefinition,
    losing_index: ResolverIndex,
    winning_index: ResolverIndex,
) -> None:
    """Merge the same-named field of the losing and winning types into the destination type.

    If only one side defines the field, it is copied from that side. Otherwise the winning side's
    field is the template. For standard fields, the description is the winning side's if
    non-empty and the losing side's otherwise, and extensions are merged with the winning side
    overwriting the losing side. For resolver-backed fields, the resolver is looked up in the
    winning side's resolvers first and the losing side's second.

    Raises:
        ArgumentMergeUnsupportedError if both sides define the field as a standard field with
        different argument names, types or default values
    """
    losing_field = losing_type.get_field(field_name)
    winning_field = winning_type.get_field(field_name)

    if winning_field is None:
        copy_field(destination_type, field_name, losing_type, losing_index)
        return
    if losing_field is None:
        copy_field(destination_type, field_name, winning_type, winning_index)
        return

    description = None
    extensions = None
    if isinstance(winning_field, FieldDefinition):
        losing_description = None
        losing_extensions = None
        if isinstance(losing_field, FieldDefinition):
            if _get_argument_shape(losing_field.args) != _get_argument_shape(winning_field.args):
                raise ArgumentMergeUnsupportedError(
                    f'Field "{field_name}" of type "{winning_type.name}" is defined with '
                    f"different arguments on both sides of the merge, and merging arguments is "
                    f"not supported. Arguments on the one side: "
                    f"{_get_argument_shape(losing_field.args)}, on the other side: "
                    f"{_get_argument_shape(winning_field.args)}."
                )
            losing_description = losing_field.description
            losing_extensions = losing_field.extensions

        description = winning_field.description or losing_description or ""
        extensions = merge_extensions(losing_extensions, winning_field.extensions)

    destination_type.set_field(
        field_name,
        _clone_field_definition(
            destination_type,
            winning_field,
            [winning_index, losing_index],
            description,
            extensions,
        ),
    )
