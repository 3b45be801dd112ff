# Copyright 2026-present Kensho Technologies, LLC.
import logging
from typing import Dict, Optional, Sequence

import funcy

from ..type_graph.typedefs import (
    ArgumentDefinition,
    CompositeTypeDefinition,
    Resolver,
    ResolverFieldDefinition,
)
from ..type_references import canonicalize_type_reference


logger = logging.getLogger(__name__)


class ResolverIndex:
    """Map each resolver object of a source type back to the name it is registered under.

    Built once per source type, so that recovering a resolver's name from a field that references
    it does not require scanning the type's resolvers. If the same resolver object is registered
    under several names, the first such name wins.
    """

    def __init__(self, source_type: CompositeTypeDefinition) -> None:
        """Index all resolvers of the given type."""
        self.source_type = source_type
        self._names_by_identity: Dict[int, str] = {}
        for resolver_name, resolver in source_type.resolvers.items():
            self._names_by_identity.setdefault(id(resolver), resolver_name)

    def name_of(self, resolver: Resolver) -> Optional[str]:
        """Return the name the exact given resolver object is registered under, if any."""
        return self._names_by_identity.get(id(resolver))


def clone_arguments(
    args: Optional[Dict[str, ArgumentDefinition]]
) -> Optional[Dict[str, ArgumentDefinition]]:
    """Copy an argument mapping, canonicalizing each argument's type reference.

    Absent argument mappings stay absent.
    """
    if args is None:
        return None

    return {
        arg_name: ArgumentDefinition(
            type=canonicalize_type_reference(arg.type),
            default_value=arg.default_value,
            description=arg.description,
            extensions=None if arg.extensions is None else dict(arg.extensions),
            ast_node=arg.ast_node,
        )
        for arg_name, arg in args.items()
    }


def clone_resolver(
    destination_type: CompositeTypeDefinition, resolver_name: Optional[str], resolver: Resolver
) -> Resolver:
    """Clone the resolver into the destination type.

    The clone's output type and argument types are canonicalized. The resolve function is carried
    over by reference. If a name is given, the clone is registered on the destination type under
    that name; otherwise the clone is not registered and is only reachable through the field
    that references it.

    Args:
        destination_type: type the clone belongs to
        resolver_name: name to register the clone under, or None
        resolver: the resolver to clone

    Returns:
        the new resolver
    """
    resolver_clone = Resolver(
        name=resolver_name,
        type=canonicalize_type_reference(resolver.type),
        args=clone_arguments(resolver.args) or {},
        resolve=resolver.resolve,
        origin=resolver,
    )
    if resolver_name is not None:
        destination_type.add_resolver(resolver_clone)
    return resolver_clone


def _find_unregistered_clone(
    destination_type: CompositeTypeDefinition, resolver: Resolver
) -> Optional[Resolver]:
    """Return the unregistered clone of the resolver already backing a destination field, if any."""
    return funcy.first(
        field_definition.resolver
        for field_definition in destination_type.fields.values()
        if isinstance(field_definition, ResolverFieldDefinition)
        and field_definition.resolver.name is None
        and field_definition.resolver.origin is resolver
    )


def _reuse_or_clone_unregistered(
    destination_type: CompositeTypeDefinition, resolver: Resolver
) -> Resolver:
    existing_clone = _find_unregistered_clone(destination_type, resolver)
    if existing_clone is not None:
        return existing_clone
    return clone_resolver(destination_type, None, resolver)


def find_or_clone_resolver(
    destination_type: CompositeTypeDefinition,
    resolver: Resolver,
    source_indexes: Sequence[ResolverIndex],
) -> Resolver:
    """Return the destination resolver standing in for the given source resolver.

    The source indexes are searched in order for the name of the resolver. A destination resolver
    registered under that name is reused only if it was cloned from this very resolver object.
    If the name is known but not yet used in the destination, the resolver is cloned under it.
    Otherwise the resolver gets an unregistered clone, which is shared by every destination field
    backed by the same source resolver.
    """
    resolver_name = funcy.first(funcy.keep(lambda index: index.name_of(resolver), source_indexes))

    if resolver_name is None:
        logger.debug(
            "Resolver %r is not registered on any source type of %s.",
            resolver.name,
            destination_type.name,
        )
        return _reuse_or_clone_unregistered(destination_type, resolver)

    if not destination_type.has_resolver(resolver_name):
        return clone_resolver(destination_type, resolver_name, resolver)

    existing_resolver = destination_type.get_resolver(resolver_name)
    if existing_resolver.origin is resolver:
        return existing_resolver

    logger.debug(
        "Resolver name %s on %s is taken by a different resolver.",
        resolver_name,
        destination_type.name,
    )
    return _reuse_or_clone_unregistered(destination_type, resolver)
