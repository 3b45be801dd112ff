# Copyright 2026-present Kensho Technologies, LLC.
from itertools import chain
import logging
from typing import Optional, Set

from ..type_graph.type_graph import TypeGraph
from .copy_types import copy_type
from .merge_types import merge_types
from .utils import DEFAULT_SETTINGS, CombinationSettings, ConflictPolicy, always_merge


logger = logging.getLogger(__name__)


def combine_type_graphs(
    first_graph: TypeGraph,
    second_graph: TypeGraph,
    conflict_policy: ConflictPolicy = always_merge,
    settings: Optional[CombinationSettings] = None,
) -> TypeGraph:
    """Combine two type graphs into a new, self-consistent type graph.

    Type names are visited in the first graph's order, then in the second graph's order. Built-in
    scalars are never copied. A name defined in only one graph is copied from that graph. For a
    name defined in both graphs, the conflict policy is called once with the first and second
    graph's definitions, and:
        - if it returns True, the two definitions are merged;
        - if it returns any other truthy value, that type definition is copied;
        - if it returns a falsy value, the name is left out of the combined graph.

    Neither input graph is modified. Every type reference in the result is in canonical string
    form, so the result does not reference types of either input graph.

    Args:
        first_graph: the first graph to combine
        second_graph: the second graph to combine. Unless the settings say otherwise, its
                      definitions win over the first graph's when merging
        conflict_policy: decides what to do with each name defined in both graphs. Exceptions it
                         raises are propagated unchanged
        settings: combination settings; the defaults are used if None

    Returns:
        the combined type graph

    Raises:
        MergeError if some pair of definitions cannot be merged, or if some definition is not an
        object, input, enum or scalar type. No partial result is returned.
    """
    if settings is None:
        settings = DEFAULT_SETTINGS

    destination = TypeGraph()
    visited_names: Set[str] = set()

    for type_name in chain(first_graph.type_names(), second_graph.type_names()):
        if type_name in settings.builtin_scalar_names:
            continue
        if type_name in visited_names or destination.has(type_name):
            continue
        visited_names.add(type_name)

        if first_graph.has(type_name) and second_graph.has(type_name):
            first_type = first_graph.get(type_name)
            second_type = second_graph.get(type_name)
            decision = conflict_policy(first_type, second_type)

            if decision is True:
                logger.debug("Merging both definitions of type %s.", type_name)
                merge_types(destination, first_type, second_type, settings)
            elif decision:
                chosen_name = getattr(decision, "name", None)
                if chosen_name is not None and destination.has(chosen_name):
                    logger.debug(
                        "Type %s chosen for conflicting name %s already exists, skipping it.",
                        chosen_name,
                        type_name,
                    )
                    continue
                logger.debug("Copying the chosen definition of conflicting type %s.", type_name)
                copy_type(destination, decision, settings)
            else:
                logger.debug("Leaving conflicting type %s out of the combined graph.", type_name)
        elif second_graph.has(type_name):
            copy_type(destination, second_graph.get(type_name), settings)
        else:
            copy_type(destination, first_graph.get(type_name), settings)

    logger.debug(
        "Combined %d and %d types into %d types.",
        len(first_graph),
        len(second_graph),
        len(destination),
    )
    return destination
