# Copyright 2026-present Kensho Technologies, LLC.
from dataclasses import dataclass
from enum import Enum, unique
from typing import Callable, FrozenSet, Tuple, Union

from ..exceptions import GraphQLCombinerError
from ..type_graph.typedefs import NamedTypeDefinition, TypeDefinition


class MergeError(GraphQLCombinerError):
    """Parent of all errors that abort combining two type graphs.

    Every merge error carries a short machine-readable kind, e.g. "type-mismatch".
    """

    kind: str = "merge-error"


class TypeMismatchError(MergeError):
    """Raised when attempting to merge two type definitions of different categories."""

    kind = "type-mismatch"


class ScalarMismatchError(MergeError):
    """Raised when attempting to merge two scalar types with different names."""

    kind = "scalar-mismatch"


class ArgumentMergeUnsupportedError(MergeError):
    """Raised when a field defined on both merge sides has differing argument lists.

    Reconciling argument types or default values across the two sides is not supported: picking
    one side would silently change the API seen by clients of the other.
    """

    kind = "arg-merge-unsupported"


class UnknownTypeCategoryError(MergeError):
    """Raised when encountering a value that is not an object, input, enum or scalar type."""

    kind = "unknown-type-category"


@unique
class MergePrecedence(Enum):
    """Which side of a structural merge wins names, values and metadata on collisions."""

    FIRST = "first"
    SECOND = "second"


DEFAULT_BUILTIN_SCALAR_NAMES: FrozenSet[str] = frozenset(
    {"String", "Int", "Float", "ID", "Boolean"}
)
DEFAULT_ROOT_TYPE_NAMES: FrozenSet[str] = frozenset({"Query", "Mutation", "Subscription"})


@dataclass(frozen=True)
class CombinationSettings:
    """Configuration of a single combine operation."""

    # Type names never copied or merged, since every graph is assumed to provide them.
    builtin_scalar_names: FrozenSet[str] = DEFAULT_BUILTIN_SCALAR_NAMES

    # Object types that may already exist in the destination graph and are then reused.
    root_type_names: FrozenSet[str] = DEFAULT_ROOT_TYPE_NAMES

    precedence: MergePrecedence = MergePrecedence.SECOND

    def order_by_precedence(
        self, first_type: TypeDefinition, second_type: TypeDefinition
    ) -> Tuple[TypeDefinition, TypeDefinition]:
        """Return the two types as a (losing, winning) pair."""
        if self.precedence == MergePrecedence.SECOND:
            return first_type, second_type
        elif self.precedence == MergePrecedence.FIRST:
            return second_type, first_type
        else:
            raise AssertionError(f"Unreachable code reached: {self.precedence}")


DEFAULT_SETTINGS = CombinationSettings()


# Given the first and second graph's definitions of the same name, return True to merge them,
# a type definition to copy verbatim, or a falsy value to leave the name out of the result.
ConflictPolicy = Callable[
    [TypeDefinition, TypeDefinition], Union[bool, None, NamedTypeDefinition]
]


def always_merge(first_type: TypeDefinition, second_type: TypeDefinition) -> bool:
    """Conflict policy merging every pair of same-named types."""
    return True


def prefer_first(first_type: TypeDefinition, second_type: TypeDefinition) -> TypeDefinition:
    """Conflict policy keeping the first graph's definition on every conflict."""
    return first_type


def prefer_second(first_type: TypeDefinition, second_type: TypeDefinition) -> TypeDefinition:
    """Conflict policy keeping the second graph's definition on every conflict."""
    return second_type


def skip_conflicts(first_type: TypeDefinition, second_type: TypeDefinition) -> bool:
    """Conflict policy leaving every conflicting name out of the combined graph."""
    return False
