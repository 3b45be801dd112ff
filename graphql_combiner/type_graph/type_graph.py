# Copyright 2026-present Kensho Technologies, LLC.
from typing import Dict, Iterator, List, Optional

from .typedefs import (
    EnumTypeDefinition,
    InputTypeDefinition,
    ObjectTypeDefinition,
    ScalarTypeDefinition,
    TypeDefinition,
)


class TypeGraph:
    """An ordered mapping of type name to type definition.

    Iteration order is insertion order, which makes every traversal of a graph deterministic.
    Each name may only be inserted once.
    """

    def __init__(self) -> None:
        """Create an empty type graph."""
        self._types: Dict[str, TypeDefinition] = {}

    def type_names(self) -> List[str]:
        """Return the names of all types in the graph, in insertion order."""
        return list(self._types)

    def has(self, type_name: str) -> bool:
        return type_name in self._types

    def get(self, type_name: str) -> TypeDefinition:
        """Return the type with the given name, raising KeyError if there is no such type."""
        return self._types[type_name]

    def find(self, type_name: str) -> Optional[TypeDefinition]:
        """Return the type with the given name, or None if there is no such type."""
        return self._types.get(type_name)

    def add(self, type_definition: TypeDefinition) -> TypeDefinition:
        """Insert an already-constructed type definition and return it."""
        if type_definition.name in self._types:
            raise ValueError(
                f'Type "{type_definition.name}" already exists in the type graph and cannot be '
                f"created again."
            )
        self._types[type_definition.name] = type_definition
        return type_definition

    def create_object_type(self, type_name: str) -> ObjectTypeDefinition:
        """Create an empty object type with the given name, insert it and return it."""
        new_type = ObjectTypeDefinition(type_name)
        self.add(new_type)
        return new_type

    def create_input_type(self, type_name: str) -> InputTypeDefinition:
        """Create an empty input type with the given name, insert it and return it."""
        new_type = InputTypeDefinition(type_name)
        self.add(new_type)
        return new_type

    def create_enum_type(self, type_name: str) -> EnumTypeDefinition:
        """Create an enum type with no members, insert it and return it."""
        new_type = EnumTypeDefinition(type_name)
        self.add(new_type)
        return new_type

    def create_scalar_type(self, type_name: str) -> ScalarTypeDefinition:
        """Create a scalar type with the given name, insert it and return it."""
        new_type = ScalarTypeDefinition(type_name)
        self.add(new_type)
        return new_type

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._types

    def __iter__(self) -> Iterator[TypeDefinition]:
        return iter(list(self._types.values()))

    def __len__(self) -> int:
        return len(self._types)

    def __repr__(self) -> str:
        return f"TypeGraph({self.type_names()!r})"
