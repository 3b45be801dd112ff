# Copyright 2026-present Kensho Technologies, LLC.
"""Type definitions making up a type graph.

Source graphs hand out these definitions read-only. Definitions inside a destination graph are
created empty and then populated incrementally while combining.
"""
from dataclasses import dataclass, field
from enum import Enum, unique
from typing import Any, Callable, ClassVar, Dict, List, Optional, Union

from graphql import GraphQLType
from graphql.language.ast import Node, TypeNode
from graphql.pyutils import Undefined


@unique
class TypeCategory(Enum):
    """The closed set of type definition categories a type graph may contain."""

    OBJECT = "object"
    INPUT = "input"
    ENUM = "enum"
    SCALAR = "scalar"


@dataclass(eq=False)
class NamedTypeDefinition:
    """Base class of every type definition: a named node of the type graph."""

    category: ClassVar[TypeCategory]

    name: str


# Anything that can name a (possibly list/non-null wrapped) type.
TypeReference = Union[str, GraphQLType, TypeNode, NamedTypeDefinition]

# Resolve and subscribe functions are carried around by reference and never invoked.
ResolveFunction = Callable[..., Any]


@dataclass
class ArgumentDefinition:
    """An argument of a field or resolver."""

    type: TypeReference
    default_value: Any = Undefined
    description: Optional[str] = None
    extensions: Optional[Dict[str, Any]] = None
    ast_node: Optional[Node] = None


@dataclass(eq=False)
class Resolver:
    """A named, reusable resolution unit that fields may be backed by.

    Resolvers are compared by identity: two resolvers are "the same" only if they are the same
    object. A resolver cloned into a destination type remembers the source resolver it was
    cloned from in its origin attribute.
    """

    name: Optional[str]
    type: TypeReference
    args: Dict[str, ArgumentDefinition] = field(default_factory=dict)
    resolve: Optional[ResolveFunction] = None
    origin: Optional["Resolver"] = field(default=None, repr=False)

    def get_arg_names(self) -> List[str]:
        """Return the names of the resolver's arguments, in declaration order."""
        return list(self.args)


@dataclass
class FieldDefinition:
    """A standard field: a typed slot with optional arguments and resolve/subscribe functions.

    Properties that are absent are None (or Undefined, for the default value of input fields),
    which is distinct from explicitly empty values like "" or {}.
    """

    type: TypeReference
    args: Optional[Dict[str, ArgumentDefinition]] = None
    resolve: Optional[ResolveFunction] = None
    subscribe: Optional[ResolveFunction] = None
    default_value: Any = Undefined
    description: Optional[str] = None
    deprecation_reason: Optional[str] = None
    extensions: Optional[Dict[str, Any]] = None
    ast_node: Optional[Node] = None


@dataclass
class ResolverFieldDefinition:
    """A field whose type, arguments and resolution are all given by a single resolver."""

    resolver: Resolver


AnyFieldDefinition = Union[FieldDefinition, ResolverFieldDefinition]


@dataclass(eq=False)
class CompositeTypeDefinition(NamedTypeDefinition):
    """Shared shape of object and input type definitions."""

    description: Optional[str] = None
    extensions: Dict[str, Any] = field(default_factory=dict)
    resolvers: Dict[str, Resolver] = field(default_factory=dict)
    fields: Dict[str, AnyFieldDefinition] = field(default_factory=dict)

    def field_names(self) -> List[str]:
        """Return the names of all fields, in declaration order."""
        return list(self.fields)

    def has_field(self, field_name: str) -> bool:
        return field_name in self.fields

    def get_field(self, field_name: str) -> Optional[AnyFieldDefinition]:
        """Return the field with the given name, or None if the type has no such field."""
        return self.fields.get(field_name)

    def set_field(self, field_name: str, field_definition: AnyFieldDefinition) -> None:
        self.fields[field_name] = field_definition

    def has_resolver(self, resolver_name: str) -> bool:
        return resolver_name in self.resolvers

    def get_resolver(self, resolver_name: str) -> Resolver:
        """Return the resolver registered under the given name, raising KeyError if missing."""
        return self.resolvers[resolver_name]

    def add_resolver(self, resolver: Resolver) -> Resolver:
        """Register the resolver under its own name and return it."""
        if resolver.name is None:
            raise AssertionError(f"Cannot register an unnamed resolver on type {self.name}.")
        self.resolvers[resolver.name] = resolver
        return resolver


@dataclass(eq=False)
class ObjectTypeDefinition(CompositeTypeDefinition):
    """An output object type."""

    category: ClassVar[TypeCategory] = TypeCategory.OBJECT

    interfaces: List[str] = field(default_factory=list)

    def add_interface(self, interface_name: str) -> None:
        """Add the interface name, unless the type already implements it."""
        if interface_name not in self.interfaces:
            self.interfaces.append(interface_name)


@dataclass(eq=False)
class InputTypeDefinition(CompositeTypeDefinition):
    """An input object type."""

    category: ClassVar[TypeCategory] = TypeCategory.INPUT


@dataclass
class EnumValueDefinition:
    """A single member of an enum type."""

    value: Any = None
    description: Optional[str] = None
    deprecation_reason: Optional[str] = None
    extensions: Optional[Dict[str, Any]] = None


@dataclass(eq=False)
class EnumTypeDefinition(NamedTypeDefinition):
    """An enum type, with its members in declaration order."""

    category: ClassVar[TypeCategory] = TypeCategory.ENUM

    description: Optional[str] = None
    values: Dict[str, EnumValueDefinition] = field(default_factory=dict)

    def has_value(self, value_name: str) -> bool:
        return value_name in self.values

    def set_value(self, value_name: str, value_definition: EnumValueDefinition) -> None:
        self.values[value_name] = value_definition


@dataclass(eq=False)
class ScalarTypeDefinition(NamedTypeDefinition):
    """A scalar type. Scalars have no structure beyond their name."""

    category: ClassVar[TypeCategory] = TypeCategory.SCALAR


TypeDefinition = Union[
    ObjectTypeDefinition, InputTypeDefinition, EnumTypeDefinition, ScalarTypeDefinition
]

TYPE_DEFINITION_CLASSES = {
    TypeCategory.OBJECT: ObjectTypeDefinition,
    TypeCategory.INPUT: InputTypeDefinition,
    TypeCategory.ENUM: EnumTypeDefinition,
    TypeCategory.SCALAR: ScalarTypeDefinition,
}
