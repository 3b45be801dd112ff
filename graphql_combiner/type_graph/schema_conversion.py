# Copyright 2026-present Kensho Technologies, LLC.
"""Conversion between graphql-core schemas and type graphs.

Type graphs can only represent object, input, enum and scalar types, so schemas containing
interface or union types cannot be converted. In the other direction, every type reference of the
type graph is resolved by name, so type graphs with cyclic references convert without issue.
"""
from typing import Any, Dict, List, Optional

from graphql import (
    GraphQLArgument,
    GraphQLEnumType,
    GraphQLEnumValue,
    GraphQLError,
    GraphQLField,
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLList,
    GraphQLNamedType,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLScalarType,
    GraphQLSchema,
    GraphQLType,
    build_ast_schema,
    print_schema,
    specified_scalar_types,
)
from graphql.language.ast import ListTypeNode, NonNullTypeNode, TypeNode

from ..ast_manipulation import safe_parse_graphql
from ..exceptions import SchemaStructureError
from ..type_references import (
    canonicalize_type_reference,
    get_named_type_name,
    parse_type_reference,
)
from .type_graph import TypeGraph
from .typedefs import (
    ArgumentDefinition,
    CompositeTypeDefinition,
    EnumTypeDefinition,
    EnumValueDefinition,
    FieldDefinition,
    InputTypeDefinition,
    ObjectTypeDefinition,
    ResolverFieldDefinition,
    ScalarTypeDefinition,
    TypeDefinition,
    TypeReference,
)


def _get_optional_extensions(extensions: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Return a copy of the extensions, or None if there are none."""
    return dict(extensions) if extensions else None


def _convert_graphql_arguments(
    arguments: Dict[str, GraphQLArgument]
) -> Dict[str, ArgumentDefinition]:
    return {
        arg_name: ArgumentDefinition(
            type=argument.type,
            default_value=argument.default_value,
            description=argument.description,
            extensions=_get_optional_extensions(argument.extensions),
            ast_node=argument.ast_node,
        )
        for arg_name, argument in arguments.items()
    }


def _convert_graphql_type(graphql_type: GraphQLNamedType) -> TypeDefinition:
    """Convert a single named graphql-core type into the equivalent type definition."""
    if isinstance(graphql_type, GraphQLObjectType):
        return ObjectTypeDefinition(
            graphql_type.name,
            description=graphql_type.description,
            extensions=dict(graphql_type.extensions or {}),
            interfaces=[interface.name for interface in graphql_type.interfaces],
            fields={
                field_name: FieldDefinition(
                    type=field.type,
                    args=_convert_graphql_arguments(field.args),
                    resolve=field.resolve,
                    subscribe=field.subscribe,
                    description=field.description,
                    deprecation_reason=field.deprecation_reason,
                    extensions=_get_optional_extensions(field.extensions),
                    ast_node=field.ast_node,
                )
                for field_name, field in graphql_type.fields.items()
            },
        )
    elif isinstance(graphql_type, GraphQLInputObjectType):
        return InputTypeDefinition(
            graphql_type.name,
            description=graphql_type.description,
            extensions=dict(graphql_type.extensions or {}),
            fields={
                field_name: FieldDefinition(
                    type=field.type,
                    default_value=field.default_value,
                    description=field.description,
                    deprecation_reason=field.deprecation_reason,
                    extensions=_get_optional_extensions(field.extensions),
                    ast_node=field.ast_node,
                )
                for field_name, field in graphql_type.fields.items()
            },
        )
    elif isinstance(graphql_type, GraphQLEnumType):
        return EnumTypeDefinition(
            graphql_type.name,
            description=graphql_type.description,
            values={
                value_name: EnumValueDefinition(
                    value=enum_value.value,
                    description=enum_value.description,
                    deprecation_reason=enum_value.deprecation_reason,
                    extensions=_get_optional_extensions(enum_value.extensions),
                )
                for value_name, enum_value in graphql_type.values.items()
            },
        )
    elif isinstance(graphql_type, GraphQLScalarType):
        return ScalarTypeDefinition(graphql_type.name)
    else:
        raise SchemaStructureError(
            f'Type "{graphql_type.name}" is a {type(graphql_type).__name__}, but only object, '
            f"input, enum and scalar types can be represented in a type graph."
        )


def type_graph_from_schema(schema: GraphQLSchema) -> TypeGraph:
    """Return a type graph holding every named type of the schema except introspection types.

    The resulting type graph references the schema's type objects (e.g. as field types) and
    its resolve functions, but the schema itself is not modified.

    Args:
        schema: schema to convert

    Returns:
        TypeGraph with the schema's types, in the order of the schema's type map

    Raises:
        SchemaStructureError if the schema contains interface or union types
    """
    type_graph = TypeGraph()
    for type_name, graphql_type in schema.type_map.items():
        if type_name.startswith("__"):
            continue
        type_graph.add(_convert_graphql_type(graphql_type))
    return type_graph


def type_graph_from_sdl(schema_string: str) -> TypeGraph:
    """Parse the schema definition language string and return the equivalent type graph.

    Raises:
        - GraphQLParsingError if the string is not valid GraphQL
        - SchemaStructureError if the string does not describe a valid schema, or if the schema
          contains interface or union types
    """
    schema_ast = safe_parse_graphql(schema_string)
    try:
        schema = build_ast_schema(schema_ast)
    except (GraphQLError, TypeError) as e:
        raise SchemaStructureError(f"Input is not a valid schema. Message: {e}") from e
    return type_graph_from_schema(schema)


def _get_referenced_type_names(type_definition: TypeDefinition) -> List[str]:
    """Return the names of all types referenced by the type definition, with repetition."""
    references: List[TypeReference] = []
    if isinstance(type_definition, CompositeTypeDefinition):
        for resolver in type_definition.resolvers.values():
            references.append(resolver.type)
            references.extend(arg.type for arg in resolver.args.values())
        for field_definition in type_definition.fields.values():
            if isinstance(field_definition, ResolverFieldDefinition):
                resolver = field_definition.resolver
                references.append(resolver.type)
                references.extend(arg.type for arg in resolver.args.values())
            else:
                references.append(field_definition.type)
                references.extend(arg.type for arg in (field_definition.args or {}).values())
    if isinstance(type_definition, ObjectTypeDefinition):
        references.extend(type_definition.interfaces)
    return [get_named_type_name(reference) for reference in references]


class _GraphQLSchemaBuilder:
    """Build graphql-core types for every type of a type graph, resolving references by name."""

    def __init__(self, type_graph: TypeGraph) -> None:
        """Prepare a graphql-core type for every type in the type graph."""
        self.type_graph = type_graph
        self.named_types: Dict[str, GraphQLNamedType] = dict(specified_scalar_types)
        for type_definition in type_graph:
            if type_definition.name in specified_scalar_types:
                continue
            self.named_types[type_definition.name] = self._build_named_type(type_definition)

    def get_type(self, reference: TypeReference) -> GraphQLType:
        """Return the graphql-core type for the possibly-wrapped type reference."""
        return self._get_type_from_node(
            parse_type_reference(canonicalize_type_reference(reference))
        )

    def _get_type_from_node(self, type_node: TypeNode) -> GraphQLType:
        if isinstance(type_node, NonNullTypeNode):
            return GraphQLNonNull(self._get_type_from_node(type_node.type))
        elif isinstance(type_node, ListTypeNode):
            return GraphQLList(self._get_type_from_node(type_node.type))
        else:
            return self.named_types[canonicalize_type_reference(type_node)]

    def _build_arguments(
        self, args: Optional[Dict[str, ArgumentDefinition]]
    ) -> Dict[str, GraphQLArgument]:
        return {
            arg_name: GraphQLArgument(
                self.get_type(arg.type),
                default_value=arg.default_value,
                description=arg.description,
                extensions=arg.extensions,
                ast_node=arg.ast_node,
            )
            for arg_name, arg in (args or {}).items()
        }

    def _build_output_fields(
        self, type_definition: ObjectTypeDefinition
    ) -> Dict[str, GraphQLField]:
        fields = {}
        for field_name, field_definition in type_definition.fields.items():
            if isinstance(field_definition, ResolverFieldDefinition):
                resolver = field_definition.resolver
                fields[field_name] = GraphQLField(
                    self.get_type(resolver.type),
                    args=self._build_arguments(resolver.args),
                    resolve=resolver.resolve,
                )
            else:
                fields[field_name] = GraphQLField(
                    self.get_type(field_definition.type),
                    args=self._build_arguments(field_definition.args),
                    resolve=field_definition.resolve,
                    subscribe=field_definition.subscribe,
                    description=field_definition.description or None,
                    deprecation_reason=field_definition.deprecation_reason,
                    extensions=field_definition.extensions,
                    ast_node=field_definition.ast_node,
                )
        return fields

    def _build_input_fields(
        self, type_definition: InputTypeDefinition
    ) -> Dict[str, GraphQLInputField]:
        fields = {}
        for field_name, field_definition in type_definition.fields.items():
            if not isinstance(field_definition, FieldDefinition):
                raise SchemaStructureError(
                    f'Field "{field_name}" of input type "{type_definition.name}" is backed by a '
                    f"resolver, which input types do not support."
                )
            fields[field_name] = GraphQLInputField(
                self.get_type(field_definition.type),
                default_value=field_definition.default_value,
                description=field_definition.description or None,
                deprecation_reason=field_definition.deprecation_reason,
                extensions=field_definition.extensions,
                ast_node=field_definition.ast_node,
            )
        return fields

    def _build_named_type(self, type_definition: TypeDefinition) -> GraphQLNamedType:
        # Fields are thunks, since they may reference types not built yet.
        if isinstance(type_definition, ObjectTypeDefinition):
            return GraphQLObjectType(
                type_definition.name,
                fields=lambda: self._build_output_fields(type_definition),
                description=type_definition.description or None,
                extensions=type_definition.extensions,
            )
        elif isinstance(type_definition, InputTypeDefinition):
            return GraphQLInputObjectType(
                type_definition.name,
                fields=lambda: self._build_input_fields(type_definition),
                description=type_definition.description or None,
                extensions=type_definition.extensions,
            )
        elif isinstance(type_definition, EnumTypeDefinition):
            return GraphQLEnumType(
                type_definition.name,
                values={
                    value_name: GraphQLEnumValue(
                        enum_value.value,
                        description=enum_value.description or None,
                        deprecation_reason=enum_value.deprecation_reason,
                        extensions=enum_value.extensions,
                    )
                    for value_name, enum_value in type_definition.values.items()
                },
                description=type_definition.description or None,
            )
        elif isinstance(type_definition, ScalarTypeDefinition):
            return GraphQLScalarType(type_definition.name)
        else:
            raise AssertionError(
                f"Unreachable code reached: unexpected type definition {type_definition!r}"
            )

    def get_root_type(self, type_name: Optional[str]) -> Optional[GraphQLObjectType]:
        """Return the object type to use as a root operation type, if the graph has one."""
        if type_name is None or type_name not in self.named_types:
            return None
        root_type = self.named_types[type_name]
        if not isinstance(root_type, GraphQLObjectType):
            raise SchemaStructureError(
                f'Root operation type "{type_name}" must be an object type, but is a '
                f"{type(root_type).__name__}."
            )
        return root_type


def build_schema_from_type_graph(
    type_graph: TypeGraph,
    query_type_name: Optional[str] = "Query",
    mutation_type_name: Optional[str] = "Mutation",
    subscription_type_name: Optional[str] = "Subscription",
) -> GraphQLSchema:
    """Build a graphql-core schema containing every type of the type graph.

    Empty descriptions are treated as absent.

    Args:
        type_graph: graph to convert
        query_type_name: name of the object type to use as query root, if the graph has it
        mutation_type_name: name of the object type to use as mutation root, if the graph has it
        subscription_type_name: name of the object type to use as subscription root, if the
                                graph has it

    Returns:
        GraphQLSchema equivalent to the type graph

    Raises:
        SchemaStructureError if the type graph references types that it does not contain, or if
        a root type or a field of an input type has the wrong shape
    """
    known_type_names = set(type_graph.type_names()).union(specified_scalar_types)
    for type_definition in type_graph:
        missing_type_names = set(_get_referenced_type_names(type_definition)) - known_type_names
        if missing_type_names:
            raise SchemaStructureError(
                f'Type "{type_definition.name}" references types that are not part of the type '
                f"graph: {sorted(missing_type_names)}"
            )
        if isinstance(type_definition, ObjectTypeDefinition):
            for interface_name in type_definition.interfaces:
                if interface_name in type_graph:
                    raise SchemaStructureError(
                        f'Type "{type_definition.name}" implements "{interface_name}", which is '
                        f"not an interface type."
                    )

    builder = _GraphQLSchemaBuilder(type_graph)
    return GraphQLSchema(
        query=builder.get_root_type(query_type_name),
        mutation=builder.get_root_type(mutation_type_name),
        subscription=builder.get_root_type(subscription_type_name),
        types=[
            builder.named_types[type_name]
            for type_name in type_graph.type_names()
            if type_name not in specified_scalar_types
        ],
    )


def print_type_graph(type_graph: TypeGraph, query_type_name: Optional[str] = "Query") -> str:
    """Return the schema definition language representation of the type graph."""
    return print_schema(build_schema_from_type_graph(type_graph, query_type_name=query_type_name))
