# Copyright 2026-present Kensho Technologies, LLC.
from textwrap import dedent
import unittest

from graphql import GraphQLSchema, build_schema, lexicographic_sort_schema, print_schema

from .. import combine_schemas, prefer_first
from ..exceptions import GraphQLParsingError, SchemaStructureError
from ..schema_combination.combine import combine_type_graphs
from ..type_graph import EnumTypeDefinition, FieldDefinition, ObjectTypeDefinition, TypeGraph
from ..type_graph.schema_conversion import (
    build_schema_from_type_graph,
    print_type_graph,
    type_graph_from_schema,
    type_graph_from_sdl,
)
from ..type_references import canonicalize_type_reference
from .example_type_graphs import (
    InputSchemaStrings as ISS,
    make_query_type_with_shared_resolver,
    make_type_graph,
    make_user_type,
    resolve_user,
)


def _print_sorted_schema(schema: GraphQLSchema) -> str:
    return print_schema(lexicographic_sort_schema(schema))


class TypeGraphFromSchemaTests(unittest.TestCase):
    def test_type_graph_from_sdl(self) -> None:
        type_graph = type_graph_from_sdl(ISS.users_schema)

        self.assertTrue(
            {"Query", "User", "Color", "ID", "String"}.issubset(type_graph.type_names())
        )
        self.assertFalse(
            [type_name for type_name in type_graph.type_names() if type_name.startswith("__")]
        )

        user_type = type_graph.get("User")
        self.assertIsInstance(user_type, ObjectTypeDefinition)
        self.assertEqual(["id", "name", "favoriteColor"], user_type.field_names())
        self.assertEqual("ID!", canonicalize_type_reference(user_type.get_field("id").type))

        query_type = type_graph.get("Query")
        user_field = query_type.get_field("user")
        self.assertEqual(["id"], list(user_field.args))
        self.assertEqual("ID!", canonicalize_type_reference(user_field.args["id"].type))

        color_enum = type_graph.get("Color")
        self.assertIsInstance(color_enum, EnumTypeDefinition)
        self.assertEqual(["RED", "GREEN"], list(color_enum.values))

    def test_type_graph_from_schema_keeps_resolvers(self) -> None:
        schema = build_schema(ISS.users_schema)
        schema.query_type.fields["user"].resolve = resolve_user

        type_graph = type_graph_from_schema(schema)

        self.assertIs(resolve_user, type_graph.get("Query").get_field("user").resolve)

    def test_input_types(self) -> None:
        type_graph = type_graph_from_sdl(ISS.input_schema)

        user_filter = type_graph.get("UserFilter")
        self.assertEqual(["name", "limit"], user_filter.field_names())
        self.assertEqual(10, user_filter.get_field("limit").default_value)

    def test_unsupported_and_invalid_schemas(self) -> None:
        with self.assertRaises(SchemaStructureError):
            type_graph_from_sdl(ISS.interface_schema)

        with self.assertRaises(GraphQLParsingError):
            type_graph_from_sdl("type Query {")

        with self.assertRaises(SchemaStructureError):
            type_graph_from_sdl("type Query { user: User }")


class BuildSchemaFromTypeGraphTests(unittest.TestCase):
    def test_round_trip(self) -> None:
        for schema_string in (ISS.users_schema, ISS.cyclic_schema, ISS.input_schema):
            combined_graph = combine_type_graphs(type_graph_from_sdl(schema_string), TypeGraph())
            self.assertEqual(
                _print_sorted_schema(build_schema(schema_string)),
                _print_sorted_schema(build_schema_from_type_graph(combined_graph)),
            )

    def test_combine_schemas(self) -> None:
        expected_schema_string = dedent(
            """\
            type Query {
              user(id: ID!): User
              account(number: String!): Account
            }

            type User {
              id: ID!
              name: String
              favoriteColor: Color
              email: String
            }

            enum Color {
              GREEN
              BLUE
              RED
            }

            type Account {
              number: String!
              owner: User
            }

            scalar Date
        """
        )

        combined_schema_string = combine_schemas(ISS.users_schema, ISS.accounts_schema)

        self.assertEqual(
            _print_sorted_schema(build_schema(expected_schema_string)),
            _print_sorted_schema(build_schema(combined_schema_string)),
        )

    def test_combine_schemas_preferring_first(self) -> None:
        combined_schema = build_schema(
            combine_schemas(ISS.users_schema, ISS.accounts_schema, conflict_policy=prefer_first)
        )

        self.assertEqual(
            ["id", "name", "favoriteColor"], list(combined_schema.get_type("User").fields)
        )
        self.assertEqual(["RED", "GREEN"], list(combined_schema.get_type("Color").values))
        self.assertEqual(["user"], list(combined_schema.query_type.fields))

    def test_resolver_backed_fields(self) -> None:
        type_graph = combine_type_graphs(
            make_type_graph(make_query_type_with_shared_resolver(), make_user_type()),
            TypeGraph(),
        )

        schema = build_schema_from_type_graph(type_graph)

        user_field = schema.query_type.fields["user"]
        self.assertIs(resolve_user, user_field.resolve)
        self.assertEqual("String!", str(user_field.args["id"].type))
        self.assertEqual("User", str(user_field.type))
        self.assertEqual("[String]", str(schema.query_type.fields["users"].type))

    def test_dangling_references(self) -> None:
        type_graph = make_type_graph(
            ObjectTypeDefinition("Query", fields={"user": FieldDefinition(type="[User!]")})
        )
        with self.assertRaises(SchemaStructureError):
            build_schema_from_type_graph(type_graph)

        type_graph = make_type_graph(ObjectTypeDefinition("Query", interfaces=["Node"]))
        with self.assertRaises(SchemaStructureError):
            build_schema_from_type_graph(type_graph)

    def test_root_types_must_be_objects(self) -> None:
        type_graph = make_type_graph(EnumTypeDefinition("Query"))
        with self.assertRaises(SchemaStructureError):
            build_schema_from_type_graph(type_graph)

    def test_print_type_graph(self) -> None:
        type_graph = make_type_graph(
            ObjectTypeDefinition(
                "Query",
                description="",
                fields={"version": FieldDefinition(type="String", description="")},
            )
        )

        self.assertEqual("type Query {\n  version: String\n}", print_type_graph(type_graph))
