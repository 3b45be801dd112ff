# Copyright 2026-present Kensho Technologies, LLC.
import unittest

from ..schema_combination.merge_types import merge_types
from ..schema_combination.utils import (
    CombinationSettings,
    MergePrecedence,
    ScalarMismatchError,
    TypeMismatchError,
    UnknownTypeCategoryError,
)
from ..type_graph import (
    FieldDefinition,
    InputTypeDefinition,
    ObjectTypeDefinition,
    Resolver,
    ResolverFieldDefinition,
    ScalarTypeDefinition,
    TypeGraph,
)
from .example_type_graphs import (
    make_color_enum,
    make_date_scalar,
    make_user_filter_input,
    make_user_type,
    resolve_user,
    resolve_users,
)


class MergeObjectTypesTests(unittest.TestCase):
    def test_field_union_and_metadata_precedence(self) -> None:
        first_user = make_user_type(
            ("id", "name"), description="A user.", extensions={"owner": "users", "cost": 1}
        )
        first_user.interfaces.extend(["Node", "Named"])
        second_user = make_user_type(("id", "email"), extensions={"cost": 3})
        second_user.interfaces.extend(["Named", "Contactable"])
        destination = TypeGraph()

        merge_types(destination, first_user, second_user)

        merged_user = destination.get("User")
        self.assertEqual(["id", "name", "email"], merged_user.field_names())
        self.assertEqual("A user.", merged_user.description)
        self.assertEqual({"owner": "users", "cost": 3}, merged_user.extensions)
        self.assertEqual(["Node", "Named", "Contactable"], merged_user.interfaces)

    def test_merged_field_description_and_extensions(self) -> None:
        first_user = make_user_type(("id",))
        first_user.set_field(
            "name",
            FieldDefinition(type="String", description="Full name.", extensions={"a": 1, "b": 1}),
        )
        second_user = make_user_type(("id",))
        second_user.set_field(
            "name",
            FieldDefinition(type="String!", description="", extensions={"b": 2}),
        )
        destination = TypeGraph()

        merge_types(destination, first_user, second_user)

        name_field = destination.get("User").get_field("name")
        self.assertEqual("Full name.", name_field.description)
        self.assertEqual({"a": 1, "b": 2}, name_field.extensions)
        # The second side's field is the template for everything else.
        self.assertEqual("String!", name_field.type)

        second_user.fields["name"].description = "Display name."
        destination = TypeGraph()
        merge_types(destination, first_user, second_user)
        self.assertEqual("Display name.", destination.get("User").get_field("name").description)

    def test_merged_field_without_descriptions(self) -> None:
        destination = TypeGraph()

        merge_types(destination, make_user_type(("id",)), make_user_type(("id",)))

        id_field = destination.get("User").get_field("id")
        self.assertEqual("", id_field.description)
        self.assertEqual({}, id_field.extensions)

    def test_resolver_precedence(self) -> None:
        first_find_user = Resolver(name="findUser", type="User", resolve=resolve_user)
        first_list_users = Resolver(name="listUsers", type="[User]", resolve=resolve_users)
        second_find_user = Resolver(name="findUser", type="User!", resolve=resolve_user)
        first_query = ObjectTypeDefinition(
            "Query",
            resolvers={"findUser": first_find_user, "listUsers": first_list_users},
            fields={
                "user": ResolverFieldDefinition(first_find_user),
                "users": ResolverFieldDefinition(first_list_users),
            },
        )
        second_query = ObjectTypeDefinition(
            "Query",
            resolvers={"findUser": second_find_user},
            fields={"viewer": ResolverFieldDefinition(second_find_user)},
        )
        destination = TypeGraph()

        merge_types(destination, first_query, second_query)

        merged_query = destination.get("Query")
        self.assertEqual(["findUser", "listUsers"], list(merged_query.resolvers))
        self.assertIs(second_find_user, merged_query.get_resolver("findUser").origin)
        self.assertEqual("User!", merged_query.get_resolver("findUser").type)
        self.assertIs(first_list_users, merged_query.get_resolver("listUsers").origin)

        self.assertEqual(["user", "users", "viewer"], merged_query.field_names())
        self.assertIs(
            merged_query.get_resolver("findUser"), merged_query.get_field("viewer").resolver
        )
        self.assertIs(
            merged_query.get_resolver("listUsers"), merged_query.get_field("users").resolver
        )
        # The first side's "findUser" lost its name to the second side's resolver, so the field
        # still backed by it gets a private clone rather than the wrong resolver.
        user_resolver = merged_query.get_field("user").resolver
        self.assertIs(first_find_user, user_resolver.origin)
        self.assertIsNone(user_resolver.name)
        self.assertEqual("User", user_resolver.type)

    def test_shadowed_resolver_is_cloned_once(self) -> None:
        first_find_user = Resolver(name="findUser", type="User", resolve=resolve_user)
        second_find_user = Resolver(name="findUser", type="User!", resolve=resolve_user)
        first_query = ObjectTypeDefinition(
            "Query",
            resolvers={"findUser": first_find_user},
            fields={
                "user": ResolverFieldDefinition(first_find_user),
                "userById": ResolverFieldDefinition(first_find_user),
            },
        )
        second_query = ObjectTypeDefinition(
            "Query",
            resolvers={"findUser": second_find_user},
            fields={"viewer": ResolverFieldDefinition(second_find_user)},
        )
        destination = TypeGraph()

        merge_types(destination, first_query, second_query)

        merged_query = destination.get("Query")
        user_resolver = merged_query.get_field("user").resolver
        self.assertIs(user_resolver, merged_query.get_field("userById").resolver)
        self.assertIs(first_find_user, user_resolver.origin)
        self.assertIsNone(user_resolver.name)
        self.assertIs(
            merged_query.get_resolver("findUser"), merged_query.get_field("viewer").resolver
        )

    def test_first_side_precedence(self) -> None:
        first_user = make_user_type(("id", "name"), extensions={"cost": 1})
        second_user = make_user_type(("id", "email"), extensions={"cost": 3})
        first_user.set_field("name", FieldDefinition(type="String", description="First."))
        second_user.set_field("name", FieldDefinition(type="String!", description="Second."))
        destination = TypeGraph()

        merge_types(
            destination,
            first_user,
            second_user,
            CombinationSettings(precedence=MergePrecedence.FIRST),
        )

        merged_user = destination.get("User")
        self.assertEqual(["id", "email", "name"], merged_user.field_names())
        self.assertEqual({"cost": 1}, merged_user.extensions)
        self.assertEqual("First.", merged_user.get_field("name").description)
        self.assertEqual("String", merged_user.get_field("name").type)

    def test_merge_input_types(self) -> None:
        first_filter = make_user_filter_input()
        second_filter = InputTypeDefinition(
            "UserFilter",
            fields={
                "name": FieldDefinition(type="String"),
                "email": FieldDefinition(type="String"),
            },
        )
        destination = TypeGraph()

        merge_types(destination, first_filter, second_filter)

        merged_filter = destination.get("UserFilter")
        self.assertIsInstance(merged_filter, InputTypeDefinition)
        self.assertEqual(["name", "limit", "email"], merged_filter.field_names())
        self.assertEqual("Filters applied when listing users.", merged_filter.description)
        self.assertEqual("Exact name to match.", merged_filter.get_field("name").description)
        self.assertEqual(10, merged_filter.get_field("limit").default_value)


class MergeEnumTypesTests(unittest.TestCase):
    def test_value_union(self) -> None:
        first_enum = make_color_enum(("RED", 1), ("GREEN", 2))
        second_enum = make_color_enum(("GREEN", 20), ("BLUE", 30))
        destination = TypeGraph()

        merge_types(destination, first_enum, second_enum)

        merged_enum = destination.get("Color")
        self.assertEqual(["GREEN", "BLUE", "RED"], list(merged_enum.values))
        self.assertEqual(20, merged_enum.values["GREEN"].value)
        self.assertEqual(1, merged_enum.values["RED"].value)

    def test_value_union_with_first_side_precedence(self) -> None:
        first_enum = make_color_enum(("RED", 1), ("GREEN", 2))
        second_enum = make_color_enum(("GREEN", 20), ("BLUE", 30))
        destination = TypeGraph()

        merge_types(
            destination,
            first_enum,
            second_enum,
            CombinationSettings(precedence=MergePrecedence.FIRST),
        )

        merged_enum = destination.get("Color")
        self.assertEqual(["RED", "GREEN", "BLUE"], list(merged_enum.values))
        self.assertEqual(2, merged_enum.values["GREEN"].value)


class MergeScalarAndMismatchedTypesTests(unittest.TestCase):
    def test_same_scalars(self) -> None:
        destination = TypeGraph()

        merge_types(destination, make_date_scalar(), make_date_scalar())

        self.assertIsInstance(destination.get("Date"), ScalarTypeDefinition)

    def test_different_scalars(self) -> None:
        destination = TypeGraph()
        with self.assertRaises(ScalarMismatchError) as context:
            merge_types(destination, make_date_scalar(), ScalarTypeDefinition("DateTime"))
        self.assertEqual("scalar-mismatch", context.exception.kind)
        self.assertEqual(0, len(destination))

    def test_different_categories(self) -> None:
        with self.assertRaises(TypeMismatchError) as context:
            merge_types(TypeGraph(), make_user_type(), make_color_enum(("RED", 1)))
        self.assertEqual("type-mismatch", context.exception.kind)

        with self.assertRaises(TypeMismatchError):
            merge_types(TypeGraph(), make_user_type(), InputTypeDefinition("User"))

    def test_unknown_category(self) -> None:
        with self.assertRaises(UnknownTypeCategoryError) as context:
            merge_types(TypeGraph(), object(), object())  # type: ignore
        self.assertEqual("unknown-type-category", context.exception.kind)
