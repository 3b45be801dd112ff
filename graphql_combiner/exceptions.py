# Copyright 2026-present Kensho Technologies, LLC.
class GraphQLCombinerError(Exception):
    """Generic error when combining GraphQL type graphs."""


class GraphQLParsingError(GraphQLCombinerError):
    """Exception raised when the provided GraphQL string could not be parsed."""


class SchemaStructureError(GraphQLCombinerError):
    """Raised if a schema or type graph cannot be converted because of its structure.

    This may happen if an AST cannot be built into a schema, if a schema contains kinds of types
    that a type graph cannot represent, or if a type graph references types it does not contain.
    """
