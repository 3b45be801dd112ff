# Copyright 2026-present Kensho Technologies, LLC.
from .type_graph import TypeGraph  # noqa
from .typedefs import (  # noqa
    ArgumentDefinition,
    CompositeTypeDefinition,
    EnumTypeDefinition,
    EnumValueDefinition,
    FieldDefinition,
    InputTypeDefinition,
    NamedTypeDefinition,
    ObjectTypeDefinition,
    Resolver,
    ResolverFieldDefinition,
    ScalarTypeDefinition,
    TypeCategory,
    TypeDefinition,
    TypeReference,
)
