"""
Type registry shared by all conversions of one schema family.
"""

from dataclasses import dataclass, field
from typing import Dict

from graphql import GraphQLEnumType, GraphQLInputObjectType, GraphQLNamedType


@dataclass
class SchemaContext:
    """
    Lookup tables for the GraphQL types built during a conversion session.

    Attributes:
        types: schema id -> output type (object or union).
        inputs: schema id -> input object type. Unions have no entry.
        enum_types: attribute path -> enum type.
        enum_maps: attribute path -> enum key -> original JSON value.

    A context is not thread-safe. Conversions of unrelated schema families
    must use separate contexts.
    """
    types: Dict[str, GraphQLNamedType] = field(default_factory=dict)
    inputs: Dict[str, GraphQLInputObjectType] = field(default_factory=dict)
    enum_types: Dict[str, GraphQLEnumType] = field(default_factory=dict)
    enum_maps: Dict[str, Dict[str, str]] = field(default_factory=dict)


def new_context() -> SchemaContext:
    """Create an empty context for a new conversion session."""
    return SchemaContext()
