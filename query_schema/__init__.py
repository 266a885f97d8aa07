"""
Query schema - GraphQL schema normalization for the query node.

This package turns an author-written GraphQL SDL file into an ordered,
read-only model of its object types:
- Preamble injection (root Query type, @fullTextSearchable directive)
- Loading and validation on top of graphql-core
- Type catalog: user object types sorted by name
- Field introspection and full-text search extraction

Invariants:
    - Every schema is parsed with the same fixed preamble
    - The catalog never contains introspection types or the root Query type
    - Catalog order is deterministic for a given schema file
    - Validation failures are raised, never printed or exited on by the library

How to change safely:
    - Keep the preamble text stable; generators depend on the directive name
    - Add new accessors instead of changing catalog order or filtering
"""

from ._version import __version__
from .catalog import TypeCatalog, build_catalog, get_fields
from .errors import (
    QuerySchemaError,
    SchemaNotFoundError,
    SchemaReadError,
    SchemaSyntaxError,
    SchemaValidationError,
)
from .loader import build_schema, load_schema
from .parser import GraphQLSchemaParser
from .preamble import SCHEMA_DEFINITIONS_PREAMBLE, with_preamble
from .search import FullTextSearchField
from .types import FieldInfo, ObjectTypeInfo, describe_field, describe_type

__all__ = [
    "__version__",
    # Parser
    "GraphQLSchemaParser",
    # Loading
    "SCHEMA_DEFINITIONS_PREAMBLE",
    "with_preamble",
    "build_schema",
    "load_schema",
    # Catalog
    "TypeCatalog",
    "build_catalog",
    "get_fields",
    # Descriptions
    "FieldInfo",
    "ObjectTypeInfo",
    "describe_field",
    "describe_type",
    "FullTextSearchField",
    # Errors
    "QuerySchemaError",
    "SchemaNotFoundError",
    "SchemaReadError",
    "SchemaSyntaxError",
    "SchemaValidationError",
]
