"""
GraphQL schema parser.

Loads a schema file once and exposes the ordered object type catalog that
code generators and model builders read. All work happens in the
constructor; accessors are pure reads over the catalog built there.

Invariants:
    - The schema is loaded and validated exactly once per instance
    - The validated schema is never mutated after construction
    - Instances share no state; parsing several files concurrently is safe

Example:
    >>> parser = GraphQLSchemaParser("schema.graphql")
    >>> parser.get_type_names()
    ['Channel', 'Video']
    >>> [f.name.value for f in parser.get_fields(parser.get_object_definitions()[1])]
    ['title', 'isFeatured']
"""

from __future__ import annotations

import logging
from typing import Dict, List, Tuple

from graphql import GraphQLSchema
from graphql.language import FieldDefinitionNode, ObjectTypeDefinitionNode

from .catalog import TypeCatalog, get_fields
from .config import Settings
from .loader import PathLike, load_schema
from .search import FullTextSearchField, full_text_search_fields, group_by_query
from .types import ObjectTypeInfo, describe_type

logger = logging.getLogger(__name__)


class GraphQLSchemaParser:
    """Parse a GraphQL schema file into a sorted object type catalog.

    Attributes:
        schema_path: Path the schema was loaded from
        schema: The validated schema (read-only)
        catalog: The object type catalog (read-only)

    Raises:
        SchemaNotFoundError: If schema_path does not exist
        SchemaSyntaxError: If the file is not valid SDL
        SchemaValidationError: If the schema fails validation
    """

    def __init__(self, schema_path: PathLike) -> None:
        self.schema_path = str(schema_path)
        self._schema = load_schema(schema_path)
        self._catalog = TypeCatalog.from_schema(self._schema)
        logger.info(
            f"Parsed schema {self.schema_path}: {len(self._catalog)} object types, "
            f"fingerprint={self._catalog.fingerprint}"
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> GraphQLSchemaParser:
        """Create a parser for the configured schema path."""
        return cls(settings.schema_path)

    @property
    def schema(self) -> GraphQLSchema:
        return self._schema

    @property
    def catalog(self) -> TypeCatalog:
        return self._catalog

    def get_type_names(self) -> List[str]:
        """Returns object type names in catalog order."""
        return self._catalog.type_names()

    def get_object_definitions(self) -> Tuple[ObjectTypeDefinitionNode, ...]:
        """Returns object type definitions in catalog order."""
        return self._catalog.definitions()

    def get_fields(self, definition: ObjectTypeDefinitionNode) -> List[FieldDefinitionNode]:
        """Returns fields for a given object type definition."""
        return get_fields(definition)

    def describe_types(self) -> List[ObjectTypeInfo]:
        return [describe_type(d) for d in self._catalog]

    def full_text_queries(self) -> Dict[str, List[FullTextSearchField]]:
        """Fields annotated with @fullTextSearchable, grouped by query name."""
        return group_by_query(full_text_search_fields(self._catalog))
