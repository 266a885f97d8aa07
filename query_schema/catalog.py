"""
Type catalog for a validated GraphQL schema.

The catalog is the ordered view downstream generators consume: every
user-declared object type, sorted by name, with introspection types, the
synthetic root query type, scalars, enums, unions, interfaces and input types
filtered out.

Invariants:
    - Built once from a validated schema, immutable afterwards
    - Names starting with '__' are never included
    - The root query type from the preamble is never included
    - Entries are sorted by name in code point order
    - Every entry is an ObjectTypeDefinitionNode backed by SDL
    - Fingerprint changes when the catalog changes

Example:
    >>> catalog = TypeCatalog.from_schema(schema)
    >>> catalog.type_names()
    ['Apple', 'Mango', 'Zebra']
    >>> catalog.fingerprint
    'sha256:abc123...'
"""

from __future__ import annotations

import hashlib
import json
import logging
from typing import Any, Dict, Iterator, List, Optional, Tuple

import yaml
from graphql import GraphQLSchema
from graphql.language import FieldDefinitionNode, ObjectTypeDefinitionNode

from .preamble import ROOT_QUERY_TYPE
from .types import describe_type

logger = logging.getLogger(__name__)

INTROSPECTION_PREFIX = "__"


def is_user_type_name(name: str) -> bool:
    """Whether a type name can belong to a user-declared type."""
    return not name.startswith(INTROSPECTION_PREFIX) and name != ROOT_QUERY_TYPE


def build_catalog(schema: GraphQLSchema) -> Tuple[ObjectTypeDefinitionNode, ...]:
    """Extract the sorted object type definitions from a schema.

    Args:
        schema: A validated schema

    Returns:
        Object type definition nodes sorted by type name
    """
    named_types = sorted(
        (t for name, t in schema.type_map.items() if is_user_type_name(name)),
        key=lambda t: t.name,
    )
    return tuple(
        t.ast_node
        for t in named_types
        if isinstance(t.ast_node, ObjectTypeDefinitionNode)
    )


def get_fields(definition: ObjectTypeDefinitionNode) -> List[FieldDefinitionNode]:
    """Return a type's field definitions in declaration order.

    Types without fields yield an empty list.
    """
    return list(definition.fields or ())


class TypeCatalog:
    """Name-sorted, read-only collection of object type definitions.

    Attributes:
        fingerprint: SHA-256 hash of the canonical catalog representation
    """

    def __init__(self, definitions: Tuple[ObjectTypeDefinitionNode, ...]) -> None:
        self._definitions = tuple(definitions)
        self._by_name: Dict[str, ObjectTypeDefinitionNode] = {
            d.name.value: d for d in self._definitions
        }
        self._fingerprint = self._compute_fingerprint()

    @classmethod
    def from_schema(cls, schema: GraphQLSchema) -> TypeCatalog:
        """Build a catalog from a validated schema."""
        catalog = cls(build_catalog(schema))
        logger.debug(f"Type catalog built with {len(catalog)} object types")
        return catalog

    @property
    def fingerprint(self) -> str:
        return self._fingerprint

    def type_names(self) -> List[str]:
        """Type names in catalog order."""
        return [d.name.value for d in self._definitions]

    def definitions(self) -> Tuple[ObjectTypeDefinitionNode, ...]:
        """Object type definitions in catalog order."""
        return self._definitions

    def get(self, name: str) -> Optional[ObjectTypeDefinitionNode]:
        """Look up a definition by type name."""
        return self._by_name.get(name)

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator[ObjectTypeDefinitionNode]:
        return iter(self._definitions)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def _compute_fingerprint(self) -> str:
        """Compute SHA-256 fingerprint of the catalog.

        Returns:
            Fingerprint string in format 'sha256:<hash>'
        """
        canonical = json.dumps(self.to_dict(), sort_keys=True, separators=(",", ":"))
        hash_bytes = hashlib.sha256(canonical.encode("utf-8")).hexdigest()
        return f"sha256:{hash_bytes}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert catalog to dictionary representation.

        Returns:
            Dictionary with a 'types' list in catalog order
        """
        return {"types": [describe_type(d).to_dict() for d in self._definitions]}

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    def to_yaml(self) -> str:
        return yaml.dump(self.to_dict(), default_flow_style=False, sort_keys=False)
