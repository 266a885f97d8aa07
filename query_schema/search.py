"""
Full-text search annotations.

Fields marked with @fullTextSearchable(query: "<name>") are indexed for search
by downstream generators. Several fields, possibly across types, can share one
query name; generators emit one search query per name.

Example schema:
    type Video {
      title: String @fullTextSearchable(query: "search")
      description: String @fullTextSearchable(query: "search")
    }

Invariants:
    - Fields are reported in catalog order, then declaration order
    - Query groups keep the order in which each name is first seen
    - An annotation without a query name is skipped, never an error
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List

from graphql.language import ObjectTypeDefinitionNode

from .catalog import get_fields
from .preamble import FULL_TEXT_SEARCH_DIRECTIVE
from .types import directive_arguments

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FullTextSearchField:
    """A field included in a full-text search query."""

    query: str
    type_name: str
    field_name: str


def full_text_search_fields(
    definitions: Iterable[ObjectTypeDefinitionNode],
) -> List[FullTextSearchField]:
    """Collect every field annotated with @fullTextSearchable.

    Args:
        definitions: Object type definitions, usually the catalog

    Returns:
        Annotated fields in catalog and declaration order
    """
    found = []
    for definition in definitions:
        type_name = definition.name.value
        for field_node in get_fields(definition):
            for directive in field_node.directives or ():
                if directive.name.value != FULL_TEXT_SEARCH_DIRECTIVE:
                    continue
                query = directive_arguments(directive).get("query")
                if not query:
                    logger.warning(
                        f"Field '{type_name}.{field_node.name.value}' is marked "
                        f"@{FULL_TEXT_SEARCH_DIRECTIVE} without a query name; skipping"
                    )
                    continue
                found.append(
                    FullTextSearchField(
                        query=query,
                        type_name=type_name,
                        field_name=field_node.name.value,
                    )
                )
    return found


def group_by_query(
    fields: Iterable[FullTextSearchField],
) -> Dict[str, List[FullTextSearchField]]:
    """Group search fields by query name."""
    groups: Dict[str, List[FullTextSearchField]] = {}
    for f in fields:
        groups.setdefault(f.query, []).append(f)
    return groups
