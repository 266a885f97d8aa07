"""
Compatibility preamble injected ahead of every schema source.

The structural validator rejects an empty root query type and any directive
it has not seen declared. Prefixing the user's source with a fixed block that
declares both lets authors annotate fields with @fullTextSearchable without
touching the validator.

Invariants:
    - The preamble text is constant across all parses
    - The preamble always comes first in the parsed document
    - Users must not declare their own Query type or @fullTextSearchable
"""

from __future__ import annotations

ROOT_QUERY_TYPE = "Query"
FULL_TEXT_SEARCH_DIRECTIVE = "fullTextSearchable"

SCHEMA_DEFINITIONS_PREAMBLE = f"""
type {ROOT_QUERY_TYPE} {{
    _dummy: String # empty queries are not allowed
}}
directive @{FULL_TEXT_SEARCH_DIRECTIVE}(query: String) on FIELD_DEFINITION
"""

PREAMBLE_LINE_COUNT = SCHEMA_DEFINITIONS_PREAMBLE.count("\n")


def with_preamble(source: str) -> str:
    """Return the schema source prefixed with the compatibility preamble."""
    return SCHEMA_DEFINITIONS_PREAMBLE + source
