"""
Error types for the query schema parser.

This module defines all exception types raised while loading a schema:
- QuerySchemaError: Base exception
- SchemaNotFoundError: Schema file does not exist
- SchemaReadError: Schema path cannot be read as UTF-8 text
- SchemaSyntaxError: Schema source is not valid GraphQL SDL
- SchemaValidationError: Schema parsed but failed validation

Invariants:
    - All errors inherit from QuerySchemaError
    - Errors include context for debugging
    - SchemaValidationError always carries the full error list, never a subset
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple

from graphql import GraphQLError


class QuerySchemaError(Exception):
    """Base exception for all schema parser errors.

    Attributes:
        message: Error message
        code: Error code for programmatic handling
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or "QUERY_SCHEMA_ERROR"
        self.details = details or {}


class SchemaNotFoundError(QuerySchemaError):
    """Schema file does not exist.

    Raised before any read or parse is attempted.
    """

    def __init__(self, path: str) -> None:
        super().__init__(
            f"Schema not found: {path}",
            code="SCHEMA_NOT_FOUND",
            details={"path": path},
        )
        self.path = path


class SchemaReadError(QuerySchemaError):
    """Schema path exists but cannot be read as UTF-8 text.

    Raised when:
    - The path is a directory
    - The file is not readable
    - The file is not valid UTF-8
    """

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(
            f"Cannot read schema {path}: {reason}",
            code="SCHEMA_READ_ERROR",
            details={"path": path, "reason": reason},
        )
        self.path = path
        self.reason = reason


class SchemaSyntaxError(QuerySchemaError):
    """Schema source could not be parsed.

    Attributes:
        locations: (line, column) pairs reported by the GraphQL parser,
            relative to the schema file
    """

    def __init__(
        self,
        message: str,
        locations: Optional[List[Tuple[int, int]]] = None,
    ) -> None:
        locations = locations or []
        super().__init__(
            message,
            code="SCHEMA_SYNTAX_ERROR",
            details={"locations": locations},
        )
        self.locations = locations

    @classmethod
    def from_graphql_error(
        cls, error: GraphQLError, line_offset: int = 0
    ) -> SchemaSyntaxError:
        """Wrap a GraphQLSyntaxError raised by graphql-core.

        Args:
            error: The syntax error raised by the parser
            line_offset: Lines injected ahead of the user's source; subtracted
                so locations point into the file the author wrote
        """
        locations = [
            (loc.line - line_offset, loc.column) for loc in error.locations or []
        ]
        where = ", ".join(f"line {line}, column {column}" for line, column in locations)
        message = f"{error.message} ({where})" if where else error.message
        return cls(message, locations)


class SchemaValidationError(QuerySchemaError):
    """Schema failed SDL or structural validation.

    Attributes:
        errors: Every GraphQLError reported by the validators
    """

    def __init__(self, errors: Sequence[GraphQLError]) -> None:
        self.errors = list(errors)
        super().__init__(
            f"Schema is not valid: {len(self.errors)} error(s)",
            code="SCHEMA_VALIDATION_ERROR",
            details={"errors": [e.message for e in self.errors]},
        )

    def format_errors(self) -> List[str]:
        """Render each error as '<name>: <message>'."""
        return [f"{type(e).__name__}: {e.message}" for e in self.errors]
