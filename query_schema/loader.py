"""
Schema loading and validation.

Turns a GraphQL SDL file into a validated GraphQLSchema:
1. Read the file as UTF-8 (missing file -> SchemaNotFoundError)
2. Prefix the compatibility preamble
3. Parse (malformed SDL -> SchemaSyntaxError)
4. Run SDL validation over the document
5. Build the schema leniently (assume_valid_sdl) so construction itself
   never rejects the preamble's directive
6. Run structural validation over the built schema

Any validation error from steps 4 or 6 raises SchemaValidationError carrying
every error. Deciding whether that ends the process is left to the caller.

Invariants:
    - Loading is a pure function of the file contents
    - No global state is read or written
    - The returned schema is never mutated by this package
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from graphql import (
    GraphQLSchema,
    GraphQLSyntaxError,
    Source,
    build_ast_schema,
    parse,
    validate_schema,
)
from graphql.language import DocumentNode
from graphql.validation.validate import validate_sdl

from .errors import (
    SchemaNotFoundError,
    SchemaReadError,
    SchemaSyntaxError,
    SchemaValidationError,
)
from .preamble import PREAMBLE_LINE_COUNT, with_preamble

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_schema_source(path: PathLike) -> str:
    """Read a schema file as UTF-8 text.

    Args:
        path: Path to the schema file

    Returns:
        File contents

    Raises:
        SchemaNotFoundError: If the path does not exist
        SchemaReadError: If the path is not a readable UTF-8 file
    """
    schema_path = Path(path)
    if not schema_path.exists():
        raise SchemaNotFoundError(str(path))
    logger.debug(f"Reading schema source from {schema_path}")
    try:
        return schema_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SchemaReadError(str(path), str(e)) from e


def parse_schema(text: str, name: str = "GraphQL schema") -> DocumentNode:
    """Parse preamble-prefixed SDL text into a document AST.

    Args:
        text: Full SDL text, preamble included
        name: Source name reported in parser messages

    Raises:
        SchemaSyntaxError: If the text is not valid SDL
    """
    try:
        return parse(Source(text, name))
    except GraphQLSyntaxError as e:
        raise SchemaSyntaxError.from_graphql_error(
            e, line_offset=PREAMBLE_LINE_COUNT
        ) from e


def build_schema(source: str, name: Optional[str] = None) -> GraphQLSchema:
    """Build a validated schema from user SDL.

    Args:
        source: SDL written by the schema author (without preamble)
        name: Optional source name, usually the file path

    Returns:
        The validated GraphQLSchema

    Raises:
        SchemaSyntaxError: If the SDL does not parse
        SchemaValidationError: If the SDL or the built schema is invalid
    """
    document = parse_schema(with_preamble(source), name or "GraphQL schema")

    errors = validate_sdl(document)
    if not errors:
        # Lenient build; correctness checks happen in validate_schema below
        schema = build_ast_schema(document, assume_valid_sdl=True)
        errors = validate_schema(schema)

    if errors:
        logger.error(f"Schema validation failed with {len(errors)} error(s)")
        for error in errors:
            logger.error(f"Schema validation error: {error.message}")
        raise SchemaValidationError(errors)

    logger.debug(f"Built schema with {len(schema.type_map)} named types")
    return schema


def load_schema(path: PathLike) -> GraphQLSchema:
    """Read, validate and build the schema stored at path.

    Raises:
        SchemaNotFoundError: If the path does not exist
        SchemaSyntaxError: If the file does not parse
        SchemaValidationError: If the schema is invalid
    """
    source = read_schema_source(path)
    logger.debug(f"Loaded {len(source)} characters of SDL from {path}")
    return build_schema(source, name=str(path))
