"""
Schema CLI tool for the query node.

Commands:
- check: Validate a schema file
- types: List object type names in catalog order
- describe: Export the type catalog as JSON or YAML
- search: Show full-text search queries and their fields

Usage:
    query-schema check schema.graphql
    query-schema types schema.graphql
    query-schema describe schema.graphql --format yaml
    query-schema search schema.graphql

Invariants:
    - Validation failures exit with status 1 and list every error on stderr
    - Missing or unreadable files and syntax errors exit with status 2
    - Catalog output is deterministic for a given schema file

How to change safely:
    - Add new commands, don't modify existing ones
    - Keep output format stable for CI parsing
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

import json_log_formatter
import yaml

from ..config import Settings, get_settings
from ..errors import QuerySchemaError, SchemaValidationError
from ..parser import GraphQLSchemaParser

logger = logging.getLogger(__name__)

EXIT_INVALID = 1
EXIT_INPUT_ERROR = 2


def setup_logging(settings: Settings) -> None:
    """Configure logging based on settings.

    Args:
        settings: Tool configuration
    """
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    if settings.log_format == "json":
        formatter = json_log_formatter.JSONFormatter()
    else:
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [handler]


def print_validation_errors(error: SchemaValidationError) -> None:
    """Print every validation error to stderr."""
    print("Schema is not valid. Please fix following errors: \n", file=sys.stderr)
    for line in error.format_errors():
        print(f"\t{line}", file=sys.stderr)
    print(file=sys.stderr)


def load_parser(schema_path: str) -> GraphQLSchemaParser:
    """Parse a schema file, terminating the process on any failure.

    Exits with EXIT_INVALID on validation errors and EXIT_INPUT_ERROR when the
    file is missing, unreadable or does not parse.
    """
    try:
        return GraphQLSchemaParser(schema_path)
    except SchemaValidationError as e:
        print_validation_errors(e)
        sys.exit(EXIT_INVALID)
    except QuerySchemaError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        sys.exit(EXIT_INPUT_ERROR)


def cmd_check(parser: GraphQLSchemaParser) -> None:
    print("Schema is valid")
    print(f"  object types: {len(parser.catalog)}")
    print(f"  fingerprint: {parser.catalog.fingerprint}")


def cmd_types(parser: GraphQLSchemaParser) -> None:
    for name in parser.get_type_names():
        print(name)


def cmd_describe(parser: GraphQLSchemaParser, output_format: str) -> None:
    catalog = parser.catalog
    output = {
        "fingerprint": catalog.fingerprint,
        "catalog": catalog.to_dict(),
    }
    if output_format == "yaml":
        print(yaml.dump(output, default_flow_style=False, sort_keys=False), end="")
    else:
        print(json.dumps(output, indent=2))


def cmd_search(parser: GraphQLSchemaParser) -> None:
    queries = parser.full_text_queries()
    if not queries:
        print("No full-text search fields found")
        return
    for query, fields in queries.items():
        print(f"{query}:")
        for f in fields:
            print(f"  - {f.type_name}.{f.field_name}")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Query node GraphQL schema tool")
    subparsers = parser.add_subparsers(dest="command", required=True)

    check_parser = subparsers.add_parser("check", help="Validate a schema file")
    types_parser = subparsers.add_parser("types", help="List object type names")
    describe_parser = subparsers.add_parser("describe", help="Export the type catalog")
    describe_parser.add_argument(
        "--format", choices=["json", "yaml"], default="json", help="Output format"
    )
    search_parser = subparsers.add_parser("search", help="Show full-text search queries")

    for sub in (check_parser, types_parser, describe_parser, search_parser):
        sub.add_argument(
            "schema",
            nargs="?",
            help="Path to the schema file (default: QUERY_SCHEMA_SCHEMA_PATH)",
        )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point for the schema tool."""
    args = build_arg_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(settings)

    parser = load_parser(args.schema or settings.schema_path)

    if args.command == "check":
        cmd_check(parser)
    elif args.command == "types":
        cmd_types(parser)
    elif args.command == "describe":
        cmd_describe(parser, args.format)
    elif args.command == "search":
        cmd_search(parser)


if __name__ == "__main__":
    main()
