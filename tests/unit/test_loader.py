"""
Unit tests for schema loading and validation.

Tests cover:
- Missing files
- Syntax errors and their locations
- SDL and structural validation errors
- Acceptance of the @fullTextSearchable annotation
"""

import logging
from pathlib import Path

import pytest

from query_schema.errors import (
    QuerySchemaError,
    SchemaNotFoundError,
    SchemaReadError,
    SchemaSyntaxError,
    SchemaValidationError,
)
from query_schema.loader import build_schema, load_schema, parse_schema, read_schema_source


def write_schema(tmp_path, sdl, name="schema.graphql"):
    """Helper to write a schema file."""
    path = tmp_path / name
    path.write_text(sdl, encoding="utf-8")
    return path


class TestReadSchemaSource:
    """Tests for read_schema_source."""

    def test_reads_utf8(self, tmp_path):
        """File is read as UTF-8 text."""
        path = write_schema(tmp_path, '"Vidéo à la carte"\ntype Video { title: String }')
        assert read_schema_source(path).startswith('"Vidéo à la carte"')

    def test_missing_file_raises(self, tmp_path, monkeypatch):
        """Missing file raises SchemaNotFoundError without reading."""

        def fail_read(*args, **kwargs):
            raise AssertionError("read_text should not be called")

        monkeypatch.setattr(Path, "read_text", fail_read)
        missing = tmp_path / "missing.graphql"

        with pytest.raises(SchemaNotFoundError) as exc_info:
            read_schema_source(missing)

        assert exc_info.value.path == str(missing)
        assert exc_info.value.code == "SCHEMA_NOT_FOUND"
        assert isinstance(exc_info.value, QuerySchemaError)

    def test_directory_raises(self, tmp_path):
        """A directory path raises SchemaReadError."""
        with pytest.raises(SchemaReadError) as exc_info:
            read_schema_source(tmp_path)

        assert exc_info.value.path == str(tmp_path)
        assert exc_info.value.code == "SCHEMA_READ_ERROR"

    def test_invalid_utf8_raises(self, tmp_path):
        """Bytes that are not UTF-8 raise SchemaReadError."""
        path = tmp_path / "latin1.graphql"
        path.write_bytes(b"type Vid\xe9o { title: String }")

        with pytest.raises(SchemaReadError) as exc_info:
            read_schema_source(path)

        assert isinstance(exc_info.value, QuerySchemaError)


class TestParseSchema:
    """Tests for parse_schema."""

    def test_parse_valid(self):
        """Valid SDL parses to a document."""
        document = parse_schema("type Video { title: String }")
        assert len(document.definitions) == 1

    def test_unbalanced_braces(self):
        """Unbalanced braces raise SchemaSyntaxError."""
        with pytest.raises(SchemaSyntaxError) as exc_info:
            parse_schema("type Video { title: String")

        assert "Syntax Error" in exc_info.value.message
        assert exc_info.value.locations
        assert exc_info.value.code == "SCHEMA_SYNTAX_ERROR"


class TestBuildSchema:
    """Tests for build_schema."""

    def test_build_valid(self):
        """Valid SDL builds a schema including the preamble's Query type."""
        schema = build_schema("type Video { title: String }")

        assert "Video" in schema.type_map
        assert schema.query_type.name == "Query"

    def test_annotation_accepted(self):
        """The search directive can be used without declaring it."""
        schema = build_schema(
            'type Video { title: String @fullTextSearchable(query: "search") }'
        )
        assert "Video" in schema.type_map
        assert schema.get_directive("fullTextSearchable") is not None

    def test_syntax_error_location_relative_to_source(self):
        """Syntax error locations point into the author's file."""
        source = "type Video {\n  title String\n}\n"

        with pytest.raises(SchemaSyntaxError) as exc_info:
            build_schema(source)

        assert exc_info.value.locations == [(2, 9)]
        assert "line 2, column 9" in exc_info.value.message

    def test_unknown_type_raises(self):
        """Referencing an undeclared type is a validation error."""
        with pytest.raises(SchemaValidationError) as exc_info:
            build_schema("type Video { channel: Channel }")

        errors = exc_info.value.errors
        assert len(errors) >= 1
        assert any("Channel" in e.message for e in errors)
        assert exc_info.value.code == "SCHEMA_VALIDATION_ERROR"

    def test_each_error_logged(self, caplog):
        """Every validation error is logged at ERROR level."""
        with caplog.at_level(logging.ERROR, logger="query_schema.loader"):
            with pytest.raises(SchemaValidationError):
                build_schema("type Video { channel: Channel, owner: Member }")

        messages = [r.getMessage() for r in caplog.records if r.levelno == logging.ERROR]
        assert any("Channel" in m for m in messages)
        assert any("Member" in m for m in messages)

    def test_all_errors_reported(self):
        """Every validation error is carried, not just the first."""
        with pytest.raises(SchemaValidationError) as exc_info:
            build_schema("type Video { channel: Channel, owner: Member }")

        messages = [e.message for e in exc_info.value.errors]
        assert any("Channel" in m for m in messages)
        assert any("Member" in m for m in messages)

    def test_duplicate_query_raises(self):
        """Declaring Query collides with the preamble."""
        with pytest.raises(SchemaValidationError) as exc_info:
            build_schema("type Query { videos: [String] }")

        assert any("Query" in e.message for e in exc_info.value.errors)

    def test_structural_error_raises(self):
        """Object types without fields fail structural validation."""
        with pytest.raises(SchemaValidationError) as exc_info:
            build_schema("type Empty")

        assert any("Empty" in e.message for e in exc_info.value.errors)

    def test_format_errors(self):
        """Errors render as '<name>: <message>'."""
        with pytest.raises(SchemaValidationError) as exc_info:
            build_schema("type Video { channel: Channel }")

        lines = exc_info.value.format_errors()
        assert len(lines) == len(exc_info.value.errors)
        assert all(line.startswith("GraphQLError: ") for line in lines)


class TestLoadSchema:
    """Tests for load_schema."""

    def test_load_from_file(self, tmp_path):
        """Schema is loaded from a file path."""
        path = write_schema(tmp_path, "type Video { title: String }")
        schema = load_schema(path)
        assert "Video" in schema.type_map

    def test_load_accepts_str_path(self, tmp_path):
        """String paths work as well as Path objects."""
        path = write_schema(tmp_path, "type Video { title: String }")
        schema = load_schema(str(path))
        assert "Video" in schema.type_map

    def test_load_missing(self, tmp_path):
        """Missing file raises SchemaNotFoundError."""
        with pytest.raises(SchemaNotFoundError):
            load_schema(tmp_path / "nope.graphql")
