"""
Query schema test suite.

This package contains:
- unit/: Unit tests (no external services; the CLI tests spawn subprocesses)
"""
