"""Command-line tools for the query schema parser."""
