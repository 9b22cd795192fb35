"""Command-line interface for newslens."""
