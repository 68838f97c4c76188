"""Command-line interface for wrap-text."""
