"""Command-line interface for furnili."""
