"""Command-line interface for env-confirm."""
