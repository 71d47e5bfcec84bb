"""Shared utilities for CLI commands."""

from rich.console import Console

# Shared console instance
console = Console()


def status_icon(success: bool) -> str:
    """Get a colored status icon.

    Args:
        success: Whether the status is successful

    Returns:
        Formatted status string
    """
    return "[green]OK[/green]" if success else "[red]FAIL[/red]"
