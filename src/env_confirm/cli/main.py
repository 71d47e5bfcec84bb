"""Main CLI entry point for env-confirm."""

from typing import Optional

import typer

from env_confirm.cli import check
from env_confirm.cli.utils import console

app = typer.Typer(
    name="env-confirm",
    help="Fail-fast validation of environment variables.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command(name="check")(check.check_cmd)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress non-essential output"),
    log_format: Optional[str] = typer.Option(
        None,
        "--log-format",
        help="Log format: plain, or structured (adds timestamps and variable=NAME)",
    ),
) -> None:
    """
    env-confirm: fail-fast validation of environment variables.

    - [bold]check[/bold]: Confirm a variable against predicates
    - [bold]version[/bold]: Show the installed version
    """
    from env_confirm.utils.config import get_config
    from env_confirm.utils.logging import configure_logging

    config = get_config()
    log_format = log_format or config.log_format
    if log_format not in ("plain", "structured"):
        raise typer.BadParameter("must be 'plain' or 'structured'", param_hint="--log-format")
    structured = log_format == "structured"

    if verbose:
        configure_logging(level="DEBUG", structured=structured)
    elif quiet:
        configure_logging(level="ERROR", structured=structured)
    else:
        configure_logging(level=config.log_level, structured=structured)


@app.command()
def version() -> None:
    """Show the env-confirm version."""
    from env_confirm import __version__

    console.print(f"env-confirm version {__version__}")


if __name__ == "__main__":
    app()
