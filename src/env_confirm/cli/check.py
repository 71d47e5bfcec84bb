"""CLI command for confirming a single environment variable."""

import os
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from env_confirm.cli.utils import console, status_icon


def load_env_file(path: Path, override: bool = False) -> dict[str, str]:
    """Load environment variables from a file into os.environ.

    Args:
        path: Path to a KEY=VALUE file
        override: Replace variables that are already set

    Returns:
        Variables read from the file
    """
    env: dict[str, str] = {}
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" in line:
                key, _, value = line.partition("=")
                key = key.strip()
                value = value.strip().strip("'\"")
                if key:
                    env[key] = value

    for key, value in env.items():
        if override or key not in os.environ:
            os.environ[key] = value
    return env


def check_cmd(
    name: str = typer.Argument(..., help="Environment variable to confirm"),
    default: Optional[str] = typer.Option(
        None, "--default", "-d", help="Value to use if the variable is unset"
    ),
    env_file: Optional[Path] = typer.Option(
        None,
        "--env-file",
        "-e",
        help="Load variables from a .env file first (existing variables win)",
        exists=True,
    ),
    mode_variable: Optional[str] = typer.Option(
        None, "--mode-variable", help="Variable holding the current mode"
    ),
    negate: bool = typer.Option(
        False, "--not", help="Negate every predicate given"
    ),
    eq: Optional[str] = typer.Option(None, "--eq", help="Must equal this value"),
    gt: Optional[str] = typer.Option(None, "--gt", help="Must be greater than this value"),
    ge: Optional[str] = typer.Option(None, "--ge", help="Must be greater than or equal to this value"),
    lt: Optional[str] = typer.Option(None, "--lt", help="Must be less than this value"),
    le: Optional[str] = typer.Option(None, "--le", help="Must be less than or equal to this value"),
    min_length: Optional[int] = typer.Option(None, "--min-length", help="Minimum length"),
    max_length: Optional[int] = typer.Option(None, "--max-length", help="Maximum length"),
    contains: Optional[str] = typer.Option(None, "--contains", help="Must contain this substring"),
    matches: Optional[str] = typer.Option(None, "--matches", help="Must match this regular expression"),
    one_of: Optional[str] = typer.Option(
        None, "--in", help="Must be one of these comma-separated values"
    ),
    path: bool = typer.Option(False, "--path", help="Must be an existing path"),
    force: bool = typer.Option(False, "--force", help="With --path, create the directory if missing"),
    number: bool = typer.Option(False, "--number", help="Must be a number"),
    integer: bool = typer.Option(False, "--integer", help="Must be an integer"),
    float_: bool = typer.Option(False, "--float", help="Must be a floating point number"),
) -> None:
    """
    Confirm an environment variable against one or more predicates.

    Stops at the first predicate that does not hold and exits with status 1.

    Example:
        env-confirm check SERVER_PORT --integer --ge 1000 --le 60000
    """
    from env_confirm.core.confirm import confirm
    from env_confirm.utils.config import get_config
    from env_confirm.utils.errors import EnvConfirmError

    if force and not path:
        raise typer.BadParameter("can only be used together with --path", param_hint="--force")

    if env_file:
        load_env_file(env_file)

    config = get_config().model_copy(update={"exit_on_failure": False})
    if mode_variable:
        config = config.model_copy(update={"mode_variable": mode_variable})

    def step(c):
        return c.not_ if negate else c

    try:
        c = confirm(name, default, config=config)
        if eq is not None:
            c = step(c).is_eq(eq)
        if gt is not None:
            c = step(c).is_gt(gt)
        if ge is not None:
            c = step(c).is_ge(ge)
        if lt is not None:
            c = step(c).is_lt(lt)
        if le is not None:
            c = step(c).is_le(le)
        if min_length is not None or max_length is not None:
            low = min_length if min_length is not None else 0
            high = max_length if max_length is not None else len(c.value)
            c = step(c).has_length(low, high)
        if contains is not None:
            c = step(c).contains(contains)
        if matches is not None:
            c = step(c).matches(matches)
        if one_of is not None:
            c = step(c).is_in(one_of)
        if number:
            c = step(c).is_number()
        if integer:
            c = step(c).is_integer()
        if float_:
            c = step(c).is_float()
        if path:
            c = step(c).is_path(force=force)
    except EnvConfirmError as e:
        console.print(f"{status_icon(False)} {escape(e.message)}", highlight=False)
        raise typer.Exit(config.exit_code)

    console.print(f"{status_icon(True)} {escape(c.name)}={escape(c.value)}", highlight=False)
