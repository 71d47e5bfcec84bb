"""Resolution of an environment variable's value."""

from __future__ import annotations

import os
from typing import Any, MutableMapping

from env_confirm.core.compare import to_text
from env_confirm.utils.errors import ConfigurationError
from env_confirm.utils.logging import get_logger

logger = get_logger(__name__)


def resolve_value(
    name: str,
    default: Any = None,
    environ: MutableMapping[str, str] | None = None,
    mode_variable: str = "MODE",
) -> tuple[str, str]:
    """Resolve the value of an environment variable.

    Lookup order:
    1. ``NAME`` itself
    2. ``NAME_<MODE>`` when the mode variable is set; a hit is moved to
       ``NAME`` and the suffixed entry is removed
    3. ``default``, which is written to ``NAME``

    Empty values count as unset.

    Args:
        name: Variable name, case-insensitive
        default: Fallback value if the variable cannot be resolved
        environ: Environment table to read and update. Defaults to os.environ
        mode_variable: Name of the variable holding the current mode

    Returns:
        Tuple of (upper-cased name, resolved value)

    Raises:
        ConfigurationError: If the name is empty or the variable is unresolved
    """
    if not name or not name.strip():
        raise ConfigurationError('The "name" parameter is required!')

    if environ is None:
        environ = os.environ

    name = name.strip().upper()
    value = environ.get(name)

    mode = environ.get(mode_variable) if mode_variable else None
    if not value and mode:
        suffixed = f"{name}_{mode.upper()}"
        value = environ.get(suffixed)
        if value:
            environ[name] = value
            del environ[suffixed]
            logger.debug("Renamed %s to %s", suffixed, name)

    if not value:
        if default is None:
            raise ConfigurationError(
                f'The "{name}" environment variable is undefined!', name=name
            )
        value = to_text(default)
        environ[name] = value
        logger.debug("Applied default to %s", name)

    return name, value
