"""Fluent confirmation of environment variable values."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any, Iterable, MutableMapping, NoReturn

from env_confirm.core.compare import (
    array_to_text,
    loose_equals,
    parse_integer,
    parse_number,
    relate,
    text_to_array,
)
from env_confirm.core.resolve import resolve_value
from env_confirm.utils.config import EnvConfirmConfig, get_config
from env_confirm.utils.errors import ConfigurationError, ValidationError, fatal
from env_confirm.utils.logging import get_logger_with_context

_TRUE_WORDS = frozenset({"true", "1", "yes", "on"})
_FALSE_WORDS = frozenset({"false", "0", "no", "off"})

# (plain phrase, negated phrase) for each ordering relation
_RELATION_PHRASES = {
    "eq": ("must be equal to", "must not be equal to"),
    "gt": ("must be greater than", "must be less than or equal to"),
    "ge": ("must be greater than or equal to", "must be less than"),
    "lt": ("must be less than", "must be greater than or equal to"),
    "le": ("must be less than or equal to", "must be greater than"),
}


class Confirmation:
    """An environment variable under confirmation.

    Every predicate either fails or returns a new Confirmation, so chains can
    be reordered and repeated freely. ``not_`` inverts exactly the next
    predicate.

    Example:
        port = confirm("SERVER_PORT").is_ge(1000).is_le(60000).as_int()
        confirm("LOG_PATH", "./logs").is_path(force=True)
        confirm("NODE_ENV").not_.is_eq("production")
    """

    def __init__(
        self,
        name: str,
        value: str,
        *,
        negate: bool = False,
        environ: MutableMapping[str, str] | None = None,
        config: EnvConfirmConfig | None = None,
    ) -> None:
        self._name = name
        self._value = value
        self._negate = negate
        self._environ = os.environ if environ is None else environ
        self._config = config
        self._logger = get_logger_with_context(__name__, variable=name)

    def __repr__(self) -> str:
        return f"Confirmation(name={self._name!r}, value={self._value!r}, negate={self._negate})"

    @property
    def name(self) -> str:
        """Upper-cased variable name."""
        return self._name

    @property
    def value(self) -> str:
        """Resolved value."""
        return self._value

    @property
    def negate(self) -> bool:
        """Whether the next predicate is negated."""
        return self._negate

    @property
    def not_(self) -> Confirmation:
        """Negate the next predicate."""
        return self._derive(negate=not self._negate)

    def _derive(self, *, negate: bool = False, value: str | None = None) -> Confirmation:
        return Confirmation(
            self._name,
            self._value if value is None else value,
            negate=negate,
            environ=self._environ,
            config=self._config,
        )

    def _check(
        self,
        result: bool,
        predicate: str,
        message: str,
        negated_message: str,
        value: str | None = None,
    ) -> Confirmation:
        if self._negate:
            result = not result
        if not result:
            fatal(
                ValidationError(
                    negated_message if self._negate else message,
                    name=self._name,
                    value=self._value,
                    predicate=predicate,
                    negated=self._negate,
                ),
                self._config,
            )
        self._logger.debug("%s%s passed", "not " if self._negate else "", predicate)
        return self._derive(value=value)

    def _relation(self, op: str, compare: Any) -> Confirmation:
        phrase, negated_phrase = _RELATION_PHRASES[op]
        prefix = f'"{self._name}" is {self._value} and'
        return self._check(
            relate(self._value, op, compare),
            f"is_{op}",
            f"{prefix} {phrase} {compare}",
            f"{prefix} {negated_phrase} {compare}",
        )

    def is_eq(self, compare: Any) -> Confirmation:
        """Check the value equals ``compare``."""
        return self._relation("eq", compare)

    is_ = is_eq

    def is_defined(self) -> Confirmation:
        """Check the value is defined."""
        return self._check(
            self._value is not None,
            "is_defined",
            f'"{self._name}" must be defined',
            f'"{self._name}" must not be defined',
        )

    def is_gt(self, compare: Any) -> Confirmation:
        """Check the value is greater than ``compare``."""
        return self._relation("gt", compare)

    def is_ge(self, compare: Any) -> Confirmation:
        """Check the value is greater than or equal to ``compare``."""
        return self._relation("ge", compare)

    def is_lt(self, compare: Any) -> Confirmation:
        """Check the value is less than ``compare``."""
        return self._relation("lt", compare)

    def is_le(self, compare: Any) -> Confirmation:
        """Check the value is less than or equal to ``compare``."""
        return self._relation("le", compare)

    def has_length(self, min: int, max: int) -> Confirmation:
        """Check the value's length lies within ``[min, max]``."""
        length = len(self._value)
        prefix = f'"{self._name}" is {length} long and'
        return self._check(
            min <= length <= max,
            "has_length",
            f"{prefix} must be between {min} and {max} long",
            f"{prefix} must not be between {min} and {max} long",
        )

    def contains(self, substring: str) -> Confirmation:
        """Check the value contains ``substring``."""
        prefix = f'"{self._name}" is "{self._value}" and'
        return self._check(
            str(substring) in self._value,
            "contains",
            f'{prefix} must contain "{substring}"',
            f'{prefix} must not contain "{substring}"',
        )

    def matches(self, pattern: str | re.Pattern[str]) -> Confirmation:
        """Check the value matches a regular expression anywhere."""
        try:
            regex = re.compile(pattern)
        except re.error as e:
            fatal(
                ValidationError(
                    f'"{self._name}" cannot be checked: invalid regular expression "{pattern}": {e}',
                    name=self._name,
                    value=self._value,
                    predicate="matches",
                    negated=self._negate,
                ),
                self._config,
            )
        prefix = f'"{self._name}" is "{self._value}" and'
        return self._check(
            regex.search(self._value) is not None,
            "matches",
            f'{prefix} must match the regular expression "{regex.pattern}"',
            f'{prefix} must not match the regular expression "{regex.pattern}"',
        )

    def is_in(self, values: Iterable[Any] | str) -> Confirmation:
        """Check the value is one of ``values``.

        A string is treated as a comma-separated list.
        """
        if isinstance(values, str):
            values = text_to_array(values)
        values = list(values)
        prefix = f'"{self._name}" is "{self._value}" and'
        return self._check(
            any(loose_equals(self._value, v) for v in values),
            "is_in",
            f"{prefix} must be in {array_to_text(values)}",
            f"{prefix} must not be in {array_to_text(values)}",
        )

    def is_number(self) -> Confirmation:
        """Check the value parses as a number."""
        return self._kind(parse_number(self._value) is not None, "is_number", "a number")

    def is_integer(self) -> Confirmation:
        """Check the value parses as an integer."""
        return self._kind(parse_integer(self._value) is not None, "is_integer", "an integer")

    def is_float(self) -> Confirmation:
        """Check the value parses as a number with a fractional part."""
        number = parse_number(self._value)
        result = number is not None and parse_integer(self._value) is None
        return self._kind(result, "is_float", "a floating point number")

    def _kind(self, result: bool, predicate: str, noun: str) -> Confirmation:
        prefix = f'"{self._name}" is "{self._value}" and'
        return self._check(result, predicate, f"{prefix} must be {noun}", f"{prefix} must not be {noun}")

    def is_path(self, force: bool = False) -> Confirmation:
        """Check the value names an existing path.

        The value is made absolute and written back to the environment.
        With ``force`` a missing directory is created; only the last path
        component is created, never missing parents. Under negation the path
        must not exist and ``force`` is ignored.
        """
        resolved = os.path.abspath(self._value)
        self._environ[self._name] = resolved
        path = Path(resolved)
        prefix = f'"{self._name}" is "{resolved}" and'

        exists = path.exists()
        if not exists and force and not self._negate:
            try:
                path.mkdir()
            except OSError as e:
                fatal(
                    ValidationError(
                        f"{prefix} the directory could not be created: {e.strerror or e}",
                        name=self._name,
                        value=resolved,
                        predicate="is_path",
                    ),
                    self._config,
                )
            self._logger.info("Created directory %s", resolved)
            exists = True

        return self._check(
            exists,
            "is_path",
            f"{prefix} must be an existing path",
            f"{prefix} must not be an existing path",
            value=resolved,
        )

    def as_int(self) -> int:
        """Return the value as an integer."""
        number = parse_integer(self._value)
        if number is None:
            self._conversion_failed("an integer")
        return number

    def as_float(self) -> float:
        """Return the value as a float."""
        number = parse_number(self._value)
        if number is None:
            self._conversion_failed("a number")
        return number

    def as_bool(self) -> bool:
        """Return the value as a boolean (true/false, 1/0, yes/no, on/off)."""
        word = self._value.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
        self._conversion_failed("a boolean")

    def as_path(self) -> Path:
        """Return the value as a Path."""
        return Path(self._value)

    def _conversion_failed(self, noun: str) -> NoReturn:
        fatal(
            ValidationError(
                f'"{self._name}" is "{self._value}" and cannot be read as {noun}',
                name=self._name,
                value=self._value,
                predicate=f"as {noun}",
            ),
            self._config,
        )


def confirm(
    name: str,
    default: Any = None,
    *,
    environ: MutableMapping[str, str] | None = None,
    config: EnvConfirmConfig | None = None,
) -> Confirmation:
    """Start confirming an environment variable.

    Args:
        name: Variable name, case-insensitive
        default: Value to use and store if the variable cannot be resolved
        environ: Environment table. Defaults to os.environ
        config: Configuration. Defaults to the global configuration

    Returns:
        A Confirmation for chaining predicates

    Raises:
        ConfigurationError: If the variable cannot be resolved
    """
    if config is None:
        config = get_config()
    try:
        name, value = resolve_value(
            name, default, environ=environ, mode_variable=config.mode_variable
        )
    except ConfigurationError as e:
        fatal(e, config)
    return Confirmation(name, value, environ=environ, config=config)
