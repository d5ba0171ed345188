"""Command-line token parsing.

Turns ``<command> [--<flag> <value>]...`` into an :class:`Invocation`.
Parsing is purely structural; type conversion happens later through the
``require_*`` accessors, which the command handlers call.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from carfuel._constants import INT32_MAX, INT32_MIN, INT64_MAX, INT64_MIN
from carfuel.exceptions import ParseError, ValidationError

FLAG_PREFIX = "--"

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_DOUBLE_RE = re.compile(r"[+-]?(?:NaN|Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?[fFdD]?)")


@dataclass(frozen=True)
class Invocation:
    """Parsed command name plus its flag values (raw strings)."""

    command: str
    arguments: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "arguments", MappingProxyType(dict(self.arguments)))

    def require_string(self, key: str) -> str:
        try:
            return self.arguments[key]
        except KeyError:
            raise ValidationError(key) from None

    def require_int(self, key: str) -> int:
        """Return flag *key* as a signed 32-bit integer."""
        return self._require_integer(key, INT32_MIN, INT32_MAX, "integer")

    def require_long(self, key: str) -> int:
        """Return flag *key* as a signed 64-bit integer."""
        return self._require_integer(key, INT64_MIN, INT64_MAX, "number")

    def require_double(self, key: str) -> float:
        """Return flag *key* as a double.

        Accepts decimal and exponent forms with an optional ``f``/``d``
        suffix, plus ``NaN`` and ``Infinity``. Surrounding whitespace is
        ignored. Hexadecimal floats are not supported.
        """
        value = self.require_string(key).strip()
        if not _DOUBLE_RE.fullmatch(value):
            raise ValidationError(key, expected="decimal number")
        return float(value.rstrip("fFdD"))

    def _require_integer(self, key: str, low: int, high: int, expected: str) -> int:
        value = self.require_string(key)
        if not _INTEGER_RE.fullmatch(value):
            raise ValidationError(key, expected=expected)
        result = int(value)
        if not low <= result <= high:
            raise ValidationError(key, expected=expected)
        return result


def is_flag(token: str) -> bool:
    return token.startswith(FLAG_PREFIX)


def parse_tokens(tokens: Sequence[str]) -> Invocation:
    """Parse raw command-line tokens.

    ``tokens[0]`` is the command. Every ``--name`` token must be followed
    by a value that is not itself a flag; repeated flags keep the last
    value. Stray non-flag tokens are ignored.

    Raises
    ------
    ParseError
        If *tokens* is empty or a flag has no value.
    """
    if not tokens:
        raise ParseError("No command provided")

    command = tokens[0]
    arguments: dict[str, str] = {}

    i = 1
    while i < len(tokens):
        token = tokens[i]
        if is_flag(token):
            if i + 1 >= len(tokens) or is_flag(tokens[i + 1]):
                raise ParseError(f"Missing value for argument: {token}")
            arguments[token[len(FLAG_PREFIX) :]] = tokens[i + 1]
            i += 2
        else:
            i += 1

    return Invocation(command=command, arguments=arguments)
