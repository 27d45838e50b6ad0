"""
MODULE OVERVIEW:
The three reading primitives every configuration value goes through.

WHAT IS HAPPENING HERE:
Strings honor *presence*: `DB_PASSWORD=""` really means an empty password.
Integers and booleans treat an empty value as absent, and anything that does not
parse falls back to the default without complaint. A bad `DB_PORT` is not fatal;
only required fields can stop the process (see `config.validate_config`).
"""
import os
import re
from typing import Mapping

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")

# Signed 64-bit range; wider values count as malformed
INT_MIN = -(2**63)
INT_MAX = 2**63 - 1

_TRUE_VALUES = frozenset({"true", "1", "yes", "on"})
_FALSE_VALUES = frozenset({"false", "0", "no", "off"})


def _source(environ: Mapping[str, str] | None) -> Mapping[str, str]:
    return os.environ if environ is None else environ


def parse_int(raw: str, default: int) -> int:
    """Base-10 signed integer, or `default` for empty/malformed input."""
    if not raw or not _INT_PATTERN.fullmatch(raw):
        return default
    value = int(raw)
    if not INT_MIN <= value <= INT_MAX:
        return default
    return value


def parse_bool(raw: str, default: bool) -> bool:
    value = raw.lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return default


def get_env(key: str, default: str, environ: Mapping[str, str] | None = None) -> str:
    """
    Returns the variable if it is set at all, even to an empty string.
    Falls back to `default` only when the key is missing.
    """
    env = _source(environ)
    if key in env:
        return env[key]
    return default


def get_env_as_int(key: str, default: int, environ: Mapping[str, str] | None = None) -> int:
    """
    Reads `key` as an integer. Absent, empty and unparseable values all give
    `default`; no error is ever raised.
    """
    return parse_int(get_env(key, "", environ), default)


def get_env_as_bool(key: str, default: bool, environ: Mapping[str, str] | None = None) -> bool:
    """
    Case-insensitive `true|1|yes|on` / `false|0|no|off`.
    Any other value, including absent, gives `default`.
    """
    return parse_bool(get_env(key, "", environ), default)
