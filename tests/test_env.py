"""Tests for the environment accessors in `pulse.core.env`."""

import pytest

from pulse.core.env import get_env, get_env_as_bool, get_env_as_int, parse_int


def test_get_env_present_value_wins() -> None:
    assert get_env("DB_HOST", "localhost", {"DB_HOST": "db"}) == "db"


def test_get_env_empty_value_shadows_default() -> None:
    """An explicitly empty variable is a value, not an absence."""
    assert get_env("DB_PASSWORD", "secret", {"DB_PASSWORD": ""}) == ""


def test_get_env_absent_uses_default() -> None:
    assert get_env("DB_HOST", "localhost", {}) == "localhost"


def test_get_env_reads_process_environment(monkeypatch) -> None:
    monkeypatch.setenv("PULSE_TEST_VALUE", "from-os")
    assert get_env("PULSE_TEST_VALUE", "default") == "from-os"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("15432", 15432),
        ("-7", -7),
        ("+7", 7),
        ("", 5432),
        ("not-a-number", 5432),
        (" 42", 5432),
        ("1_000", 5432),
        ("4.2", 5432),
        ("9223372036854775807", 9223372036854775807),
        ("-9223372036854775808", -9223372036854775808),
        ("9223372036854775808", 5432),
        ("99999999999999999999", 5432),
        ("-9223372036854775809", 5432),
    ],
)
def test_get_env_as_int(raw, expected) -> None:
    assert get_env_as_int("DB_PORT", 5432, {"DB_PORT": raw}) == expected


def test_get_env_as_int_absent() -> None:
    assert get_env_as_int("DB_PORT", 5432, {}) == 5432


def test_parse_int_rejects_non_ascii_digits() -> None:
    assert parse_int("١٢٣", 9) == 9


@pytest.mark.parametrize("raw", ["true", "TRUE", "1", "yes", "On"])
def test_get_env_as_bool_truthy(raw) -> None:
    assert get_env_as_bool("FLAG", False, {"FLAG": raw}) is True


@pytest.mark.parametrize("raw", ["false", "False", "0", "NO", "off"])
def test_get_env_as_bool_falsy(raw) -> None:
    assert get_env_as_bool("FLAG", True, {"FLAG": raw}) is False


@pytest.mark.parametrize("env", [{}, {"FLAG": ""}, {"FLAG": "maybe"}])
def test_get_env_as_bool_falls_back(env) -> None:
    assert get_env_as_bool("FLAG", True, env) is True
    assert get_env_as_bool("FLAG", False, env) is False
