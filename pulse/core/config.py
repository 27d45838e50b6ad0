"""
MODULE OVERVIEW:
The process configuration record and its loader.

WHAT IS HAPPENING HERE:
`load_config()` reads every contractual environment variable exactly once,
assembles an immutable `Config` and then enforces the required-field policy.
Assembly itself never fails; bad integers quietly become defaults. Only
validation can reject the environment, and it always names the *variable* the
operator has to fix, checking them in a fixed order so fixing one at a time
gives a predictable next error.

The record is frozen, so it can be handed to any coroutine or thread without
locking. Nothing here keeps a module-level instance: the bootstrap owns it and
passes it along explicitly.
"""
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Callable, Mapping

from pulse.core.env import get_env, get_env_as_int

DEFAULT_JWT_EXPIRATION_S = 86400
# Expiration in nanoseconds must fit a signed 64-bit integer
MAX_JWT_EXPIRATION_S = (2**63 - 1) // 10**9


class ConfigError(Exception):
    """Raised when the environment cannot produce a usable configuration."""


class MissingRequiredError(ConfigError):
    def __init__(self, variable: str):
        super().__init__(f"{variable} is required")
        self.variable = variable


@dataclass(frozen=True)
class ServerConfig:
    port: str
    env: str


@dataclass(frozen=True)
class DatabaseConfig:
    host: str
    port: int
    user: str
    password: str = field(repr=False)
    db_name: str
    ssl_mode: str


@dataclass(frozen=True)
class JWTConfig:
    access_secret: str = field(repr=False)
    refresh_secret: str = field(repr=False)
    expiration: timedelta


@dataclass(frozen=True)
class Config:
    server: ServerConfig
    database: DatabaseConfig
    jwt: JWTConfig

    @property
    def is_production(self) -> bool:
        return self.server.env.lower() == "production"

    @property
    def is_development(self) -> bool:
        return self.server.env.lower() == "development"

    def validate(self) -> None:
        """Re-run the required-field checks against this record."""
        validate_config(self)


# Checked top to bottom; the first empty one is reported.
_REQUIRED: tuple[tuple[str, Callable[[Config], str]], ...] = (
    ("DB_HOST", lambda c: c.database.host),
    ("DB_USER", lambda c: c.database.user),
    ("DB_NAME", lambda c: c.database.db_name),
    ("JWT_SECRET", lambda c: c.jwt.access_secret),
    ("REFRESH_SECRET", lambda c: c.jwt.refresh_secret),
)


def _expiration(environ: Mapping[str, str] | None) -> timedelta:
    seconds = get_env_as_int("JWT_EXPIRATION", DEFAULT_JWT_EXPIRATION_S, environ)
    if not 0 <= seconds <= MAX_JWT_EXPIRATION_S:
        seconds = DEFAULT_JWT_EXPIRATION_S
    return timedelta(seconds=seconds)


def build_config(environ: Mapping[str, str] | None = None) -> Config:
    """Assembles the record from `environ` (default: `os.environ`) without validating it."""
    return Config(
        server=ServerConfig(
            port=get_env("SERVER_PORT", "8080", environ),
            env=get_env("APP_ENV", "development", environ),
        ),
        database=DatabaseConfig(
            host=get_env("DB_HOST", "localhost", environ),
            port=get_env_as_int("DB_PORT", 5432, environ),
            user=get_env("DB_USER", "pulse_dev", environ),
            password=get_env("DB_PASSWORD", "", environ),
            db_name=get_env("DB_NAME", "pulse", environ),
            ssl_mode=get_env("DB_SSL_MODE", "disable", environ),
        ),
        jwt=JWTConfig(
            access_secret=get_env("JWT_SECRET", "", environ),
            refresh_secret=get_env("REFRESH_SECRET", "", environ),
            expiration=_expiration(environ),
        ),
    )


def validate_config(config: Config) -> None:
    """Raises `MissingRequiredError` for the first empty required variable."""
    for variable, read in _REQUIRED:
        if read(config) == "":
            raise MissingRequiredError(variable)


def load_config(environ: Mapping[str, str] | None = None) -> Config:
    config = build_config(environ)
    validate_config(config)
    return config
