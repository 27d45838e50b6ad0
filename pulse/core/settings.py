"""
MODULE OVERVIEW:
Runtime knobs for the process itself, using Pydantic Settings.

WHAT IS HAPPENING HERE:
These are the values the bootstrap needs that are *not* part of the service
configuration record: where to bind, how loud to log, how long to wait for
in-flight requests on shutdown. They can come from the environment or a local
`.env` file. The contractual variables (`DB_*`, `JWT_*`, ...) live in
`pulse.core.config` and are deliberately not read here.
"""
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RuntimeSettings(BaseSettings):
    HOST: str = "0.0.0.0"
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # Graceful shutdown deadline
    SHUTDOWN_TIMEOUT_S: float = 5.0

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        # The same .env usually carries the DB_* and JWT_* variables too
        extra="ignore",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()
