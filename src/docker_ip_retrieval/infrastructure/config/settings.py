"""
Application settings.

Managed with Pydantic Settings. Values come from the process environment
only; fields use the DOCKER_IP_ prefix except DEBUG and DOCKER_HOST, which
keep their conventional names.
"""
from functools import lru_cache
from typing import Any, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_prefix="DOCKER_IP_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # ============== Application ==============
    debug: bool = Field(default=False, validation_alias="DEBUG")

    # ============== Docker ==============
    # None lets aiodocker resolve DOCKER_HOST or the default local socket.
    docker_host: Optional[str] = Field(default=None, validation_alias="DOCKER_HOST")
    exec_timeout: Optional[float] = Field(default=None, gt=0)
    max_concurrency: int = Field(default=16, ge=1)

    # ============== Lookup services ==============
    ip_echo_url: str = Field(default="https://api.ipify.org")
    geolocation_url: str = Field(default="http://ip-api.com/json")
    http_timeout: float = Field(default=10.0, gt=0)

    # ============== Logging ==============
    log_level: str = Field(default="WARNING")
    log_format: str = Field(default="text")  # json, text

    @field_validator("debug", mode="before")
    @classmethod
    def validate_debug(cls, v: Any) -> Any:
        # The variable being set at all turns debug logging on.
        if isinstance(v, str):
            return True
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"log_level must be one of {allowed}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        allowed = {"json", "text"}
        if v not in allowed:
            raise ValueError(f"log_format must be one of {allowed}")
        return v

    @property
    def effective_log_level(self) -> str:
        """DEBUG when debug is enabled, the configured level otherwise"""
        return "DEBUG" if self.debug else self.log_level


@lru_cache()
def get_settings() -> Settings:
    """Get the cached settings instance"""
    return Settings()
