"""Configuration models."""

from pydantic import BaseModel, Field, field_validator

from .. import consts

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class FetchConfig(BaseModel):
    """HTTP client configuration shared by every fetch."""

    user_agent: str = Field(consts.USER_AGENT, description="User-Agent header sent to every feed")
    timeout: float = Field(consts.DEFAULT_TIMEOUT, description="Request timeout in seconds", gt=0)
    follow_redirects: bool = Field(True, description="Follow HTTP redirects")

    @field_validator("user_agent")
    @classmethod
    def validate_user_agent(cls, v: str) -> str:
        """Reject blank header values."""
        if not v.strip():
            raise ValueError("user_agent must not be empty")
        return v


class ConfigModel(BaseModel):
    """Main configuration model."""

    fetch: FetchConfig = Field(default_factory=FetchConfig)
    log_level: str = Field("INFO", description="Log level used by the CLI")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize to an upper-case logging level name."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {v!r}")
        return level
