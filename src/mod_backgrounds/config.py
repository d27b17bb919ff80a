"""Runtime configuration for mod-backgrounds."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="MOD_BACKGROUNDS_", env_file=".env", extra="ignore")

    app_name: str = "mod-backgrounds"
    log_level: str = "INFO"
    transition_speed: float = Field(
        default=0.05,
        gt=0.0,
        le=1.0,
        description="Amount each fade value may move toward its target per frame.",
    )
    default_ug_style: int = Field(
        default=-1,
        description="Underground style slot used when no registered style claims the frame.",
    )
    default_surface_style: int = Field(
        default=-1,
        description="Surface style slot used when no registered style claims the frame.",
    )
    strict_buffers: bool = True


settings = Settings()
