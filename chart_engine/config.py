"""Configuration management using Pydantic Settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Chart engine settings."""

    # Sampling defaults supplied to callers that omit options
    default_target_points: int = 1000
    default_method: str = "auto"

    # Requests carrying more points than this are rejected
    max_series_points: int = 2_000_000

    # Renderer capability (no GPU probing happens server-side)
    webgl_supported: bool = True

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="CHART_ENGINE_",
    )


# Global settings instance
settings = Settings()
