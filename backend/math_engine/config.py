"""
Application configuration module using Pydantic Settings.

This module provides centralized configuration for the Jarvis math engine,
including fixed-point precision, per-call work limits, logging and the
HTTP server.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with validation.

    Settings are loaded from environment variables (prefix MATH_ENGINE_)
    with fallback to .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="MATH_ENGINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    debug: bool = Field(
        default=False,
        description="Debug mode: DEBUG logging and auto-reload in run.py",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Minimum log level (DEBUG, INFO, WARNING, ERROR)",
    )
    log_json: bool = Field(
        default=False,
        description="Render logs as JSON lines instead of console output",
    )

    # Numeric engine
    fixed_point_scale: int = Field(
        default=8,
        ge=0,
        le=18,
        description="Fractional digits kept by FixedDecimal values",
    )
    max_compounding_trades: int = Field(
        default=5000,
        ge=1,
        le=100000,
        description="Upper bound on numberOfTrades for a compounding projection",
    )
    max_expression_length: int = Field(
        default=256,
        ge=16,
        le=4096,
        description="Maximum characters accepted by the arithmetic expression evaluator",
    )

    # Application Settings
    backend_port: int = Field(
        default=8000,
        ge=1024,
        le=65535,
        description="Backend API server port",
    )
    cors_origins: list[str] = Field(
        default=["http://localhost:3000"],
        description="Origins allowed to call the API from a browser",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Upper-case the level name and reject unknown levels."""
        level = str(v).upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


# Global settings instance
settings = Settings()
