"""
Configuration settings for the LexPrep quiz tool.

Uses Pydantic Settings for environment variable management with .env file support.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Question Bank
    # ========================================
    question_bank_path: str = Field(
        default="questions_keywords.json",
        description="Path or http(s) URL of the question bank JSON document",
    )
    http_timeout: float = Field(
        default=10.0,
        description="Timeout in seconds when fetching a bank over HTTP",
    )

    # ========================================
    # Sessions
    # ========================================
    default_question_count: int = Field(
        default=10,
        ge=1,
        description="Number of questions drawn for a training or exam session",
    )
    default_exam_minutes: int = Field(
        default=60,
        ge=1,
        description="Exam time limit in minutes",
    )

    # ========================================
    # Scoring display
    # ========================================
    pass_threshold: int = Field(
        default=70,
        ge=0,
        le=100,
        description="Score at or above which an answer counts as passed",
    )
    average_threshold: int = Field(
        default=40,
        ge=0,
        le=100,
        description="Score at or above which a failed answer is shown as average",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Minimum loguru level written to stderr by the CLI",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
