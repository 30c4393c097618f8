"""
Configuration management using Pydantic Settings
"""
import json
from functools import lru_cache
from pathlib import Path
from typing import Dict, Literal, Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# config.py is at: backend/uptime_demo/core/config.py
# Project root is: backend/uptime_demo/core/../../../
_current_file = Path(__file__).resolve()
_backend_dir = _current_file.parent.parent.parent
_project_root = _backend_dir.parent
ENV_FILE = _project_root / ".env"
# Fallback: try in backend/ directory if not found in project root
if not ENV_FILE.exists():
    ENV_FILE = _backend_dir / ".env"
if ENV_FILE.exists():
    load_dotenv(ENV_FILE, override=False)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings"""

    # Application
    app_name: str = "uptime-demo"
    app_env: str = Field(default="development", description="Application environment")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_module_levels: Optional[str] = Field(
        default=None,
        description='Module-specific log levels (JSON string, e.g., {"uptime_demo.services": "DEBUG"})'
    )
    log_format: Literal["text", "json"] = Field(
        default="text",
        description="Log format: 'json' for structured logging, 'text' for plain text"
    )
    log_file_enabled: bool = Field(default=False, description="Enable file logging")
    log_file_path: str = Field(
        default="logs/uptime-demo.log",
        description="Path to log file (relative to project root)"
    )
    log_file_retention: int = Field(
        default=7,
        ge=1,
        description="Number of days to keep log files"
    )

    # Emitter
    uptime_variant: Literal["delay_first", "message_first"] = Field(
        default="delay_first",
        description="Counter preset: 'delay_first' (3 steps from 1) or 'message_first' (20 steps from 0)"
    )
    uptime_steps: Optional[int] = Field(
        default=None,
        ge=1,
        description="Override the preset's number of steps"
    )
    uptime_delay_ms: Optional[int] = Field(
        default=None,
        ge=1,
        description="Override the per-step delay in milliseconds"
    )
    uptime_color: bool = Field(default=True, description="Style output with ANSI colors")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept log levels in any case"""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("log_module_levels")
    @classmethod
    def validate_module_levels(cls, v: Optional[str]) -> Optional[str]:
        """Require a JSON object mapping logger names to known levels"""
        if v is None:
            return v
        try:
            levels = json.loads(v)
        except json.JSONDecodeError as e:
            raise ValueError(f"log_module_levels is not valid JSON: {e}") from e
        if not isinstance(levels, dict):
            raise ValueError("log_module_levels must be a JSON object")
        for module, level in levels.items():
            if not isinstance(level, str) or level.strip().upper() not in LOG_LEVELS:
                raise ValueError(f"Unknown log level for {module}: {level!r}")
        return v

    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_log_format(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @property
    def module_levels(self) -> Dict[str, str]:
        """Parsed log_module_levels with upper-case level names"""
        if not self.log_module_levels:
            return {}
        return {
            module: level.strip().upper()
            for module, level in json.loads(self.log_module_levels).items()
        }

    @field_validator("uptime_variant", mode="before")
    @classmethod
    def normalize_variant(cls, v):
        """Accept 'message-first' as well as 'message_first'"""
        if isinstance(v, str):
            return v.strip().lower().replace("-", "_")
        return v

    @property
    def emitter_config(self):
        """Build the emitter run context from the preset and overrides"""
        from uptime_demo.services.uptime_emitter import EmitterConfig

        return EmitterConfig.from_variant(
            self.uptime_variant,
            steps=self.uptime_steps,
            delay_ms=self.uptime_delay_ms,
        )

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE) if ENV_FILE.exists() else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_ignore_empty=True
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
