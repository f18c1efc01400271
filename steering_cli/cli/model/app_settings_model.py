"""Steering CLI Module"""

# standard library
from pathlib import Path
from typing import Literal

# third-party
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettingsModel(BaseSettings):
    """Model Definition for CLI settings (STEERING_* environment variables)."""

    model_config = SettingsConfigDict(
        extra='ignore',
        case_sensitive=False,
        env_file='.env',
        env_file_encoding='utf-8',
        env_prefix='STEERING_',
        validate_assignment=True,
    )

    # storage
    out_path: Path = Field(
        Path('~/.steering'), description='Directory for state, token, and log files.'
    )
    cache_backend: Literal['json', 'redis'] = 'json'
    cache_max_entries: int = 100
    cache_ttl: int = Field(300, description='Freshness window in seconds.')
    redis_url: str = 'redis://localhost:6379/0'

    # github
    api_url: str = 'https://api.github.com'
    max_depth: int = 32
    max_retries: int = 3
    request_timeout: float = 30

    # logging
    log_backup_count: int = 5
    log_level: str = 'info'
    log_max_bytes: int = 10_485_760

    # templates
    target_dir: Path = Field(
        Path('.kiro/steering'), description='Project directory templates are written to.'
    )

    @field_validator('out_path', mode='after')
    @classmethod
    def out_path_validator(cls, v: Path) -> Path:
        """Expand the user home directory."""
        return v.expanduser()

    @field_validator('cache_ttl', 'cache_max_entries', 'max_depth', 'max_retries', mode='after')
    @classmethod
    def non_negative_validator(cls, v: int) -> int:
        """Reject negative values."""
        if v < 0:
            ex_msg = 'Value must not be negative.'
            raise ValueError(ex_msg)
        return v
