"""Steering CLI Module"""

# standard library
from datetime import datetime

# third-party
from pydantic import BaseModel


class RateLimitInfoModel(BaseModel):
    """Model Definition for GitHub rate limit status."""

    limit: int
    remaining: int
    reset: datetime
    authenticated: bool


class ValidationResultModel(BaseModel):
    """Model Definition for a repository validation check."""

    valid: bool
    error: str | None = None
    status_code: int | None = None
