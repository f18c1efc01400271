"""Steering CLI Module"""

# standard library
from datetime import datetime

# third-party
from pydantic import BaseModel, Field

# first-party
from steering_cli.catalogue.model.template_metadata_model import TemplateMetadataModel


class CacheEntryModel(BaseModel):
    """Model Definition for a cached template listing."""

    key: str = Field(..., description='The repository identity (owner/repo[/path]).')
    templates: list[TemplateMetadataModel] = Field(default_factory=list)
    fetched_at: datetime = Field(..., description='When the listing was fetched (UTC).')

    def age_seconds(self, now: datetime) -> float:
        """Return the entry age in seconds relative to now."""
        return (now - self.fetched_at).total_seconds()
