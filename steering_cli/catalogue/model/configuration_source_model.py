"""Steering CLI Module"""

# standard library
from typing import Annotated, Literal

# third-party
from pydantic import BaseModel, Field

# first-party
from steering_cli.catalogue.model.repository_config_model import RepositoryConfigModel


class RemoteSource(BaseModel):
    """Templates are read from a GitHub repository."""

    kind: Literal['remote'] = 'remote'
    repository: RepositoryConfigModel


class LocalSource(BaseModel):
    """Templates are read from a local directory."""

    kind: Literal['local'] = 'local'
    root_path: str


class UnconfiguredSource(BaseModel):
    """No template source has been configured."""

    kind: Literal['unconfigured'] = 'unconfigured'


ConfigurationSource = Annotated[
    RemoteSource | LocalSource | UnconfiguredSource, Field(discriminator='kind')
]


class SourceConfigModel(BaseModel):
    """Model Definition for the persisted source configuration record."""

    repository: RepositoryConfigModel | None = None
    templates_path: str | None = Field(None, description='The local templates directory.')
