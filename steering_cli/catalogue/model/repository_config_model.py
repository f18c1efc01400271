"""Steering CLI Module"""

# third-party
from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_BRANCH = 'main'


class RepositoryConfigModel(BaseModel):
    """Model Definition for a remote template repository."""

    model_config = ConfigDict(validate_assignment=True)

    owner: str = Field(..., description='The repository owner (user or organization).')
    repo: str = Field(..., description='The repository name.')
    path: str | None = Field(None, description='Optional subdirectory holding the templates.')
    branch: str = Field(DEFAULT_BRANCH, description='The branch to read templates from.')

    @field_validator('path', mode='before')
    @classmethod
    def path_validator(cls, v):
        """Normalize the path, stripping surrounding slashes."""
        if isinstance(v, str):
            v = v.strip().strip('/')
            return v or None
        return v

    @field_validator('branch', mode='before')
    @classmethod
    def branch_validator(cls, v):
        """Default an empty branch to main."""
        return v or DEFAULT_BRANCH

    @property
    def identity(self) -> str:
        """Return the stable repository identity (owner/repo[/path])."""
        identity = f'{self.owner}/{self.repo}'
        if self.path:
            identity = f'{identity}/{self.path}'
        return identity

    @property
    def is_valid(self) -> bool:
        """Return True if both owner and repo are set."""
        return bool(self.owner.strip() and self.repo.strip())
