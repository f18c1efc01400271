"""Steering CLI Module"""

# third-party
from pydantic import BaseModel, ConfigDict, Field


class GithubContentModel(BaseModel):
    """Model Definition for one entry of the GitHub contents API."""

    model_config = ConfigDict(extra='allow')

    download_url: str | None = Field(
        None, description='The download url for the file. Directories will not have a download url.'
    )
    name: str = Field(..., description='The name of the file.')
    path: str = Field(..., description='The path of the file.')
    sha: str | None = Field(None, description='The sha of the file.')
    size: int | None = Field(None, description='The size of the file in bytes.')
    type: str = Field(..., description='The type (dir, file, symlink, or submodule).')

    @property
    def is_dir(self) -> bool:
        """Return True if the entry is a directory."""
        return self.type == 'dir'

    @property
    def is_file(self) -> bool:
        """Return True if the entry is a file."""
        return self.type == 'file'
