"""Steering CLI Module"""

# standard library
from datetime import datetime

# third-party
from pydantic import BaseModel, ConfigDict, Field

TEMPLATE_EXTENSION = '.md'


def remove_extension(filename: str) -> str:
    """Return the filename without the template extension."""
    if filename.endswith(TEMPLATE_EXTENSION):
        return filename[: -len(TEMPLATE_EXTENSION)]
    return filename


class TemplateMetadataModel(BaseModel):
    """Model Definition for one discovered template file."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description='The display name (file name without extension).')
    filename: str = Field(..., description='The file name with extension.')
    path: str = Field(..., description='The slash-separated path relative to the root.')
    download_reference: str = Field(
        ..., description='A raw content URL (remote) or an absolute path (local).'
    )
    size_bytes: int | None = Field(None, description='The size of the file in bytes.')
    last_modified: datetime | None = Field(None, description='The last modified time.')
    sha: str | None = Field(None, description='The git sha of the file (remote only).')

    @classmethod
    def from_path(
        cls, path: str, download_reference: str, **kwargs
    ) -> 'TemplateMetadataModel':
        """Return a model with name and filename derived from the trailing path segment."""
        filename = path.rsplit('/', 1)[-1]
        return cls(
            name=remove_extension(filename),
            filename=filename,
            path=path,
            download_reference=download_reference,
            **kwargs,
        )

    @property
    def is_remote(self) -> bool:
        """Return True if the template is fetched over http."""
        return self.download_reference.startswith(('http://', 'https://'))
