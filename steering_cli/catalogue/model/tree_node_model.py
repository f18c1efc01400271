"""Steering CLI Module"""

# standard library
from typing import Annotated, Literal

# third-party
from pydantic import BaseModel, Field

# first-party
from steering_cli.catalogue.model.template_metadata_model import TemplateMetadataModel


class LeafNode(BaseModel):
    """Model Definition for a template leaf in the catalogue tree."""

    kind: Literal['leaf'] = 'leaf'
    name: str = Field(..., description='The template display name.')
    template: TemplateMetadataModel

    @property
    def path(self) -> str:
        """Return the template path."""
        return self.template.path


class DirectoryNode(BaseModel):
    """Model Definition for a directory in the catalogue tree."""

    kind: Literal['directory'] = 'directory'
    name: str = Field(..., description='The directory name (one path segment).')
    path: str = Field(..., description='The full slash-separated directory path.')
    children: list['TreeNode'] = Field(default_factory=list)


TreeNode = Annotated[DirectoryNode | LeafNode, Field(discriminator='kind')]

DirectoryNode.model_rebuild()
