"""Steering CLI Module"""

# standard library
from datetime import datetime
from typing import Literal

# third-party
from pydantic import BaseModel, Field

# first-party
from steering_cli.catalogue.errors import CatalogueError, RateLimitError
from steering_cli.catalogue.model.tree_node_model import TreeNode

FreshnessLabel = Literal['fresh', 'stale', 'cached', 'none']


class ClassifiedErrorModel(BaseModel):
    """Model Definition for a renderable catalogue error."""

    kind: str
    message: str = Field(..., description='The diagnostic message.')
    user_message: str = Field(..., description='The message shown to the user.')
    remediation: str = Field(..., description='The recommended recovery action.')
    reset_at: datetime | None = None

    @classmethod
    def from_error(cls, error: CatalogueError) -> 'ClassifiedErrorModel':
        """Return a model built from a classified error."""
        return cls(
            kind=error.kind,
            message=error.message,
            user_message=error.user_message,
            remediation=error.remediation,
            reset_at=error.reset_at if isinstance(error, RateLimitError) else None,
        )


class CatalogueResultModel(BaseModel):
    """Model Definition for the result of a catalogue refresh."""

    tree: list[TreeNode] = Field(default_factory=list)
    source_label: str
    freshness_label: FreshnessLabel = 'none'
    error: ClassifiedErrorModel | None = None
    needs_setup: bool = False
    fetched_at: datetime | None = None

    @property
    def failed(self) -> bool:
        """Return True if no catalogue could be produced."""
        return self.error is not None and self.freshness_label != 'stale'
