"""Steering CLI Module"""

# third-party
from pydantic import BaseModel


class LocalFileModel(BaseModel):
    """Model Definition"""

    name: str
    absolute_path: str
