"""Front matter parsing for markdown templates.

A front matter block is a YAML mapping between two ``---`` lines at the very
start of the file.
"""

# standard library
import logging
import re
from typing import Any

# third-party
import yaml
from pydantic import BaseModel, Field, field_validator

# get logger
_logger = logging.getLogger(__name__.split('.', maxsplit=1)[0])

_FRONT_MATTER_PATTERN = re.compile(r'^---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|$)(.*)$', re.DOTALL)


class FrontMatterModel(BaseModel):
    """Model Definition for the displayable front matter fields."""

    title: str | None = None
    description: str | None = None
    tags: list[str] | None = None
    author: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict, description='All parsed fields.')

    @field_validator('title', 'description', 'author', mode='before')
    @classmethod
    def string_validator(cls, v):
        """Ignore non-string values."""
        return v if isinstance(v, str) else None

    @field_validator('tags', mode='before')
    @classmethod
    def tags_validator(cls, v):
        """Accept a list of scalars or a comma separated string."""
        if isinstance(v, str):
            return [t.strip() for t in v.split(',') if t.strip()]
        if isinstance(v, list):
            return [str(t) for t in v if t is not None and str(t).strip()]
        return None


class ParsedTemplateModel(BaseModel):
    """Model Definition"""

    front_matter: FrontMatterModel
    content: str


def parse_front_matter(text: str) -> ParsedTemplateModel:
    """Return the front matter and remaining markdown of a template.

    Invalid YAML or a non-mapping block leaves the text untouched with empty
    metadata.
    """
    match = _FRONT_MATTER_PATTERN.match(text)
    if not match:
        return ParsedTemplateModel(front_matter=FrontMatterModel(), content=text)

    block, body = match.group(1), match.group(2)
    try:
        data = yaml.safe_load(block) if block.strip() else {}
    except yaml.YAMLError:
        _logger.warning('action=parse-front-matter, invalid YAML front matter ignored')
        return ParsedTemplateModel(front_matter=FrontMatterModel(), content=text)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        return ParsedTemplateModel(front_matter=FrontMatterModel(), content=text)

    metadata = {str(k): v for k, v in data.items()}
    front_matter = FrontMatterModel(
        title=metadata.get('title'),
        description=metadata.get('description'),
        tags=metadata.get('tags'),
        author=metadata.get('author'),
        metadata=metadata,
    )
    return ParsedTemplateModel(front_matter=front_matter, content=body)
