"""Content domain models — pure Pydantic v2 data types.

A ContentRecord is what the ingestion pipeline hands to the site: the
parsed frontmatter mapping, a slug derived from the file path, and the
raw body text.  The metadata mapping is deliberately untyped; the typed
views below are built on demand and never reject a record.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field

M = TypeVar("M", bound=BaseModel)


class BlogPostMetadata(BaseModel):
    """Frontmatter fields a blog post is expected to carry."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    title: str = ""
    published_at: str = Field(default="", alias="publishedAt")
    summary: str = ""
    image: str | None = None


class PromptMetadata(BaseModel):
    """Frontmatter fields of a prompt-library entry."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    title: str = ""
    description: str = ""
    category: str = ""
    tags: list[str] = Field(default_factory=list)
    created_at: str = Field(default="", alias="createdAt")


class ContentRecord(BaseModel):
    """One parsed content file."""

    metadata: dict[str, Any] = Field(default_factory=dict)
    slug: str
    content: str = ""
    source_path: Path = Path(".")

    def metadata_as(self, model: type[M]) -> M:
        """Build a typed view of the metadata.

        Values are coerced to strings where the view expects strings, so
        YAML dates and numbers do not fail validation.
        """
        data: dict[str, Any] = {}
        for key, value in self.metadata.items():
            if isinstance(value, list):
                data[key] = [str(item) for item in value]
            elif value is None:
                continue
            else:
                data[key] = str(value)
        return model.model_validate(data)
