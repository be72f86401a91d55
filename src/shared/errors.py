"""Error taxonomy for content ingestion.

Every failure in the pipeline is fatal to the call that hit it.
Callers catch ``ContentError`` to handle any of them uniformly.
"""

from __future__ import annotations

from pathlib import Path


class ContentError(Exception):
    """Base error for content ingestion."""

    default_message = "Content error"

    def __init__(self, path: Path | str | None = None, message: str | None = None) -> None:
        self.path = Path(path) if path is not None else None
        self.message = message or self.default_message
        text = self.message
        if self.path is not None:
            text = f"{text}: {self.path}"
        super().__init__(text)


class DirectoryAccessError(ContentError):
    """A content directory is missing or could not be listed."""

    default_message = "Failed to read directory"


class FileReadError(ContentError):
    """A discovered file could not be stat'd or read."""

    default_message = "Failed to read file"


class MissingFrontmatterError(ContentError):
    """The document does not start with a ``---`` delimited block."""

    default_message = "Missing or invalid frontmatter block"


class InvalidFrontmatterError(ContentError):
    """A YAML frontmatter block could not be loaded as a mapping."""

    default_message = "Invalid YAML frontmatter"


class ConfigError(ContentError):
    """A configuration value failed validation."""

    default_message = "Invalid configuration"
