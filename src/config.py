"""Unified configuration loaded from .folio.toml, env vars, and CLI flags.

Loading order: defaults → TOML file → env vars → CLI flags.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from folio.shared.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".folio.toml"
CONFIG_SEARCH_PATHS = [
    Path("."),
]
GLOBAL_CONFIG_PATH = Path.home() / ".config" / "folio" / "config.toml"

# Overridable settings: name -> (section, field, env var).
_OVERRIDES: dict[str, tuple[str, str, str]] = {
    "content_root": ("content", "root", "FOLIO_CONTENT_ROOT"),
    "posts_dir": ("content", "posts_dir", "FOLIO_POSTS_DIR"),
    "prompts_dir": ("content", "prompts_dir", "FOLIO_PROMPTS_DIR"),
    "latest_count": ("listing", "latest_count", "FOLIO_LATEST_COUNT"),
}


class ContentSectionConfig(BaseModel):
    """[content] section."""

    root: str = "content"
    posts_dir: str = "blog-posts"
    prompts_dir: str = "prompts"
    post_extension: str = ".mdx"
    prompt_extension: str = ".md"


class ListingSectionConfig(BaseModel):
    """[listing] section."""

    latest_count: int = Field(default=3, ge=0)


class FolioConfig(BaseModel):
    """Top-level configuration for the content pipeline."""

    content: ContentSectionConfig = Field(default_factory=ContentSectionConfig)
    listing: ListingSectionConfig = Field(default_factory=ListingSectionConfig)

    def content_root(self, base_dir: Path | None = None) -> Path:
        """Resolve the content root, relative paths against ``base_dir``."""
        root = Path(self.content.root)
        if root.is_absolute() or base_dir is None:
            return root
        return base_dir / root

    def posts_path(self, base_dir: Path | None = None) -> Path:
        return self.content_root(base_dir) / self.content.posts_dir

    def prompts_path(self, base_dir: Path | None = None) -> Path:
        return self.content_root(base_dir) / self.content.prompts_dir


def load_config(path: str | Path | None = None) -> FolioConfig:
    """Load configuration, then overlay ``FOLIO_*`` environment variables.

    The file is ``path`` when given, else the first ``.folio.toml`` in
    ``CONFIG_SEARCH_PATHS``, else ``GLOBAL_CONFIG_PATH``.  A missing or
    unparseable file means defaults.

    Raises:
        ConfigError: a value fails validation (e.g. a negative count).
    """
    source = Path(path) if path is not None else _find_config_file()
    data: dict[str, Any] = {}
    if source is not None:
        if source.exists():
            data = _read_toml(source)
        else:
            logger.warning("Config file not found: %s", source)

    for section, field, env_var in _OVERRIDES.values():
        value = os.environ.get(env_var)
        if value is not None:
            data.setdefault(section, {})[field] = value

    return _validate(data, source)


def merge_cli_overrides(config: FolioConfig, **cli_kwargs: object) -> FolioConfig:
    """Overlay CLI flags that were actually given (not None).

    Keys are the names in ``_OVERRIDES``; anything else is ignored.
    """
    data = config.model_dump()
    for name, value in cli_kwargs.items():
        if value is None or name not in _OVERRIDES:
            continue
        section, field, _ = _OVERRIDES[name]
        data[section][field] = str(value) if isinstance(value, Path) else value
    return _validate(data, None)


def _find_config_file() -> Path | None:
    for search_dir in CONFIG_SEARCH_PATHS:
        candidate = search_dir / CONFIG_FILENAME
        if candidate.exists():
            return candidate
    if GLOBAL_CONFIG_PATH.exists():
        return GLOBAL_CONFIG_PATH
    return None


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (tomllib.TOMLDecodeError, OSError, UnicodeDecodeError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", path, exc)
        return {}
    logger.info("Loaded config from %s", path)
    return data


def _validate(data: dict[str, Any], source: Path | None) -> FolioConfig:
    try:
        return FolioConfig.model_validate(data)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise ConfigError(source, f"Invalid configuration ({problems})") from exc
