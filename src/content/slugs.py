"""Slug helpers.

``file_path_to_slug`` names a content file; ``slugify`` names a heading
anchor inside a rendered document.  They have different contracts and
are not interchangeable: the path slug keeps case and punctuation.
"""

from __future__ import annotations

import re
from pathlib import Path, PurePath

DEFAULT_EXTENSION = ".mdx"

_EDGE_HYPHENS_RE = re.compile(r"^-+|-+$")
_WHITESPACE_RE = re.compile(r"\s+")
_NON_WORD_RE = re.compile(r"[^\w\-]+", re.ASCII)
_HYPHEN_RUN_RE = re.compile(r"--+")


def file_path_to_slug(path: str | PurePath, extension: str = DEFAULT_EXTENSION) -> str:
    """Flatten a relative content path into a hyphen-separated slug.

    ``"a/b/c.mdx"`` becomes ``"a-b-c"``.
    """
    slug = str(path).replace("\\", "/")
    if extension and slug.endswith(extension):
        slug = slug[: -len(extension)]
    slug = slug.replace("/", "-")
    return _EDGE_HYPHENS_RE.sub("", slug)


def file_stem_slug(path: str | PurePath) -> str:
    """Slug from the file name alone: ``"dir/my-prompt.md"`` -> ``"my-prompt"``."""
    return Path(path).stem


def slugify(text: str) -> str:
    """Anchor id for a heading: ``"Tips & Tricks"`` -> ``"tips-and-tricks"``."""
    slug = str(text).lower().strip()
    slug = _WHITESPACE_RE.sub("-", slug)
    slug = slug.replace("&", "-and-")
    slug = _NON_WORD_RE.sub("", slug)
    return _HYPHEN_RUN_RE.sub("-", slug)
