"""Frontmatter parsing for content files.

Two parsers live here:

* ``parse_frontmatter`` -- the line-based ``key: value`` extractor used
  for blog posts.  It is intentionally *not* a YAML parser: values are
  split on the first ``": "`` only, never nested, never multi-line, so
  existing post files keep parsing exactly as they always have.
* ``parse_yaml_frontmatter`` -- the permissive parser used for prompt
  files, which carry list-valued fields such as ``tags``.
"""

from __future__ import annotations

import re
from typing import Any

import yaml

from folio.shared.errors import InvalidFrontmatterError, MissingFrontmatterError

# Anchored at the very start of the text (\A), unlike a multiline ^.
_FRONTMATTER_RE = re.compile(r"\A---\s*(.*?)\s*---", re.DOTALL)

_YAML_FRONTMATTER_RE = re.compile(
    r"\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)", re.DOTALL | re.MULTILINE
)
# An opener with no closer: the rest of the file is the block.
_YAML_UNCLOSED_RE = re.compile(r"\A---[ \t]*\r?\n(.*)\Z", re.DOTALL)

_SEPARATOR = ": "
_QUOTES = ('"', "'")


def parse_frontmatter(text: str) -> tuple[dict[str, str], str]:
    """Split a document into its metadata block and trimmed body.

    Lines without ``": "`` (blank or malformed) are skipped.  A value
    wrapped in one pair of matching quotes loses that pair.  Later
    duplicate keys win.

    Raises:
        MissingFrontmatterError: the text does not open with a
            ``---`` ... ``---`` block.
    """
    match = _FRONTMATTER_RE.match(text)
    if match is None:
        raise MissingFrontmatterError()

    metadata: dict[str, str] = {}
    for line in match.group(1).strip().split("\n"):
        key, sep, value = line.partition(_SEPARATOR)
        key = key.strip()
        if not sep or not key:
            continue
        metadata[key] = _strip_quotes(value.strip())

    body = text[match.end() :].strip()
    return metadata, body


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] in _QUOTES and value[-1] == value[0]:
        return value[1:-1]
    return value


def parse_yaml_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Parse a YAML frontmatter block, tolerating its absence.

    Returns ``({}, text)`` when the document has no block.  A block that
    is opened but never closed runs to the end of the file and leaves an
    empty body.

    Raises:
        InvalidFrontmatterError: the block is not YAML or not a mapping.
    """
    match = _YAML_FRONTMATTER_RE.match(text) or _YAML_UNCLOSED_RE.match(text)
    if match is None:
        return {}, text

    try:
        data = yaml.safe_load(match.group(1))
    except yaml.YAMLError as exc:
        raise InvalidFrontmatterError(message=f"Invalid YAML frontmatter ({exc})") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InvalidFrontmatterError(message="YAML frontmatter is not a mapping")

    return {str(key): value for key, value in data.items()}, text[match.end() :]
