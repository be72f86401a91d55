"""Content ingestion services.

One generic pipeline -- discover, read, parse, slug, assemble -- is
parameterized per content type.  Nothing is cached: every call re-scans
the filesystem, so two calls with no changes in between return equal
results.

Blog posts and prompts deliberately differ in how they treat a missing
directory: posts fail fast, prompts come back empty.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path, PurePath
from typing import Any

from folio.content.dates import parse_content_date
from folio.content.discovery import find_content_files
from folio.content.frontmatter import parse_frontmatter, parse_yaml_frontmatter
from folio.content.models import ContentRecord
from folio.content.slugs import file_path_to_slug, file_stem_slug
from folio.shared.errors import ContentError, FileReadError

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

POST_EXTENSION = ".mdx"
PROMPT_EXTENSION = ".md"
POST_DATE_KEY = "publishedAt"
PROMPT_DATE_KEY = "createdAt"
DEFAULT_LATEST_COUNT = 3

FrontmatterParser = Callable[[str], tuple[dict[str, Any], str]]
SlugFunction = Callable[[PurePath], str]


# ---------------------------------------------------------------------------
# File reading
# ---------------------------------------------------------------------------


def read_content_file(
    path: Path, parser: FrontmatterParser = parse_frontmatter
) -> tuple[dict[str, Any], str]:
    """Read one file and split it into metadata and body.

    Raises:
        FileReadError: the file could not be read.
        MissingFrontmatterError / InvalidFrontmatterError: re-raised
            with ``path`` attached.
    """
    logger.debug("Reading %s", path)
    try:
        # Undecodable bytes become U+FFFD rather than failing the batch.
        raw = path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise FileReadError(path) from exc

    try:
        return parser(raw)
    except ContentError as exc:
        if exc.path is not None:
            raise
        raise type(exc)(path, exc.message) from exc


# ---------------------------------------------------------------------------
# Generic collection
# ---------------------------------------------------------------------------


def _date_sort_key(date_key: str) -> Callable[[ContentRecord], tuple[bool, datetime]]:
    def key(record: ContentRecord) -> tuple[bool, datetime]:
        parsed = parse_content_date(record.metadata.get(date_key))
        # Undated records sort after every dated one when reversed.
        return (parsed is not None, parsed or datetime.min)

    return key


def sort_by_date(records: list[ContentRecord], date_key: str) -> list[ContentRecord]:
    """Newest first by ``date_key``; ties and undated records keep their order."""
    return sorted(records, key=_date_sort_key(date_key), reverse=True)


class ContentCollection:
    """A directory of content files of one type."""

    def __init__(
        self,
        root: Path,
        *,
        extension: str,
        date_key: str,
        parser: FrontmatterParser = parse_frontmatter,
        slugger: SlugFunction | None = None,
        recursive: bool = True,
        missing_ok: bool = False,
        sort_listing: bool = False,
    ) -> None:
        self.root = Path(root)
        self.extension = extension
        self.date_key = date_key
        self.parser = parser
        self.slugger = slugger or (lambda path: file_path_to_slug(path, extension))
        self.recursive = recursive
        self.missing_ok = missing_ok
        self.sort_listing = sort_listing

    def read_all(self) -> list[ContentRecord]:
        """Parse every file in the collection.

        Order is traversal order unless the collection sorts its listing.
        Any failure aborts the whole call.
        """
        if self.missing_ok and not self.root.exists():
            logger.debug("Content directory %s does not exist", self.root)
            return []

        records: list[ContentRecord] = []
        for relative in find_content_files(self.root, self.extension, recursive=self.recursive):
            metadata, body = read_content_file(self.root / relative, self.parser)
            records.append(
                ContentRecord(
                    metadata=metadata,
                    slug=self.slugger(relative),
                    content=body,
                    source_path=relative,
                )
            )

        logger.info("Loaded %d record(s) from %s", len(records), self.root)
        if self.sort_listing:
            return sort_by_date(records, self.date_key)
        return records

    def latest(self, count: int = DEFAULT_LATEST_COUNT) -> list[ContentRecord]:
        """The ``count`` most recent records by date, newest first."""
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        return sort_by_date(self.read_all(), self.date_key)[:count]

    def get(self, slug: str) -> ContentRecord | None:
        """First record with ``slug``, or None."""
        for record in self.read_all():
            if record.slug == slug:
                return record
        return None


# ---------------------------------------------------------------------------
# Blog posts
# ---------------------------------------------------------------------------


def blog_posts_collection(posts_dir: Path, extension: str = POST_EXTENSION) -> ContentCollection:
    """Nested post files, line-parsed, fail-fast on a missing directory."""
    return ContentCollection(
        posts_dir,
        extension=extension,
        date_key=POST_DATE_KEY,
        parser=parse_frontmatter,
        recursive=True,
        missing_ok=False,
    )


def get_blog_posts(posts_dir: Path) -> list[ContentRecord]:
    """All blog posts in traversal order."""
    return blog_posts_collection(posts_dir).read_all()


def get_latest_blog_posts(
    posts_dir: Path, count: int = DEFAULT_LATEST_COUNT
) -> list[ContentRecord]:
    """The ``count`` most recently published posts, newest first."""
    return blog_posts_collection(posts_dir).latest(count)


def get_blog_post_by_slug(posts_dir: Path, slug: str) -> ContentRecord | None:
    """One post by slug, or None."""
    return blog_posts_collection(posts_dir).get(slug)


# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------


def prompts_collection(prompts_dir: Path, extension: str = PROMPT_EXTENSION) -> ContentCollection:
    """Flat prompt files, YAML-parsed, empty when the directory is absent."""
    return ContentCollection(
        prompts_dir,
        extension=extension,
        date_key=PROMPT_DATE_KEY,
        parser=parse_yaml_frontmatter,
        slugger=file_stem_slug,
        recursive=False,
        missing_ok=True,
        sort_listing=True,
    )


def get_prompts(prompts_dir: Path) -> list[ContentRecord]:
    """All prompts, newest ``createdAt`` first."""
    return prompts_collection(prompts_dir).read_all()


def get_prompt_by_slug(prompts_dir: Path, slug: str) -> ContentRecord | None:
    """One prompt by slug, or None."""
    return prompts_collection(prompts_dir).get(slug)
