"""Content domain — ingestion of blog posts and prompt-library entries.

Files on disk are the only store: every listing re-discovers, re-reads
and re-parses them into ContentRecord objects for the site to render.
"""

from folio.content.dates import format_date
from folio.content.frontmatter import parse_frontmatter, parse_yaml_frontmatter
from folio.content.models import BlogPostMetadata, ContentRecord, PromptMetadata
from folio.content.read_time import estimate_read_time
from folio.content.services import (
    ContentCollection,
    get_blog_post_by_slug,
    get_blog_posts,
    get_latest_blog_posts,
    get_prompt_by_slug,
    get_prompts,
)
from folio.content.slugs import file_path_to_slug, slugify

__all__ = [
    "BlogPostMetadata",
    "ContentCollection",
    "ContentRecord",
    "PromptMetadata",
    "estimate_read_time",
    "file_path_to_slug",
    "format_date",
    "get_blog_post_by_slug",
    "get_blog_posts",
    "get_latest_blog_posts",
    "get_prompt_by_slug",
    "get_prompts",
    "parse_frontmatter",
    "parse_yaml_frontmatter",
    "slugify",
]
