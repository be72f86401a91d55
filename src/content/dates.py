"""Date helpers for content metadata."""

from __future__ import annotations

import logging
from datetime import UTC, date, datetime

logger = logging.getLogger(__name__)


def parse_content_date(value: object) -> datetime | None:
    """Parse a frontmatter date into a naive UTC datetime.

    Accepts ``YYYY-MM-DD`` and ISO-8601 strings as well as ``date`` /
    ``datetime`` objects (YAML loads unquoted dates as such).  Returns
    ``None`` for anything else.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str) and value.strip():
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            logger.debug("Unparseable date %r", value)
            return None
    else:
        return None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(UTC).replace(tzinfo=None)
    return parsed


def format_date(value: str, include_relative: bool = False, *, now: datetime | None = None) -> str:
    """Render a date as ``"January 5, 2024"``, optionally with relative age.

    The relative part compares calendar fields without borrowing: a
    year difference wins, then a month difference, then a day
    difference, otherwise ``Today``.

    Raises:
        ValueError: ``value`` is not an ISO date.
    """
    if "T" not in value:
        value = f"{value}T00:00:00"
    target = datetime.fromisoformat(value)
    current = now or datetime.now()

    full_date = f"{target.strftime('%B')} {target.day}, {target.year}"
    if not include_relative:
        return full_date

    years_ago = current.year - target.year
    months_ago = current.month - target.month
    days_ago = current.day - target.day

    if years_ago > 0:
        relative = f"{years_ago}y ago"
    elif months_ago > 0:
        relative = f"{months_ago}mo ago"
    elif days_ago > 0:
        relative = f"{days_ago}d ago"
    else:
        relative = "Today"

    return f"{full_date} ({relative})"
