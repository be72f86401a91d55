"""Reading-time estimate for a post body."""

from __future__ import annotations

import re

READING_SPEED_WPM = 265
IMAGE_TIME_START = 12  # seconds for the first image
IMAGE_TIME_MIN = 3  # floor per image
IMAGE_TIME_DECREMENT = 1
IMAGE_WORDS_ADJUST = 4  # words of markup discounted per image
IMAGE_MARKER = "<img"

_WORD_CHAR_RE = re.compile(r"\w", re.ASCII)


def _tokens(content: str) -> list[str]:
    # Single spaces only; newlines and tabs stay inside tokens.
    return content.split(" ")


def count_words(content: str) -> int:
    """Count space-separated tokens containing at least one word character."""
    return sum(1 for token in _tokens(content) if _WORD_CHAR_RE.search(token))


def count_images(content: str) -> int:
    """Count space-separated tokens containing an image tag opening."""
    return sum(1 for token in _tokens(content) if IMAGE_MARKER in token)


def image_seconds(images: int) -> int:
    """Extra seconds for ``images`` images: 12, 11, 10, ... floored at 3."""
    total = 0
    cost = IMAGE_TIME_START
    for _ in range(images):
        total += cost
        if cost > IMAGE_TIME_MIN:
            cost -= IMAGE_TIME_DECREMENT
    return total


def estimate_read_time_minutes(content: str) -> int:
    """Minutes needed to read ``content``, rounded up.

    The result is not clamped: an empty body reads in ``0`` minutes.
    """
    words = count_words(content)
    images = count_images(content)
    adjusted_words = words - images * IMAGE_WORDS_ADJUST
    # ceil(((w / (wpm / 60)) + s) / 60) == ceil((60 w + wpm s) / (60 wpm))
    numerator = 60 * adjusted_words + READING_SPEED_WPM * image_seconds(images)
    denominator = 60 * READING_SPEED_WPM
    return -(-numerator // denominator)


def estimate_read_time(content: str) -> str:
    """Human-readable estimate, e.g. ``"3 min read"``."""
    return f"{estimate_read_time_minutes(content)} min read"
