"""Tests for the reading-time estimate."""

from folio.content.read_time import (
    count_images,
    count_words,
    estimate_read_time,
    estimate_read_time_minutes,
    image_seconds,
)

IMAGE_TAG = '<img src="diagram.png" />'


def _words(n: int) -> str:
    return " ".join(["word"] * n)


class TestCountWords:
    def test_simple(self):
        assert count_words("one two three") == 3

    def test_punctuation_only_tokens_ignored(self):
        assert count_words("a - b — c !!") == 3

    def test_splits_on_single_spaces_only(self):
        assert count_words("hello\nworld\tagain") == 1

    def test_repeated_spaces(self):
        assert count_words("a  b   c") == 3

    def test_empty(self):
        assert count_words("") == 0

    def test_image_markup_counts_as_words(self):
        # "<img" and 'src="diagram.png"' contain word characters, "/>" does not
        assert count_words(IMAGE_TAG) == 2


class TestCountImages:
    def test_counts_image_tags(self):
        assert count_images(f"before {IMAGE_TAG} middle {IMAGE_TAG} after") == 2

    def test_no_images(self):
        assert count_images("plain text with img but no tag") == 0

    def test_markdown_images_not_counted(self):
        assert count_images("![alt](diagram.png)") == 0


class TestImageSeconds:
    def test_no_images(self):
        assert image_seconds(0) == 0

    def test_first_image(self):
        assert image_seconds(1) == 12

    def test_diminishing(self):
        assert image_seconds(3) == 12 + 11 + 10

    def test_ten_images_reach_floor(self):
        assert image_seconds(10) == sum(range(3, 13))

    def test_eleventh_image_costs_floor(self):
        assert image_seconds(11) - image_seconds(10) == 3

    def test_floor_holds(self):
        assert image_seconds(15) - image_seconds(14) == 3


class TestEstimateReadTime:
    def test_exactly_one_minute(self):
        assert estimate_read_time(_words(265)) == "1 min read"

    def test_one_word_over_rounds_up(self):
        assert estimate_read_time(_words(266)) == "2 min read"

    def test_ten_minutes(self):
        assert estimate_read_time(_words(2650)) == "10 min read"

    def test_short_text(self):
        assert estimate_read_time("Hello there.") == "1 min read"

    def test_empty_body_reads_in_zero_minutes(self):
        assert estimate_read_time("") == "0 min read"

    def test_punctuation_only_reads_in_zero_minutes(self):
        assert estimate_read_time("--- *** ...") == "0 min read"

    def test_no_plural_handling(self):
        assert estimate_read_time(_words(1)) == "1 min read"

    def test_image_adds_time(self):
        # 260 words + 2 word tokens of markup = 262 words: under a minute alone
        assert estimate_read_time(_words(262)) == "1 min read"
        # (262 - 4) words + 12s pushes it past the minute
        assert estimate_read_time(f"{_words(260)} {IMAGE_TAG}") == "2 min read"

    def test_image_word_discount(self):
        # 267 words with one image: 263 words (~59.5s) + 12s
        body = f"{_words(265)} {IMAGE_TAG}"
        assert count_words(body) == 267
        assert estimate_read_time_minutes(body) == 2

    def test_images_only(self):
        assert estimate_read_time("<img") == "1 min read"

    def test_many_images(self):
        body = " ".join([IMAGE_TAG] * 11)
        # 22 words - 44 discount = -22 words (~-5s) + 78s of images
        assert estimate_read_time(body) == "2 min read"

    def test_pure_function(self):
        body = f"{_words(500)} {IMAGE_TAG}"
        assert estimate_read_time(body) == estimate_read_time(body)
