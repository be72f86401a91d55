"""Tests for frontmatter parsing (line parser and YAML parser)."""

from datetime import date

import pytest
from folio.content.frontmatter import parse_frontmatter, parse_yaml_frontmatter
from folio.shared.errors import InvalidFrontmatterError, MissingFrontmatterError

SAMPLE_POST = """\
---
title: My Understanding and Use of Cursor Rules
publishedAt: 2025-01-12
summary: "How I structure rules: a practical guide"
image: '/images/cursor.png'
---

# Introduction

Rules give the model context: what to do, and what not to do.
"""


class TestParseFrontmatter:
    def test_basic_parsing(self):
        metadata, body = parse_frontmatter(SAMPLE_POST)
        assert metadata["title"] == "My Understanding and Use of Cursor Rules"
        assert metadata["publishedAt"] == "2025-01-12"

    def test_body_is_trimmed(self):
        _, body = parse_frontmatter(SAMPLE_POST)
        assert body.startswith("# Introduction")
        assert body.endswith("what not to do.")

    def test_simple_document(self):
        metadata, body = parse_frontmatter("---\nk1: v1\nk2: v2\n---\n  the body  \n")
        assert metadata == {"k1": "v1", "k2": "v2"}
        assert body == "the body"

    def test_values_are_always_strings(self):
        metadata, _ = parse_frontmatter("---\ncount: 5\ndraft: true\n---\n")
        assert metadata == {"count": "5", "draft": "true"}

    def test_double_quotes_stripped(self):
        metadata, _ = parse_frontmatter('---\ntitle: "hello world"\n---\n')
        assert metadata["title"] == "hello world"

    def test_single_quotes_stripped(self):
        metadata, _ = parse_frontmatter("---\nimage: '/images/cursor.png'\n---\n")
        assert metadata["image"] == "/images/cursor.png"

    def test_only_one_quote_pair_stripped(self):
        metadata, _ = parse_frontmatter("---\ntitle: \"'nested'\"\n---\n")
        assert metadata["title"] == "'nested'"

    def test_inner_quotes_untouched(self):
        metadata, _ = parse_frontmatter("---\ntitle: it's \"ok\"\n---\n")
        assert metadata["title"] == "it's \"ok\""

    def test_mismatched_quotes_untouched(self):
        metadata, _ = parse_frontmatter("---\ntitle: \"half'\n---\n")
        assert metadata["title"] == "\"half'"

    def test_value_keeps_colon_space(self):
        metadata, _ = parse_frontmatter(SAMPLE_POST)
        assert metadata["summary"] == "How I structure rules: a practical guide"

    def test_unquoted_value_with_colon_space(self):
        metadata, _ = parse_frontmatter("---\nsummary: part one: part two: three\n---\n")
        assert metadata["summary"] == "part one: part two: three"

    def test_colon_without_space_is_not_a_separator(self):
        metadata, _ = parse_frontmatter("---\nurl:https://example.com\nok: yes\n---\n")
        assert metadata == {"ok": "yes"}

    def test_malformed_and_blank_lines_skipped(self):
        text = "---\ntitle: A\n\nnot a pair\n: orphan value\nsummary: B\n---\nBody"
        metadata, body = parse_frontmatter(text)
        assert metadata == {"title": "A", "summary": "B"}
        assert body == "Body"

    def test_keys_and_values_trimmed(self):
        metadata, _ = parse_frontmatter("---\n  title  :   spaced out   \n---\n")
        assert metadata == {"title": "spaced out"}

    def test_duplicate_keys_last_wins(self):
        metadata, _ = parse_frontmatter("---\ntitle: first\ntitle: second\n---\n")
        assert metadata == {"title": "second"}

    def test_crlf_line_endings(self):
        metadata, body = parse_frontmatter("---\r\ntitle: Windows\r\n---\r\nBody\r\n")
        assert metadata == {"title": "Windows"}
        assert body == "Body"

    def test_empty_frontmatter(self):
        metadata, body = parse_frontmatter("---\n---\nBody text")
        assert metadata == {}
        assert body == "Body text"

    def test_missing_required_keys_is_not_an_error(self):
        metadata, _ = parse_frontmatter("---\nsummary: only this\n---\n")
        assert "title" not in metadata

    def test_no_frontmatter_raises(self):
        with pytest.raises(MissingFrontmatterError):
            parse_frontmatter("Just some text with no frontmatter")

    def test_frontmatter_not_at_start_raises(self):
        with pytest.raises(MissingFrontmatterError):
            parse_frontmatter("Intro line\n---\ntitle: late\n---\nBody")

    def test_unclosed_frontmatter_raises(self):
        with pytest.raises(MissingFrontmatterError):
            parse_frontmatter("---\ntitle: never closed\n")

    def test_error_message(self):
        with pytest.raises(MissingFrontmatterError, match="Missing or invalid frontmatter block"):
            parse_frontmatter("")


SAMPLE_PROMPT = """\
---
title: Code Review Checklist
description: A prompt for thorough reviews
category: Engineering
tags:
  - review
  - quality
createdAt: 2024-06-01
---
Review the following diff.
"""


class TestParseYamlFrontmatter:
    def test_scalar_fields(self):
        metadata, _ = parse_yaml_frontmatter(SAMPLE_PROMPT)
        assert metadata["title"] == "Code Review Checklist"
        assert metadata["category"] == "Engineering"

    def test_list_fields(self):
        metadata, _ = parse_yaml_frontmatter(SAMPLE_PROMPT)
        assert metadata["tags"] == ["review", "quality"]

    def test_dates_load_as_dates(self):
        metadata, _ = parse_yaml_frontmatter(SAMPLE_PROMPT)
        assert metadata["createdAt"] == date(2024, 6, 1)

    def test_body(self):
        _, body = parse_yaml_frontmatter(SAMPLE_PROMPT)
        assert body == "Review the following diff.\n"

    def test_no_frontmatter_returns_whole_text(self):
        metadata, body = parse_yaml_frontmatter("Just a prompt.\n")
        assert metadata == {}
        assert body == "Just a prompt.\n"

    def test_empty_block(self):
        metadata, body = parse_yaml_frontmatter("---\n---\nBody")
        assert metadata == {}
        assert body == "Body"

    def test_unclosed_block_runs_to_end(self):
        metadata, body = parse_yaml_frontmatter("---\ntitle: Draft\ntags: [a]\n")
        assert metadata == {"title": "Draft", "tags": ["a"]}
        assert body == ""

    def test_unclosed_block_with_prose_is_invalid(self):
        with pytest.raises(InvalidFrontmatterError):
            parse_yaml_frontmatter("---\ntitle: Draft\nJust some: text: here\n")

    def test_invalid_yaml_raises(self):
        with pytest.raises(InvalidFrontmatterError):
            parse_yaml_frontmatter("---\ntitle: [unclosed\n---\nBody")

    def test_non_mapping_raises(self):
        with pytest.raises(InvalidFrontmatterError):
            parse_yaml_frontmatter("---\n- just\n- a list\n---\nBody")
