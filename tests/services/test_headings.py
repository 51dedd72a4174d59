import pytest

from support_portal.services.headings import (
    HeadingSlugger,
    extract_headings,
    headings_by_line,
    slugify,
)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("Getting Started", "getting-started"),
        ("What's new in v2.0?", "whats-new-in-v20"),
        ("Use `iag users` (CLI)", "use-iag-users-cli"),
        ("Tabs\tand   spaces", "tabs-and-spaces"),
        ("A - B", "a---b"),
        ("snake_case stays", "snake_case-stays"),
    ],
)
def test_slugify(text, expected):
    assert slugify(text) == expected


@pytest.mark.parametrize(
    "text", ["Getting Started", "What's new in v2.0?", "A - B", "  padded  ", "[x] {y}"]
)
def test_slugify_is_idempotent(text):
    once = slugify(text)

    assert slugify(once) == once


def test_slugger_suffixes_repeats():
    slugger = HeadingSlugger()

    assert [slugger.slug(t) for t in ["Setup", "Setup", "Setup 1", "Setup"]] == [
        "setup",
        "setup-1",
        "setup-1-1",
        "setup-2",
    ]


def test_extract_headings_levels_one_to_three():
    markdown = "# Title\n\n## Section\n\n### Detail\n\n#### Too deep\n"

    assert [(h.level, h.text, h.id) for h in extract_headings(markdown)] == [
        (1, "Title", "title"),
        (2, "Section", "section"),
        (3, "Detail", "detail"),
    ]


def test_extract_headings_ignores_fenced_code():
    markdown = "## Real\n\n```bash\n# not a heading\n```\n\n## Also real\n"

    assert [h.text for h in extract_headings(markdown)] == ["Real", "Also real"]


def test_extract_headings_fence_with_indented_marker():
    markdown = "- item\n  ```\n  # inside\n  ```\n# After\n"

    assert [h.text for h in extract_headings(markdown)] == ["After"]


def test_extract_headings_ignores_tilde_fences():
    markdown = "~~~\n# not a heading\n~~~\n\n## After tildes\n"

    assert [h.text for h in extract_headings(markdown)] == ["After tildes"]


def test_extract_headings_fence_closes_only_on_matching_marker():
    markdown = (
        "````markdown\n"
        "```\n"
        "# inside four tick fence\n"
        "```\n"
        "~~~~\n"
        "````\n"
        "\n"
        "## After\n"
    )

    assert [h.text for h in extract_headings(markdown)] == ["After"]


def test_extract_headings_inline_backticks_do_not_open_fence():
    markdown = "```inline``` code\n\n## Real section\n"

    assert [h.id for h in extract_headings(markdown)] == ["real-section"]


def test_extract_headings_unclosed_fence_runs_to_end():
    markdown = "## Before\n```\n# hidden\n"

    assert [h.text for h in extract_headings(markdown)] == ["Before"]


def test_extract_headings_requires_space_after_marker():
    markdown = "#hashtag\n##nospace\n#\n   # indented\n"

    assert extract_headings(markdown) == []


def test_extract_headings_strips_marker_whitespace_and_closing_sequence():
    markdown = "##    Spaced out   \n# Closed #\n# C#\n"

    assert [h.text for h in extract_headings(markdown)] == ["Spaced out", "Closed", "C#"]


def test_extract_headings_disambiguates_duplicates():
    markdown = "## Setup\ntext\n## Setup\n"

    assert [h.id for h in extract_headings(markdown)] == ["setup", "setup-1"]


def test_extract_headings_empty_input():
    assert extract_headings("") == []
    assert extract_headings(None) == []


def test_headings_by_line_handles_crlf():
    lines = headings_by_line("intro\r\n\r\n## Two\r\n")

    assert list(lines) == [2]
    assert lines[2].text == "Two"
