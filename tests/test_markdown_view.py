"""
Tests for star and PR labels and the rendered markdown sections.
"""

import pytest

from contributions_updater.models import AggregatedContribution, OwnedRepoRecord
from contributions_updater.views.markdown_view import (
    build_active_repo_presentation,
    build_contribution_presentation,
    format_pr_label,
    format_stars,
    render_active_repos_section,
    render_contributions_section,
)


@pytest.mark.parametrize(
    "stars,expected",
    [(0, "0"), (1, "1"), (999, "999"), (1000, "1.0k"), (2500, "2.5k"), (12345, "12.3k")],
)
def test_format_stars(stars, expected):
    assert format_stars(stars) == expected


@pytest.mark.parametrize("count,expected", [(1, "1 PR"), (2, "2 PRs"), (15, "15 PRs")])
def test_format_pr_label(count, expected):
    assert format_pr_label(count) == expected


def test_contribution_presentation_derives_url_and_labels():
    presentation = build_contribution_presentation(
        AggregatedContribution(name="rust-lang/rust", stars=2500, year=2026, count=3)
    )

    assert presentation.url == "https://github.com/rust-lang/rust"
    assert presentation.stars == "2.5k"
    assert presentation.pr_label == "3 PRs"
    assert presentation.year == 2026


def test_active_repo_presentation_flattens_description():
    repo = OwnedRepoRecord(
        name="tool",
        url="https://github.com/me/tool",
        description="  Does\nthings   well ",
        is_archived=False,
        stars=42,
        pushed_at="2026-01-01T00:00:00Z",
    )

    presentation = build_active_repo_presentation(repo)

    assert presentation.description == "Does things well"
    assert presentation.stars == "42"


def test_render_sections():
    contributions = [
        build_contribution_presentation(AggregatedContribution(name="foo/bar", stars=50, year=2026, count=1))
    ]
    repos = [
        build_active_repo_presentation(
            OwnedRepoRecord(
                name="tool", url="https://github.com/me/tool", description=None,
                is_archived=False, stars=1000, pushed_at=None,
            )
        )
    ]

    contributions_md = render_contributions_section(contributions, "empty")
    repos_md = render_active_repos_section(repos, "empty")

    assert "[foo/bar](https://github.com/foo/bar)" in contributions_md
    assert "1 PR" in contributions_md and "2026" in contributions_md
    assert repos_md == "- **[tool](https://github.com/me/tool)** ⭐ 1.0k"


def test_render_sections_empty_state():
    assert render_contributions_section([], "nothing yet") == "nothing yet"
    assert render_active_repos_section([], "no repos") == "no repos"
