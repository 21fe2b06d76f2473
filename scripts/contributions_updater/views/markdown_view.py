#------------------------------------------------------------
#                      markdown_view.py
#              Renders markdown blocks for merged
#            contributions and active repositories.

import re
from typing import List, Optional
from ..config import GITHUB_WEB_URL_TEMPLATE
from ..models import (
    ActiveRepoPresentation,
    AggregatedContribution,
    ContributionPresentation,
    OwnedRepoRecord,
)

STARS_THOUSANDS_THRESHOLD = 1000
STARS_THOUSANDS_TEMPLATE = "{value:.1f}k"
SINGLE_PR_LABEL = "1 PR"
MULTIPLE_PRS_LABEL_TEMPLATE = "{count} PRs"

CONTRIBUTION_LINE_TEMPLATE = "- **[{name}]({url})** ⭐ {stars} · {pr_label} · {year}"
ACTIVE_REPO_LINE_TEMPLATE = "- **[{name}]({url})** ⭐ {stars}"
ACTIVE_REPO_DESCRIPTION_TEMPLATE = " - {description}"
WHITESPACE_PATTERN = r"\s+"

# This function does format a star count for display.
# Counts from one thousand upward are shortened to one decimal with a k suffix.
def format_stars(stars: int) -> str:
    if stars >= STARS_THOUSANDS_THRESHOLD:
        return STARS_THOUSANDS_TEMPLATE.format(value=stars / STARS_THOUSANDS_THRESHOLD)
    return str(stars)

def format_pr_label(count: int) -> str:
    if count == 1:
        return SINGLE_PR_LABEL
    return MULTIPLE_PRS_LABEL_TEMPLATE.format(count=count)

def _clean_description(description: Optional[str]) -> Optional[str]:
    cleaned = re.sub(WHITESPACE_PATTERN, " ", description or "").strip()
    return cleaned or None

# This function does build a display-ready contribution object.
# It derives the web URL and the star and PR labels.
def build_contribution_presentation(contribution: AggregatedContribution) -> ContributionPresentation:
    return ContributionPresentation(
        name=contribution.name,
        url=GITHUB_WEB_URL_TEMPLATE.format(name=contribution.name),
        stars=format_stars(contribution.stars),
        pr_label=format_pr_label(contribution.count),
        year=contribution.year,
    )

def build_active_repo_presentation(repo: OwnedRepoRecord) -> ActiveRepoPresentation:
    return ActiveRepoPresentation(
        name=repo.name,
        url=repo.url,
        stars=format_stars(repo.stars),
        description=_clean_description(repo.description),
    )

def render_contribution_line(contribution: ContributionPresentation) -> str:
    return CONTRIBUTION_LINE_TEMPLATE.format(
        name=contribution.name,
        url=contribution.url,
        stars=contribution.stars,
        pr_label=contribution.pr_label,
        year=contribution.year,
    )

def render_active_repo_line(repo: ActiveRepoPresentation) -> str:
    line = ACTIVE_REPO_LINE_TEMPLATE.format(name=repo.name, url=repo.url, stars=repo.stars)
    if repo.description:
        line += ACTIVE_REPO_DESCRIPTION_TEMPLATE.format(description=repo.description)
    return line

# This function does render the contributions section.
# It joins one line per repository or returns an empty-state message.
def render_contributions_section(contributions: List[ContributionPresentation], empty_message: str) -> str:
    if not contributions:
        return empty_message
    return "\n".join(render_contribution_line(item) for item in contributions)

def render_active_repos_section(repos: List[ActiveRepoPresentation], empty_message: str) -> str:
    if not repos:
        return empty_message
    return "\n".join(render_active_repo_line(repo) for repo in repos)
