#------------------------------------------------------------
#                        controller.py
#          Coordinates the concurrent GitHub fetches,
#             ranking and README section updates.

import os
import sys
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from contextlib import redirect_stdout
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Set, Tuple
from .config import (
    ACTIVE_REPOS_END_MARKER,
    ACTIVE_REPOS_START_MARKER,
    CONTRIBUTIONS_END_MARKER,
    CONTRIBUTIONS_START_MARKER,
    DEFAULT_ACTIVE_WINDOW_YEARS,
    DEFAULT_EXCLUDE_PERSONAL_REPOS,
    DEFAULT_GITHUB_USERNAME,
    EMPTY_ACTIVE_REPOS_MESSAGE,
    EMPTY_CONTRIBUTIONS_MESSAGE,
    ENV_ACTIVE_WINDOW_YEARS,
    ENV_EXCLUDE_PERSONAL_REPOS,
    ENV_GITHUB_TOKEN,
    ENV_GITHUB_USERNAME,
    load_ignored_repos,
    parse_repo_list,
    resolve_readme_path,
)
from .models import ContributionRecord, FootprintReport, OwnedRepoRecord, UpdateConfig
from .services.aggregate_service import aggregate_contributions
from .services.filter_service import compute_cutoff_year
from .services.github_service import GitHubService
from .services.ranking_service import rank_contributions, rank_owned_repos
from .services.readme_service import load_readme, replace_section, save_readme
from .views.markdown_view import (
    build_active_repo_presentation,
    build_contribution_presentation,
    render_active_repos_section,
    render_contributions_section,
)

FETCH_WORKERS = 2

# This function does build an UpdateConfig from environment variables.
# Explicit arguments take precedence over the environment.
def load_config(
    username: Optional[str] = None,
    token: Optional[str] = None,
    exclude_personal_repos: Optional[str] = None,
    readme_path: Optional[str] = None,
    active_window_years: Optional[int] = None,
    dry_run: bool = False,
) -> UpdateConfig:
    if exclude_personal_repos is None:
        exclude_personal_repos = os.environ.get(ENV_EXCLUDE_PERSONAL_REPOS, DEFAULT_EXCLUDE_PERSONAL_REPOS)
    if active_window_years is None:
        active_window_years = int(os.environ.get(ENV_ACTIVE_WINDOW_YEARS, DEFAULT_ACTIVE_WINDOW_YEARS))

    return UpdateConfig(
        github_username=username or os.environ.get(ENV_GITHUB_USERNAME, DEFAULT_GITHUB_USERNAME),
        github_token=token or os.environ.get(ENV_GITHUB_TOKEN, ""),
        active_window_years=active_window_years,
        excluded_repos=parse_repo_list(exclude_personal_repos) | load_ignored_repos(),
        readme_path=resolve_readme_path(readme_path),
        dry_run=dry_run,
    )

def fetch_footprint(
    github_service: GitHubService,
    cutoff_year: int,
) -> Tuple[List[ContributionRecord], List[OwnedRepoRecord]]:
    """
    Run the contribution and owned-repo fetches side by side and join them.

    The first fetch to raise aborts the join; its exception propagates, the
    service is cancelled so the other fetch requests no further pages, and
    that fetch's result is discarded.
    """
    executor = ThreadPoolExecutor(max_workers=FETCH_WORKERS)
    try:
        contributions_future = executor.submit(github_service.fetch_contributions, cutoff_year)
        owned_future = executor.submit(github_service.fetch_owned_repos, cutoff_year)
        done, _ = wait([contributions_future, owned_future], return_when=FIRST_EXCEPTION)
        for future in done:
            error = future.exception()
            if error is not None:
                github_service.cancelled.set()
                raise error
        return contributions_future.result(), owned_future.result()
    finally:
        executor.shutdown(wait=False, cancel_futures=True)

# This function does drop owned repositories named in the exclusion list.
# The profile repository named after the user is always dropped.
def _exclude_owned_repos(repos: Iterable[OwnedRepoRecord], excluded: Set[str], username: str) -> List[OwnedRepoRecord]:
    excluded = excluded | {username.lower()}
    kept = []
    for repo in repos:
        if repo.name.strip().lower() in excluded:
            print(f"Skipping excluded personal repo: {repo.name}")
            continue
        kept.append(repo)
    return kept

# This function does fetch, merge and rank the user's open-source footprint.
# It returns presentation objects ready for rendering.
def build_report(config: UpdateConfig, now: Optional[datetime] = None) -> FootprintReport:
    now = now or datetime.now(timezone.utc)
    cutoff_year = compute_cutoff_year(now, config.active_window_years)
    print(f"Fetching merged PRs and owned repos for {config.github_username} pushed since {cutoff_year} …")

    github_service = GitHubService(config)
    records, owned_repos = fetch_footprint(github_service, cutoff_year)
    print(f"Fetched {len(records)} contribution records and {len(owned_repos)} active repositories")

    owned_repos = _exclude_owned_repos(owned_repos, config.excluded_repos, config.github_username)
    aggregated = aggregate_contributions(records, config.github_username)
    print(f"After deduplication: {len(aggregated)} contributed repositories included")

    return FootprintReport(
        contributions=[build_contribution_presentation(item) for item in rank_contributions(aggregated.values())],
        active_repos=[build_active_repo_presentation(repo) for repo in rank_owned_repos(owned_repos)],
    )

# This function does render a report into README content.
# It replaces both marker-delimited sections.
def render_readme(readme: str, report: FootprintReport) -> str:
    readme = replace_section(
        readme,
        CONTRIBUTIONS_START_MARKER,
        CONTRIBUTIONS_END_MARKER,
        render_contributions_section(report.contributions, EMPTY_CONTRIBUTIONS_MESSAGE),
    )
    return replace_section(
        readme,
        ACTIVE_REPOS_START_MARKER,
        ACTIVE_REPOS_END_MARKER,
        render_active_repos_section(report.active_repos, EMPTY_ACTIVE_REPOS_MESSAGE),
    )

# This function does execute the full update workflow end-to-end.
# It fetches repos, prepares sections, and writes or prints the README.
# A dry run keeps progress lines on stderr so stdout holds only the README.
def run_update(config: UpdateConfig, now: Optional[datetime] = None) -> str:
    if config.dry_run:
        with redirect_stdout(sys.stderr):
            readme = render_readme(load_readme(config.readme_path), build_report(config, now))
        print(readme, end="")
        return readme

    readme = render_readme(load_readme(config.readme_path), build_report(config, now))
    save_readme(config.readme_path, readme)
    print("README.md updated successfully.")
    return readme
