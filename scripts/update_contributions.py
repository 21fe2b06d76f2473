#!/usr/bin/env python3
"""
Update the Open Source Contributions and Active Projects sections of README.md
by querying the GitHub GraphQL API for merged pull requests and owned repositories.

Markers used in README.md:
  <!-- CONTRIBUTIONS:start --> ... <!-- CONTRIBUTIONS:end -->
  <!-- ACTIVE_REPOS:start -->  ... <!-- ACTIVE_REPOS:end -->

Environment variables:
  GITHUB_TOKEN: Personal access token used for the GraphQL API (required)
  GITHUB_USERNAME: GitHub username (default: killzoner)
  EXCLUDE_PERSONAL_REPOS: Comma-separated list of owned repo names to leave out
  README_PATH: README file to update (default: README.md at the repository root)
  ACTIVE_WINDOW_YEARS: Repos not pushed within this many years are skipped (default: 2)
"""

import argparse
import sys
from typing import List, Optional

import requests

from contributions_updater.config import MISSING_TOKEN_MESSAGE
from contributions_updater.controller import load_config, run_update


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="github-contributions",
        description="List public repositories you've contributed to and your own active ones.",
    )
    parser.add_argument("--token", default=None, help="GitHub token (defaults to $GITHUB_TOKEN).")
    parser.add_argument("-u", "--username", default=None, help="GitHub login to report on.")
    parser.add_argument("--readme", default=None, help="README file holding the section markers.")
    parser.add_argument(
        "--exclude-personal-repos",
        default=None,
        help="Comma-separated owned repository names to leave out of the active list.",
    )
    parser.add_argument(
        "--window-years",
        type=int,
        default=None,
        help="Only keep repositories pushed within this many years.",
    )
    parser.add_argument("--dry-run", action="store_true", help="Print the updated README instead of writing it.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = load_config(
        username=args.username,
        token=args.token,
        exclude_personal_repos=args.exclude_personal_repos,
        readme_path=args.readme,
        active_window_years=args.window_years,
        dry_run=args.dry_run,
    )
    if not config.github_token:
        parser.error(MISSING_TOKEN_MESSAGE)

    try:
        run_update(config)
    except requests.RequestException as exc:
        print(f"ERROR: GitHub request failed: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
