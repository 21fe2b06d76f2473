#------------------------------------------------------------
#                          config.py
#   Centralizes GitHub settings, README markers and JSON
#                    config loading helpers.

import json
import os
import sys
from typing import Optional, Set

# Environment variable names for configuration
ENV_GITHUB_USERNAME = "GITHUB_USERNAME"
ENV_GITHUB_TOKEN = "GITHUB_TOKEN"
ENV_EXCLUDE_PERSONAL_REPOS = "EXCLUDE_PERSONAL_REPOS"
ENV_README_PATH = "README_PATH"
ENV_ACTIVE_WINDOW_YEARS = "ACTIVE_WINDOW_YEARS"

# Default values for configuration parameters
DEFAULT_GITHUB_USERNAME = "killzoner"
DEFAULT_EXCLUDE_PERSONAL_REPOS = "killzoner,cubejs-prometheus"
DEFAULT_ACTIVE_WINDOW_YEARS = 2

# Constants for GitHub API interaction
GITHUB_GRAPHQL_URL = "https://api.github.com/graphql"
GITHUB_USER_AGENT = "github-contributions"
GITHUB_ACCEPT_HEADER = "application/json"
GITHUB_REQUEST_TIMEOUT_SECONDS = 30
GRAPHQL_PAGE_SIZE = 100

# Filter policy thresholds, one per fetcher.
CONTRIBUTION_MIN_STARS = 1
OWNED_REPO_MIN_STARS = 1

# Year used when a timestamp is missing or cannot be parsed.
UNKNOWN_YEAR = 0

GITHUB_WEB_URL_TEMPLATE = "https://github.com/{name}"
OWN_NAMESPACE_PREFIX_TEMPLATE = "{username}/"

# Markers used in README.md to identify sections for updates.
CONTRIBUTIONS_START_MARKER = "<!-- CONTRIBUTIONS:start -->"
CONTRIBUTIONS_END_MARKER = "<!-- CONTRIBUTIONS:end -->"
ACTIVE_REPOS_START_MARKER = "<!-- ACTIVE_REPOS:start -->"
ACTIVE_REPOS_END_MARKER = "<!-- ACTIVE_REPOS:end -->"

# Messages for empty README sections.
EMPTY_CONTRIBUTIONS_MESSAGE = "_No merged contributions to active public repositories yet._"
EMPTY_ACTIVE_REPOS_MESSAGE = "_No active public repositories found._"

MISSING_TOKEN_MESSAGE = "A GitHub token is required: pass --token or set GITHUB_TOKEN"
INVALID_CONFIG_WARNING_TEMPLATE = "WARNING: ignoring unreadable config file {path}: {error}"

# Directory paths for the project and configuration files.
SCRIPTS_DIR = os.path.dirname(os.path.dirname(__file__))
ROOT_DIR = os.path.dirname(SCRIPTS_DIR)
README_PATH = os.path.join(ROOT_DIR, "README.md")
CONFIG_DIR = os.path.join(SCRIPTS_DIR, "config")
IGNORE_REPOS_PATH = os.path.join(CONFIG_DIR, "repo_ignore_list.json")

def resolve_readme_path(configured: Optional[str] = None) -> str:
    configured = (configured or os.environ.get(ENV_README_PATH, "")).strip()
    if configured:
        if os.path.isabs(configured):
            return configured
        return os.path.join(ROOT_DIR, configured)
    return README_PATH

# This function does parse a comma separated repository list.
# It returns normalized lowercase names as a set.
def parse_repo_list(raw: str) -> Set[str]:
    return {item.strip().lower() for item in (raw or "").split(",") if item.strip()}

# This function does load an optional JSON config file.
# An absent file is normal; an unreadable one is reported and treated as absent.
def _load_json(path: str):
    if not os.path.exists(path):
        return None
    try:
        with open(path, "r", encoding="utf-8") as file_handle:
            return json.load(file_handle)
    except (OSError, ValueError) as exc:
        print(INVALID_CONFIG_WARNING_TEMPLATE.format(path=path, error=exc), file=sys.stderr)
        return None

# This function does load owned repository names to leave out of the report.
# The file holds a JSON array; names are matched case-insensitively.
def load_ignored_repos(path: str = IGNORE_REPOS_PATH) -> Set[str]:
    data = _load_json(path)
    if not isinstance(data, list):
        return set()
    return {str(item).strip().lower() for item in data if str(item).strip()}
