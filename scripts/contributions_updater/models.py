#------------------------------------------------------------
#                          models.py
#     Defines dataclasses used by the contributions pipeline.

from dataclasses import dataclass, field
from typing import List, Optional, Set
from .config import DEFAULT_ACTIVE_WINDOW_YEARS, README_PATH

@dataclass
class ContributionRecord:
    name_with_owner: str
    is_private: bool
    is_archived: bool
    stars: int
    pushed_at: Optional[str]
    merged_at: Optional[str]

@dataclass
class AggregatedContribution:
    name: str
    stars: int
    year: int
    count: int = 1

@dataclass
class OwnedRepoRecord:
    name: str
    url: str
    description: Optional[str]
    is_archived: bool
    stars: int
    pushed_at: Optional[str]
    is_private: bool = False

@dataclass
class GraphQLResponse:
    data: Optional[dict]
    errors: List[str] = field(default_factory=list)

@dataclass
class ContributionPresentation:
    name: str
    url: str
    stars: str
    pr_label: str
    year: int

@dataclass
class ActiveRepoPresentation:
    name: str
    url: str
    stars: str
    description: Optional[str]

@dataclass
class FootprintReport:
    contributions: List[ContributionPresentation]
    active_repos: List[ActiveRepoPresentation]

@dataclass
class UpdateConfig:
    github_username: str
    github_token: str
    active_window_years: int = DEFAULT_ACTIVE_WINDOW_YEARS
    excluded_repos: Set[str] = field(default_factory=set)
    readme_path: str = README_PATH
    dry_run: bool = False
