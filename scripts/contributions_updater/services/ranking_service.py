#------------------------------------------------------------
#                     ranking_service.py
#          Orders contributions and owned repositories
#                      for presentation.

from typing import Iterable, List
from ..models import AggregatedContribution, OwnedRepoRecord

# Newest contribution year first, then the most starred repository.
def rank_contributions(contributions: Iterable[AggregatedContribution]) -> List[AggregatedContribution]:
    return sorted(contributions, key=lambda item: (-item.year, -item.stars))

def rank_owned_repos(repos: Iterable[OwnedRepoRecord]) -> List[OwnedRepoRecord]:
    return sorted(repos, key=lambda item: item.name.lower())
