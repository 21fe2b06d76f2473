#------------------------------------------------------------
#                    aggregate_service.py
#        Collapses merged pull requests into one entry
#                      per repository.

from typing import Dict, Iterable
from ..config import OWN_NAMESPACE_PREFIX_TEMPLATE
from ..models import AggregatedContribution, ContributionRecord
from .filter_service import parse_year

# This function does merge contribution records by repository name.
# It skips the user's own namespace, counts PRs and keeps the latest merge year.
def aggregate_contributions(
    records: Iterable[ContributionRecord],
    username: str,
) -> Dict[str, AggregatedContribution]:
    own_prefix = OWN_NAMESPACE_PREFIX_TEMPLATE.format(username=username)
    merged: Dict[str, AggregatedContribution] = {}

    for record in records:
        if record.name_with_owner.startswith(own_prefix):
            continue

        year = parse_year(record.merged_at)
        existing = merged.get(record.name_with_owner)
        if existing is None:
            merged[record.name_with_owner] = AggregatedContribution(
                name=record.name_with_owner,
                stars=record.stars,
                year=year,
            )
            continue

        existing.count += 1
        existing.year = max(existing.year, year)

    return merged
