#------------------------------------------------------------
#                      filter_service.py
#         Decides which repositories are public, alive
#                and popular enough to report.

from datetime import datetime
from typing import Optional
from dateutil.relativedelta import relativedelta
from ..config import UNKNOWN_YEAR

YEAR_PREFIX_LENGTH = 4

# This function does extract the calendar year from an ISO timestamp.
# It returns UNKNOWN_YEAR when the value is absent or malformed.
def parse_year(timestamp: Optional[str]) -> int:
    prefix = (timestamp or "")[:YEAR_PREFIX_LENGTH]
    if len(prefix) != YEAR_PREFIX_LENGTH or not (prefix.isascii() and prefix.isdigit()):
        return UNKNOWN_YEAR
    return int(prefix)

# This function does compute the oldest push year still considered active.
# It steps back a whole number of years from the given moment.
def compute_cutoff_year(now: datetime, window_years: int) -> int:
    return (now - relativedelta(years=window_years)).year

def is_active_repo(
    is_private: bool,
    is_archived: bool,
    stars: int,
    pushed_year: int,
    cutoff_year: int,
    min_stars: int,
) -> bool:
    """Return True for public, unarchived repos with enough stars and a recent push."""
    return (
        not is_private
        and not is_archived
        and stars >= min_stars
        and pushed_year >= cutoff_year
    )
