"""Recent applications selection."""
from typing import List, Sequence

from config.settings import RECENT_LIMIT
from models.enrollment import EnrollmentRecord
from utils.constants import RECENT_ORDER_FIELD

# TODO: order by a created_at timestamp once the record store has one;
# last name descending stands in for recency until then.

def select_recent(records: Sequence[EnrollmentRecord], n: int = RECENT_LIMIT) -> List[EnrollmentRecord]:
    """Return at most n records sorted by last name descending, ties kept in input order."""
    if n <= 0:
        return []
    # sorted() stays stable with reverse=True
    return sorted(records, key=lambda record: record.last_name, reverse=True)[:n]


def fetch_recent(source, n: int = RECENT_LIMIT) -> List[EnrollmentRecord]:
    """
    Query the source for the n most recent applications.

    DataUnavailable from the source propagates unchanged.
    """
    rows = source.fetch_ordered(RECENT_ORDER_FIELD, descending=True, limit=n)
    return select_recent(rows, n)
