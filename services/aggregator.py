"""Category tallies over the full record set."""
import logging
from typing import Iterable

from models.enrollment import CategoryTally, EnrollmentRecord, Status, Track
from services.exceptions import MalformedRecord

logger = logging.getLogger(__name__)

TRACK_VALUES = frozenset(t.value for t in Track)
STATUS_VALUES = frozenset(s.value for s in Status)


def classify_track(record: EnrollmentRecord) -> str:
    """Return the record's track or raise MalformedRecord."""
    if record.track not in TRACK_VALUES:
        raise MalformedRecord(f"Unrecognized track {record.track!r} for {record.display_name}")
    return record.track


def classify_status(record: EnrollmentRecord) -> str:
    """Return the record's status or raise MalformedRecord."""
    if record.status not in STATUS_VALUES:
        raise MalformedRecord(f"Unrecognized status {record.status!r} for {record.display_name}")
    return record.status


def aggregate(records: Iterable[EnrollmentRecord]) -> CategoryTally:
    """
    Count records per track and per status.

    Records with a missing or unknown track/status are left out of that
    mapping only; they are never an error.
    """
    tally = CategoryTally.empty()

    for record in records:
        try:
            tally.tracks[classify_track(record)] += 1
        except MalformedRecord as e:
            logger.debug(f"Skipping track count: {e.message}")

        try:
            tally.statuses[classify_status(record)] += 1
        except MalformedRecord as e:
            logger.debug(f"Skipping status count: {e.message}")

    return tally
