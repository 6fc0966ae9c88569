"""
Roster filter engine.

Visibility is always recomputed from the typed records in the working set;
nothing is read back from rendered rows.
"""
import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from models.enrollment import EnrollmentRecord, FilterState
from services.exceptions import RecordNotFound
from utils.constants import ANY

logger = logging.getLogger(__name__)


def matches(record: EnrollmentRecord, state: FilterState) -> bool:
    """Check one record against every active predicate."""
    # Query is matched literally; whitespace is not trimmed
    if state.query and state.query.lower() not in record.display_name.lower():
        return False
    if state.track != ANY and record.track != state.track:
        return False
    # Levels compare as the select control's string values
    if state.level != ANY and str(record.level) != str(state.level):
        return False
    if state.term != ANY and record.term != state.term:
        return False
    return True


def compute_visibility(records: Sequence[EnrollmentRecord], state: FilterState) -> List[bool]:
    """One visibility flag per record, parallel to the input."""
    return [matches(record, state) for record in records]


def filter_records(records: Iterable[EnrollmentRecord], state: FilterState) -> List[EnrollmentRecord]:
    """Visible records in their original order."""
    return [record for record in records if matches(record, state)]


class FilterEngine:
    """Owns the working set and the filter state for one dashboard view."""

    def __init__(self, records: Optional[Iterable[EnrollmentRecord]] = None, state: Optional[FilterState] = None):
        self._records: Tuple[EnrollmentRecord, ...] = ()
        self._state = state or FilterState()
        self._visibility: List[bool] = []
        self.load(records or ())

    @property
    def records(self) -> Tuple[EnrollmentRecord, ...]:
        return self._records

    @property
    def state(self) -> FilterState:
        return self._state

    def load(self, records: Iterable[EnrollmentRecord]) -> None:
        """Replace the working set; active filters are kept."""
        self._records = tuple(records)
        self._recompute()

    def set_filter(self, **changes) -> FilterState:
        """Apply a partial filter update and recompute visibility."""
        self._state = self._state.merge(**changes)
        self._recompute()
        return self._state

    def reset(self) -> None:
        self._state = FilterState()
        self._recompute()

    def visibility(self) -> List[bool]:
        return list(self._visibility)

    def visible_indices(self) -> List[int]:
        return [index for index, visible in enumerate(self._visibility) if visible]

    def visible_records(self) -> List[EnrollmentRecord]:
        return [self._records[index] for index in self.visible_indices()]

    def record(self, index: int) -> EnrollmentRecord:
        """Working-set member at index."""
        if not 0 <= index < len(self._records):
            raise RecordNotFound(f"No student at position {index}")
        return self._records[index]

    def _recompute(self) -> None:
        # Built fully before being swapped in, so readers never see a partial result
        visibility = compute_visibility(self._records, self._state)
        self._visibility = visibility
        logger.debug(f"{sum(visibility)} of {len(visibility)} students visible for {self._state}")
