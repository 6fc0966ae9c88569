"""
Dashboard service - one instance per browser session.

Connects the record source to the aggregator, recency selector, filter engine
and detail panel, and keeps each page section's latest result. Views only call
the read methods and the four events (reload, set_filter, select, dismiss).
"""
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Generic, List, Optional, Tuple, TypeVar

from config.settings import RECENT_LIMIT
from models.enrollment import CategoryTally, DetailView, EnrollmentRecord, FilterState
from services.aggregator import aggregate
from services.detail_projector import DetailPanel
from services.exceptions import DataUnavailable
from services.filter_engine import FilterEngine
from services.recency import fetch_recent
from utils.constants import SECTION_ERRORS

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class SectionResult(Generic[T]):
    """Value of one page section, or the error that replaced it."""
    value: Optional[T] = None
    error: Optional[DataUnavailable] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _not_loaded(section: str) -> SectionResult:
    return SectionResult(error=DataUnavailable(SECTION_ERRORS[section]))


class EnrollmentDashboard:
    """Owns the working set, filter state and detail panel of one view."""

    def __init__(self, source, recent_limit: int = RECENT_LIMIT):
        self.source = source
        self.recent_limit = recent_limit
        self.engine = FilterEngine()
        self.panel = DetailPanel()
        self._tally: SectionResult[CategoryTally] = _not_loaded("tally")
        self._recent: SectionResult[List[EnrollmentRecord]] = _not_loaded("recent")
        self._roster_error: Optional[DataUnavailable] = DataUnavailable(SECTION_ERRORS["roster"])

    # ----- events -----

    def reload(self) -> None:
        """Fetch all records and the recent slice, then replace every section."""
        with ThreadPoolExecutor(max_workers=2) as executor:
            all_future = executor.submit(self.source.fetch_all)
            recent_future = executor.submit(fetch_recent, self.source, self.recent_limit)
            records, records_error = self._outcome(all_future, "tally")
            recent, recent_error = self._outcome(recent_future, "recent")

        if records_error is None:
            self._tally = SectionResult(value=aggregate(records))
            self._roster_error = None
            self.engine.load(records)
        else:
            self._tally = SectionResult(error=records_error)
            self._roster_error = DataUnavailable(SECTION_ERRORS["roster"])
            self.engine.load(())

        self._recent = SectionResult(value=recent) if recent_error is None else SectionResult(error=recent_error)
        self.panel.dismiss()

    def set_filter(self, **changes) -> FilterState:
        return self.engine.set_filter(**changes)

    def select(self, record_index: int) -> DetailView:
        record = self.engine.record(record_index)
        return self.panel.open(record)

    def dismiss(self) -> None:
        self.panel.dismiss()

    # ----- reads -----

    def tally(self) -> SectionResult[CategoryTally]:
        return self._tally

    def recent(self) -> SectionResult[List[EnrollmentRecord]]:
        return self._recent

    def visibility(self) -> SectionResult[List[bool]]:
        if self._roster_error is not None:
            return SectionResult(error=self._roster_error)
        return SectionResult(value=self.engine.visibility())

    def roster(self) -> SectionResult[List[Tuple[int, EnrollmentRecord]]]:
        """Visible (working-set index, record) pairs in working-set order."""
        if self._roster_error is not None:
            return SectionResult(error=self._roster_error)
        return SectionResult(value=[(index, self.engine.record(index)) for index in self.engine.visible_indices()])

    def detail(self) -> Optional[DetailView]:
        return self.panel.current()

    @property
    def filter_state(self) -> FilterState:
        return self.engine.state

    @staticmethod
    def _outcome(future, section: str) -> Tuple[Any, Optional[DataUnavailable]]:
        try:
            return future.result(), None
        except DataUnavailable as e:
            logger.error(f"Error loading {section} section: {e.message}")
            return None, e
        except Exception as e:
            # Any other failure still only replaces this section
            logger.exception(f"Unexpected error loading {section} section: {e}")
            return None, DataUnavailable(SECTION_ERRORS[section])
