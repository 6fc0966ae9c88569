"""Student detail projection and the detail panel state."""
from enum import Enum
from typing import Optional

from models.enrollment import DetailView, EnrollmentRecord
from utils.constants import MISSING_VALUE


def _display(value) -> str:
    # Only absent values are replaced; whitespace is shown as stored
    if value is None or value == "":
        return MISSING_VALUE
    return str(value)


def project(record: EnrollmentRecord) -> DetailView:
    """Project a record into display strings for the detail panel."""
    return DetailView(
        display_name=record.display_name if record.first_name or record.last_name else MISSING_VALUE,
        track=_display(record.track),
        level=_display(record.level),
        term=_display(record.term),
        status=_display(record.status),
    )


class DetailState(Enum):
    CLOSED = "closed"
    OPEN = "open"


class DetailPanel:
    """Closed until a record is selected; dismiss returns to Closed."""

    def __init__(self):
        self.state = DetailState.CLOSED
        self._view: Optional[DetailView] = None

    @property
    def is_open(self) -> bool:
        return self.state is DetailState.OPEN

    def open(self, record: EnrollmentRecord) -> DetailView:
        # Selecting while open replaces the whole projection
        self._view = project(record)
        self.state = DetailState.OPEN
        return self._view

    def dismiss(self) -> None:
        self._view = None
        self.state = DetailState.CLOSED

    def current(self) -> Optional[DetailView]:
        return self._view
