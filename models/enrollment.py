"""
Enrollment data models.

Records are immutable; every service derives new values from them instead of
mutating the working set.
"""
from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Any, Dict, Union

from utils.constants import (
    ANY,
    FIELD_FIRST_NAME,
    FIELD_LAST_NAME,
    FIELD_LEVEL,
    FIELD_STATUS,
    FIELD_TERM,
    FIELD_TRACK,
)


class Track(str, Enum):
    """Enrollment strand of a student."""
    STEM = "STEM"
    ABM = "ABM"
    TVL_ICT = "TVL-ICT"
    HUMSS = "HUMSS"


class Status(str, Enum):
    """Enrollment disposition."""
    PENDING = "Pending"
    ENROLLED = "Enrolled"
    REJECTED = "Rejected"


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _level(value: Any) -> Union[int, str, None]:
    """
    Whole numbers become int; anything else keeps its stored text so it
    never matches a selectable level.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    text = str(value)
    if not text.strip():
        return None
    # "11" is stored text for 11; "012" or "11.0" are not
    if text.isdecimal() and str(int(text)) == text:
        return int(text)
    return text


@dataclass(frozen=True)
class EnrollmentRecord:
    """
    A single enrollment application.

    track and status keep the raw stored value, so a record with an
    unrecognized category is still listed in the roster.
    """
    last_name: str
    first_name: str
    track: str
    level: Union[int, str, None]
    term: str
    status: str

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "EnrollmentRecord":
        """Build a record from a record-store document."""
        return cls(
            last_name=_text(doc.get(FIELD_LAST_NAME)),
            first_name=_text(doc.get(FIELD_FIRST_NAME)),
            track=_text(doc.get(FIELD_TRACK)),
            level=_level(doc.get(FIELD_LEVEL)),
            term=_text(doc.get(FIELD_TERM)),
            status=_text(doc.get(FIELD_STATUS)),
        )


@dataclass
class CategoryTally:
    """Counts per track and per status; both mappings cover every member."""
    tracks: Dict[str, int] = field(default_factory=lambda: {t.value: 0 for t in Track})
    statuses: Dict[str, int] = field(default_factory=lambda: {s.value: 0 for s in Status})

    @classmethod
    def empty(cls) -> "CategoryTally":
        return cls()

    @property
    def track_total(self) -> int:
        return sum(self.tracks.values())

    @property
    def status_total(self) -> int:
        return sum(self.statuses.values())


@dataclass(frozen=True)
class FilterState:
    """Current roster predicates. ANY disables a select-style predicate."""
    query: str = ""
    track: str = ANY
    level: str = ANY
    term: str = ANY

    def merge(self, **changes) -> "FilterState":
        """Return a new state with the given predicates replaced."""
        known = {f.name for f in fields(self)}
        unknown = set(changes) - known
        if unknown:
            raise ValueError(f"Unknown filter fields: {', '.join(sorted(unknown))}")
        return replace(self, **changes)

    @property
    def is_empty(self) -> bool:
        return self == FilterState()


@dataclass(frozen=True)
class DetailView:
    """Display-ready projection of one record."""
    display_name: str
    track: str
    level: str
    term: str
    status: str
