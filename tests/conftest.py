"""Shared fixtures for the dashboard tests."""
import pytest

from models.enrollment import EnrollmentRecord
from services.exceptions import DataUnavailable


def make_record(last, first, track="STEM", level=11, term="1st", status="Pending"):
    return EnrollmentRecord(last_name=last, first_name=first, track=track, level=level, term=term, status=status)


class FakeRecordSource:
    """In-memory record source; either query can be made to fail."""

    def __init__(self, records=(), fail_all=False, fail_ordered=False):
        self.records = list(records)
        self.fail_all = fail_all
        self.fail_ordered = fail_ordered
        self.ordered_calls = []

    def fetch_all(self):
        if self.fail_all:
            raise DataUnavailable("Failed to load student data.")
        return list(self.records)

    def fetch_ordered(self, field, descending=True, limit=None):
        self.ordered_calls.append((field, descending, limit))
        if self.fail_ordered:
            raise DataUnavailable("Failed to load recent applications.")
        rows = sorted(self.records, key=lambda r: r.last_name, reverse=descending)
        return rows if limit is None else rows[:limit]


@pytest.fixture
def doe_and_cruz():
    return [
        make_record("Doe", "Jane", "STEM", 11, "1st", "Pending"),
        make_record("Cruz", "Ana", "ABM", 12, "2nd", "Enrolled"),
    ]


@pytest.fixture
def roster():
    return [
        make_record("Doe", "Jane", "STEM", 11, "1st", "Pending"),
        make_record("Cruz", "Ana", "ABM", 12, "2nd", "Enrolled"),
        make_record("Santos", "Mark", "TVL-ICT", 11, "2nd", "Rejected"),
        make_record("Reyes", "Joanna", "HUMSS", 12, "1st", "Enrolled"),
        make_record("Doe", "John", "STEM", 12, "1st", "Pending"),
        make_record("Lim", "Carl", "Arts", None, "1st", ""),
    ]
