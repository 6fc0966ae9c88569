import random

import pytest

from services.aggregator import aggregate, classify_status, classify_track
from services.exceptions import MalformedRecord
from tests.conftest import make_record


def test_doe_and_cruz_scenario(doe_and_cruz):
    tally = aggregate(doe_and_cruz)

    assert tally.tracks == {"STEM": 1, "ABM": 1, "TVL-ICT": 0, "HUMSS": 0}
    assert tally.statuses == {"Pending": 1, "Enrolled": 1, "Rejected": 0}


def test_empty_input_gives_zero_tally():
    tally = aggregate([])

    assert tally.track_total == 0
    assert tally.status_total == 0
    assert set(tally.tracks) == {"STEM", "ABM", "TVL-ICT", "HUMSS"}


def test_malformed_values_are_skipped(roster):
    tally = aggregate(roster)

    # "Arts" and "" are not counted
    assert tally.track_total == len(roster) - 1
    assert tally.status_total == len(roster) - 1


def test_track_and_status_skipped_independently():
    tally = aggregate([make_record("A", "B", track="Unknown", status="Enrolled")])

    assert tally.track_total == 0
    assert tally.statuses["Enrolled"] == 1


def test_track_counts_are_case_sensitive():
    tally = aggregate([make_record("A", "B", track="stem")])

    assert tally.tracks["STEM"] == 0


def test_order_does_not_matter(roster):
    shuffled = list(roster)
    random.Random(7).shuffle(shuffled)

    assert aggregate(shuffled) == aggregate(roster)


def test_classifiers_raise_malformed_record():
    record = make_record("A", "B", track="", status="Waitlisted")

    with pytest.raises(MalformedRecord):
        classify_track(record)
    with pytest.raises(MalformedRecord) as excinfo:
        classify_status(record)
    assert excinfo.value.code == 422
