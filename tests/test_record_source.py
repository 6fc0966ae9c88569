from unittest.mock import MagicMock

import pytest
from pymongo import DESCENDING
from bson.errors import InvalidBSON
from pymongo.errors import ConfigurationError, ServerSelectionTimeoutError

from services.exceptions import DataUnavailable
from services.record_source import PROJECTION, MongoRecordSource

DOCUMENTS = [
    {"lname": "Doe", "fname": "Jane", "strand": "STEM", "gradeLevel": 11, "semester": "1st", "enrollment_status": "Pending"},
    {"lname": "Cruz", "fname": "Ana", "strand": "ABM", "gradeLevel": 12, "semester": "2nd", "enrollment_status": "Enrolled"},
]


@pytest.fixture
def collection():
    return MagicMock()


def test_projection_hides_object_id():
    assert PROJECTION["_id"] == 0
    assert set(PROJECTION) - {"_id"} == {"lname", "fname", "strand", "gradeLevel", "semester", "enrollment_status"}


def test_fetch_all_returns_records(collection):
    collection.find.return_value = iter(DOCUMENTS)

    records = MongoRecordSource(collection).fetch_all()

    collection.find.assert_called_once_with({}, PROJECTION)
    assert [r.display_name for r in records] == ["Jane Doe", "Ana Cruz"]


def test_fetch_all_wraps_driver_errors(collection):
    collection.find.side_effect = ServerSelectionTimeoutError("no servers")

    with pytest.raises(DataUnavailable) as excinfo:
        MongoRecordSource(collection).fetch_all()
    assert excinfo.value.code == 503


def test_fetch_ordered_sorts_and_limits(collection):
    cursor = collection.find.return_value
    cursor.sort.return_value.limit.return_value = iter(DOCUMENTS[:1])

    records = MongoRecordSource(collection).fetch_ordered("lname", descending=True, limit=1)

    cursor.sort.assert_called_once_with("lname", DESCENDING)
    cursor.sort.return_value.limit.assert_called_once_with(1)
    assert [r.last_name for r in records] == ["Doe"]


def test_fetch_ordered_zero_limit_skips_query(collection):
    assert MongoRecordSource(collection).fetch_ordered("lname", limit=0) == []
    collection.find.assert_not_called()


def test_fetch_ordered_wraps_driver_errors(collection):
    collection.find.return_value.sort.side_effect = ServerSelectionTimeoutError("no servers")

    with pytest.raises(DataUnavailable) as excinfo:
        MongoRecordSource(collection).fetch_ordered("lname", limit=5)
    assert excinfo.value.message == "Failed to load recent applications."


def test_fetch_all_wraps_decoding_errors(collection):
    collection.find.side_effect = InvalidBSON("bad document")

    with pytest.raises(DataUnavailable):
        MongoRecordSource(collection).fetch_all()


def test_collection_is_resolved_on_first_query(monkeypatch):
    calls = []
    monkeypatch.setattr("services.record_source.get_collection", lambda name: calls.append(name))

    MongoRecordSource(collection_name="NewStudents")

    assert calls == []


def test_bad_configuration_becomes_data_unavailable(monkeypatch):
    def broken(name):
        raise ConfigurationError("invalid MONGO_URI")

    monkeypatch.setattr("services.record_source.get_collection", broken)
    source = MongoRecordSource()

    with pytest.raises(DataUnavailable):
        source.fetch_all()
    with pytest.raises(DataUnavailable):
        source.fetch_ordered("lname", limit=5)
