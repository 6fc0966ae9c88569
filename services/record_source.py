"""Enrollment record source - read-only MongoDB access."""
import logging
from typing import List, Optional

from bson.errors import BSONError
from pymongo import ASCENDING, DESCENDING
from pymongo.errors import PyMongoError

from config.database import get_collection
from config.settings import ENROLLMENT_COLLECTION
from models.enrollment import EnrollmentRecord
from services.exceptions import DataUnavailable
from utils.constants import RECORD_FIELDS

logger = logging.getLogger(__name__)

PROJECTION = {"_id": 0, **{name: 1 for name in RECORD_FIELDS}}

# Driver, connection/configuration and document decoding failures
SOURCE_ERRORS = (PyMongoError, BSONError)


class MongoRecordSource:
    """
    Queries the enrollment collection and returns typed records.

    The collection is resolved on first query, so a bad MONGO_URI surfaces as
    DataUnavailable in each section instead of failing construction.
    """

    def __init__(self, collection=None, collection_name: str = ENROLLMENT_COLLECTION):
        self._collection = collection
        self.collection_name = collection_name

    @property
    def collection(self):
        if self._collection is None:
            self._collection = get_collection(self.collection_name)
        return self._collection

    def fetch_all(self) -> List[EnrollmentRecord]:
        """Fetch every enrollment record."""
        try:
            documents = list(self.collection.find({}, PROJECTION))
        except SOURCE_ERRORS as e:
            logger.error(f"Error fetching students: {e}")
            raise DataUnavailable("Failed to load student data.") from e

        logger.debug(f"Fetched {len(documents)} students")
        return [EnrollmentRecord.from_document(doc) for doc in documents]

    def fetch_ordered(self, field: str, descending: bool = True, limit: Optional[int] = None) -> List[EnrollmentRecord]:
        """Fetch records sorted by a store field, optionally limited."""
        # MongoDB treats limit(0) as "no limit"
        if limit is not None and limit <= 0:
            return []

        direction = DESCENDING if descending else ASCENDING
        try:
            cursor = self.collection.find({}, PROJECTION).sort(field, direction)
            if limit is not None:
                cursor = cursor.limit(limit)
            documents = list(cursor)
        except SOURCE_ERRORS as e:
            logger.error(f"Error fetching records ordered by {field}: {e}")
            raise DataUnavailable("Failed to load recent applications.") from e

        logger.debug(f"Fetched {len(documents)} records ordered by {field}")
        return [EnrollmentRecord.from_document(doc) for doc in documents]
