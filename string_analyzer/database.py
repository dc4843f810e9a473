import logging
import threading
from typing import Dict, List, Optional

from fastapi import Request

from string_analyzer.exceptions import DuplicateError
from string_analyzer.models import StringAnalysis

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------------------
# IN-MEMORY STORE
# ------------------------------------------------------------------------------
class StringStore:
    """
    In-memory collection of analyzed strings, keyed by value.

    Insertion order is kept for listing. Nothing is persisted; the store lives
    as long as the app instance that owns it.
    """

    def __init__(self):
        self._records: Dict[str, StringAnalysis] = {}
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def add(self, record: StringAnalysis) -> StringAnalysis:
        """Store a record; raises DuplicateError if its value is already present"""
        with self._lock:
            if record.value in self._records:
                raise DuplicateError()
            self._records[record.value] = record
        return record

    def get(self, value: str) -> Optional[StringAnalysis]:
        with self._lock:
            return self._records.get(value)

    def all(self) -> List[StringAnalysis]:
        """Snapshot of every record in insertion order"""
        with self._lock:
            return list(self._records.values())

    def remove(self, value: str) -> bool:
        """Remove a record by value. Returns False if it was not stored."""
        with self._lock:
            return self._records.pop(value, None) is not None


# ------------------------------------------------------------------------------
# STORE DEPENDENCY
# ------------------------------------------------------------------------------
def get_db(request: Request) -> StringStore:
    """Dependency to provide the store owned by the running app."""
    return request.app.state.store


# ------------------------------------------------------------------------------
# INITIALIZATION
# ------------------------------------------------------------------------------
def init_db() -> StringStore:
    """Create an empty store (runs once per app instance)."""
    store = StringStore()
    logger.info("✅ In-memory string store initialized.")
    return store
