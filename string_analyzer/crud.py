import logging
from typing import Any, Iterable, List

from string_analyzer.database import StringStore
from string_analyzer.exceptions import InvalidTypeError, NotFoundError, ValidationError
from string_analyzer.models import StringAnalysis
from string_analyzer.schemas import FilterCriteria
from string_analyzer.utils import analyze_string

logger = logging.getLogger(__name__)


def validate_value(value: Any) -> str:
    """Check the raw 'value' field of an insert request"""
    if value is None:
        raise ValidationError()
    if not isinstance(value, str):
        raise InvalidTypeError()
    if not value.strip():
        raise ValidationError("'value' must not be empty")
    return value


def create_string_analysis(db: StringStore, value: Any) -> StringAnalysis:
    """Validate, analyze and store a new string"""
    raw = validate_value(value)
    record = db.add(analyze_string(raw))
    logger.info(f"Stored string analysis {record.id}")
    return record


def get_string_by_value(db: StringStore, value: str) -> StringAnalysis:
    """Get string analysis by exact value"""
    record = db.get(value)
    if record is None:
        raise NotFoundError()
    return record


def filter_strings(records: Iterable[StringAnalysis], criteria: FilterCriteria) -> List[StringAnalysis]:
    """
    Keep the records matching every criterion that is set.

    Does not mutate the input and preserves its order.
    """
    results = []
    for record in records:
        if criteria.is_palindrome is not None and record.is_palindrome != criteria.is_palindrome:
            continue
        if criteria.min_length is not None and record.length < criteria.min_length:
            continue
        if criteria.max_length is not None and record.length > criteria.max_length:
            continue
        if criteria.word_count is not None and record.word_count != criteria.word_count:
            continue
        if criteria.contains_character is not None and criteria.contains_character not in record.value:
            continue
        results.append(record)
    return results


def get_all_strings(db: StringStore, criteria: FilterCriteria) -> List[StringAnalysis]:
    """Get all strings with optional filters"""
    return filter_strings(db.all(), criteria)


def delete_string(db: StringStore, value: str) -> None:
    """Delete string analysis by value"""
    if not db.remove(value):
        raise NotFoundError()
    logger.info(f"Deleted string analysis for value of length {len(value)}")
