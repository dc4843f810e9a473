import pytest

from string_analyzer import crud
from string_analyzer.exceptions import (
    DuplicateError,
    InvalidTypeError,
    NotFoundError,
    ValidationError,
)
from string_analyzer.schemas import FilterCriteria
from string_analyzer.utils import analyze_string

VALUES = ["racecar", "hello world", "a", "Noon", "level up", "abcdef"]


@pytest.fixture
def records():
    return [analyze_string(value) for value in VALUES]


def values_of(records):
    return [record.value for record in records]


class TestFilterStrings:
    def test_empty_criteria_keeps_everything(self, records):
        assert crud.filter_strings(records, FilterCriteria()) == records

    def test_is_palindrome(self, records):
        result = crud.filter_strings(records, FilterCriteria(is_palindrome=True))
        assert values_of(result) == ["racecar", "a", "Noon"]
        result = crud.filter_strings(records, FilterCriteria(is_palindrome=False))
        assert values_of(result) == ["hello world", "level up", "abcdef"]

    def test_length_bounds_are_inclusive(self, records):
        result = crud.filter_strings(records, FilterCriteria(min_length=4, max_length=7))
        assert values_of(result) == ["racecar", "Noon", "abcdef"]

    def test_word_count(self, records):
        result = crud.filter_strings(records, FilterCriteria(word_count=2))
        assert values_of(result) == ["hello world", "level up"]

    def test_contains_character_is_case_sensitive(self, records):
        assert values_of(crud.filter_strings(records, FilterCriteria(contains_character="N"))) == ["Noon"]
        assert values_of(crud.filter_strings(records, FilterCriteria(contains_character="lo"))) == ["hello world"]

    def test_composable(self, records):
        chained = crud.filter_strings(
            crud.filter_strings(records, FilterCriteria(min_length=3)),
            FilterCriteria(is_palindrome=True),
        )
        combined = crud.filter_strings(records, FilterCriteria(min_length=3, is_palindrome=True))
        assert chained == combined
        assert values_of(combined) == ["racecar", "Noon"]

    def test_does_not_mutate_input(self, records):
        before = list(records)
        crud.filter_strings(records, FilterCriteria(word_count=1))
        assert records == before


class TestCrud:
    def test_create_and_get(self, store):
        record = crud.create_string_analysis(store, "  racecar ")
        assert record.value == "racecar"
        assert crud.get_string_by_value(store, "racecar") is record
        assert len(store) == 1

    def test_duplicate(self, store):
        crud.create_string_analysis(store, "hello")
        with pytest.raises(DuplicateError):
            crud.create_string_analysis(store, "hello")
        with pytest.raises(DuplicateError):
            crud.create_string_analysis(store, " hello ")

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_missing_value(self, store, value):
        with pytest.raises(ValidationError):
            crud.create_string_analysis(store, value)

    @pytest.mark.parametrize("value", [123, ["a"], {"a": 1}, True])
    def test_wrong_type(self, store, value):
        with pytest.raises(InvalidTypeError):
            crud.create_string_analysis(store, value)

    def test_get_missing(self, store):
        with pytest.raises(NotFoundError):
            crud.get_string_by_value(store, "nope")

    def test_delete_twice(self, store):
        crud.create_string_analysis(store, "hello")
        crud.delete_string(store, "hello")
        with pytest.raises(NotFoundError):
            crud.delete_string(store, "hello")
        assert len(store) == 0

    def test_get_all_keeps_insertion_order(self, store):
        for value in ["b", "a", "c"]:
            crud.create_string_analysis(store, value)
        assert values_of(crud.get_all_strings(store, FilterCriteria())) == ["b", "a", "c"]
