import hashlib
import re
from collections import Counter
from typing import Callable, Dict, List, Optional, Tuple

from string_analyzer.exceptions import UnparseableQueryError, ValidationError
from string_analyzer.models import StringAnalysis
from string_analyzer.schemas import FilterCriteria


def compute_sha256(text: str) -> str:
    """Compute SHA-256 hash of a string"""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def strip_whitespace(text: str) -> str:
    """Remove every whitespace character, not just the ends"""
    return "".join(text.split())


def is_palindrome(text: str) -> bool:
    """Check if string is palindrome (case-insensitive, ignoring whitespace)"""
    cleaned = strip_whitespace(text.lower())
    return cleaned == cleaned[::-1]


def count_unique_characters(text: str) -> int:
    """Count distinct non-whitespace characters (case-sensitive)"""
    return len(set(strip_whitespace(text)))


def count_words(text: str) -> int:
    """Count words separated by whitespace"""
    return len(text.split())


def get_character_frequency(text: str) -> Dict[str, int]:
    """Get frequency map of each character except spaces"""
    return dict(Counter(char for char in text if char != " "))


def analyze_string(raw: str) -> StringAnalysis:
    """Analyze a string and return all computed properties"""
    value = raw.strip()
    sha256_hash = compute_sha256(value)

    return StringAnalysis(
        id=sha256_hash,
        value=value,
        length=len(value),
        is_palindrome=is_palindrome(value),
        unique_characters=count_unique_characters(value),
        word_count=count_words(value),
        sha256_hash=sha256_hash,
        character_frequency_map=get_character_frequency(value)
    )


# ------------------------------------------------------------------------------
# NATURAL LANGUAGE QUERIES
# ------------------------------------------------------------------------------

def _longer_than(match: re.Match) -> Dict:
    return {"min_length": parse_int_param("longer than", match.group(1)) + 1}


# Literal sub-phrase matching only, not a tokenizer, grammar or NLP model.
# Exactly these four rules are recognised.
NATURAL_LANGUAGE_RULES: List[Tuple[re.Pattern, Callable[[re.Match], Dict]]] = [
    (re.compile(r"single word"), lambda match: {"word_count": 1}),
    (re.compile(r"palindromic"), lambda match: {"is_palindrome": True}),
    (re.compile(r"longer than (\d+)", re.ASCII), _longer_than),
    (re.compile(r"containing the letter (\w)", re.ASCII), lambda match: {"contains_character": match.group(1)}),
]


def parse_natural_language_query(query: str) -> FilterCriteria:
    """
    Parse natural language query into filter criteria
    Examples:
    - "all single word palindromic strings" -> {word_count: 1, is_palindrome: true}
    - "strings longer than 10 characters" -> {min_length: 11}
    - "strings containing the letter z" -> {contains_character: "z"}

    Raises UnparseableQueryError when none of the rules match.
    """
    filters = {}
    for pattern, build in NATURAL_LANGUAGE_RULES:
        match = pattern.search(query)
        if match:
            filters.update(build(match))

    if not filters:
        raise UnparseableQueryError()

    return FilterCriteria(**filters)


# ------------------------------------------------------------------------------
# QUERY PARAMETER DECODING
# ------------------------------------------------------------------------------

_INTEGER_RE = re.compile(r"\d+", re.ASCII)
MAX_INT_DIGITS = 18


def parse_bool_param(name: str, raw: Optional[str]) -> Optional[bool]:
    """Decode 'true' / 'false'; anything else is rejected"""
    if raw is None:
        return None
    lowered = raw.strip().lower()
    if lowered not in ("true", "false"):
        raise ValidationError(f"Invalid value for {name} (must be true or false)")
    return lowered == "true"


def parse_int_param(name: str, raw: Optional[str]) -> Optional[int]:
    """Decode a non-negative base-10 integer; anything else is rejected"""
    if raw is None:
        return None
    text = raw.strip()
    if not _INTEGER_RE.fullmatch(text):
        raise ValidationError(f"Invalid value for {name} (must be a non-negative integer)")
    if len(text) > MAX_INT_DIGITS:
        raise ValidationError(f"Invalid value for {name} (number is too large)")
    return int(text)


def parse_filter_params(
    is_palindrome: Optional[str] = None,
    min_length: Optional[str] = None,
    max_length: Optional[str] = None,
    word_count: Optional[str] = None,
    contains_character: Optional[str] = None
) -> FilterCriteria:
    """Turn raw query parameter text into typed filter criteria"""
    if contains_character is not None and contains_character == "":
        raise ValidationError("contains_character must not be empty")

    criteria = FilterCriteria(
        is_palindrome=parse_bool_param("is_palindrome", is_palindrome),
        min_length=parse_int_param("min_length", min_length),
        max_length=parse_int_param("max_length", max_length),
        word_count=parse_int_param("word_count", word_count),
        contains_character=contains_character
    )

    if (
        criteria.min_length is not None
        and criteria.max_length is not None
        and criteria.min_length > criteria.max_length
    ):
        raise ValidationError("min_length cannot be greater than max_length")

    return criteria
