from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict


@dataclass(frozen=True)
class StringAnalysis:
    """A stored analysis result. Never mutated after creation."""

    id: str  # SHA-256 hash of value
    value: str
    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: Dict[str, int]
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
