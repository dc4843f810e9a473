from pydantic import BaseModel, Field
from typing import Any, Dict, Optional, List
from datetime import datetime

from string_analyzer.models import StringAnalysis


class StringCreate(BaseModel):
    # Untyped: crud.validate_value rejects non-string values with 422
    value: Any = Field(None, description="String to analyze")


class StringProperties(BaseModel):
    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: Dict[str, int]


class StringResponse(BaseModel):
    id: str
    value: str
    properties: StringProperties
    created_at: datetime

    @classmethod
    def from_model(cls, record: StringAnalysis) -> "StringResponse":
        """Build the wire representation of a stored analysis"""
        return cls(
            id=record.id,
            value=record.value,
            properties=StringProperties(
                length=record.length,
                is_palindrome=record.is_palindrome,
                unique_characters=record.unique_characters,
                word_count=record.word_count,
                sha256_hash=record.sha256_hash,
                character_frequency_map=record.character_frequency_map
            ),
            created_at=record.created_at
        )


class FilterCriteria(BaseModel):
    """Optional filter conditions, combined with AND"""

    is_palindrome: Optional[bool] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    word_count: Optional[int] = None
    contains_character: Optional[str] = None

    def applied(self) -> Dict[str, Any]:
        """Only the criteria that were actually set"""
        return self.model_dump(exclude_none=True)


class StringListResponse(BaseModel):
    data: List[StringResponse]
    count: int
    filters_applied: Dict[str, Any]


class InterpretedQuery(BaseModel):
    original: str
    parsed_filters: Dict[str, Any]


class NaturalLanguageResponse(BaseModel):
    data: List[StringResponse]
    count: int
    interpreted_query: InterpretedQuery
