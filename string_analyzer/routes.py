from fastapi import APIRouter, Depends, Query, Response, status
from typing import Optional
import logging

from string_analyzer import crud, schemas
from string_analyzer.database import StringStore, get_db
from string_analyzer.exceptions import ValidationError
from string_analyzer.utils import parse_filter_params, parse_natural_language_query

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/strings", response_model=schemas.StringResponse, status_code=status.HTTP_201_CREATED)
async def create_string(
    string_data: schemas.StringCreate,
    db: StringStore = Depends(get_db)
):
    """
    Analyze and store a string.
    Returns 409 if string already exists.
    """
    db_string = crud.create_string_analysis(db, string_data.value)
    return schemas.StringResponse.from_model(db_string)


@router.get("/strings", response_model=schemas.StringListResponse)
async def get_all_strings(
    is_palindrome: Optional[str] = Query(None, description="true or false"),
    min_length: Optional[str] = Query(None, description="Minimum length (inclusive)"),
    max_length: Optional[str] = Query(None, description="Maximum length (inclusive)"),
    word_count: Optional[str] = Query(None, description="Exact word count"),
    contains_character: Optional[str] = Query(None, description="Substring the value must contain"),
    db: StringStore = Depends(get_db)
):
    """
    Get all strings with optional filtering.
    Malformed filter values are rejected with 400.
    """
    criteria = parse_filter_params(
        is_palindrome=is_palindrome,
        min_length=min_length,
        max_length=max_length,
        word_count=word_count,
        contains_character=contains_character
    )
    strings = crud.get_all_strings(db, criteria)

    data = [schemas.StringResponse.from_model(s) for s in strings]
    return schemas.StringListResponse(
        data=data,
        count=len(data),
        filters_applied=criteria.applied()
    )


# Registered before /strings/{string_value} so the literal path is not
# captured as a string value
@router.get("/strings/filter-by-natural-language", response_model=schemas.NaturalLanguageResponse)
async def filter_by_natural_language(
    query: Optional[str] = Query(None, description="Natural language query"),
    db: StringStore = Depends(get_db)
):
    """
    Filter strings using natural language queries.
    Example: "all single word palindromic strings"
    """
    if not query or not query.strip():
        raise ValidationError("Missing query parameter")

    criteria = parse_natural_language_query(query)
    logger.info(f"Interpreted query '{query}' as {criteria.applied()}")
    strings = crud.get_all_strings(db, criteria)

    data = [schemas.StringResponse.from_model(s) for s in strings]
    return schemas.NaturalLanguageResponse(
        data=data,
        count=len(data),
        interpreted_query=schemas.InterpretedQuery(
            original=query,
            parsed_filters=criteria.applied()
        )
    )


@router.get("/strings/{string_value}", response_model=schemas.StringResponse)
async def get_string(
    string_value: str,
    db: StringStore = Depends(get_db)
):
    """
    Get analysis for a specific string.
    Returns 404 if string doesn't exist.
    """
    db_string = crud.get_string_by_value(db, string_value)
    return schemas.StringResponse.from_model(db_string)


@router.delete("/strings/{string_value}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_string(
    string_value: str,
    db: StringStore = Depends(get_db)
):
    """
    Delete a string from the system.
    Returns 404 if string doesn't exist.
    """
    crud.delete_string(db, string_value)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
