from http import HTTPStatus

from fastapi import status


class StringAnalyzerError(Exception):
    """Base error for the string analyzer core"""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Bad request"

    def __init__(self, detail: str = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class ValidationError(StringAnalyzerError):
    """Missing or malformed input"""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid request body or missing 'value' field"


class InvalidTypeError(ValidationError):
    """Input present but of the wrong type"""

    status_code = HTTPStatus.UNPROCESSABLE_ENTITY
    default_detail = "Invalid data type for 'value' (must be string)"


class DuplicateError(StringAnalyzerError):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "String already exists in the system"


class NotFoundError(StringAnalyzerError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "String does not exist in the system"


class UnparseableQueryError(StringAnalyzerError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Unable to parse natural language query"
