"""Translate domain errors into FastAPI HTTP exceptions."""
from fastapi import HTTPException

from ratings_lib.errors import ConflictError, RatingsError, ValidationError

STATUS_CODES = {
    ValidationError: 400,
    ConflictError: 409,
}


def to_http_exception(exc: RatingsError) -> HTTPException:
    status = next((code for cls, code in STATUS_CODES.items() if isinstance(exc, cls)), 500)
    return HTTPException(status_code=status, detail={'error': exc.code, 'message': str(exc)})
