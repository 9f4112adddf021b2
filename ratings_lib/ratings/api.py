from typing import Optional

from fastapi import APIRouter, Request, Body, Query
from ratings_lib.errors import RatingsError
from ratings_lib.server.errors import to_http_exception
from ratings_lib.services.resolver import resolve_service
import logging

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get('/ratings')
def api_ratings(
    request: Request,
    personId: Optional[str] = Query(default=None),
    order: Optional[str] = Query(default=None),
):
    """Return ratings joined with their person.

    Query params:
        personId: Optional person id to filter by
        order: score_desc | score_asc | place_asc | place_desc | newest | oldest
    """
    rating_svc = resolve_service(request, 'rating_service')
    return rating_svc.list_ratings(person_id=personId, order=order)


@router.post('/ratings', status_code=201)
def api_ratings_create(request: Request, payload: dict = Body(default={})):
    rating_svc = resolve_service(request, 'rating_service')
    try:
        return rating_svc.create_rating(
            person_id=payload.get('personId'),
            food=payload.get('food'),
            place=payload.get('place'),
            score=payload.get('score'),
            notes=payload.get('notes'),
        )
    except RatingsError as e:
        logger.debug("Rejected rating: %s", e)
        raise to_http_exception(e)
