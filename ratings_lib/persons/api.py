from fastapi import APIRouter, Request, Body
from ratings_lib.errors import RatingsError
from ratings_lib.server.errors import to_http_exception
from ratings_lib.services.resolver import resolve_service
import logging

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get('/persons')
def api_persons(request: Request):
    person_svc = resolve_service(request, 'person_service')
    return person_svc.list_persons()


@router.post('/persons', status_code=201)
def api_persons_create(request: Request, payload: dict = Body(default={})):
    person_svc = resolve_service(request, 'person_service')
    try:
        return person_svc.create_person(payload.get('name'))
    except RatingsError as e:
        logger.debug("Rejected person %r: %s", payload.get('name'), e)
        raise to_http_exception(e)
