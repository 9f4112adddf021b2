from fastapi import APIRouter, Request
from ratings_lib.services.resolver import resolve_service
from .health import get_health

router = APIRouter()


@router.get('/health')
def api_health(request: Request):
    return get_health(resolve_service(request, 'document_store'))
