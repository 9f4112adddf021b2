import pytest
from fastapi import HTTPException
from types import SimpleNamespace

from ratings_lib.services import ServiceContainer, resolve_service


def _request(container):
    return SimpleNamespace(app=SimpleNamespace(state=SimpleNamespace(container=container)))


def test_register_and_get():
    c = ServiceContainer()
    svc = object()
    c.register_singleton('person_service', svc)
    assert c.get('person_service') is svc
    assert 'person_service' in c
    assert list(c.keys()) == ['person_service']


def test_missing_key_raises_key_error():
    with pytest.raises(KeyError):
        ServiceContainer().get('nope')


def test_resolve_service_from_request():
    c = ServiceContainer()
    c.register_singleton('rating_service', 'svc')
    assert resolve_service(_request(c), 'rating_service') == 'svc'


def test_resolve_missing_service_is_500():
    with pytest.raises(HTTPException) as exc:
        resolve_service(_request(ServiceContainer()), 'rating_service')
    assert exc.value.status_code == 500


def test_resolve_without_container_is_500():
    req = SimpleNamespace(app=SimpleNamespace(state=SimpleNamespace()))
    with pytest.raises(HTTPException) as exc:
        resolve_service(req, 'rating_service')
    assert exc.value.status_code == 500


def test_app_registers_services(client):
    container = client.app.state.container
    for key in ('document_store', 'person_service', 'rating_service'):
        assert key in container
