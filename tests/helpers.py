from pathlib import Path
from typing import Any, Optional

from starlette.testclient import TestClient

from ratings_lib.main import create_app, Config
from ratings_lib.storage import DocumentStore, MemoryStorage


def make_client(tmp_path: Path, data_dir: Optional[Path] = None, static_dir: Optional[Path] = None, **kwargs: Any) -> TestClient:
    """Build an isolated app over a temporary data directory.

    The static directory defaults to a path that does not exist so the app
    serves the API only.
    """
    cfg = Config(
        data_dir=str(data_dir or tmp_path / "data"),
        static_dir=str(static_dir or tmp_path / "no-frontend"),
        **kwargs,
    )
    return TestClient(create_app(cfg))


def memory_store(initial: Optional[bytes] = None) -> DocumentStore:
    return DocumentStore(MemoryStorage(initial))


def get_service(client: TestClient, name: str) -> Any:
    return client.app.state.container.get(name)


def add_person(client: TestClient, name: str) -> int:
    r = client.post('/api/persons', json={'name': name})
    assert r.status_code == 201, r.text
    return r.json()['id']


def add_rating(client: TestClient, person_id: Any, food: str = 'Pizza', place: str = 'Luigi', score: Any = 7, **extra: Any):
    payload = {'personId': person_id, 'food': food, 'place': place, 'score': score}
    payload.update(extra)
    return client.post('/api/ratings', json=payload)
