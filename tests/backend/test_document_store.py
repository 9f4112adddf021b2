import json
import logging

import pytest

from ratings_lib.errors import StorageError
from ratings_lib.persons import PersonService
from ratings_lib.ratings import RatingService
from ratings_lib.storage import create_storage, SingleFileStorage, DocumentStore, MemoryStorage
from ratings_lib.storage.document_store import fresh_document, normalize_document


def test_missing_file_starts_fresh(tmp_path):
    store = create_storage(backend='file', data_dir=tmp_path / 'data')
    assert store.snapshot() == fresh_document()
    # Nothing is written until the first mutation
    assert not (tmp_path / 'data' / 'db.json').exists()


def test_round_trip_preserves_persons_and_ratings(tmp_path):
    store = create_storage(backend='file', data_dir=tmp_path)
    persons = PersonService(store)
    ratings = RatingService(store)
    ana = persons.create_person('Ana')['id']
    bea = persons.create_person('Bea')['id']
    ratings.create_rating(ana, 'Pizza', 'Luigi', 8, notes='thin crust')
    ratings.create_rating(bea, 'Sushi', 'Kyo', '10')

    reloaded = create_storage(backend='file', data_dir=tmp_path)
    assert reloaded.snapshot() == store.snapshot()
    assert reloaded.snapshot()['counters'] == {'person': 3, 'rating': 3}


def test_document_file_is_pretty_printed_utf8(tmp_path):
    store = create_storage(backend='file', data_dir=tmp_path)
    PersonService(store).create_person('Zoë')
    text = (tmp_path / 'db.json').read_text(encoding='utf-8')
    assert '\n  "persons": [' in text
    assert 'Zoë' in text


@pytest.mark.parametrize('content', [b'{not json', b'[1, 2, 3]', b'"text"', b'\xff\xfe', b'{"persons": 5}'])
def test_corrupt_file_recovers_with_fresh_document(tmp_path, caplog, content):
    (tmp_path / 'db.json').write_bytes(content)
    with caplog.at_level(logging.ERROR, logger='ratings_lib.storage.document_store'):
        store = create_storage(backend='file', data_dir=tmp_path)
    assert store.snapshot() == fresh_document()
    assert any('unreadable' in rec.getMessage() for rec in caplog.records)


def test_corrupt_file_is_overwritten_on_next_write(tmp_path):
    (tmp_path / 'db.json').write_text('garbage', encoding='utf-8')
    store = create_storage(backend='file', data_dir=tmp_path)
    PersonService(store).create_person('Ana')
    doc = json.loads((tmp_path / 'db.json').read_text(encoding='utf-8'))
    assert [p['name'] for p in doc['persons']] == ['Ana']


def test_counters_never_reuse_ids(tmp_path):
    doc = {
        'persons': [{'id': 4, 'name': 'Ana', 'created_at': '2024-01-01T00:00:00.000Z'}],
        'ratings': [],
        'counters': {'person': 2},
    }
    (tmp_path / 'db.json').write_text(json.dumps(doc), encoding='utf-8')
    store = create_storage(backend='file', data_dir=tmp_path)
    assert store.snapshot()['counters'] == {'person': 5, 'rating': 1}
    assert PersonService(store).create_person('Bea')['id'] == 5


def test_normalize_fills_missing_keys():
    assert normalize_document({}) == fresh_document()


def test_normalize_rejects_non_object():
    with pytest.raises(StorageError):
        normalize_document(['persons'])


def test_failed_transaction_is_not_saved(tmp_path):
    backend = SingleFileStorage(tmp_path / 'db.json')
    store = DocumentStore(backend)
    with pytest.raises(RuntimeError):
        with store.transaction():
            raise RuntimeError('boom')
    assert not backend.exists()


def test_snapshot_is_a_copy(tmp_path):
    store = create_storage(backend='memory')
    PersonService(store).create_person('Ana')
    snap = store.snapshot()
    snap['persons'].clear()
    assert len(store.snapshot()['persons']) == 1


def test_reload_picks_up_external_edits(tmp_path):
    store = create_storage(backend='file', data_dir=tmp_path)
    PersonService(store).create_person('Ana')
    (tmp_path / 'db.json').write_text(json.dumps(fresh_document()), encoding='utf-8')
    store.reload()
    assert store.snapshot()['persons'] == []


def test_unknown_backend_rejected(tmp_path):
    with pytest.raises(ValueError):
        create_storage(backend='sqlite', data_dir=tmp_path)


class FailingSaveStorage(MemoryStorage):
    def save(self, data: bytes) -> None:
        raise OSError('disk full')


def test_failed_save_leaves_document_unchanged():
    store = DocumentStore(FailingSaveStorage())
    with pytest.raises(OSError):
        PersonService(store).create_person('Ana')
    assert store.snapshot() == fresh_document()


def test_failed_save_does_not_advance_rating_counter():
    backend = MemoryStorage()
    store = DocumentStore(backend)
    PersonService(store).create_person('Ana')
    before = store.snapshot()

    def broken_save(data):
        raise OSError('disk full')

    backend.save = broken_save
    with pytest.raises(OSError):
        RatingService(store).create_rating(1, 'Pizza', 'Luigi', 7)
    assert store.snapshot() == before
    assert RatingService(store).list_ratings() == []


def test_transaction_changes_visible_only_after_commit():
    store = create_storage(backend='memory')
    with store.transaction() as doc:
        doc['persons'].append({'id': 1, 'name': 'Ana', 'created_at': 'x'})
        assert store.snapshot()['persons'] == []
    assert [p['name'] for p in store.snapshot()['persons']] == ['Ana']
