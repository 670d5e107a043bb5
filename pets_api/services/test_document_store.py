# pets_api/services/test_document_store.py
"""
문서 저장소 테스트

사용법: python -m pytest pets_api/services/test_document_store.py -v
"""

import logging
import pytest
from pets_api.core.exceptions import DocumentStoreError
from pets_api.services.document_store import DocumentStore

@pytest.fixture
def memory_store():
    store = DocumentStore(in_memory=True)
    yield store
    store.close()

def test_insert_assigns_unique_ids(memory_store):
    """삽입 시 서로 다른 `_id`가 부여되어야 함"""
    first = memory_store.insert({'type': 'dog', 'name': 'Alexander'})
    second = memory_store.insert({'type': 'cat', 'name': 'Tom'})

    assert first['_id']
    assert second['_id']
    assert first['_id'] != second['_id']
    assert first['type'] == 'dog'

def test_insert_does_not_mutate_input(memory_store):
    doc = {'type': 'dog', 'name': 'Alexander'}
    memory_store.insert(doc)
    assert '_id' not in doc

def test_find_returns_insertion_order(memory_store):
    names = ['Alexander', 'Bella', 'Charlie']
    for name in names:
        memory_store.insert({'type': 'dog', 'name': name})

    assert [doc['name'] for doc in memory_store.find({})] == names
    assert [doc['name'] for doc in memory_store.find()] == names

def test_find_by_example(memory_store):
    memory_store.insert({'type': 'dog', 'name': 'Alexander'})
    memory_store.insert({'type': 'cat', 'name': 'Tom'})
    memory_store.insert({'type': 'dog', 'name': 'Bella'})

    dogs = memory_store.find({'type': 'dog'})
    assert [doc['name'] for doc in dogs] == ['Alexander', 'Bella']

def test_find_one(memory_store):
    inserted = memory_store.insert({'type': 'dog', 'name': 'Alexander'})

    assert memory_store.find_one({'_id': inserted['_id']}) == inserted
    assert memory_store.find_one({'_id': 'missing'}) is None

def test_update_merges_fields(memory_store):
    """갱신은 전달된 필드만 덮어쓰고 나머지는 유지해야 함"""
    inserted = memory_store.insert({'type': 'dog', 'name': 'Alexander'})

    updated = memory_store.update({'_id': inserted['_id']}, {'name': 'Xander'})

    assert updated == [{'_id': inserted['_id'], 'type': 'dog', 'name': 'Xander'}]
    assert memory_store.find_one({'_id': inserted['_id']})['name'] == 'Xander'

def test_update_without_match_returns_empty(memory_store):
    memory_store.insert({'type': 'dog', 'name': 'Alexander'})
    assert memory_store.update({'_id': 'missing'}, {'name': 'Xander'}) == []

def test_update_rejects_id_change(memory_store):
    inserted = memory_store.insert({'type': 'dog', 'name': 'Alexander'})
    with pytest.raises(DocumentStoreError):
        memory_store.update({'_id': inserted['_id']}, {'_id': 'other'})

def test_remove(memory_store):
    inserted = memory_store.insert({'type': 'dog', 'name': 'Alexander'})
    memory_store.insert({'type': 'cat', 'name': 'Tom'})

    assert memory_store.remove({'_id': inserted['_id']}) == 1
    assert memory_store.remove({'_id': inserted['_id']}) == 0
    assert len(memory_store.find({})) == 1

def test_persists_to_file(tmp_path):
    """파일 저장소는 다시 열어도 데이터가 유지되어야 함"""
    db_path = str(tmp_path / 'data' / 'pets.db.json')

    store = DocumentStore(path=db_path)
    inserted = store.insert({'type': 'dog', 'name': 'Alexander'})
    store.close()

    reopened = DocumentStore(path=db_path)
    try:
        assert reopened.find({}) == [inserted]
    finally:
        reopened.close()

def test_corrupt_file_raises_store_error(tmp_path):
    db_path = tmp_path / 'pets.db.json'
    db_path.write_text('this is not json')

    store = DocumentStore(path=str(db_path))
    try:
        with pytest.raises(DocumentStoreError):
            store.find({})
    finally:
        store.close()

def test_operations_require_open_store():
    store = DocumentStore()
    with pytest.raises(DocumentStoreError):
        store.find({})

def test_corrupt_file_is_not_logged_by_store(tmp_path, caplog):
    """저장소 오류 로그는 라우트에서 한 번만 남기므로 저장소는 로그를 남기지 않아야 함"""
    db_path = tmp_path / 'pets.db.json'
    db_path.write_text('this is not json')

    store = DocumentStore(path=str(db_path))
    try:
        with caplog.at_level(logging.ERROR):
            with pytest.raises(DocumentStoreError):
                store.find({})
        assert not [r for r in caplog.records if r.levelno >= logging.ERROR]
    finally:
        store.close()

def test_unexpected_errors_are_not_wrapped(memory_store, monkeypatch):
    """OS/JSON 오류가 아닌 예외는 DocumentStoreError로 감싸지 않고 그대로 전파해야 함"""
    def broken_insert(document):
        raise KeyError('_id')
    monkeypatch.setattr(memory_store.table, 'insert', broken_insert)

    with pytest.raises(KeyError):
        memory_store.insert({'type': 'dog', 'name': 'Alexander'})
