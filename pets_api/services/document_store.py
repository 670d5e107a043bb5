# pets_api/services/document_store.py
import os
import uuid
import logging
import threading
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from flask import Flask
from tinydb import TinyDB, Query
from tinydb.storages import JSONStorage, MemoryStorage

from pets_api.core.exceptions import DocumentStoreError

logger = logging.getLogger(__name__)

class DocumentStore:
    """
    TinyDB 위에 얹은 파일 기반 문서 저장소입니다.
    예시 문서(query-by-example)로 조회/수정/삭제하며, 삽입 시 고유한 `_id`를 부여합니다.

    TinyDB는 스레드 안전하지 않으므로 모든 연산은 하나의 RLock으로 직렬화됩니다.
    저장소 내부의 오류(OSError, JSON 파싱 오류)는 DocumentStoreError로 감싸서 올립니다. 로그는 호출하는 라우트에서 남깁니다.
    """

    ID_FIELD = '_id'

    def __init__(self, path: Optional[str] = None, in_memory: bool = False, table_name: str = 'pets'):
        """
        path 또는 in_memory가 주어지면 즉시 저장소를 엽니다.
        그렇지 않으면 init_app 을 통해 Flask 설정으로부터 열어야 합니다.
        """
        self.db = None
        self.table = None
        self.table_name = table_name
        self._lock = threading.RLock()
        if path or in_memory:
            self.open(path, in_memory=in_memory)

    def init_app(self, app: Flask):
        """
        Flask 앱 초기화 과정에서 호출되어 설정값으로 저장소를 엽니다.

        :param app: Flask 애플리케이션 객체
        """
        if app.config.get('DATABASE_IN_MEMORY'):
            self.open(in_memory=True)
        else:
            path = app.config.get('DATABASE_PATH')
            if not path:
                raise ValueError("DATABASE_PATH 설정이 .env 또는 설정 파일에 필요합니다.")
            self.open(path)

    def open(self, path: Optional[str] = None, in_memory: bool = False):
        with self._lock:
            if self.db is not None:
                self.db.close()
            if in_memory:
                self.db = TinyDB(storage=MemoryStorage)
                logger.info("DocumentStore opened in memory.")
            else:
                try:
                    self.db = TinyDB(os.path.abspath(path), storage=JSONStorage, create_dirs=True)
                except (OSError, ValueError) as e:
                    raise DocumentStoreError(f"Failed to open document store at {path}: {e}") from e
                logger.info(f"DocumentStore opened at {path}")
            self.table = self.db.table(self.table_name)

    def close(self):
        with self._lock:
            if self.db is not None:
                self.db.close()
                self.db = None
                self.table = None

    @contextmanager
    def _operation(self):
        """락을 잡고, TinyDB/파일 시스템 오류를 DocumentStoreError로 변환합니다."""
        with self._lock:
            if self.table is None:
                raise DocumentStoreError("DocumentStore is not open. Call init_app or open first.")
            try:
                yield self.table
            except DocumentStoreError:
                raise
            except (OSError, ValueError) as e:
                # JSONDecodeError는 ValueError의 하위 클래스. 그 외 예외는 그대로 전파합니다.
                raise DocumentStoreError(str(e) or e.__class__.__name__) from e

    @staticmethod
    def _matches(query: Dict[str, Any]):
        return Query().fragment(query)

    @staticmethod
    def _new_id() -> str:
        return uuid.uuid4().hex

    def insert(self, document: Dict[str, Any]) -> Dict[str, Any]:
        """문서를 저장하고 `_id`가 부여된 사본을 반환합니다."""
        with self._operation() as table:
            new_doc = dict(document)
            new_doc[self.ID_FIELD] = self._new_id()
            table.insert(new_doc)
            return new_doc

    def find(self, query: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        """조건에 맞는 모든 문서를 삽입 순서대로 반환합니다. 빈 조건은 전체 조회입니다."""
        with self._operation() as table:
            docs = table.search(self._matches(query)) if query else table.all()
            return [dict(doc) for doc in docs]

    def find_one(self, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        with self._operation() as table:
            doc = table.get(self._matches(query))
            return dict(doc) if doc is not None else None

    def update(self, query: Dict[str, Any], fields: Dict[str, Any]) -> List[Dict[str, Any]]:
        """
        조건에 맞는 문서들에 `fields`를 병합($set)하고, 갱신된 문서들을 반환합니다.
        빈 리스트는 일치하는 문서가 없었음을 뜻합니다. 조회와 갱신은 같은 락 안에서 원자적으로 수행됩니다.
        """
        if self.ID_FIELD in fields:
            raise DocumentStoreError(f"'{self.ID_FIELD}' cannot be modified.")
        with self._operation() as table:
            updated_ids = table.update(dict(fields), self._matches(query))
            return [dict(table.get(doc_id=doc_id)) for doc_id in updated_ids]

    def remove(self, query: Dict[str, Any]) -> int:
        """조건에 맞는 문서들을 삭제하고 삭제된 개수를 반환합니다."""
        with self._operation() as table:
            return len(table.remove(self._matches(query)))
