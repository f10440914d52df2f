"""JSON-file document store.

Each file holds one collection as a mapping id -> document. Writes go to a
temp file in the same directory that is then moved over the original, so a
reader never observes a half-written collection. A per-file lock serializes
read-modify-write cycles inside the process.
"""
import json
import logging
import os
import shutil
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from threading import Lock
from typing import Callable, Dict, List, Optional, Union
from uuid import uuid4

logger = logging.getLogger(__name__)

_locks: Dict[str, Lock] = {}
_locks_guard = Lock()


def _lock_for(path: Path) -> Lock:
    with _locks_guard:
        return _locks.setdefault(str(path), Lock())


class DuplicateDocumentError(Exception):
    """Another stored document clashes with the one being written."""

    def __init__(self, existing_id: str):
        super().__init__(f"Document clashes with {existing_id}")
        self.existing_id = existing_id


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def new_id() -> str:
    return uuid4().hex


class DocumentStore:
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._lock = _lock_for(self.path)

    def _read(self) -> Dict[str, dict]:
        if not self.path.exists():
            return {}
        with open(self.path, 'r', encoding='utf-8') as f:
            data = json.load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Document file {self.path} must contain a JSON object")
        return data

    def _atomic_write(self, documents: Dict[str, dict]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=str(self.path.parent), prefix=f".{self.path.stem}_", suffix=".json")
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as tmp:
                json.dump(documents, tmp, indent=2, ensure_ascii=False)
            shutil.move(tmp_path, str(self.path))
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)

    def all(self) -> List[dict]:
        with self._lock:
            return list(self._read().values())

    def get(self, doc_id: str) -> Optional[dict]:
        with self._lock:
            return self._read().get(doc_id)

    def get_many(self, doc_ids) -> List[dict]:
        """Return the documents whose ids are in doc_ids (unknown ids are ignored)."""
        with self._lock:
            documents = self._read()
        return [documents[i] for i in dict.fromkeys(doc_ids) if i in documents]

    def put(self, document: dict, clashes: Optional[Callable[[dict], bool]] = None) -> dict:
        """Insert or replace a document by its 'id' in one atomic file replace.

        When clashes is given, any other stored document for which it returns
        True aborts the write with DuplicateDocumentError. The check and the
        write happen under the same lock.
        """
        doc_id = document.get('id')
        if not doc_id:
            raise ValueError("Document must have an 'id'")
        with self._lock:
            documents = self._read()
            if clashes is not None:
                for other_id, other in documents.items():
                    if other_id != doc_id and clashes(other):
                        raise DuplicateDocumentError(other_id)
            documents[doc_id] = document
            self._atomic_write(documents)
        logger.debug("Stored document %s in %s", doc_id, self.path.name)
        return document


__all__ = ['DocumentStore', 'DuplicateDocumentError', 'now_iso', 'new_id']
