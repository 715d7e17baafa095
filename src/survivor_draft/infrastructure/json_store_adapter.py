"""
JSON File Storage Adapter

Durable group and autodraft queue stores: one JSON document per key under a
data directory. Keys follow the key-value layout ``group:<slug>`` and
``autodraft:<slug>:<user>``; they are URL-quoted into file names.
"""

import asyncio
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional
from urllib.parse import quote, unquote

from ..application.interfaces import IAutodraftQueueRepository, IGroupRepository
from ..domain.entities.autodraft_queue import AutodraftQueue
from ..domain.entities.group import Group
from ..domain.exceptions import StorageUnavailableError
from .storage_adapter import check_version

logger = logging.getLogger(__name__)

GROUP_PREFIX = "group:"
AUTODRAFT_PREFIX = "autodraft:"


class JsonDocumentStore:
    """Minimal key-value blob store on the file system"""

    def __init__(self, base_dir: str = "data"):
        self.dir = Path(base_dir) / "kv"

    def _path(self, key: str) -> Path:
        return self.dir / f"{quote(key, safe='')}.json"

    def read(self, key: str) -> Optional[Dict[str, Any]]:
        path = self._path(key)
        try:
            if not path.exists():
                return None
            with path.open("r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to read {key}: {e}", exc_info=True)
            raise StorageUnavailableError(f"Could not read {key}") from e

    def write(self, key: str, data: Dict[str, Any]) -> None:
        path = self._path(key)
        tmp_path = path.with_suffix(".tmp")
        try:
            self.dir.mkdir(parents=True, exist_ok=True)
            with tmp_path.open("w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, path)
        except OSError as e:
            logger.error(f"Failed to write {key}: {e}", exc_info=True)
            raise StorageUnavailableError(f"Could not write {key}") from e

    def delete(self, key: str) -> None:
        try:
            self._path(key).unlink(missing_ok=True)
        except OSError as e:
            logger.error(f"Failed to delete {key}: {e}", exc_info=True)
            raise StorageUnavailableError(f"Could not delete {key}") from e

    def keys(self, prefix: str = "") -> List[str]:
        if not self.dir.exists():
            return []
        try:
            names = [unquote(p.stem) for p in self.dir.glob("*.json")]
        except OSError as e:
            raise StorageUnavailableError("Could not list stored documents") from e
        return sorted(k for k in names if k.startswith(prefix))


class JsonFileGroupRepository(IGroupRepository):
    """Group store backed by JSON documents"""

    def __init__(self, store: JsonDocumentStore):
        self._store = store
        self._lock = asyncio.Lock()

    async def get(self, slug: str) -> Optional[Group]:
        data = self._store.read(f"{GROUP_PREFIX}{slug}")
        return Group.from_dict(data) if data is not None else None

    async def put(self, group: Group) -> Group:
        key = f"{GROUP_PREFIX}{group.slug}"
        async with self._lock:
            next_version = check_version(group.slug, self._store.read(key), group)
            data = group.to_dict()
            data["version"] = next_version
            self._store.write(key, data)
            group.version = next_version
        return group

    async def delete(self, slug: str) -> None:
        self._store.delete(f"{GROUP_PREFIX}{slug}")

    async def list(self) -> List[Group]:
        groups = []
        for key in self._store.keys(GROUP_PREFIX):
            data = self._store.read(key)
            if data is not None:
                groups.append(Group.from_dict(data))
        return groups


class JsonFileAutodraftQueueRepository(IAutodraftQueueRepository):
    """Autodraft queue store backed by JSON documents"""

    def __init__(self, store: JsonDocumentStore):
        self._store = store

    @staticmethod
    def _key(group_slug: str, user_name: str) -> str:
        return f"{AUTODRAFT_PREFIX}{group_slug}:{user_name}"

    async def get(self, group_slug: str, user_name: str) -> Optional[AutodraftQueue]:
        data = self._store.read(self._key(group_slug, user_name))
        return AutodraftQueue.from_dict(data) if data is not None else None

    async def put(self, queue: AutodraftQueue) -> AutodraftQueue:
        self._store.write(self._key(queue.group_slug, queue.user_name), queue.to_dict())
        return queue

    async def delete(self, group_slug: str, user_name: str) -> None:
        self._store.delete(self._key(group_slug, user_name))

    async def list_for_group(self, group_slug: str) -> List[AutodraftQueue]:
        queues = []
        for key in self._store.keys(f"{AUTODRAFT_PREFIX}{group_slug}:"):
            data = self._store.read(key)
            if data is not None:
                queues.append(AutodraftQueue.from_dict(data))
        return queues
