"""
Storage Adapter

In-memory implementations of the group and autodraft queue stores.
Documents are kept in their serialized form so that callers never share
objects with the store, the same as a key-value blob store behaves.
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional, Tuple

from ..application.interfaces import IAutodraftQueueRepository, IGroupRepository
from ..domain.entities.autodraft_queue import AutodraftQueue
from ..domain.entities.group import Group
from ..domain.exceptions import ConflictRetryError

logger = logging.getLogger(__name__)


def check_version(slug: str, stored: Optional[Dict[str, Any]], group: Group) -> int:
    """Compare-and-set check shared by group stores; returns the next version"""
    stored_version = int(stored.get("version") or 0) if stored else 0
    if group.version != stored_version:
        logger.warning(
            f"Version conflict on group {slug}: expected {group.version}, stored {stored_version}"
        )
        raise ConflictRetryError(
            f"Group {slug} was modified concurrently (version {stored_version}), re-read and retry"
        )
    return stored_version + 1


class MemoryGroupRepository(IGroupRepository):
    """In-memory group store keyed by slug"""

    def __init__(self):
        self._groups: Dict[str, Dict[str, Any]] = {}  # slug -> document
        self._lock = asyncio.Lock()

    async def get(self, slug: str) -> Optional[Group]:
        data = self._groups.get(slug)
        return Group.from_dict(data) if data is not None else None

    async def put(self, group: Group) -> Group:
        async with self._lock:
            next_version = check_version(group.slug, self._groups.get(group.slug), group)
            group.version = next_version
            self._groups[group.slug] = group.to_dict()
        return group

    async def delete(self, slug: str) -> None:
        self._groups.pop(slug, None)

    async def list(self) -> List[Group]:
        return [Group.from_dict(data) for data in self._groups.values()]

    async def exists(self, slug: str) -> bool:
        return slug in self._groups

    def clear_all(self) -> None:
        """Clear all groups (for testing/cleanup)"""
        self._groups.clear()


class MemoryAutodraftQueueRepository(IAutodraftQueueRepository):
    """In-memory autodraft queue store keyed by (group slug, user name)"""

    def __init__(self):
        self._queues: Dict[Tuple[str, str], Dict[str, Any]] = {}

    async def get(self, group_slug: str, user_name: str) -> Optional[AutodraftQueue]:
        data = self._queues.get((group_slug, user_name))
        return AutodraftQueue.from_dict(data) if data is not None else None

    async def put(self, queue: AutodraftQueue) -> AutodraftQueue:
        self._queues[(queue.group_slug, queue.user_name)] = queue.to_dict()
        return queue

    async def delete(self, group_slug: str, user_name: str) -> None:
        self._queues.pop((group_slug, user_name), None)

    async def list_for_group(self, group_slug: str) -> List[AutodraftQueue]:
        return [
            AutodraftQueue.from_dict(data)
            for (slug, _), data in self._queues.items()
            if slug == group_slug
        ]
