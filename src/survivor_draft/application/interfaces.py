"""
Application Layer Interfaces (Ports)

Defines contracts between the application layer and infrastructure adapters.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..domain.entities.autodraft_queue import AutodraftQueue
from ..domain.entities.contestant import Season, SeasonInfo
from ..domain.entities.group import Group


# Repository Interfaces
class IGroupRepository(ABC):
    """Whole-document group store keyed by slug"""

    @abstractmethod
    async def get(self, slug: str) -> Optional[Group]:
        """Get group by slug"""
        pass

    @abstractmethod
    async def put(self, group: Group) -> Group:
        """
        Store a group if ``group.version`` matches the stored version
        (0 for a group that was never stored), then bump the version.

        Raises:
            ConflictRetryError: the stored group changed since it was read
        """
        pass

    @abstractmethod
    async def delete(self, slug: str) -> None:
        """Delete a group"""
        pass

    @abstractmethod
    async def list(self) -> List[Group]:
        """Get all groups"""
        pass

    async def exists(self, slug: str) -> bool:
        """Check if a group with the slug exists"""
        return await self.get(slug) is not None


class IAutodraftQueueRepository(ABC):
    """Autodraft queues keyed by (group slug, user name)"""

    @abstractmethod
    async def get(self, group_slug: str, user_name: str) -> Optional[AutodraftQueue]:
        pass

    @abstractmethod
    async def put(self, queue: AutodraftQueue) -> AutodraftQueue:
        pass

    @abstractmethod
    async def delete(self, group_slug: str, user_name: str) -> None:
        pass

    @abstractmethod
    async def list_for_group(self, group_slug: str) -> List[AutodraftQueue]:
        pass


# External Service Interfaces
class IRosterProvider(ABC):
    """Source of season rosters"""

    @abstractmethod
    async def get_season(self, season_id: str) -> Optional[Season]:
        """Season data, or None if the season is unknown"""
        pass

    @abstractmethod
    async def get_all_seasons(self) -> List[SeasonInfo]:
        """All seasons that can be drafted"""
        pass
