"""
Dependency Injection Configuration

Central container that wires up all dependencies for the draft system.
"""

from typing import Any, Dict, Optional

from ..application.draft_service import DraftApplicationService
from ..application.interfaces import (
    IAutodraftQueueRepository,
    IGroupRepository,
    IRosterProvider,
)
from .draft_config_adapter import DraftConfiguration
from .json_store_adapter import (
    JsonDocumentStore,
    JsonFileAutodraftQueueRepository,
    JsonFileGroupRepository,
)
from .roster_adapter import HttpRosterProvider, StaticRosterProvider
from .storage_adapter import MemoryAutodraftQueueRepository, MemoryGroupRepository


class DraftContainer:
    """
    Dependency injection container for the draft system.

    Centralizes all dependency wiring and provides factory methods
    for creating properly configured services.
    """

    def __init__(self, config: Optional[DraftConfiguration] = None):
        """
        Initialize container.

        Args:
            config: Draft configuration (defaults to the environment)
        """
        self.config = config or DraftConfiguration.from_env()
        self._services: Dict[str, Any] = {}
        self._setup_dependencies()

    def _setup_dependencies(self):
        """Setup all service dependencies"""
        if self.config.storage == "memory":
            self._services['group_repository'] = MemoryGroupRepository()
            self._services['queue_repository'] = MemoryAutodraftQueueRepository()
        else:
            store = JsonDocumentStore(self.config.data_dir)
            self._services['group_repository'] = JsonFileGroupRepository(store)
            self._services['queue_repository'] = JsonFileAutodraftQueueRepository(store)

        if self.config.roster_url:
            self._services['roster_provider'] = HttpRosterProvider(self.config.roster_url)
        else:
            self._services['roster_provider'] = StaticRosterProvider()

    def get_draft_service(self) -> DraftApplicationService:
        """Get configured draft application service"""
        if 'draft_service' not in self._services:
            self._services['draft_service'] = DraftApplicationService(
                group_repository=self.get_group_repository(),
                queue_repository=self.get_queue_repository(),
                roster_provider=self.get_roster_provider(),
                default_season_id=self.config.default_season_id,
                enforce_turns=self.config.enforce_turns,
                allow_empty_queue_lock=self.config.allow_empty_queue_lock,
            )
        return self._services['draft_service']

    def get_group_repository(self) -> IGroupRepository:
        """Get group repository"""
        return self._services['group_repository']

    def get_queue_repository(self) -> IAutodraftQueueRepository:
        """Get autodraft queue repository"""
        return self._services['queue_repository']

    def get_roster_provider(self) -> IRosterProvider:
        """Get roster provider"""
        return self._services['roster_provider']

    async def cleanup(self) -> None:
        """Cleanup resources"""
        roster = self._services.get('roster_provider')
        if isinstance(roster, HttpRosterProvider):
            await roster.close()

        repo = self._services.get('group_repository')
        if hasattr(repo, 'clear_all'):
            repo.clear_all()

        # Clear service cache
        self._services.clear()


# Global container instance
_container: Optional[DraftContainer] = None


def get_container() -> DraftContainer:
    """Get global container instance"""
    global _container
    if _container is None:
        _container = DraftContainer()
    return _container


def initialize_container(config: Optional[DraftConfiguration] = None) -> DraftContainer:
    """Initialize global container with configuration"""
    global _container
    _container = DraftContainer(config)
    return _container


async def cleanup_container() -> None:
    """Cleanup global container"""
    global _container
    if _container:
        await _container.cleanup()
        _container = None
