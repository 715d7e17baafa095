import pytest
from typing import List, Optional, Sequence

from survivor_draft.application.draft_service import DraftApplicationService
from survivor_draft.domain.entities import DraftRound, Group, User
from survivor_draft.infrastructure.roster_adapter import StaticRosterProvider
from survivor_draft.infrastructure.storage_adapter import (
    MemoryAutodraftQueueRepository,
    MemoryGroupRepository,
)


@pytest.fixture
def group_factory():
    """Build an unsaved group with the given users and rounds"""
    def _make(
        names: Sequence[str] = ("Alice", "Bob"),
        slug: str = "test-group",
        rounds: Optional[List[DraftRound]] = None,
    ) -> Group:
        return Group(
            name="Test Group",
            slug=slug,
            users=[User(name=n, joined_at=1) for n in names],
            draft_rounds=rounds or [],
            season_id="48",
            created_at=1,
        )
    return _make


@pytest.fixture
def group_repository() -> MemoryGroupRepository:
    return MemoryGroupRepository()


@pytest.fixture
def queue_repository() -> MemoryAutodraftQueueRepository:
    return MemoryAutodraftQueueRepository()


@pytest.fixture
def roster_provider() -> StaticRosterProvider:
    return StaticRosterProvider()


@pytest.fixture
def service(group_repository, queue_repository, roster_provider) -> DraftApplicationService:
    return DraftApplicationService(
        group_repository=group_repository,
        queue_repository=queue_repository,
        roster_provider=roster_provider,
    )
