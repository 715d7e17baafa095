"""
Draft Application Service

Main application service that coordinates draft operations.
Acts as the facade for all draft-related use cases: every mutation is a
read-modify-write round trip against the stores, with domain services doing
the actual rule checks in between.
"""

import logging
from typing import Dict, List, Optional

from ..domain.entities.autodraft_queue import AutodraftQueue
from ..domain.entities.contestant import Season, SeasonInfo
from ..domain.entities.group import Group, User, now_millis
from ..domain.exceptions import (
    EmptyQueueLockError,
    InvalidGroupError,
    InvalidSelectionError,
    NotFoundError,
    QueueLockedError,
    UnknownUserError,
)
from ..domain.services import autodraft_service
from ..domain.services.pick_engine import PickEngine
from ..domain.services.round_manager import RoundLifecycleManager
from ..domain.services.turn_resolver import (
    picks_by_user,
    resolve_turn,
    undrafted_contestants,
)
from ..domain.services.validation_service import (
    ValidationService,
    generate_base_slug,
    random_slug_suffix,
)
from .context import RequestContext
from .dto import AutodraftResult, DraftBoardDTO, GroupSummaryDTO, TurnDTO
from .interfaces import IAutodraftQueueRepository, IGroupRepository, IRosterProvider

logger = logging.getLogger(__name__)

MAX_SLUG_ATTEMPTS = 5


class DraftApplicationService:
    """
    Main application service for draft operations.

    Coordinates between domain services and infrastructure adapters.
    Stores are the only source of state; nothing is cached between calls.
    """

    def __init__(
        self,
        group_repository: IGroupRepository,
        queue_repository: IAutodraftQueueRepository,
        roster_provider: IRosterProvider,
        default_season_id: str = "48",
        enforce_turns: bool = True,
        allow_empty_queue_lock: bool = False,
    ):
        self._group_repository = group_repository
        self._queue_repository = queue_repository
        self._roster_provider = roster_provider
        self._default_season_id = default_season_id
        self._allow_empty_queue_lock = allow_empty_queue_lock

        # Domain services
        self._pick_engine = PickEngine(enforce_turns=enforce_turns)
        self._round_manager = RoundLifecycleManager()
        self._validation_service = ValidationService()

    # ====================
    # Groups
    # ====================

    async def create_group(
        self,
        group_name: str,
        creator_name: str,
        member_names: Optional[List[str]] = None,
        season_id: Optional[str] = None,
    ) -> Group:
        """Create a group; the creator drafts first"""
        user_names = self._validation_service.validate_group_creation(
            group_name, creator_name, member_names
        )
        season_id = season_id or self._default_season_id
        if await self._roster_provider.get_season(season_id) is None:
            raise NotFoundError(f"Season {season_id} not found")

        slug = await self._generate_slug(group_name)
        group = self._validation_service.build_group(group_name, slug, user_names, season_id)
        group = await self._group_repository.put(group)

        logger.info(f"Created group {slug} with {len(user_names)} users for season {season_id}")
        return group

    async def _generate_slug(self, group_name: str) -> str:
        """Base slug, or base slug plus a random suffix when taken"""
        base_slug = generate_base_slug(group_name)
        if not await self._group_repository.exists(base_slug):
            return base_slug

        for _ in range(MAX_SLUG_ATTEMPTS):
            slug = f"{base_slug}-{random_slug_suffix()}"
            if not await self._group_repository.exists(slug):
                return slug
        raise InvalidGroupError(f"Could not find a free slug for {group_name}")

    async def get_group(self, slug: str) -> Group:
        group = await self._group_repository.get(slug)
        if group is None:
            raise NotFoundError(f"Group {slug} not found")
        return group

    async def list_groups(self) -> List[GroupSummaryDTO]:
        groups = await self._group_repository.list()
        return [GroupSummaryDTO.from_domain(g) for g in groups]

    async def replace_group(self, slug: str, document: Dict) -> Group:
        """Admin overwrite of a whole group document; the slug is fixed"""
        existing = await self.get_group(slug)
        group = Group.from_dict(document)
        if group.slug != slug:
            raise InvalidGroupError("Cannot change the group slug")
        self._validation_service.validate_group_document(group)

        group.version = existing.version
        group = await self._group_repository.put(group)
        logger.info(f"Replaced group document {slug}")
        return group

    async def delete_group(self, slug: str) -> None:
        await self.get_group(slug)
        for queue in await self._queue_repository.list_for_group(slug):
            await self._queue_repository.delete(slug, queue.user_name)
        await self._group_repository.delete(slug)
        logger.info(f"Deleted group {slug}")

    async def identify_user(self, slug: str, user_name: str) -> User:
        """Find a member by name, ignoring case"""
        group = await self.get_group(slug)
        user = group.find_user(user_name or "")
        if user is None:
            raise UnknownUserError(f"{user_name} is not a member of {slug}")
        return user

    # ====================
    # Draft
    # ====================

    async def get_turn(self, slug: str, acting_user: Optional[str] = None) -> Optional[TurnDTO]:
        group = await self.get_group(slug)
        turn = resolve_turn(group)
        return TurnDTO.from_domain(turn, acting_user) if turn else None

    async def create_round(self, slug: str) -> Group:
        group = await self.get_group(slug)
        self._round_manager.create_round(group)
        group = await self._group_repository.put(group)

        logger.info(f"Created round {len(group.draft_rounds)} for {slug}")
        return group

    async def make_pick(self, context: RequestContext) -> Group:
        """Commit the acting user's selected contestant"""
        if not context.acting_user:
            raise UnknownUserError("No acting user in request")
        if context.selected_contestant_id is None:
            raise InvalidSelectionError("No contestant selected")

        group = await self.get_group(context.group_slug)
        season = await self._load_season(group)
        self._pick_engine.make_pick(
            group,
            context.acting_user,
            context.selected_contestant_id,
            roster_ids=season.contestant_ids,
        )
        group = await self._group_repository.put(group)

        logger.info(
            f"{context.group_slug}: {context.acting_user} picked contestant "
            f"{context.selected_contestant_id}"
        )
        return group

    async def get_draft_board(self, slug: str, acting_user: Optional[str] = None) -> DraftBoardDTO:
        group = await self.get_group(slug)
        season = await self._load_season(group)
        turn = resolve_turn(group)
        queues = await self._queue_repository.list_for_group(slug)

        return DraftBoardDTO(
            group=group,
            turn=TurnDTO.from_domain(turn, acting_user) if turn else None,
            contestants=list(season.contestants),
            undrafted=undrafted_contestants(group, season.contestants),
            picks_by_user=picks_by_user(group),
            autodraft_queues={q.user_name: q for q in queues},
        )

    async def run_autodraft(self, slug: str) -> AutodraftResult:
        """
        Commit picks for on-turn users whose locked queue still has an
        undrafted preference. Stops at the first user who has to pick
        manually or when the round completes.
        """
        result = AutodraftResult()
        group = await self.get_group(slug)
        season = await self._load_season(group)

        for _ in range(len(group.users)):
            turn = resolve_turn(group)
            if turn is None:
                break

            queue = await self._queue_repository.get(slug, turn.user_name)
            undrafted_ids = [c.id for c in undrafted_contestants(group, season.contestants)]
            choice = (
                autodraft_service.resolve_autodraft(queue, undrafted_ids)
                if queue is not None else None
            )
            if choice is None:
                result.waiting_on = turn.user_name
                break

            self._pick_engine.make_pick(
                group, turn.user_name, choice, roster_ids=season.contestant_ids
            )
            group = await self._group_repository.put(group)
            result.picks.append(turn.round.picks[-1])
            logger.info(f"{slug}: autodrafted contestant {choice} for {turn.user_name}")

        return result

    # ====================
    # Autodraft queues
    # ====================

    async def get_autodraft_queue(self, context: RequestContext) -> AutodraftQueue:
        group = await self.get_group(context.group_slug)
        user_name = self._require_member(group, context.acting_user)
        queue = await self._queue_repository.get(group.slug, user_name)
        return queue or AutodraftQueue.empty(group.slug, user_name)

    async def save_autodraft_queue(
        self,
        context: RequestContext,
        contestant_ids,
        locked: bool,
    ) -> AutodraftQueue:
        """Whole-queue overwrite; contents of a locked queue cannot change"""
        contestant_ids = autodraft_service.validate_queue_payload(contestant_ids)
        group = await self.get_group(context.group_slug)
        season = await self._load_season(group)
        unknown = [i for i in contestant_ids if season.get_contestant(i) is None]
        if unknown:
            raise InvalidSelectionError(f"Contestants {unknown} are not on the roster")

        queue = await self.get_autodraft_queue(context)

        if queue.locked and contestant_ids != queue.contestant_ids:
            logger.warning(f"Rejected change to locked queue of {queue.user_name} in {queue.group_slug}")
            raise QueueLockedError(f"Autodraft queue of {queue.user_name} is locked")
        if locked and not contestant_ids and not self._allow_empty_queue_lock:
            raise EmptyQueueLockError(f"Queue of {queue.user_name} has no selections to lock")

        queue.contestant_ids = contestant_ids
        queue.locked = bool(locked)
        queue.updated_at = now_millis()
        return await self._queue_repository.put(queue)

    async def toggle_autodraft_selection(
        self, context: RequestContext, contestant_id: Optional[int] = None
    ) -> AutodraftQueue:
        if contestant_id is None:
            contestant_id = context.selected_contestant_id
        if not isinstance(contestant_id, int) or isinstance(contestant_id, bool):
            raise InvalidSelectionError(f"Invalid contestant id: {contestant_id!r}")

        group = await self.get_group(context.group_slug)
        season = await self._load_season(group)
        if season.get_contestant(contestant_id) is None:
            raise InvalidSelectionError(f"Contestant {contestant_id} is not on the roster")

        queue = await self.get_autodraft_queue(context)
        if queue.locked:
            return queue
        autodraft_service.toggle_selection(queue, contestant_id)
        return await self._queue_repository.put(queue)

    async def clear_autodraft_queue(self, context: RequestContext) -> AutodraftQueue:
        queue = await self.get_autodraft_queue(context)
        if queue.locked:
            return queue
        autodraft_service.clear(queue)
        return await self._queue_repository.put(queue)

    async def toggle_autodraft_lock(self, context: RequestContext) -> AutodraftQueue:
        queue = await self.get_autodraft_queue(context)
        autodraft_service.toggle_lock(queue, allow_empty=self._allow_empty_queue_lock)
        queue = await self._queue_repository.put(queue)

        logger.info(
            f"{queue.group_slug}: {queue.user_name} {'locked' if queue.locked else 'unlocked'} autodraft queue"
        )
        return queue

    # ====================
    # Seasons
    # ====================

    async def list_seasons(self) -> List[SeasonInfo]:
        return await self._roster_provider.get_all_seasons()

    async def get_season(self, season_id: str) -> Season:
        season = await self._roster_provider.get_season(season_id)
        if season is None:
            raise NotFoundError(f"Season {season_id} not found")
        return season

    async def _load_season(self, group: Group) -> Season:
        return await self.get_season(group.season_id or self._default_season_id)

    @staticmethod
    def _require_member(group: Group, user_name: Optional[str]) -> str:
        if not user_name or not group.has_user(user_name):
            raise UnknownUserError(f"{user_name} is not a member of {group.slug}")
        return user_name
