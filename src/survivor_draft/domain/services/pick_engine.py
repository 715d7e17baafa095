"""
Pick Engine - Domain Service

Validates a manual pick and applies it to the open round.
"""

import logging
from typing import Iterable, Optional

from ..entities.group import DraftPick, Group
from ..exceptions import (
    AlreadyDraftedError,
    InvalidSelectionError,
    NoActiveRoundError,
    NotYourTurnError,
    UnknownUserError,
)
from .turn_resolver import drafted_contestant_ids, resolve_turn

logger = logging.getLogger(__name__)


class PickEngine:
    """
    Applies picks to a group.

    With ``enforce_turns`` off the engine trusts the caller about turn order
    and contestant availability. User membership and the open round are
    always checked.
    """

    def __init__(self, enforce_turns: bool = True):
        self.enforce_turns = enforce_turns

    def make_pick(
        self,
        group: Group,
        user_name: str,
        contestant_id: int,
        roster_ids: Optional[Iterable[int]] = None,
    ) -> Group:
        """Append a pick to the open round and close the round when full"""
        turn = resolve_turn(group)
        if turn is None:
            raise NoActiveRoundError(f"Group {group.slug} has no open round")

        if not group.has_user(user_name):
            raise UnknownUserError(f"{user_name} is not a member of {group.slug}")

        if not isinstance(contestant_id, int) or isinstance(contestant_id, bool):
            raise InvalidSelectionError(f"Contestant id must be an integer: {contestant_id!r}")
        if roster_ids is not None and contestant_id not in set(roster_ids):
            raise InvalidSelectionError(f"Contestant {contestant_id} is not on the roster")

        if self.enforce_turns:
            if turn.user_name != user_name:
                raise NotYourTurnError(
                    f"It is {turn.user_name}'s turn, not {user_name}'s"
                )
            if contestant_id in drafted_contestant_ids(group):
                raise AlreadyDraftedError(f"Contestant {contestant_id} has already been drafted")

        current = turn.round
        current.picks.append(
            DraftPick(
                user_name=user_name,
                contestant_id=contestant_id,
                pick_number=len(current.picks) + 1,
            )
        )
        current.complete = len(current.picks) == len(group.users)

        logger.debug(
            f"{group.slug}: round {current.round_number} pick {len(current.picks)} "
            f"{user_name} -> {contestant_id} (complete={current.complete})"
        )
        return group
