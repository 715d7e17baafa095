"""
Turn Resolver - Domain Service

Works out whose turn it is from the stored rounds alone. The draft uses a
rotating order: every round starts one position later than the previous
one, wrapping around the user list (not a snake draft).
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Set

from ..entities.contestant import Contestant
from ..entities.group import DraftPick, DraftRound, Group
from ..exceptions import InconsistentGroupStateError


@dataclass(frozen=True)
class TurnInfo:
    """The pick that is currently on the clock"""
    round: DraftRound
    user_index: int
    user_name: str

    @property
    def round_number(self) -> int:
        return self.round.round_number

    @property
    def pick_number(self) -> int:
        return len(self.round.picks) + 1


def rotation_user_index(round_number: int, picks_made: int, total_users: int) -> int:
    """User index for the next pick of a round"""
    rotation_offset = (round_number - 1) % total_users
    position_in_round = picks_made + 1
    return (rotation_offset + position_in_round - 1) % total_users


def find_current_round(group: Group) -> Optional[DraftRound]:
    """
    Return the open round, or None when every round is complete.

    Raises:
        InconsistentGroupStateError: more than one round is open, or the
            open round is not the last one
    """
    open_rounds = [r for r in group.draft_rounds if not r.complete]
    if not open_rounds:
        return None
    if len(open_rounds) > 1:
        numbers = ", ".join(str(r.round_number) for r in open_rounds)
        raise InconsistentGroupStateError(
            f"Group {group.slug} has several incomplete rounds: {numbers}"
        )
    current = open_rounds[0]
    if current is not group.draft_rounds[-1]:
        raise InconsistentGroupStateError(
            f"Group {group.slug} has completed rounds after open round {current.round_number}"
        )
    return current


def resolve_turn(group: Group) -> Optional[TurnInfo]:
    """Resolve the current turn, or None if no round is open"""
    current = find_current_round(group)
    if current is None:
        return None

    total_users = len(group.users)
    if total_users == 0:
        raise InconsistentGroupStateError(
            f"Group {group.slug} has an open round but no users"
        )

    user_index = rotation_user_index(current.round_number, len(current.picks), total_users)
    return TurnInfo(
        round=current,
        user_index=user_index,
        user_name=group.users[user_index].name,
    )


def draft_order(group: Group, round_number: int) -> List[str]:
    """Full pick order of a round"""
    total_users = len(group.users)
    return [
        group.users[rotation_user_index(round_number, picks_made, total_users)].name
        for picks_made in range(total_users)
    ]


def drafted_contestant_ids(group: Group) -> Set[int]:
    return {pick.contestant_id for r in group.draft_rounds for pick in r.picks}


def undrafted_contestants(group: Group, contestants: Iterable[Contestant]) -> List[Contestant]:
    """Roster entries nobody has picked yet, in roster order"""
    drafted = drafted_contestant_ids(group)
    return [c for c in contestants if c.id not in drafted]


def picks_by_user(group: Group) -> Dict[str, List[DraftPick]]:
    """Every user's picks in draft order; users without picks map to []"""
    result: Dict[str, List[DraftPick]] = {name: [] for name in group.user_names}
    for draft_round in group.draft_rounds:
        for pick in draft_round.picks:
            result.setdefault(pick.user_name, []).append(pick)
    return result
