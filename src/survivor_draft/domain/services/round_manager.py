"""
Round Lifecycle Manager - Domain Service

Opens new draft rounds once the previous one is complete.
"""

from ..entities.group import DraftRound, Group
from ..exceptions import NoUsersError, RoundAlreadyActiveError
from .turn_resolver import find_current_round


class RoundLifecycleManager:
    """Creates rounds, one open round at a time"""

    def create_round(self, group: Group) -> Group:
        if not group.users:
            raise NoUsersError(f"Group {group.slug} has no users to draft")

        current = find_current_round(group)
        if current is not None:
            raise RoundAlreadyActiveError(
                f"Round {current.round_number} of {group.slug} is still open"
            )

        group.draft_rounds.append(
            DraftRound(round_number=len(group.draft_rounds) + 1, picks=[], complete=False)
        )
        return group

    def can_create_round(self, group: Group) -> bool:
        return bool(group.users) and all(r.complete for r in group.draft_rounds)
