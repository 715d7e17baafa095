"""
Data Transfer Objects

Read models handed to callers. They are built from domain entities and
carry plain data only.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..domain.entities.autodraft_queue import AutodraftQueue
from ..domain.entities.contestant import Contestant
from ..domain.entities.group import DraftPick, Group
from ..domain.services.turn_resolver import TurnInfo


@dataclass
class TurnDTO:
    """Current turn for display"""
    round_number: int
    pick_number: int
    user_index: int
    user_name: str
    is_current_user: bool = False

    @classmethod
    def from_domain(cls, turn: TurnInfo, acting_user: Optional[str] = None) -> "TurnDTO":
        return cls(
            round_number=turn.round_number,
            pick_number=turn.pick_number,
            user_index=turn.user_index,
            user_name=turn.user_name,
            is_current_user=acting_user is not None and acting_user == turn.user_name,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "roundNumber": self.round_number,
            "pickNumber": self.pick_number,
            "userIndex": self.user_index,
            "userName": self.user_name,
            "isCurrentUser": self.is_current_user,
        }


@dataclass
class GroupSummaryDTO:
    """Group listing entry"""
    slug: str
    name: str

    @classmethod
    def from_domain(cls, group: Group) -> "GroupSummaryDTO":
        return cls(slug=group.slug, name=group.name)


@dataclass
class DraftBoardDTO:
    """Everything a draft page needs: group, turn, roster and queues"""
    group: Group
    turn: Optional[TurnDTO]
    contestants: List[Contestant]
    undrafted: List[Contestant]
    picks_by_user: Dict[str, List[DraftPick]]
    autodraft_queues: Dict[str, AutodraftQueue] = field(default_factory=dict)

    @property
    def undrafted_ids(self) -> List[int]:
        return [c.id for c in self.undrafted]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "group": self.group.to_dict(),
            "turn": self.turn.to_dict() if self.turn else None,
            "contestants": [c.to_dict() for c in self.contestants],
            "undraftedContestants": [c.to_dict() for c in self.undrafted],
            "picksByUser": {
                name: [p.to_dict() for p in picks] for name, picks in self.picks_by_user.items()
            },
            "autodraftQueues": {
                name: q.to_dict() for name, q in self.autodraft_queues.items()
            },
        }


@dataclass
class AutodraftResult:
    """Picks committed by an autodraft run"""
    picks: List[DraftPick] = field(default_factory=list)
    waiting_on: Optional[str] = None  # user who must pick manually next

    @property
    def pick_count(self) -> int:
        return len(self.picks)
