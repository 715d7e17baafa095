"""
Autodraft Queue Entity

A user's priority-ordered fallback selections for one group.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..exceptions import InvalidSelectionError
from .group import now_millis

MAX_QUEUE_SIZE = 4


@dataclass
class AutodraftQueue:
    """Autodraft preferences of one user in one group"""
    group_slug: str
    user_name: str
    contestant_ids: List[int] = field(default_factory=list)
    locked: bool = False
    updated_at: int = field(default_factory=now_millis)

    @classmethod
    def empty(cls, group_slug: str, user_name: str) -> "AutodraftQueue":
        """Lazily created default queue"""
        return cls(group_slug=group_slug, user_name=user_name)

    @property
    def is_full(self) -> bool:
        return len(self.contestant_ids) >= MAX_QUEUE_SIZE

    def position_of(self, contestant_id: int) -> int:
        """1-based queue position, 0 if not queued"""
        try:
            return self.contestant_ids.index(contestant_id) + 1
        except ValueError:
            return 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "groupSlug": self.group_slug,
            "userName": self.user_name,
            "contestantIds": list(self.contestant_ids),
            "locked": self.locked,
            "updatedAt": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AutodraftQueue":
        try:
            ids = data.get("contestantIds") or []
            return cls(
                group_slug=str(data["groupSlug"]),
                user_name=str(data["userName"]),
                contestant_ids=[int(i) for i in ids],
                locked=bool(data.get("locked", False)),
                updated_at=int(data.get("updatedAt") or 0),
            )
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise InvalidSelectionError(f"Malformed autodraft queue: {e}") from e
