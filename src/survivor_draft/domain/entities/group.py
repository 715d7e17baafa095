"""
Group Entity - Aggregate Root

A group of users running one shared draft, with its rounds and picks.
Serializes to the whole-document camelCase shape kept in the group store.
"""

import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..exceptions import InvalidGroupError


def now_millis() -> int:
    """Current time as epoch milliseconds"""
    return int(time.time() * 1000)


@dataclass
class User:
    """A group member. Identity is the name."""
    name: str
    joined_at: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"name": self.name}
        if self.joined_at is not None:
            data["joinedAt"] = self.joined_at
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        if not isinstance(data, dict) or not isinstance(data.get("name"), str):
            raise InvalidGroupError(f"Malformed user: {data!r}")
        joined_at = data.get("joinedAt")
        if joined_at is not None and (not isinstance(joined_at, int) or isinstance(joined_at, bool)):
            raise InvalidGroupError(f"joinedAt must be epoch milliseconds: {joined_at!r}")
        return cls(name=data["name"], joined_at=joined_at)


@dataclass
class DraftPick:
    """A single claim of one contestant by one user"""
    user_name: str
    contestant_id: int
    pick_number: int  # 1-based position within the round

    def to_dict(self) -> Dict[str, Any]:
        return {
            "userName": self.user_name,
            "contestantId": self.contestant_id,
            "pickNumber": self.pick_number,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DraftPick":
        try:
            return cls(
                user_name=str(data["userName"]),
                contestant_id=int(data["contestantId"]),
                pick_number=int(data["pickNumber"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidGroupError(f"Malformed draft pick: {data!r}") from e


@dataclass
class DraftRound:
    """One full cycle of picks, one per user"""
    round_number: int
    picks: List[DraftPick] = field(default_factory=list)
    complete: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "roundNumber": self.round_number,
            "picks": [p.to_dict() for p in self.picks],
            "complete": self.complete,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DraftRound":
        if not isinstance(data, dict):
            raise InvalidGroupError(f"Malformed draft round: {data!r}")
        complete = data.get("complete", False)
        if not isinstance(complete, bool):
            raise InvalidGroupError(f"Round complete flag must be a boolean: {complete!r}")
        try:
            return cls(
                round_number=int(data["roundNumber"]),
                picks=[DraftPick.from_dict(p) for p in data.get("picks", [])],
                complete=complete,
            )
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidGroupError(f"Malformed draft round: {data!r}") from e


@dataclass
class Group:
    """
    Group aggregate root.

    ``users`` order is the draft position and is fixed at creation.
    ``version`` is the optimistic concurrency token maintained by the store.
    """
    name: str
    slug: str
    users: List[User] = field(default_factory=list)
    draft_rounds: List[DraftRound] = field(default_factory=list)
    season_id: Optional[str] = None
    created_at: int = field(default_factory=now_millis)
    version: int = 0

    @property
    def user_names(self) -> List[str]:
        return [u.name for u in self.users]

    @property
    def current_round(self) -> Optional[DraftRound]:
        """First incomplete round, if any"""
        for draft_round in self.draft_rounds:
            if not draft_round.complete:
                return draft_round
        return None

    def has_user(self, user_name: str) -> bool:
        """Exact (case-sensitive) membership check"""
        return user_name in self.user_names

    def find_user(self, user_name: str) -> Optional[User]:
        """Case-insensitive lookup used to identify the acting user"""
        wanted = user_name.strip().lower()
        for user in self.users:
            if user.name.lower() == wanted:
                return user
        return None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "name": self.name,
            "slug": self.slug,
            "users": [u.to_dict() for u in self.users],
            "createdAt": self.created_at,
            "draftRounds": [r.to_dict() for r in self.draft_rounds],
            "version": self.version,
        }
        if self.season_id is not None:
            data["seasonId"] = self.season_id
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Group":
        if not isinstance(data, dict):
            raise InvalidGroupError("Group document must be an object")
        try:
            name = data["name"]
            slug = data["slug"]
        except KeyError as e:
            raise InvalidGroupError(f"Group document is missing {e}") from e
        if not isinstance(name, str) or not isinstance(slug, str) or not slug:
            raise InvalidGroupError("Group name and slug must be strings")

        users = data.get("users") or []
        rounds = data.get("draftRounds") or []
        if not isinstance(users, list) or not isinstance(rounds, list):
            raise InvalidGroupError("users and draftRounds must be lists")

        try:
            created_at = int(data.get("createdAt") or 0)
            version = int(data.get("version") or 0)
        except (TypeError, ValueError) as e:
            raise InvalidGroupError(f"createdAt and version must be integers: {e}") from e

        season_id = data.get("seasonId")
        return cls(
            name=name,
            slug=slug,
            users=[User.from_dict(u) for u in users],
            draft_rounds=[DraftRound.from_dict(r) for r in rounds],
            season_id=str(season_id) if season_id is not None else None,
            created_at=created_at,
            version=version,
        )
