"""
Contestant Entity

Draftable roster entries for a season.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..exceptions import InvalidSelectionError


@dataclass(frozen=True)
class Contestant:
    """A draftable contestant. Immutable for the duration of a draft."""
    id: int
    name: str
    image: str = ""
    eliminated: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "image": self.image,
            "eliminated": self.eliminated,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Contestant":
        try:
            contestant_id = data["id"]
            name = data["name"]
        except (KeyError, TypeError) as e:
            raise InvalidSelectionError(f"Malformed contestant: {data!r}") from e
        if not isinstance(contestant_id, int) or isinstance(contestant_id, bool):
            raise InvalidSelectionError(f"Contestant id must be an integer: {contestant_id!r}")
        return cls(
            id=contestant_id,
            name=str(name),
            image=str(data.get("image", "")),
            eliminated=bool(data.get("eliminated", False)),
        )


@dataclass(frozen=True)
class SeasonInfo:
    """Summary of a season for listings"""
    id: str
    name: str


@dataclass
class Season:
    """A season and its ordered roster"""
    season_number: int
    season_name: str
    contestants: List[Contestant] = field(default_factory=list)

    @property
    def contestant_ids(self) -> List[int]:
        return [c.id for c in self.contestants]

    def get_contestant(self, contestant_id: int):
        for contestant in self.contestants:
            if contestant.id == contestant_id:
                return contestant
        return None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Season":
        try:
            return cls(
                season_number=int(data["seasonNumber"]),
                season_name=str(data["seasonName"]),
                contestants=[Contestant.from_dict(c) for c in data.get("contestants", [])],
            )
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidSelectionError(f"Malformed season data: {e}") from e
