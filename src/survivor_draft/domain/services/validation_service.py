"""
Validation Service - Domain Service

Group creation rules and slug generation.
"""

import random
import re
import string
from typing import List, Optional

from ..entities.group import Group, User, now_millis
from ..exceptions import DuplicateUserError, InvalidGroupError

SLUG_SUFFIX_LENGTH = 4
_BASE36 = string.digits + string.ascii_lowercase


def generate_base_slug(text: str) -> str:
    """URL-friendly slug without a random suffix"""
    slug = text.lower()
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"[^\w\-]+", "", slug)
    slug = re.sub(r"\-\-+", "-", slug)
    return slug.strip("-")


def random_slug_suffix(rng: Optional[random.Random] = None) -> str:
    rng = rng or random
    return "".join(rng.choice(_BASE36) for _ in range(SLUG_SUFFIX_LENGTH))


class ValidationService:
    """Group creation validation"""

    def validate_group_creation(
        self,
        group_name: Optional[str],
        creator_name: Optional[str],
        member_names: Optional[List[str]] = None,
    ) -> List[str]:
        """Return the cleaned member list, creator first"""
        if not group_name or not group_name.strip():
            raise InvalidGroupError("Group name is required")
        if not creator_name or not creator_name.strip():
            raise InvalidGroupError("Your name is required")
        if not generate_base_slug(group_name):
            raise InvalidGroupError("Group name must contain letters or digits")

        names = [creator_name.strip()]
        names.extend(n.strip() for n in (member_names or []) if n and n.strip())

        if len({n.lower() for n in names}) != len(names):
            raise DuplicateUserError("Each member must have a unique name")
        return names

    def build_group(
        self,
        group_name: str,
        slug: str,
        user_names: List[str],
        season_id: Optional[str] = None,
    ) -> Group:
        now = now_millis()
        return Group(
            name=group_name.strip(),
            slug=slug,
            users=[User(name=name, joined_at=now) for name in user_names],
            draft_rounds=[],
            season_id=season_id,
            created_at=now,
        )

    def validate_group_document(self, group: Group) -> None:
        """Structural checks for an admin-supplied group document"""
        names = [u.name.lower() for u in group.users]
        if len(set(names)) != len(names):
            raise DuplicateUserError(f"Group {group.slug} has duplicate user names")

        for expected, draft_round in enumerate(group.draft_rounds, start=1):
            if draft_round.round_number != expected:
                raise InvalidGroupError(
                    f"Round numbers must be sequential from 1, found {draft_round.round_number} at position {expected}"
                )
            if len(draft_round.picks) > len(group.users):
                raise InvalidGroupError(f"Round {expected} has more picks than users")
            if draft_round.complete != (len(draft_round.picks) == len(group.users)):
                raise InvalidGroupError(f"Round {expected} has an inconsistent complete flag")
            for pick in draft_round.picks:
                if not group.has_user(pick.user_name):
                    raise InvalidGroupError(f"Pick by unknown user {pick.user_name}")

        open_rounds = [r for r in group.draft_rounds if not r.complete]
        if len(open_rounds) > 1 or (open_rounds and open_rounds[0] is not group.draft_rounds[-1]):
            raise InvalidGroupError("Only the last round may be incomplete")
