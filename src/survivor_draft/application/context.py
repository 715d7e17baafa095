"""
Request Context

Explicit per-request state: the group being acted on, the acting user and
the contestant they have selected. Passed into every acting-user operation
instead of living in client-side storage.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RequestContext:
    group_slug: str
    acting_user: Optional[str] = None
    selected_contestant_id: Optional[int] = None

    def with_selection(self, contestant_id: Optional[int]) -> "RequestContext":
        return RequestContext(self.group_slug, self.acting_user, contestant_id)
