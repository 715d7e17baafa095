"""
Application Layer

Coordinates between domain and infrastructure layers.
Contains use cases, application services, and ports (interfaces).
"""

from .context import RequestContext
from .draft_service import DraftApplicationService
from .dto import AutodraftResult, DraftBoardDTO, GroupSummaryDTO, TurnDTO

__all__ = [
    "DraftApplicationService",
    "RequestContext",
    "AutodraftResult",
    "DraftBoardDTO",
    "GroupSummaryDTO",
    "TurnDTO",
]
