"""
Domain Layer - Pure Business Logic

Contains entities, domain services, and business rules.
No I/O happens in this layer.
"""

from .entities import AutodraftQueue, Contestant, DraftPick, DraftRound, Group, Season, User
from .exceptions import DraftError, NotFoundError, StorageUnavailableError

__all__ = [
    "AutodraftQueue",
    "Contestant",
    "DraftPick",
    "DraftRound",
    "Group",
    "Season",
    "User",
    "DraftError",
    "NotFoundError",
    "StorageUnavailableError",
]
