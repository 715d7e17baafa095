"""
Domain Entities

Core business objects of the draft: roster, group, rounds, picks, queues.
"""

from .contestant import Contestant, Season, SeasonInfo
from .group import DraftPick, DraftRound, Group, User, now_millis
from .autodraft_queue import AutodraftQueue, MAX_QUEUE_SIZE

__all__ = [
    "Contestant",
    "Season",
    "SeasonInfo",
    "User",
    "DraftPick",
    "DraftRound",
    "Group",
    "AutodraftQueue",
    "MAX_QUEUE_SIZE",
    "now_millis",
]
