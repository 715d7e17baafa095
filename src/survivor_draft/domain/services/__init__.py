"""
Domain Services

Pure business logic operating on domain entities.
"""

from .turn_resolver import TurnInfo, resolve_turn
from .pick_engine import PickEngine
from .round_manager import RoundLifecycleManager
from .validation_service import ValidationService
from . import autodraft_service

__all__ = [
    "TurnInfo",
    "resolve_turn",
    "PickEngine",
    "RoundLifecycleManager",
    "ValidationService",
    "autodraft_service",
]
