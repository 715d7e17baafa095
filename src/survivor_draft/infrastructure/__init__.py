"""
Infrastructure Layer

Adapters for stores, roster sources and configuration.
"""

from .container import DraftContainer, initialize_container
from .draft_config_adapter import DraftConfiguration
from .json_store_adapter import JsonFileAutodraftQueueRepository, JsonFileGroupRepository
from .roster_adapter import HttpRosterProvider, StaticRosterProvider
from .storage_adapter import MemoryAutodraftQueueRepository, MemoryGroupRepository

__all__ = [
    "DraftContainer",
    "DraftConfiguration",
    "initialize_container",
    "JsonFileAutodraftQueueRepository",
    "JsonFileGroupRepository",
    "HttpRosterProvider",
    "StaticRosterProvider",
    "MemoryAutodraftQueueRepository",
    "MemoryGroupRepository",
]
