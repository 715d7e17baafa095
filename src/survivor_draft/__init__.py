"""
Survivor Draft - Hexagonal Architecture Implementation

Turn-based fantasy draft engine: rotating turn order, pick validation,
round lifecycle and autodraft queues, behind store and roster ports.
"""

from .application.context import RequestContext
from .application.draft_service import DraftApplicationService
from .infrastructure.container import DraftContainer, initialize_container

__all__ = [
    "DraftApplicationService",
    "DraftContainer",
    "RequestContext",
    "initialize_container",
]
