"""
Autodraft Service - Domain Service

Queue mutations and resolution of a locked queue into a pick.
Mutations return the queue they were given; a locked queue comes back
unchanged from toggle/clear.
"""

import logging
from typing import Iterable, List, Optional

from ..entities.autodraft_queue import MAX_QUEUE_SIZE, AutodraftQueue
from ..entities.group import now_millis
from ..exceptions import EmptyQueueLockError, InvalidSelectionError

logger = logging.getLogger(__name__)


def resolve_autodraft(queue: AutodraftQueue, undrafted_ids: Iterable[int]) -> Optional[int]:
    """
    First queued contestant that is still undrafted.

    Returns None for an unlocked queue or when every queued contestant is
    gone; the caller then needs a manual pick.
    """
    if not queue.locked:
        return None
    available = set(undrafted_ids)
    for contestant_id in queue.contestant_ids:
        if contestant_id in available:
            return contestant_id
    return None


def toggle_selection(queue: AutodraftQueue, contestant_id: int) -> AutodraftQueue:
    if queue.locked:
        logger.debug(f"Ignoring toggle of {contestant_id}: queue of {queue.user_name} is locked")
        return queue

    selections = list(queue.contestant_ids)
    if contestant_id in selections:
        selections.remove(contestant_id)
    elif queue.is_full:
        # At capacity the newest selection takes the last slot
        selections = selections[:MAX_QUEUE_SIZE - 1] + [contestant_id]
    else:
        selections.append(contestant_id)

    queue.contestant_ids = selections
    queue.updated_at = now_millis()
    return queue


def clear(queue: AutodraftQueue) -> AutodraftQueue:
    if queue.locked:
        logger.debug(f"Ignoring clear: queue of {queue.user_name} is locked")
        return queue
    queue.contestant_ids = []
    queue.updated_at = now_millis()
    return queue


def toggle_lock(queue: AutodraftQueue, allow_empty: bool = False) -> AutodraftQueue:
    """Flip the lock. Locking an empty queue is refused unless allowed."""
    if not queue.locked and not queue.contestant_ids and not allow_empty:
        raise EmptyQueueLockError(f"Queue of {queue.user_name} has no selections to lock")
    queue.locked = not queue.locked
    queue.updated_at = now_millis()
    return queue


def validate_queue_payload(contestant_ids) -> List[int]:
    """Check a submitted list of queued contestant ids"""
    if not isinstance(contestant_ids, list):
        raise InvalidSelectionError("Autodraft selections must be a list")
    for contestant_id in contestant_ids:
        if not isinstance(contestant_id, int) or isinstance(contestant_id, bool):
            raise InvalidSelectionError(f"Invalid contestant id: {contestant_id!r}")
    if len(contestant_ids) > MAX_QUEUE_SIZE:
        raise InvalidSelectionError(f"At most {MAX_QUEUE_SIZE} autodraft selections are allowed")
    if len(set(contestant_ids)) != len(contestant_ids):
        raise InvalidSelectionError("Autodraft selections must be unique")
    return list(contestant_ids)
