import pytest

from survivor_draft.domain.entities import AutodraftQueue
from survivor_draft.domain.exceptions import EmptyQueueLockError, InvalidSelectionError
from survivor_draft.domain.services.autodraft_service import (
    clear,
    resolve_autodraft,
    toggle_lock,
    toggle_selection,
    validate_queue_payload,
)


def make_queue(ids=None, locked=False):
    return AutodraftQueue(
        group_slug="tribe",
        user_name="Alice",
        contestant_ids=list(ids or []),
        locked=locked,
        updated_at=0,
    )


def test_toggle_appends_until_full():
    queue = make_queue()
    for contestant_id in (4, 8, 15):
        toggle_selection(queue, contestant_id)
    assert queue.contestant_ids == [4, 8, 15]
    assert queue.updated_at > 0


def test_toggle_at_capacity_replaces_last_slot():
    queue = toggle_selection(make_queue([1, 2, 3, 4]), 5)
    assert queue.contestant_ids == [1, 2, 3, 5]


def test_toggle_removes_existing_selection():
    queue = toggle_selection(make_queue([1, 2, 3]), 2)
    assert queue.contestant_ids == [1, 3]


def test_toggle_on_locked_queue_is_ignored():
    queue = toggle_selection(make_queue([1, 2], locked=True), 3)
    assert queue.contestant_ids == [1, 2]
    assert queue.updated_at == 0


def test_clear():
    assert clear(make_queue([1, 2])).contestant_ids == []


def test_clear_on_locked_queue_is_ignored():
    queue = clear(make_queue([1, 2], locked=True))
    assert queue.contestant_ids == [1, 2]
    assert queue.locked is True


def test_toggle_lock_flips_state():
    queue = make_queue([3])
    assert toggle_lock(queue).locked is True
    assert toggle_lock(queue).locked is False


def test_locking_empty_queue():
    with pytest.raises(EmptyQueueLockError):
        toggle_lock(make_queue())
    assert toggle_lock(make_queue(), allow_empty=True).locked is True


def test_unlocking_empty_locked_queue_is_allowed():
    assert toggle_lock(make_queue(locked=True)).locked is False


def test_resolve_returns_first_undrafted():
    queue = make_queue([5, 1, 9], locked=True)
    assert resolve_autodraft(queue, {1, 9}) == 1


def test_resolve_when_everything_is_gone():
    queue = make_queue([5, 1], locked=True)
    assert resolve_autodraft(queue, {2, 3}) is None


def test_resolve_ignores_unlocked_queue():
    queue = make_queue([5, 1, 9])
    assert resolve_autodraft(queue, {1, 5, 9}) is None


def test_payload_validation():
    assert validate_queue_payload([3, 1]) == [3, 1]
    assert validate_queue_payload([]) == []
    for bad in ([1, 2, 3, 4, 5], [1, 1], ["1"], [True], "1,2", None):
        with pytest.raises(InvalidSelectionError):
            validate_queue_payload(bad)


def test_queue_position():
    queue = make_queue([7, 3])
    assert queue.position_of(3) == 2
    assert queue.position_of(9) == 0
