"""
Domain Exceptions

Business rule violations and storage failures raised by the draft engine.
Every exception carries a stable ``code`` so callers can map it to a
user-facing message or status code.
"""


class DraftError(Exception):
    """Base exception for all draft-related errors"""
    code = "draft_error"
    retryable = False


class NotFoundError(DraftError):
    """Raised when a group or season does not exist"""
    code = "not_found"


class UnknownUserError(DraftError):
    """Raised when a user name does not belong to the group"""
    code = "unknown_user"


class NoActiveRoundError(DraftError):
    """Raised when picking while no round is open"""
    code = "no_active_round"


class RoundAlreadyActiveError(DraftError):
    """Raised when creating a round while another one is still open"""
    code = "round_already_active"


class NoUsersError(DraftError):
    """Raised when creating a round for a group without users"""
    code = "no_users"


class InvalidSelectionError(DraftError):
    """Raised for a malformed contestant id or autodraft payload"""
    code = "invalid_selection"


class NotYourTurnError(DraftError):
    """Raised when a user picks out of turn"""
    code = "not_your_turn"


class AlreadyDraftedError(DraftError):
    """Raised when picking a contestant that was already drafted"""
    code = "already_drafted"


class QueueLockedError(DraftError):
    """Raised when changing the contents of a locked autodraft queue"""
    code = "queue_locked"


class EmptyQueueLockError(DraftError):
    """Raised when locking an autodraft queue with no selections"""
    code = "empty_queue_lock"


class DuplicateUserError(DraftError):
    """Raised when two users of a group share a name (case-insensitive)"""
    code = "duplicate_user"


class InvalidGroupError(DraftError):
    """Raised for invalid group parameters or a malformed group document"""
    code = "invalid_group"


class ConflictRetryError(DraftError):
    """Raised when a write is based on a stale group version"""
    code = "conflict_retry"


class StorageUnavailableError(DraftError):
    """Raised when a store or roster source cannot be reached"""
    code = "storage_unavailable"
    retryable = True


class InconsistentGroupStateError(DraftError):
    """Raised when stored rounds contradict the single-open-round invariant"""
    code = "inconsistent_state"
