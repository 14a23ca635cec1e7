"""
Recovery strategy classifications for error handling.
"""

from typing import Optional


class RecoverableError(Exception):
    """Errors that can be recovered from by retrying the operation."""

    def __init__(self, message: str, retry_count: int = 0,
                 max_retries: int = 3, **kwargs):
        super().__init__(message)
        self.retry_count = retry_count
        self.max_retries = max_retries
        self.recoverable = True


class FetchError(RecoverableError):
    """Historical series retrieval failed; shown to the caller, safe to retry."""

    def __init__(self, message: str, status_code: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.status_code = status_code
