"""Request sequencing for overlapping generation requests.

Nothing stops a user from triggering a second generation while the first
is still in flight, and remote calls cannot be cancelled. The sequencer
makes the outcome explicit: every request takes a monotonically increasing
token, and only the result of the most recently *issued* request is
accepted. Results of superseded requests are stale and must be discarded,
regardless of the order in which responses arrive.
"""

import logging
import threading

logger = logging.getLogger(__name__)


class RequestSequencer:
    """Thread-safe issuer of monotonically increasing request tokens."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._latest = 0

    def issue(self) -> int:
        """Issue a new token, superseding every earlier one."""
        with self._lock:
            self._latest += 1
            token = self._latest
        logger.debug(f"Issued request token {token}")
        return token

    def is_current(self, token: int) -> bool:
        """True if no newer token has been issued since ``token``."""
        with self._lock:
            return token == self._latest

    @property
    def latest(self) -> int:
        """The most recently issued token (0 before the first request)."""
        with self._lock:
            return self._latest
