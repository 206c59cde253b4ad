"""Unit tests for RequestSequencer."""

import threading

from snapstudio.core.sequencer import RequestSequencer


class TestRequestSequencer:
    """Tests for token issuing and staleness."""

    def test_starts_at_zero(self):
        """No token has been issued initially."""
        assert RequestSequencer().latest == 0

    def test_tokens_increase(self):
        """Tokens are monotonically increasing."""
        sequencer = RequestSequencer()
        assert [sequencer.issue() for _ in range(3)] == [1, 2, 3]
        assert sequencer.latest == 3

    def test_latest_issued_wins(self):
        """Only the most recently issued token is current."""
        sequencer = RequestSequencer()
        first = sequencer.issue()
        second = sequencer.issue()

        assert sequencer.is_current(second)
        assert not sequencer.is_current(first)

    def test_concurrent_issue_unique(self):
        """Tokens issued from many threads are unique."""
        sequencer = RequestSequencer()
        tokens = []
        lock = threading.Lock()

        def worker():
            for _ in range(50):
                token = sequencer.issue()
                with lock:
                    tokens.append(token)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert sorted(tokens) == list(range(1, 401))
        assert sequencer.latest == 400
