"""Generation counter used to discard stale asynchronous results."""


class Generation:
    """Monotonic counter; a result is applied only if its token is current."""

    def __init__(self):
        self._value = 0

    @property
    def current(self) -> int:
        return self._value

    def advance(self) -> int:
        """Start a new generation and return its token."""
        self._value += 1
        return self._value

    def is_current(self, token: int) -> bool:
        return token == self._value
