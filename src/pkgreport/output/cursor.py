"""Rotating liveness indicator."""


class AliveCursor:
    """Cycles through ``| / - \\`` each time it is advanced."""

    CHARS = "|/-\\"

    def __init__(self) -> None:
        self._index = 0

    def __str__(self) -> str:
        return self.CHARS[self._index]

    def advance(self) -> str:
        """Move to the next character and return it."""
        self._index = (self._index + 1) % len(self.CHARS)
        return str(self)

    def reset(self) -> None:
        self._index = 0
