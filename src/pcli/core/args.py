"""
Forward-only cursor over the command-line tokens.

The same ``ArgInput`` instance is handed from the dispatcher, which consumes the
keyword, to the selected command, which consumes its own arguments. There is no
rewind: each consumer reads exactly the tokens it owns and passes the cursor on.
"""

from typing import Iterable, Optional, Tuple


class ArgInput:
    """Stateful read position over an immutable sequence of string tokens."""

    def __init__(self, args: Iterable[str]) -> None:
        self._args: Tuple[str, ...] = tuple(args)
        self._index = 0

    @property
    def args(self) -> Tuple[str, ...]:
        return self._args

    @property
    def position(self) -> int:
        return self._index

    @property
    def length(self) -> int:
        return len(self._args)

    @property
    def remaining(self) -> int:
        return self.length - self.position

    @property
    def current(self) -> Optional[str]:
        """Token at the read position, or None once the input is exhausted."""
        if self._index >= self.length:
            return None
        return self._args[self._index]

    def next(self) -> Optional[str]:
        """
        Return the current token and advance past it.

        Reading past the end keeps returning None; the position stays at
        ``length`` so ``remaining`` never goes negative.
        """
        token = self.current
        if self._index < self.length:
            self._index += 1
        return token

    def empty(self) -> bool:
        return self.remaining <= 0

    def __len__(self) -> int:
        return self.length

    def __repr__(self) -> str:
        return f"ArgInput(args={list(self._args)!r}, position={self._index})"
