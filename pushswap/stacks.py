"""The two stacks and the operations that move values between them."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TextIO

from .output import put_endl


class PushSwap:
    """Stacks ``a`` and ``b``, top first; every effective operation is printed and recorded."""

    def __init__(self, values: Iterable[int], out: TextIO | None = None) -> None:
        self.a: list[int] = list(values)
        self.b: list[int] = []
        self.out = out
        self.moves: list[str] = []

    def _record(self, name: str) -> None:
        self.moves.append(name)
        put_endl(name, stream=self.out)

    def sa(self) -> None:
        """Swap the two top values of ``a``."""
        if len(self.a) < 2:
            return
        self.a[0], self.a[1] = self.a[1], self.a[0]
        self._record("sa")

    def ra(self) -> None:
        """Rotate ``a`` upwards: the top value goes to the bottom."""
        if len(self.a) < 2:
            return
        self.a.append(self.a.pop(0))
        self._record("ra")

    def rra(self) -> None:
        """Rotate ``a`` downwards: the bottom value goes to the top."""
        if len(self.a) < 2:
            return
        self.a.insert(0, self.a.pop())
        self._record("rra")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        if not self.b:
            return
        self.a.insert(0, self.b.pop(0))
        self._record("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        if not self.a:
            return
        self.b.insert(0, self.a.pop(0))
        self._record("pb")