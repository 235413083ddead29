"""The two stacks of the puzzle and the operations that move values between them."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterable, Optional, TextIO

from pushswap.output import put_endl


def _swap_top(stack: deque) -> bool:
    if len(stack) < 2:
        return False
    stack[0], stack[1] = stack[1], stack[0]
    return True


def _move_top(src: deque, dst: deque) -> bool:
    if not src:
        return False
    dst.appendleft(src.popleft())
    return True


class Stacks:
    """Stacks ``a`` and ``b``, top first; every operation prints its name.

    ``a`` starts with ``values`` (first value on top) and ``b`` is empty.
    The names written are also kept, in order, in ``operations``.
    """

    def __init__(self, values: Iterable[Any] = (), out: Optional[TextIO] = None) -> None:
        self.a: deque = deque(values)
        self.b: deque = deque()
        self.operations: list[str] = []
        self._out = out

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def _emit(self, name: str) -> None:
        self.operations.append(name)
        put_endl(name, self._out)

    def sa(self) -> None:
        """Swap the top two of ``a``; nothing happens with fewer than two."""
        if _swap_top(self.a):
            self._emit("sa")

    def sb(self) -> None:
        """Swap the top two of ``b``; nothing happens with fewer than two."""
        if _swap_top(self.b):
            self._emit("sb")

    def ss(self) -> None:
        """``sa`` and ``sb`` at once."""
        _swap_top(self.a)
        _swap_top(self.b)
        self._emit("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``; nothing happens if ``b`` is empty."""
        if _move_top(self.b, self.a):
            self._emit("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``; nothing happens if ``a`` is empty."""
        if _move_top(self.a, self.b):
            self._emit("pb")

    def ra(self) -> None:
        """Rotate ``a`` up: its top becomes its bottom."""
        self.a.rotate(-1)
        self._emit("ra")

    def rb(self) -> None:
        """Rotate ``b`` up: its top becomes its bottom."""
        self.b.rotate(-1)
        self._emit("rb")

    def rr(self) -> None:
        """``ra`` and ``rb`` at once."""
        self.a.rotate(-1)
        self.b.rotate(-1)
        self._emit("rr")

    def rra(self) -> None:
        """Rotate ``a`` down: its bottom becomes its top."""
        self.a.rotate(1)
        self._emit("rra")

    def rrb(self) -> None:
        """Rotate ``b`` down: its bottom becomes its top."""
        self.b.rotate(1)
        self._emit("rrb")

    def rrr(self) -> None:
        """``rra`` and ``rrb`` at once."""
        self.a.rotate(1)
        self.b.rotate(1)
        self._emit("rrr")