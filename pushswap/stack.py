"""Circular stacks and the two-stack machine that the sorting works on."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Iterator


class Stack:
    """A stack of integers whose top is index 0 and whose bottom is index -1."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: deque[int] = deque(values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __getitem__(self, index: int) -> int:
        return self._items[index]

    def __repr__(self) -> str:
        return f"Stack({list(self._items)!r})"

    def swap(self) -> bool:
        """Swap the two top elements; return False if there are fewer than two."""
        if len(self._items) < 2:
            return False
        first = self._items.popleft()
        second = self._items.popleft()
        self._items.appendleft(first)
        self._items.appendleft(second)
        return True

    def rotate(self) -> bool:
        """Move the top element to the bottom; return False if nothing moves."""
        if len(self._items) < 2:
            return False
        self._items.rotate(-1)
        return True

    def reverse_rotate(self) -> bool:
        """Move the bottom element to the top; return False if nothing moves."""
        if len(self._items) < 2:
            return False
        self._items.rotate(1)
        return True

    def pop_top(self) -> int:
        """Remove and return the top element."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.popleft()

    def push_top(self, value: int) -> None:
        """Put a value on top of the stack."""
        self._items.appendleft(value)

    def _require_items(self) -> None:
        if not self._items:
            raise ValueError("empty stack")

    def min_index(self) -> int:
        """Index of the first smallest value, counted from the top."""
        self._require_items()
        return min(range(len(self._items)), key=self._items.__getitem__)

    def max_index(self) -> int:
        """Index of the first largest value, counted from the top."""
        self._require_items()
        return max(range(len(self._items)), key=self._items.__getitem__)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")

    def distance_up(self, index: int) -> int:
        """Number of rotations that bring the element at ``index`` to the top."""
        self._check_index(index)
        return index

    def distance_down(self, index: int) -> int:
        """Number of reverse rotations that bring the element at ``index`` to the top."""
        self._check_index(index)
        return (len(self._items) - index) % len(self._items)

    def is_ascending(self) -> bool:
        """True if values never decrease from top to bottom."""
        items = list(self._items)
        return all(x <= y for x, y in zip(items, items[1:]))

    def is_descending(self) -> bool:
        """True if values never increase from top to bottom."""
        items = list(self._items)
        return all(x >= y for x, y in zip(items, items[1:]))

    def is_cyclically_ordered(self) -> bool:
        """True if some number of rotations would make the stack ascending."""
        size = len(self._items)
        if size == 0:
            return True
        position = self.min_index()
        stop = self.max_index()
        count = 1
        while position != stop:
            following = (position + 1) % size
            if self._items[position] > self._items[following]:
                return False
            position = following
            count += 1
        return count == size


class Machine:
    """Stacks ``a`` and ``b`` with the named operations that act on them.

    Every operation that changes something is appended to ``operations`` and
    handed to ``on_operation`` when one is given.
    """

    def __init__(
        self,
        values: Iterable[int] = (),
        on_operation: Callable[[str], object] | None = None,
    ) -> None:
        self.a = Stack(values)
        self.b = Stack()
        self.operations: list[str] = []
        self._on_operation = on_operation

    def _record(self, name: str, *results: bool) -> bool:
        if not any(results):
            return False
        self.operations.append(name)
        if self._on_operation is not None:
            self._on_operation(name)
        return True

    def sa(self) -> bool:
        return self._record("sa", self.a.swap())

    def sb(self) -> bool:
        return self._record("sb", self.b.swap())

    def ss(self) -> bool:
        return self._record("ss", self.a.swap(), self.b.swap())

    def ra(self) -> bool:
        return self._record("ra", self.a.rotate())

    def rb(self) -> bool:
        return self._record("rb", self.b.rotate())

    def rr(self) -> bool:
        return self._record("rr", self.a.rotate(), self.b.rotate())

    def rra(self) -> bool:
        return self._record("rra", self.a.reverse_rotate())

    def rrb(self) -> bool:
        return self._record("rrb", self.b.reverse_rotate())

    def rrr(self) -> bool:
        return self._record("rrr", self.a.reverse_rotate(), self.b.reverse_rotate())

    def pa(self) -> bool:
        """Move the top of ``b`` onto ``a``."""
        if not len(self.b):
            return False
        self.a.push_top(self.b.pop_top())
        return self._record("pa", True)

    def pb(self) -> bool:
        """Move the top of ``a`` onto ``b``."""
        if not len(self.a):
            return False
        self.b.push_top(self.a.pop_top())
        return self._record("pb", True)