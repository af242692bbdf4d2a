"""The cost-driven sort: push the cheapest element to ``b``, then bring everything back."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from pushswap.stack import Machine, Stack


@dataclass(frozen=True)
class Move:
    """Rotations needed before pushing one element of ``a`` onto ``b``.

    Positive counts are rotations, negative counts reverse rotations.
    """

    rot_a: int
    rot_b: int
    steps: int


def _distances(stack: Stack, index: int) -> tuple[int, int]:
    if not len(stack):
        return 0, 0
    return stack.distance_up(index), stack.distance_down(index)


def target_in_b(b: Stack, value: int) -> int:
    """Index in ``b`` that must be on top before ``value`` is pushed onto it.

    ``b`` is kept in cyclically descending order.
    """
    if len(b) <= 1:
        return 0
    lowest, highest = b.min_index(), b.max_index()
    if b[lowest] > value or b[highest] < value:
        return highest
    found = next((i for i in range(len(b)) if b[i] < value < b[i - 1]), None)
    if found is None:
        raise ValueError(f"no place for {value} in stack b")
    return found


def target_in_a(a: Stack, value: int) -> int:
    """Index in ``a`` that must be on top before ``value`` is pushed back onto it.

    ``a`` is kept in cyclically ascending order.
    """
    if len(a) <= 1:
        return 0
    lowest, highest = a.min_index(), a.max_index()
    if a[lowest] > value or a[highest] < value:
        return lowest
    order = [0, *range(len(a) - 1, 0, -1)]
    found = next((i for i in order if a[i] > value > a[i - 1]), None)
    if found is None:
        raise ValueError(f"no place for {value} in stack a")
    return found


def optimal_move(machine: Machine, index: int) -> Move:
    """The cheapest way to push the element at ``index`` of ``a`` onto ``b``."""
    a, b = machine.a, machine.b
    up_a, down_a = a.distance_up(index), a.distance_down(index)
    up_b, down_b = _distances(b, target_in_b(b, a[index]))
    move = Move(up_a, up_b, max(up_a, up_b))
    if up_a + down_b < move.steps:
        move = Move(up_a, -down_b, up_a + down_b)
    if down_a + up_b < move.steps:
        move = Move(-down_a, up_b, down_a + up_b)
    if max(down_a, down_b) < move.steps:
        move = Move(-down_a, -down_b, max(down_a, down_b))
    return move


def push_cheapest(machine: Machine) -> Move | None:
    """Push the element of ``a`` that costs fewest operations onto ``b``."""
    if not len(machine.a):
        return None
    moves = [optimal_move(machine, index) for index in range(len(machine.a))]
    cheapest = min(moves, key=lambda move: move.steps)
    rot_a, rot_b = cheapest.rot_a, cheapest.rot_b
    while rot_a > 0 and rot_b > 0:
        rot_a, rot_b = rot_a - 1, rot_b - 1
        machine.rr()
    for _ in range(max(rot_a, 0)):
        machine.ra()
    for _ in range(max(rot_b, 0)):
        machine.rb()
    while rot_a < 0 and rot_b < 0:
        rot_a, rot_b = rot_a + 1, rot_b + 1
        machine.rrr()
    for _ in range(max(-rot_a, 0)):
        machine.rra()
    for _ in range(max(-rot_b, 0)):
        machine.rrb()
    machine.pb()
    return cheapest


def empty_b(machine: Machine) -> None:
    """Bring the largest of ``b`` to its top, then push all of ``b`` back into place in ``a``."""
    b = machine.b
    if not len(b):
        return
    up, down = _distances(b, b.max_index())
    if up > down:
        for _ in range(down):
            machine.rrb()
    else:
        for _ in range(up):
            machine.rb()
    while len(machine.b):
        up, down = _distances(machine.a, target_in_a(machine.a, machine.b[0]))
        if up < down:
            for _ in range(up):
                machine.ra()
        else:
            for _ in range(down):
                machine.rra()
        machine.pa()


def finalize_a(machine: Machine) -> None:
    """Rotate ``a`` the shorter way until its smallest value is on top."""
    a = machine.a
    if not len(a):
        return
    up, down = _distances(a, a.min_index())
    if up < down:
        for _ in range(up):
            machine.ra()
    else:
        for _ in range(down):
            machine.rra()


def sort_three(machine: Machine) -> None:
    """Sort a stack ``a`` of exactly three values."""
    a = machine.a
    if len(a) != 3:
        raise ValueError("sort_three needs exactly three values")
    top, middle, bottom = a[0], a[1], a[-1]
    if top > middle > bottom:
        machine.sa()
        machine.rra()
    elif top > middle and top > bottom and middle < bottom:
        machine.ra()
    elif top > middle and middle < bottom and top < bottom:
        machine.sa()
    elif top < middle and middle > bottom and top < bottom:
        machine.sa()
        machine.ra()
    elif top < middle and middle > bottom and top > bottom:
        machine.rra()


def turk(machine: Machine) -> None:
    """Sort ``a`` in ascending order using ``b`` as scratch space."""
    if machine.a.is_ascending():
        return
    if machine.a.is_cyclically_ordered():
        finalize_a(machine)
        return
    while not machine.a.is_cyclically_ordered():
        push_cheapest(machine)
    empty_b(machine)
    finalize_a(machine)


def sort_values(values: Iterable[int]) -> list[str]:
    """Return the operations that sort ``values``."""
    machine = Machine(values)
    if len(machine.a) == 3 and not machine.a.is_cyclically_ordered():
        sort_three(machine)
    else:
        turk(machine)
    return list(machine.operations)