"""
Immutable singly linked lists and the folds built on them.

A list is either ``List.NIL`` or ``List.Cons(head, tail)``. Nodes are frozen
dataclasses, so tails can be shared between lists freely.

Usage:
    from fpds import lists
    from fpds.lists import List

    xs = lists.apply(1, 2, 3)
    lists.map(xs, lambda x: x * 2)       # List(2, 4, 6)
    lists.fold_left(xs, 0, operator.add)  # 6

The naive recursive operations (``fold_right``, ``append``, ``init``, ``sum``,
``product`` and ``length``) recurse once per element and raise
``RecursionError`` on lists longer than the interpreter recursion limit.
Everything built on ``fold_left`` runs in a loop and handles any length.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Callable, Iterator, TypeVar

from .adt import ADT

A = TypeVar("A")
B = TypeVar("B")


class List(ADT[A]):
    NIL = "nil"

    @dataclass(frozen=True)
    class Cons:
        head: A
        tail: List[A]

    def __iter__(self) -> Iterator[A]:
        node = self
        while isinstance(node, List.Cons):
            yield node.head
            node = node.tail

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, List):
            return NotImplemented
        left, right = self, other
        while isinstance(left, List.Cons) and isinstance(right, List.Cons):
            if left is right:
                return True
            if left.head != right.head:
                return False
            left, right = left.tail, right.tail
        return left is right

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        return "List(%s)" % ", ".join(repr(x) for x in self)


def apply(*elements: A) -> List[A]:
    """Build a list from the arguments, right to left."""
    result = List.NIL
    for x in reversed(elements):
        result = List.Cons(x, result)
    return result


def sum(ints: List[int]) -> int:
    match ints:
        case List.NIL:
            return 0
        case List.Cons(x, xs):
            return x + sum(xs)


def product(ds: List[float]) -> float:
    match ds:
        case List.NIL:
            return 1.0
        case List.Cons(0.0, _):
            return 0.0
        case List.Cons(x, xs):
            return x * product(xs)


def tail(l: List[A]) -> List[A]:
    """Everything after the first element. The tail of ``NIL`` is ``NIL``."""
    match l:
        case List.NIL:
            return List.NIL
        case List.Cons(_, xs):
            return xs


def set_head(l: List[A], h: A) -> List[A]:
    """Replace the first element; on ``NIL`` this yields ``List(h)``."""
    return List.Cons(h, tail(l))


def drop(l: List[A], n: int) -> List[A]:
    while isinstance(l, List.Cons) and n > 0:
        l, n = l.tail, n - 1
    return l


def drop_while(l: List[A], f: Callable[[A], bool]) -> List[A]:
    while isinstance(l, List.Cons) and f(l.head):
        l = l.tail
    return l


def init(l: List[A]) -> List[A]:
    """All elements but the last."""
    match l:
        case List.NIL | List.Cons(_, List.NIL):
            return List.NIL
        case List.Cons(x, xs):
            return List.Cons(x, init(xs))


def append(a1: List[A], a2: List[A]) -> List[A]:
    match a1:
        case List.NIL:
            return a2
        case List.Cons(h, t):
            return List.Cons(h, append(t, a2))


def fold_right(l: List[A], z: B, f: Callable[[A, B], B]) -> B:
    """
    Fold from the right: ``f(x1, f(x2, ... f(xn, z)))``.

    Recursion depth equals the length of the list.
    """
    match l:
        case List.NIL:
            return z
        case List.Cons(x, xs):
            return f(x, fold_right(xs, z, f))


def length(l: List[A]) -> int:
    return fold_right(l, 0, lambda _, n: n + 1)


def fold_left(l: List[A], z: B, f: Callable[[B, A], B]) -> B:
    """Fold from the left: ``f(... f(f(z, x1), x2) ..., xn)``. Runs in a loop."""
    acc = z
    while isinstance(l, List.Cons):
        acc = f(acc, l.head)
        l = l.tail
    return acc


def reverse(l: List[A]) -> List[A]:
    return fold_left(l, List.NIL, lambda acc, x: List.Cons(x, acc))


def fold_right2(l: List[A], z: B, f: Callable[[A, B], B]) -> B:
    """Same result as ``fold_right``, computed as a left fold over the reversed list."""
    return fold_left(reverse(l), z, lambda acc, x: f(x, acc))


def sum2(ns: List[int]) -> int:
    return fold_right(ns, 0, operator.add)


def product2(ns: List[float]) -> float:
    return fold_right(ns, 1.0, operator.mul)


def sum3(ns: List[int]) -> int:
    return fold_left(ns, 0, operator.add)


def product3(ns: List[float]) -> float:
    return fold_left(ns, 1.0, operator.mul)


def length3(l: List[A]) -> int:
    return fold_left(l, 0, lambda n, _: n + 1)


def append2(a1: List[A], a2: List[A]) -> List[A]:
    # a2 ends up as the shared tail of the result
    return fold_right2(a1, a2, List.Cons)


def concat(ls: List[List[A]]) -> List[A]:
    """Flatten a list of lists by one level."""
    return fold_right2(ls, List.NIL, append2)


def add1(ns: List[int]) -> List[int]:
    return fold_right2(ns, List.NIL, lambda x, acc: List.Cons(x + 1, acc))


def double_to_string(ds: List[float]) -> List[str]:
    return fold_right2(ds, List.NIL, lambda x, acc: List.Cons(str(x), acc))


def map(l: List[A], f: Callable[[A], B]) -> List[B]:
    return fold_right2(l, List.NIL, lambda x, acc: List.Cons(f(x), acc))


def filter(l: List[A], f: Callable[[A], bool]) -> List[A]:
    return fold_right2(l, List.NIL, lambda x, acc: List.Cons(x, acc) if f(x) else acc)


def flat_map(l: List[A], f: Callable[[A], List[B]]) -> List[B]:
    return concat(map(l, f))


def filter2(l: List[A], f: Callable[[A], bool]) -> List[A]:
    return flat_map(l, lambda x: apply(x) if f(x) else List.NIL)


def zip_with(a1: List[A], a2: List[A], f: Callable[[A, A], A]) -> List[A]:
    """
    Combine two lists pairwise with `f`.

    The result is as long as the longer input: once the shorter list runs out,
    the rest of the longer one is carried over unchanged (and shared, not
    copied).
    """
    zipped = List.NIL
    while isinstance(a1, List.Cons) and isinstance(a2, List.Cons):
        zipped = List.Cons(f(a1.head, a2.head), zipped)
        a1, a2 = a1.tail, a2.tail
    rest = a2 if a1 is List.NIL else a1
    return fold_left(zipped, rest, lambda acc, x: List.Cons(x, acc))


def vector_add(a1: List[int], a2: List[int]) -> List[int]:
    return zip_with(a1, a2, operator.add)
