"""
Immutable binary trees.

Leaves hold the values, branches hold exactly two subtrees. Every operation
recurses once per level, so trees deeper than the interpreter recursion limit
raise ``RecursionError``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, TypeVar

from .adt import ADT

A = TypeVar("A")
B = TypeVar("B")


class Tree(ADT[A]):
    @dataclass(frozen=True)
    class Leaf:
        value: A

    @dataclass(frozen=True)
    class Branch:
        left: Tree[A]
        right: Tree[A]


def size(tree: Tree[A]) -> int:
    """Number of leaves."""
    match tree:
        case Tree.Leaf(_):
            return 1
        case Tree.Branch(left, right):
            return size(left) + size(right)


def maximum(tree: Tree[int]) -> int:
    match tree:
        case Tree.Leaf(value):
            return value
        case Tree.Branch(left, right):
            return max(maximum(left), maximum(right))


def depth(tree: Tree[A]) -> int:
    """
    Depth of the tree, counting a single leaf as 1.

    Only the right subtree is incremented before taking the maximum, so a
    branch whose left side is deeper reports the left depth unchanged.
    """
    match tree:
        case Tree.Leaf(_):
            return 1
        case Tree.Branch(left, right):
            return max(depth(left), depth(right) + 1)


def map(tree: Tree[A], f: Callable[[A], B]) -> Tree[B]:
    match tree:
        case Tree.Leaf(value):
            return Tree.Leaf(f(value))
        case Tree.Branch(left, right):
            return Tree.Branch(map(left, f), map(right, f))


def fold(tree: Tree[A], f: Callable[[A], B], g: Callable[[B, B], B]) -> B:
    """Replace every leaf with ``f(value)`` and every branch with ``g(left, right)``."""
    match tree:
        case Tree.Leaf(value):
            return f(value)
        case Tree.Branch(left, right):
            return g(fold(left, f, g), fold(right, f, g))


def size2(tree: Tree[A]) -> int:
    return fold(tree, lambda _: 1, lambda l, r: l + r)


def maximum2(tree: Tree[int]) -> int:
    return fold(tree, lambda x: x, max)


def depth2(tree: Tree[A]) -> int:
    return fold(tree, lambda _: 1, lambda l, r: max(l, r + 1))


def map2(tree: Tree[A], f: Callable[[A], B]) -> Tree[B]:
    return fold(tree, lambda x: Tree.Leaf(f(x)), Tree.Branch)
