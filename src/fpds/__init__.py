"""
fpds: immutable recursive data structures.

Provides a singly linked ``List`` and a binary ``Tree``, both declared as
algebraic data types, together with folds and the operations derived from
them.

Usage:
    from fpds import lists, trees, List, Tree

    xs = lists.apply(1, 2, 3)
    lists.fold_right2(xs, 0, operator.add)

    t = Tree.Branch(Tree.Leaf(1), Tree.Leaf(2))
    trees.fold(t, str, lambda l, r: l + r)
"""

from . import lists, trees
from .adt import ADT, ADTMeta
from .lists import List
from .trees import Tree

__version__ = "0.1.0"
__all__ = [
    "ADT",
    "ADTMeta",
    "List",
    "Tree",
    "lists",
    "trees",
]
