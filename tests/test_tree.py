from __future__ import annotations

import pytest

from fpds import Tree, trees

Leaf = Tree.Leaf
Branch = Tree.Branch

SAMPLE = Branch(Leaf(1), Branch(Leaf(2), Leaf(3)))
LEFT_HEAVY = Branch(Branch(Branch(Leaf(1), Leaf(2)), Leaf(3)), Leaf(4))

TREES = [
    Leaf(5),
    SAMPLE,
    LEFT_HEAVY,
    Branch(Branch(Leaf(-1), Leaf(7)), Branch(Leaf(3), Branch(Leaf(0), Leaf(2)))),
]


def test_match():
    def process(t: Tree) -> str:
        match t:
            case Tree.Leaf(value):
                return str(value)
            case Tree.Branch(left, right):
                return f"({process(left)} {process(right)})"

    assert process(SAMPLE) == "(1 (2 3))"
    assert isinstance(SAMPLE, Tree)
    assert isinstance(Leaf(1), Tree)
    assert repr(Leaf(1)) == "Tree.Leaf(value=1)"


def test_size():
    assert trees.size(SAMPLE) == 3
    assert trees.size(Leaf("x")) == 1


def test_maximum():
    assert trees.maximum(SAMPLE) == 3
    assert trees.maximum(Branch(Leaf(9), Leaf(-2))) == 9


def test_depth():
    assert trees.depth(Leaf(1)) == 1
    assert trees.depth(Branch(Leaf(1), Leaf(2))) == 2
    assert trees.depth(SAMPLE) == 3


def test_depth_only_increments_right_side():
    def conventional_depth(t: Tree) -> int:
        return trees.fold(t, lambda _: 1, lambda l, r: 1 + max(l, r))

    # The two readings agree while the right side is at least as deep.
    assert trees.depth(SAMPLE) == conventional_depth(SAMPLE) == 3

    # A deeper left side is reported without the extra level for the root.
    assert conventional_depth(LEFT_HEAVY) == 4
    assert trees.depth(LEFT_HEAVY) == 2
    assert trees.depth2(LEFT_HEAVY) == 2


def test_map():
    assert trees.map(SAMPLE, lambda x: x * 10) == Branch(
        Leaf(10), Branch(Leaf(20), Leaf(30))
    )
    assert trees.map(Leaf(1), str) == Leaf("1")


def test_fold():
    assert trees.fold(SAMPLE, str, lambda l, r: l + r) == "123"
    assert trees.fold(Leaf(4), lambda x: x * 2, lambda l, r: l + r) == 8


@pytest.mark.parametrize("tree", TREES)
def test_fold_based_versions_agree(tree):
    assert trees.size2(tree) == trees.size(tree)
    assert trees.maximum2(tree) == trees.maximum(tree)
    assert trees.depth2(tree) == trees.depth(tree)
    assert trees.map2(tree, lambda x: x * x) == trees.map(tree, lambda x: x * x)
    assert trees.map2(tree, str) == trees.map(tree, str)


def test_map_preserves_input():
    result = trees.map(SAMPLE, lambda x: -x)
    assert SAMPLE == Branch(Leaf(1), Branch(Leaf(2), Leaf(3)))
    assert result != SAMPLE
    assert hash(SAMPLE) == hash(Branch(Leaf(1), Branch(Leaf(2), Leaf(3))))
