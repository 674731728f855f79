# tests/conftest.py

from datetime import datetime

import pytest

from task_structures import MinHeap, Tree, TreeNode


@pytest.fixture()
def small_tree() -> Tree[str]:
    """
    root -> {A, B}, A -> {C, D}.
    """
    root = TreeNode("root")
    a = root.add_child_value("A")
    root.add_child_value("B")
    a.add_children([TreeNode("C"), TreeNode("D")])
    return Tree(root)


@pytest.fixture()
def now() -> datetime:
    return datetime(2024, 1, 1, 12, 0)


@pytest.fixture()
def heap() -> MinHeap:
    return MinHeap()
