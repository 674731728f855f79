"""Example data sets used by the command-line interface."""

from typing import Callable, Dict, List, Tuple

from .formatting import parse_date
from .task_heap import MinHeap
from .tree_node import Tree, TreeNode


def family_tree() -> Tree[str]:
    """Three generations of a family, pets included."""
    matriarch = TreeNode("Tracy")
    tim, spencer, daina = TreeNode("Tim"), TreeNode("Spencer"), TreeNode("Daina")
    sansa = TreeNode("Sansa the Dog")

    matriarch.add_children([tim, spencer, daina])
    tim.add_children([
        TreeNode("Olivia"),
        TreeNode("Noah"),
        TreeNode("Zola the Dog"),
        TreeNode("Luna the Cat"),
    ])
    spencer.add_child(sansa)
    sansa.add_child_value("Flora the Puppy")
    daina.add_children([TreeNode("Finnegan the Cat"), TreeNode("Pepeduke the Cat")])
    return Tree(matriarch)


def number_tree() -> Tree[int]:
    root = TreeNode(54)
    branch1, branch2, branch3 = TreeNode(33), TreeNode(32), TreeNode(27)
    root.add_children([branch1, branch2, branch3])

    branch1.add_children([TreeNode(12), TreeNode(10), TreeNode(6), TreeNode(1)])
    branch2.add_child_value(2).add_child_value(1)
    branch3.add_children([TreeNode(5), TreeNode(3)])
    return Tree(root)


def flag_tree() -> Tree[str]:
    root = TreeNode("\U0001F1E8\U0001F1E6")
    branch1 = TreeNode("\U0001F1E8\U0001F1F1")
    branch2 = TreeNode("\U0001F1ED\U0001F1F7")
    branch3 = TreeNode("\U0001F1FA\U0001F1F8")
    root.add_children([branch1, branch2, branch3])

    branch1.add_children([
        TreeNode("\U0001F1EC\U0001F1EC"),
        TreeNode("\U0001F1FA\U0001F1FF"),
        TreeNode("\U0001F1FA\U0001F1EC"),
        TreeNode("\U0001F1FE\U0001F1EA"),
    ])
    branch2.add_child_value("\U0001F1E6\U0001F1FF").add_child_value("\U0001F1E6\U0001F1EE")
    branch3.add_children([TreeNode("\U0001F1E6\U0001F1F6"), TreeNode("\U0001F3F4\u200D\u2620\uFE0F")])
    return Tree(root)


TREES: Dict[str, Callable[[], Tree]] = {
    "family": family_tree,
    "numbers": number_tree,
    "flags": flag_tree,
}


TODO_ITEMS: List[Tuple[str, str]] = [
    ("Meeting: Annual Review", "05/01/2045 09:00"),
    ("Submit Initial Design Ideas", "05/01/2000 11:00"),
    ("Review Swift Fundamentals", "04/28/2000 19:00"),
    ("Finish Lesson on Algorithms", "03/22/2000 13:45"),
    ("Apply for Job", "06/17/2044 12:55"),
    ("Finish Interview Prep", "07/25/2046 11:05"),
    ("Complete Code Review", "10/29/2012 15:30"),
    ("Mentor Intern", "09/15/2041 16:25"),
    ("Swap Laundry", "11/05/2003 13:00"),
    ("Run Anti Virus Software", "08/31/2009 23:30"),
    ("Relax", "01/11/2100 19:00"),
]


def todo_list() -> MinHeap:
    """A to-do heap mixing overdue and future tasks."""
    heap = MinHeap()
    for task, due in TODO_ITEMS:
        heap.add(task, parse_date(due))
    return heap
