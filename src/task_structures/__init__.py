"""Task Structures - N-ary trees and a due-date min-heap for task lists."""

__version__ = "0.1.0"

from .config import DisplayConfig
from .task_heap import MinHeap, TaskNode
from .tree_node import CycleError, Tree, TreeNode, TreeStructureError

__all__ = ["TreeNode", "Tree", "TreeStructureError", "CycleError", "TaskNode", "MinHeap", "DisplayConfig"]
