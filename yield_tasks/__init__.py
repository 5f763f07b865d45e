"""
Lazy sequences with generators, and a driver for generators of deferred
values.

https://docs.python.org/3/howto/functional.html#generators
"""

from .driver import run, run_async
from .sequences import get_fibonacci_sequence, merge_sorted_sequences, take
from .song import get_99_bottles_of_beer
from .tree import Node, breadth_traversal_tree, depth_traversal_tree

__all__ = [
    "Node",
    "breadth_traversal_tree",
    "depth_traversal_tree",
    "get_99_bottles_of_beer",
    "get_fibonacci_sequence",
    "merge_sorted_sequences",
    "run",
    "run_async",
    "take",
]
