"""
Tree walks as generators.

https://en.wikipedia.org/wiki/Depth-first_search
https://en.wikipedia.org/wiki/Breadth-first_search

Both walks expect a finite, acyclic tree. A cycle makes them run forever.
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Any, Deque, Iterator, List, Sequence


@dataclass(eq=False)
class Node:
    value: Any
    children: List["Node"] = field(default_factory=list)

    def __repr__(self):
        return f"{self.__class__.__name__}({self.value!r})"


def children_of(node: Any) -> Sequence[Any]:
    """
    Leaves may have no `children` attribute at all, or have it set to None;
    either way they have zero children.
    """
    children = getattr(node, "children", None)
    return () if children is None else children


def depth_traversal_tree(root: Any) -> Iterator[Any]:
    r"""
    Yields every node in pre-order.

            1
          / | \
         2  6  7
        / \     \      =>  1, 2, 3, 4, 5, 6, 7, 8
       3   4     8
           |
           5
    """
    stack: List[Any] = [root]
    while stack:
        node = stack.pop()
        yield node
        # Push rightmost child first so the leftmost one is popped next
        stack.extend(reversed(children_of(node)))


def breadth_traversal_tree(root: Any) -> Iterator[Any]:
    r"""
    Yields every node in level order.

            1
          / | \
         2  3  4
        / \     \      =>  1, 2, 3, 4, 5, 6, 7, 8
       5   6     7
           |
           8
    """
    queue: Deque[Any] = deque([root])
    while queue:
        node = queue.popleft()
        yield node
        queue.extend(children_of(node))
