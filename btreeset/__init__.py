"""
An in-memory ordered set built on a B-tree of configurable minimum degree `D`.

- Every node holds a sorted run of keys. Internal nodes hold one more child
  than they have keys and every key in `children[i]` sorts between
  `keys[i - 1]` and `keys[i]`.
- Every node except the root holds between `D - 1` and `2D - 1` keys, and all
  leaves sit at the same depth.
- Inserts split any full node on the way down so a single pass is always
  enough. A full root is split under a new root, which is the only way the
  tree grows taller.
- Deletes replace keys of internal nodes with their in-order predecessor and,
  on the way back up, top up underfull nodes by borrowing from a sibling or
  merging with it. A root left without keys is replaced by its only child,
  which is the only way the tree gets shorter.
- Iteration is lazy and in-order, driven by an explicit stack.

There is no persistence and no locking. A tree must not be modified while it
is being iterated over.
"""
from .iterator import TreeIterator
from .node import KeyNotFound, MalformedTree, Node
from .tree import BTree, InvariantViolation

__all__ = [
    "BTree",
    "InvariantViolation",
    "KeyNotFound",
    "MalformedTree",
    "Node",
    "TreeIterator",
]
