import logging

from . import settings
from .iterator import TreeIterator
from .node import Node

logger = logging.getLogger(__name__)


class InvariantViolation(AssertionError):
    pass


class BTree:
    """
    An ordered set backed by a B-tree of minimum degree `order`.

    Elements only need to support `<` and `==`. Inserting an element that is
    already present does nothing, deleting one that isn't raises `KeyNotFound`.
    """

    def __init__(self, order=None):
        if order is None:
            order = settings.DEFAULT_ORDER
        if order < 2:
            raise ValueError(f"order must be at least 2, got {order}")

        self.order = order
        self.root = Node(order)

    def __repr__(self):
        return f"BTree(order={self.order}, size={len(self)}, height={self.height})"

    def __len__(self):
        return len(self.root)

    def __iter__(self):
        return TreeIterator(self)

    def __contains__(self, value):
        node = self.root

        while True:
            index, found = node.find_key(value)
            if found:
                return True
            if node.is_leaf:
                return False
            node = node.children[index]

    @property
    def height(self):
        return self.root.depth() + 1

    def insert(self, value):
        if self.root.is_full:
            # the only place the tree grows in height
            self.root = Node(self.order, children=[self.root])
            self.root.split(0)
            logger.debug("root split, height is now %d", self.height)

        self.root.insert(value)
        self._check()

    def delete(self, value):
        self._delete(value)
        self._check()

    def _delete(self, value):
        """
        A key sitting in a leaf directly below the root is removed in place
        when that leaf can spare it. Otherwise the leaf first borrows from (or
        merges with) a sibling and deletion is retried. Everything else goes
        through the general recursive delete.
        """
        hit = self.find_parent(value)
        parent, index = hit if hit is not None else (None, None)

        if parent is not self.root or not parent.children[index].is_leaf:
            self.root.delete_intermediate(value)
            self._collapse_root()
            return

        if not parent.children[index].can_spare:
            if index == len(parent.keys):
                parent.pivot_right(index - 1)
            else:
                parent.pivot_left(index)
            self._collapse_root()
            return self._delete(value)

        parent.children[index].delete_key(value)

    def _collapse_root(self):
        while not self.root.keys and not self.root.is_leaf:
            self.root = self.root.children[0]
            logger.debug("root collapsed, height is now %d", self.height)

    def find_parent(self, value):
        """
        Returns `(parent, index)` such that `parent.children[index]` holds
        `value`, or None if `value` is in the root or not in the tree at all.
        """
        node = self.root
        index, found = node.find_key(value)
        if found:
            return None

        while not node.is_leaf:
            child = node.children[index]
            child_index, found = child.find_key(value)
            if found:
                return node, index
            node, index = child, child_index

        return None

    def levels(self):
        """
        Keys of every node grouped by depth, left to right.
        """
        levels = []
        current = [self.root]

        while current:
            levels.append([node.keys for node in current])
            current = [child for node in current for child in node.children]

        return levels

    def render(self):
        return "\n".join(
            f"Level {depth}: " + " | ".join(str(keys) for keys in level)
            for depth, level in enumerate(self.levels())
        )

    def _check(self):
        if settings.CHECK_INVARIANTS:
            self.validate()

    def validate(self):
        """
        Walks the whole tree raising `InvariantViolation` if keys are out of
        order, a node is over or under occupied, an internal node has the wrong
        number of children or leaves sit at different depths.
        """
        leaf_depths = set()
        self._validate_node(self.root, None, None, 0, leaf_depths)

        if len(leaf_depths) > 1:
            raise InvariantViolation(f"leaves found at depths {sorted(leaf_depths)}")

    def _validate_node(self, node, low, high, depth, leaf_depths):
        max_keys = 2 * self.order - 1
        if len(node.keys) > max_keys:
            raise InvariantViolation(f"{node!r} holds more than {max_keys} keys")

        if node is self.root:
            if not node.keys and not node.is_leaf:
                raise InvariantViolation("internal root holds no keys")
        elif len(node.keys) < self.order - 1:
            raise InvariantViolation(f"{node!r} holds fewer than {self.order - 1} keys")

        for a, b in zip(node.keys, node.keys[1:]):
            if not a < b:
                raise InvariantViolation(f"{node!r} keys are not strictly ascending")

        if node.keys:
            if low is not None and not low < node.keys[0]:
                raise InvariantViolation(f"{node!r} has a key not greater than {low!r}")
            if high is not None and not node.keys[-1] < high:
                raise InvariantViolation(f"{node!r} has a key not less than {high!r}")

        if node.is_leaf:
            leaf_depths.add(depth)
            return

        if len(node.children) != len(node.keys) + 1:
            raise InvariantViolation(
                f"{node!r} has {len(node.children)} children for {len(node.keys)} keys"
            )

        bounds = [low] + node.keys + [high]
        for i, child in enumerate(node.children):
            self._validate_node(child, bounds[i], bounds[i + 1], depth + 1, leaf_depths)
