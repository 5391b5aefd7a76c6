"""
A single node of the B-tree along with the recursive mechanics that keep the
tree balanced: splitting on the way down for inserts, and borrowing / merging
on the way back up for deletes.

A node with minimum degree `D` holds a sorted list of keys and, when it isn't
a leaf, exactly one more child than it has keys. Every element of
`children[i]` sorts between `keys[i - 1]` and `keys[i]`.
"""
import logging
from bisect import bisect_left

logger = logging.getLogger(__name__)


class KeyNotFound(KeyError):
    pass


class MalformedTree(Exception):
    pass


class Node:
    def __init__(self, order, keys=None, children=None):
        self.order = order
        self.keys = keys if keys is not None else []
        self.children = children if children is not None else []

    def __repr__(self):
        return f"Node(keys={self.keys!r}, children={len(self.children)})"

    def __len__(self):
        return len(self.keys) + sum(len(child) for child in self.children)

    @property
    def is_leaf(self):
        return not self.children

    @property
    def is_full(self):
        return len(self.keys) >= 2 * self.order - 1

    @property
    def is_underfull(self):
        return len(self.keys) < self.order - 1

    @property
    def can_spare(self):
        """
        True when a key can be removed without dropping below the minimum
        occupancy.
        """
        return len(self.keys) >= self.order

    def depth(self):
        depth = 0
        node = self
        while not node.is_leaf:
            node = node.children[0]
            depth += 1
        return depth

    def find_key(self, value):
        """
        Returns `(index, found)`. When `found` is False, `index` is the position
        `value` would be inserted at, which is also the child to descend into.
        """
        index = bisect_left(self.keys, value)
        found = index < len(self.keys) and self.keys[index] == value
        return index, found

    def insert(self, value):
        index, found = self.find_key(value)
        if found:
            return

        if self.is_leaf:
            self.keys.insert(index, value)
            return

        if self.children[index].is_full:
            self.split(index)
            if value == self.keys[index]:
                # the promoted median was the value being inserted
                return
            if value > self.keys[index]:
                index += 1

        self.children[index].insert(value)

    def split(self, index):
        """
        Splits the full child at `index` into two nodes around its median key,
        which moves up into this node.
        """
        child = self.children[index]
        mid = self.order - 1

        left = Node(self.order, keys=child.keys[:mid])
        right = Node(self.order, keys=child.keys[mid + 1 :])
        if not child.is_leaf:
            left.children = child.children[: self.order]
            right.children = child.children[self.order :]

        self.keys.insert(index, child.keys[mid])
        self.children[index] = left
        self.children.insert(index + 1, right)
        logger.debug("split child %d around %r", index, child.keys[mid])

    def delete_key(self, value):
        index, found = self.find_key(value)
        if found:
            del self.keys[index]
        return found

    def delete_intermediate(self, value):
        """
        Removes `value` from the subtree rooted at this node. A key held by an
        internal node is replaced by its in-order predecessor. Every child
        descended into is rebalanced on the way back up, so this node itself
        may be left underfull for its parent to fix.

        Nothing is modified when `value` is absent.
        """
        index, found = self.find_key(value)
        if found:
            if self.is_leaf:
                del self.keys[index]
            else:
                self.take_left_max(index)
            return

        if self.is_leaf:
            raise KeyNotFound(value)

        try:
            child = self.children[index]
        except IndexError:
            raise MalformedTree(f"{self!r} has no child at index {index}") from None

        child.delete_intermediate(value)
        self.rebalance(index)

    def take_left_max(self, index):
        """
        Replaces `keys[index]` with the largest key of the subtree to its left,
        removing it from that subtree, and returns it.
        """
        predecessor = self.children[index].pop_max()
        self.keys[index] = predecessor
        self.rebalance(index)
        return predecessor

    def pop_max(self):
        if self.is_leaf:
            return self.keys.pop()

        last = len(self.keys)
        value = self.children[last].pop_max()
        self.rebalance(last)
        return value

    def rebalance(self, index):
        """
        Restores the minimum occupancy of the child at `index`, borrowing from
        the right sibling, or the left one for the last child. Returns the node
        now holding the child's keys.
        """
        child = self.children[index]
        if not child.is_underfull:
            return child

        if index == len(self.keys):
            return self.pivot_right(index - 1)
        return self.pivot_left(index)

    def pivot_left(self, index):
        """
        Rotates the smallest key of `children[index + 1]` up through the
        separator into `children[index]`.
        """
        left = self.children[index]
        right = self.children[index + 1]
        if not right.can_spare:
            return self.merge_right(index)

        left.keys.append(self.keys[index])
        self.keys[index] = right.keys.pop(0)
        if not right.is_leaf:
            left.children.append(right.children.pop(0))

        logger.debug("rotated %r up from child %d", self.keys[index], index + 1)
        return left

    def pivot_right(self, index):
        """
        Inverse of `pivot_left`: moves the largest key of `children[index]`
        through the separator into `children[index + 1]`.
        """
        left = self.children[index]
        right = self.children[index + 1]
        if not left.can_spare:
            return self.merge_left(index)

        right.keys.insert(0, self.keys[index])
        self.keys[index] = left.keys.pop()
        if not left.is_leaf:
            right.children.insert(0, left.children.pop())

        logger.debug("rotated %r up from child %d", self.keys[index], index)
        return right

    def merge_right(self, index):
        """
        Folds `children[index]` and the separator `keys[index]` into the front
        of `children[index + 1]`, which takes the merged slot.

        If this removes the last key, this node is left with the merged node as
        its only child and whoever owns this node must promote it.
        """
        left = self.children.pop(index)
        right = self.children[index]
        separator = self.keys.pop(index)

        right.keys[:0] = left.keys + [separator]
        right.children[:0] = left.children

        logger.debug("merged child %d into its right sibling", index)
        return right

    def merge_left(self, index):
        """
        Same as `merge_right` but `children[index]` absorbs its right sibling.
        """
        right = self.children.pop(index + 1)
        left = self.children[index]
        separator = self.keys.pop(index)

        left.keys.append(separator)
        left.keys.extend(right.keys)
        left.children.extend(right.children)

        logger.debug("merged child %d into its left sibling", index + 1)
        return left
