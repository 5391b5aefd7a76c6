class TreeIterator:
    """
    Lazy in-order traversal of a `BTree`.

    Rather than recursing, an explicit stack of `(index, node)` frames is kept
    where `index` is the next key of `node` to emit. The leftmost path of a
    subtree is pushed before any of its keys are emitted, so the top of the
    stack is always the node holding the next smallest key.

    The tree must not be modified while an iterator over it is in use.
    """

    def __init__(self, tree):
        self.stack = []
        self._push(tree.root)

    def _push(self, node):
        while True:
            self.stack.append((0, node))
            if node.is_leaf:
                return
            node = node.children[0]

    def __iter__(self):
        return self

    def __next__(self):
        while self.stack:
            index, node = self.stack.pop()
            if index < len(node.keys):
                self.stack.append((index + 1, node))
                if not node.is_leaf:
                    self._push(node.children[index + 1])
                return node.keys[index]

        raise StopIteration
