"""Josephus elimination orders and the order-statistic tree behind them."""

from collections import deque


class _Node:
    __slots__ = ("value", "left", "right", "height", "size")

    def __init__(self, value):
        self.value = value
        self.left = None
        self.right = None
        self.height = 0
        self.size = 1


def _height(node):
    return -1 if node is None else node.height


def _size(node):
    return 0 if node is None else node.size


def _balance_factor(node):
    return _height(node.right) - _height(node.left)


def _update(node):
    node.height = 1 + max(_height(node.left), _height(node.right))
    node.size = 1 + _size(node.left) + _size(node.right)


def _rotate_left(node):
    parent = node.right
    node.right = parent.left
    parent.left = node
    _update(node)
    _update(parent)
    return parent


def _rotate_right(node):
    parent = node.left
    node.left = parent.right
    parent.right = node
    _update(node)
    _update(parent)
    return parent


def _rebalance(node):
    _update(node)
    factor = _balance_factor(node)
    if factor == -2:
        if _balance_factor(node.left) > 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if factor == 2:
        if _balance_factor(node.right) < 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _insert(node, value):
    if node is None:
        return _Node(value)
    if value < node.value:
        node.left = _insert(node.left, value)
    else:
        node.right = _insert(node.right, value)
    return _rebalance(node)


def _leftmost(node):
    while node.left is not None:
        node = node.left
    return node.value


def _rightmost(node):
    while node.right is not None:
        node = node.right
    return node.value


def _remove(node, value):
    if value < node.value:
        node.left = _remove(node.left, value)
    elif value > node.value:
        node.right = _remove(node.right, value)
    elif node.left is None:
        return node.right
    elif node.right is None:
        return node.left
    elif node.left.height > node.right.height:
        node.value = _rightmost(node.left)
        node.left = _remove(node.left, node.value)
    else:
        node.value = _leftmost(node.right)
        node.right = _remove(node.right, node.value)
    return _rebalance(node)


class OrderStatisticTree:
    """A balanced search tree of distinct values that can look values up by rank."""

    def __init__(self):
        self._root = None

    def __len__(self):
        return _size(self._root)

    def __contains__(self, value):
        node = self._root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def __iter__(self):
        stack = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def insert(self, value):
        """Add ``value``; adding a value already present changes nothing."""
        if value not in self:
            self._root = _insert(self._root, value)

    def remove(self, value):
        """Remove ``value``, raising KeyError when it is absent."""
        if value not in self:
            raise KeyError(value)
        self._root = _remove(self._root, value)

    def find_by_order(self, position):
        """Return the value with the given 0-based rank."""
        if not 0 <= position < len(self):
            raise IndexError(f"position {position} is out of range")
        node = self._root
        while True:
            left = _size(node.left)
            if position < left:
                node = node.left
            elif position > left:
                position -= left + 1
                node = node.right
            else:
                return node.value


def josephus_i(n):
    """Return the removal order when every second child of 1..n leaves the circle."""
    circle = deque(range(1, n + 1))
    order = []
    while circle:
        circle.rotate(-1)
        order.append(circle.popleft())
    return order


def josephus_ii(n, k):
    """Return the removal order when every (k+1)-th child of 1..n leaves the circle."""
    tree = OrderStatisticTree()
    for child in range(1, n + 1):
        tree.insert(child)
    order = []
    position = 0
    while len(tree):
        position = (position + k) % len(tree)
        child = tree.find_by_order(position)
        order.append(child)
        tree.remove(child)
    return order