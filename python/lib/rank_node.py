#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
rank_node.py
------------

The node layer of an (unbalanced) binary search tree augmented with
order statistics.  Every node remembers how many nodes live in its left
subtree (``left_count``), which turns "give me the n‑th element" into a
single O(depth) descent instead of a full scan.

Features
~~~~~~~~
* `node.insert(value)`            – idempotent insert (duplicates ignored)
* `node.find(value)`              – membership test
* `node.find_min()`, `node.find_max()`
* `node.find_n_max(n)`            – n‑th largest value (rank 1 = maximum)
* `node.find_n_min(k)`            – k‑th smallest value
* `node.delete(value)`            – remove one value, returns the new subtree root
* `node.delete_subtree(value)`    – remove a value together with its descendants
* `node.values()` / `node.ascending()` – lazy rank‑driven iterators
* `node.validate()`               – sanity‑check order and every ``left_count``

All algorithms walk the child links with plain loops, so a degenerate
(sorted‑insertion) tree never runs into the interpreter's recursion limit.

Typical usage
~~~~~~~~~~~~~
>>> from rank_node import Node
>>> root = Node(8)
>>> root.insert(5)
True
>>> root.insert(5)
False
>>> for v in (15, 3, 12):
...     _ = root.insert(v)
>>> root.find_n_max(1), root.find_n_min(1)
(15, 3)
>>> list(root.values())
[15, 12, 8, 5, 3]
>>> root = root.delete(8)
>>> list(root.ascending())
[3, 5, 12, 15]
"""

from __future__ import annotations

import logging
import operator
from typing import Dict, Generic, List, Optional, Tuple, TypeVar

logger = logging.getLogger(__name__)

# ----------------------------------------------------------------------
#  Type variable (values must be totally ordered)
# ----------------------------------------------------------------------
T = TypeVar("T")

# Marker for a missing lower / upper bound while validating.
_UNBOUNDED = object()


class Node(Generic[T]):
    """
    A single tree node owning up to two child subtrees.

    ``left_count`` always equals the population of ``left`` (0 when there
    is no left child).  Consequently a node is the ``left_count + 1``‑th
    smallest value of its own subtree.

    Structural operations that may remove the node itself (``delete``,
    ``delete_subtree``) return the root of the resulting subtree, and the
    caller re‑attaches it where the old root used to hang.
    """

    __slots__ = ("value", "left", "right", "left_count")

    def __init__(self, value: T) -> None:
        self.value = value
        self.left: Optional[Node[T]] = None
        self.right: Optional[Node[T]] = None
        self.left_count: int = 0

    def __repr__(self) -> str:
        return f"<Node {self.value!r} left_count={self.left_count}>"

    def get_value(self) -> T:
        return self.value

    def is_leaf(self) -> bool:
        """True when the node has no children."""
        return self.left is None and self.right is None

    # ------------------------------------------------------------------
    #   Look‑up
    # ------------------------------------------------------------------
    def _search_node(self, value: T) -> Optional[Node[T]]:
        """Return the node holding *value* or ``None`` if it is absent."""
        cur: Optional[Node[T]] = self
        while cur is not None:
            if value == cur.value:
                return cur
            elif value < cur.value:
                cur = cur.left
            else:
                cur = cur.right
        return None

    def find(self, value: T) -> bool:
        return self._search_node(value) is not None

    def find_min(self) -> T:
        """Return the smallest value of the subtree."""
        node = self
        while node.left is not None:
            node = node.left
        return node.value

    def find_max(self) -> T:
        """Return the largest value of the subtree."""
        node = self
        while node.right is not None:
            node = node.right
        return node.value

    def count_nodes(self) -> int:
        """
        Population of the subtree rooted here.

        Only the right spine is visited: every spine node accounts for
        itself plus its whole left subtree via ``left_count``.
        """
        total = 0
        cur: Optional[Node[T]] = self
        while cur is not None:
            total += cur.left_count + 1
            cur = cur.right
        return total

    def get_nodes_count(self, value: T) -> Optional[int]:
        """Population of the subtree rooted at *value*, ``None`` if absent."""
        node = self._search_node(value)
        if node is None:
            return None
        return node.count_nodes()

    # ------------------------------------------------------------------
    #   Order statistics
    # ------------------------------------------------------------------
    def find_n_min(self, k: int) -> Optional[T]:
        """
        Return the *k*‑th smallest value (1‑indexed) or ``None``.

        At each node with ``c = left_count``: ``k == c + 1`` is the node
        itself, ``k <= c`` lies in the left subtree, anything larger lies
        in the right subtree at position ``k - c - 1``.
        """
        k = operator.index(k)
        if k < 1:
            return None
        cur: Optional[Node[T]] = self
        while cur is not None:
            c = cur.left_count
            if k == c + 1:
                return cur.value
            if k <= c:
                cur = cur.left
            else:
                k -= c + 1
                cur = cur.right
        return None

    def find_n_max(self, n: int) -> Optional[T]:
        """
        Return the *n*‑th largest value (rank 1 is the maximum) or ``None``.

        The rank is mirrored onto an ascending position using the subtree
        population, so the whole query stays O(depth).
        """
        n = operator.index(n)
        size = self.count_nodes()
        if n < 1 or n > size:
            return None
        return self.find_n_min(size - n + 1)

    # ------------------------------------------------------------------
    #   Insertion
    # ------------------------------------------------------------------
    def insert(self, value: T) -> bool:
        """
        Insert *value* below this node.

        Returns ``False`` (and leaves every counter untouched) when the
        value is already present, ``True`` when a new leaf was attached.
        """
        if self.find(value):
            return False

        cur = self
        while True:
            if value < cur.value:
                cur.left_count += 1
                if cur.left is None:
                    cur.left = Node(value)
                    break
                cur = cur.left
            else:
                if cur.right is None:
                    cur.right = Node(value)
                    break
                cur = cur.right

        logger.debug("inserted %r", value)
        return True

    # ------------------------------------------------------------------
    #   Deletion
    # ------------------------------------------------------------------
    def delete(self, value: T) -> Optional[Node[T]]:
        """
        Remove *value* from the subtree and return the new subtree root.

        ``None`` is returned once the subtree becomes empty.  Deleting a
        missing value changes nothing and returns ``self``.
        """
        if not self.find(value):
            return self

        parent: Optional[Node[T]] = None
        cur = self
        while value != cur.value:
            parent = cur
            if value < cur.value:
                # the value is about to leave this node's left subtree
                cur.left_count -= 1
                cur = cur.left
            else:
                cur = cur.right

        replacement = cur._splice()
        logger.debug("deleted %r", value)

        if parent is None:
            return replacement
        if parent.left is cur:
            parent.left = replacement
        else:
            parent.right = replacement
        return self

    def _splice(self) -> Optional[Node[T]]:
        """
        Drop this node's own value and return what takes its place.

        A leaf simply disappears.  Otherwise the value is replaced by the
        in‑order successor (when a right subtree exists) or predecessor,
        and that descendant is cut out, its only child moving up.
        """
        if self.right is not None:
            parent = self
            succ = self.right
            while succ.left is not None:
                succ.left_count -= 1
                parent = succ
                succ = succ.left
            if parent is self:
                self.right = succ.right
            else:
                parent.left = succ.right
            self.value = succ.value
            return self

        if self.left is not None:
            parent = self
            pred = self.left
            while pred.right is not None:
                parent = pred
                pred = pred.right
            if parent is self:
                self.left = pred.left
            else:
                parent.right = pred.left
            self.left_count -= 1
            self.value = pred.value
            return self

        return None

    def delete_subtree(self, value: T) -> Optional[Node[T]]:
        """
        Remove the node holding *value* together with all its descendants.

        Returns the new subtree root (``None`` when *value* is held by this
        very node).  A missing value is a no‑op.
        """
        target = self._search_node(value)
        if target is None:
            return self
        if target is self:
            logger.debug("dropped subtree at %r", value)
            return None

        removed = target.count_nodes()
        parent = self
        cur = self
        while cur is not target:
            parent = cur
            if value < cur.value:
                cur.left_count -= removed
                cur = cur.left
            else:
                cur = cur.right

        if parent.left is target:
            parent.left = None
        else:
            parent.right = None
        logger.debug("dropped subtree at %r (%d nodes)", value, removed)
        return self

    # ------------------------------------------------------------------
    #   Iteration
    # ------------------------------------------------------------------
    def values(self) -> RankIterator[T]:
        """Fresh iterator over the subtree, largest value first."""
        return RankIterator(self)

    def ascending(self) -> RankIterator[T]:
        """Fresh iterator over the subtree, smallest value first."""
        return RankIterator(self, ascending=True)

    def __iter__(self) -> RankIterator[T]:
        return self.values()

    # ------------------------------------------------------------------
    #   Validation – useful for debugging
    # ------------------------------------------------------------------
    def validate(self) -> None:
        """
        Verify BST ordering and that every ``left_count`` matches the real
        left subtree population.  Raises ``AssertionError`` on the first
        violation found.
        """
        sizes: Dict[int, int] = {}
        stack: List[Tuple[Node[T], object, object, bool]] = [
            (self, _UNBOUNDED, _UNBOUNDED, False)
        ]
        while stack:
            node, low, high, expanded = stack.pop()
            if expanded:
                left_size = sizes.pop(id(node.left)) if node.left is not None else 0
                right_size = sizes.pop(id(node.right)) if node.right is not None else 0
                assert node.left_count == left_size, (
                    f"left_count of {node.value!r} is {node.left_count}, "
                    f"left subtree holds {left_size}"
                )
                sizes[id(node)] = left_size + right_size + 1
                continue

            if low is not _UNBOUNDED:
                assert low < node.value, "BST property violated (value left of its bound)"
            if high is not _UNBOUNDED:
                assert node.value < high, "BST property violated (value right of its bound)"

            stack.append((node, low, high, True))
            if node.left is not None:
                stack.append((node.left, low, node.value, False))
            if node.right is not None:
                stack.append((node.right, node.value, high, False))


class RankIterator(Generic[T]):
    """
    Iterator that walks a subtree by rank instead of keeping a stack.

    Step *k* asks the start node for its *k*‑th largest (or smallest) value,
    so each step costs O(depth).  Rank 1 is the largest value, which makes
    the default order **descending**; pass ``ascending=True`` for the
    classic in‑order direction.

    Every call to ``Node.values()`` creates a new iterator, so a sequence
    can be restarted at will.  Mutating the tree while an iterator is alive
    does not raise; later steps just answer rank queries on the new shape.
    """

    __slots__ = ("_node", "_counter", "_ascending")

    def __init__(self, node: Optional[Node[T]], ascending: bool = False) -> None:
        self._node = node
        self._counter = 1
        self._ascending = ascending

    def __iter__(self) -> RankIterator[T]:
        return self

    def __next__(self) -> T:
        if self._node is None:
            raise StopIteration
        if self._ascending:
            value = self._node.find_n_min(self._counter)
        else:
            value = self._node.find_n_max(self._counter)
        if value is None:
            # stay exhausted even if the tree grows later
            self._node = None
            raise StopIteration
        self._counter += 1
        return value

    def __length_hint__(self) -> int:
        if self._node is None:
            return 0
        return max(self._node.count_nodes() - self._counter + 1, 0)
