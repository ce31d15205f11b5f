#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
rank_tree.py
------------

An ordered set backed by an unbalanced binary search tree whose nodes
track their left subtree population.  That single counter answers rank
queries ("the n‑th largest element") in O(depth).

No self‑balancing is attempted: inserting already sorted data builds a
degenerate tree and every operation degrades to O(n).  The algorithms
are loop based though, so such trees never hit the recursion limit.

Features
~~~~~~~~
* `tree.insert(value)`          – insert (duplicates are silently ignored)
* `tree.find(value)` / `value in tree` – membership test
* `tree.find_min()`, `tree.find_max()` – ``None`` on an empty tree
* `tree.find_n_max(n)`          – n‑th largest value, rank 1 = maximum
* `tree.find_n_min(n)`          – n‑th smallest value
* `tree.delete(value)`          – remove a value (no‑op if absent)
* `tree.delete_subtree(value)`  – remove a value and everything below it
* `tree.get_nodes_count(value)` – size of the subtree rooted at a value
* iteration (`for v in tree:`)  – values in **descending** order
* `tree.ascending()`            – values in ascending order
* `len(tree)`, `bool(tree)`, `tree.validate()`

Typical usage
~~~~~~~~~~~~~
>>> from rank_tree import RankTree
>>> tree = RankTree([3, 22, 8, 55, 26])
>>> tree.find_n_max(1)
55
>>> tree.find_n_max(3)
22
>>> list(tree)
[55, 26, 22, 8, 3]
>>> tree.delete(22)
>>> 22 in tree, len(tree)
(False, 4)
>>> list(tree.ascending())
[3, 8, 26, 55]
"""

from __future__ import annotations

import logging
import operator
from typing import Generic, Iterable, Optional, TypeVar

from rank_node import Node, RankIterator

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RankTree(Generic[T]):
    """
    Thin owner of the optional root :class:`~rank_node.Node`.

    Every operation delegates to the root; the tree itself only deals with
    the empty case and with re‑seating the root after a deletion.
    """

    __slots__ = ("_root",)

    def __init__(self, values: Optional[Iterable[T]] = None) -> None:
        """
        Create an empty tree or optionally fill it from an iterable.

        Parameters
        ----------
        values : iterable   optional
            Each element is passed to ``insert`` in order, so duplicates
            are dropped and the insertion order decides the tree shape.
        """
        self._root: Optional[Node[T]] = None

        if values is not None:
            for value in values:
                self.insert(value)

    # ------------------------------------------------------------------
    #   Container protocol
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        if self._root is None:
            return 0
        return self._root.count_nodes()

    def __bool__(self) -> bool:
        return self._root is not None

    def __contains__(self, value: object) -> bool:
        return self.find(value)  # type: ignore[arg-type]

    def __iter__(self) -> RankIterator[T]:
        """Yield values largest first (rank order)."""
        return self.values()

    def __repr__(self) -> str:
        return f"RankTree({list(self.ascending())!r})"

    # ------------------------------------------------------------------
    #   Mutation
    # ------------------------------------------------------------------
    def insert(self, value: T) -> None:
        if self._root is None:
            self._root = Node(value)
            logger.debug("inserted %r as root", value)
        else:
            self._root.insert(value)

    def delete(self, value: T) -> None:
        """Remove *value*; deleting from an empty tree or a missing value is a no‑op."""
        if self._root is None:
            return
        self._root = self._root.delete(value)

    def delete_subtree(self, value: T) -> None:
        """Remove the node holding *value* and all of its descendants."""
        if self._root is None:
            return
        self._root = self._root.delete_subtree(value)

    # ------------------------------------------------------------------
    #   Queries
    # ------------------------------------------------------------------
    def find(self, value: T) -> bool:
        if self._root is None:
            return False
        return self._root.find(value)

    def find_min(self) -> Optional[T]:
        if self._root is None:
            return None
        return self._root.find_min()

    def find_max(self) -> Optional[T]:
        if self._root is None:
            return None
        return self._root.find_max()

    def find_n_max(self, n: int) -> Optional[T]:
        """
        Return the *n*‑th largest value.

        ``find_n_max(1)`` is the maximum; ``0`` or a rank beyond the
        population gives ``None``.
        """
        n = operator.index(n)
        if self._root is None or n == 0:
            return None
        return self._root.find_n_max(n)

    def find_n_min(self, n: int) -> Optional[T]:
        """Return the *n*‑th smallest value, ``None`` when out of range."""
        n = operator.index(n)
        if self._root is None or n == 0:
            return None
        return self._root.find_n_min(n)

    def get_nodes_count(self, value: T) -> Optional[int]:
        if self._root is None:
            return None
        return self._root.get_nodes_count(value)

    # ------------------------------------------------------------------
    #   Iteration
    # ------------------------------------------------------------------
    def values(self) -> RankIterator[T]:
        """
        Return a fresh iterator over all values in **descending** order.

        Rank 1 is the largest value, so walking ranks 1, 2, 3, ... visits
        the tree from the top down.  An empty tree yields nothing.
        """
        return RankIterator(self._root)

    def ascending(self) -> RankIterator[T]:
        """Return a fresh iterator over all values, smallest first."""
        return RankIterator(self._root, ascending=True)

    # ------------------------------------------------------------------
    #   Debugging
    # ------------------------------------------------------------------
    def validate(self) -> None:
        """Raise ``AssertionError`` if ordering or any left count is broken."""
        if self._root is not None:
            self._root.validate()
