"""Runway reservations kept in a size-augmented binary search tree."""

from __future__ import annotations

from dataclasses import dataclass

_MIN_GAP = 3


@dataclass
class _Reservation:
    time: int
    left: _Reservation | None = None
    right: _Reservation | None = None
    size: int = 1


def _size(node: _Reservation | None) -> int:
    return node.size if node else 0


class RunwaySchedule:
    """Landing times that must lie more than three minutes apart."""

    def __init__(self):
        self._root: _Reservation | None = None

    def __len__(self):
        return _size(self._root)

    def has_conflict(self, time):
        """Return True if an existing reservation is within three minutes of time."""
        node = self._root
        while node:
            if abs(node.time - time) <= _MIN_GAP:
                return True
            node = node.left if time < node.time else node.right
        return False

    def reserve(self, time):
        """Book time unless it conflicts; return whether it was booked."""
        if self.has_conflict(time):
            return False
        self._root = self._insert(self._root, time)
        return True

    def _insert(self, node: _Reservation | None, time: int) -> _Reservation:
        if node is None:
            return _Reservation(time)
        if time < node.time:
            node.left = self._insert(node.left, time)
        else:
            node.right = self._insert(node.right, time)
        node.size = 1 + _size(node.left) + _size(node.right)
        return node

    def count_planes(self, time):
        """Number of reservations at or before time."""
        count = 0
        node = self._root
        while node:
            if node.time <= time:
                count += _size(node.left) + 1
                node = node.right
            else:
                node = node.left
        return count

    def inorder(self):
        """Reserved times in ascending order."""
        result: list[int] = []

        def walk(node: _Reservation | None) -> None:
            if node:
                walk(node.left)
                result.append(node.time)
                walk(node.right)

        walk(self._root)
        return result