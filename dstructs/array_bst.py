"""Binary search tree stored in a fixed-size list, children at 2i+1 and 2i+2."""

from __future__ import annotations

from collections import deque


def _left(index: int) -> int:
    return 2 * index + 1


def _right(index: int) -> int:
    return 2 * index + 2


class ArrayBST:
    """Binary search tree of distinct integers in ``capacity`` array slots.

    A value whose position would fall beyond the last slot is not stored.
    """

    def __init__(self, capacity):
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._tree: list[int | None] = [None] * capacity

    def _occupied(self, index: int) -> bool:
        return index < self.capacity and self._tree[index] is not None

    def insert_iterative(self, value):
        """Insert value with a loop; return whether it was stored."""
        index = 0
        while index < self.capacity:
            current = self._tree[index]
            if current is None:
                self._tree[index] = value
                return True
            if value == current:
                return False
            index = _left(index) if value < current else _right(index)
        return False

    def insert_recursive(self, value):
        """Insert value by recursion; return whether it was stored."""

        def place(index: int) -> bool:
            if index >= self.capacity:
                return False
            current = self._tree[index]
            if current is None:
                self._tree[index] = value
                return True
            if value == current:
                return False
            return place(_left(index) if value < current else _right(index))

        return place(0)

    def _find(self, value: int) -> int | None:
        index = 0
        while self._occupied(index):
            current = self._tree[index]
            if current == value:
                return index
            index = _left(index) if value < current else _right(index)
        return None

    def search_iterative(self, value):
        """Return whether value is stored, searching with a loop."""
        return self._find(value) is not None

    def search_recursive(self, value):
        """Return whether value is stored, searching by recursion."""

        def look(index: int) -> bool:
            if not self._occupied(index):
                return False
            current = self._tree[index]
            if current == value:
                return True
            return look(_left(index) if value < current else _right(index))

        return look(0)

    def _walk(self, order: str) -> list[int]:
        result: list[int] = []

        def visit(index: int) -> None:
            if not self._occupied(index):
                return
            if order == "pre":
                result.append(self._tree[index])
            visit(_left(index))
            if order == "in":
                result.append(self._tree[index])
            visit(_right(index))
            if order == "post":
                result.append(self._tree[index])

        visit(0)
        return result

    def preorder(self):
        """Values in root, left, right order."""
        return self._walk("pre")

    def inorder(self):
        """Values in ascending order."""
        return self._walk("in")

    def postorder(self):
        """Values in left, right, root order."""
        return self._walk("post")

    def render(self):
        """Sideways drawing: right subtree above, three spaces per level."""
        lines: list[str] = []

        def draw(index: int, depth: int) -> None:
            if not self._occupied(index):
                return
            draw(_right(index), depth + 1)
            lines.append("   " * depth + f"{self._tree[index]}\n")
            draw(_left(index), depth + 1)

        draw(0, 0)
        return "".join(lines)

    def _height(self, index: int) -> int:
        if not self._occupied(index):
            return -1
        return max(self._height(_left(index)), self._height(_right(index))) + 1

    def height(self):
        """Edges on the longest root-to-leaf path; -1 for an empty tree."""
        return self._height(0)

    def count_nodes(self):
        """Number of stored values."""
        return sum(value is not None for value in self._tree)

    def is_balanced(self):
        """Compare the heights of the root's subtrees: 'Yes', 'Left-heavy' or 'Right-heavy'."""
        lh = self._height(_left(0))
        rh = self._height(_right(0))
        if lh == rh:
            return "Yes"
        return "Left-heavy" if lh > rh else "Right-heavy"

    def _remove_at(self, index: int) -> None:
        left, right = _left(index), _right(index)
        if self._occupied(right):
            succ = right
            while self._occupied(_left(succ)):
                succ = _left(succ)
            self._tree[index] = self._tree[succ]
            self._remove_at(succ)
        elif self._occupied(left):
            pred = left
            while self._occupied(_right(pred)):
                pred = _right(pred)
            self._tree[index] = self._tree[pred]
            self._remove_at(pred)
        else:
            self._tree[index] = None

    def delete(self, value):
        """Remove value; return whether it was present."""
        index = self._find(value)
        if index is None:
            return False
        self._remove_at(index)
        return True

    def bfs(self):
        """Values in level order."""
        if not self._occupied(0):
            return []
        result = []
        queue = deque([0])
        while queue:
            index = queue.popleft()
            result.append(self._tree[index])
            for child in (_left(index), _right(index)):
                if self._occupied(child):
                    queue.append(child)
        return result