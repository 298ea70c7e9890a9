"""Binary search tree built from linked nodes."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass


@dataclass
class Node:
    """A tree node with its value and child links."""

    value: int
    left: Node | None = None
    right: Node | None = None


def _height(node: Node | None) -> int:
    if node is None:
        return -1
    return max(_height(node.left), _height(node.right)) + 1


class LinkedBST:
    """Binary search tree of distinct integers."""

    def __init__(self):
        self.root: Node | None = None

    def insert(self, value):
        """Insert value; return False if it was already present."""
        if self.root is None:
            self.root = Node(value)
            return True
        node = self.root
        while True:
            if value == node.value:
                return False
            if value < node.value:
                if node.left is None:
                    node.left = Node(value)
                    return True
                node = node.left
            else:
                if node.right is None:
                    node.right = Node(value)
                    return True
                node = node.right

    def search(self, value):
        """Return the node holding value, or None."""
        node = self.root
        while node is not None and node.value != value:
            node = node.left if value < node.value else node.right
        return node

    def delete(self, value):
        """Remove value; return whether it was present."""
        removed = False

        def remove(node: Node | None, target: int) -> Node | None:
            nonlocal removed
            if node is None:
                return None
            if target < node.value:
                node.left = remove(node.left, target)
            elif target > node.value:
                node.right = remove(node.right, target)
            else:
                removed = True
                if node.left is None:
                    return node.right
                if node.right is None:
                    return node.left
                succ = node.right
                while succ.left is not None:
                    succ = succ.left
                node.value = succ.value
                node.right = remove(node.right, succ.value)
            return node

        self.root = remove(self.root, value)
        return removed

    def _walk(self, order: str) -> list[int]:
        result: list[int] = []

        def visit(node: Node | None) -> None:
            if node is None:
                return
            if order == "pre":
                result.append(node.value)
            visit(node.left)
            if order == "in":
                result.append(node.value)
            visit(node.right)
            if order == "post":
                result.append(node.value)

        visit(self.root)
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
        """Sideways drawing: right subtree above, five spaces per level, blank line before each value."""
        parts: list[str] = []

        def draw(node: Node | None, depth: int) -> None:
            if node is None:
                return
            draw(node.right, depth + 1)
            parts.append("\n" + " " * (5 * depth) + f"{node.value}\n")
            draw(node.left, depth + 1)

        draw(self.root, 0)
        return "".join(parts)

    def height(self):
        """Edges on the longest root-to-leaf path; -1 for an empty tree."""
        return _height(self.root)

    def count_nodes(self):
        """Number of stored values."""
        return len(self._walk("in"))

    def is_balanced(self):
        """Compare the heights of the root's subtrees: 'Yes', 'Left-heavy' or 'Right-heavy'."""
        if self.root is None:
            return "Yes"
        lh = _height(self.root.left)
        rh = _height(self.root.right)
        if lh == rh:
            return "Yes"
        return "Left-heavy" if lh > rh else "Right-heavy"

    def bfs(self):
        """Values in level order."""
        if self.root is None:
            return []
        result = []
        queue = deque([self.root])
        while queue:
            node = queue.popleft()
            result.append(node.value)
            for child in (node.left, node.right):
                if child is not None:
                    queue.append(child)
        return result