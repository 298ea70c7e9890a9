"""Fixed-capacity binary max-heap stored in a list."""

from __future__ import annotations


def _left(index: int) -> int:
    return 2 * index + 1


def _right(index: int) -> int:
    return 2 * index + 2


def _parent(index: int) -> int:
    return (index - 1) // 2


class Heap:
    """Binary max-heap holding at most ``capacity`` integers."""

    def __init__(self, capacity):
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._array: list[int] = []

    def __len__(self):
        return len(self._array)

    def _sift_up(self, index: int) -> None:
        a = self._array
        while index > 0 and a[_parent(index)] < a[index]:
            p = _parent(index)
            a[p], a[index] = a[index], a[p]
            index = p

    def _sift_down(self, index: int, *, minimum: bool = False) -> None:
        a = self._array
        size = len(a)

        def before(x: int, y: int) -> bool:
            return x < y if minimum else x > y

        while True:
            best = index
            for child in (_left(index), _right(index)):
                if child < size and before(a[child], a[best]):
                    best = child
            if best == index:
                return
            a[index], a[best] = a[best], a[index]
            index = best

    def _heapify(self, *, minimum: bool = False) -> None:
        for index in reversed(range(len(self._array) // 2)):
            self._sift_down(index, minimum=minimum)

    def insert(self, value):
        """Insert a value; return False if the heap is full."""
        if len(self._array) == self.capacity:
            return False
        self._array.append(value)
        self._sift_up(len(self._array) - 1)
        return True

    def delete_max(self):
        """Remove and return the largest value, or None if the heap is empty."""
        if not self._array:
            return None
        top = self._array[0]
        last = self._array.pop()
        if self._array:
            self._array[0] = last
            self._sift_down(0)
        return top

    def delete(self, value):
        """Remove the first stored occurrence of value; return whether it was found."""
        try:
            index = self._array.index(value)
        except ValueError:
            return False
        last = self._array.pop()
        if index < len(self._array):
            self._array[index] = last
            self._sift_down(index)
        return True

    def peek(self):
        """Return the top value without removing it, or None if empty."""
        return self._array[0] if self._array else None

    def build(self, values):
        """Replace the contents with values and restore heap order."""
        values = list(values)
        if len(values) > self.capacity:
            raise ValueError("more values than the heap's capacity")
        self._array = values
        self._heapify()

    def replace(self, old, new):
        """Replace the first occurrence of old with new; return whether it was found."""
        try:
            index = self._array.index(old)
        except ValueError:
            return False
        self._array[index] = new
        if index > 0 and new > self._array[_parent(index)]:
            self._sift_up(index)
        else:
            self._sift_down(index)
        return True

    def heap_sort(self, values):
        """Return values in ascending order; the heap is left empty."""
        self.build(values)
        result = []
        while self._array:
            result.append(self.delete_max())
        result.reverse()
        return result

    def render(self):
        """Sideways drawing: right subtree above, three spaces per level."""
        lines: list[str] = []

        def walk(index: int, depth: int) -> None:
            if index >= len(self._array):
                return
            walk(_right(index), depth + 1)
            lines.append("   " * depth + f"{self._array[index]}\n")
            walk(_left(index), depth + 1)

        walk(0, 0)
        return "".join(lines)

    def switch_min_max(self):
        """Re-heapify in min order if every child is at least its parent, else in max order."""
        a = self._array
        min_ordered = all(a[i] >= a[_parent(i)] for i in range(1, len(a)))
        self._heapify(minimum=min_ordered)

    def items(self):
        """Return the stored values in array order."""
        return list(self._array)