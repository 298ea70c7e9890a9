# dstructs

Small, readable implementations of classic data structures, for studying
how they behave. Every traversal and drawing is returned as a list or a
string; nothing is printed.

## What is inside

### `dstructs.graph.Graph`

A directed, weighted graph over single-letter vertex labels (`"A"`, `"B"`,
...). It is held both as adjacency lists and as an adjacency matrix.
`Graph(max_vertices)` accepts labels from `"A"` up to `max_vertices`
letters on. A label outside that range raises `ValueError`.

- `add_vertex(label)` returns `False` if the graph is full or the vertex
  already exists.
- `add_edge(src, dest, weight)` returns `False` unless both vertices exist.
- `remove_edge(src, dest)` removes the newest matching edge and clears the
  matrix cell.
- `bfs_list(start)`, `bfs_matrix(start)`, `dfs_list(start)` and
  `dfs_matrix(start)` return the visiting order as a list of labels.
  - The list traversals follow the newest edges first.
  - The matrix traversals follow lower labels first.
- `has_cycle()` detects a cycle. An edge leading straight back to the vertex
  it was reached from does not count as a cycle.
- `format_list()` returns the adjacency lists as text, for example
  `"A: C(2) B(1) \n"`.
- `format_matrix()` returns the matrix as text.

### `dstructs.heap.Heap`

A binary max-heap of integers with a fixed capacity.

- `insert(value)` returns `False` when the heap is full.
- `delete_max()` returns the removed value, or `None` if the heap is empty.
- `delete(value)` returns whether the value was found.
- `peek()` returns the top value, or `None` if the heap is empty.
- `build(values)` raises `ValueError` if there are more values than the
  capacity.
- `replace(old, new)` returns whether `old` was found.
- `heap_sort(values)` returns the values in ascending order and leaves the
  heap empty.
- `render()` draws the heap sideways as text.
- `switch_min_max()` reorders the heap:
  - into min order if it is currently min-ordered;
  - into max order otherwise.
- `items()` returns the stored values in array order.
- `len(heap)` gives the number of stored values.

### `dstructs.array_bst.ArrayBST`

A binary search tree of distinct integers stored in a fixed-size list, with
the children of slot `i` at `2i+1` and `2i+2`. A value whose slot would fall
past the end is not stored.

- `insert_iterative`, `insert_recursive`, `search_iterative`,
  `search_recursive`
- `preorder`, `inorder`, `postorder`, `bfs`
- `delete`
- `height`, `count_nodes`
- `is_balanced`, which returns `"Yes"`, `"Left-heavy"` or `"Right-heavy"`
  by comparing the heights of the root's two subtrees
- `render`

### `dstructs.linked_bst.LinkedBST`

The same tree operations on linked `Node` objects (`value`, `left`,
`right`): `insert`, `search`, `delete`, `preorder`, `inorder`,
`postorder`, `bfs`, `height`, `count_nodes`, `is_balanced` and `render`.
`search` returns the `Node` holding the value, or `None`.

### `dstructs.runway.RunwaySchedule`

Runway landing reservations kept in a size-augmented search tree.

- `reserve(time)` refuses a time within three minutes of an existing
  reservation and returns whether the time was booked.
- `has_conflict(time)` reports such a clash.
- `count_planes(time)` counts the reservations at or before `time`.
- `inorder()` lists the booked times in ascending order.
- `len(schedule)` gives the number of reservations.

## Installation

```
pip install .
```

## Examples

```python
from dstructs.graph import Graph

g = Graph(4)
for label in "ABCD":
    g.add_vertex(label)
g.add_edge("A", "B", 1)
g.add_edge("A", "C", 2)
g.add_edge("C", "D", 3)
print(g.bfs_matrix("A"))   # ['A', 'B', 'C', 'D']
print(g.format_matrix())
```

```python
from dstructs.heap import Heap

h = Heap(10)
for value in (5, 3, 8, 1):
    h.insert(value)
print(h.peek())                   # 8
print(h.heap_sort([4, 9, 2, 7]))  # [2, 4, 7, 9]
```

```python
from dstructs.linked_bst import LinkedBST

tree = LinkedBST()
for value in (50, 30, 70, 20, 40):
    tree.insert(value)
print(tree.inorder())       # [20, 30, 40, 50, 70]
print(tree.is_balanced())   # "Left-heavy"
```

```python
from dstructs.runway import RunwaySchedule

schedule = RunwaySchedule()
schedule.reserve(41)             # True
schedule.reserve(43)             # False: within three minutes of 41
schedule.reserve(53)             # True
print(schedule.count_planes(50)) # 1
```

## What it does not do

This is a library only:

- There is no command-line program or interactive menu.
- Nothing is saved to disk.
- The structures live in memory for as long as the objects do.

## Running the tests

```
pip install .[test]
pytest
```