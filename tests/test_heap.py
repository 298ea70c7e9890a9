import pytest

from dstructs.heap import Heap

SAMPLES = [
    [5, 3, 17, 10, 84, 19, 6, 22, 9],
    [1, 2, 3, 4, 5, 6],
    [42],
    [7, 7, 3, 7, 1],
]


def is_max_heap(values):
    return all(values[i] <= values[(i - 1) // 2] for i in range(1, len(values)))


def filled(values, capacity=20):
    heap = Heap(capacity)
    for value in values:
        heap.insert(value)
    return heap


@pytest.mark.parametrize("values", SAMPLES)
def test_insert_keeps_max_order(values):
    heap = filled(values)
    assert is_max_heap(heap.items())
    assert heap.peek() == max(values)
    assert len(heap) == len(values)


@pytest.mark.parametrize("values", SAMPLES)
def test_build_keeps_max_order(values):
    heap = Heap(20)
    heap.build(values)
    assert is_max_heap(heap.items())
    assert sorted(heap.items()) == sorted(values)


@pytest.mark.parametrize("values", SAMPLES)
def test_heap_sort_sorts_and_empties(values):
    heap = Heap(20)
    assert heap.heap_sort(values) == sorted(values)
    assert len(heap) == 0


@pytest.mark.parametrize("values", SAMPLES)
def test_delete_max_yields_descending(values):
    heap = filled(values)
    drained = [heap.delete_max() for _ in values]
    assert drained == sorted(values, reverse=True)
    assert heap.delete_max() is None


def test_peek_empty_is_none():
    assert Heap(3).peek() is None


def test_insert_into_full_heap():
    heap = filled([1, 2], capacity=2)
    assert heap.insert(3) is False
    assert sorted(heap.items()) == [1, 2]


def test_build_over_capacity_raises():
    with pytest.raises(ValueError):
        Heap(2).build([1, 2, 3])


def test_delete_value():
    values = [5, 3, 17, 10, 84, 19, 6, 22, 9]
    heap = filled(values)
    assert heap.delete(17) is True
    assert 17 not in heap.items()
    assert len(heap) == len(values) - 1


def test_delete_last_slot():
    heap = filled([10, 5])
    assert heap.delete(5) is True
    assert heap.items() == [10]


def test_delete_absent_value():
    heap = filled([1, 2, 3])
    assert heap.delete(99) is False
    assert len(heap) == 3


@pytest.mark.parametrize("old,new", [(3, 100), (84, 0), (19, 20)])
def test_replace_keeps_order(old, new):
    heap = filled([5, 3, 17, 10, 84, 19, 6, 22, 9])
    assert heap.replace(old, new) is True
    assert new in heap.items()
    assert is_max_heap(heap.items())


def test_replace_absent_value():
    heap = filled([1, 2])
    assert heap.replace(5, 6) is False
    assert sorted(heap.items()) == [1, 2]


def test_render_places_root_without_indent():
    values = [5, 3, 17, 10, 84]
    heap = filled(values)
    lines = heap.render().splitlines()
    assert len(lines) == len(values)
    unindented = [line for line in lines if not line.startswith(" ")]
    assert unindented == [str(max(values))]


def test_render_single_value():
    assert filled([42]).render() == "42\n"


def test_switch_min_max_on_max_heap_keeps_values_and_order():
    values = [5, 3, 17, 10, 84, 19]
    heap = filled(values)
    heap.switch_min_max()
    assert sorted(heap.items()) == sorted(values)
    assert is_max_heap(heap.items())