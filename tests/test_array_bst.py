import pytest

from dstructs.array_bst import ArrayBST

LEVEL = [40, 20, 60, 10, 30, 50, 70]


def make(values, capacity=63, recursive=False):
    tree = ArrayBST(capacity)
    for v in values:
        (tree.insert_recursive if recursive else tree.insert_iterative)(v)
    return tree


@pytest.mark.parametrize("recursive", [False, True])
def test_inorder_sorted_and_search(recursive):
    values = [15, 8, 25, 3, 12, 20, 30]
    tree = make(values, recursive=recursive)
    assert tree.inorder() == sorted(values)
    for v in values:
        assert tree.search_iterative(v)
        assert tree.search_recursive(v)
    assert not tree.search_iterative(99)
    assert not tree.search_recursive(99)


def test_duplicates_ignored():
    tree = ArrayBST(15)
    assert tree.insert_iterative(5)
    assert not tree.insert_iterative(5)
    assert not tree.insert_recursive(5)
    assert tree.count_nodes() == 1


def test_values_beyond_capacity_are_dropped():
    tree = make([2, 1, 3], capacity=3)
    assert tree.insert_iterative(4) is False
    assert tree.insert_recursive(4) is False
    assert not tree.search_iterative(4)
    assert tree.inorder() == [1, 2, 3]


def test_bfs_level_order_of_level_inserts():
    tree = make(LEVEL)
    assert tree.bfs() == LEVEL
    assert tree.count_nodes() == len(LEVEL)


def test_preorder_round_trip():
    tree = make([15, 8, 25, 3, 12, 20, 30, 1])
    rebuilt = make(tree.preorder())
    assert rebuilt.preorder() == tree.preorder()
    assert rebuilt.bfs() == tree.bfs()


def test_postorder_ends_with_root():
    tree = make(LEVEL)
    post = tree.postorder()
    assert post[-1] == LEVEL[0]
    assert sorted(post) == sorted(LEVEL)


def test_height_and_balance():
    empty = ArrayBST(7)
    assert empty.height() == -1
    assert empty.is_balanced() == "Yes"
    assert make(LEVEL).is_balanced() == "Yes"
    assert make([10, 5, 2]).is_balanced() == "Left-heavy"
    assert make([10, 15, 20]).is_balanced() == "Right-heavy"
    assert make([1, 2, 3, 4]).height() == len([1, 2, 3, 4]) - 1


@pytest.mark.parametrize("target", [15, 8, 25, 3, 12, 20, 30, 1, 27])
def test_delete_keeps_order(target):
    values = [15, 8, 25, 3, 12, 20, 30, 1, 27]
    tree = make(values)
    assert tree.delete(target) is True
    assert tree.inorder() == sorted(v for v in values if v != target)
    assert not tree.search_recursive(target)
    for v in values:
        if v != target:
            assert tree.search_iterative(v)


def test_delete_missing():
    tree = make(LEVEL)
    assert tree.delete(99) is False
    assert tree.count_nodes() == len(LEVEL)


def test_render_format():
    tree = make([2, 1, 3])
    assert tree.render() == "   3\n2\n   1\n"
    assert ArrayBST(3).render() == ""


def test_negative_capacity():
    with pytest.raises(ValueError):
        ArrayBST(-1)