import pytest

from algotoolkit.binary_tree import bf_traversal, df_traversal, render_binary_tree
from algotoolkit.complete_tree import CompleteTree


def make_tree():
    storage = [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0]
    return storage, CompleteTree(storage)


def test_root_and_children_values():
    storage, tree = make_tree()
    assert tree.value == storage[0]
    assert tree.left.value == storage[1]
    assert tree.right.value == storage[2]
    assert tree.left.left.value == storage[3]


def test_size_defaults_to_storage_length():
    storage, tree = make_tree()
    assert tree.size == len(storage)
    assert tree.root == 0


def test_children_beyond_size_are_empty():
    _, tree = make_tree()
    node = tree.subtree(4)
    assert not node.left
    assert not node.right
    assert tree.subtree(3).left.value == 8.0


def test_parent_of_root_is_empty():
    _, tree = make_tree()
    assert not tree.parent()


def test_parent_of_children():
    _, tree = make_tree()
    assert tree.left.parent().root == tree.root
    assert tree.right.parent().root == tree.root
    assert tree.subtree(5).parent().root == 2


def test_value_of_empty_raises():
    _, tree = make_tree()
    with pytest.raises(IndexError):
        tree.parent().value


def test_setting_value_writes_storage():
    storage, tree = make_tree()
    tree.right.value = 42.0
    assert storage[2] == 42.0


def test_setting_value_of_empty_raises():
    _, tree = make_tree()
    with pytest.raises(IndexError):
        tree.subtree(99).value = 1.0


def test_smaller_size_limits_tree():
    storage, _ = make_tree()
    tree = CompleteTree(storage, 0, 3)
    assert tree.left and tree.right
    assert not tree.left.left


def test_breadth_first_follows_storage_order():
    storage, tree = make_tree()
    assert [node.value for node in bf_traversal(tree)] == storage


def test_depth_first_visits_every_node_once():
    storage, tree = make_tree()
    values = [node.value for node in df_traversal(tree)]
    assert sorted(values) == storage
    assert values[0] == storage[-1]


def test_render_starts_with_root():
    _, tree = make_tree()
    lines = render_binary_tree(tree).split("\n")
    assert lines[0].startswith("1 ")
    assert len({len(line) for line in lines}) == 1