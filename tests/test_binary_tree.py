import pytest

from dsworkbook.binary_tree import (
    TreeNode,
    inorder,
    iterative_inorder,
    leaf_count,
    level_order,
    node_count,
    postorder,
    preorder,
)


@pytest.fixture
def sample_tree():
    n4 = TreeNode(1)
    n6 = TreeNode(16)
    n7 = TreeNode(25)
    n2 = TreeNode(4, n4, None)
    n3 = TreeNode(20, n6, n7)
    return TreeNode(15, n2, n3)


def test_preorder_of_sample(sample_tree):
    assert preorder(sample_tree) == [15, 4, 1, 20, 16, 25]


def test_level_order_of_sample(sample_tree):
    assert level_order(sample_tree) == [15, 4, 20, 1, 16, 25]


def test_inorder_of_search_tree_is_sorted(sample_tree):
    result = inorder(sample_tree)
    assert result == sorted(result)
    assert set(result) == {15, 4, 1, 20, 16, 25}


def test_iterative_inorder_matches_recursive(sample_tree):
    assert iterative_inorder(sample_tree) == inorder(sample_tree)


def test_postorder_ends_with_root_and_covers_all(sample_tree):
    result = postorder(sample_tree)
    assert result[-1] == 15
    assert sorted(result) == sorted(preorder(sample_tree))


def test_postorder_puts_children_before_parent(sample_tree):
    result = postorder(sample_tree)
    assert result.index(1) < result.index(4)
    assert result.index(16) < result.index(20)
    assert result.index(25) < result.index(20)


def test_empty_tree_traversals():
    assert preorder(None) == []
    assert inorder(None) == []
    assert postorder(None) == []
    assert iterative_inorder(None) == []
    assert level_order(None) == []


def test_node_count_matches_traversal_length(sample_tree):
    assert node_count(sample_tree) == len(preorder(sample_tree))
    assert node_count(None) == 0


def test_leaf_count_small_trees():
    assert leaf_count(None) == 0
    assert leaf_count(TreeNode(7)) == 1
    assert leaf_count(TreeNode(2, TreeNode(1), TreeNode(3))) == 2
    assert leaf_count(TreeNode(3, TreeNode(2, TreeNode(1)))) == 1


def test_leaf_count_bounded_by_node_count(sample_tree):
    assert 1 <= leaf_count(sample_tree) < node_count(sample_tree)


def test_left_chain_traversals():
    chain = TreeNode("c", TreeNode("b", TreeNode("a")))
    assert inorder(chain) == ["a", "b", "c"]
    assert iterative_inorder(chain) == ["a", "b", "c"]
    assert preorder(chain) == ["c", "b", "a"]
    assert level_order(chain) == ["c", "b", "a"]