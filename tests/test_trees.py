import pytest

from algokit.trees import (
    TreeNode,
    deserialize,
    inorder,
    is_valid_bst,
    lowest_common_ancestor,
    serialize,
)


def _same_tree(a, b):
    if a is None or b is None:
        return a is b
    return a.val == b.val and _same_tree(a.left, b.left) and _same_tree(a.right, b.right)


def _lca_tree():
    return TreeNode(
        3,
        TreeNode(5, TreeNode(6), TreeNode(2, TreeNode(7), TreeNode(4))),
        TreeNode(1, TreeNode(0), TreeNode(8)),
    )


def test_lca_across_subtrees():
    result = lowest_common_ancestor(_lca_tree(), TreeNode(5), TreeNode(1))
    assert result.val == 3


def test_lca_when_one_is_ancestor():
    result = lowest_common_ancestor(_lca_tree(), TreeNode(5), TreeNode(4))
    assert result.val == 5


def test_serialize_round_trip():
    tree = TreeNode(1, TreeNode(2), TreeNode(3, TreeNode(4), TreeNode(5)))
    text = serialize(tree)
    rebuilt = deserialize(text)
    assert _same_tree(tree, rebuilt)
    assert serialize(rebuilt) == text


def test_serialize_empty():
    assert serialize(None) == "# "
    assert deserialize("# ") is None


def test_serialize_single_node():
    assert serialize(TreeNode(1)) == "1 # # "


def test_deserialize_truncated_raises():
    with pytest.raises(ValueError):
        deserialize("1 2")


def test_deserialize_bad_token_raises():
    with pytest.raises(ValueError):
        deserialize("x # #")


def test_inorder():
    root = TreeNode(1, right=TreeNode(2, left=TreeNode(3)))
    assert inorder(root) == [1, 3, 2]


def test_inorder_does_not_change_tree():
    root = _lca_tree()
    before = serialize(root)
    inorder(root)
    assert serialize(root) == before


def test_inorder_empty():
    assert inorder(None) == []


def test_valid_bst():
    assert is_valid_bst(TreeNode(2, TreeNode(1), TreeNode(3))) is True


def test_invalid_bst_right_child_smaller():
    tree = TreeNode(5, TreeNode(1), TreeNode(4, TreeNode(3), TreeNode(6)))
    assert is_valid_bst(tree) is False


def test_invalid_bst_deep_violation():
    tree = TreeNode(5, TreeNode(4), TreeNode(6, TreeNode(3), TreeNode(7)))
    assert is_valid_bst(tree) is False


def test_valid_bst_inorder_is_increasing():
    tree = TreeNode(8, TreeNode(4, TreeNode(2), TreeNode(6)), TreeNode(12, TreeNode(10)))
    assert is_valid_bst(tree) is True
    values = inorder(tree)
    assert values == sorted(values)