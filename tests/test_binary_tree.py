import pytest

from algokit.binary_tree import (
    TreeNode,
    all_traversals,
    bottom_view,
    inorder,
    left_view,
    morris_inorder,
    morris_preorder,
    postorder,
    preorder,
    root_to_node_path,
    top_view,
    vertical_traversal,
    width_of_binary_tree,
)

BST_VALUES = [50, 30, 70, 20, 40, 60, 80, 35, 65, 10]


def build_bst(values):
    root = None
    for value in values:
        node = TreeNode(value)
        if root is None:
            root = node
            continue
        cur = root
        while True:
            if value < cur.val:
                if cur.left is None:
                    cur.left = node
                    break
                cur = cur.left
            else:
                if cur.right is None:
                    cur.right = node
                    break
                cur = cur.right
    return root


def build_perfect(depth):
    def make(index):
        if index >= 2**depth:
            return None
        return TreeNode(index, make(2 * index), make(2 * index + 1))

    return make(1)


def build_left_chain(values):
    root = None
    for value in reversed(values):
        root = TreeNode(value, left=root)
    return root


def spine(root, side):
    values = []
    node = root
    while node is not None:
        values.append(node.val)
        node = getattr(node, side)
    return values


def count_leaves(root):
    if root is None:
        return 0
    if root.left is None and root.right is None:
        return 1
    return count_leaves(root.left) + count_leaves(root.right)


def test_inorder_of_bst_is_sorted():
    root = build_bst(BST_VALUES)
    assert inorder(root) == sorted(BST_VALUES)


def test_preorder_and_postorder_ends():
    root = build_bst(BST_VALUES)
    pre = preorder(root)
    post = postorder(root)
    assert pre[0] == root.val
    assert post[-1] == root.val
    assert sorted(pre) == sorted(BST_VALUES)
    assert sorted(post) == sorted(BST_VALUES)


def test_preorder_rebuilds_same_bst():
    root = build_bst(BST_VALUES)
    rebuilt = build_bst(preorder(root))
    assert preorder(rebuilt) == preorder(root)
    assert postorder(rebuilt) == postorder(root)


def test_all_traversals_agree_with_single_walks():
    for root in (build_bst(BST_VALUES), build_perfect(4), build_left_chain([5, 4, 3])):
        assert all_traversals(root) == (inorder(root), preorder(root), postorder(root))


def test_morris_traversals_match_and_restore_tree():
    root = build_bst(BST_VALUES)
    expected_in = inorder(root)
    expected_pre = preorder(root)
    assert morris_inorder(root) == expected_in
    assert morris_preorder(root) == expected_pre
    assert inorder(root) == expected_in
    assert preorder(root) == expected_pre
    assert morris_inorder(root) == expected_in


def test_empty_tree():
    assert all_traversals(None) == ([], [], [])
    assert inorder(None) == []
    assert preorder(None) == []
    assert postorder(None) == []
    assert morris_inorder(None) == []
    assert morris_preorder(None) == []
    assert top_view(None) == []
    assert bottom_view(None) == []
    assert left_view(None) == []
    assert vertical_traversal(None) == []
    assert width_of_binary_tree(None) == 0
    assert root_to_node_path(None, 1) == []


def test_root_to_node_path_follows_edges():
    root = build_bst(BST_VALUES)
    for target in BST_VALUES:
        path = root_to_node_path(root, target)
        assert path[0] == root.val
        assert path[-1] == target
        node = root
        for value in path[1:]:
            node = node.left if node.left is not None and node.left.val == value else node.right
            assert node.val == value


def test_root_to_node_path_missing_target():
    root = build_bst(BST_VALUES)
    assert root_to_node_path(root, 999) == []


def test_left_view_of_chain_and_perfect_tree():
    chain = [9, 8, 7, 6]
    assert left_view(build_left_chain(chain)) == chain
    perfect = build_perfect(4)
    assert left_view(perfect) == spine(perfect, "left")


def test_top_and_bottom_view_of_chain():
    chain = [9, 8, 7, 6]
    root = build_left_chain(chain)
    assert top_view(root) == list(reversed(chain))
    assert bottom_view(root) == list(reversed(chain))


def test_views_of_perfect_tree():
    root = build_perfect(3)
    top = top_view(root)
    bottom = bottom_view(root)
    assert top[0] == spine(root, "left")[-1]
    assert top[-1] == spine(root, "right")[-1]
    assert bottom[0] == top[0]
    assert bottom[-1] == top[-1]
    assert top[len(top) // 2] == root.val
    assert len(top) == len(bottom)


def test_vertical_traversal_example():
    root = TreeNode(3, TreeNode(9), TreeNode(20, TreeNode(15), TreeNode(7)))
    assert vertical_traversal(root) == [[9], [3, 15], [20], [7]]


def test_vertical_traversal_sorts_shared_positions():
    root = TreeNode(1, TreeNode(2, right=TreeNode(6)), TreeNode(3, left=TreeNode(5)))
    columns = vertical_traversal(root)
    assert columns[1] == [1, 5, 6]


def test_vertical_traversal_covers_every_node():
    root = build_bst(BST_VALUES)
    columns = vertical_traversal(root)
    assert sorted(value for column in columns for value in column) == sorted(BST_VALUES)
    assert [column[0] for column in columns] == top_view(root)


def test_width_example():
    root = TreeNode(
        1,
        TreeNode(3, TreeNode(5), TreeNode(3)),
        TreeNode(2, right=TreeNode(9)),
    )
    assert width_of_binary_tree(root) == 4


def test_width_of_perfect_tree_is_leaf_count():
    for depth in (1, 2, 3, 5):
        root = build_perfect(depth)
        assert width_of_binary_tree(root) == count_leaves(root)


def test_width_of_chain_matches_single_node():
    assert width_of_binary_tree(build_left_chain([4, 3, 2, 1])) == width_of_binary_tree(TreeNode(7))