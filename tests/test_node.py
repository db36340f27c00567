import gc
import unittest

from avltree.node import Node, height_of


def link(parent: Node, left: Node = None, right: Node = None) -> Node:
    parent.left = left
    parent.right = right
    for child in (left, right):
        if child is not None:
            child.parent = parent
    return parent


class TestNodeHeight(unittest.TestCase):
    def test_new_node_is_leaf(self):
        node = Node(1)
        self.assertEqual(node.height, 0)
        self.assertIsNone(node.left)
        self.assertIsNone(node.right)
        self.assertIsNone(node.parent)

    def test_height_of_missing_child(self):
        self.assertEqual(height_of(None), -1)

    def test_update_height_uses_taller_child(self):
        child = link(Node(5), Node(3))
        child.update_height()
        root = link(Node(10), child, Node(15))
        root.update_height()
        self.assertEqual(child.height, 1)
        self.assertEqual(root.height, 2)

    def test_balance_factor(self):
        node = link(Node(10), Node(5))
        node.update_height()
        self.assertEqual(node.balance_factor(), -1)
        node.right = Node(15)
        self.assertEqual(node.balance_factor(), 0)
        self.assertEqual(Node(1).balance_factor(), 0)


class TestNodeParentLink(unittest.TestCase):
    def test_parent_round_trip(self):
        parent = Node(2)
        child = Node(1)
        child.parent = parent
        self.assertIs(child.parent, parent)
        child.parent = None
        self.assertIsNone(child.parent)

    def test_parent_link_does_not_own(self):
        parent = Node(2)
        child = Node(1)
        child.parent = parent
        del parent
        gc.collect()
        self.assertIsNone(child.parent)

    def test_detach_clears_links(self):
        node = link(Node(2), Node(1), Node(3))
        node.parent = Node(4)
        node.detach()
        self.assertIsNone(node.left)
        self.assertIsNone(node.right)
        self.assertIsNone(node.parent)


class TestNodeRotation(unittest.TestCase):
    def test_rotate_left(self):
        #   1            2
        #    \          / \
        #     2   ->   1   3
        #    / \        \
        #  1.5  3       1.5
        inner = Node(1.5)
        right = link(Node(2), inner, Node(3))
        right.update_height()
        node = link(Node(1), None, right)
        node.update_height()

        new_root = node.rotate_left()

        self.assertIs(new_root, right)
        self.assertIs(new_root.left, node)
        self.assertIs(node.right, inner)
        self.assertIs(inner.parent, node)
        self.assertIs(node.parent, new_root)
        self.assertIsNone(new_root.parent)
        self.assertEqual(node.height, 1)
        self.assertEqual(new_root.height, 2)

    def test_rotate_right(self):
        left = link(Node(2), Node(1))
        left.update_height()
        node = link(Node(3), left)
        node.update_height()

        new_root = node.rotate_right()

        self.assertIs(new_root, left)
        self.assertIs(new_root.right, node)
        self.assertIsNone(node.left)
        self.assertEqual(node.height, 0)
        self.assertEqual(new_root.height, 1)
        self.assertEqual(new_root.balance_factor(), 0)

    def test_rotation_hands_over_parent_link(self):
        grandparent = Node(100)
        left = Node(2)
        node = link(Node(1), None, left)
        node.parent = grandparent

        new_root = node.rotate_left()

        self.assertIs(new_root.parent, grandparent)
        self.assertIs(node.parent, new_root)


if __name__ == '__main__':
    unittest.main()
