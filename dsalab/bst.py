"""Binary search tree with height, minimum, mirroring and search."""

import sys
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class _Node:
    data: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


class BinarySearchTree:
    """An unbalanced binary search tree; equal values go to the right."""

    def __init__(self, values=()):
        self._root = None
        for value in values:
            self.insert(value)

    def insert(self, value):
        """Add ``value`` to the tree."""
        node = _Node(value)
        if self._root is None:
            self._root = node
            return
        current = self._root
        while True:
            if value < current.data:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def longest_path(self):
        """Number of nodes on the longest root-to-leaf path."""
        depth = 0
        level = [self._root] if self._root else []
        while level:
            depth += 1
            level = [child for node in level for child in (node.left, node.right) if child]
        return depth

    def find_min(self):
        """Return the leftmost value; raises ValueError on an empty tree."""
        if self._root is None:
            raise ValueError("Tree is empty.")
        current = self._root
        while current.left is not None:
            current = current.left
        return current.data

    def mirror(self):
        """Swap the children of every node."""
        stack = [self._root] if self._root else []
        while stack:
            node = stack.pop()
            node.left, node.right = node.right, node.left
            stack.extend(child for child in (node.left, node.right) if child)

    def contains(self, key):
        """Search for ``key`` following the search-tree ordering."""
        current = self._root
        while current is not None:
            if current.data == key:
                return True
            current = current.left if key < current.data else current.right
        return False

    __contains__ = contains

    def inorder(self):
        """Return the values in in-order sequence."""
        result = []
        stack = []
        current = self._root
        while stack or current:
            while current:
                stack.append(current)
                current = current.left
            current = stack.pop()
            result.append(current.data)
            current = current.right
        return result


def _format(values):
    return " ".join(str(value) for value in values)


def main(argv=None):
    """Interactive walk through the tree operations."""
    count = int(input("Enter the number of initial elements to insert in the BST: "))
    print(f"Enter {count} elements:")
    values = []
    while len(values) < count:
        values.extend(int(token) for token in input().split())
    tree = BinarySearchTree(values[:count])
    print(f"Inorder Traversal of BST: {_format(tree.inorder())}")

    tree.insert(int(input("\nEnter a value to insert into the BST: ")))
    print(f"BST after insertion: {_format(tree.inorder())}")

    print(f"\nNumber of nodes in the longest path from root: {tree.longest_path()}")
    try:
        print(f"Minimum data value in the BST: {tree.find_min()}")
    except ValueError as exc:
        print(exc)

    tree.mirror()
    print(f"BST after mirroring (Inorder Traversal): {_format(tree.inorder())}")

    key = int(input("\nEnter a value to search in the BST: "))
    print(f"Search result: {'Found' if tree.contains(key) else 'Not Found'}")
    return 0


if __name__ == "__main__":
    sys.exit(main())