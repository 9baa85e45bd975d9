"""A dictionary of keywords and meanings kept in an AVL tree."""

import sys
from dataclasses import dataclass
from typing import NamedTuple, Optional


@dataclass
class _Node:
    keyword: str
    meaning: str
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None
    height: int = 1


class SearchResult(NamedTuple):
    """The meaning found (None if absent) and the comparisons it took."""

    meaning: Optional[str]
    comparisons: int


def _height(node):
    return node.height if node else 0


def _balance(node):
    return _height(node.left) - _height(node.right) if node else 0


def _refresh(node):
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_right(y):
    x = y.left
    y.left = x.right
    x.right = y
    _refresh(y)
    _refresh(x)
    return x


def _rotate_left(x):
    y = x.right
    x.right = y.left
    y.left = x
    _refresh(x)
    _refresh(y)
    return y


def _insert(node, key, meaning):
    if node is None:
        return _Node(key, meaning)
    if key < node.keyword:
        node.left = _insert(node.left, key, meaning)
    elif key > node.keyword:
        node.right = _insert(node.right, key, meaning)
    else:
        raise ValueError(f"Keyword already exists: {key!r}. Use update instead.")

    _refresh(node)
    balance = _balance(node)
    if balance > 1 and key < node.left.keyword:
        return _rotate_right(node)
    if balance < -1 and key > node.right.keyword:
        return _rotate_left(node)
    if balance > 1 and key > node.left.keyword:
        node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1 and key < node.right.keyword:
        node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _delete(node, key):
    if node is None:
        return None
    if key < node.keyword:
        node.left = _delete(node.left, key)
    elif key > node.keyword:
        node.right = _delete(node.right, key)
    elif node.left is None or node.right is None:
        return node.left or node.right
    else:
        successor = node.right
        while successor.left:
            successor = successor.left
        node.keyword, node.meaning = successor.keyword, successor.meaning
        node.right = _delete(node.right, successor.keyword)

    _refresh(node)
    balance = _balance(node)
    if balance > 1:
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


class AVLDictionary:
    """Keywords with meanings, ordered and height-balanced."""

    def __init__(self):
        self._root = None

    def _lookup(self, key):
        node = self._root
        while node is not None and node.keyword != key:
            node = node.left if key < node.keyword else node.right
        return node

    def insert(self, key, meaning):
        """Add a new keyword; ValueError if it is already present."""
        self._root = _insert(self._root, key, meaning)

    def remove(self, key):
        """Remove ``key``; return whether it was present."""
        if self._lookup(key) is None:
            return False
        self._root = _delete(self._root, key)
        return True

    def update(self, key, meaning):
        """Change the meaning of ``key``; return whether it was present."""
        node = self._lookup(key)
        if node is None:
            return False
        node.meaning = meaning
        return True

    def _walk(self, reverse):
        stack = []
        node = self._root
        first, second = ("right", "left") if reverse else ("left", "right")
        while stack or node:
            while node:
                stack.append(node)
                node = getattr(node, first)
            node = stack.pop()
            yield node.keyword, node.meaning
            node = getattr(node, second)

    def ascending(self):
        """Return ``(keyword, meaning)`` pairs in ascending keyword order."""
        return list(self._walk(reverse=False))

    def descending(self):
        """Return ``(keyword, meaning)`` pairs in descending keyword order."""
        return list(self._walk(reverse=True))

    def find(self, key):
        """Look up ``key``, counting the nodes compared on the way."""
        comparisons = 0
        node = self._root
        while node is not None:
            comparisons += 1
            if key == node.keyword:
                return SearchResult(node.meaning, comparisons)
            node = node.left if key < node.keyword else node.right
        return SearchResult(None, comparisons)

    def max_comparisons(self):
        """The most comparisons any search can take: the tree's height."""
        return _height(self._root)


_MENU = (
    "\n----- Dictionary Menu -----\n"
    "1. Insert\n2. Delete\n3. Update\n4. Display Ascending\n"
    "5. Display Descending\n6. Search\n7. Max Comparisons\n8. Exit"
)


def _show(pairs):
    for keyword, meaning in pairs:
        print(f"{keyword} : {meaning}")


def main(argv=None):
    """Run the interactive dictionary menu."""
    book = AVLDictionary()
    try:
        while True:
            print(_MENU)
            try:
                choice = int(input("Enter choice: "))
            except ValueError:
                choice = None
            if choice == 1:
                key = input("Enter keyword: ")
                meaning = input("Enter meaning: ")
                try:
                    book.insert(key, meaning)
                except ValueError:
                    print("Keyword already exists. Use update instead.")
            elif choice == 2:
                book.remove(input("Enter keyword to delete: "))
            elif choice == 3:
                key = input("Enter keyword to update: ")
                meaning = input("Enter new meaning: ")
                if book.update(key, meaning):
                    print("Meaning updated.")
            elif choice == 4:
                print("\nDictionary in Ascending Order:")
                _show(book.ascending())
            elif choice == 5:
                print("\nDictionary in Descending Order:")
                _show(book.descending())
            elif choice == 6:
                key = input("Enter keyword to search: ")
                result = book.find(key)
                if result.meaning is None:
                    print("Keyword not found.")
                else:
                    print(f"Found: {key} = {result.meaning}")
                print(f"Comparisons made: {result.comparisons}")
            elif choice == 7:
                print(f"Maximum comparisons (height): {book.max_comparisons()}")
            elif choice == 8:
                print("Exiting.")
                return 0
            else:
                print("Invalid choice.")
    except EOFError:
        return 0


if __name__ == "__main__":
    sys.exit(main())