import builtins

import pytest

from dsalab.bst import BinarySearchTree, main

VALUES = [50, 30, 70, 20, 40, 60, 80, 35]


def test_inorder_is_sorted():
    assert BinarySearchTree(VALUES).inorder() == sorted(VALUES)


def test_duplicates_are_kept():
    assert BinarySearchTree([5, 5, 3, 5]).inorder() == [3, 5, 5, 5]


def test_insert_adds_value():
    tree = BinarySearchTree(VALUES)
    tree.insert(45)
    assert tree.inorder() == sorted(VALUES + [45])


def test_longest_path_empty():
    assert BinarySearchTree().longest_path() == 0


def test_longest_path_chain():
    chain = [1, 2, 3, 4, 5]
    assert BinarySearchTree(chain).longest_path() == len(chain)


def test_longest_path_balanced():
    assert BinarySearchTree([2, 1, 3]).longest_path() == 2


def test_find_min():
    assert BinarySearchTree(VALUES).find_min() == min(VALUES)


def test_find_min_empty():
    with pytest.raises(ValueError):
        BinarySearchTree().find_min()


def test_mirror_reverses_inorder():
    tree = BinarySearchTree(VALUES)
    tree.mirror()
    assert tree.inorder() == sorted(VALUES, reverse=True)
    assert tree.longest_path() == BinarySearchTree(VALUES).longest_path()


def test_mirror_twice_restores():
    tree = BinarySearchTree(VALUES)
    tree.mirror()
    tree.mirror()
    assert tree.inorder() == sorted(VALUES)


@pytest.mark.parametrize("key", VALUES)
def test_contains_present(key):
    assert BinarySearchTree(VALUES).contains(key) is True


@pytest.mark.parametrize("key", [0, 45, 100])
def test_contains_absent(key):
    assert key not in BinarySearchTree(VALUES)


def test_main(monkeypatch, capsys):
    answers = iter(["3", "20 10 30", "25", "10"])
    monkeypatch.setattr(builtins, "input", lambda prompt="": next(answers))
    assert main() == 0
    out = capsys.readouterr().out
    assert "Inorder Traversal of BST: 10 20 30" in out
    assert "BST after insertion: 10 20 25 30" in out
    assert "Minimum data value in the BST: 10" in out
    assert "BST after mirroring (Inorder Traversal): 30 25 20 10" in out