# dsalab

A small collection of classic data structures and algorithms. Each module can be
used as a library and also runs as an interactive command-line program.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | What it provides |
| --- | --- |
| `dsalab.heap` | `sift_down` and `build_max_heap`, which arrange a list of marks into a max heap |
| `dsalab.student_file` | `Student`, a fixed-size binary record, and `SequentialFile` with `insert`, `records`, `modify`, `search` and `delete` |
| `dsalab.direct_access_file` | `DirectAccessFile`, a record file reached through a ten-slot hash table on `roll_no % 10` |
| `dsalab.book_tree` | `BookNode`, `build_book` and `format_index` for a chapter / section / subsection index |
| `dsalab.bst` | `BinarySearchTree` with `insert`, `longest_path`, `find_min`, `mirror`, `contains` and `inorder` |
| `dsalab.expression_tree` | `ExprNode`, `is_operator`, `construct_tree` from a prefix expression, and a non-recursive `postorder` |
| `dsalab.campus_graph` | `CampusGraph` with depth-first (`dfs`) and breadth-first (`bfs`) walks |
| `dsalab.optimal_bst` | `optimal_bst`, returning an `OptimalBST` with its `cost` and `structure()` |
| `dsalab.dictionary_avl` | `AVLDictionary`, a keyword/meaning dictionary kept balanced as an AVL tree |

## Library use

```python
from dsalab.bst import BinarySearchTree
from dsalab.expression_tree import construct_tree, postorder
from dsalab.dictionary_avl import AVLDictionary
from dsalab.heap import build_max_heap
from dsalab.optimal_bst import optimal_bst

print(build_max_heap([4, 10, 3, 5, 1]))

tree = BinarySearchTree([50, 30, 70, 20, 40])
tree.insert(60)
print(tree.inorder())        # values in ascending order
print(tree.longest_path())   # nodes on the longest root-to-leaf path
print(tree.find_min())       # ValueError on an empty tree
tree.mirror()
print(tree.contains(40))

root = construct_tree("+--a*bc/def")   # ValueError if malformed
print(postorder(root))

words = AVLDictionary()
words.insert("apple", "a fruit")       # ValueError if already present
words.insert("book", "a set of pages")
words.update("apple", "a round fruit")
print(words.ascending())
print(words.find("book"))              # SearchResult(meaning, comparisons)
print(words.max_comparisons())

best = optimal_bst([0.3, 0.2, 0.5])
print(best.cost, best.structure())
```

Records in `dsalab.student_file` are fixed-size: the name, class, division and
address fields hold at most 19, 9, 9 and 49 bytes of UTF-8 text; longer values
raise `ValueError`. `DirectAccessFile` empties its file when it is created, and
a later insert whose roll number falls in an occupied slot takes that slot over.

## Command-line programs

Each of these runs an interactive program that prompts for its input:

```
dsalab-heap
dsalab-students
dsalab-direct-access
dsalab-book-index
dsalab-bst
dsalab-expression
dsalab-campus
dsalab-optimal-bst
dsalab-dictionary
```

`dsalab-heap` also takes the marks as arguments, and `dsalab-expression` the
prefix expression. `dsalab-students` and `dsalab-direct-access` keep their
records in `StudInfo.txt` in the current directory unless a path is given as
the first argument.

## What is not included

The package has no minimum spanning tree algorithm for weighted graphs:
`dsalab.campus_graph` offers only unweighted depth-first and breadth-first walks.