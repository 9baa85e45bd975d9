[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "dsalab"
version = "0.1.0"
description = "Classic data structures and algorithms: heaps, search trees, AVL dictionaries, expression trees, graph traversals, optimal BSTs and record files."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "algorithms",
    "heap",
    "binary-search-tree",
    "avl-tree",
    "expression-tree",
    "graph",
    "optimal-bst",
    "file-organisation",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsalab-heap = "dsalab.heap:main"
dsalab-students = "dsalab.student_file:main"
dsalab-direct-access = "dsalab.direct_access_file:main"
dsalab-book-index = "dsalab.book_tree:main"
dsalab-bst = "dsalab.bst:main"
dsalab-expression = "dsalab.expression_tree:main"
dsalab-campus = "dsalab.campus_graph:main"
dsalab-optimal-bst = "dsalab.optimal_bst:main"
dsalab-dictionary = "dsalab.dictionary_avl:main"

[tool.setuptools.packages.find]
include = ["dsalab*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
