"""Expression trees built from prefix notation."""

import sys
from dataclasses import dataclass
from typing import Optional

OPERATORS = frozenset("+-*/")


@dataclass
class ExprNode:
    """One character of the expression with its operand subtrees."""

    data: str
    left: Optional["ExprNode"] = None
    right: Optional["ExprNode"] = None


def is_operator(ch):
    """True for the four binary arithmetic operators."""
    return ch in OPERATORS


def construct_tree(prefix):
    """Build the expression tree of a prefix string of one-character tokens.

    Raises ValueError when the string is not a single well-formed expression.
    """
    stack = []
    for ch in reversed(prefix):
        node = ExprNode(ch)
        if is_operator(ch):
            if len(stack) < 2:
                raise ValueError(f"operator {ch!r} lacks operands in {prefix!r}")
            node.left = stack.pop()
            node.right = stack.pop()
        stack.append(node)
    if len(stack) != 1:
        raise ValueError(f"malformed prefix expression: {prefix!r}")
    return stack[0]


def postorder(root):
    """Return the postorder sequence of the tree, computed without recursion."""
    if root is None:
        return ""
    pending = [root]
    visited = []
    while pending:
        node = pending.pop()
        visited.append(node)
        if node.left:
            pending.append(node.left)
        if node.right:
            pending.append(node.right)
    return "".join(node.data for node in reversed(visited))


def main(argv=None):
    """Read a prefix expression and print its postorder traversal."""
    args = sys.argv[1:] if argv is None else list(argv)
    prefix = args[0] if args else input("Enter prefix expression (e.g., +--a*bc/def): ")
    prefix = prefix.strip()
    try:
        root = construct_tree(prefix)
    except ValueError as exc:
        print(exc)
        return 1
    print(f"Postorder traversal: {postorder(root)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())