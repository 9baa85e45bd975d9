"""Optimal binary search tree for keys with given access probabilities."""

import math
import sys
from dataclasses import dataclass, field


@dataclass(frozen=True)
class OptimalBST:
    """The minimum expected search cost and the roots that achieve it.

    Keys are numbered 1 to ``size`` in sorted order.
    """

    cost: float
    size: int
    _roots: dict = field(repr=False, compare=False)

    def structure(self):
        """Return ``(key, parent, relation)`` for every key in preorder.

        The root has parent and relation None; otherwise relation is
        ``"left"`` or ``"right"``.
        """
        result = []
        stack = [(1, self.size, None, None)]
        while stack:
            low, high, parent, relation = stack.pop()
            if low > high:
                continue
            key = self._roots[low, high]
            result.append((key, parent, relation))
            stack.append((key + 1, high, key, "right"))
            stack.append((low, key - 1, key, "left"))
        return result


def optimal_bst(probabilities):
    """Compute the optimal search tree for keys with these probabilities.

    Among roots of equal cost the smallest key is chosen.
    """
    weights = [0.0, *(float(p) for p in probabilities)]
    size = len(weights) - 1
    expected = {}
    total = {}
    roots = {}
    for i in range(1, size + 2):
        expected[i, i - 1] = 0.0
        total[i, i - 1] = 0.0
    for length in range(1, size + 1):
        for i in range(1, size - length + 2):
            j = i + length - 1
            total[i, j] = total[i, j - 1] + weights[j]
            best = math.inf
            for r in range(i, j + 1):
                candidate = expected[i, r - 1] + expected[r + 1, j] + total[i, j]
                if candidate < best:
                    best = candidate
                    roots[i, j] = r
            expected[i, j] = best
    return OptimalBST(expected[1, size], size, roots)


def _describe(key, parent, relation):
    if parent is None:
        return f"Root: k{key}"
    return f"k{key} is {relation} child of k{parent}"


def main(argv=None):
    """Read key probabilities and print the optimal tree."""
    count = int(input("Enter number of keys: "))
    print("Enter access probabilities for keys (p1 to pn):")
    probabilities = [float(input(f"p[{i}] = ")) for i in range(1, count + 1)]
    tree = optimal_bst(probabilities)
    print(f"\nMinimum cost of Optimal BST: {tree.cost:.3f}")
    print("\nStructure of Optimal BST:")
    for entry in tree.structure():
        print(_describe(*entry))
    return 0


if __name__ == "__main__":
    sys.exit(main())