"""Max-heap construction over a list of marks."""

import sys


def sift_down(heap, index, size):
    """Move ``heap[index]`` down until ``heap[:size]`` below it is a max-heap.

    Equal children are moved up past the sifted item, so ties go towards the
    root. The list is changed in place.
    """
    item = heap[index]
    child = 2 * index + 1
    while child < size:
        if child + 1 < size and heap[child + 1] > heap[child]:
            child += 1
        if item > heap[child]:
            break
        heap[index] = heap[child]
        index = child
        child = 2 * index + 1
    heap[index] = item


def build_max_heap(values):
    """Return a new list holding ``values`` arranged as a max-heap."""
    heap = list(values)
    size = len(heap)
    for index in range(size // 2 - 1, -1, -1):
        sift_down(heap, index, size)
    return heap


def _format(values):
    return " ".join(str(value) for value in values)


def main(argv=None):
    """Read marks (from ``argv`` or interactively) and print their max-heap."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        marks = [int(arg) for arg in args]
    else:
        count = int(input("Enter no. of students: "))
        marks = [
            int(input(f"Enter marks of student {number} : "))
            for number in range(1, count + 1)
        ]
    print(f"Marks of students: {_format(marks)}")
    print(f"Max heap: {_format(build_max_heap(marks))}")
    return 0


if __name__ == "__main__":
    sys.exit(main())