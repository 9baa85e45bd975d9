"""A book index as a tree of chapters, sections and subsections."""

import sys
from dataclasses import dataclass, field

MAX_CHILDREN = 10


@dataclass
class BookNode:
    """A numbered node of the book tree; the root is numbered 0."""

    number: int
    children: list = field(default_factory=list)


def _check_count(count, what):
    if count < 0 or count > MAX_CHILDREN:
        raise ValueError(f"number of {what} must be between 0 and {MAX_CHILDREN}")


def build_book(structure):
    """Build a book tree from a nested description.

    ``structure`` holds one entry per chapter; each entry holds, for every
    section of that chapter, the number of its subsections.
    """
    chapters = list(structure)
    _check_count(len(chapters), "chapters")
    root = BookNode(0)
    for chapter_no, sections in enumerate(chapters, 1):
        sections = list(sections)
        _check_count(len(sections), "sections")
        chapter = BookNode(chapter_no)
        for section_no, subsections in enumerate(sections, 1):
            _check_count(subsections, "subsections")
            chapter.children.append(
                BookNode(
                    section_no,
                    [BookNode(number) for number in range(1, subsections + 1)],
                )
            )
        root.children.append(chapter)
    return root


def format_index(book):
    """Render the book tree as an indented index."""
    lines = ["Book Index:"]
    for chapter in book.children:
        lines.append(f"Chapter {chapter.number}")
        for section in chapter.children:
            lines.append(f"  Section {chapter.number}.{section.number}")
            for sub in section.children:
                lines.append(
                    f"    Subsection {chapter.number}.{section.number}.{sub.number}"
                )
    return "\n".join(lines)


def main(argv=None):
    """Ask for the book's layout and print its index."""
    chapters = int(input("Enter number of chapters in the book: "))
    structure = []
    for chapter_no in range(1, chapters + 1):
        sections = int(input(f"Enter number of sections in chapter {chapter_no}: "))
        structure.append(
            [
                int(input(f"Enter number of subsections in section {section_no}: "))
                for section_no in range(1, sections + 1)
            ]
        )
    print(format_index(build_book(structure)))
    return 0


if __name__ == "__main__":
    sys.exit(main())