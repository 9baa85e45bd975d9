import builtins

import pytest

from dsalab.book_tree import build_book, format_index, main


def test_build_book_structure():
    book = build_book([[2, 0], [1]])
    assert book.number == 0
    assert [chapter.number for chapter in book.children] == [1, 2]
    first = book.children[0]
    assert [section.number for section in first.children] == [1, 2]
    assert [len(section.children) for section in first.children] == [2, 0]
    assert len(book.children[1].children[0].children) == 1


def test_format_index_empty_book():
    assert format_index(build_book([])) == "Book Index:"


def test_format_index_line_count():
    structure = [[2, 3], [0], [1, 1, 1]]
    lines = format_index(build_book(structure)).splitlines()
    expected = 1 + len(structure) + sum(len(c) for c in structure)
    expected += sum(sum(c) for c in structure)
    assert len(lines) == expected
    assert lines[-1].strip().startswith("Subsection 3.3")


def test_too_many_chapters():
    with pytest.raises(ValueError):
        build_book([[]] * 11)


def test_negative_subsections():
    with pytest.raises(ValueError):
        build_book([[-1]])


def test_main(monkeypatch, capsys):
    answers = iter(["1", "2", "1", "0"])
    monkeypatch.setattr(builtins, "input", lambda prompt="": next(answers))
    assert main() == 0
    out = capsys.readouterr().out
    assert "  Section 1.2" in out
    assert "    Subsection 1.1.1" in out