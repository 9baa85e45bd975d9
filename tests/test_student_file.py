import builtins

import pytest

from dsalab.student_file import SequentialFile, Student, main


def _students():
    return [
        Student(1, "asha", "SE", "A", "pune"),
        Student(2, "ravi", "TE", "B", "nashik"),
        Student(3, "meera", "BE", "C", "mumbai"),
    ]


@pytest.fixture
def store(tmp_path):
    seq = SequentialFile(tmp_path / "students.dat")
    for student in _students():
        seq.insert(student)
    return seq


def test_round_trip():
    student = Student(42, "kiran", "FE", "D", "nagpur")
    assert Student.from_bytes(student.to_bytes()) == student


def test_record_size_is_fixed():
    assert Student.SIZE == 96
    assert len(Student(1, "", "", "", "").to_bytes()) == Student.SIZE


def test_name_too_long_rejected():
    with pytest.raises(ValueError):
        Student(1, "x" * 20, "SE", "A", "pune").to_bytes()


def test_from_bytes_wrong_length():
    with pytest.raises(ValueError):
        Student.from_bytes(b"\0" * 10)


def test_str_joins_fields():
    assert str(Student(7, "alice", "SE", "A", "pune")) == "7 alice SE A pune"


def test_records_in_insertion_order(store):
    assert list(store.records()) == _students()


def test_records_of_missing_file(tmp_path):
    assert list(SequentialFile(tmp_path / "none.dat").records()) == []


def test_search(store):
    assert store.search(2) == _students()[1]
    assert store.search(99) is None


def test_modify(store):
    replacement = Student(20, "neha", "SE", "A", "satara")
    store.modify(2, replacement)
    records = list(store.records())
    assert records == [_students()[0], replacement, _students()[2]]


@pytest.mark.parametrize("record_no", [0, 4, -1])
def test_modify_out_of_range(store, record_no):
    with pytest.raises(IndexError):
        store.modify(record_no, Student(9, "a", "b", "c", "d"))


def test_delete(store):
    removed = store.delete(1)
    assert removed == _students()[0]
    assert list(store.records()) == _students()[1:]


def test_delete_out_of_range_keeps_file(store):
    assert store.delete(5) is None
    assert list(store.records()) == _students()


def test_main_insert_and_print(tmp_path, monkeypatch, capsys):
    answers = iter(["1", "7 alice SE A pune", "5", "6"])
    monkeypatch.setattr(builtins, "input", lambda prompt="": next(answers))
    path = tmp_path / "main.dat"
    assert main([str(path)]) == 0
    assert "7 alice SE A pune" in capsys.readouterr().out
    assert list(SequentialFile(path).records()) == [
        Student(7, "alice", "SE", "A", "pune")
    ]


def test_main_search_missing(tmp_path, monkeypatch, capsys):
    answers = iter(["4", "11", "6"])
    monkeypatch.setattr(builtins, "input", lambda prompt="": next(answers))
    assert main([str(tmp_path / "empty.dat")]) == 0
    assert "Record does not exist" in capsys.readouterr().out