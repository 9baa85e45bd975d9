"""Sequential file of fixed-size student records."""

import os
import struct
import sys
import tempfile
from collections import deque
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar

DEFAULT_PATH = "StudInfo.txt"

_RECORD = struct.Struct("<i20s10s10s50s2x")
_TEXT_WIDTHS = (("name", 20), ("cls", 10), ("division", 10), ("address", 50))


@dataclass(frozen=True)
class Student:
    """One student record as stored on disk."""

    roll_no: int
    name: str
    cls: str
    division: str
    address: str

    SIZE: ClassVar[int] = _RECORD.size

    def to_bytes(self):
        """Encode the record into its fixed-size binary form."""
        fields = []
        for attribute, width in _TEXT_WIDTHS:
            raw = getattr(self, attribute).encode("utf-8")
            if b"\0" in raw:
                raise ValueError(f"{attribute} must not contain NUL characters")
            if len(raw) >= width:
                raise ValueError(f"{attribute} is limited to {width - 1} bytes")
            fields.append(raw)
        try:
            return _RECORD.pack(self.roll_no, *fields)
        except struct.error as exc:
            raise ValueError(f"roll number out of range: {self.roll_no}") from exc

    @classmethod
    def from_bytes(cls, data):
        """Decode a record produced by :meth:`to_bytes`."""
        if len(data) != cls.SIZE:
            raise ValueError(f"a record is {cls.SIZE} bytes, got {len(data)}")
        roll_no, *raw_fields = _RECORD.unpack(data)
        texts = [
            raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")
            for raw in raw_fields
        ]
        return cls(roll_no, *texts)

    def __str__(self):
        return f"{self.roll_no} {self.name} {self.cls} {self.division} {self.address}"


class SequentialFile:
    """Student records kept one after another in a binary file."""

    def __init__(self, path):
        self.path = Path(path)

    def _count(self):
        if not self.path.exists():
            return 0
        return self.path.stat().st_size // Student.SIZE

    def insert(self, student):
        """Append a record at the end of the file."""
        data = student.to_bytes()
        with open(self.path, "ab") as handle:
            handle.write(data)

    def records(self):
        """Yield every complete record in file order."""
        if not self.path.exists():
            return
        with open(self.path, "rb") as handle:
            while len(chunk := handle.read(Student.SIZE)) == Student.SIZE:
                yield Student.from_bytes(chunk)

    def modify(self, record_no, student):
        """Overwrite the record at 1-based position ``record_no``."""
        if not 1 <= record_no <= self._count():
            raise IndexError(f"no record number {record_no}")
        data = student.to_bytes()
        with open(self.path, "r+b") as handle:
            handle.seek((record_no - 1) * Student.SIZE)
            handle.write(data)

    def search(self, roll_no):
        """Return the first record with ``roll_no``, or None."""
        return next((st for st in self.records() if st.roll_no == roll_no), None)

    def delete(self, record_no):
        """Remove the record at 1-based position ``record_no``.

        Returns the removed record, or None when there is no such record.
        """
        kept = list(self.records())
        if not 1 <= record_no <= len(kept):
            return None
        removed = kept.pop(record_no - 1)
        directory = self.path.parent
        fd, temp_name = tempfile.mkstemp(dir=directory, prefix=".temp")
        try:
            with os.fdopen(fd, "wb") as handle:
                for student in kept:
                    handle.write(student.to_bytes())
            os.replace(temp_name, self.path)
        except BaseException:
            if os.path.exists(temp_name):
                os.remove(temp_name)
            raise
        return removed


class _TokenReader:
    """Whitespace-separated tokens read line by line from ``input``."""

    def __init__(self):
        self._tokens = deque()

    def word(self, prompt=""):
        while not self._tokens:
            self._tokens.extend(input(prompt).split())
            prompt = ""
        return self._tokens.popleft()

    def integer(self, prompt=""):
        return int(self.word(prompt))


def _read_student(reader):
    print("\n Enter the record : ")
    print("\n Roll No. : Name : Class : Division : Address")
    roll_no = reader.integer()
    return Student(roll_no, reader.word(), reader.word(), reader.word(), reader.word())


def _insert(store, reader):
    store.insert(_read_student(reader))


def _delete(store, reader):
    store.delete(reader.integer("\n Enter the record no to be deleted : "))


def _modify(store, reader):
    record_no = reader.integer("\n Enter the record no to be modified : ")
    store.modify(record_no, _read_student(reader))


def _search(store, reader):
    student = store.search(reader.integer("\n Enter the roll no to be searched : "))
    if student is None:
        print("\n Record does not exist ")
    else:
        print("\n record found ")
        print(student)


def _print(store, reader):
    for student in store.records():
        print(student)
    print()


_MENU = (
    " 1. Insert a record",
    " 2. Delete a record",
    " 3. Modify a record",
    " 4. Search a record",
    " 5. Print a record",
    " 6. Quit",
)
_ACTIONS = {1: _insert, 2: _delete, 3: _modify, 4: _search, 5: _print}
_QUIT = 6


def main(argv=None):
    """Run the interactive menu over a sequential student file."""
    args = sys.argv[1:] if argv is None else list(argv)
    store = SequentialFile(args[0] if args else DEFAULT_PATH)
    reader = _TokenReader()
    try:
        while True:
            print("\n".join(_MENU))
            try:
                choice = reader.integer("\n Enter your choice : ")
            except ValueError:
                print("Invalid choice.")
                continue
            if choice == _QUIT:
                return 0
            action = _ACTIONS.get(choice)
            if action is None:
                continue
            try:
                action(store, reader)
            except (ValueError, IndexError) as exc:
                print(f"Error: {exc}")
    except EOFError:
        return 0


if __name__ == "__main__":
    sys.exit(main())