"""Student records located through a ten-slot hash table on roll number."""

import sys
from pathlib import Path

from dsalab.student_file import Student, _read_student, _TokenReader

DEFAULT_PATH = "StudInfo.txt"
SLOTS = 10


class DirectAccessFile:
    """A binary record file whose records are found by ``roll_no % 10``.

    A later insert whose roll number falls in an occupied slot takes the slot
    over; the earlier record stays in the file but is no longer reachable.
    """

    def __init__(self, path):
        self.path = Path(path)
        self.path.write_bytes(b"")
        self._table = [None] * SLOTS
        self._next_record = 1

    def _slot(self, roll_no):
        return roll_no % SLOTS

    def _read(self, record_no):
        with open(self.path, "rb") as handle:
            handle.seek((record_no - 1) * Student.SIZE)
            return Student.from_bytes(handle.read(Student.SIZE))

    def insert(self, student):
        """Append a record and point its hash slot at it."""
        data = student.to_bytes()
        with open(self.path, "ab") as handle:
            handle.write(data)
        self._table[self._slot(student.roll_no)] = self._next_record
        self._next_record += 1

    def modify(self, roll_no, student):
        """Overwrite the record in the slot of ``roll_no`` with ``student``."""
        record_no = self._table[self._slot(roll_no)]
        if record_no is None:
            raise KeyError(roll_no)
        data = student.to_bytes()
        with open(self.path, "r+b") as handle:
            handle.seek((record_no - 1) * Student.SIZE)
            handle.write(data)

    def search(self, roll_no):
        """Return the record held in the slot of ``roll_no``, or None."""
        record_no = self._table[self._slot(roll_no)]
        return None if record_no is None else self._read(record_no)

    def entries(self):
        """Yield ``(slot, record)`` for every occupied slot in slot order."""
        for slot, record_no in enumerate(self._table):
            if record_no is not None:
                yield slot, self._read(record_no)


def _insert(store, reader):
    store.insert(_read_student(reader))


def _modify(store, reader):
    roll_no = reader.integer("\n Enter the roll no to be modified : ")
    store.modify(roll_no, _read_student(reader))


def _search(store, reader):
    student = store.search(reader.integer("\n Enter the roll no to be searched : "))
    if student is None:
        print("\n Record does not exist ")
    else:
        print("\n record found ")
        print(student)


def _print(store, reader):
    print("\n Hash Index : Roll No. : Name : Class : Division : Address")
    for slot, student in store.entries():
        print(f"{slot} {student}")


_MENU = (
    " 1. Insert a record",
    " 2. Modify a record",
    " 3. Search a record",
    " 4. Print a record",
    " 5. Quit",
)
_ACTIONS = {1: _insert, 2: _modify, 3: _search, 4: _print}
_QUIT = 5


def main(argv=None):
    """Run the interactive menu over a fresh direct-access student file."""
    args = sys.argv[1:] if argv is None else list(argv)
    store = DirectAccessFile(args[0] if args else DEFAULT_PATH)
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
            except KeyError as exc:
                print(f"Error: no record for roll no {exc.args[0]}")
            except ValueError as exc:
                print(f"Error: {exc}")
    except EOFError:
        return 0


if __name__ == "__main__":
    sys.exit(main())