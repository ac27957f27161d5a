"""Student records stored as twelve fields per record, sorted by roll number."""

from __future__ import annotations

import argparse
import os
import tempfile
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

DEFAULT_DATABASE = "Students_Database.txt"


@dataclass(frozen=True)
class StudentRecord:
    """One student, in the field order used by the database file."""

    serial: int
    name: str
    father_name: str
    gender: str
    date_of_birth: str
    age: int
    city: str
    department: str
    semester: int
    roll_number: int
    gpa: float
    skills: str


class _Cursor:
    """Reads whitespace-separated tokens and whole lines from text."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _skip_space(self) -> None:
        while self._pos < len(self._text) and self._text[self._pos].isspace():
            self._pos += 1

    def at_end(self) -> bool:
        self._skip_space()
        return self._pos >= len(self._text)

    def token(self, field: str) -> str:
        self._skip_space()
        start = self._pos
        while self._pos < len(self._text) and not self._text[self._pos].isspace():
            self._pos += 1
        if start == self._pos:
            raise ValueError(f"incomplete record: missing {field}")
        return self._text[start:self._pos]

    def char(self, field: str) -> str:
        self._skip_space()
        if self._pos >= len(self._text):
            raise ValueError(f"incomplete record: missing {field}")
        value = self._text[self._pos]
        self._pos += 1
        return value

    def ignore(self) -> None:
        if self._pos < len(self._text):
            self._pos += 1

    def line(self) -> str:
        end = self._text.find("\n", self._pos)
        if end < 0:
            value = self._text[self._pos:]
            self._pos = len(self._text)
        else:
            value = self._text[self._pos:end]
            self._pos = end + 1
        return value


def _number(text: str, field: str, kind: type) -> int | float:
    try:
        return kind(text)
    except ValueError as exc:
        raise ValueError(f"invalid {field}: {text!r}") from exc


def _read_one(cursor: _Cursor) -> StudentRecord:
    serial = _number(cursor.token("serial"), "serial", int)
    cursor.ignore()
    name = cursor.line()
    father_name = cursor.line()
    gender = cursor.char("gender")
    cursor.ignore()
    date_of_birth = cursor.line()
    age = _number(cursor.token("age"), "age", int)
    cursor.ignore()
    city = cursor.line()
    department = cursor.line()
    semester = _number(cursor.token("semester"), "semester", int)
    roll_number = _number(cursor.token("roll number"), "roll number", int)
    gpa = _number(cursor.token("gpa"), "gpa", float)
    cursor.ignore()
    skills = cursor.line()
    return StudentRecord(
        serial, name, father_name, gender, date_of_birth, age,
        city, department, semester, roll_number, gpa, skills,
    )


def read_records(stream: TextIO) -> list[StudentRecord]:
    """Read every record from a text stream in database format."""
    cursor = _Cursor(stream.read())
    records = []
    while not cursor.at_end():
        records.append(_read_one(cursor))
    return records


def write_records(records: Iterable[StudentRecord], stream: TextIO) -> None:
    """Write records one field per line, in database format."""
    for record in records:
        fields = (
            record.serial, record.name, record.father_name, record.gender,
            record.date_of_birth, record.age, record.city, record.department,
            record.semester, record.roll_number, f"{record.gpa:g}", record.skills,
        )
        stream.writelines(f"{field}\n" for field in fields)


def sort_by_roll(records: Iterable[StudentRecord]) -> list[StudentRecord]:
    """Return the records in ascending roll-number order; ties keep their order."""
    return sorted(records, key=lambda record: record.roll_number)


def sort_file(path: str | os.PathLike[str]) -> list[StudentRecord]:
    """Rewrite the database at ``path`` sorted by roll number; return the records."""
    target = Path(path)
    with target.open(encoding="utf-8") as source:
        records = sort_by_roll(read_records(source))
    handle, temp_name = tempfile.mkstemp(dir=target.parent, suffix=".tmp")
    try:
        with os.fdopen(handle, "w", encoding="utf-8", newline="\n") as temp:
            write_records(records, temp)
        os.replace(temp_name, target)
    except BaseException:
        Path(temp_name).unlink(missing_ok=True)
        raise
    return records


def main(argv: Sequence[str] | None = None) -> int:
    """Sort a student database file by roll number and list the result."""
    parser = argparse.ArgumentParser(
        prog="drillbook-students",
        description="Sort a student database file by roll number.",
    )
    parser.add_argument("path", nargs="?", default=DEFAULT_DATABASE)
    args = parser.parse_args(argv)
    try:
        records = sort_file(args.path)
    except FileNotFoundError:
        print("\nFile not found !!!\n")
        return 1
    except ValueError as exc:
        print(f"\nError: {exc}\n")
        return 1
    print("\n All data readed and stored the roll numbers into an array \n")
    for record in records:
        print(f"{record.name:>40}  |   {record.roll_number:>5}")
    print("\n\n Success : The data sorted successfully \n")
    return 0