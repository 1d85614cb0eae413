"""A small record store with text-file persistence and a console menu."""

from __future__ import annotations

import argparse
import re
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path

__all__ = [
    "MAX_RECORDS",
    "NAME_LIMIT",
    "StoreFullError",
    "Record",
    "Stats",
    "RecordStore",
    "main",
]

MAX_RECORDS = 100
NAME_LIMIT = 49

_LINE = re.compile(r"\s*([+-]?\d+)\s*([^\t\n]{1,49})\s*([+-]?\d+)\s*")


class StoreFullError(Exception):
    """Raised when a record is added to a full store."""


@dataclass
class Record:
    """An identified person with a name and an age."""

    record_id: int
    name: str
    age: int


@dataclass(frozen=True)
class Stats:
    """Summary of the ages in a store; age fields are None when it is empty."""

    count: int
    min_age: int | None
    max_age: int | None
    average: float | None


def _clip(name: str) -> str:
    return name[:NAME_LIMIT]


class RecordStore:
    """Records with unique ids, kept in insertion order."""

    def __init__(self, records: Iterable[Record] = (), capacity: int = MAX_RECORDS) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._records: list[Record] = []
        for record in records:
            self.add(record)

    def _index(self, record_id: int) -> int:
        for index, record in enumerate(self._records):
            if record.record_id == record_id:
                return index
        raise KeyError("Not found")

    def add(self, record: Record) -> Record:
        """Store a copy of record; ids must be unique."""
        if len(self._records) >= self.capacity:
            raise StoreFullError("Database full")
        if any(r.record_id == record.record_id for r in self._records):
            raise ValueError("Id already exists")
        stored = Record(record.record_id, _clip(record.name), record.age)
        self._records.append(stored)
        return stored

    def update(self, record_id: int, name: str, age: int) -> Record:
        """Give a record a new name and age."""
        record = self._records[self._index(record_id)]
        record.name = _clip(name)
        record.age = age
        return record

    def delete(self, record_id: int) -> Record:
        """Remove and return the record with this id."""
        return self._records.pop(self._index(record_id))

    def search(self, query: str) -> list[Record]:
        """Records whose name contains query, case-sensitively."""
        return [record for record in self._records if query in record.name]

    def sort_by_age(self) -> None:
        """Order records by age, youngest first, with an exchange sort."""
        records = self._records
        for i in range(len(records)):
            for j in range(i + 1, len(records)):
                if records[i].age > records[j].age:
                    records[i], records[j] = records[j], records[i]

    def stats(self) -> Stats:
        """Count, youngest, oldest and mean age."""
        if not self._records:
            return Stats(0, None, None, None)
        ages = [record.age for record in self._records]
        return Stats(len(ages), min(ages), max(ages), sum(ages) / len(ages))

    def save(self, path: str | Path) -> None:
        """Write one ``id<TAB>name<TAB>age`` line per record."""
        with open(path, "w", encoding="utf-8") as handle:
            for r in self._records:
                handle.write(f"{r.record_id}\t{r.name}\t{r.age}\n")

    def load(self, path: str | Path) -> int:
        """Replace the records with those in a saved file; return how many.

        Reading stops at the first malformed line or when the store is full.
        """
        with open(path, encoding="utf-8") as handle:
            self._records = []
            for line in handle:
                if len(self._records) >= self.capacity:
                    break
                match = _LINE.fullmatch(line)
                if match is None:
                    break
                record_id, name, age = match.groups()
                self._records.append(Record(int(record_id), name, int(age)))
        return len(self._records)

    def clear(self) -> None:
        """Drop every record."""
        self._records = []

    def __iter__(self) -> Iterator[Record]:
        return iter(list(self._records))

    def __len__(self) -> int:
        return len(self._records)


def _show(record: Record) -> str:
    return f"ID:{record.record_id} Name:{record.name} Age:{record.age}"


def _read_int(prompt: str) -> int | None:
    try:
        return int(input(prompt).strip())
    except ValueError:
        print("Invalid input")
        return None


def _add(store: RecordStore) -> None:
    if len(store) >= store.capacity:
        print("Database full")
        return
    record_id = _read_int("Enter id: ")
    if record_id is None:
        return
    if any(r.record_id == record_id for r in store):
        print("Id already exists")
        return
    name = input("Enter name: ")
    age = _read_int("Enter age: ")
    if age is None:
        return
    store.add(Record(record_id, name, age))
    print("Record added")


def _update(store: RecordStore) -> None:
    record_id = _read_int("Enter id to update: ")
    if record_id is None:
        return
    if not any(r.record_id == record_id for r in store):
        print("Not found")
        return
    name = input("Enter new name: ")
    age = _read_int("Enter new age: ")
    if age is None:
        return
    store.update(record_id, name, age)
    print("Updated")


def _delete(store: RecordStore) -> None:
    record_id = _read_int("Enter id to delete: ")
    if record_id is None:
        return
    try:
        store.delete(record_id)
    except KeyError:
        print("Not found")
        return
    print("Deleted")


def _stats(store: RecordStore) -> None:
    stats = store.stats()
    print(f"Total records: {stats.count}")
    if stats.count:
        print(f"Min:{stats.min_age} Max:{stats.max_age} Avg:{stats.average:.2f}")


def _search(store: RecordStore) -> None:
    found = store.search(input("Enter name to search: "))
    for record in found:
        print(_show(record))
    if not found:
        print("No match")


def _save(store: RecordStore, path: Path) -> None:
    try:
        store.save(path)
    except OSError:
        print("Save error")
        return
    print(f"Saved to {path}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive record manager."""
    parser = argparse.ArgumentParser(prog="algodeck-records")
    parser.add_argument("--file", default="db.txt", help="database file")
    args = parser.parse_args(argv)
    path = Path(args.file)
    store = RecordStore()

    print("Simple Manager - Basic C Program")
    print("================================")
    try:
        print(f"Loaded {store.load(path)} records")
    except FileNotFoundError:
        print("No file")

    try:
        while True:
            print(
                "\n1.Add 2.List 3.Update 4.Delete 5.Stats 6.Search "
                "7.Sort 8.Save 9.Clear 10.Exit"
            )
            choice = _read_int("Choose: ")
            if choice is None:
                continue
            if choice == 1:
                _add(store)
            elif choice == 2:
                if not len(store):
                    print("No records")
                for record in store:
                    print(_show(record))
            elif choice == 3:
                _update(store)
            elif choice == 4:
                _delete(store)
            elif choice == 5:
                _stats(store)
            elif choice == 6:
                _search(store)
            elif choice == 7:
                store.sort_by_age()
                print("Sorted by age")
            elif choice == 8:
                _save(store, path)
            elif choice == 9:
                store.clear()
                print("Cleared all records")
            elif choice == 10:
                print("Exiting")
                _save(store, path)
                break
            else:
                print("Invalid choice")
    except EOFError:
        print()
    return 0