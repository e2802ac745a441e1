"""Book records kept as fixed-size binary entries in a data file."""

from __future__ import annotations

import argparse
import struct
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Iterator, Sequence, Union

StrPath = Union[str, "PathLike[str]"]

MAX_BOOKS = 50
DEFAULT_PATH = "books_data.dat"

# unsigned id, 31-byte title, padding up to the double's alignment, price.
_RECORD = struct.Struct("<I31s5xd")
_UINT_MAX = 0xFFFFFFFF


def _fit(text: str, limit: int) -> str:
    """Cut text so that its UTF-8 form takes at most ``limit`` bytes."""
    return text.encode("utf-8")[:limit].decode("utf-8", errors="ignore")


def _cstring(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def _number(value: float) -> str:
    return format(value, "g")


@dataclass
class Book:
    """A book with an id, a title of limited length and a price."""

    book_id: int
    title: str
    price: float

    MAX_TITLE_CHARS = 30
    RECORD_SIZE = _RECORD.size

    def __post_init__(self) -> None:
        self.book_id = abs(int(self.book_id))
        if self.book_id > _UINT_MAX:
            raise ValueError(f"book id {self.book_id} is out of range")
        self.title = _fit(self.title, self.MAX_TITLE_CHARS)
        self.price = float(self.price)

    def pack(self) -> bytes:
        """Encode the book as one fixed-size record."""
        return _RECORD.pack(self.book_id, self.title.encode("utf-8"), self.price)

    @classmethod
    def unpack(cls, data: bytes) -> Book:
        """Decode one record produced by :meth:`pack`."""
        if len(data) != _RECORD.size:
            raise ValueError(
                f"a book record is {_RECORD.size} bytes, got {len(data)}"
            )
        book_id, title, price = _RECORD.unpack(data)
        return cls(book_id, _cstring(title), price)

    def describe(self) -> str:
        """Return the book's details as display lines."""
        return (
            f"Book Id => {self.book_id}\n"
            f"Book Title => {self.title}\n"
            f"Book Price => {_number(self.price)}"
        )


class BookStore:
    """An append-only file of book records."""

    def __init__(self, path: StrPath = DEFAULT_PATH) -> None:
        self.path = Path(path)

    def add(self, book: Book) -> None:
        """Append a book to the file, creating the file if needed."""
        if book.price == -1:
            raise ValueError("a price of -1 marks an unset book record")
        with self.path.open("ab") as stream:
            stream.write(book.pack())

    def __iter__(self) -> Iterator[Book]:
        with self.path.open("rb") as stream:
            while chunk := stream.read(Book.RECORD_SIZE):
                if len(chunk) < Book.RECORD_SIZE:
                    break
                yield Book.unpack(chunk)

    def find(self, book_id: int) -> Book | None:
        """Return the first stored book with the given id, or None."""
        wanted = int(book_id) & _UINT_MAX
        return next((book for book in self if book.book_id == wanted), None)


def _read_book() -> Book:
    book_id = int(input("\nEnter Book Id => "))
    title = input(f"\nEnter Book Title (MAX_CHARS {Book.MAX_TITLE_CHARS}) => ")
    price = float(input("\nEnter Book Price => "))
    return Book(book_id, title, price)


def main(argv: Sequence[str] | None = None) -> int:
    """Store books typed in, list the file, then search it by id."""
    parser = argparse.ArgumentParser(prog="recordfiles-books", description=__doc__)
    parser.add_argument("--file", default=DEFAULT_PATH, help="data file")
    args = parser.parse_args(argv)
    store = BookStore(args.file)

    try:
        count = int(input(f"\nHow Many Books' Data You Want to Store (MAX {MAX_BOOKS}) => "))
    except ValueError:
        count = 0
    if not 1 <= count <= MAX_BOOKS:
        print("\n!!! Invalid Input...")
        return 0

    print(f"\n>>>>>>>>>> Enter Data of {count} Books <<<<<<<<<<<<<")
    for number in range(1, count + 1):
        print(f"\n>>>>>>>>>>> Enter Data of Book {number} <<<<<<<<<<<<")
        try:
            store.add(_read_book())
        except (ValueError, OSError):
            print("\n!!! Book Data Not Stored...")
            return 0
    print("\nBooks Data Successfully Stored...")

    print("\n>>>>>>>>>> Books Data Stored In File <<<<<<<<<<<<<<", end="")
    try:
        for book in store:
            print(f"\n\n{book.describe()}")
    except OSError:
        print("\nError: Unable to Open File...", end="")

    try:
        wanted = int(input("\nEnter Book Id to Search A Book => "))
    except ValueError:
        print("\n!!! Invalid Input...")
        return 0
    try:
        found = store.find(wanted)
    except OSError:
        print("\nError: Unable to Open File...")
        return 1
    if found is None:
        print(f"\nThere is No Book Data Stored having Book Id {wanted}")
    else:
        print("\n>>>>>>>>> Book Found <<<<<<<<")
        print(found.describe())
    return 0