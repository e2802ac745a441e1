"""Small text-file utilities: create, count, append, copy with case swap, merge, stats."""

from __future__ import annotations

import argparse
import shutil
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Sequence, TypeVar, Union

StrPath = Union[str, "PathLike[str]"]
_Text = TypeVar("_Text", str, bytes)

_ASCII_SWAP = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz",
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ",
)


@dataclass(frozen=True)
class TextStats:
    """Counts of characters, words and lines in a file."""

    chars: int
    words: int
    lines: int


def create_file(path: StrPath) -> Path:
    """Create (or truncate) a file and return its path."""
    target = Path(path)
    with target.open("wb"):
        pass
    return target


def count_chars(path: StrPath) -> int:
    """Return the number of characters (bytes) stored in a file."""
    return len(Path(path).read_bytes())


def append_text(path: StrPath, data: str) -> None:
    """Append text to a file, creating it if needed."""
    with Path(path).open("a", encoding="utf-8", newline="") as stream:
        stream.write(data)


def swap_ascii_case(text: _Text) -> _Text:
    """Swap the case of ASCII letters only; everything else is left untouched."""
    if isinstance(text, bytes):
        # bytes.swapcase only touches ASCII letters.
        return text.swapcase()
    return text.translate(_ASCII_SWAP)


def copy_swapping_case(source: StrPath, destination: StrPath) -> None:
    """Copy a file, swapping the case of every ASCII letter on the way."""
    with Path(source).open("rb") as src:
        with Path(destination).open("wb") as dst:
            dst.write(swap_ascii_case(src.read()))


def merge_files(first: StrPath, second: StrPath, merged: StrPath) -> None:
    """Write the first file, a single space, then the second file into a new file.

    The merged file is opened (and filled with the first file) before the
    second file is opened, so a missing second file leaves the first part
    written.
    """
    with Path(first).open("rb") as src1, Path(merged).open("wb") as out:
        shutil.copyfileobj(src1, out)
        with Path(second).open("rb") as src2:
            out.write(b" ")
            shutil.copyfileobj(src2, out)


def text_stats(path: StrPath) -> TextStats:
    """Count characters, whitespace-separated words and lines in a file.

    Lines are one for a non-empty file plus one per newline. Words are
    counted starting from the second byte of the file, as the word pass
    begins at offset one.
    """
    data = Path(path).read_bytes()
    chars = len(data)
    lines = (1 if chars else 0) + data.count(b"\n")
    words = len(data[1:].split())
    return TextStats(chars=chars, words=words, lines=lines)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="recordfiles-text", description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)

    create = commands.add_parser("create", help="create an empty file")
    create.add_argument("path", nargs="?", default="newfile.txt")

    count = commands.add_parser("count", help="count characters in a file")
    count.add_argument("path", nargs="?", default="read.txt")

    append = commands.add_parser("append", help="append text to a file")
    append.add_argument("path", nargs="?", default="output.txt")
    append.add_argument("--data", default="Cpp Programming")

    copy = commands.add_parser("copy", help="copy a file swapping letter case")
    copy.add_argument("source", nargs="?", default="source.txt")
    copy.add_argument("destination", nargs="?", default="destination.txt")

    merge = commands.add_parser("merge", help="merge two files into a new one")
    merge.add_argument("first", nargs="?", default="file1.txt")
    merge.add_argument("second", nargs="?", default="file2.txt")
    merge.add_argument("merged", nargs="?", default="merged_file.txt")

    stats = commands.add_parser("stats", help="count characters, words and lines")
    stats.add_argument("path", nargs="?", default="read.txt")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run one of the text-file commands; return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        if args.command == "create":
            try:
                create_file(args.path)
            except OSError:
                print("\nError: Unable to Create File...\n")
                return 1
            print("\nFile Created Successfully...\n")
        elif args.command == "count":
            print(f"\n\nNumber of Characters in File => {count_chars(args.path)}\n")
        elif args.command == "append":
            append_text(args.path, args.data)
            print("\nData Appended Successfully...\n")
        elif args.command == "copy":
            copy_swapping_case(args.source, args.destination)
            print("\nFile Content Successfully Copied...\n")
        elif args.command == "merge":
            merge_files(args.first, args.second, args.merged)
            print("\nContent of the Files Merged Successfully...\n")
        else:
            stats = text_stats(args.path)
            print(f"\nNumber of Characters in File => {stats.chars}")
            print(f"Number of Words in File => {stats.words}")
            print(f"Number of Lines in File => {stats.lines}")
    except OSError as exc:
        name = exc.filename if exc.filename is not None else ""
        print(f"\nError: Unable to Open File {name}...\n")
        return 1
    return 0