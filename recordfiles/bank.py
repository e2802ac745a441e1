"""Bank accounts kept as fixed-size binary entries in a data file."""

from __future__ import annotations

import argparse
import struct
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Iterator, Sequence, Union

StrPath = Union[str, "PathLike[str]"]

MAX_ACCOUNTS = 50
DEFAULT_PATH = "bank_data.dat"

# 31-byte name, 6-byte account number, padding to the double's alignment, balance.
_RECORD = struct.Struct("<31s6s3xd")


class InsufficientBalance(ValueError):
    """Raised when a withdrawal exceeds the balance."""


def _fit(text: str, limit: int) -> str:
    """Cut text so that its UTF-8 form takes at most ``limit`` bytes."""
    return text.encode("utf-8")[:limit].decode("utf-8", errors="ignore")


def _cstring(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def _number(value: float) -> str:
    return format(value, "g")


@dataclass
class BankAccount:
    """An account holder's name, account number and balance."""

    name: str
    account_number: str
    balance: float = 0.0

    MAX_NAME_CHARS = 30
    MAX_ACCOUNT_CHARS = 5
    RECORD_SIZE = _RECORD.size

    def __post_init__(self) -> None:
        self.name = _fit(self.name, self.MAX_NAME_CHARS)
        self.account_number = _fit(self.account_number, self.MAX_ACCOUNT_CHARS)
        self.balance = float(self.balance)

    def deposit(self, amount: float) -> float:
        """Add money to the account and return the new balance."""
        if amount < 0:
            raise ValueError(f"invalid deposit amount {_number(amount)}")
        self.balance += amount
        return self.balance

    def withdraw(self, amount: float) -> float:
        """Take money from the account and return the new balance."""
        if amount < 0:
            raise ValueError(f"invalid withdrawal amount {_number(amount)}")
        if self.balance < amount:
            raise InsufficientBalance(
                f"balance {_number(self.balance)} is less than {_number(amount)}"
            )
        self.balance -= amount
        return self.balance

    def pack(self) -> bytes:
        """Encode the account as one fixed-size record."""
        return _RECORD.pack(
            self.name.encode("utf-8"),
            self.account_number.encode("utf-8"),
            self.balance,
        )

    @classmethod
    def unpack(cls, data: bytes) -> BankAccount:
        """Decode one record produced by :meth:`pack`."""
        if len(data) != _RECORD.size:
            raise ValueError(
                f"an account record is {_RECORD.size} bytes, got {len(data)}"
            )
        name, number, balance = _RECORD.unpack(data)
        return cls(_cstring(name), _cstring(number), balance)

    def describe(self) -> str:
        """Return the account's details as display lines."""
        return (
            f"Name => {self.name}\n"
            f"Account Number => {self.account_number}\n"
            f"Balance => {_number(self.balance)}"
        )


class AccountStore:
    """An append-only file of bank account records."""

    def __init__(self, path: StrPath = DEFAULT_PATH) -> None:
        self.path = Path(path)

    def add(self, account: BankAccount) -> None:
        """Append an account to the file, creating the file if needed."""
        if not account.name:
            raise ValueError("an account without a name cannot be stored")
        with self.path.open("ab") as stream:
            stream.write(account.pack())

    def __iter__(self) -> Iterator[BankAccount]:
        with self.path.open("rb") as stream:
            while chunk := stream.read(BankAccount.RECORD_SIZE):
                if len(chunk) < BankAccount.RECORD_SIZE:
                    break
                yield BankAccount.unpack(chunk)

    def richer_than(self, limit: float) -> Iterator[BankAccount]:
        """Yield the stored accounts whose balance is strictly above the limit."""
        return (account for account in self if account.balance > limit)


def _read_account() -> BankAccount:
    name = input(f"\nEnter Name (MAX_CHARS {BankAccount.MAX_NAME_CHARS}) => ")
    number = input(
        f"\nEnter Account Number (MAX_CHARS {BankAccount.MAX_ACCOUNT_CHARS}) => "
    )
    account = BankAccount(name, number)
    try:
        initial = float(input("\nEnter Initial Balance  => "))
    except ValueError:
        print("\n!!! Invalid Deposit Amount...")
        return account
    try:
        account.deposit(initial)
    except ValueError:
        print("\n!!! Invalid Deposit Amount...")
    else:
        print(f"\nRupees {_number(initial)} Have Deposited Successfully...")
    return account


def main(argv: Sequence[str] | None = None) -> int:
    """Store accounts typed in, list them, then show the richer ones."""
    parser = argparse.ArgumentParser(prog="recordfiles-bank", description=__doc__)
    parser.add_argument("--file", default=DEFAULT_PATH, help="data file")
    args = parser.parse_args(argv)
    store = AccountStore(args.file)

    try:
        count = int(input(f"\nHow Many Bank Accounts You Want to Create (MAX {MAX_ACCOUNTS}) => "))
    except ValueError:
        count = 0
    if not 1 <= count <= MAX_ACCOUNTS:
        print("\n!!! Invalid Input...")
        return 0

    print(f"\n>>>>>>>>>> Enter Data of {count} Bank Accounts <<<<<<<<<<<<<")
    for number in range(1, count + 1):
        print(f"\n>>>>>>>>>>> Enter Data of Bank Account-{number} <<<<<<<<<<<<")
        try:
            store.add(_read_account())
        except (ValueError, OSError):
            print("\n!!! Bank Account Data Not Stored...")
            return 0
    print("\nBank Accounts Data Successfully Stored...")

    print("\n>>>>>>>>>> Bank Accounts Data Stored In File <<<<<<<<<<<<<<", end="")
    try:
        for account in store:
            print(f"\n\n{account.describe()}")
    except OSError:
        print("\nError: Unable to Open File...", end="")

    try:
        limit = float(input(
            "\nEnter Balance Amount to Show Persons Having Greater than that Balance => "
        ))
    except ValueError:
        print("\n!!! Invalid Input...")
        return 0
    print(f"\n>>>>>>> Following Persons Have Balance Greater than {_number(limit)} <<<<<<<<<<")
    try:
        richer = list(store.richer_than(limit))
    except OSError:
        print("\nError: Unable to Open File...")
        return 1
    for account in richer:
        print(f"\n{account.describe()}")
    if not richer:
        print(f"\nThere is No Person Having Balance Greater than {_number(limit)}")
    return 0