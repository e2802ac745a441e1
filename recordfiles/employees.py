"""Employee records kept as fixed-size binary entries, split by department."""

from __future__ import annotations

import argparse
import string
import struct
from contextlib import ExitStack
from dataclasses import dataclass
from enum import Enum
from os import PathLike
from pathlib import Path
from typing import BinaryIO, Iterator, Sequence, Union

StrPath = Union[str, "PathLike[str]"]

MAX_EMPLOYEES = 50
DEFAULT_PATH = "emp.dat"

# id, age, 31-byte name, 51-byte address, 31-byte department, 11-byte phone.
_RECORD = struct.Struct("<II31s51s31s11s")
_UINT_MAX = 0xFFFFFFFF
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


class Department(str, Enum):
    """The departments that have a file of their own."""

    ADMIN = "admin"
    SALES = "sales"
    PRODUCTION = "production"
    DESIGN = "design"

    @property
    def file_name(self) -> str:
        """Name of the file holding this department's employees."""
        return _FILE_NAMES[self]


_FILE_NAMES = {
    Department.ADMIN: "adm.dat",
    Department.SALES: "sal.dat",
    Department.PRODUCTION: "pro.dat",
    Department.DESIGN: "des.data",
}
_BY_NAME = {department.value: department for department in Department}


def _fit(text: str, limit: int) -> str:
    """Cut text so that its UTF-8 form takes at most ``limit`` bytes."""
    return text.encode("utf-8")[:limit].decode("utf-8", errors="ignore")


def _cstring(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def _unsigned(value: int, what: str) -> int:
    number = abs(int(value))
    if number > _UINT_MAX:
        raise ValueError(f"{what} {number} is out of range")
    return number


@dataclass
class Employee:
    """An employee's id, name, age, phone number, address and department."""

    employee_id: int
    name: str
    age: int
    phone_number: str
    address: str
    department: str

    MAX_NAME_CHARS = 30
    MAX_ADDRESS_CHARS = 50
    MAX_DEPARTMENT_CHARS = 30
    MAX_PHONE_CHARS = 10
    RECORD_SIZE = _RECORD.size

    def __post_init__(self) -> None:
        self.employee_id = _unsigned(self.employee_id, "employee id")
        self.age = _unsigned(self.age, "age")
        self.name = _fit(self.name, self.MAX_NAME_CHARS)
        self.phone_number = _fit(self.phone_number, self.MAX_PHONE_CHARS)
        self.address = _fit(self.address, self.MAX_ADDRESS_CHARS)
        department = (
            self.department.value
            if isinstance(self.department, Department)
            else self.department
        )
        self.department = _fit(
            department.translate(_ASCII_LOWER), self.MAX_DEPARTMENT_CHARS
        )

    def pack(self) -> bytes:
        """Encode the employee as one fixed-size record."""
        return _RECORD.pack(
            self.employee_id,
            self.age,
            self.name.encode("utf-8"),
            self.address.encode("utf-8"),
            self.department.encode("utf-8"),
            self.phone_number.encode("utf-8"),
        )

    @classmethod
    def unpack(cls, data: bytes) -> Employee:
        """Decode one record produced by :meth:`pack`."""
        if len(data) != _RECORD.size:
            raise ValueError(
                f"an employee record is {_RECORD.size} bytes, got {len(data)}"
            )
        employee_id, age, name, address, department, phone = _RECORD.unpack(data)
        return cls(
            employee_id,
            _cstring(name),
            age,
            _cstring(phone),
            _cstring(address),
            _cstring(department),
        )

    def describe(self) -> str:
        """Return the employee's details as display lines."""
        return (
            f"Employee Id => {self.employee_id}\n"
            f"Employee Name => {self.name}\n"
            f"Employee Age => {self.age}\n"
            f"Employee Phone Number => {self.phone_number}\n"
            f"Employee Address => {self.address}\n"
            f"Employee Department => {self.department}"
        )


def _records(stream: BinaryIO) -> Iterator[Employee]:
    while chunk := stream.read(Employee.RECORD_SIZE):
        if len(chunk) < Employee.RECORD_SIZE:
            break
        yield Employee.unpack(chunk)


class EmployeeStore:
    """An append-only file of employee records."""

    def __init__(self, path: StrPath = DEFAULT_PATH) -> None:
        self.path = Path(path)

    def add(self, employee: Employee) -> None:
        """Append an employee to the file, creating the file if needed."""
        if employee.employee_id == _UINT_MAX or employee.age == _UINT_MAX:
            raise ValueError("an unset employee record cannot be stored")
        with self.path.open("ab") as stream:
            stream.write(employee.pack())

    def __iter__(self) -> Iterator[Employee]:
        with self.path.open("rb") as stream:
            yield from _records(stream)

    def split_by_department(self, directory: StrPath = ".") -> dict[Department, Path]:
        """Rewrite one file per department from the store; return their paths.

        Employees whose department is not a known one go to the admin file.
        """
        folder = Path(directory)
        targets = {department: folder / department.file_name for department in Department}
        with self.path.open("rb") as source, ExitStack() as stack:
            outputs = {
                department: stack.enter_context(path.open("wb"))
                for department, path in targets.items()
            }
            for employee in _records(source):
                kind = _BY_NAME.get(employee.department, Department.ADMIN)
                outputs[kind].write(employee.pack())
        return targets

    def of_department(self, department: str, directory: StrPath = ".") -> list[Employee]:
        """Return the employees of a department.

        The department's own file is read when it can be opened; otherwise
        the main file is searched for matching employees.
        """
        if isinstance(department, Department):
            department = department.value
        if len(department.encode("utf-8")) > Employee.MAX_DEPARTMENT_CHARS:
            raise ValueError(f"department {department!r} is invalid")
        wanted = department.translate(_ASCII_LOWER)
        kind = _BY_NAME.get(wanted)
        if kind is not None:
            try:
                stream = (Path(directory) / kind.file_name).open("rb")
            except OSError:
                pass
            else:
                with stream:
                    return list(_records(stream))
        return [employee for employee in self if employee.department == wanted]


_MENU = (
    "\n>>>>>>>>>> Choose Department <<<<<<<<<<<"
    "\nPress 1. Admin"
    "\nPress 2. Sales"
    "\nPress 3. Production"
    "\nPress 4. Design"
)
_CHOICES = {
    "1": Department.ADMIN,
    "2": Department.SALES,
    "3": Department.PRODUCTION,
    "4": Department.DESIGN,
}


def _read_department() -> Department:
    while True:
        print(_MENU)
        choice = input("Enter Department Number => ").strip()
        if choice in _CHOICES:
            return _CHOICES[choice]
        print("\n!!!! Invalid Department Number... Try Again")


def _read_employee() -> Employee:
    employee_id = int(input("\nEnter Employee Id => "))
    name = input(f"\nEnter Employee Name (MAX_CHARS {Employee.MAX_NAME_CHARS}) => ")
    age = int(input("\nEnter Employee Age => "))
    phone = input(
        f"\nEnter Employee Phone Number (MAX_CHARS {Employee.MAX_PHONE_CHARS}) => "
    )
    address = input(
        f"\nEnter Employee Address (MAX_CHARS {Employee.MAX_ADDRESS_CHARS}) => "
    )
    return Employee(employee_id, name, age, phone, address, _read_department())


def main(argv: Sequence[str] | None = None) -> int:
    """Store employees typed in, list them, split them and show one department."""
    parser = argparse.ArgumentParser(prog="recordfiles-employees", description=__doc__)
    parser.add_argument("--file", default=DEFAULT_PATH, help="main data file")
    parser.add_argument("--directory", default=".", help="where department files go")
    args = parser.parse_args(argv)
    store = EmployeeStore(args.file)

    try:
        count = int(input(
            f"\nHow Many Employees' Data You Want to Store (MAX {MAX_EMPLOYEES}) => "
        ))
    except ValueError:
        count = 0
    if not 1 <= count <= MAX_EMPLOYEES:
        print("\n!!! Invalid Input...")
        return 0

    print(f"\n>>>>>>>>>> Enter Data of {count} Employees <<<<<<<<<<<<<")
    for number in range(1, count + 1):
        print(f"\n>>>>>>>>>>> Enter Data of Employee {number} <<<<<<<<<<<<")
        try:
            store.add(_read_employee())
        except (ValueError, OSError):
            print("\n!!! Employee Data Not Stored...")
            return 0
    print("\nEmployees Data Successfully Stored...")

    print("\n>>>>>>>>>> Employees Data Stored In File <<<<<<<<<<<<<<", end="")
    try:
        for employee in store:
            print(f"\n\n{employee.describe()}")
    except OSError:
        print("\nError: Unable to Open File...", end="")

    print(
        "\n>>>>>>>>> Employees Data Have Successfully Stored In Different-2 Files "
        "According to Their Departments <<<<<<<<<<<<<"
    )
    try:
        store.split_by_department(args.directory)
    except OSError:
        print("\nError: Unable to Open File...", end="")

    words = input("\nEnter A Department to Show Employees of That Department => ").split()
    department = words[0] if words else ""
    print(f"\n>>>>>>>>>> Employees of {department} Department <<<<<<<<<")
    try:
        employees = store.of_department(department, args.directory)
    except ValueError:
        print("!!! Given Department is Invalid ...")
        return 0
    except OSError:
        print("\nError: Unable to Open File...")
        return 1
    for employee in employees:
        print(f"\n{employee.describe()}")
    return 0