import builtins

import pytest

from recordfiles.employees import Department, Employee, EmployeeStore, main


def _employee(employee_id=1, name="Asha", department="sales"):
    return Employee(employee_id, name, 30, "0000000000", "1 Example Road", department)


def test_record_size_matches_layout():
    assert len(_employee().pack()) == 132
    assert Employee.RECORD_SIZE == 132


def test_pack_unpack_round_trip():
    original = _employee(7, "Ravi", "design")
    assert Employee.unpack(original.pack()) == original


def test_unpack_rejects_wrong_size():
    with pytest.raises(ValueError):
        Employee.unpack(b"\0" * 10)


def test_negative_id_and_age_become_positive():
    employee = Employee(-5, "Asha", -40, "0", "x", "admin")
    assert employee.employee_id == 5
    assert employee.age == 40


def test_department_is_lowercased():
    assert _employee(department="SaLeS").department == "sales"
    assert _employee(department=Department.DESIGN).department == "design"


def test_fields_are_truncated():
    employee = Employee(1, "n" * 40, 20, "9" * 15, "a" * 60, "d" * 40)
    assert employee.name == "n" * Employee.MAX_NAME_CHARS
    assert employee.phone_number == "9" * Employee.MAX_PHONE_CHARS
    assert employee.address == "a" * Employee.MAX_ADDRESS_CHARS
    assert employee.department == "d" * Employee.MAX_DEPARTMENT_CHARS


def test_describe_lists_all_fields():
    lines = _employee(3, "Asha", "admin").describe().splitlines()
    assert lines[0] == "Employee Id => 3"
    assert lines[1] == "Employee Name => Asha"
    assert lines[-1] == "Employee Department => admin"


def test_split_writes_department_file_names(tmp_path):
    store = EmployeeStore(tmp_path / "emp.dat")
    store.add(_employee(1, "A", "admin"))
    paths = store.split_by_department(tmp_path)
    assert paths[Department.ADMIN].name == "adm.dat"
    assert paths[Department.SALES].name == "sal.dat"
    assert paths[Department.PRODUCTION].name == "pro.dat"
    assert (tmp_path / "adm.dat").exists()
    assert (tmp_path / "sal.dat").exists()
    assert (tmp_path / "pro.dat").exists()


def test_store_round_trip_keeps_order(tmp_path):
    store = EmployeeStore(tmp_path / "emp.dat")
    people = [_employee(1, "A"), _employee(2, "B", "admin")]
    for person in people:
        store.add(person)
    assert list(store) == people


def test_store_ignores_trailing_partial_record(tmp_path):
    path = tmp_path / "emp.dat"
    store = EmployeeStore(path)
    store.add(_employee())
    with path.open("ab") as stream:
        stream.write(b"\1\2\3")
    assert list(store) == [_employee()]


def test_add_rejects_unset_record(tmp_path):
    store = EmployeeStore(tmp_path / "emp.dat")
    with pytest.raises(ValueError):
        store.add(Employee(0xFFFFFFFF, "x", 1, "0", "a", "admin"))
    assert not (tmp_path / "emp.dat").exists()


def test_missing_file_raises(tmp_path):
    store = EmployeeStore(tmp_path / "none.dat")
    with pytest.raises(FileNotFoundError):
        list(store)
    with pytest.raises(FileNotFoundError):
        store.split_by_department(tmp_path)
    assert not (tmp_path / "adm.dat").exists()


def test_split_routes_by_department(tmp_path):
    store = EmployeeStore(tmp_path / "emp.dat")
    sales = _employee(1, "S", "sales")
    other = _employee(2, "O", "marketing")
    admin = _employee(3, "A", "admin")
    design = _employee(4, "D", "design")
    for person in (sales, other, admin, design):
        store.add(person)
    paths = store.split_by_department(tmp_path)
    assert set(paths) == set(Department)
    assert list(EmployeeStore(paths[Department.SALES])) == [sales]
    assert list(EmployeeStore(paths[Department.ADMIN])) == [other, admin]
    assert list(EmployeeStore(paths[Department.DESIGN])) == [design]
    assert list(EmployeeStore(paths[Department.PRODUCTION])) == []


def test_of_department_reads_split_file(tmp_path):
    store = EmployeeStore(tmp_path / "emp.dat")
    store.add(_employee(1, "S", "sales"))
    store.add(_employee(2, "O", "marketing"))
    store.split_by_department(tmp_path)
    admins = store.of_department("ADMIN", tmp_path)
    assert [e.employee_id for e in admins] == [2]


def test_of_department_falls_back_to_main_file(tmp_path):
    store = EmployeeStore(tmp_path / "emp.dat")
    store.add(_employee(1, "S", "sales"))
    store.add(_employee(2, "M", "marketing"))
    store.add(_employee(3, "T", "Sales"))
    assert [e.employee_id for e in store.of_department("Sales", tmp_path)] == [1, 3]
    assert [e.employee_id for e in store.of_department("MARKETING", tmp_path)] == [2]


def test_of_department_rejects_long_name(tmp_path):
    store = EmployeeStore(tmp_path / "emp.dat")
    with pytest.raises(ValueError):
        store.of_department("x" * 31, tmp_path)


def test_main_stores_and_splits(tmp_path, monkeypatch, capsys):
    answers = iter(
        ["1", "9", "Asha", "30", "0000000000", "1 Example Road", "7", "2", "sales"]
    )
    monkeypatch.setattr(builtins, "input", lambda prompt="": next(answers))
    data = tmp_path / "emp.dat"
    status = main(["--file", str(data), "--directory", str(tmp_path)])
    assert status == 0
    stored = list(EmployeeStore(tmp_path / "sal.dat"))
    assert [e.name for e in stored] == ["Asha"]
    output = capsys.readouterr().out
    assert "Invalid Department Number" in output
    assert "Employee Name => Asha" in output


def test_main_rejects_bad_count(monkeypatch, capsys, tmp_path):
    monkeypatch.setattr(builtins, "input", lambda prompt="": "0")
    assert main(["--file", str(tmp_path / "emp.dat")]) == 0
    assert "Invalid Input" in capsys.readouterr().out