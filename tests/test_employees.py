import io

import pytest

from labworks.employees import (
    Employee,
    format_employee,
    load_employees,
    main,
    parse_flag,
    sort_employees,
)


@pytest.mark.parametrize("flag,expected", [("-a", "a"), ("/a", "a"), ("-d", "d"), ("/d", "d")])
def test_parse_flag(flag, expected):
    assert parse_flag(flag) == expected


@pytest.mark.parametrize("flag", ["a", "-x", "", "+a"])
def test_parse_flag_rejects(flag):
    with pytest.raises(ValueError):
        parse_flag(flag)


def test_load_employees():
    stream = io.StringIO("1 Ann Smith 100.5\n2 Bob Jones 50\n")
    employees = load_employees(stream)
    assert employees == [
        Employee(1, "Ann", "Smith", 100.5),
        Employee(2, "Bob", "Jones", 50.0),
    ]


def test_load_rejects_bad_name():
    with pytest.raises(ValueError):
        load_employees(io.StringIO("1 Ann2 Smith 10\n"))


def test_load_rejects_incomplete_record():
    with pytest.raises(ValueError):
        load_employees(io.StringIO("1 Ann Smith 10\n2 Bob\n"))


def test_load_rejects_bad_wages():
    with pytest.raises(ValueError):
        load_employees(io.StringIO("1 Ann Smith lots\n"))


def test_load_stops_at_unreadable_id():
    assert load_employees(io.StringIO("x Ann Smith 10\n")) == []


def test_sort_by_wages_then_names():
    people = [
        Employee(3, "Cid", "Brown", 30.0),
        Employee(1, "Ann", "Zed", 10.0),
        Employee(2, "Bob", "Adams", 10.0),
    ]
    result = sort_employees(people)
    assert [e.id for e in result] == [2, 1, 3]


def test_sort_descending_is_reverse():
    people = [
        Employee(3, "Cid", "Brown", 30.0),
        Employee(1, "Ann", "Zed", 10.0),
        Employee(2, "Bob", "Adams", 10.0),
        Employee(4, "Bob", "Adams", 10.0),
    ]
    assert sort_employees(people, True) == list(reversed(sort_employees(people)))


def test_wages_within_eps_are_equal():
    people = [
        Employee(1, "Ann", "Zed", 10.0 + 1e-12),
        Employee(2, "Ann", "Adams", 10.0),
    ]
    assert [e.id for e in sort_employees(people)] == [2, 1]


def test_sort_key_order():
    employee = Employee(7, "Ann", "Smith", 1.5)
    assert employee.sort_key() == (1.5, "Smith", "Ann", 7)


def test_format_employee():
    assert format_employee(Employee(1, "Ann", "Smith", 100.5)) == "1 Ann Smith 100.500000"


def test_main_writes_sorted(tmp_path):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_text("1 Ann Smith 100.5\n2 Bob Jones 50\n3 Cid Brown 75\n")
    assert main([str(source), "-d", str(target)]) == 0
    with open(source) as stream:
        expected = sort_employees(load_employees(stream), True)
    assert target.read_text() == "".join(format_employee(e) + "\n" for e in expected)


def test_main_same_path(tmp_path):
    source = tmp_path / "in.txt"
    source.write_text("1 Ann Smith 1\n")
    assert main([str(source), "-a", str(source)]) == 1


def test_main_bad_flag(tmp_path):
    source = tmp_path / "in.txt"
    source.write_text("1 Ann Smith 1\n")
    assert main([str(source), "-x", str(tmp_path / "out.txt")]) == 1


def test_main_wrong_argument_count():
    assert main(["only"]) == 1