from src.employee_management.employee_management.employees.model import Employee
from src.employee_management.employee_management.employees.repository import InMemoryEmployeeRepository


def test_find_index_by_id_returns_first_match(sample_employees):
    repo = InMemoryEmployeeRepository(sample_employees + [Employee(2, "Dup", 1, "X", 1)])

    assert repo.find_index_by_id(2) == 1
    assert repo.find_index_by_id(9) is None


def test_list_all_is_a_snapshot(sample_employees):
    repo = InMemoryEmployeeRepository(sample_employees)

    snapshot = repo.list_all()
    repo.remove_at(0)

    assert len(snapshot) == 4
    assert repo.count() == 3


def test_constructor_copies_input(sample_employees):
    repo = InMemoryEmployeeRepository(sample_employees)
    repo.append(Employee(5, "Kim Lee", 41, "Director", 7000))

    assert len(sample_employees) == 4


def test_sort_is_stable():
    repo = InMemoryEmployeeRepository(
        [
            Employee(1, "A", 30, "X", 100),
            Employee(2, "B", 20, "X", 100),
            Employee(3, "C", 30, "X", 50),
        ]
    )

    repo.sort(key=lambda e: e.salary)

    assert [e.id for e in repo.list_all()] == [3, 1, 2]


def test_find_index_by_id_requires_same_type(sample_employees):
    repo = InMemoryEmployeeRepository(sample_employees)

    assert repo.find_index_by_id(True) is None
    assert repo.find_index_by_id(1.0) is None
    assert repo.find_index_by_id("1") is None
    assert repo.find_index_by_id(1) == 0
