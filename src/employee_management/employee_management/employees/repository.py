from __future__ import annotations

from typing import Any, Callable, List, Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Storage interface for Employee records.

    Note: the registry service depends on this interface; records are kept in
    insertion order until a sort reorders them.
    """

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError

    def append(self, employee: Employee) -> None:
        raise NotImplementedError

    def find_index_by_id(self, employee_id: int) -> Optional[int]:
        """Index of the first record with this id, or None."""

        raise NotImplementedError

    def get_at(self, index: int) -> Employee:
        raise NotImplementedError

    def replace_at(self, index: int, employee: Employee) -> None:
        raise NotImplementedError

    def remove_at(self, index: int) -> Employee:
        raise NotImplementedError

    def sort(self, key: Callable[[Employee], Any]) -> None:
        raise NotImplementedError


class InMemoryEmployeeRepository(EmployeeRepository):
    def __init__(self, employees: Optional[Sequence[Employee]] = None):
        self._employees: List[Employee] = list(employees or [])

    def list_all(self) -> Sequence[Employee]:
        return list(self._employees)

    def count(self) -> int:
        return len(self._employees)

    def append(self, employee: Employee) -> None:
        self._employees.append(employee)

    def find_index_by_id(self, employee_id: int) -> Optional[int]:
        for index, employee in enumerate(self._employees):
            if employee.has_id(employee_id):
                return index
        return None

    def get_at(self, index: int) -> Employee:
        return self._employees[index]

    def replace_at(self, index: int, employee: Employee) -> None:
        self._employees[index] = employee

    def remove_at(self, index: int) -> Employee:
        return self._employees.pop(index)

    def sort(self, key: Callable[[Employee], Any]) -> None:
        # list.sort is stable, so equal keys keep their relative order.
        self._employees.sort(key=key)
