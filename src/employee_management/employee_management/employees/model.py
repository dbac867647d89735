from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Union

Number = Union[int, float]


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: plain value object. To change a record, build a copy with
    ``with_changes`` and hand it to ``EmployeeRegistry.edit``.
    """

    id: int
    name: str
    age: int
    position: str
    salary: Number

    def with_changes(self, **changes) -> Employee:
        return replace(self, **changes)

    def has_id(self, employee_id) -> bool:
        # Same type and value: "2", 2.0 and True never match id 2 (or 1).
        return type(employee_id) is type(self.id) and self.id == employee_id
