from __future__ import annotations

import locale
import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Union

from ..core.constants import MSG_EMPLOYEE_DELETED, MSG_EMPLOYEE_NOT_FOUND, MSG_EMPLOYEE_UPDATED
from ..core.enums import LookupStatus, SortField
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OperationResult:
    """What edit/delete report back to the caller."""

    employee_id: Any
    status: LookupStatus
    message: str

    @property
    def found(self) -> bool:
        return self.status == LookupStatus.FOUND


def _name_key(employee: Employee) -> tuple:
    """Collation key honouring LC_COLLATE; case only breaks ties.

    strxfrm rejects names with embedded NULs; those fall back to plain casefolded text.
    """
    try:
        return (locale.strxfrm(employee.name.casefold()), locale.strxfrm(employee.name))
    except ValueError:
        return (employee.name.casefold(), employee.name)


def _name_contains(employee: Employee, text: str) -> bool:
    return text.casefold() in employee.name.casefold()


class EmployeeRegistry:
    """Use case: manage the employee roster (add/edit/delete/search/sort/stats)."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def add(self, employee: Employee) -> None:
        self._employees.append(employee)
        logger.debug("Added employee id=%s name=%r", employee.id, employee.name)

    def edit(self, employee_id: Any, updated: Employee) -> OperationResult:
        index = self._employees.find_index_by_id(employee_id)
        if index is None:
            return self._report(employee_id, LookupStatus.NOT_FOUND, MSG_EMPLOYEE_NOT_FOUND)

        self._employees.replace_at(index, updated)
        return self._report(employee_id, LookupStatus.FOUND, MSG_EMPLOYEE_UPDATED)

    def update(self, employee_id: Any, **changes) -> OperationResult:
        """Patch some fields of the record with this id.

        Unknown field names raise TypeError from ``dataclasses.replace``.
        """
        current = self.get_by_id(employee_id)
        if current is None:
            return self._report(employee_id, LookupStatus.NOT_FOUND, MSG_EMPLOYEE_NOT_FOUND)
        return self.edit(employee_id, current.with_changes(**changes))

    def delete(self, employee_id: Any) -> OperationResult:
        index = self._employees.find_index_by_id(employee_id)
        if index is None:
            return self._report(employee_id, LookupStatus.NOT_FOUND, MSG_EMPLOYEE_NOT_FOUND)

        self._employees.remove_at(index)
        return self._report(employee_id, LookupStatus.FOUND, MSG_EMPLOYEE_DELETED)

    def get_by_id(self, employee_id: Any) -> Optional[Employee]:
        index = self._employees.find_index_by_id(employee_id)
        if index is None:
            return None
        return self._employees.get_at(index)

    def get_by_name(self, name: str) -> List[Employee]:
        return [e for e in self._employees.list_all() if _name_contains(e, name)]

    def search(self, keyword: Any) -> List[Employee]:
        """Records whose id equals ``keyword`` or whose name contains it.

        The name test only applies to text keywords.
        """
        return [
            e
            for e in self._employees.list_all()
            if e.has_id(keyword) or (isinstance(keyword, str) and _name_contains(e, keyword))
        ]

    def sort_by_name(self) -> None:
        self._employees.sort(key=_name_key)
        logger.debug("Sorted %d employees by name", self._employees.count())

    def sort_by_age(self) -> None:
        self._employees.sort(key=lambda e: e.age)
        logger.debug("Sorted %d employees by age", self._employees.count())

    def sort_by_salary(self) -> None:
        self._employees.sort(key=lambda e: e.salary)
        logger.debug("Sorted %d employees by salary", self._employees.count())

    def sort_by(self, field: Union[SortField, str]) -> None:
        field = SortField(field)
        if field == SortField.NAME:
            self.sort_by_name()
        elif field == SortField.AGE:
            self.sort_by_age()
        else:
            self.sort_by_salary()

    def average_salary(self) -> Optional[float]:
        """Mean salary, or None when the registry is empty."""
        employees = self._employees.list_all()
        if not employees:
            logger.debug("Average salary requested on an empty registry")
            return None
        return sum(e.salary for e in employees) / len(employees)

    def count(self) -> int:
        return self._employees.count()

    def list_all(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def _report(self, employee_id: Any, status: LookupStatus, message: str) -> OperationResult:
        logger.info("%s (id=%s)", message, employee_id)
        return OperationResult(employee_id=employee_id, status=status, message=message)
