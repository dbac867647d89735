from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .employees.model import Employee
from .employees.report import RosterReportService
from .employees.repository import InMemoryEmployeeRepository
from .employees.service import EmployeeRegistry


@dataclass(frozen=True)
class Container:
    employees_repo: InMemoryEmployeeRepository

    employee_registry: EmployeeRegistry
    roster_report_service: RosterReportService


def build_container(*, employees: Optional[Sequence[Employee]] = None) -> Container:
    employees_repo = InMemoryEmployeeRepository(employees)

    employee_registry = EmployeeRegistry(employees_repo)
    roster_report_service = RosterReportService(employee_registry)

    return Container(
        employees_repo=employees_repo,
        employee_registry=employee_registry,
        roster_report_service=roster_report_service,
    )
