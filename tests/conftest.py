from __future__ import annotations

import pytest

from src.employee_management.employee_management.container import build_container
from src.employee_management.employee_management.employees.model import Employee


@pytest.fixture
def sample_employees():
    return [
        Employee(1, "John Smith", 30, "Manager", 5000),
        Employee(2, "Emily Johnson", 25, "Engineer", 4000),
        Employee(3, "Robert Davis", 35, "Accountant", 4500),
        Employee(4, "Jessica Brown", 28, "Designer", 3500),
    ]


@pytest.fixture
def container(sample_employees):
    c = build_container()
    for e in sample_employees:
        c.employee_registry.add(e)
    return c


@pytest.fixture
def registry(container):
    return container.employee_registry
