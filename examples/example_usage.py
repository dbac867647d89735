"""Example: drive the registry service directly.

Replays the classic roster walkthrough: add four people, promote one,
remove another, then search and sort.
"""

from src.employee_management.employee_management.employees.model import Employee
from src.employee_management.employee_management.employees.report import format_table
from src.employee_management.employee_management.main import create_container


def main():
    container = create_container()
    registry = container.employee_registry

    registry.add(Employee(1, "John Smith", 30, "Manager", 5000))
    registry.add(Employee(2, "Emily Johnson", 25, "Engineer", 4000))
    registry.add(Employee(3, "Robert Davis", 35, "Accountant", 4500))
    registry.add(Employee(4, "Jessica Brown", 28, "Designer", 3500))
    print(registry.count())

    promoted = registry.get_by_id(2).with_changes(age=26, position="Senior Engineer")
    print(registry.edit(2, promoted).message)

    print(registry.delete(1).message)
    print(registry.average_salary())

    print(registry.get_by_name("John"))
    print(registry.search("E"))

    registry.sort_by_name()
    print(format_table(container.roster_report_service.build()))

    registry.sort_by_salary()
    print(format_table(container.roster_report_service.build()))


if __name__ == "__main__":
    main()
