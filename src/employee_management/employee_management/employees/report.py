from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import NO_DATA
from .service import EmployeeRegistry

COLUMNS = ("id", "name", "age", "position", "salary")


@dataclass(frozen=True)
class RosterReport:
    rows: list[dict]
    summary: dict


class RosterReportService:
    def __init__(self, registry: EmployeeRegistry):
        self._registry = registry

    def build(self) -> RosterReport:
        out_rows: list[dict] = []
        total_salary = 0

        for e in self._registry.list_all():
            out_rows.append(
                {
                    "id": e.id,
                    "name": e.name,
                    "age": e.age,
                    "position": e.position,
                    "salary": e.salary,
                }
            )
            total_salary += e.salary

        average = self._registry.average_salary()
        summary = {
            "count": len(out_rows),
            "total_salary": total_salary,
            "average_salary": f"{average:.2f}" if average is not None else NO_DATA,
        }
        return RosterReport(rows=out_rows, summary=summary)


def format_table(report: RosterReport) -> str:
    """Render report rows as a left-aligned plain text table."""
    cells = [[str(c) for c in COLUMNS]]
    cells += [[str(row[c]) for c in COLUMNS] for row in report.rows]
    widths = [max(len(line[i]) for line in cells) for i in range(len(COLUMNS))]

    lines = ["  ".join(value.ljust(width) for value, width in zip(line, widths)).rstrip() for line in cells]
    lines.append(
        f"count={report.summary['count']} average_salary={report.summary['average_salary']}"
    )
    return "\n".join(lines)
