from __future__ import annotations

from enum import Enum


class LookupStatus(str, Enum):
    """Outcome of an id-keyed operation (edit/delete)."""

    FOUND = "FOUND"
    NOT_FOUND = "NOT_FOUND"


class SortField(str, Enum):
    """Fields the registry knows how to sort by."""

    NAME = "name"
    AGE = "age"
    SALARY = "salary"
