from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Department:
    id: str
    name: str
    manager_id: Optional[str]
    description: str = ""


@dataclass(frozen=True)
class DepartmentOverview:
    """Read-model for department listings."""

    department: Department
    manager_name: str
    employee_count: int
