from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: Plain data object; ``department_id`` is a weak reference (never checked).
    """

    id: str
    name: str
    email: str
    position: str
    department_id: str
    salary: Decimal
    hire_date: date
    avatar: Optional[str] = None
