from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class PayrollDeductions:
    tax: Decimal
    sss: Decimal
    philhealth: Decimal
    other: Decimal = Decimal("0")

    @property
    def total(self) -> Decimal:
        return self.tax + self.sss + self.philhealth + self.other


@dataclass(frozen=True)
class PayrollRecord:
    """Computed payslip for one employee and month; not stored by any command."""

    id: str
    employee_id: str
    month: str
    basic_salary: Decimal
    deductions: PayrollDeductions
    net_salary: Decimal
    generated_date: datetime


@dataclass(frozen=True)
class PayrollSheet:
    month: str
    records: tuple[PayrollRecord, ...] = field(default_factory=tuple)
    total_basic: Decimal = Decimal("0")
    total_deductions: Decimal = Decimal("0")
    total_net: Decimal = Decimal("0")
