from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Callable, Iterable, Optional

from ..common.datetime_utils import now_local, parse_month
from ..employees.model import Employee
from .calculator.base import PayrollCalculator
from .calculator.flat_rate_calculator import FlatRatePayrollCalculator
from .model import PayrollRecord, PayrollSheet


class PayrollService:
    def __init__(
        self,
        *,
        calculator: Optional[PayrollCalculator] = None,
        clock: Callable[[], datetime] = now_local,
    ):
        self._calculator = calculator or FlatRatePayrollCalculator()
        self._clock = clock

    def compute_payroll(self, employee: Employee, month: str) -> PayrollRecord:
        return self._calculator.compute(employee, parse_month(month), generated_at=self._clock())

    def build_sheet(self, employees: Iterable[Employee], month: str) -> PayrollSheet:
        month = parse_month(month)
        generated_at = self._clock()
        records = tuple(self._calculator.compute(e, month, generated_at=generated_at) for e in employees)

        return PayrollSheet(
            month=month,
            records=records,
            total_basic=sum((r.basic_salary for r in records), Decimal("0")),
            total_deductions=sum((r.deductions.total for r in records), Decimal("0")),
            total_net=sum((r.net_salary for r in records), Decimal("0")),
        )
