from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, localcontext

from ...core.constants import MONEY_QUANTUM
from ...employees.model import Employee
from ..model import PayrollRecord


def quantize_money(value: Decimal) -> Decimal:
    """Round to centavos, half-up, whatever the magnitude."""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return value.quantize(MONEY_QUANTUM, rounding=ROUND_HALF_UP)


def payroll_record_id(employee_id: str, month: str) -> str:
    return f"pay_{employee_id}_{month}"


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def compute(self, employee: Employee, month: str, *, generated_at: datetime) -> PayrollRecord:
        raise NotImplementedError
