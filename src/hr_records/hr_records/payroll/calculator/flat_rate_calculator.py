from __future__ import annotations

from datetime import datetime
from decimal import Decimal, localcontext

from ...core.constants import PHILHEALTH_RATE, SSS_RATE, TAX_RATE
from ...employees.model import Employee
from ..model import PayrollDeductions, PayrollRecord
from .base import PayrollCalculator, payroll_record_id, quantize_money


class FlatRatePayrollCalculator(PayrollCalculator):
    """Flat rule: 10% tax, 4.5% SSS, 4% PhilHealth; no brackets, caps or floors.

    Each deduction is rounded half-up to 0.01 and net pay is basic minus the
    rounded deductions, so the parts always add up to the basic salary.
    Salary is not validated here.
    """

    def compute(self, employee: Employee, month: str, *, generated_at: datetime) -> PayrollRecord:
        basic = Decimal(employee.salary)
        with localcontext() as ctx:
            # Enough digits that rate products and the net subtraction stay exact.
            ctx.prec = max(ctx.prec, basic.adjusted() - min(basic.as_tuple().exponent, 0) + 6)
            deductions = PayrollDeductions(
                tax=quantize_money(basic * TAX_RATE),
                sss=quantize_money(basic * SSS_RATE),
                philhealth=quantize_money(basic * PHILHEALTH_RATE),
                other=quantize_money(Decimal("0")),
            )
            net_salary = quantize_money(basic - deductions.total)

        return PayrollRecord(
            id=payroll_record_id(employee.id, month),
            employee_id=employee.id,
            month=month,
            basic_salary=basic,
            deductions=deductions,
            net_salary=net_salary,
            generated_date=generated_at,
        )
