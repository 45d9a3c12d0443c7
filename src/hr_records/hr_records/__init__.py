"""HR Records package.

Feature modules (employees, attendance, leaves, payroll, ...) hold pure
transformations over a single ``HRData`` aggregate. ``records.store`` applies
them and persists the aggregate; a thin Flask controller layer sits on top.
"""
