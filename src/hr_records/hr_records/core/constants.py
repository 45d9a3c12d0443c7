"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

APP_NAME = "HRMS Pro"
CURRENCY = "PHP"

DEFAULT_STORAGE_KEY = "hrms_data_v1"

TAX_RATE = Decimal("0.10")
SSS_RATE = Decimal("0.045")
PHILHEALTH_RATE = Decimal("0.04")

MONEY_QUANTUM = Decimal("0.01")

ISO_DATE_FORMAT = "%Y-%m-%d"
MONTH_FORMAT = "%Y-%m"
CHECK_IN_FORMAT = "%H:%M"
# Browser-written check-ins come from toLocaleTimeString, e.g. "08:55 AM".
CHECK_IN_INPUT_FORMATS = ("%H:%M", "%I:%M %p", "%H:%M:%S", "%I:%M:%S %p")

# Upper bound for entered amounts; keeps every amount exact as a JSON number.
MAX_AMOUNT = Decimal("9999999999999.99")

DASHBOARD_RECENT_HIRES = 3
