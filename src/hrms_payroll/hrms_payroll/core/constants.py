"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_DAY = 24 * 60
HALF_DAY_MINUTES = 12 * 60

# Overtime hourly rate is derived from an 8 hour day over 26 working days.
STANDARD_DAILY_HOURS = 8
WORKING_DAYS_PER_MONTH = 26

AVG_DAYS_PER_MONTH = "30.44"
# Proration denominator when no pay period is given.
PAYROLL_DAYS_PER_MONTH = 30
MONTHS_PER_YEAR = 12

BASIC_CODE = "BASIC"
DA_CODE = "DA"
GROSS_BASIS = "GROSS"

DEFAULT_PAYROLL_MAX_WORKERS = 4
