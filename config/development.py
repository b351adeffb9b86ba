import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hrms_payroll"),
}

DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))

# Worker threads for batch payroll runs
PAYROLL_MAX_WORKERS = int(os.getenv("PAYROLL_MAX_WORKERS", "4"))

# UAE end-of-service accrual: days of basic per year, before/after the threshold
UAE_GRATUITY_DAYS_FIRST_YEARS = int(os.getenv("UAE_GRATUITY_DAYS_FIRST_YEARS", "21"))
UAE_GRATUITY_DAYS_AFTER = int(os.getenv("UAE_GRATUITY_DAYS_AFTER", "30"))
UAE_GRATUITY_THRESHOLD_MONTHS = int(os.getenv("UAE_GRATUITY_THRESHOLD_MONTHS", "60"))

UAE_AIR_TICKET_COSTS = {"ECONOMY": 3000, "BUSINESS": 9000, "FIRST": 15000}

CURRENCY_CONFIG = {
    "IND": {"code": "INR", "symbol": "₹", "decimals": 2, "grouping": "lakh"},
    "UAE": {"code": "AED", "symbol": "AED", "decimals": 2, "grouping": "western"},
}
