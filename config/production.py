import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hrms_payroll"),
}

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

PAYROLL_MAX_WORKERS = int(os.getenv("PAYROLL_MAX_WORKERS", "8"))

UAE_GRATUITY_DAYS_FIRST_YEARS = int(os.getenv("UAE_GRATUITY_DAYS_FIRST_YEARS", "21"))
UAE_GRATUITY_DAYS_AFTER = int(os.getenv("UAE_GRATUITY_DAYS_AFTER", "30"))
UAE_GRATUITY_THRESHOLD_MONTHS = int(os.getenv("UAE_GRATUITY_THRESHOLD_MONTHS", "60"))
