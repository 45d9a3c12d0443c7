import os

DEBUG = False

STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "mysql")
STORAGE_DIR = os.getenv("STORAGE_DIR", "/var/lib/hr_records")
STORAGE_KEY = os.getenv("STORAGE_KEY", "hrms_data_v1")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hr_records"),
}

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

EMPLOYEE_DELETE_POLICY = os.getenv("EMPLOYEE_DELETE_POLICY", "retain")
STRICT_LEAVE_DATES = bool(int(os.getenv("STRICT_LEAVE_DATES", "0")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE", "")
