import os

DEBUG = False
TESTING = True

STORAGE_BACKEND = "memory"
STORAGE_DIR = ""
STORAGE_KEY = "hrms_data_v1"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hr_records_test"),
}

AUTO_INIT_DB = False

EMPLOYEE_DELETE_POLICY = "retain"
STRICT_LEAVE_DATES = False

LOG_LEVEL = "WARNING"
LOG_FILE = ""
