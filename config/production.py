import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_URL = os.getenv("WORKFORCE_DB_URL")
DB_KEY = os.getenv("WORKFORCE_DB_KEY")

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))

CONSOLE_USER = {
    "id": os.getenv("CONSOLE_USER_ID", "1"),
    "name": os.getenv("CONSOLE_USER_NAME", "Administrator"),
    "email": os.getenv("CONSOLE_USER_EMAIL", ""),
    "role": os.getenv("CONSOLE_USER_ROLE", "admin"),
    "permissions": [p for p in os.getenv("CONSOLE_USER_PERMISSIONS", "").split(",") if p],
}
