import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Data store endpoint and access key, e.g. mysql://root@localhost:3306/workforce_db
DB_URL = os.getenv("WORKFORCE_DB_URL")
DB_KEY = os.getenv("WORKFORCE_DB_KEY")

DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed permissions/departments on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "1")))

CONSOLE_USER = {
    "id": os.getenv("CONSOLE_USER_ID", "1"),
    "name": os.getenv("CONSOLE_USER_NAME", "Sarah Johnson"),
    "email": os.getenv("CONSOLE_USER_EMAIL", "sarah.johnson@company.com"),
    "role": os.getenv("CONSOLE_USER_ROLE", "admin"),
    "permissions": [p for p in os.getenv("CONSOLE_USER_PERMISSIONS", "").split(",") if p],
}
