import os

SECRET_KEY = "test-secret"

DB_URL = os.getenv("WORKFORCE_DB_URL", "mysql://root@localhost:3306/workforce_test")
DB_KEY = os.getenv("WORKFORCE_DB_KEY", "test")

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
AUTO_SEED_DB = False

CONSOLE_USER = {
    "id": "1",
    "name": "Test Admin",
    "email": "admin@example.com",
    "role": "admin",
    "permissions": [],
}
