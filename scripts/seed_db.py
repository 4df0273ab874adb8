from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.workforce_admin.workforce_admin.database.bootstrap import apply_seed_sql
from src.workforce_admin.workforce_admin.database.connection import DBConfig, DatabaseConnection


def main() -> None:
    load_dotenv(override=False)
    logging.basicConfig(level=logging.INFO)

    settings = importlib.import_module(get_settings_module())
    db_config = DBConfig.from_settings(settings.DB_URL, settings.DB_KEY)

    apply_seed_sql(DatabaseConnection.get_instance(db_config), seed_path=REPO_ROOT / "database" / "seed.sql")
    print(f"OK: Seeded permissions and departments -> {db_config.describe()}")


if __name__ == "__main__":
    main()
