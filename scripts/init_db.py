from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for p in (REPO_ROOT, REPO_ROOT / "src"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from config import get_settings_module

from karma_manager.storage.connection import DatabaseConnection, DBConfig
from karma_manager.storage.mysql_store import MySQLKeyValueStore


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    MySQLKeyValueStore(DatabaseConnection(DBConfig.from_dict(db_config))).ensure_schema()
    print(
        "OK: kv_store table ready -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
    )


if __name__ == "__main__":
    main()
