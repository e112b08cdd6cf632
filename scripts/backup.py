"""Backup one organization's attendance ledgers to a JSON file.

Note: the file holds the raw stored lists (staff and students), in the same
shape the store keeps them, so it can be written back key by key.
"""

from __future__ import annotations

import argparse
import importlib
import json
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for p in (REPO_ROOT, REPO_ROOT / "src"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from config import get_settings_module

from karma_manager.container import build_store
from karma_manager.core.enums import PersonKind
from karma_manager.tenants.context import attendance_store_key


def main() -> None:
    parser = argparse.ArgumentParser(description="Dump an organization's attendance to backups/.")
    parser.add_argument("tenant")
    args = parser.parse_args()

    settings = importlib.import_module(get_settings_module())
    store = build_store(
        settings.STORAGE_BACKEND,
        storage_dir=getattr(settings, "STORAGE_DIR", None),
        db_config=getattr(settings, "DB_CONFIG", None),
    )

    dump = {}
    for kind in PersonKind:
        key = attendance_store_key(args.tenant, kind)
        payload = store.get(key)
        dump[key] = json.loads(payload) if payload else []

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"attendance_{args.tenant}_{ts}.json"
    out_file.write_text(json.dumps(dump, indent=2), encoding="utf-8")
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
