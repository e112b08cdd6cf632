from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for p in (REPO_ROOT, REPO_ROOT / "src"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from config import get_settings_module

from karma_manager.container import build_store
from karma_manager.people.seed import DEMO_TENANT_ID, seed_demo_tenant


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed demo staff and students for one organization.")
    parser.add_argument("--tenant", default=DEMO_TENANT_ID)
    args = parser.parse_args()

    settings = importlib.import_module(get_settings_module())
    store = build_store(
        settings.STORAGE_BACKEND,
        storage_dir=getattr(settings, "STORAGE_DIR", None),
        db_config=getattr(settings, "DB_CONFIG", None),
    )
    written = seed_demo_tenant(store, args.tenant)
    print(f"OK: Seeded {args.tenant} ({', '.join(written) or 'already seeded'})")


if __name__ == "__main__":
    main()
