from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from .attendance.factory import PunchStrategyFactory
from .attendance.service import AttendanceService
from .common.datetime_utils import now_local
from .common.validators import require_one_of
from .core.constants import DEFAULT_PUNCH_COOLDOWN_SECONDS
from .core.enums import TimePolicy
from .notifications.guardian import GuardianNotifier
from .reports.service import AttendanceReportService
from .storage.connection import DatabaseConnection, DBConfig
from .storage.file_store import JsonFileStore
from .storage.memory_store import InMemoryKeyValueStore
from .storage.mysql_store import MySQLKeyValueStore
from .storage.repository import KeyValueStore
from .tenants.context import TenantRegistry

STORAGE_BACKENDS = {"file", "mysql", "memory"}


@dataclass(frozen=True)
class Container:
    store: KeyValueStore
    tenants: TenantRegistry

    attendance_service: AttendanceService
    report_service: AttendanceReportService
    guardian_notifier: GuardianNotifier


def build_store(
    backend: str,
    *,
    storage_dir: Optional[str] = None,
    db_config: Optional[dict] = None,
    auto_init_db: bool = False,
) -> KeyValueStore:
    backend = require_one_of(str(backend).lower(), "STORAGE_BACKEND", STORAGE_BACKENDS)
    if backend == "memory":
        return InMemoryKeyValueStore()
    if backend == "file":
        return JsonFileStore(storage_dir or "var/store")

    store = MySQLKeyValueStore(DatabaseConnection(DBConfig.from_dict(db_config or {})))
    if auto_init_db:
        store.ensure_schema()
    return store


def build_container(
    *,
    store: KeyValueStore,
    cooldown_seconds: int = DEFAULT_PUNCH_COOLDOWN_SECONDS,
    time_policy: str = TimePolicy.CLAMP.value,
    clock: Callable[[], datetime] = now_local,
) -> Container:
    policy = TimePolicy(require_one_of(str(time_policy).lower(), "PUNCH_TIME_POLICY", {p.value for p in TimePolicy}))

    tenants = TenantRegistry(store, strategy_factory=PunchStrategyFactory(time_policy=policy), clock=clock)
    guardian_notifier = GuardianNotifier()
    tenants.add_open_hook(guardian_notifier.attach)

    attendance_service = AttendanceService(tenants, cooldown_seconds=cooldown_seconds)
    report_service = AttendanceReportService(tenants)

    return Container(
        store=store,
        tenants=tenants,
        attendance_service=attendance_service,
        report_service=report_service,
        guardian_notifier=guardian_notifier,
    )
