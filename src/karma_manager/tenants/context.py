from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Mapping, Optional

from ..attendance.factory import PunchStrategyFactory
from ..attendance.ledger import AttendanceLedger
from ..attendance.store_repository import KeyValueAttendanceRepository
from ..common.datetime_utils import now_local
from ..common.validators import require_non_empty
from ..core.constants import (
    STAFF_ATTENDANCE_KEY_PREFIX,
    STAFF_DIRECTORY_KEY_PREFIX,
    STUDENT_ATTENDANCE_KEY_PREFIX,
    STUDENT_DIRECTORY_KEY_PREFIX,
)
from ..core.enums import PersonKind
from ..people.repository import PersonDirectory
from ..people.store_directory import StoredPersonDirectory
from ..storage.repository import KeyValueStore

logger = logging.getLogger(__name__)

_ATTENDANCE_PREFIX = {
    PersonKind.STAFF: STAFF_ATTENDANCE_KEY_PREFIX,
    PersonKind.STUDENT: STUDENT_ATTENDANCE_KEY_PREFIX,
}
_DIRECTORY_PREFIX = {
    PersonKind.STAFF: STAFF_DIRECTORY_KEY_PREFIX,
    PersonKind.STUDENT: STUDENT_DIRECTORY_KEY_PREFIX,
}


def attendance_store_key(tenant_id: str, kind: PersonKind) -> str:
    return f"{_ATTENDANCE_PREFIX[kind]}{tenant_id}"


def directory_store_key(tenant_id: str, kind: PersonKind) -> str:
    return f"{_DIRECTORY_PREFIX[kind]}{tenant_id}"


@dataclass(frozen=True)
class TenantContext:
    """Everything attendance needs for one tenant: its ledgers and directories."""

    tenant_id: str
    ledgers: Mapping[PersonKind, AttendanceLedger]
    directories: Mapping[PersonKind, PersonDirectory]

    def ledger(self, kind: PersonKind) -> AttendanceLedger:
        return self.ledgers[kind]

    def directory(self, kind: PersonKind) -> PersonDirectory:
        return self.directories[kind]


def open_tenant(
    tenant_id: str,
    store: KeyValueStore,
    *,
    strategy_factory: PunchStrategyFactory | None = None,
    clock: Callable[[], datetime] = now_local,
    directories: Optional[Mapping[PersonKind, PersonDirectory]] = None,
) -> TenantContext:
    tenant_id = require_non_empty(tenant_id, "tenant_id")
    ledgers = {
        kind: AttendanceLedger(
            tenant_id,
            KeyValueAttendanceRepository(store, attendance_store_key(tenant_id, kind)),
            strategy_factory=strategy_factory,
            clock=clock,
        )
        for kind in PersonKind
    }
    if directories is None:
        directories = {
            kind: StoredPersonDirectory(store, directory_store_key(tenant_id, kind), kind=kind)
            for kind in PersonKind
        }
    return TenantContext(tenant_id=tenant_id, ledgers=ledgers, directories=dict(directories))


class TenantRegistry:
    """Opens each tenant once per process and hands out the same context afterwards.

    Hooks added with ``add_open_hook`` run once for every newly opened tenant.
    Two processes sharing one store are not coordinated (last writer wins).
    """

    def __init__(
        self,
        store: KeyValueStore,
        *,
        strategy_factory: PunchStrategyFactory | None = None,
        clock: Callable[[], datetime] = now_local,
    ):
        self._store = store
        self._factory = strategy_factory or PunchStrategyFactory()
        self._clock = clock
        self._tenants: dict[str, TenantContext] = {}
        self._open_hooks: list[Callable[[TenantContext], None]] = []

    @property
    def store(self) -> KeyValueStore:
        return self._store

    def add_open_hook(self, hook: Callable[[TenantContext], None]) -> None:
        self._open_hooks.append(hook)

    def get(self, tenant_id: str) -> TenantContext:
        tenant_id = require_non_empty(tenant_id, "tenant_id")
        ctx = self._tenants.get(tenant_id)
        if ctx is None:
            ctx = open_tenant(tenant_id, self._store, strategy_factory=self._factory, clock=self._clock)
            self._tenants[tenant_id] = ctx
            logger.info("Tenant opened", extra={"tenant_id": tenant_id})
            for hook in self._open_hooks:
                hook(ctx)
        return ctx
