from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_PUNCH_COOLDOWN_SECONDS, UNKNOWN_PERSON_LABEL
from ..core.enums import Direction, PersonKind
from ..core.exceptions import PunchCooldownError, UnknownPersonError
from ..people.model import Person
from ..tenants.context import TenantRegistry
from .model import PunchRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PunchOutcome:
    direction: Direction
    person: Person
    record: PunchRecord

    @property
    def action(self) -> str:
        return "Clock In" if self.direction == Direction.IN else "Clock Out"

    @property
    def message(self) -> str:
        greeting = "Welcome" if self.direction == Direction.IN else "Goodbye"
        return f"{greeting}, {self.person.name}!"


class AttendanceService:
    """Use case: a kiosk punch for a known person, plus the kiosk's day log."""

    def __init__(
        self,
        tenants: TenantRegistry,
        *,
        cooldown_seconds: int = DEFAULT_PUNCH_COOLDOWN_SECONDS,
    ):
        self._tenants = tenants
        self._cooldown_seconds = int(cooldown_seconds)
        self._last_punch: dict[tuple[str, PersonKind, str], datetime] = {}

    def _check_cooldown(self, key: tuple[str, PersonKind, str], person: Person, now: datetime) -> None:
        if self._cooldown_seconds <= 0:
            return
        last = self._last_punch.get(key)
        if last is None:
            return
        elapsed = (now - last).total_seconds()
        if 0 <= elapsed < self._cooldown_seconds:
            logger.info("Punch ignored during cooldown", extra={"tenant_id": key[0], "person_id": key[2]})
            raise PunchCooldownError(f"{person.name} already checked in recently.")

    def punch(self, tenant_id: str, kind: PersonKind, person_id: str, *, now: datetime | None = None) -> PunchOutcome:
        person_id = require_non_empty(person_id, "person_id")
        ctx = self._tenants.get(tenant_id)

        person = ctx.directory(kind).get_by_id(person_id)
        if not person or not person.is_active:
            logger.info("Punch for unknown person", extra={"tenant_id": tenant_id, "person_id": person_id, "kind": kind.value})
            raise UnknownPersonError(f"{UNKNOWN_PERSON_LABEL[kind.value]}: {person_id}")

        ledger = ctx.ledger(kind)
        now = now or ledger.now()
        key = (ctx.tenant_id, kind, person.id)
        self._check_cooldown(key, person, now)

        direction = ledger.record_punch(person, now=now)
        self._last_punch[key] = now

        record = ledger.get_record(person.id, now.date())
        return PunchOutcome(direction=direction, person=person, record=record)

    def list_records(self, tenant_id: str, kind: PersonKind) -> tuple[PunchRecord, ...]:
        return self._tenants.get(tenant_id).ledger(kind).list_records()

    def today_log(self, tenant_id: str, kind: PersonKind, day: Optional[date] = None) -> list[dict]:
        ctx = self._tenants.get(tenant_id)
        ledger = ctx.ledger(kind)
        day = day or ledger.now().date()
        names = {p.id: p.name for p in ctx.directory(kind).list_all()}
        return [self._to_ui(r, names.get(r.person_id) or UNKNOWN_PERSON_LABEL[kind.value]) for r in ledger.records_for_date(day)]

    def _to_ui(self, r: PunchRecord, name: str) -> dict:
        return {
            "person_id": r.person_id,
            "name": name,
            "date": r.work_date.strftime("%Y-%m-%d"),
            "in_time": r.in_time.strftime("%H:%M:%S") if r.in_time else "-",
            "out_time": r.out_time.strftime("%H:%M:%S") if r.out_time else "-",
            "status": "In" if r.is_open else "Out",
        }
