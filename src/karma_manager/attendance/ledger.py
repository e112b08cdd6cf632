from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Callable, Iterable, Optional, Protocol

from ..common.datetime_utils import now_local
from ..common.validators import require_non_empty
from ..core.enums import Direction
from ..core.exceptions import StorageError
from .factory import PunchStrategyFactory
from .model import PunchEvent, PunchRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

PunchListener = Callable[[PunchEvent], None]


class HasId(Protocol):
    id: str


class AttendanceLedger:
    """Per-tenant list of punch records, one record per (person, day).

    The ledger is the only writer of its record list. Every punch replaces
    the whole in-memory list with a new tuple, then writes the list to the
    repository. Storage failures are logged and never raised: a failed load
    starts from the seed records, a failed save keeps the new in-memory state.

    Listeners registered with ``subscribe`` are called synchronously after
    each punch, in registration order, at most once per punch. A failing
    listener is logged and does not affect the punch or other listeners.
    """

    def __init__(
        self,
        tenant_id: str,
        repository: AttendanceRepository,
        *,
        strategy_factory: PunchStrategyFactory | None = None,
        clock: Callable[[], datetime] = now_local,
        seed: Iterable[PunchRecord] = (),
    ):
        self._tenant_id = require_non_empty(tenant_id, "tenant_id")
        self._repository = repository
        self._factory = strategy_factory or PunchStrategyFactory()
        self._clock = clock
        self._seed = tuple(seed)
        self._listeners: list[PunchListener] = []
        self._records: tuple[PunchRecord, ...] = self._load()

    @property
    def tenant_id(self) -> str:
        return self._tenant_id

    def now(self) -> datetime:
        return self._clock()

    def _log_extra(self, **fields) -> dict:
        return {"tenant_id": self._tenant_id, **fields}

    def _load(self) -> tuple[PunchRecord, ...]:
        try:
            stored = self._repository.load()
        except StorageError:
            logger.exception("Failed to load attendance; starting from seed", extra=self._log_extra())
            return self._seed
        if stored is None:
            return self._seed
        return tuple(stored)

    def _persist(self, records: tuple[PunchRecord, ...]) -> None:
        try:
            self._repository.save(records)
        except StorageError:
            logger.exception("Failed to persist attendance", extra=self._log_extra())

    def _find(self, person_id: str, work_date: date) -> tuple[Optional[int], Optional[PunchRecord]]:
        for i, r in enumerate(self._records):
            if r.person_id == person_id and r.work_date == work_date:
                return i, r
        return None, None

    def record_punch(self, person: HasId, *, now: datetime | None = None) -> Direction:
        """Record a punch for ``person`` at ``now`` (defaults to the ledger clock)."""

        person_id = require_non_empty(getattr(person, "id", None), "person.id")
        now = now or self.now()
        today = now.date()

        index, existing = self._find(person_id, today)
        strategy = self._factory.for_record(existing)
        record = strategy.apply(existing=existing, person_id=person_id, today=today, now=now)

        records = list(self._records)
        if index is None:
            records.append(record)
        else:
            records[index] = record
        self._records = tuple(records)

        logger.info(
            "Punch recorded",
            extra=self._log_extra(person_id=person_id, direction=strategy.direction.value),
        )
        self._persist(self._records)
        self._notify(PunchEvent(tenant_id=self._tenant_id, person_id=person_id, direction=strategy.direction, record=record))
        return strategy.direction

    def list_records(self) -> tuple[PunchRecord, ...]:
        return self._records

    def records_for_date(self, work_date: date) -> list[PunchRecord]:
        return [r for r in self._records if r.work_date == work_date]

    def get_record(self, person_id: str, work_date: date) -> Optional[PunchRecord]:
        return self._find(person_id, work_date)[1]

    def subscribe(self, listener: PunchListener) -> Callable[[], None]:
        """Register ``listener``; returns a callable that unregisters it."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, event: PunchEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception(
                    "Punch listener failed",
                    extra=self._log_extra(person_id=event.person_id, direction=event.direction.value),
                )
