from __future__ import annotations

import logging
from collections import defaultdict, deque
from dataclasses import dataclass
from datetime import datetime

from ..attendance.model import PunchEvent
from ..core.enums import Direction, PersonKind
from ..tenants.context import TenantContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GuardianMessage:
    student_id: str
    title: str
    message: str
    direction: Direction
    at: datetime


class GuardianNotifier:
    """Queues check-in/check-out messages for the guardians of each student.

    Messages live only in this process and are handed out once by ``drain``.
    The queue per student is bounded and drops the oldest message first.
    """

    def __init__(self, *, max_per_student: int = 50):
        self._max = int(max_per_student)
        self._queues: dict[tuple[str, str], deque[GuardianMessage]] = defaultdict(lambda: deque(maxlen=self._max))

    def attach(self, ctx: TenantContext) -> None:
        directory = ctx.directory(PersonKind.STUDENT)

        def on_punch(event: PunchEvent) -> None:
            student = directory.get_by_id(event.person_id)
            name = student.name if student else event.person_id
            verb = "checked in" if event.direction == Direction.IN else "checked out"
            at = event.record.out_time if event.direction == Direction.OUT else event.record.in_time
            self._queues[(event.tenant_id, event.person_id)].append(
                GuardianMessage(
                    student_id=event.person_id,
                    title="Attendance Notification",
                    message=f"{name} has {verb}.",
                    direction=event.direction,
                    at=at,
                )
            )
            logger.debug(
                "Guardian message queued",
                extra={"tenant_id": event.tenant_id, "person_id": event.person_id, "direction": event.direction.value},
            )

        ctx.ledger(PersonKind.STUDENT).subscribe(on_punch)

    def drain(self, tenant_id: str, student_id: str) -> list[GuardianMessage]:
        queue = self._queues.pop((tenant_id, student_id), None)
        return list(queue) if queue else []
