from __future__ import annotations

from typing import Protocol, Sequence

from .model import PunchRecord


class AttendanceRepository(Protocol):
    """Giao diện lưu trữ danh sách bản ghi chấm công của một tenant.

    The whole list is read and written at once; there is no per-record API.
    """

    @property
    def store_key(self) -> str:
        raise NotImplementedError

    def load(self) -> Sequence[PunchRecord] | None:
        """Return the persisted list, or None when nothing was stored yet."""

        raise NotImplementedError

    def save(self, records: Sequence[PunchRecord]) -> None:
        raise NotImplementedError
