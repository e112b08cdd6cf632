from __future__ import annotations

from enum import Enum


class Direction(str, Enum):
    """Chiều của một lần chấm công: vào (in) hoặc ra (out)."""

    IN = "in"
    OUT = "out"


class PersonKind(str, Enum):
    """Nhóm người được chấm công trong một tenant."""

    STAFF = "staff"
    STUDENT = "students"


class PersonStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


class TimePolicy(str, Enum):
    """How the ledger treats an out-punch timestamped before its in-punch."""

    ACCEPT = "accept"
    CLAMP = "clamp"
    REJECT = "reject"
