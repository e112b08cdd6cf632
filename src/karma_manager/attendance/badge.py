"""QR badges for kiosk punching.

A badge encodes ``karma:<tenant_id>:<kind>:<person_id>``; the kiosk scanner
sends the decoded text back to the scan endpoint.
"""

from __future__ import annotations

import io
from dataclasses import dataclass

import qrcode

from ..common.validators import require_non_empty
from ..core.constants import BADGE_PREFIX
from ..core.enums import PersonKind
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class Badge:
    tenant_id: str
    kind: PersonKind
    person_id: str

    def encode(self) -> str:
        return f"{BADGE_PREFIX}:{self.tenant_id}:{self.kind.value}:{self.person_id}"


def decode_badge(payload: str) -> Badge:
    payload = require_non_empty(payload, "QR code")
    parts = payload.split(":", 3)
    if len(parts) != 4 or parts[0] != BADGE_PREFIX:
        raise ValidationError("Unrecognized QR code")
    try:
        kind = PersonKind(parts[2])
    except ValueError:
        raise ValidationError("Unrecognized QR code") from None
    return Badge(
        tenant_id=require_non_empty(parts[1], "tenant_id"),
        kind=kind,
        person_id=require_non_empty(parts[3], "person_id"),
    )


def render_badge_png(badge: Badge) -> bytes:
    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_L,
        box_size=10,
        border=2,
    )
    qr.add_data(badge.encode())
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()
