"""Comrade links shared through QR codes."""
from __future__ import annotations

from comrade.core.errors import InvalidQRCodeError

COMRADE_LINK_PREFIX = "comrade://user/"
# Payloads without the link prefix are truncated to this many characters.
FALLBACK_ID_LENGTH = 20


def comrade_link(user_id: str) -> str:
    """Return the QR payload identifying ``user_id``."""
    return f"{COMRADE_LINK_PREFIX}{user_id}"


def parse_comrade_qr(payload: str) -> str:
    """Extract the user id a scanned QR payload points at."""
    # Scanners may append a trailing newline to the decoded text.
    data = payload.strip()
    if data.startswith(COMRADE_LINK_PREFIX):
        user_id = data[len(COMRADE_LINK_PREFIX):]
    else:
        user_id = data[:FALLBACK_ID_LENGTH]
    if not user_id:
        raise InvalidQRCodeError("QR code does not contain a user id")
    return user_id
