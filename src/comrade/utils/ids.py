"""Identifier, color and clock helpers for newly created records."""
from __future__ import annotations

import random
import string

from comrade.db.time import to_epoch_ms, utcnow
from comrade.schemas.user import AVATAR_COLORS

_ID_ALPHABET = string.digits + string.ascii_lowercase
_ID_LENGTH = 26


def generate_id() -> str:
    """Return a random base-36 identifier.

    Not cryptographically secure and collisions are not checked; ids only
    need to be unique within one device's collections.
    """
    return "".join(random.choices(_ID_ALPHABET, k=_ID_LENGTH))


def random_avatar_color() -> str:
    """Pick one of the avatar palette colors."""
    return random.choice(AVATAR_COLORS)


def now_ms() -> int:
    """Return the wall-clock time in epoch milliseconds."""
    return to_epoch_ms(utcnow())
