"""Short, human-readable reservation codes (e.g. ``KTR4821QX7Z``)."""

import secrets
import string
import time

_ALPHABET = string.ascii_uppercase + string.digits


def generate_reservation_code(prefix: str = "KTR", now: float | None = None) -> str:
    """Prefix + last 4 digits of the epoch-millis clock + 4 random chars."""
    millis = int((time.time() if now is None else now) * 1000)
    timestamp_part = str(millis)[-4:]
    random_part = "".join(secrets.choice(_ALPHABET) for _ in range(4))
    return f"{prefix}{timestamp_part}{random_part}"
