"""
Access gate for the dashboard.

The gate compares an obfuscated hash of the entered phrase against a
pre-computed value. It keeps casual visitors out and nothing more.
"""

from typing import Optional

from penempatan.config import get_config
from penempatan.utils.logger import get_logger

logger = get_logger(__name__)

LOGIN_ERROR_MESSAGE = "Password salah. Silakan coba lagi."

_BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def _to_int32(value: int) -> int:
    return ((value + 2**31) % 2**32) - 2**31


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    value = abs(value)
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36_DIGITS[rem])
    return sign + "".join(reversed(digits))


def hash_string(text: str) -> str:
    """
    32-bit rolling string hash rendered in base 36.

    Iterates UTF-16 code units so the result matches the same hash
    computed in a browser.
    """
    h = 0
    encoded = text.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(encoded), 2):
        code_unit = int.from_bytes(encoded[i:i + 2], "little")
        h = _to_int32((h << 5) - h + code_unit)
    return _to_base36(h)


class AccessGate:
    """Checks entered phrases against the configured hash."""

    def __init__(self, password_hash: Optional[str] = None):
        self._password_hash = password_hash or get_config().auth.password_hash

    def verify(self, password: str) -> bool:
        """Whether the phrase (case- and surrounding-space-insensitive) matches."""
        ok = hash_string(password.lower().strip()) == self._password_hash
        if not ok:
            logger.info("Rejected dashboard access attempt")
        return ok
