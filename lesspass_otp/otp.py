"""
OTP Engine — HOTP (RFC 4226) and TOTP (RFC 6238) token computation.

Tokens are stateless: TOTP is HOTP with the counter being the number of
whole periods elapsed since the epoch offset. Only SHA1 (the default),
SHA256 and SHA512 are accepted, as in authenticator apps.

Security Note:
    Never log secrets or tokens.
"""
import base64
import binascii
import secrets
import struct
import time
from dataclasses import dataclass, field
from typing import Optional

from .algorithm import Algorithm
from .exceptions import InvalidBase32, InvalidLength, UnsupportedAlgorithm

DEFAULT_DIGITS = 6
DEFAULT_PERIOD = 30  # seconds
SECRET_BYTES = 20  # 160-bit secret, RFC 4226 recommendation
MIN_DIGITS = 6
MAX_DIGITS = 9

OTP_ALGORITHMS = (Algorithm.SHA1, Algorithm.SHA256, Algorithm.SHA512)

_U64_MAX = 0xFFFFFFFFFFFFFFFF


# ---------------------------------------------------------------------------
# Base32 helpers
# ---------------------------------------------------------------------------

def decode_base32(text: str) -> bytes:
    """Decode an RFC 4648 Base32 secret, as shown by websites.

    Trailing ``=`` padding is stripped first, then every ``-`` and space.
    Decoding is case-insensitive.

    Args:
        text: Base32 text, e.g. ``"JBSW-Y3DP-EBLW-64TM-MQQQ"``.

    Returns:
        Decoded secret bytes.

    Raises:
        InvalidBase32: If a character or the length is invalid.
    """
    encoded = text.rstrip("=").replace("-", "").replace(" ", "")
    padding = -len(encoded) % 8
    try:
        return base64.b32decode(encoded + "=" * padding, casefold=True)
    except (binascii.Error, ValueError) as err:
        raise InvalidBase32() from err


def encode_base32(data: bytes) -> str:
    """Encode bytes to Base32 without ``=`` padding."""
    return base64.b32encode(data).decode("ascii").rstrip("=")


def generate_secret(length: int = SECRET_BYTES) -> bytes:
    """Generate a random OTP seed.

    Args:
        length: Number of bytes, 1 to 64 so the seed can be protected
            with ``LessPass.secret_totp``.

    Returns:
        Random bytes from the ``secrets`` CSPRNG.
    """
    if not 1 <= length <= 64:
        raise InvalidLength(length)
    return secrets.token_bytes(length)


# ---------------------------------------------------------------------------
# Token computation
# ---------------------------------------------------------------------------

def dynamic_truncate(digest: bytes) -> int:
    """RFC 4226 dynamic truncation to a 31-bit integer."""
    offset = digest[-1] & 0x0F
    return (
        (digest[offset] & 0x7F) << 24
        | (digest[offset + 1] & 0xFF) << 16
        | (digest[offset + 2] & 0xFF) << 8
        | (digest[offset + 3] & 0xFF)
    )


@dataclass(frozen=True)
class Otp:
    """
    HOTP / TOTP generator for one secret.

    Attributes:
        secret: Raw secret bytes (KEEP SECRET)
        digits: Token length, 6 to 9
        algorithm: SHA1 (default), SHA256 or SHA512
        period: TOTP window in seconds (30 by default, at least 1)
        timestamp: TOTP epoch offset in seconds (0 by default)

    Raises:
        UnsupportedAlgorithm: If ``algorithm`` is not usable for OTP.
        InvalidLength: If ``digits`` is not between 6 and 9.

    Example:
        >>> otp = Otp(b"12345678901234567890", 6)
        >>> otp.hotp(0)
        '755224'
    """

    secret: bytes = field(repr=False)
    digits: int = DEFAULT_DIGITS
    algorithm: Optional[Algorithm] = None
    period: Optional[int] = None
    timestamp: Optional[int] = None

    def __post_init__(self):
        algorithm = Algorithm.SHA1 if self.algorithm is None else Algorithm(self.algorithm)
        if algorithm not in OTP_ALGORITHMS:
            raise UnsupportedAlgorithm(algorithm)
        if not MIN_DIGITS <= self.digits <= MAX_DIGITS:
            raise InvalidLength(self.digits)
        period = DEFAULT_PERIOD if self.period is None else max(self.period, 1)
        timestamp = 0 if self.timestamp is None else self.timestamp
        object.__setattr__(self, "secret", bytes(self.secret))
        object.__setattr__(self, "algorithm", algorithm)
        object.__setattr__(self, "period", period)
        object.__setattr__(self, "timestamp", timestamp)

    @classmethod
    def from_base32(
        cls,
        secret: str,
        digits: int = DEFAULT_DIGITS,
        algorithm: Optional[Algorithm] = None,
        period: Optional[int] = None,
        timestamp: Optional[int] = None,
    ) -> "Otp":
        """Create an instance from a Base32 secret."""
        return cls(decode_base32(secret), digits, algorithm, period, timestamp)

    def hotp(self, counter: int) -> str:
        """Token for ``counter`` (a 64-bit unsigned value)."""
        if not 0 <= counter <= _U64_MAX:
            raise ValueError(f"HOTP counter must fit in 64 bits, got {counter}")
        digest = self.algorithm.hmac(self.secret, struct.pack(">Q", counter))
        code = dynamic_truncate(digest) % (10 ** self.digits)
        return str(code).zfill(self.digits)

    def counter_at(self, timestamp: int) -> int:
        return (timestamp - self.timestamp) // self.period

    def totp_from_ts(self, timestamp: int) -> str:
        """Token for the window containing ``timestamp`` (seconds)."""
        return self.hotp(self.counter_at(timestamp))

    def totp(self) -> str:
        """Token for the current wall-clock time."""
        return self.totp_from_ts(int(time.time()))

    def remaining(self, timestamp: Optional[int] = None) -> int:
        """Seconds left before the TOTP window of ``timestamp`` closes."""
        if timestamp is None:
            timestamp = int(time.time())
        return self.period - ((timestamp - self.timestamp) % self.period)
