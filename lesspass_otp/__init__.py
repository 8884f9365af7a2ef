"""LessPass OTP — Stateless password derivation, OTP tokens and seeds.

Derive site passwords, HOTP/TOTP tokens and a visual fingerprint from a
single master password; the only persisted secrets are OTP seeds, each
encrypted under the master password and the site identity.

Security Note (Threat Model):
    The master password and derived secrets exist in clear in process
    memory during computation and are not scrubbed afterwards.
    Protecting against a compromised process is out of scope.
"""

from .algorithm import Algorithm
from .charset import CharacterSet, CharUse, Set, alphabet_for
from .config import LessPassConfig
from .entropy import Entropy
from .exceptions import (
    LessPassError,
    PasswordTooShort,
    PasswordTooLong,
    NoCharsetSelected,
    UnsupportedAlgorithm,
    InvalidLength,
    InvalidBase32,
)
from .fingerprint import Fingerprint, get_fingerprint
from .lesspass import LessPass
from .master import Master
from .otp import Otp, decode_base32, encode_base32, generate_secret
from .settings import Settings
from .version import __version__

__all__ = [
    "Algorithm",
    "CharacterSet",
    "CharUse",
    "Set",
    "alphabet_for",
    "LessPassConfig",
    "Entropy",
    "LessPassError",
    "PasswordTooShort",
    "PasswordTooLong",
    "NoCharsetSelected",
    "UnsupportedAlgorithm",
    "InvalidLength",
    "InvalidBase32",
    "Fingerprint",
    "get_fingerprint",
    "LessPass",
    "Master",
    "Otp",
    "decode_base32",
    "encode_base32",
    "generate_secret",
    "Settings",
    "__version__",
]
