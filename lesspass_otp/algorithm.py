"""
Digest Provider — PBKDF2 stretching and HMAC over seven hash algorithms.

Every other module sees the output only as opaque bytes (or, for PBKDF2,
as the seed of an Entropy pool). Output sizes:

- SHA1: 20 bytes
- SHA256 / SHA3_256: 32 bytes
- SHA384 / SHA3_384: 48 bytes
- SHA512 / SHA3_512: 64 bytes
"""
from enum import Enum
from typing import Optional

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.hmac import HMAC
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC


class Algorithm(str, Enum):
    """Hash algorithm used for PBKDF2 or HMAC.

    The member value is the serialized tag of the algorithm.

    Only SHA256 yields passwords compatible with the canonical LessPass
    implementation; SHA1 cannot be used for passwords at all.
    """

    SHA1 = "SHA1"
    SHA256 = "SHA256"
    SHA384 = "SHA384"
    SHA512 = "SHA512"
    SHA3_256 = "SHA3_256"
    SHA3_384 = "SHA3_384"
    SHA3_512 = "SHA3_512"

    def __str__(self) -> str:
        return _DISPLAY_NAMES[self]

    def _hash(self) -> hashes.HashAlgorithm:
        return _HASHES[self]()

    @property
    def digest_size(self) -> int:
        """Size in bytes of PBKDF2 and HMAC output."""
        return _HASHES[self].digest_size

    @property
    def max_password_length(self) -> Optional[int]:
        """Longest password this algorithm has enough entropy for."""
        return _MAX_PASSWORD_LENGTH.get(self)

    @classmethod
    def from_password_length(cls, length: int) -> "Algorithm":
        """Pick the smallest SHA-2 digest able to feed ``length`` characters."""
        if length <= 35:
            return cls.SHA256
        if length <= 52:
            return cls.SHA384
        return cls.SHA512

    def pbkdf2(self, key: bytes, data: bytes, iterations: int) -> bytes:
        """Stretch ``key`` with ``data`` as salt.

        Args:
            key: Password bytes (may be empty).
            data: Salt bytes.
            iterations: PBKDF2 iteration count (>= 1).

        Returns:
            ``digest_size`` bytes.
        """
        kdf = PBKDF2HMAC(
            algorithm=self._hash(),
            length=self.digest_size,
            salt=data,
            iterations=iterations,
        )
        return kdf.derive(key)

    def hmac(self, key: bytes, data: bytes) -> bytes:
        """Single pass HMAC of ``data`` keyed with ``key`` (may be empty)."""
        mac = HMAC(key, self._hash())
        mac.update(data)
        return mac.finalize()


_HASHES = {
    Algorithm.SHA1: hashes.SHA1,
    Algorithm.SHA256: hashes.SHA256,
    Algorithm.SHA384: hashes.SHA384,
    Algorithm.SHA512: hashes.SHA512,
    Algorithm.SHA3_256: hashes.SHA3_256,
    Algorithm.SHA3_384: hashes.SHA3_384,
    Algorithm.SHA3_512: hashes.SHA3_512,
}

_DISPLAY_NAMES = {
    Algorithm.SHA1: "Sha1",
    Algorithm.SHA256: "Sha2-256",
    Algorithm.SHA384: "Sha2-384",
    Algorithm.SHA512: "Sha2-512",
    Algorithm.SHA3_256: "Sha3-256",
    Algorithm.SHA3_384: "Sha3-384",
    Algorithm.SHA3_512: "Sha3-512",
}

_MAX_PASSWORD_LENGTH = {
    Algorithm.SHA256: 35,
    Algorithm.SHA3_256: 35,
    Algorithm.SHA384: 52,
    Algorithm.SHA3_384: 52,
    Algorithm.SHA512: 70,
    Algorithm.SHA3_512: 70,
}
