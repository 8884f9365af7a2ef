"""
Master password handle.

Security Note:
    The master password bytes stay in process memory for the lifetime of
    the object and are not scrubbed on release (Python ``bytes`` are
    immutable). Wiping is the caller's concern. The password is kept out
    of ``repr()`` so it does not end up in logs or tracebacks.
"""
from dataclasses import dataclass, field
from typing import Union

from .algorithm import Algorithm
from .exceptions import UnsupportedAlgorithm


@dataclass(frozen=True)
class Master:
    """
    Master password plus its default algorithm.

    Attributes:
        password: Raw master password bytes (KEEP SECRET)
        algorithm: Default algorithm for passwords and the fingerprint

    Raises:
        UnsupportedAlgorithm: If ``algorithm`` is SHA1.
    """

    password: bytes = field(repr=False)
    algorithm: Algorithm = Algorithm.SHA256

    def __post_init__(self):
        if isinstance(self.password, str):
            object.__setattr__(self, "password", self.password.encode("utf-8"))
        algorithm = Algorithm(self.algorithm)
        if algorithm is Algorithm.SHA1:
            raise UnsupportedAlgorithm(algorithm)
        object.__setattr__(self, "algorithm", algorithm)

    @classmethod
    def new(cls, master: Union[str, bytes], algorithm: Algorithm) -> "Master":
        return cls(password=master, algorithm=algorithm)

    def fingerprint(self, salt: bytes) -> bytes:
        """HMAC of ``salt`` keyed with the master password."""
        return self.algorithm.hmac(self.password, salt)
