"""
Entropy Stream — PBKDF2 output consumed as one big unsigned integer.

Each ``consume(n)`` is a long division: the remainder is an index in
``[0, n)`` and the quotient becomes the remaining entropy. A pool is bound
to one (master, site, login, counter, iterations, algorithm) tuple and is
never shared between derivations.
"""
from .algorithm import Algorithm
from .master import Master

_U32_MAX = 0xFFFFFFFF


def to_hex(counter: int) -> bytes:
    """Lowercase hexadecimal of ``counter``, without leading zeros.

    >>> to_hex(90)
    b'5a'
    """
    if not 0 <= counter <= _U32_MAX:
        raise ValueError(f"Counter must fit in 32 bits, got {counter}")
    return format(counter, "x").encode("ascii")


def salt_bytes(*parts: bytes) -> bytes:
    """Concatenate raw salt parts."""
    return b"".join(parts)


def salt(site: str, login: str, counter: int) -> bytes:
    """Password salt: ``site ++ login ++ hex(counter)``."""
    return salt_bytes(
        site.encode("utf-8"),
        login.encode("utf-8"),
        to_hex(counter),
    )


class Entropy:
    """Mutable pool of entropy for a single password derivation."""

    __slots__ = ("_value",)

    def __init__(self, value: int) -> None:
        if value < 0:
            raise ValueError("Entropy cannot be negative")
        self._value = value

    @classmethod
    def from_bytes(cls, data: bytes) -> "Entropy":
        return cls(int.from_bytes(data, "big"))

    @classmethod
    def derive(
        cls,
        algorithm: Algorithm,
        master: Master,
        salt: bytes,
        iterations: int,
    ) -> "Entropy":
        """Stretch the master password with ``salt`` and wrap the result."""
        return cls.from_bytes(algorithm.pbkdf2(master.password, salt, iterations))

    def consume(self, length: int) -> int:
        """Draw an index in ``[0, length)`` and shrink the pool.

        Raises:
            ValueError: If ``length`` is lower than 1.
        """
        if length < 1:
            raise ValueError(f"Cannot consume entropy over {length} values")
        self._value, remainder = divmod(self._value, length)
        return remainder

    def __int__(self) -> int:
        return self._value

    def __repr__(self) -> str:
        return f"<Entropy bits={self._value.bit_length()}>"
