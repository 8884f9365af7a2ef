"""
Charset Model — which character classes a derived password draws from.

A ``CharacterSet`` is a 4-bit flag set; its byte value is the serialized
form (1=lowercase, 2=uppercase, 4=numbers, 8=symbols). The enumeration
order lowercase, uppercase, numbers, symbols is fixed: password assembly
depends on it, so changing it changes every derived password.
"""
from enum import Enum, IntFlag

LOWERCASE_CHARS = "abcdefghijklmnopqrstuvwxyz"
UPPERCASE_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
NUMBERS_CHARS = "0123456789"
SYMBOLS_CHARS = "!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~"


class Set(Enum):
    """A single character class. The value is its bit in ``CharacterSet``."""

    LOWERCASE = 0b0001
    UPPERCASE = 0b0010
    NUMBERS = 0b0100
    SYMBOLS = 0b1000

    @property
    def chars(self) -> str:
        return _ALPHABETS[self]

    @property
    def length(self) -> int:
        return len(_ALPHABETS[self])


class CharUse(Enum):
    """Whether a character class must be used or not."""

    USE = True
    DONT_USE = False


_ALPHABETS = {
    Set.LOWERCASE: LOWERCASE_CHARS,
    Set.UPPERCASE: UPPERCASE_CHARS,
    Set.NUMBERS: NUMBERS_CHARS,
    Set.SYMBOLS: SYMBOLS_CHARS,
}

# assembly order
SERIALS_ORDER = (Set.LOWERCASE, Set.UPPERCASE, Set.NUMBERS, Set.SYMBOLS)


def alphabet_for(serial: Set) -> str:
    """Return the fixed alphabet of a character class."""
    return _ALPHABETS[serial]


class CharacterSet(IntFlag):
    """Set of character classes used to build a password.

    Combine members with ``|``; ``CharacterSet(0)`` selects nothing and is
    rejected when deriving a password.
    """

    NONE = 0
    LOWERCASE = 0b0001
    UPPERCASE = 0b0010
    NUMBERS = 0b0100
    SYMBOLS = 0b1000
    ALPHANUMERIC = 0b0111
    ALL = 0b1111

    @classmethod
    def from_byte(cls, value: int) -> "CharacterSet":
        """Decode the serialized byte form.

        Raises:
            ValueError: If ``value`` is not one of the 16 valid selections.
        """
        if isinstance(value, bool) or not 0 <= int(value) <= 0b1111:
            raise ValueError(f"Unsupported value: {value}")
        return cls(int(value))

    @classmethod
    def from_flags(
        cls,
        lower: bool = False,
        upper: bool = False,
        numbers: bool = False,
        symbols: bool = False,
    ) -> "CharacterSet":
        charset = cls.NONE
        for serial, wanted in zip(SERIALS_ORDER, (lower, upper, numbers, symbols)):
            if wanted:
                charset = charset | cls(serial.value)
        return charset

    def to_byte(self) -> int:
        return int(self)

    def uses(self, serial: Set) -> bool:
        return bool(int(self) & serial.value)

    def with_charset(self, serial: Set, to_use: CharUse) -> "CharacterSet":
        """Return a copy with ``serial`` switched on or off."""
        if to_use is CharUse.USE:
            return CharacterSet(int(self) | serial.value)
        return CharacterSet(int(self) & ~serial.value & 0b1111)

    def is_lower(self) -> bool:
        return self.uses(Set.LOWERCASE)

    def is_upper(self) -> bool:
        return self.uses(Set.UPPERCASE)

    def is_number(self) -> bool:
        return self.uses(Set.NUMBERS)

    def is_symbol(self) -> bool:
        return self.uses(Set.SYMBOLS)

    def with_lower(self, to_use: CharUse) -> "CharacterSet":
        return self.with_charset(Set.LOWERCASE, to_use)

    def with_upper(self, to_use: CharUse) -> "CharacterSet":
        return self.with_charset(Set.UPPERCASE, to_use)

    def with_number(self, to_use: CharUse) -> "CharacterSet":
        return self.with_charset(Set.NUMBERS, to_use)

    def with_symbol(self, to_use: CharUse) -> "CharacterSet":
        return self.with_charset(Set.SYMBOLS, to_use)

    @property
    def serials(self) -> tuple[Set, ...]:
        """Active character classes, in assembly order."""
        return tuple(serial for serial in SERIALS_ORDER if self.uses(serial))

    @property
    def chars(self) -> str:
        """Full pool of candidate characters, in assembly order."""
        return "".join(serial.chars for serial in self.serials)

    @property
    def count(self) -> int:
        """Number of active character classes (0 to 4)."""
        return len(self.serials)
