"""
LessPass Exceptions — Validation errors raised by the derivation engine.

Every error is a pure input rejection: nothing is derived or mutated before
it is raised. All of them are ``ValueError`` subclasses.
"""
from typing import Any


class LessPassError(ValueError):
    """Base class for every error raised by lesspass_otp."""

    message = "LessPass error."

    def __init__(self, *args: Any) -> None:
        super().__init__(*args)

    def __str__(self) -> str:
        return self.message

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class PasswordTooShort(LessPassError):
    """The requested password length is under the minimum."""

    def __init__(self, minimum: int, requested: int) -> None:
        super().__init__(minimum, requested)
        self.minimum = minimum
        self.requested = requested

    @property
    def message(self) -> str:
        return (
            f"Password length cannot be less than {self.minimum} "
            f"characters, it's {self.requested} length"
        )


class PasswordTooLong(LessPassError):
    """The requested password length exceeds what the algorithm can feed."""

    def __init__(self, maximum: int, requested: int, algorithm: Any) -> None:
        super().__init__(maximum, requested, algorithm)
        self.maximum = maximum
        self.requested = requested
        self.algorithm = algorithm

    @property
    def message(self) -> str:
        return (
            f"Password length cannot be more than {self.maximum} characters "
            f"if algorithm is {self.algorithm}. It's {self.requested} length."
        )


class NoCharsetSelected(LessPassError):
    message = (
        "No charset selected to generate a password. Please use at least one."
    )


class UnsupportedAlgorithm(LessPassError):
    """The algorithm is not valid where it is used."""

    message = "This algorithm is not supported."

    def __init__(self, algorithm: Any = None) -> None:
        if algorithm is None:
            super().__init__()
        else:
            super().__init__(algorithm)
        self.algorithm = algorithm


class InvalidLength(LessPassError):
    """Number of OTP digits, or OTP seed size, is out of range."""

    message = "The number of digits or the OTP seed length is not valid."

    def __init__(self, length: Any = None) -> None:
        if length is None:
            super().__init__()
        else:
            super().__init__(length)
        self.length = length


class InvalidBase32(LessPassError):
    message = "The provided string is not a valid base32 encoded string."
