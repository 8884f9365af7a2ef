"""
LessPass Configuration — Validated defaults, optionally read from environment.

Reads defaults from environment variables:
    LESSPASS_ALGORITHM = <SHA256 | SHA384 | SHA512 | SHA3_256 | SHA3_384 | SHA3_512>
    LESSPASS_ITERATIONS = <integer>
    LESSPASS_PASSWORD_LENGTH = <integer>
    LESSPASS_CHARSET = <charset bitmask, 1..15>
    LESSPASS_OTP_DIGITS = <6..9>
    LESSPASS_OTP_PERIOD = <seconds>

Unset variables keep the LessPass defaults.

Security Note:
    The master password is never read from the environment.
"""
import os
import logging
from typing import Any, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from .algorithm import Algorithm
from .charset import CharacterSet
from .lesspass import LessPass
from .otp import Otp
from .settings import DEFAULT_ITERATIONS, DEFAULT_PASSWORD_LENGTH, Settings

logger = logging.getLogger("lesspass_otp")

_ENV_PREFIX = "LESSPASS_"


def _read_env(name: str) -> Union[str, None]:
    value = os.environ.get(f"{_ENV_PREFIX}{name}")
    if value is None or not value.strip():
        return None
    return value.strip()


class LessPassConfig(BaseModel):
    """Validated LessPass defaults."""

    algorithm: Algorithm = Field(default=Algorithm.SHA256)
    iterations: int = Field(default=DEFAULT_ITERATIONS, ge=1)
    password_length: int = Field(default=DEFAULT_PASSWORD_LENGTH, ge=5, le=70)
    charset: CharacterSet = Field(default=CharacterSet.ALL)
    otp_digits: int = Field(default=6, ge=6, le=9)
    otp_period: int = Field(default=30, ge=1)

    model_config = {"frozen": True}

    @field_validator("algorithm")
    @classmethod
    def validate_algorithm(cls, v: Algorithm) -> Algorithm:
        """SHA1 cannot derive passwords."""
        if v is Algorithm.SHA1:
            raise ValueError(f"Unsupported password algorithm: {v.value}")
        return v

    @field_validator("charset", mode="plain")
    @classmethod
    def validate_charset(cls, v: Any) -> CharacterSet:
        """Accept a CharacterSet or its bitmask, rejecting empty sets."""
        if isinstance(v, str):
            v = int(v)
        if isinstance(v, bool) or not isinstance(v, int):
            raise ValueError(f"Unsupported charset: {v!r}")
        charset = CharacterSet.from_byte(int(v))
        if charset.count == 0:
            raise ValueError("At least one charset must be selected")
        return charset

    @model_validator(mode="after")
    def validate_length_fits_algorithm(self) -> "LessPassConfig":
        """Ensure the default length is derivable with the default algorithm."""
        ceiling = self.algorithm.max_password_length
        if self.password_length > ceiling:
            raise ValueError(
                f"password_length {self.password_length} exceeds {ceiling} "
                f"characters allowed by {self.algorithm}"
            )
        return self

    @classmethod
    def from_env(cls) -> "LessPassConfig":
        """Create LessPassConfig by loading values from environment.

        Returns:
            Populated LessPassConfig instance.
        """
        fields = {
            "algorithm": _read_env("ALGORITHM"),
            "iterations": _read_env("ITERATIONS"),
            "password_length": _read_env("PASSWORD_LENGTH"),
            "charset": _read_env("CHARSET"),
            "otp_digits": _read_env("OTP_DIGITS"),
            "otp_period": _read_env("OTP_PERIOD"),
        }
        values = {key: value for key, value in fields.items() if value is not None}
        if "algorithm" in values:
            values["algorithm"] = values["algorithm"].upper()
        logger.debug("LessPass configuration from environment: %s", sorted(values))
        return cls(**values)

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    def settings(self) -> Settings:
        """Default password settings.

        Iterations are only stored when they differ from the default, so
        serialized settings stay compatible with stock LessPass.
        """
        return Settings(
            iterations=None if self.iterations == DEFAULT_ITERATIONS else self.iterations,
            password_length=self.password_length,
            charset=self.charset,
        )

    def lesspass(self, master: Union[str, bytes]) -> LessPass:
        return LessPass(master, self.algorithm)

    def otp(self, secret: bytes) -> Otp:
        return Otp(secret, self.otp_digits, period=self.otp_period)
