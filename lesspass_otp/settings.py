"""
Derivation Settings — per-password parameters and their stored form.

The serialized form is a 4-tuple::

    (iterations | None, password_length, algorithm tag | None, charset byte)

Note: do not change the field order or the charset bit meanings, previously
generated passwords depend on them.
"""
from typing import Any, Optional

import orjson
from pydantic import BaseModel, Field, field_validator

from .algorithm import Algorithm
from .charset import CharacterSet

DEFAULT_ITERATIONS = 100_000
DEFAULT_PASSWORD_LENGTH = 16


class Settings(BaseModel):
    """Settings used to derive one password.

    Changing ``iterations`` or ``algorithm`` makes the passwords different
    from every other LessPass implementation.
    """

    iterations: Optional[int] = Field(default=None, ge=1, le=0xFFFFFFFF)
    password_length: int = Field(default=DEFAULT_PASSWORD_LENGTH, ge=0, le=255)
    charset: CharacterSet = Field(default=CharacterSet.ALL)
    algorithm: Optional[Algorithm] = None

    model_config = {"frozen": True}

    @field_validator("charset", mode="plain")
    @classmethod
    def validate_charset(cls, v: Any) -> CharacterSet:
        """Accept a CharacterSet or its byte form, always within 0..15."""
        if isinstance(v, bool) or not isinstance(v, int):
            raise ValueError(f"Unsupported charset: {v!r}")
        return CharacterSet.from_byte(int(v))

    @property
    def effective_iterations(self) -> int:
        """Configured number of iterations, or the default value."""
        return self.iterations if self.iterations is not None else DEFAULT_ITERATIONS

    def with_algorithm(self, algorithm: Algorithm) -> "Settings":
        return self.model_copy(update={"algorithm": Algorithm(algorithm)})

    def with_iterations(self, iterations: int) -> "Settings":
        return self.model_validate({**self.model_dump(), "iterations": iterations})

    def with_password_length(self, length: int) -> "Settings":
        return self.model_validate({**self.model_dump(), "password_length": length})

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_tuple(self) -> tuple:
        """Return the stable 4-tuple form of these settings."""
        return (
            self.iterations,
            self.password_length,
            self.algorithm.value if self.algorithm is not None else None,
            self.charset.to_byte(),
        )

    @classmethod
    def from_tuple(cls, data: Any) -> "Settings":
        """Rebuild settings from ``to_tuple()`` output.

        Raises:
            ValueError: If ``data`` is not a 4 item sequence or a field is invalid.
        """
        try:
            iterations, password_length, algorithm, charset = data
        except (TypeError, ValueError) as err:
            raise ValueError(
                f"Serialized settings must be a 4 item sequence: {err}"
            ) from err
        return cls(
            iterations=iterations,
            password_length=password_length,
            algorithm=algorithm,
            charset=charset,
        )

    def dumps(self) -> bytes:
        """Serialize to a JSON array.

        Returns:
            orjson-encoded bytes.
        """
        return orjson.dumps(list(self.to_tuple()))

    @classmethod
    def loads(cls, data: bytes) -> "Settings":
        return cls.from_tuple(orjson.loads(data))
