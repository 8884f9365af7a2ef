"""
LessPass — Password derivation, OTP seed protection and fingerprint.

Provides the public API of the engine:
- ``password(site, login, counter, settings)`` — derive a site password
- ``password_with_algorithm_from_length(...)`` — same, algorithm picked by length
- ``secret_hotp`` / ``secret_totp`` — encrypt a clear OTP seed, or decrypt a stored one
- ``fingerprint(salt)`` — (color, icon) triple to check the master password

Security Note:
    Never log the master password, logins, derived passwords or OTP seeds.
    Only log algorithms, lengths and iteration counts.
"""
import asyncio
import logging
from functools import partial
from typing import Union

from .algorithm import Algorithm
from .charset import CharacterSet
from .entropy import Entropy, salt as site_salt, salt_bytes
from .exceptions import (
    InvalidLength,
    NoCharsetSelected,
    PasswordTooLong,
    PasswordTooShort,
    UnsupportedAlgorithm,
)
from .fingerprint import Fingerprint, get_fingerprint, to_hex_string
from .master import Master
from .settings import Settings

logger = logging.getLogger("lesspass_otp")

MIN_PASSWORD_LENGTH = 5
SECRET_ITERATIONS = 100_000

_HOTP_PREFIX = b"hotp"
_TOTP_PREFIX = b"totp"


def _validate(algorithm: Algorithm, settings: Settings) -> None:
    """Reject settings that cannot produce a password.

    Raises:
        UnsupportedAlgorithm: SHA1 is never usable for passwords.
        PasswordTooShort: Less than 5 characters.
        PasswordTooLong: More characters than the algorithm can feed.
        NoCharsetSelected: Empty character set.
    """
    if algorithm is Algorithm.SHA1:
        raise UnsupportedAlgorithm(algorithm)
    length = settings.password_length
    if length < MIN_PASSWORD_LENGTH:
        raise PasswordTooShort(MIN_PASSWORD_LENGTH, length)
    ceiling = algorithm.max_password_length
    if length > ceiling:
        raise PasswordTooLong(ceiling, length, algorithm)
    if settings.charset.count == 0:
        raise NoCharsetSelected()


def render_password(entropy: Entropy, charset: CharacterSet, length: int) -> str:
    """Consume ``entropy`` into a ``length`` characters password.

    1. Draw ``length - charset.count`` characters from the full pool.
    2. Draw one mandatory character per active class, in class order.
    3. Insert each mandatory character at a position drawn over the
       current password length.
    """
    chars = charset.chars
    serials = charset.serials
    password = [
        chars[entropy.consume(len(chars))]
        for _ in range(length - len(serials))
    ]
    mandatory = [serial.chars[entropy.consume(serial.length)] for serial in serials]
    for char in mandatory:
        password.insert(entropy.consume(len(password)), char)
    return "".join(password)


class LessPass:
    """Master password bound engine.

    The algorithm given at construction is used for the fingerprint and for
    every password whose settings do not override it.

    Raises:
        UnsupportedAlgorithm: If ``algorithm`` is SHA1.
    """

    def __init__(self, master: Union[str, bytes], algorithm: Algorithm = Algorithm.SHA256):
        self._master = Master.new(master, algorithm)

    def __repr__(self) -> str:
        return f"<LessPass algorithm={self._master.algorithm.value}>"

    @property
    def algorithm(self) -> Algorithm:
        return self._master.algorithm

    # ------------------------------------------------------------------
    # Passwords
    # ------------------------------------------------------------------

    def password(
        self,
        site: str,
        login: str,
        counter: int,
        settings: Settings,
    ) -> str:
        """Derive the password of ``login`` on ``site``.

        Args:
            site: Site name (e.g. "example.com").
            login: Login on that site.
            counter: Incremented to change the password of the site.
            settings: Length, charset, iterations and optional algorithm.

        Returns:
            The password, exactly ``settings.password_length`` characters,
            with at least one character of every selected class.

        Raises:
            UnsupportedAlgorithm, PasswordTooShort, PasswordTooLong,
            NoCharsetSelected: Raised before any derivation work.
        """
        algorithm = settings.algorithm or self._master.algorithm
        _validate(algorithm, settings)

        iterations = settings.effective_iterations
        logger.debug(
            "Deriving password: algorithm=%s length=%d charsets=%d iterations=%d",
            algorithm.value, settings.password_length,
            settings.charset.count, iterations,
        )
        entropy = Entropy.derive(
            algorithm, self._master, site_salt(site, login, counter), iterations,
        )
        return render_password(entropy, settings.charset, settings.password_length)

    def password_with_algorithm_from_length(
        self,
        site: str,
        login: str,
        counter: int,
        settings: Settings,
    ) -> str:
        """Derive a password with the algorithm picked from its length.

        SHA256 up to 35 characters, SHA384 up to 52, SHA512 above.
        """
        algorithm = Algorithm.from_password_length(settings.password_length)
        return self.password(site, login, counter, settings.with_algorithm(algorithm))

    async def password_async(
        self,
        site: str,
        login: str,
        counter: int,
        settings: Settings,
    ) -> str:
        """``password()`` run in the loop's default executor."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            None, partial(self.password, site, login, counter, settings),
        )

    async def password_with_algorithm_from_length_async(
        self,
        site: str,
        login: str,
        counter: int,
        settings: Settings,
    ) -> str:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            None,
            partial(
                self.password_with_algorithm_from_length,
                site, login, counter, settings,
            ),
        )

    # ------------------------------------------------------------------
    # OTP seeds
    # ------------------------------------------------------------------

    def secret_hotp(self, site: str, login: str, secret: bytes) -> bytes:
        """Encrypt a clear HOTP seed, or decrypt a stored one.

        Note:
            A 32 or 64 bytes seed is always considered encrypted.

        Raises:
            InvalidLength: If ``secret`` is empty or over 64 bytes.
        """
        return self.secret_otp(
            _HOTP_PREFIX, site.encode("utf-8"), login.encode("utf-8"), secret,
        )

    def secret_totp(self, site: str, login: str, secret: bytes) -> bytes:
        """Encrypt a clear TOTP seed, or decrypt a stored one.

        Note:
            A 32 or 64 bytes seed is always considered encrypted.

        Raises:
            InvalidLength: If ``secret`` is empty or over 64 bytes.
        """
        return self.secret_otp(
            _TOTP_PREFIX, site.encode("utf-8"), login.encode("utf-8"), secret,
        )

    protect_seed = secret_totp

    def secret_otp(
        self,
        prefix: bytes,
        site: bytes,
        login: bytes,
        secret: bytes,
    ) -> bytes:
        """Self-inverting seed transform used by ``secret_hotp``/``secret_totp``.

        The size of ``secret`` selects the operation:

        - 1..31 bytes: encrypt into 32 bytes (SHA256 keystream)
        - 32 bytes: decrypt with the SHA256 keystream
        - 33..63 bytes: encrypt into 64 bytes (SHA512 keystream)
        - 64 bytes: decrypt with the SHA512 keystream

        The last byte of the encrypted form stores the clear length.

        Raises:
            InvalidLength: If ``secret`` is empty or over 64 bytes.
        """
        size = len(secret)
        if 1 <= size < 32:
            algorithm, encrypt = Algorithm.SHA256, True
        elif size == 32:
            algorithm, encrypt = Algorithm.SHA256, False
        elif 33 <= size < 64:
            algorithm, encrypt = Algorithm.SHA512, True
        elif size == 64:
            algorithm, encrypt = Algorithm.SHA512, False
        else:
            raise InvalidLength(size)

        logger.debug(
            "OTP seed %s with %s keystream",
            "encryption" if encrypt else "decryption", algorithm.value,
        )
        keystream = bytearray(
            algorithm.pbkdf2(
                self._master.password,
                salt_bytes(prefix, site, login),
                SECRET_ITERATIONS,
            )
        )
        last = len(keystream) - 1
        start = keystream[last] & last

        if encrypt:
            keystream[last] ^= size
            for i, byte in enumerate(secret):
                keystream[(start + i) % last] ^= byte
            return bytes(keystream)

        clear_length = secret[last] ^ keystream[last]
        return bytes(
            keystream[(start + i) % last] ^ secret[(start + i) % last]
            for i in range(clear_length)
        )

    # ------------------------------------------------------------------
    # Fingerprint
    # ------------------------------------------------------------------

    def fingerprint(self, salt: bytes = b"") -> Fingerprint:
        """Three (color, icon) pairs identifying the master password.

        Safe to display publicly.
        """
        return get_fingerprint(to_hex_string(self._master.fingerprint(salt)))
