"""
Tests for OTP seed protection.

Tests cover:
- Encrypted seeds stored by other implementations
- Round trips for short and long seeds
- Seeds bound to the master password, site and login
- Invalid seed sizes
"""
import pytest

from lesspass_otp import Algorithm, InvalidLength, LessPass


HOTP_HELLO = bytes([
    101, 22, 162, 221, 2, 88, 94, 95, 176, 106, 204, 94, 79, 92, 141, 190,
    131, 49, 214, 61, 222, 201, 120, 5, 188, 218, 35, 46, 210, 196, 21, 184,
])

TOTP_HELLO = bytes([
    245, 248, 155, 215, 234, 198, 151, 5, 95, 75, 83, 152, 159, 242, 191, 223,
    59, 194, 6, 233, 107, 52, 179, 27, 217, 250, 189, 86, 115, 118, 22, 138,
])

TOTP_GITHUB = bytes([
    255, 37, 183, 103, 211, 97, 25, 139, 84, 212, 123, 123, 188, 58, 183, 111,
    25, 79, 163, 101, 255, 155, 174, 184, 12, 99, 200, 15, 246, 37, 204, 108,
])


class TestKnownSeeds:
    """Encryption and decryption of stored seeds."""

    def test_hotp_encrypt(self, my_secret):
        """Test a HOTP seed encrypts to its stored form."""
        assert my_secret.secret_hotp(
            "example.com", "test@example.com", b"Hello World!",
        ) == HOTP_HELLO

    def test_hotp_decrypt(self, my_secret):
        """Test the stored HOTP seed decrypts back."""
        assert my_secret.secret_hotp(
            "example.com", "test@example.com", HOTP_HELLO,
        ) == b"Hello World!"

    def test_totp_encrypt(self, my_secret):
        """Test a TOTP seed encrypts to its stored form."""
        assert my_secret.secret_totp(
            "example.com", "test@example.com", b"Hello World!",
        ) == TOTP_HELLO

    def test_totp_decrypt(self):
        """Test a stored TOTP seed decrypts back."""
        lesspass = LessPass("mY5ecr3!", Algorithm.SHA256)
        assert lesspass.secret_totp(
            "github.com", "test@example.com", TOTP_GITHUB,
        ) == b"gfE%Tgd56^&!gd$"

    def test_protect_seed_alias(self, my_secret):
        """Test protect_seed is the TOTP transform."""
        assert my_secret.protect_seed(
            "example.com", "test@example.com", TOTP_HELLO,
        ) == b"Hello World!"

    def test_hotp_and_totp_differ(self):
        """Test the prefix separates HOTP and TOTP keystreams."""
        assert HOTP_HELLO != TOTP_HELLO


class TestBinding:
    """Decryption with the wrong inputs does not recover the seed."""

    def test_wrong_master(self):
        """Test another master password."""
        lesspass = LessPass("My5ecr3?", Algorithm.SHA256)
        assert lesspass.secret_hotp(
            "example.com", "test@example.com", HOTP_HELLO,
        ) != b"Hello World!"

    def test_wrong_site(self, my_secret):
        """Test another site."""
        assert my_secret.secret_hotp(
            "example.org", "test@example.com", HOTP_HELLO,
        ) != b"Hello World!"

    def test_wrong_login(self, my_secret):
        """Test another login."""
        assert my_secret.secret_hotp(
            "example.com", "test@example.org", HOTP_HELLO,
        ) != b"Hello World!"


class TestRoundTrip:
    """Encrypt then decrypt."""

    def test_short_seed(self, my_secret):
        """Test a 20 bytes seed goes through a 32 bytes form."""
        seed = bytes(range(20))
        encrypted = my_secret.secret_totp("123", "123", seed)
        assert len(encrypted) == 32
        assert my_secret.secret_totp("123", "123", encrypted) == seed

    def test_long_seed(self, my_secret):
        """Test a 50 bytes seed goes through a 64 bytes form."""
        seed = b"12345678901234567890123456789012345678901234567890"
        encrypted = my_secret.secret_hotp("DEADBEEF", "DEADBEEF", seed)
        assert len(encrypted) == 64
        assert my_secret.secret_hotp("DEADBEEF", "DEADBEEF", encrypted) == seed

    @pytest.mark.parametrize("size", [1, 31])
    def test_boundaries_short(self, my_secret, size):
        """Test the smallest and largest seeds of the short form."""
        seed = b"\xa5" * size
        encrypted = my_secret.secret_hotp("site", "login", seed)
        assert len(encrypted) == 32
        assert my_secret.secret_hotp("site", "login", encrypted) == seed

    def test_boundary_long(self, my_secret):
        """Test the largest seed of the long form."""
        seed = b"\x5a" * 63
        encrypted = my_secret.secret_totp("site", "login", seed)
        assert len(encrypted) == 64
        assert my_secret.secret_totp("site", "login", encrypted) == seed


class TestInvalidSeeds:
    """Seed sizes outside 1..64 bytes."""

    @pytest.mark.parametrize("size", [0, 65, 128])
    def test_invalid_length(self, my_secret, size):
        """Test empty and oversized seeds are rejected."""
        with pytest.raises(InvalidLength):
            my_secret.secret_totp("example.com", "test@example.com", b"x" * size)

    def test_error_message(self, my_secret):
        """Test the error names the seed length and keeps the size."""
        with pytest.raises(InvalidLength) as exc:
            my_secret.secret_hotp("example.com", "test@example.com", b"")
        assert exc.value.length == 0
        assert "seed length" in str(exc.value)
