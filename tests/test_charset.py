"""
Tests for the charset model.

Tests cover:
- Byte form and its validation
- Assembly order of the character classes
- Toggling classes on and off
"""
import pytest

from lesspass_otp import CharacterSet, CharUse, Set, alphabet_for


class TestByteForm:
    """Tests for CharacterSet.from_byte() / to_byte()."""

    @pytest.mark.parametrize("value", range(16))
    def test_valid_bytes(self, value):
        """Test every 4-bit value decodes and encodes back."""
        assert CharacterSet.from_byte(value).to_byte() == value

    @pytest.mark.parametrize("value", [16, 42, 255, -1])
    def test_invalid_bytes(self, value):
        """Test values outside the 4 bits are rejected."""
        with pytest.raises(ValueError, match=f"Unsupported value: {value}"):
            CharacterSet.from_byte(value)

    def test_named_values(self):
        """Test the documented bit values."""
        assert CharacterSet.LOWERCASE.to_byte() == 1
        assert CharacterSet.UPPERCASE.to_byte() == 2
        assert CharacterSet.NUMBERS.to_byte() == 4
        assert CharacterSet.SYMBOLS.to_byte() == 8
        assert CharacterSet.ALPHANUMERIC.to_byte() == 7
        assert CharacterSet.ALL.to_byte() == 15


class TestAssembly:
    """Tests for serials, chars and count."""

    def test_alphabets(self):
        """Test the fixed alphabets."""
        assert alphabet_for(Set.LOWERCASE) == "abcdefghijklmnopqrstuvwxyz"
        assert alphabet_for(Set.UPPERCASE) == "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
        assert alphabet_for(Set.NUMBERS) == "0123456789"
        assert Set.SYMBOLS.length == 32
        assert Set.SYMBOLS.chars.startswith("!\"#$%&'")
        assert Set.SYMBOLS.chars.endswith("{|}~")

    def test_serials_order(self):
        """Test classes are enumerated lower, upper, numbers, symbols."""
        charset = CharacterSet.SYMBOLS | CharacterSet.LOWERCASE | CharacterSet.NUMBERS
        assert charset.serials == (Set.LOWERCASE, Set.NUMBERS, Set.SYMBOLS)

    def test_chars_pool(self):
        """Test the pool is the ordered concatenation of alphabets."""
        charset = CharacterSet.NUMBERS | CharacterSet.UPPERCASE
        assert charset.chars == "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
        assert len(CharacterSet.ALL.chars) == 94

    @pytest.mark.parametrize("charset, count", [
        (CharacterSet.NONE, 0),
        (CharacterSet.SYMBOLS, 1),
        (CharacterSet.ALPHANUMERIC, 3),
        (CharacterSet.ALL, 4),
    ])
    def test_count(self, charset, count):
        """Test the number of active classes."""
        assert charset.count == count


class TestToggling:
    """Tests for with_*/is_* helpers."""

    def test_with_charset(self):
        """Test switching a class on and off."""
        charset = CharacterSet.NONE.with_charset(Set.NUMBERS, CharUse.USE)
        assert charset is CharacterSet.NUMBERS
        assert charset.with_charset(Set.NUMBERS, CharUse.DONT_USE) == CharacterSet.NONE

    def test_with_helpers(self):
        """Test the per-class builders."""
        charset = (
            CharacterSet.ALL
            .with_symbol(CharUse.DONT_USE)
            .with_lower(CharUse.DONT_USE)
        )
        assert charset == CharacterSet.UPPERCASE | CharacterSet.NUMBERS
        assert charset.is_upper() and charset.is_number()
        assert not charset.is_lower() and not charset.is_symbol()
        assert charset.with_upper(CharUse.USE) == charset
        assert charset.with_number(CharUse.DONT_USE) == CharacterSet.UPPERCASE

    def test_from_flags(self):
        """Test building from booleans."""
        assert CharacterSet.from_flags(lower=True, upper=True, numbers=True) == (
            CharacterSet.ALPHANUMERIC
        )
        assert CharacterSet.from_flags() == CharacterSet.NONE
