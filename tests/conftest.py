"""Shared fixtures for lesspass_otp tests."""
import pytest

from lesspass_otp import Algorithm, CharacterSet, LessPass, Settings


@pytest.fixture
def lesspass():
    """Engine for the reference master password of the LessPass test suite."""
    return LessPass("test@lesspass.com", Algorithm.SHA256)


@pytest.fixture
def my_secret():
    """Engine used by the documented examples."""
    return LessPass("My5ecr3!", Algorithm.SHA256)


@pytest.fixture
def default_settings():
    """16 characters, every charset, default iterations."""
    return Settings()


@pytest.fixture
def fast_settings():
    """Cheap settings for property checks (1 PBKDF2 iteration)."""
    return Settings(iterations=1, password_length=16, charset=CharacterSet.ALL)
