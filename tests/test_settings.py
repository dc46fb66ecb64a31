"""Test class Settings."""
from pydantic import ValidationError
import pytest

from smart_calculator.common.settings import Settings


def test_defaults() -> None:
    settings = Settings()
    assert settings.max_exponent == 100_000
    assert settings.max_result_bits == 1_000_000
    assert settings.log_level == "WARNING"
    assert settings.prompt == ""


def test_from_env() -> None:
    """SMART_CALCULATOR_* variables override defaults, others are ignored."""
    settings = Settings.from_env(
        {
            "SMART_CALCULATOR_MAX_EXPONENT": "12",
            "SMART_CALCULATOR_LOG_LEVEL": "DEBUG",
            "SMART_CALCULATOR_MAX_RESULT_BITS": "64",
            "MAX_EXPONENT": "1",
        }
    )
    assert settings.max_exponent == 12
    assert settings.log_level == "DEBUG"
    assert settings.max_result_bits == 64


@pytest.mark.parametrize(
    "environ",
    [
        {"SMART_CALCULATOR_MAX_EXPONENT": "-1"},
        {"SMART_CALCULATOR_MAX_EXPONENT": "many"},
        {"SMART_CALCULATOR_LOG_LEVEL": "LOUD"},
        {"SMART_CALCULATOR_MAX_RESULT_BITS": "0"},
    ],
)
def test_from_env_invalid(environ) -> None:
    with pytest.raises(ValidationError):
        Settings.from_env(environ)


def test_settings_are_frozen() -> None:
    settings = Settings()
    with pytest.raises(ValidationError):
        settings.max_exponent = 1
