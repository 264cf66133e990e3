"""Unit tests for src/core/config.py"""

import logging
from typing import Optional

import pytest

from src.core.config import parse_flag


@pytest.mark.parametrize("raw_value", ["1", "true", "TRUE", "yes", " on "])
def test_truthy_values(raw_value: str) -> None:
    assert parse_flag("BOWLING_STRICT_PINS", raw_value, default=False) is True


@pytest.mark.parametrize("raw_value", ["0", "false", "False", "no", "off"])
def test_falsy_values(raw_value: str) -> None:
    assert parse_flag("BOWLING_STRICT_PINS", raw_value, default=True) is False


@pytest.mark.parametrize("raw_value", [None, "", "   "])
def test_unset_uses_default(raw_value: Optional[str]) -> None:
    assert parse_flag("BOWLING_STRICT_PINS", raw_value, default=True) is True
    assert parse_flag("BOWLING_STRICT_PINS", raw_value, default=False) is False


def test_unrecognised_value_falls_back_with_warning(
    caplog: pytest.LogCaptureFixture,
) -> None:
    with caplog.at_level(logging.WARNING, logger="src.core.config"):
        assert parse_flag("BOWLING_STRICT_PINS", "maybe", default=True) is True
    assert "BOWLING_STRICT_PINS" in caplog.text
    assert "'maybe'" in caplog.text
