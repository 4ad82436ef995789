"""Shared pytest fixtures for intdigits tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from intdigits.config.settings import DigitsSettings
from intdigits.services.convert import DigitService


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> DigitsSettings:
    """Default settings, isolated from any intdigits.toml or env overrides."""
    monkeypatch.delenv("INTDIGITS_CONFIG", raising=False)
    monkeypatch.delenv("INTDIGITS_CONVERSION__DEFAULT_WIDTH", raising=False)
    return DigitsSettings.load(start=tmp_path)


@pytest.fixture
def service(settings: DigitsSettings) -> DigitService:
    return DigitService(settings)
