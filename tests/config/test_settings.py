"""Tests for FreeListSettings environment loading."""

import pytest
from pydantic import ValidationError

from slotarena import FreeListSettings


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch, tmp_path):
    """Keep developer SLOTARENA_* variables and .env files out of these tests."""
    monkeypatch.delenv("SLOTARENA_DIAGNOSTIC_SLOT_LIMIT", raising=False)
    monkeypatch.delenv("SLOTARENA_LOG_GROWTH", raising=False)
    monkeypatch.chdir(tmp_path)


def test_defaults(settings):
    assert settings.diagnostic_slot_limit is None
    assert settings.log_growth is False


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("SLOTARENA_DIAGNOSTIC_SLOT_LIMIT", "8")
    monkeypatch.setenv("SLOTARENA_LOG_GROWTH", "true")

    settings = FreeListSettings()

    assert settings.diagnostic_slot_limit == 8
    assert settings.log_growth is True


def test_reads_dotenv_file(tmp_path):
    (tmp_path / ".env").write_text("SLOTARENA_DIAGNOSTIC_SLOT_LIMIT=4\n", encoding="utf-8")

    assert FreeListSettings().diagnostic_slot_limit == 4


def test_explicit_values_override_environment(monkeypatch):
    monkeypatch.setenv("SLOTARENA_DIAGNOSTIC_SLOT_LIMIT", "8")

    assert FreeListSettings(diagnostic_slot_limit=2).diagnostic_slot_limit == 2


def test_rejects_non_positive_limit():
    with pytest.raises(ValidationError):
        FreeListSettings(diagnostic_slot_limit=0)
