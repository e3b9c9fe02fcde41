import pytest

from crp.config import Settings, get_settings
from crp.models.errors import ColorReplaceError, InvalidConfig
from crp.repositories.color_substitution_repository import ColorSubstitutionRepository


def test_defaults_without_environment():
    assert get_settings() == Settings(workers=1, rows_per_band=256, log_level="INFO",
                                      imread_timeout=5)


def test_values_read_from_environment(monkeypatch):
    monkeypatch.setenv("CRP_WORKERS", "4")
    monkeypatch.setenv("CRP_ROWS_PER_BAND", "16")
    monkeypatch.setenv("CRP_LOG_LEVEL", "debug")
    monkeypatch.setenv("CRP_IMREAD_TIMEOUT", "0")
    assert get_settings() == Settings(workers=4, rows_per_band=16, log_level="DEBUG",
                                      imread_timeout=0)


@pytest.mark.parametrize("name,value", [
    ("CRP_WORKERS", "0"),
    ("CRP_WORKERS", "two"),
    ("CRP_ROWS_PER_BAND", "-1"),
    ("CRP_IMREAD_TIMEOUT", "5s"),
    ("CRP_IMREAD_TIMEOUT", "-3"),
    ("CRP_LOG_LEVEL", "LOUD"),
])
def test_bad_values_raise_typed_error(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(InvalidConfig) as exc:
        get_settings()
    assert isinstance(exc.value, ColorReplaceError)
    assert name in str(exc.value)


def test_repository_defaults_come_from_environment(monkeypatch):
    monkeypatch.setenv("CRP_WORKERS", "3")
    monkeypatch.setenv("CRP_ROWS_PER_BAND", "8")
    repo = ColorSubstitutionRepository()
    assert (repo.workers, repo.rows_per_band) == (3, 8)


def test_explicit_arguments_skip_environment(monkeypatch):
    monkeypatch.setenv("CRP_WORKERS", "zero")
    repo = ColorSubstitutionRepository(workers=2, rows_per_band=5)
    assert (repo.workers, repo.rows_per_band) == (2, 5)
