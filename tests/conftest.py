import pytest

from crp.models.color import Color, ColorMatchCriterion
from crp.repositories.color_substitution_repository import ColorSubstitutionRepository

RED = Color(255, 0, 0)
BLACK = Color(0, 0, 0)


@pytest.fixture
def black_to_red():
    return ColorMatchCriterion(origin=BLACK, target=RED)


@pytest.fixture
def substitution_repository():
    return ColorSubstitutionRepository(workers=1, rows_per_band=256)



@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep CRP_* settings from the developer's shell or .env out of the tests."""
    for name in ("CRP_WORKERS", "CRP_ROWS_PER_BAND", "CRP_LOG_LEVEL", "CRP_IMREAD_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
