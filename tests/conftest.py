import pytest

from dynasty.config.settings import AppSettings
from dynasty.engine.league import DynastyLeague
from dynasty.normalization.normalizer import Normalizer


@pytest.fixture
def config() -> AppSettings:
    return AppSettings()


@pytest.fixture
def normalizer(config: AppSettings) -> Normalizer:
    return Normalizer(config)


@pytest.fixture
def league(config: AppSettings) -> DynastyLeague:
    # Fresh store per test
    return DynastyLeague(config)
