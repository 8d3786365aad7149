import pathlib
import sys

import pytest

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from core.station_catalog import StationCatalog  # noqa: E402
from tests.support import FakeSpeech, FakeVolumeSetter  # noqa: E402


@pytest.fixture(scope="session")
def catalog() -> StationCatalog:
    return StationCatalog.from_yaml()


@pytest.fixture
def volume_setter() -> FakeVolumeSetter:
    return FakeVolumeSetter()


@pytest.fixture
def speech() -> FakeSpeech:
    return FakeSpeech()
