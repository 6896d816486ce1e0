import pathlib
import sys

import pytest
from fastapi.testclient import TestClient

p = str(pathlib.Path(__file__).resolve().parents[1])
sys.path.insert(0, p) if p not in sys.path else None


@pytest.fixture
def client():
    from taxca.config import get_settings
    from taxca.main import app

    get_settings.cache_clear()
    with TestClient(app) as test_client:
        yield test_client
    get_settings.cache_clear()
