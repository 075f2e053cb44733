import os
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault('APP_ENV', 'test')
os.environ.setdefault('DATABASE_URL', 'sqlite://')

from subscription_gateway.api.dependencies import get_clock, get_id_generator, get_store  # noqa: E402
from subscription_gateway.config import Settings  # noqa: E402
from subscription_gateway.main import create_app  # noqa: E402

from fakes import FIXED_ID, FIXED_NOW, FakeStore  # noqa: E402


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def make_client(store):
    def _make(fake=None, **settings_overrides):
        settings = Settings(_env_file=None, **settings_overrides)
        app = create_app(settings)
        app.dependency_overrides[get_store] = lambda: fake if fake is not None else store
        app.dependency_overrides[get_clock] = lambda: (lambda: FIXED_NOW)
        app.dependency_overrides[get_id_generator] = lambda: (lambda: FIXED_ID)
        return TestClient(app, raise_server_exceptions=False)

    return _make


@pytest.fixture
def client(make_client):
    return make_client()
