# conftest.py
import pytest
from fastapi.testclient import TestClient

from pdfsearch.api.routes import get_pipeline
from pdfsearch.core.config import settings
from pdfsearch.main import app
from fakes import FakePipeline


@pytest.fixture
def upload_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "UPLOAD_DIR", tmp_path)
    return tmp_path


@pytest.fixture
def fake_pipeline():
    return FakePipeline()


@pytest.fixture
def client(fake_pipeline, upload_dir):
    app.dependency_overrides[get_pipeline] = lambda: fake_pipeline
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
