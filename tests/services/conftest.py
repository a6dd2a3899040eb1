# tests/services/conftest.py
from __future__ import annotations
import pytest
from starlette.testclient import TestClient

from streamscope.services.api.app import create_app
from streamscope.services.api.deps import get_manifest_classifier, get_media_probe


class StubProbe:
    def __init__(self):
        self.data = None
        self.exc = None
        self.calls = []

    async def probe(self, url, headers=None):
        self.calls.append((url, headers))
        if self.exc is not None:
            raise self.exc
        return self.data


class StubClassifier:
    def __init__(self):
        self.result = None
        self.exc = None
        self.calls = []

    async def light_parse(self, url, manifest_type, headers=None):
        self.calls.append((url, manifest_type, headers))
        if self.exc is not None:
            raise self.exc
        return self.result


@pytest.fixture()
def stub_probe() -> StubProbe:
    return StubProbe()


@pytest.fixture()
def stub_classifier() -> StubClassifier:
    return StubClassifier()


@pytest.fixture()
def api_client(stub_probe, stub_classifier):
    """
    A TestClient whose prober and light classifier are replaced by stubs,
    so no process is spawned and no network is touched.
    """
    app = create_app()
    app.dependency_overrides[get_media_probe] = lambda: stub_probe
    app.dependency_overrides[get_manifest_classifier] = lambda: stub_classifier
    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
