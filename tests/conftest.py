"""Shared fixtures for the unit converter tests."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from unithub.engine import build_app


@pytest.fixture
def app():
    return build_app()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
