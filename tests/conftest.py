# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from relocation.api.http import app  # ensures imports resolve; run tests from repo root
from relocation.domain.assumptions import EvaluationPolicy
from relocation.domain.parameters import default_parameters


@pytest.fixture(scope="session")
def client():
    return TestClient(app)


@pytest.fixture
def policy():
    return EvaluationPolicy()


@pytest.fixture
def params():
    return default_parameters()
