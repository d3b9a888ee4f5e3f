import os

os.environ.setdefault("ENVIRONMENT", "test")

import pytest
from fastapi.testclient import TestClient

from storefront.main import app


@pytest.fixture(scope="session")
def client():
    with TestClient(app) as c:
        yield c
