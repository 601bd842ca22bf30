from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from app import app as flask_app


@pytest.fixture()
def client() -> FlaskClient:
    with flask_app.test_client() as test_client:
        yield test_client
