from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from sr_calculator.app import create_app
from sr_calculator.core.config import Settings


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        env="test",
        log_level="WARNING",
        cors_origins=("http://localhost:5173",),
        service_name="sr-calculator",
        version="1.0.0",
        host="127.0.0.1",
        port=3000,
        debug=False,
    )


@pytest.fixture()
def client(settings: Settings) -> FlaskClient:
    app = create_app(settings)
    with app.test_client() as test_client:
        yield test_client
