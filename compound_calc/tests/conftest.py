from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from compound_calc.app import create_app
from compound_calc.config import AppConfig


@pytest.fixture()
def app_config() -> AppConfig:
    return AppConfig(LOG_LEVEL="WARNING", DEFAULT_CURRENCY="€")


@pytest.fixture()
def client(app_config: AppConfig) -> FlaskClient:
    flask_app = create_app(app_config)
    flask_app.config["TESTING"] = True
    with flask_app.test_client() as test_client:
        yield test_client
