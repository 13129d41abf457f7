from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# settings é lido no import do pacote
os.environ.setdefault("DB_URL", "sqlite://")
os.environ.setdefault("DEBUG", "false")

from icecube_api.infrastructure.database.base_model import BaseModel  # noqa: E402
from icecube_api.infrastructure.database.session import get_engine, init_engine  # noqa: E402
from icecube_api.main import create_app  # noqa: E402


@pytest.fixture()
def engine():
    # cada init_engine("sqlite://") começa com um banco em memória vazio
    engine = init_engine("sqlite://")
    BaseModel.metadata.create_all(engine)
    return engine


@pytest.fixture()
def app():
    app = create_app(database_url="sqlite://")
    app.config["TESTING"] = True
    BaseModel.metadata.create_all(get_engine())
    return app


@pytest.fixture()
def client(app):
    return app.test_client()
