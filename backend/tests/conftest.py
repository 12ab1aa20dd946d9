import os

import pytest
from fastapi.testclient import TestClient

os.environ["ADMIN_EMAIL"] = "coach@example.com"
os.environ["ADMIN_PASSWORD"] = "password123"

from athlete_plans.core.config import Settings  # noqa: E402
from athlete_plans.main import create_app  # noqa: E402
from athlete_plans.repositories.json_store import JsonDatasetStore  # noqa: E402

ADMIN_EMAIL = os.environ["ADMIN_EMAIL"]
ADMIN_PASSWORD = os.environ["ADMIN_PASSWORD"]


@pytest.fixture()
def settings(tmp_path) -> Settings:
    public_dir = tmp_path / "public"
    public_dir.mkdir()
    (public_dir / "index.html").write_text("<html><body>athlete plans</body></html>", encoding="utf-8")
    return Settings(
        admin_email=ADMIN_EMAIL,
        admin_password=ADMIN_PASSWORD,
        data_file=tmp_path / "data" / "data.json",
        public_dir=public_dir,
    )


@pytest.fixture()
def dataset_store(settings: Settings) -> JsonDatasetStore:
    return JsonDatasetStore(settings.data_file)


@pytest.fixture()
def app(settings: Settings):
    return create_app(settings)


@pytest.fixture()
def client(app):
    with TestClient(app) as client:
        yield client
