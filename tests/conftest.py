import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.core.config import Settings
from app.db.base import Base
from app.main import create_app
from app.models.master.master import Shop
from app.schemas.shop import ConnectionParams


REAL_SHOP = {
    "shop_id": "real-shop",
    "password": "correct-pw",
    "api_key": "key-real",
    "auth_domain": "real.example.com",
    "project_id": "real_project",
    "app_id": "1:111:web:real",
    "messaging_sender_id": "111",
    "measurement_id": "G-REAL",
    "shop_name": "Real Jewellers",
}

OTHER_SHOP = {
    "shop_id": "other-shop",
    "password": "other-pw",
    "api_key": "key-other",
    "auth_domain": "other.example.com",
    "project_id": "other_project",
    "app_id": "1:222:web:other",
    "messaging_sender_id": "222",
    "measurement_id": "G-OTHER",
    "shop_name": "Other Gold House",
}


def params_for(shop: dict) -> ConnectionParams:
    fields = {k: v for k, v in shop.items() if k not in ("shop_id", "password")}
    return ConnectionParams(**fields)


class FakeClock:
    def __init__(self, now: float = 1_700_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def settings(tmp_path):
    return Settings(
        MASTER_DATABASE_URL=f"sqlite:///{tmp_path / 'master.db'}",
        TENANT_DB_URL_TEMPLATE=f"sqlite:///{tmp_path}/{{project_id}}.db",
        SESSION_FILE=str(tmp_path / "session.json"),
        SECRET_KEY="test-secret",
        LOG_LEVEL="DEBUG",
    )


@pytest.fixture
def master_sessionmaker(settings):
    engine = create_engine(settings.MASTER_DB_URL)
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(bind=engine)
    engine.dispose()


@pytest.fixture
def shops(master_sessionmaker):
    with master_sessionmaker() as db:
        db.add_all([Shop(**REAL_SHOP), Shop(**OTHER_SHOP)])
        db.commit()
    return master_sessionmaker


@pytest.fixture
def console_app(settings, shops):
    return create_app(settings)


@pytest.fixture
def client(console_app):
    with TestClient(console_app) as c:
        yield c


def login(client, shop_id="real-shop", password="correct-pw") -> dict:
    res = client.post("/auth/login", json={"shop_id": shop_id, "password": password})
    assert res.status_code == 200, res.text
    return {"Authorization": f"Bearer {res.json()['access_token']}"}


@pytest.fixture
def auth_headers(client):
    return login(client)


@pytest.fixture
def tenant_db(client, auth_headers):
    db = client.app.state.registry.require_handle().session()
    try:
        yield db
    finally:
        db.close()
