import pytest
from sqlalchemy import create_engine, inspect

from app.core.errors import TenantNotInitialized
from app.db.tenant import TenantConnectionRegistry
from app.db.tenant_engine import build_tenant_url, get_engine_for_shop
from conftest import OTHER_SHOP, REAL_SHOP, params_for


class RecordingFactory:
    def __init__(self):
        self.calls = []

    def __call__(self, params):
        self.calls.append(params)
        return create_engine("sqlite://")


def test_no_handle_before_resolve():
    registry = TenantConnectionRegistry(RecordingFactory())

    assert registry.get_handle() is None
    with pytest.raises(TenantNotInitialized):
        registry.require_handle()


def test_resolve_builds_handle_once():
    factory = RecordingFactory()
    registry = TenantConnectionRegistry(factory)
    params = params_for(REAL_SHOP)

    first = registry.resolve(params)
    second = registry.resolve(params)

    assert first is second
    assert registry.get_handle() is first
    assert factory.calls == [params]


def test_first_resolve_wins_for_different_params():
    factory = RecordingFactory()
    registry = TenantConnectionRegistry(factory)

    first = registry.resolve(params_for(REAL_SHOP))
    second = registry.resolve(params_for(OTHER_SHOP))

    assert second is first
    assert registry.get_handle().params == params_for(REAL_SHOP)
    assert len(factory.calls) == 1


def test_registries_are_isolated():
    a = TenantConnectionRegistry(RecordingFactory())
    b = TenantConnectionRegistry(RecordingFactory())

    a.resolve(params_for(REAL_SHOP))
    assert b.get_handle() is None


def test_tenant_url_uses_project_id():
    url = build_tenant_url(params_for(REAL_SHOP), "postgresql+psycopg2://u:p@db:5432/{project_id}")
    assert url == "postgresql+psycopg2://u:p@db:5432/real_project"


def test_engine_for_shop_creates_tenant_tables(tmp_path):
    engine = get_engine_for_shop(
        params_for(REAL_SHOP),
        url_template=f"sqlite:///{tmp_path}/{{project_id}}.db",
        create_tables=True,
    )
    try:
        assert (tmp_path / "real_project.db").exists()
        tables = set(inspect(engine).get_table_names())
        assert {"categories", "products", "investment_plans", "investments",
                "partner_users", "metal_rates", "users"} <= tables
    finally:
        engine.dispose()
