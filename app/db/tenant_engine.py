from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from app.db.base_tenant import TenantBase
from app.schemas.shop import ConnectionParams
import app.models.tenant  # noqa: F401  registers tenant tables


def build_tenant_url(params: ConnectionParams, url_template: str) -> str:
    """
    projectId is also the name of the shop's database,
    e.g. postgresql+psycopg2://u:p@host:5432/{project_id}
    """
    return url_template.format(project_id=params.project_id)


def get_engine_for_shop(
    params: ConnectionParams,
    url_template: str,
    create_tables: bool = False,
) -> Engine:
    engine = create_engine(
        build_tenant_url(params, url_template),
        pool_pre_ping=True,
    )

    if create_tables:
        try:
            TenantBase.metadata.create_all(bind=engine)
        except Exception:
            engine.dispose()
            raise

    return engine
