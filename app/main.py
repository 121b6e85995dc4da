from contextlib import asynccontextmanager
from functools import partial
from typing import Optional

from fastapi import FastAPI

from app.core.config import Settings, settings as default_settings
from app.core.errors import register_error_handlers
from app.core.logger import configure_logging, logger
from app.core.security import get_password_verifier
from app.core.session import SessionContext
from app.core.session_store import SessionStore
from app.db.init_master import init_master_db
from app.db.master import create_master_engine, create_master_sessionmaker
from app.db.tenant import TenantConnectionRegistry
from app.db.tenant_engine import get_engine_for_shop
from app.routers import auth, categories, images, investments, partners, products, rates, users
from app.services.directory_service import MasterDirectoryClient


def create_app(
    settings: Optional[Settings] = None,
    registry: Optional[TenantConnectionRegistry] = None,
    session_store: Optional[SessionStore] = None,
) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)

    master_engine = create_master_engine(settings)
    directory = MasterDirectoryClient(
        create_master_sessionmaker(master_engine),
        verifier=get_password_verifier(settings.SHOP_PASSWORD_SCHEME),
    )

    if registry is None:
        registry = TenantConnectionRegistry(
            partial(
                get_engine_for_shop,
                url_template=settings.TENANT_DB_URL,
                create_tables=settings.TENANT_CREATE_TABLES,
            )
        )

    if session_store is None:
        session_store = SessionStore(
            settings.SESSION_FILE,
            window_seconds=settings.SESSION_WINDOW_SECONDS,
            key=settings.SESSION_KEY,
        )

    session_context = SessionContext(session_store, registry)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        init_master_db(master_engine)
        state = session_context.start()
        logger.info(f"CONSOLE STARTED | env={settings.ENV} | session={state.value}")
        yield
        registry.dispose()
        master_engine.dispose()

    app = FastAPI(
        title="Jewellery Admin Backend",
        version="1.0.0",
        lifespan=lifespan
    )

    app.state.settings = settings
    app.state.directory = directory
    app.state.registry = registry
    app.state.session_context = session_context

    register_error_handlers(app)

    app.include_router(auth.router)
    app.include_router(categories.router)
    app.include_router(products.router)
    app.include_router(investments.plans_router)
    app.include_router(investments.router)
    app.include_router(partners.router)
    app.include_router(rates.router)
    app.include_router(users.router)
    app.include_router(images.router)

    return app


app = create_app()
