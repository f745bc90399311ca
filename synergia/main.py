"""FastAPI application: main entry point."""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from synergia.application.services.auth_service import ensure_default_admin
from synergia.application.services.restore_service import RestoreOrchestrator
from synergia.config import get_settings
from synergia.core.events import data_changed
from synergia.core.exceptions import AppError, global_exception_handler
from synergia.core.logging import configure_logging
from synergia.core.middleware import setup_middleware
from synergia.infrastructure.database import get_store

# Import routers
from synergia.interfaces.api.auth import router as auth_router
from synergia.interfaces.api.backup import router as backup_router
from synergia.interfaces.api.company import router as company_router
from synergia.interfaces.api.devolucoes import router as devolucoes_router
from synergia.interfaces.api.lotes import router as lotes_router
from synergia.interfaces.api.persons import router as persons_router
from synergia.interfaces.api.products import router as products_router
from synergia.interfaces.api.statuses import router as statuses_router
from synergia.interfaces.api.suppliers import router as suppliers_router
from synergia.interfaces.api.warranties import router as warranties_router

settings = get_settings()

# Configure logging immediately
configure_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: open the local store, seed the admin account."""
    logger.info("Starting Synergia OS...", env=settings.ENVIRONMENT)

    store = get_store()

    db = store.session()
    try:
        ensure_default_admin(db)
    finally:
        db.close()

    app.state.restore_orchestrator = RestoreOrchestrator(store, data_changed)

    yield

    logger.info("Synergia OS stopped")


app = FastAPI(
    title="Synergia OS",
    description="API local de garantias, lotes, devoluções e backup",
    version="1.0.0",
    lifespan=lifespan,
)

# Setup Middleware (Correlation ID, Logging)
setup_middleware(app)

# Global Exception Handling
app.add_exception_handler(AppError, global_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

# Include routers
app.include_router(auth_router)
app.include_router(warranties_router)
app.include_router(lotes_router)
app.include_router(persons_router)
app.include_router(suppliers_router)
app.include_router(products_router)
app.include_router(statuses_router)
app.include_router(devolucoes_router)
app.include_router(company_router)
app.include_router(backup_router)


@app.get("/")
def root():
    return {
        "name": "Synergia OS",
        "version": "1.0.0",
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health")
def health():
    return {"status": "healthy"}
