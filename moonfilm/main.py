"""
Moonfilm Studio backend — FastAPI application entry‑point.
"""
import logging
import os
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from moonfilm.config import settings
from moonfilm.data.defaults import DEFAULT_SERVICES
from moonfilm.database import Base, SessionLocal, engine
from moonfilm.deps import require_admin
from moonfilm.platform import AuthClient
from moonfilm.realtime import feed, watch_sessions
from moonfilm.stores import ReceiptStore, ServiceStore, SettingsStore

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(name)-30s  %(levelname)-5s  %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: ensure data dirs + tables exist
    os.makedirs(settings.DATA_DIR, exist_ok=True)
    os.makedirs(settings.DRAFTS_DIR, exist_ok=True)
    import moonfilm.models  # noqa: F401
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ready (%s)", settings.DATABASE_URL)

    watch_sessions(SessionLocal)
    app.state.services = ServiceStore(SessionLocal, feed, initial=DEFAULT_SERVICES)
    app.state.receipts = ReceiptStore(SessionLocal, feed)
    app.state.settings = SettingsStore(SessionLocal, feed)
    for store in (app.state.services, app.state.receipts, app.state.settings):
        store.open()
    app.state.auth = AuthClient(settings.SUPABASE_URL, settings.SUPABASE_ANON_KEY)

    yield

    for store in (app.state.services, app.state.receipts, app.state.settings):
        store.close()
    app.state.auth.close()
    logger.info("Shutting down")


app = FastAPI(
    title="Moonfilm Studio",
    description="Quote builder, receipts and business settings for a photo/video studio",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(SQLAlchemyError)
async def database_error(request: Request, exc: SQLAlchemyError):
    logger.error("Database error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=503, content={"detail": "Database error, please try again."})


@app.get("/")
async def root():
    return {"service": "Moonfilm Studio", "version": "0.1.0", "status": "running"}


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


# ── Register API routers ─────────────────────────────────────────────────
from moonfilm.routers.auth import router as auth_router  # noqa: E402
from moonfilm.routers.catalog import router as catalog_router  # noqa: E402
from moonfilm.routers.dashboard import router as dashboard_router  # noqa: E402
from moonfilm.routers.quote import router as quote_router  # noqa: E402
from moonfilm.routers.receipts import router as receipts_router  # noqa: E402
from moonfilm.routers.services import router as services_router  # noqa: E402

admin_only = [Depends(require_admin)]

app.include_router(catalog_router, prefix="/api", tags=["Catalog"])
app.include_router(quote_router, prefix="/api", tags=["Quote"])
app.include_router(auth_router, prefix="/api", tags=["Auth"])
app.include_router(dashboard_router, prefix="/api/admin", tags=["Admin"], dependencies=admin_only)
app.include_router(services_router, prefix="/api/admin", tags=["Admin Services"], dependencies=admin_only)
app.include_router(receipts_router, prefix="/api/admin", tags=["Admin Receipts"], dependencies=admin_only)
