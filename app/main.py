# app/main.py
from contextlib import asynccontextmanager
import logging

from fastapi.middleware.cors import CORSMiddleware
from fastapi import FastAPI

from app.core.config import get_settings
from app.core.errors import register_exception_handlers

# Routers
from app.routers.admin_stats import router as admin_stats_router
from app.routers.orders import router as orders_router
from app.routers.products import router as products_router
from app.routers.users import router as users_router

settings = get_settings()

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("uvicorn")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup:
      - Log which Supabase project reads go to.

    Shutdown:
      - Nothing to clean up; Supabase clients are per request.
    """
    logger.info("🔄 Startup: using Supabase project %s", settings.SUPABASE_URL)
    logger.info(
        "Reports wait up to %d ms for an authenticated user",
        settings.AUTH_WAIT_TIMEOUT_MS,
    )
    yield


app = FastAPI(
    title=settings.PROJECT_NAME or "Storefront Admin API",
    version="0.1.0",
    lifespan=lifespan,
)

register_exception_handlers(app)

# --- CORS configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Versioned API prefix, e.g. /api/v1
app.include_router(admin_stats_router, prefix=settings.API_V1_STR)
app.include_router(orders_router, prefix=settings.API_V1_STR)
app.include_router(users_router, prefix=settings.API_V1_STR)
app.include_router(products_router, prefix=settings.API_V1_STR)


@app.get("/")
def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "storefront-admin"}
