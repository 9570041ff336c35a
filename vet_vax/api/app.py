"""
VetVax — FastAPI Application

Головний файл FastAPI додатку.

Запуск:
    uvicorn vet_vax.api.app:app --reload --host 0.0.0.0 --port 8000

    або:

    python scripts/run_api.py --records data/records.json
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging
import time

from vet_vax import __version__
from vet_vax.logging_config import setup_logging
from vet_vax.store import RecordStoreError

from .config import config
from .dependencies import service_manager
from .models import ErrorResponse
from .routes import (
    health_router,
    animals_router,
    admin_router,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifecycle manager: створення сервісу при старті.
    """
    # Спершу рівень з environment, після load() з конфігурації VetVax
    setup_logging(config.log_level)
    success = service_manager.load()
    setup_logging(service_manager.settings.log_level, service_manager.settings.log_file)

    logger.info("=" * 60)
    logger.info("💉 VetVax API Starting...")

    if success:
        logger.info("✅ API ready!")
    else:
        logger.warning(f"⚠️ API starting in limited mode: {service_manager.error}")

    logger.info(f"📍 Swagger UI: http://{config.host}:{config.port}/docs")
    logger.info("=" * 60)

    yield

    logger.info("🛑 VetVax API Stopping...")


# Створюємо додаток
app = FastAPI(
    title=config.api_title,
    description=config.api_description,
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=config.cors_allow_credentials,
    allow_methods=config.cors_allow_methods,
    allow_headers=config.cors_allow_headers,
)


# Middleware для логування запитів
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()

    response = await call_next(request)

    process_time = time.time() - start_time

    # Логуємо тільки API запити
    if request.url.path.startswith(config.api_prefix):
        logger.info(
            f"📨 {request.method} {request.url.path} → {response.status_code} "
            f"({process_time * 1000:.1f}ms)"
        )

    return response


# Сховище недоступне: вся операція неуспішна
@app.exception_handler(RecordStoreError)
async def record_store_exception_handler(request: Request, exc: RecordStoreError):
    logger.error(f"❌ Record store error: {exc}")
    return JSONResponse(
        status_code=502,
        content=ErrorResponse(
            error="Record store unavailable",
            detail=str(exc),
        ).model_dump()
    )


# Глобальний обробник помилок
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception(f"❌ Error: {exc}")
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error="Internal server error",
            detail=str(exc) if config.debug else None,
        ).model_dump()
    )


# Підключаємо роутери
app.include_router(health_router)
app.include_router(animals_router, prefix=config.api_prefix)
app.include_router(admin_router, prefix=config.api_prefix)
