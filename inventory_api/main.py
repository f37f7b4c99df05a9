# inventory_api/main.py
"""
Inventory API.
Products with stock levels, an append-only stock-history ledger and JWT
authentication. Storage is an in-memory store or a SQL database, selected by
STORAGE_BACKEND.
"""
import logging
import sys

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from inventory_api.config import settings
from inventory_api.database import SessionLocal, init_db
from inventory_api.dependencies import get_memory_repository
from inventory_api.errors import AuthError, InventoryError
from inventory_api.repositories.sql import SqlInventoryRepository
from inventory_api.seed import seed_repository

# Routers
from inventory_api.routes.auth import router as auth_router
from inventory_api.routes.products import router as products_router
from inventory_api.routes.history import router as history_router

# -----------------------------
# Configure Logging
# -----------------------------
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)

# Suppress noisy logs from third-party libraries for cleaner output
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
logging.getLogger("passlib").setLevel(logging.ERROR)

app = FastAPI(
    title="Inventory API",
    description="Products, stock levels and stock-change history",
    version="1.0.0",
)

# CORS Configuration
origins = [
    "http://localhost:4200",
    "http://127.0.0.1:4200",
]
if settings.FRONTEND_URL not in origins:
    origins.append(settings.FRONTEND_URL)

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(InventoryError)
async def inventory_error_handler(request: Request, exc: InventoryError):
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthError) else None
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message}, headers=headers)


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Something went wrong"},
    )


@app.on_event("startup")
def startup_event():
    """Prepares the configured store and loads the demo data into it."""
    if settings.STORAGE_BACKEND == "sql":
        init_db()
        if settings.SEED_DATA:
            db = SessionLocal()
            try:
                seed_repository(SqlInventoryRepository(db))
            finally:
                db.close()
        logger.info("Inventory API started with SQL storage.")
    else:
        get_memory_repository()
        logger.info("Inventory API started with in-memory storage.")


# Router registration
app.include_router(auth_router)
app.include_router(products_router)
app.include_router(history_router)


@app.get("/", status_code=status.HTTP_200_OK)
def read_root():
    return {"message": "Inventory API is running"}


@app.get("/api/health", status_code=status.HTTP_200_OK)
def health_check():
    return {"status": "OK", "message": "Inventory API is running"}
