import logging
from contextlib import asynccontextmanager
from typing import Iterator

import httpx
from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.responses import JSONResponse

from app import reports
from app.config import settings
from app.logging_config import setup_logging
from app.seed import SeedError, seed_from_url
from app.store import DataStore

setup_logging(settings.log_level, settings.log_file or None)
logger = logging.getLogger(__name__)


def make_http_client() -> httpx.Client:
    return httpx.Client(timeout=settings.seed_timeout)


def _auto_seed(store: DataStore) -> None:
    mode = settings.auto_seed
    if mode == "sample":
        from scripts.seed_data import seed
        logger.info("Seeded %d sample transactions", seed(store))
    elif mode == "remote":
        with make_http_client() as client:
            try:
                seed_from_url(store, client, settings.seed_url)
            except SeedError:
                logger.exception("Startup seeding failed, starting with an empty store")
    elif mode != "none":
        logger.warning("Unknown AUTO_SEED value %r, skipping startup seeding", mode)


@asynccontextmanager
async def lifespan(app: FastAPI):
    _auto_seed(app.state.store)
    yield


app = FastAPI(
    title=settings.project_name,
    version=settings.api_version,
    description="Monthly sales reporting over product transactions",
    lifespan=lifespan,
)
app.state.store = DataStore()


# ── Dependencies ─────────────────────────────────────────────────────────────

def get_store(request: Request) -> DataStore:
    return request.app.state.store


def get_http_client() -> Iterator[httpx.Client]:
    with make_http_client() as client:
        yield client


@app.exception_handler(Exception)
async def unhandled_error(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


# ── Seed ─────────────────────────────────────────────────────────────────────

@app.post("/api/init", summary="Replace all transactions with the remote seed data")
def initialize_database(
    store: DataStore = Depends(get_store),
    client: httpx.Client = Depends(get_http_client),
):
    try:
        seed_from_url(store, client, settings.seed_url)
    except SeedError:
        logger.exception("Database initialization failed")
        return JSONResponse(status_code=500, content={"error": "Database initialization failed"})
    return {"message": "Database initialized with seed data"}


# ── Reports ──────────────────────────────────────────────────────────────────

@app.get("/api/transactions", summary="Search and paginate a month's transactions")
def list_transactions(
    month: str = Query(..., examples=["03"]),
    page: int = Query(1),
    per_page: int = Query(10, alias="perPage"),
    search: str = Query(""),
    store: DataStore = Depends(get_store),
):
    try:
        result = reports.list_transactions(store, month, page, per_page, search)
    except ValueError as exc:
        raise HTTPException(400, str(exc))
    return result.model_dump(by_alias=True)


@app.get("/api/statistics", summary="Sale totals for a month")
def get_statistics(
    month: str = Query(..., examples=["03"]),
    store: DataStore = Depends(get_store),
):
    try:
        result = reports.get_statistics(store, month)
    except ValueError as exc:
        raise HTTPException(400, str(exc))
    return result.model_dump(by_alias=True)


@app.get("/api/bar-chart", summary="Item counts per price range for a month")
def get_bar_chart(
    month: str = Query(..., examples=["03"]),
    store: DataStore = Depends(get_store),
):
    try:
        result = reports.get_bar_chart(store, month)
    except ValueError as exc:
        raise HTTPException(400, str(exc))
    return [item.model_dump(by_alias=True) for item in result]


@app.get("/api/pie-chart", summary="Item counts per category for a month")
def get_pie_chart(
    month: str = Query(..., examples=["03"]),
    store: DataStore = Depends(get_store),
):
    try:
        result = reports.get_pie_chart(store, month)
    except ValueError as exc:
        raise HTTPException(400, str(exc))
    return [item.model_dump(by_alias=True) for item in result]


@app.get("/api/combined", summary="Transactions, statistics and both charts for a month")
def get_combined(
    month: str = Query(..., examples=["03"]),
    page: int = Query(1),
    per_page: int = Query(10, alias="perPage"),
    search: str = Query(""),
    store: DataStore = Depends(get_store),
):
    try:
        result = reports.get_combined(store, month, page, per_page, search)
    except ValueError as exc:
        raise HTTPException(400, str(exc))
    return result.model_dump(by_alias=True)


# ── Health ───────────────────────────────────────────────────────────────────

@app.get("/health", summary="Liveness and record count")
def health(store: DataStore = Depends(get_store)):
    return {"status": "ok", "records": store.count()}
