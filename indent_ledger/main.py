import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from indent_ledger.api.v1.api import api_router
from indent_ledger.core.config import settings
from indent_ledger.core.errors import NotFoundError, ReplicationFailure, ValidationError
from indent_ledger.db.mongo import close_mongo_connection, connect_to_mongo
from indent_ledger.db.session import get_database
from indent_ledger.repositories.ledger_store import LedgerStore
from indent_ledger.repositories.snapshot_repo import SnapshotRepository
from indent_ledger.services.replication_service import ReplicationReconciler

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await connect_to_mongo()
    await load_store()
    yield
    await close_mongo_connection()


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.PROJECT_VERSION,
    description=settings.DESCRIPTION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def install_store(store: LedgerStore) -> None:
    app.state.store = store
    app.state.reconciler = ReplicationReconciler(store)


install_store(LedgerStore())


async def load_store():
    """Load the persisted ledger; start empty when nothing was saved."""
    repo = SnapshotRepository(await get_database())
    store = await repo.load()
    if store is None:
        logger.info("No saved ledger found, starting empty")
        store = LedgerStore()
    install_store(store)
    logger.info(f"Ledger loaded: {len(store.shipments)} shipments, {len(store.transactions)} transactions")


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(ReplicationFailure)
async def replication_failure_handler(request: Request, exc: ReplicationFailure):
    # Local state is untouched; the ledger keeps working offline
    return JSONResponse(status_code=502, content={"detail": str(exc)})


@app.get("/")
async def root():
    return {"message": "Welcome to Indent Ledger API"}

app.include_router(api_router, prefix=settings.API_V1_STR)
