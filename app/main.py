from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from dotenv import load_dotenv

load_dotenv()

from domain.config import get_app_config, get_seed_config, get_store_config
from domain.exceptions import InvalidQueryError, StoreUnavailableError
from infrastructure.clients import SeedClient
from infrastructure.db.database import create_session_factory, create_store_engine, init_models
from infrastructure.db.repositories.transaction_repo_sqlalchemy import TransactionRepoSqlalchemy
from infrastructure.logging.structlog_logs import logger
from infrastructure.metrics.metrics import metrics_endpoint
from app.routers.api import router
from app.schemas.transaction_schema import ErrorResponse


@asynccontextmanager
async def lifespan(app: FastAPI):
    store_config = get_store_config()
    engine = create_store_engine(store_config)
    try:
        await init_models(engine)
    except Exception:
        logger.error("store_init_failed", exc_info=True)
        await engine.dispose()
        raise
    app.state.transaction_repo = TransactionRepoSqlalchemy(create_session_factory(engine))

    seed_config = get_seed_config()
    app.state.seed_source = SeedClient(
        url=seed_config.url,
        connect_timeout=seed_config.connect_timeout,
        read_timeout=seed_config.read_timeout,
    )
    logger.info("startup_complete", seed_url=seed_config.url)
    try:
        yield
    finally:
        await app.state.seed_source.close()
        await engine.dispose()


app = FastAPI(title=get_app_config().service_name, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_app_config().cors_allow_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    # malformed page / perPage are client errors, reported as 400 rather than FastAPI's 422
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(
            error="invalid_request",
            message="Invalid query parameters",
            details=[
                {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
                for err in exc.errors()
            ],
        ).model_dump(exclude_none=True),
    )


@app.exception_handler(InvalidQueryError)
async def invalid_query_error_handler(request: Request, exc: InvalidQueryError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(error="invalid_request", message=str(exc)).model_dump(exclude_none=True),
    )


@app.exception_handler(StoreUnavailableError)
async def store_unavailable_error_handler(request: Request, exc: StoreUnavailableError):
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(error="Failed to query transactions", message=str(exc)).model_dump(exclude_none=True),
    )


@app.get("/metrics")
async def metrics():
    return metrics_endpoint()

@app.get("/health")
async def health():
    return {"status": "ok", "message": f"{get_app_config().service_name} is running"}

app.include_router(router)
