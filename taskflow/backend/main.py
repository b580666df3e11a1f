# taskflow/backend/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import text

from taskflow.backend.core.config import settings
from taskflow.backend.core.errors import ServerError, TaskflowError
from taskflow.backend.core.logging_config import setup_logging
from taskflow.db.session import create_all_tables, engine

# 모델 모듈 임포트(테이블 등록 보장용)
import taskflow.db.base  # noqa: F401

# 라우터
from taskflow.backend.routers import auth, category, task, user

setup_logging(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Migrations are the normal path; this is for local sqlite runs.
    if settings.db_auto_create:
        logger.info("DB_AUTO_CREATE set, creating tables")
        create_all_tables()
    yield


app = FastAPI(
    title="TaskFlow Backend",
    version=settings.app_version,
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(TaskflowError)
async def taskflow_error_handler(request: Request, exc: TaskflowError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=exc.headers,
    )


@app.exception_handler(SQLAlchemyError)
async def store_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("store failure on %s %s", request.method, request.url.path)
    return await taskflow_error_handler(request, ServerError())


# 라우터 등록
app.include_router(auth.auth_router)
app.include_router(user.user_router)
app.include_router(task.router)
app.include_router(category.router)


@app.get("/health")
def health_app():
    return {"ok": True}


@app.get("/health/db")
def health_db():
    # Migration is a deployment concern. Runtime only verifies DB connectivity.
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return {"ok": True}
    except Exception:
        logger.exception("database health check failed")
        raise HTTPException(status_code=500, detail="Database connection failed")
