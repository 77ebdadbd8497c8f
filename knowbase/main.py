from contextlib import asynccontextmanager
import logging
import uuid

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from knowbase.api.http import auth_router, documents_router, health_router
from knowbase.core.config import settings
from knowbase.core.db import create_tables
from knowbase.core.errors import AppError
from knowbase.core.logger import clear_request_id, init_logging, set_request_id

init_logging()
logger = logging.getLogger("knowbase.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.create_tables_on_startup:
        await create_tables()
        logger.info("Database tables created")
    logger.info("Knowledge Base API started")
    yield
    logger.info("Knowledge Base API shutting down")


app = FastAPI(
    title="Knowledge Base",
    description="Персональная база знаний: регистрация, вход и документы пользователя",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_id_middleware(request: Request, call_next):
    """Идентификатор запроса для трассировки в логах"""
    set_request_id(str(uuid.uuid4())[:8])
    logger.info(f"{request.method} {request.url.path}")
    try:
        response = await call_next(request)
        logger.info(f"{request.method} {request.url.path} -> {response.status_code}")
        return response
    finally:
        clear_request_id()


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return error_response(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    messages = []
    for error in exc.errors():
        field = error.get("loc", [])[-1] if error.get("loc") else None
        messages.append(f"{field}: {error.get('msg')}" if field else error.get("msg"))
    return error_response(400, "; ".join(messages) or "Invalid input")


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(500, "Server Error")


# Подключаем роутеры
app.include_router(health_router)
app.include_router(auth_router, prefix=settings.api_prefix)
app.include_router(documents_router, prefix=settings.api_prefix)

