from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from questboard.adapters.data_source import HttpDataSource
from questboard.core.config import settings
from questboard.core.container import build_store
from questboard.utils.exception_handlers import (
    general_exception_handler,
    http_exception_handler,
    validation_exception_handler,
    value_error_handler,
)
from questboard.utils.router_discovery import register_routers


@asynccontextmanager
async def app_lifespan(app: FastAPI) -> AsyncGenerator[None]:
    store = build_store(settings)
    app.state.store = store
    logger.info(f"Dashboard store ready with {settings.data_source} data source")

    yield

    if isinstance(store.data_source, HttpDataSource):
        await store.data_source.aclose()


app = FastAPI(
    title="Questboard API",
    lifespan=app_lifespan,
    servers=[{"url": "http://localhost:3012", "description": "Local server"}],
)


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


register_routers(app)

app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(ValueError, value_error_handler)
app.add_exception_handler(Exception, general_exception_handler)


@app.get("/")
async def healthz() -> str:
    return "OK"
