import asyncio
import csv
from contextlib import asynccontextmanager, suppress
import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.routers import chat, documents, generation, hotels, users
from app.core.config import settings
from app.core.errors import APIError, ValidationError, code_for_status, error_content
from app.core.logging import setup_logging
from app.dependencies import get_cohere_client, get_gemini_client, get_hotel_catalog
from app.domain.repositories import HotelCatalog

setup_logging()
logger = logging.getLogger(__name__)

for _provider in (get_gemini_client(), get_cohere_client()):
    logger.info("%s API key: %s", _provider.provider, "loaded" if _provider.configured else "missing")


async def load_hotels(catalog: HotelCatalog, path: Optional[Path] = None) -> None:
    path = path or settings.hotels_csv_path
    try:
        await catalog.load_csv(path)
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        logger.warning("Could not load hotels CSV %s: %s", path, exc)
        return
    logger.info("Loaded %d hotels from %s", len(catalog), path)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Not awaited: requests served before the load finishes see an empty catalog.
    task = asyncio.create_task(load_hotels(get_hotel_catalog()))
    yield
    if not task.done():
        task.cancel()
        with suppress(asyncio.CancelledError):
            await task


app = FastAPI(title=settings.project_name, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(chat.router, prefix=settings.api_prefix)
app.include_router(generation.router, prefix=settings.api_prefix)
app.include_router(hotels.router, prefix=settings.api_prefix)
app.include_router(users.router, prefix=settings.api_prefix)
app.include_router(documents.router, prefix=settings.api_prefix)


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    if isinstance(exc, APIError):
        body = error_content(exc.code, exc.message, exc.details)
    else:
        body = error_content(code_for_status(exc.status_code), str(exc.detail))
    return JSONResponse(status_code=exc.status_code, content=body, headers=getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    problems = exc.errors()
    details = None
    if problems:
        # report the first offending field as a dotted path without the "body" prefix
        field = ".".join(str(part) for part in problems[0].get("loc", ()) if part != "body")
        details = {"field": field, "reason": problems[0].get("msg")}
    err = ValidationError(details=details)
    return JSONResponse(status_code=err.status_code, content=error_content(err.code, err.message, err.details))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled server error: %s", exc)
    err = APIError()
    return JSONResponse(status_code=err.status_code, content=error_content(err.code, err.message))
