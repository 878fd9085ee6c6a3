# salon/main.py

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .db import init_db
from .notifications import get_notifier
from .routers import bookings_routes, salon_routes, shifts_routes, staff_routes

logging.basicConfig(
    level=os.getenv("SALON_LOG_LEVEL", "INFO"),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield
    get_notifier().shutdown()


app = FastAPI(title="Salon Booking", lifespan=lifespan)

app.include_router(salon_routes.router)
app.include_router(bookings_routes.router)
app.include_router(staff_routes.router)
app.include_router(shifts_routes.router)


# Every error leaves as {"error": "..."}
@app.exception_handler(StarletteHTTPException)
async def http_error(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def request_validation_error(request: Request, exc: RequestValidationError):
    first = exc.errors()[0] if exc.errors() else {}
    if first.get("type") == "json_invalid":
        return JSONResponse(status_code=400, content={"error": "Invalid request."})
    field = ".".join(str(part) for part in first.get("loc", ())[1:])
    message = f"Invalid value for {field}." if field else "Invalid request."
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(Exception)
async def server_error(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Server error."})


@app.get("/health")
def health_check():
    return {"status": "ok"}
