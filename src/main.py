"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.api import auth, orders, products
from src.config import get_settings
from src.database import Database

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the storage client on startup and dispose of it on shutdown."""
    app.state.db = Database(settings.database_url)
    logger.info(f"Webshop API starting ({settings.environment})")
    yield
    app.state.db.close()
    logger.info("Webshop API stopped")


app = FastAPI(
    title="Webshop API",
    description="Product catalog and order ledger with token-gated writes",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware for development
if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000", "http://localhost:5173"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every inbound request."""
    logger.info(f"Received {request.method} request at '{request.url.path}'")
    return await call_next(request)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Answer malformed input with 400 instead of FastAPI's default 422."""
    logger.warning(f"Rejected {request.method} '{request.url.path}': invalid input")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


# Register routers (orders first: /products/orders must win over /products/{id})
app.include_router(auth.router)
app.include_router(orders.router)
app.include_router(products.router)


@app.get("/")
async def root():
    """Status endpoint."""
    return {"status": "Webshop API is online."}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("src.main:app", host="0.0.0.0", port=settings.port)  # noqa: S104
