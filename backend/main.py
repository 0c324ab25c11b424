"""FastAPI application entry point for the SproDeal API."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.clock import iso_timestamp, uptime_seconds
from backend.config import get_settings
from backend.errors import register_error_handlers
from backend.logging_config import configure_logging
from backend.models.schemas import ApiInfoResponse, HealthResponse, SelfTestResponse
from backend.routes import auth, complaints, spa

API_VERSION = "1.0.0"

# Advertised by GET /api
PUBLIC_ENDPOINTS = [
    "/api/test",
    "/api/health",
    "/api/login",
    "/api/submit-complaint",
]

ENDPOINT_SUMMARY = [
    ("GET ", "/api", "API info"),
    ("GET ", "/api/test", "Test backend"),
    ("GET ", "/api/health", "Health check"),
    ("POST", "/api/login", "Login endpoint"),
    ("POST", "/api/submit-complaint", "Submit complaint"),
    ("GET ", "/api/complaints", "List complaints"),
]

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    base_url = f"http://localhost:{settings.port}"
    logger.info("Server is running on port %d", settings.port)
    logger.info("Website: %s", base_url)
    logger.info("API: %s/api", base_url)
    for method, path, label in ENDPOINT_SUMMARY:
        logger.info("  %s %s - %s", method, path, label)
    yield


configure_logging()
settings = get_settings()

# Create app
app = FastAPI(
    title="SproDeal API",
    description="Mock login and complaint intake for the SproDeal web front end",
    version=API_VERSION,
    lifespan=lifespan,
)

# Credentials are only allowed with an explicit origin list
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_origins != ["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)


@app.get("/api", response_model=ApiInfoResponse)
async def root():
    """API status endpoint."""
    return ApiInfoResponse(version=API_VERSION, endpoints=PUBLIC_ENDPOINTS)


@app.get("/api/test", response_model=SelfTestResponse)
async def self_test():
    """Connectivity check used by the front end."""
    return SelfTestResponse(timestamp=iso_timestamp())


@app.get("/api/health", response_model=HealthResponse)
async def health():
    """Health check for load balancers."""
    return HealthResponse(uptime=uptime_seconds(), timestamp=iso_timestamp())


# Include routes with /api prefix
app.include_router(auth.router, prefix="/api", tags=["auth"])
app.include_router(complaints.router, prefix="/api", tags=["complaints"])

# Must stay last: matches every remaining GET path
app.include_router(spa.router, tags=["frontend"])


def run() -> None:
    """Serve the app with uvicorn, honouring HOST, PORT and a local .env file."""
    import uvicorn
    from dotenv import load_dotenv

    load_dotenv()
    current = get_settings()
    uvicorn.run(
        "backend.main:app",
        host=current.host,
        port=current.port,
        log_level=current.log_level.lower(),
    )


if __name__ == "__main__":
    run()
