# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Salon API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.exceptions import (
    SalonException,
    salon_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from app.routers import health, clients, appointments, catalog, dashboard
from app.auth import routes as auth_routes

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    The Supabase client is created lazily on first use, so startup only logs.
    """
    logger.info(f"Starting Salon API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")

    yield

    logger.info("Shutting down Salon API")


# Create FastAPI application
app = FastAPI(
    title="API Salão de Beleza",
    description="""
## Salon back-office API

CRUD over clients, services and appointments, a dashboard with the day's
numbers, and a password check for the admin account.

### Conventions

- Success bodies are the row/list itself or `{message, <entity>}`
- Error bodies are `{error, code}` with status 400, 401, 404, 409 or 500
- Booking a date/time that is already taken returns **409**
""",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "Clientes", "description": "Client records and search"},
        {"name": "Agendamentos", "description": "Appointments and the daily agenda"},
        {"name": "Serviços", "description": "Service catalog"},
        {"name": "Dashboard", "description": "Read-only daily aggregates"},
        {"name": "Auth", "description": "Login and admin account"},
        {"name": "Health", "description": "API health and readiness checks"},
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - allows cross-origin requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

app.add_exception_handler(SalonException, salon_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)


# =============================================================================
# Routers
# =============================================================================

# Health check endpoints
app.include_router(health.router, tags=["Health"])

# Client endpoints
app.include_router(
    clients.router,
    prefix="/clientes",
    tags=["Clientes"]
)

# Appointment endpoints
app.include_router(
    appointments.router,
    prefix="/agendamentos",
    tags=["Agendamentos"]
)

# Service catalog endpoints
app.include_router(
    catalog.router,
    prefix="/services",
    tags=["Serviços"]
)

# Dashboard endpoints
app.include_router(
    dashboard.router,
    prefix="/dashboard",
    tags=["Dashboard"]
)

# Login and admin account endpoints
app.include_router(auth_routes.router, tags=["Auth"])


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "nome": "API Salão de Beleza",
        "status": "online",
        "version": "1.0.0",
        "docs": "/docs",
        "endpoints": {
            "clientes": "/clientes",
            "agendamentos": "/agendamentos",
            "servicos": "/services",
            "dashboard": "/dashboard",
            "login": "/login",
            "health": "/health",
        },
    }
