from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vehicle_inventory.entrypoints.http.config import cors_allow_origins
from vehicle_inventory.entrypoints.http.exception_handlers import register_exception_handlers
from vehicle_inventory.entrypoints.http.routes.health import router as health_router
from vehicle_inventory.entrypoints.http.routes.optionals import router as optionals_router
from vehicle_inventory.entrypoints.http.routes.portal_packages import (
    router as portal_packages_router,
)
from vehicle_inventory.entrypoints.http.routes.vehicles import router as vehicles_router


def build_app() -> FastAPI:
    app = FastAPI(
        title="Vehicle Inventory API",
        description="""
        Inventory backend for vehicle listings.

        ## Features
        - Register, update and delete vehicles with photos and optional equipment
        - Search vehicles with combined filters
        - Manage per-portal advertising packages

        ## Authentication
        No authentication required.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        Validation errors and plate conflicts return 400, missing resources 404.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_allow_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(vehicles_router, prefix="/v1")
    app.include_router(optionals_router, prefix="/v1")
    app.include_router(portal_packages_router, prefix="/v1")

    return app


app = build_app()
