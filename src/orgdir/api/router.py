"""Master API router mounted at /api/v1."""

from fastapi import APIRouter

from orgdir.api.routes import health, organizations, users

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(health.router, tags=["Health"])
api_router.include_router(organizations.router)
api_router.include_router(users.router)
