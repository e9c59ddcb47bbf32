"""
API Router Aggregator.

Combines all resource routers into a single router for the main app.
"""

from fastapi import APIRouter

from freelancer_platform.api.v1 import admin, auth, freelancers, reports, settings

api_router = APIRouter()

# Include all routers with their prefixes and tags
api_router.include_router(
    auth.router,
    prefix="/auth",
    tags=["Authentication"],
)

api_router.include_router(
    freelancers.router,
    prefix="/freelancers",
    tags=["Freelancers"],
)

api_router.include_router(
    reports.router,
    prefix="/reports",
    tags=["Reports"],
)

api_router.include_router(
    settings.router,
    prefix="/settings",
    tags=["Settings"],
)

api_router.include_router(
    admin.router,
    prefix="/admin",
    tags=["Admin"],
)


@api_router.get("/health", tags=["Health"])
async def api_health():
    return {"status": "ok"}
