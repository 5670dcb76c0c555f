"""API routes mounted under settings.API_PREFIX."""

from fastapi import APIRouter

from app.api import health, parts, planes, users

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(users.router, prefix="/users", tags=["users"])
# Part and alert routes first so /planes/parts and /planes/maintenance are not read as a plane id.
router.include_router(parts.router, prefix="/planes", tags=["parts"])
router.include_router(planes.router, prefix="/planes", tags=["planes"])
