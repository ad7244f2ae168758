"""API v1 routers.

Resources:
    /api/v1/auth          - Magic link authentication and sessions
    /api/v1/users         - User management and LGPD data subject rights
    /api/v1/emociograma   - Emotional check-ins and manager alerts
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.routers.api.v1.auth import router as auth_router
from src.presentation.routers.api.v1.emociograma import router as emociograma_router
from src.presentation.routers.api.v1.users import router as users_router

v1_router = APIRouter(prefix=settings.api_v1_prefix)
v1_router.include_router(auth_router)
v1_router.include_router(users_router)
v1_router.include_router(emociograma_router)

__all__ = [
    "v1_router",
]
