"""External-facing routers (non-versioned API endpoints).

Routes that are not part of the versioned API contract (root, health).
"""

from src.presentation.routers.system import system_router

__all__ = ["system_router"]
