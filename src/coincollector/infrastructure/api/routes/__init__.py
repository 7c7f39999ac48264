"""API Routes for CoinCollector."""

from coincollector.infrastructure.api.routes.coins_router import router as coins_router
from coincollector.infrastructure.api.routes.collections_router import router as collections_router
from coincollector.infrastructure.api.routes.groups_router import router as groups_router
from coincollector.infrastructure.api.routes.meta_router import router as meta_router
from coincollector.infrastructure.api.routes.users_router import router as users_router

__all__ = [
    "coins_router",
    "collections_router",
    "groups_router",
    "meta_router",
    "users_router",
]
