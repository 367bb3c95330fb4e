"""
API routes package.
"""

from .auth_routes import auth_router
from .transaction_routes import categories_router, router as transaction_router

__all__ = ["auth_router", "categories_router", "transaction_router"]
