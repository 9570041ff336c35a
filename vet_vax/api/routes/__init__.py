"""
VetVax — API Routes

Експорт всіх роутерів.
"""

from .health import router as health_router
from .animals import router as animals_router
from .admin import router as admin_router

__all__ = [
    'health_router',
    'animals_router',
    'admin_router',
]
