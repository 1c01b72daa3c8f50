"""
Routers de la API
"""
from .visits import router as visits_router
from .customers import router as customers_router
from .configurations import router as configurations_router
from .users import router as users_router

__all__ = [
    "visits_router",
    "customers_router",
    "configurations_router",
    "users_router"
]
