"""
Modelos de la base de datos
"""
from .database import Base, get_db, engine, SessionLocal, init_db
from .customer import Customer, SHOP_TYPES
from .visit import ShopVisit
from .configuration import Configuration, CONFIG_TYPES
from .user import User
from .audit_log import AuditLog

__all__ = [
    "Base",
    "get_db",
    "engine",
    "SessionLocal",
    "init_db",
    "Customer",
    "SHOP_TYPES",
    "ShopVisit",
    "Configuration",
    "CONFIG_TYPES",
    "User",
    "AuditLog",
]
