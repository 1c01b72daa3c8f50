"""
Utilidades del servicio
"""
from .auth import get_current_user, require_admin, require_role
from .security import get_password_hash, verify_password

__all__ = [
    "get_current_user",
    "require_admin",
    "require_role",
    "get_password_hash",
    "verify_password"
]
