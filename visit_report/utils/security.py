"""
Hash de contraseñas
"""
from passlib.context import CryptContext

from ..config import settings


pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.PASSWORD_HASH_ROUNDS,
)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verificar una contraseña contra su hash; un hash inválido no coincide"""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        return False
