"""
Utilidades de autenticación JWT
Valida el token Bearer y resuelve el usuario que hace la petición
"""
from typing import List

from jose import JWTError, jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from ..config import settings
from ..models import get_db, User

# HTTP Bearer scheme para el header Authorization
http_bearer = HTTPBearer(auto_error=False)


def decode_token(token: str) -> dict:
    """
    Decodifica y valida un token JWT
    
    Args:
        token: Token JWT a decodificar
        
    Returns:
        dict: Datos extraídos del token (email, user_id)
        
    Raises:
        HTTPException: Si el token es inválido
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid or expired token",
        headers={"WWW-Authenticate": "Bearer"},
    )
    
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        raise credentials_exception
    
    user_id = payload.get("user_id")
    if user_id is None:
        raise credentials_exception
    
    return {
        "email": payload.get("sub"),
        "user_id": str(user_id)
    }


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(http_bearer),
    db: Session = Depends(get_db)
) -> dict:
    """
    Obtiene el usuario actual desde el token JWT
    
    El usuario debe existir y estar activo; un token de un usuario dado de baja
    deja de servir aunque no haya expirado.
    
    Returns:
        dict: Información del usuario (user_id, email, full_name, role)
        
    Raises:
        HTTPException: Si el token es inválido, no está presente o el usuario no está activo
    """
    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access token required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    
    token_data = decode_token(credentials.credentials)
    
    user = db.query(User).filter(
        User.id == token_data["user_id"],
        User.status == "active"
    ).first()
    
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    
    return {
        "user_id": user.id,
        "email": user.email,
        "full_name": user.full_name,
        "role": user.role
    }


def require_role(roles: List[str]):
    """
    Dependencia que exige uno de los roles indicados
    
    Args:
        roles: Roles permitidos (user, manager, admin)
    """
    async def checker(current_user: dict = Depends(get_current_user)) -> dict:
        if current_user.get("role") not in roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient permissions"
            )
        return current_user
    
    return checker


require_admin = require_role(["admin"])
