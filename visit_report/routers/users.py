"""
Router de Usuarios (Users)
Perfil propio y administración de usuarios con registro de auditoría
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
from datetime import datetime, timezone

from ..models import get_db, User, AuditLog
from ..schemas import UserResponse, ProfileUpdate, UserAdminUpdate, PasswordResetRequest, MessageResponse
from ..utils import get_current_user, require_admin, get_password_hash

logger = logging.getLogger(__name__)

router = APIRouter()


def log_user_action(db: Session, actor: dict, target: User, action: str, details: dict) -> None:
    """Agregar una entrada de auditoría (se confirma junto con el cambio)"""
    db.add(AuditLog(
        actor_user_id=actor["user_id"],
        actor_email=actor["email"],
        target_user_id=target.id,
        target_email=target.email,
        action=action,
        details=details
    ))


@router.get("/users", response_model=List[UserResponse])
async def list_users(
    db: Session = Depends(get_db),
    current_user: dict = Depends(require_admin)
):
    """Listar usuarios (solo ADMIN)"""
    return db.query(User).order_by(User.created_at.desc()).all()


@router.get("/users/me", response_model=UserResponse)
async def get_me(
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user)
):
    """Perfil del usuario autenticado"""
    return db.query(User).filter(User.id == current_user["user_id"]).first()


@router.put("/users/profile", response_model=UserResponse)
async def update_profile(
    profile_data: ProfileUpdate,
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user)
):
    """Actualizar el perfil propio"""
    user = db.query(User).filter(User.id == current_user["user_id"]).first()
    
    for field, value in profile_data.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(user, field, value.strip() if isinstance(value, str) else value)
    
    db.commit()
    db.refresh(user)
    return user


@router.put("/users/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: str,
    user_data: UserAdminUpdate,
    db: Session = Depends(get_db),
    current_user: dict = Depends(require_admin)
):
    """Actualizar rol, estado o datos de un usuario (solo ADMIN)"""
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    
    changes = {k: v for k, v in user_data.model_dump(exclude_unset=True).items() if v is not None}
    for field, value in changes.items():
        setattr(user, field, value)
    
    log_user_action(db, current_user, user, "update_user", changes)
    db.commit()
    db.refresh(user)
    
    logger.info(f"Usuario {user.email} actualizado por {current_user['email']}: {changes}")
    return user


@router.post("/users/{user_id}/reset-password", response_model=MessageResponse)
async def reset_password(
    user_id: str,
    reset_data: PasswordResetRequest,
    db: Session = Depends(get_db),
    current_user: dict = Depends(require_admin)
):
    """Restablecer la contraseña de un usuario (solo ADMIN)"""
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    
    user.password_hash = get_password_hash(reset_data.password)
    user.password_reset_required = reset_data.require_change_on_login
    user.last_password_reset = datetime.now(timezone.utc)
    user.password_reset_by = current_user["email"]
    
    log_user_action(
        db, current_user, user, "reset_password",
        {"require_change_on_login": reset_data.require_change_on_login}
    )
    db.commit()
    
    logger.info(f"Contraseña de {user.email} restablecida por {current_user['email']}")
    return MessageResponse(message="Password reset successfully")
