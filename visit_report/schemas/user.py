"""
Schemas de Usuario (User)
"""
from pydantic import BaseModel, Field
from typing import Optional, Literal
from datetime import datetime


class UserResponse(BaseModel):
    """Schema para respuesta de usuario (nunca incluye el hash de la contraseña)"""
    id: str
    email: str
    full_name: Optional[str] = None
    role: str
    status: str
    department: Optional[str] = None
    territory: Optional[str] = None
    phone: Optional[str] = None
    password_reset_required: bool = False
    last_login: Optional[datetime] = None
    created_at: Optional[datetime] = None
    
    class Config:
        from_attributes = True


class ProfileUpdate(BaseModel):
    """Schema para que el usuario actualice su propio perfil"""
    full_name: Optional[str] = Field(None, min_length=2, max_length=255)
    department: Optional[str] = Field(None, max_length=120)
    territory: Optional[str] = Field(None, max_length=120)
    phone: Optional[str] = Field(None, max_length=50)


class UserAdminUpdate(BaseModel):
    """Schema para que un administrador actualice un usuario"""
    role: Optional[Literal["user", "manager", "admin"]] = None
    status: Optional[Literal["active", "inactive"]] = None
    department: Optional[str] = Field(None, max_length=120)
    territory: Optional[str] = Field(None, max_length=120)
    phone: Optional[str] = Field(None, max_length=50)
    
    class Config:
        json_schema_extra = {
            "example": {
                "role": "manager",
                "territory": "North"
            }
        }


class PasswordResetRequest(BaseModel):
    """Schema para restablecer la contraseña de un usuario"""
    password: str = Field(..., min_length=8, description="Nueva contraseña (mínimo 8 caracteres)")
    require_change_on_login: bool = Field(True, description="Obligar a cambiarla en el próximo ingreso")


class MessageResponse(BaseModel):
    message: str
