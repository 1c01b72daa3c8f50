"""
Modelo de Usuario (User)
"""
import uuid

from sqlalchemy import Column, String, Boolean, DateTime, CheckConstraint
from sqlalchemy.sql import func
from .database import Base


class User(Base):
    """Modelo de Usuario - Personal comercial y administradores"""
    
    __tablename__ = "users"
    
    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    email = Column(String(255), unique=True, nullable=False, index=True)
    full_name = Column(String(255), nullable=True)
    password_hash = Column(String(255), nullable=True)
    role = Column(String(20), default="user", nullable=False)
    status = Column(String(20), default="active", nullable=False, index=True)
    department = Column(String(120), nullable=True)
    territory = Column(String(120), nullable=True)
    phone = Column(String(50), nullable=True)
    
    __table_args__ = (
        CheckConstraint("role IN ('user', 'manager', 'admin')", name="check_user_role"),
        CheckConstraint("status IN ('active', 'inactive')", name="check_user_status"),
    )
    
    # Restablecimiento de contraseña
    password_reset_required = Column(Boolean, default=False, nullable=False)
    last_password_reset = Column(DateTime(timezone=True), nullable=True)
    password_reset_by = Column(String(255), nullable=True)
    
    last_login = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
    
    def __repr__(self):
        return f"<User(id={self.id}, email={self.email}, role={self.role}, status={self.status})>"
