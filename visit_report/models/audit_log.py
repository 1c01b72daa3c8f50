"""
Modelo de Auditoría (AuditLog)
Registra las acciones administrativas sobre usuarios
"""
from sqlalchemy import Column, Integer, String, DateTime, JSON
from sqlalchemy.sql import func
from .database import Base


class AuditLog(Base):
    """Modelo de Auditoría - Quién hizo qué sobre qué usuario"""
    
    __tablename__ = "audit_logs"
    
    id = Column(Integer, primary_key=True, index=True)
    # Referencias a usuarios sin FK: el log debe sobrevivir a la baja del usuario
    actor_user_id = Column(String(36), nullable=True, index=True)
    actor_email = Column(String(255), nullable=True)
    target_user_id = Column(String(36), nullable=True, index=True)
    target_email = Column(String(255), nullable=True)
    action = Column(String(50), nullable=False)
    details = Column(JSON, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    
    def __repr__(self):
        return f"<AuditLog(id={self.id}, action={self.action}, target={self.target_email})>"
