"""
Modelo de Configuración (Configuration)
Listas de valores usadas por el formulario de visitas
"""
from sqlalchemy import Column, Integer, String, Boolean, DateTime, CheckConstraint
from sqlalchemy.sql import func
from .database import Base


CONFIG_TYPES = ("visit_purposes", "canna_products", "shop_presentation_options", "competitor_presence")


class Configuration(Base):
    """Modelo de Configuración - Opciones de los selectores del formulario"""
    
    __tablename__ = "configurations"
    
    id = Column(Integer, primary_key=True, index=True)
    config_type = Column(String(50), nullable=False, index=True)
    config_name = Column(String(255), nullable=False)
    config_value = Column(String(255), nullable=False)
    display_order = Column(Integer, default=0, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False, index=True)
    
    __table_args__ = (
        CheckConstraint(
            "config_type IN ('visit_purposes', 'canna_products', 'shop_presentation_options', 'competitor_presence')",
            name="check_config_type"
        ),
    )
    
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
    
    def __repr__(self):
        return f"<Configuration(id={self.id}, type={self.config_type}, value={self.config_value})>"
