"""
Modelo de Cliente (Customer)
Tiendas visitadas por el equipo comercial
"""
import uuid

from sqlalchemy import Column, String, DateTime, JSON, CheckConstraint
from sqlalchemy.sql import func
from .database import Base


SHOP_TYPES = ("growshop", "garden_center", "nursery", "hydroponics_store", "other")


class Customer(Base):
    """
    Modelo de Cliente - Representa una tienda con sus datos de contacto
    Los reportes de visita copian estos datos al momento de seleccionar el cliente
    """
    
    __tablename__ = "customers"
    
    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    shop_name = Column(String(255), nullable=False, index=True)
    shop_type = Column(String(30), nullable=False, index=True)
    shop_address = Column(String, nullable=True)
    zipcode = Column(String(20), nullable=True)
    city = Column(String(120), nullable=True)
    county = Column(String(120), nullable=True)
    region = Column(String(120), nullable=True)
    gps_coordinates = Column(JSON, nullable=True)
    
    # Contacto
    contact_person = Column(String(255), nullable=True)
    contact_phone = Column(String(50), nullable=True)
    contact_email = Column(String(255), nullable=True)
    job_title = Column(String(120), nullable=True)
    
    status = Column(String(20), default="active", nullable=False, index=True)
    
    __table_args__ = (
        CheckConstraint("status IN ('active', 'inactive')", name="check_customer_status"),
    )
    
    # Usuario que registró el cliente (sin FK, igual que created_by en visitas)
    created_by = Column(String(36), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
    
    def __repr__(self):
        return f"<Customer(id={self.id}, shop_name={self.shop_name}, shop_type={self.shop_type})>"
