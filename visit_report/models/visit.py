"""
Modelo de Visita (ShopVisit)
Reporte de una visita comercial a una tienda, en borrador o finalizado
"""
import uuid

from sqlalchemy import (
    Column, String, Boolean, Integer, Float, Date, DateTime, Text, JSON, ForeignKey, CheckConstraint
)
from sqlalchemy.sql import func
from .database import Base


class ShopVisit(Base):
    """
    Modelo de Visita - Representa un reporte de visita
    
    Mientras is_draft es True el reporte se puede editar y eliminar.
    Un reporte finalizado (is_draft False) siempre tiene calculated_score y priority_level.
    """
    
    __tablename__ = "shop_visits"
    
    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    customer_id = Column(String(36), ForeignKey("customers.id"), nullable=False, index=True)
    
    # Copia de los datos de la tienda al momento de la visita
    shop_name = Column(String(255), nullable=True)
    shop_type = Column(String(30), nullable=True, index=True)
    shop_address = Column(String, nullable=True)
    zipcode = Column(String(20), nullable=True)
    city = Column(String(120), nullable=True)
    county = Column(String(120), nullable=True)
    gps_coordinates = Column(JSON, nullable=True)
    
    # Copia de los datos de contacto
    contact_person = Column(String(255), nullable=True)
    contact_phone = Column(String(50), nullable=True)
    contact_email = Column(String(255), nullable=True)
    job_title = Column(String(120), nullable=True)
    
    # Datos de la visita
    visit_date = Column(Date, nullable=True, index=True)
    visit_duration = Column(Integer, nullable=True)
    visit_purpose = Column(String(120), nullable=True)
    
    # Evaluación
    product_visibility_score = Column(Float, nullable=True)
    competitor_presence = Column(String(120), nullable=True)
    products_discussed = Column(JSON, default=list)
    
    # Capacitación y material de apoyo
    training_provided = Column(Boolean, default=False)
    training_topics = Column(JSON, default=list)
    support_materials_required = Column(Boolean, default=False)
    support_materials_items = Column(JSON, default=list)
    support_materials_other_text = Column(Text, nullable=True)
    
    # Distribución de ventas y compras
    organic_percentage = Column(Float, nullable=True)
    mineral_percentage = Column(Float, nullable=True)
    liquids_percentage = Column(Float, nullable=True)
    substrates_percentage = Column(Float, nullable=True)
    german_purchase_percentage = Column(Float, nullable=True)
    european_purchase_percentage = Column(Float, nullable=True)
    liquid_brands = Column(JSON, default=list)
    substrate_brands = Column(JSON, default=list)
    german_distributors = Column(JSON, default=list)
    
    # Resultado comercial
    commercial_outcome = Column(String(30), nullable=True)
    order_value = Column(Float, nullable=True)
    overall_satisfaction = Column(Float, nullable=True)
    
    # Seguimiento y notas
    follow_up_required = Column(Boolean, default=False, index=True)
    follow_up_notes = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)
    visit_photos = Column(JSON, default=list)
    
    # Firma
    signature = Column(Text, nullable=True)
    signature_signer_name = Column(String(255), nullable=True)
    signature_date = Column(DateTime(timezone=True), nullable=True)
    
    # Campos derivados (solo en reportes finalizados)
    calculated_score = Column(Float, nullable=True)
    priority_level = Column(String(10), nullable=True, index=True)
    
    # Ciclo de vida
    is_draft = Column(Boolean, default=True, nullable=False, index=True)
    draft_saved_at = Column(DateTime(timezone=True), nullable=True)
    
    __table_args__ = (
        CheckConstraint(
            "priority_level IS NULL OR priority_level IN ('low', 'medium', 'high')",
            name="check_visit_priority"
        ),
    )
    
    # Auditoría
    created_by = Column(String(36), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
    
    def __repr__(self):
        return f"<ShopVisit(id={self.id}, customer={self.customer_id}, draft={self.is_draft}, priority={self.priority_level})>"
