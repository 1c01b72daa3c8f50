"""
Schemas de Visita (ShopVisit)
"""
from pydantic import BaseModel, Field, field_validator
from typing import Optional, List, Dict, Literal
from datetime import date, datetime

from ..lifecycle.draft import LIST_FIELDS


ShopType = Literal["growshop", "garden_center", "nursery", "hydroponics_store", "other"]
CommercialOutcome = Literal[
    "new_order", "order_commitment", "price_negotiation",
    "complaint_resolved", "information_only", "no_outcome"
]
PriorityLevel = Literal["low", "medium", "high"]


class BrandShareSchema(BaseModel):
    """Participación de una marca o distribuidor"""
    name: str = Field("", max_length=255)
    percentage: float = Field(0, description="Porcentaje (no se acota)")


class VisitFields(BaseModel):
    """Campos editables de un reporte de visita"""
    # Tienda
    shop_name: Optional[str] = Field(None, max_length=255, description="Nombre de la tienda")
    shop_type: Optional[ShopType] = Field(None, description="Tipo de tienda")
    shop_address: Optional[str] = None
    zipcode: Optional[str] = Field(None, max_length=20)
    city: Optional[str] = Field(None, max_length=120)
    county: Optional[str] = Field(None, max_length=120)
    gps_coordinates: Optional[Dict[str, float]] = None

    # Contacto
    contact_person: Optional[str] = Field(None, max_length=255)
    contact_phone: Optional[str] = Field(None, max_length=50)
    contact_email: Optional[str] = Field(None, max_length=255)
    job_title: Optional[str] = Field(None, max_length=120)

    # Visita
    visit_date: Optional[date] = Field(None, description="Fecha de la visita")
    visit_duration: Optional[int] = Field(None, ge=0, description="Duración en minutos")
    visit_purpose: Optional[str] = Field(None, max_length=120, description="Propósito (ver configuración visit_purposes)")

    # Evaluación
    product_visibility_score: Optional[float] = Field(None, ge=0, le=100)
    competitor_presence: Optional[str] = Field(None, max_length=120)
    products_discussed: Optional[List[str]] = None

    # Capacitación y material de apoyo
    training_provided: Optional[bool] = None
    training_topics: Optional[List[str]] = None
    support_materials_required: Optional[bool] = None
    support_materials_items: Optional[List[str]] = None
    support_materials_other_text: Optional[str] = None

    # Ventas y compras
    organic_percentage: Optional[float] = None
    mineral_percentage: Optional[float] = None
    liquids_percentage: Optional[float] = None
    substrates_percentage: Optional[float] = None
    german_purchase_percentage: Optional[float] = None
    european_purchase_percentage: Optional[float] = None
    liquid_brands: Optional[List[BrandShareSchema]] = None
    substrate_brands: Optional[List[BrandShareSchema]] = None
    german_distributors: Optional[List[BrandShareSchema]] = None

    # Resultado comercial
    commercial_outcome: Optional[CommercialOutcome] = None
    order_value: Optional[float] = Field(None, ge=0)
    overall_satisfaction: Optional[float] = Field(None, ge=0, le=10)

    # Seguimiento
    follow_up_required: Optional[bool] = None
    follow_up_notes: Optional[str] = None
    notes: Optional[str] = None
    visit_photos: Optional[List[str]] = None

    # Firma
    signature: Optional[str] = Field(None, description="Imagen de la firma (data URL)")
    signature_signer_name: Optional[str] = Field(None, max_length=255)
    signature_date: Optional[datetime] = None

    @field_validator("shop_type", "commercial_outcome", mode="before")
    @classmethod
    def empty_as_none(cls, v):
        """El formulario envía cadena vacía cuando no se ha elegido opción"""
        return None if v == "" else v


class VisitCreate(VisitFields):
    """Schema para crear un reporte (borrador o final)"""
    customer_id: str = Field(..., min_length=1, max_length=36, description="ID del cliente")
    is_draft: bool = Field(False, description="True mientras el reporte está en edición")

    class Config:
        json_schema_extra = {
            "example": {
                "customer_id": "0b7d2a4e-8a51-4a7f-9b9e-5a1f3c2e7d10",
                "shop_name": "Acme Grow",
                "shop_type": "growshop",
                "visit_date": "2024-01-01",
                "visit_purpose": "routine_check",
                "product_visibility_score": 50,
                "commercial_outcome": "information_only",
                "overall_satisfaction": 6,
                "is_draft": True
            }
        }


class VisitUpdate(VisitFields):
    """Schema para actualizar un borrador (solo los campos enviados)"""
    customer_id: Optional[str] = Field(None, min_length=1, max_length=36)
    is_draft: Optional[bool] = None

    class Config:
        json_schema_extra = {
            "example": {
                "follow_up_required": True,
                "follow_up_notes": "Enviar catálogo de sustratos",
                "is_draft": True
            }
        }


class VisitResponse(VisitFields):
    """Schema para respuesta de reporte de visita"""
    id: str = Field(..., description="ID del reporte")
    customer_id: str = Field(..., description="ID del cliente")
    products_discussed: List[str] = []
    training_topics: List[str] = []
    support_materials_items: List[str] = []
    liquid_brands: List[BrandShareSchema] = []
    substrate_brands: List[BrandShareSchema] = []
    german_distributors: List[BrandShareSchema] = []
    visit_photos: List[str] = []
    calculated_score: Optional[float] = Field(None, description="Puntaje 0-100 (solo reportes finales)")
    priority_level: Optional[PriorityLevel] = Field(None, description="Prioridad de seguimiento")
    is_draft: bool = Field(..., description="True mientras el reporte está en edición")
    draft_saved_at: Optional[datetime] = None
    created_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator(*LIST_FIELDS, mode="before")
    @classmethod
    def none_as_empty_list(cls, v):
        return [] if v is None else v

    class Config:
        from_attributes = True


class VisitDetailResponse(VisitResponse):
    """Schema para respuesta detallada con el nombre actual de la tienda del cliente"""
    customer_shop_name: Optional[str] = Field(None, description="Nombre actual del cliente")

    class Config:
        from_attributes = True


class VisitListResponse(BaseModel):
    """Schema para lista de visitas con filtros"""
    visits: List[VisitResponse] = Field(..., description="Lista de reportes")
    total: int = Field(..., description="Total de reportes que cumplen los filtros")
    drafts: int = Field(..., description="Cantidad de borradores")
    finalized: int = Field(..., description="Cantidad de reportes finalizados")

    class Config:
        from_attributes = True
