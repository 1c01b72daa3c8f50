"""
Borrador de reporte de visita (VisitDraft)

Estado en memoria del formulario de varias secciones. Los pares de
porcentajes son complementarios: el segundo valor siempre es 100 menos el
primero y nunca se toma de la entrada del usuario.
"""
from datetime import date, datetime
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, Field, field_validator


LIST_FIELDS = (
    "products_discussed",
    "training_topics",
    "support_materials_items",
    "liquid_brands",
    "substrate_brands",
    "german_distributors",
    "visit_photos",
)

FORM_SECTIONS = (
    "Shop Information",
    "Product Visibility",
    "Training & Support",
    "Commercial Outcomes",
    "Photos & Notes",
    "Signature",
)

SECTION_REQUIRED_FIELDS = {
    0: ("customer_id", "shop_name", "shop_type", "visit_purpose"),
}

# primario -> complemento
PERCENTAGE_PAIRS = {
    "organic_percentage": "mineral_percentage",
    "liquids_percentage": "substrates_percentage",
    "german_purchase_percentage": "european_purchase_percentage",
}

# Campos que se copian del cliente al seleccionarlo
CUSTOMER_SNAPSHOT_FIELDS = (
    "shop_name",
    "shop_type",
    "shop_address",
    "zipcode",
    "city",
    "county",
    "contact_person",
    "contact_phone",
    "contact_email",
    "job_title",
    "gps_coordinates",
)


class BrandShare(BaseModel):
    """Participación de una marca o distribuidor"""
    name: str = ""
    percentage: float = 0


class VisitDraft(BaseModel):
    """Estado completo de un reporte de visita en edición"""
    id: Optional[str] = None
    customer_id: Optional[str] = None
    
    # Tienda
    shop_name: Optional[str] = None
    shop_type: Optional[str] = None
    shop_address: Optional[str] = None
    zipcode: Optional[str] = None
    city: Optional[str] = None
    county: Optional[str] = None
    gps_coordinates: Optional[Dict[str, float]] = None
    
    # Contacto
    contact_person: Optional[str] = None
    contact_phone: Optional[str] = None
    contact_email: Optional[str] = None
    job_title: Optional[str] = None
    
    # Visita
    visit_date: Optional[date] = Field(default_factory=date.today)
    visit_duration: Optional[int] = 60
    visit_purpose: Optional[str] = None
    
    # Evaluación
    product_visibility_score: Optional[float] = Field(50, ge=0, le=100)
    competitor_presence: Optional[str] = None
    products_discussed: List[str] = Field(default_factory=list)
    
    # Capacitación y material de apoyo
    training_provided: bool = False
    training_topics: List[str] = Field(default_factory=list)
    support_materials_required: bool = False
    support_materials_items: List[str] = Field(default_factory=list)
    support_materials_other_text: Optional[str] = None
    
    # Ventas y compras
    organic_percentage: Optional[float] = None
    mineral_percentage: Optional[float] = None
    liquids_percentage: Optional[float] = None
    substrates_percentage: Optional[float] = None
    german_purchase_percentage: Optional[float] = None
    european_purchase_percentage: Optional[float] = None
    liquid_brands: List[BrandShare] = Field(default_factory=list)
    substrate_brands: List[BrandShare] = Field(default_factory=list)
    german_distributors: List[BrandShare] = Field(default_factory=list)
    
    # Resultado comercial
    commercial_outcome: Optional[str] = None
    order_value: Optional[float] = 0
    overall_satisfaction: Optional[float] = Field(5, ge=0, le=10)
    
    # Seguimiento
    follow_up_required: bool = False
    follow_up_notes: Optional[str] = None
    notes: Optional[str] = None
    visit_photos: List[str] = Field(default_factory=list)
    
    # Firma
    signature: Optional[str] = None
    signature_signer_name: Optional[str] = None
    signature_date: Optional[datetime] = None
    
    # Derivados y ciclo de vida
    calculated_score: Optional[float] = None
    priority_level: Optional[str] = None
    is_draft: bool = True

    @field_validator(*LIST_FIELDS, mode="before")
    @classmethod
    def none_as_empty_list(cls, v):
        """Los registros guardados pueden traer null en las listas"""
        return [] if v is None else v

    class Config:
        extra = "ignore"


def with_complementary_percentages(partial: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Completar los pares de porcentajes de una actualización parcial
    
    Los complementos enviados directamente se descartan; si el primario viene
    en la actualización, el complemento se recalcula (sin acotar a 0-100).
    """
    updates = dict(partial)
    for primary, complement in PERCENTAGE_PAIRS.items():
        updates.pop(complement, None)
        if primary in updates:
            updates[complement] = 100 - (updates[primary] or 0)
    return updates


def merge_fields(draft: VisitDraft, partial: Mapping[str, Any]) -> VisitDraft:
    """Nuevo borrador con la actualización aplicada (gana la última escritura por campo)"""
    updates = with_complementary_percentages(partial)
    return VisitDraft.model_validate({**draft.model_dump(), **updates})


def customer_snapshot(customer: Mapping[str, Any]) -> Dict[str, Any]:
    """Copia de los datos de tienda y contacto de un cliente"""
    snapshot = {"customer_id": str(customer["id"])}
    for field in CUSTOMER_SNAPSHOT_FIELDS:
        snapshot[field] = customer.get(field)
    return snapshot


def required_fields_for_section(section_index: int) -> tuple:
    return SECTION_REQUIRED_FIELDS.get(section_index, ())
