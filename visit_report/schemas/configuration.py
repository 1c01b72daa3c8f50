"""
Schemas de Configuración (Configuration)
"""
from pydantic import BaseModel, Field
from typing import Optional, Literal
from datetime import datetime


ConfigType = Literal["visit_purposes", "canna_products", "shop_presentation_options", "competitor_presence"]


class ConfigurationCreate(BaseModel):
    """Schema para crear una opción de configuración"""
    config_type: ConfigType = Field(..., description="Lista a la que pertenece la opción")
    config_name: str = Field(..., min_length=1, max_length=255, description="Texto visible")
    config_value: str = Field(..., min_length=1, max_length=255, description="Valor guardado en el reporte")
    display_order: int = Field(0, description="Orden dentro de la lista")
    is_active: bool = True
    
    class Config:
        json_schema_extra = {
            "example": {
                "config_type": "visit_purposes",
                "config_name": "Routine check",
                "config_value": "routine_check",
                "display_order": 1
            }
        }


class ConfigurationUpdate(BaseModel):
    """Schema para actualizar una opción de configuración"""
    config_type: Optional[ConfigType] = None
    config_name: Optional[str] = Field(None, min_length=1, max_length=255)
    config_value: Optional[str] = Field(None, min_length=1, max_length=255)
    display_order: Optional[int] = None
    is_active: Optional[bool] = None


class ConfigurationResponse(BaseModel):
    """Schema para respuesta de configuración"""
    id: int
    config_type: str
    config_name: str
    config_value: str
    display_order: int
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    
    class Config:
        from_attributes = True
