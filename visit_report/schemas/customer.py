"""
Schemas de Cliente (Customer)
"""
from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional, Dict, Literal
from datetime import datetime

from .visit import ShopType


class CustomerBase(BaseModel):
    """Schema base de Cliente"""
    shop_name: str = Field(..., min_length=2, max_length=255, description="Nombre de la tienda")
    shop_type: ShopType = Field(..., description="Tipo de tienda")
    shop_address: Optional[str] = Field(None, description="Dirección")
    zipcode: Optional[str] = Field(None, max_length=20)
    city: Optional[str] = Field(None, max_length=120)
    county: Optional[str] = Field(None, max_length=120)
    region: Optional[str] = Field(None, max_length=120)
    gps_coordinates: Optional[Dict[str, float]] = Field(None, description="Coordenadas {lat, lng}")
    contact_person: Optional[str] = Field(None, max_length=255)
    contact_phone: Optional[str] = Field(None, max_length=50)
    contact_email: Optional[EmailStr] = None
    job_title: Optional[str] = Field(None, max_length=120)
    
    @field_validator('shop_name')
    @classmethod
    def strip_shop_name(cls, v):
        v = v.strip()
        if len(v) < 2:
            raise ValueError('El nombre de la tienda debe tener al menos 2 caracteres')
        return v


class CustomerCreate(CustomerBase):
    """Schema para crear cliente"""
    status: Literal["active", "inactive"] = "active"
    
    class Config:
        json_schema_extra = {
            "example": {
                "shop_name": "Acme Grow",
                "shop_type": "growshop",
                "shop_address": "Hauptstraße 12",
                "zipcode": "10115",
                "city": "Berlin",
                "county": "Berlin",
                "contact_person": "Anna Schmidt",
                "contact_phone": "+49 30 1234567",
                "contact_email": "anna@acmegrow.de",
                "job_title": "Store Manager",
                "region": "North"
            }
        }


class CustomerUpdate(BaseModel):
    """Schema para actualizar cliente"""
    shop_name: Optional[str] = Field(None, min_length=2, max_length=255)
    shop_type: Optional[ShopType] = None
    shop_address: Optional[str] = None
    zipcode: Optional[str] = Field(None, max_length=20)
    city: Optional[str] = Field(None, max_length=120)
    county: Optional[str] = Field(None, max_length=120)
    region: Optional[str] = Field(None, max_length=120)
    gps_coordinates: Optional[Dict[str, float]] = None
    contact_person: Optional[str] = Field(None, max_length=255)
    contact_phone: Optional[str] = Field(None, max_length=50)
    contact_email: Optional[EmailStr] = None
    job_title: Optional[str] = Field(None, max_length=120)
    status: Optional[Literal["active", "inactive"]] = None


class CustomerResponse(BaseModel):
    """Schema para respuesta de cliente"""
    id: str
    shop_name: str
    shop_type: str
    shop_address: Optional[str] = None
    zipcode: Optional[str] = None
    city: Optional[str] = None
    county: Optional[str] = None
    region: Optional[str] = None
    gps_coordinates: Optional[Dict[str, float]] = None
    contact_person: Optional[str] = None
    contact_phone: Optional[str] = None
    contact_email: Optional[str] = None
    job_title: Optional[str] = None
    status: str
    created_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    
    class Config:
        from_attributes = True
