"""
Router de Configuración (Configurations)
Opciones de los selectores del formulario; la edición es solo para administradores
"""
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from ..models import get_db, Configuration
from ..schemas import ConfigurationCreate, ConfigurationUpdate, ConfigurationResponse, MessageResponse
from ..schemas.configuration import ConfigType
from ..utils import get_current_user, require_admin

router = APIRouter()


@router.get("/configurations", response_model=List[ConfigurationResponse])
async def list_configurations(
    config_type: Optional[ConfigType] = Query(None, description="Filtrar por tipo de lista"),
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user)
):
    """Listar opciones activas ordenadas por tipo y orden de visualización"""
    query = db.query(Configuration).filter(Configuration.is_active == True)
    
    if config_type:
        query = query.filter(Configuration.config_type == config_type)
    
    return query.order_by(Configuration.config_type, Configuration.display_order.asc()).all()


@router.post("/configurations", response_model=ConfigurationResponse, status_code=status.HTTP_201_CREATED)
async def create_configuration(
    config_data: ConfigurationCreate,
    db: Session = Depends(get_db),
    current_user: dict = Depends(require_admin)
):
    """Crear una opción (solo ADMIN)"""
    data = config_data.model_dump()
    data["config_name"] = data["config_name"].strip()
    data["config_value"] = data["config_value"].strip()
    
    new_config = Configuration(**data)
    db.add(new_config)
    db.commit()
    db.refresh(new_config)
    return new_config


@router.put("/configurations/{config_id}", response_model=ConfigurationResponse)
async def update_configuration(
    config_id: int,
    config_data: ConfigurationUpdate,
    db: Session = Depends(get_db),
    current_user: dict = Depends(require_admin)
):
    """Actualizar una opción (solo ADMIN)"""
    config = db.query(Configuration).filter(Configuration.id == config_id).first()
    if not config:
        raise HTTPException(404, "Configuration not found")
    
    for field, value in config_data.model_dump(exclude_unset=True).items():
        setattr(config, field, value)
    
    db.commit()
    db.refresh(config)
    return config


@router.delete("/configurations/{config_id}", response_model=MessageResponse)
async def delete_configuration(
    config_id: int,
    db: Session = Depends(get_db),
    current_user: dict = Depends(require_admin)
):
    """Eliminar una opción (solo ADMIN)"""
    config = db.query(Configuration).filter(Configuration.id == config_id).first()
    if not config:
        raise HTTPException(404, "Configuration not found")
    
    db.delete(config)
    db.commit()
    return MessageResponse(message="Configuration deleted successfully")
