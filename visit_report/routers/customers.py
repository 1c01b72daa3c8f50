"""
Router de Clientes (Customers)
"""
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from sqlalchemy import or_
from typing import List, Optional

from ..models import get_db, Customer, ShopVisit
from ..schemas import CustomerCreate, CustomerUpdate, CustomerResponse, MessageResponse, ShopType
from ..utils import get_current_user

router = APIRouter()


@router.get("/customers", response_model=List[CustomerResponse])
async def list_customers(
    search: Optional[str] = Query(None, description="Buscar por nombre de tienda o ciudad"),
    shop_type: Optional[ShopType] = Query(None),
    include_inactive: bool = Query(False, description="Incluir clientes inactivos"),
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user)
):
    """Listar clientes ordenados por nombre de tienda"""
    query = db.query(Customer)
    
    if not include_inactive:
        query = query.filter(Customer.status == "active")
    
    if shop_type:
        query = query.filter(Customer.shop_type == shop_type)
    
    if search:
        pattern = f"%{search}%"
        query = query.filter(
            or_(Customer.shop_name.ilike(pattern), Customer.city.ilike(pattern))
        )
    
    return query.order_by(Customer.shop_name.asc()).all()


@router.get("/customers/{customer_id}", response_model=CustomerResponse)
async def get_customer(
    customer_id: str,
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user)
):
    """Obtener cliente por ID"""
    customer = db.query(Customer).filter(Customer.id == customer_id).first()
    if not customer:
        raise HTTPException(404, "Customer not found")
    return customer


@router.post("/customers", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
async def create_customer(
    customer_data: CustomerCreate,
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user)
):
    """Registrar un cliente"""
    new_customer = Customer(**customer_data.model_dump(), created_by=current_user["user_id"])
    db.add(new_customer)
    db.commit()
    db.refresh(new_customer)
    return new_customer


@router.put("/customers/{customer_id}", response_model=CustomerResponse)
async def update_customer(
    customer_id: str,
    customer_data: CustomerUpdate,
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user)
):
    """
    Actualizar cliente
    Los reportes ya creados conservan la copia de los datos anteriores
    """
    customer = db.query(Customer).filter(Customer.id == customer_id).first()
    if not customer:
        raise HTTPException(404, "Customer not found")
    
    for field, value in customer_data.model_dump(exclude_unset=True).items():
        setattr(customer, field, value)
    
    db.commit()
    db.refresh(customer)
    return customer


@router.delete("/customers/{customer_id}", response_model=MessageResponse)
async def delete_customer(
    customer_id: str,
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user)
):
    """Eliminar cliente; no se permite si tiene reportes de visita"""
    customer = db.query(Customer).filter(Customer.id == customer_id).first()
    if not customer:
        raise HTTPException(404, "Customer not found")
    
    visits_count = db.query(ShopVisit).filter(ShopVisit.customer_id == customer_id).count()
    if visits_count > 0:
        raise HTTPException(400, "Cannot delete customer with associated visit reports")
    
    db.delete(customer)
    db.commit()
    return MessageResponse(message="Customer deleted successfully")
