"""
Router de Visitas (ShopVisit)
CRUD de reportes de visita con las reglas de borrador y envío final
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from typing import Optional
from datetime import date, datetime, timezone

from ..config import settings
from ..lifecycle import (
    compute_score,
    evaluate_checklist,
    missing_required_fields,
    with_complementary_percentages
)
from ..models import get_db, ShopVisit, Customer
from ..schemas.visit import (
    VisitCreate, VisitUpdate, VisitResponse, VisitDetailResponse, VisitListResponse,
    ShopType, PriorityLevel
)
from ..schemas.user import MessageResponse
from ..utils import get_current_user

logger = logging.getLogger(__name__)

router = APIRouter()


def visit_values(visit: ShopVisit) -> dict:
    """Valores actuales de todas las columnas del reporte"""
    return {column.name: getattr(visit, column.name) for column in ShopVisit.__table__.columns}


def validate_submission(values: dict) -> None:
    """
    Validar un reporte que se va a finalizar

    Los campos obligatorios se exigen siempre; la lista de verificación solo si
    ENFORCE_SUBMISSION_CHECKLIST está activo.
    """
    missing = missing_required_fields(values)
    if missing:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={
                "error": f"Please fill in all required fields: {', '.join(missing)}",
                "missing_fields": missing
            }
        )

    if settings.ENFORCE_SUBMISSION_CHECKLIST:
        checklist = evaluate_checklist(values)
        if not checklist.all_pass:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail={
                    "error": "Pre-submit checklist incomplete",
                    "failed_items": checklist.failed_items()
                }
            )


def derived_fields(values: dict) -> dict:
    """
    Campos que dependen del estado del reporte

    Un borrador nunca lleva puntaje ni prioridad; un reporte final siempre los
    lleva, calculados aquí (los valores enviados por el cliente se ignoran).
    """
    if values.get("is_draft", True):
        return {
            "calculated_score": None,
            "priority_level": None,
            "draft_saved_at": datetime.now(timezone.utc)
        }

    validate_submission(values)
    score, priority = compute_score(values)
    return {
        "calculated_score": score,
        "priority_level": priority,
        "draft_saved_at": None
    }


def get_customer_or_404(db: Session, customer_id: str) -> Customer:
    customer = db.query(Customer).filter(Customer.id == customer_id).first()
    if not customer:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Customer not found"
        )
    return customer


def get_visit_or_404(db: Session, visit_id: str) -> ShopVisit:
    visit = db.query(ShopVisit).filter(ShopVisit.id == visit_id).first()
    if not visit:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Visit not found"
        )
    return visit


# ============================================================================
# ENDPOINTS DE VISITAS
# ============================================================================

@router.get("/visits", response_model=VisitListResponse)
async def list_visits(
    customer_id: Optional[str] = Query(None, description="Filtrar por cliente"),
    is_draft: Optional[bool] = Query(None, description="Filtrar borradores o finalizados"),
    shop_type: Optional[ShopType] = Query(None, description="Filtrar por tipo de tienda"),
    priority_level: Optional[PriorityLevel] = Query(None, description="Filtrar por prioridad"),
    follow_up_required: Optional[bool] = Query(None, description="Filtrar por seguimiento pendiente"),
    start_date: Optional[date] = Query(None, description="Fecha de visita desde"),
    end_date: Optional[date] = Query(None, description="Fecha de visita hasta"),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=200),
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user)
):
    """Listar reportes de visita, más recientes primero"""
    query = db.query(ShopVisit)

    if customer_id:
        query = query.filter(ShopVisit.customer_id == customer_id)

    if is_draft is not None:
        query = query.filter(ShopVisit.is_draft == is_draft)

    if shop_type:
        query = query.filter(ShopVisit.shop_type == shop_type)

    if priority_level:
        query = query.filter(ShopVisit.priority_level == priority_level)

    if follow_up_required is not None:
        query = query.filter(ShopVisit.follow_up_required == follow_up_required)

    if start_date:
        query = query.filter(ShopVisit.visit_date >= start_date)

    if end_date:
        query = query.filter(ShopVisit.visit_date <= end_date)

    # Estadísticas con los mismos filtros
    total = query.count()
    drafts = query.filter(ShopVisit.is_draft == True).count()
    finalized = query.filter(ShopVisit.is_draft == False).count()

    results = query.order_by(ShopVisit.created_at.desc()).offset(skip).limit(limit).all()

    return VisitListResponse(
        visits=[VisitResponse.model_validate(visit) for visit in results],
        total=total,
        drafts=drafts,
        finalized=finalized
    )


@router.get("/visits/{visit_id}", response_model=VisitDetailResponse)
async def get_visit(
    visit_id: str,
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user)
):
    """Obtener un reporte con el nombre actual de la tienda del cliente"""
    visit = get_visit_or_404(db, visit_id)
    customer = db.query(Customer).filter(Customer.id == visit.customer_id).first()

    return VisitDetailResponse(
        **VisitResponse.model_validate(visit).model_dump(),
        customer_shop_name=customer.shop_name if customer else None
    )


@router.post("/visits", response_model=VisitResponse, status_code=status.HTTP_201_CREATED)
async def create_visit(
    visit_data: VisitCreate,
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user)
):
    """
    Crear un reporte de visita

    Un borrador solo necesita el cliente. Un reporte final pasa por la
    validación de envío y recibe puntaje y prioridad.
    """
    get_customer_or_404(db, visit_data.customer_id)

    data = with_complementary_percentages(visit_data.model_dump(exclude_unset=True))
    data["is_draft"] = visit_data.is_draft
    data.update(derived_fields(data))

    new_visit = ShopVisit(**data, created_by=current_user["user_id"])
    db.add(new_visit)
    db.commit()
    db.refresh(new_visit)

    if not new_visit.is_draft:
        logger.info(f"Reporte {new_visit.id} creado como final (prioridad {new_visit.priority_level})")

    return new_visit


@router.put("/visits/{visit_id}", response_model=VisitResponse)
async def update_visit(
    visit_id: str,
    visit_data: VisitUpdate,
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user)
):
    """
    Actualizar un borrador (guardado automático o envío final)

    Un reporte finalizado no se puede modificar. Gana la última escritura:
    no hay control de versiones entre sesiones.
    """
    visit = get_visit_or_404(db, visit_id)

    if not visit.is_draft:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Finalized visit reports cannot be modified"
        )

    updates = with_complementary_percentages(visit_data.model_dump(exclude_unset=True))

    # null en estos campos significa "sin cambios"
    for field in ("customer_id", "is_draft"):
        if field in updates and updates[field] is None:
            del updates[field]

    if "customer_id" in updates:
        get_customer_or_404(db, updates["customer_id"])

    merged = {**visit_values(visit), **updates}
    updates.update(derived_fields(merged))

    for field, value in updates.items():
        setattr(visit, field, value)

    db.commit()
    db.refresh(visit)

    if not visit.is_draft:
        logger.info(f"Reporte {visit.id} finalizado (puntaje {visit.calculated_score}, prioridad {visit.priority_level})")

    return visit


@router.delete("/visits/{visit_id}", response_model=MessageResponse)
async def delete_visit(
    visit_id: str,
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user)
):
    """Eliminar un reporte; solo se permite mientras es borrador"""
    visit = get_visit_or_404(db, visit_id)

    if not visit.is_draft:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Finalized visit reports cannot be deleted"
        )

    db.delete(visit)
    db.commit()

    return MessageResponse(message="Visit deleted successfully")
