"""
Puntaje y prioridad de un reporte de visita

El puntaje es una suma ponderada fija; la prioridad de seguimiento se deriva
del puntaje (puntaje bajo = prioridad alta).
"""
from typing import Any, Mapping, Tuple, Union

from pydantic import BaseModel


COMMERCIAL_OUTCOME_WEIGHTS = {
    "new_order": 25,
    "order_commitment": 20,
    "price_negotiation": 15,
    "complaint_resolved": 10,
    "information_only": 5,
    "no_outcome": 0,
}

VISIBILITY_WEIGHT = 0.3
TRAINING_BONUS = 20
SATISFACTION_WEIGHT = 2.5

LOW_PRIORITY_THRESHOLD = 80
MEDIUM_PRIORITY_THRESHOLD = 60


def _as_mapping(data: Union[BaseModel, Mapping[str, Any]]) -> Mapping[str, Any]:
    if isinstance(data, BaseModel):
        return data.model_dump()
    return data


def calculate_visit_score(data: Union[BaseModel, Mapping[str, Any]]) -> float:
    """
    Calcular el puntaje de la visita, acotado a [0, 100]
    
    Los campos ausentes cuentan como cero; un resultado comercial desconocido no suma.
    """
    values = _as_mapping(data)
    
    score = (values.get("product_visibility_score") or 0) * VISIBILITY_WEIGHT
    if values.get("training_provided"):
        score += TRAINING_BONUS
    score += COMMERCIAL_OUTCOME_WEIGHTS.get(values.get("commercial_outcome"), 0)
    score += (values.get("overall_satisfaction") or 0) * SATISFACTION_WEIGHT
    
    return min(100, max(0, score))


def get_priority_level(score: float) -> str:
    """Prioridad de seguimiento según el puntaje"""
    if score >= LOW_PRIORITY_THRESHOLD:
        return "low"
    if score >= MEDIUM_PRIORITY_THRESHOLD:
        return "medium"
    return "high"


def compute_score(data: Union[BaseModel, Mapping[str, Any]]) -> Tuple[float, str]:
    """Puntaje y prioridad en una sola llamada"""
    score = calculate_visit_score(data)
    return score, get_priority_level(score)
