"""
Lista de verificación previa al envío y campos obligatorios
"""
from dataclasses import dataclass
from typing import Any, List, Mapping, Union

from pydantic import BaseModel


# Campos obligatorios para enviar un reporte
REQUIRED_SUBMISSION_FIELDS = ("customer_id", "shop_name", "shop_type", "visit_date", "visit_purpose")

# Campos que conforman el cuestionario principal
QUESTIONNAIRE_FIELDS = ("customer_id", "shop_name", "shop_type", "visit_purpose")

SIGNATURE_FIELDS = ("signature", "signature_signer_name", "signature_date")


@dataclass(frozen=True)
class ChecklistResult:
    """Resultado de la lista de verificación (cuatro ítems independientes)"""
    photos_attached: bool
    questionnaire_complete: bool
    follow_up_added: bool
    signature_attached: bool
    
    @property
    def all_pass(self) -> bool:
        return (
            self.photos_attached
            and self.questionnaire_complete
            and self.follow_up_added
            and self.signature_attached
        )
    
    def failed_items(self) -> List[str]:
        """Nombres de los ítems que no se cumplen"""
        items = {
            "photos_attached": self.photos_attached,
            "questionnaire_complete": self.questionnaire_complete,
            "follow_up_added": self.follow_up_added,
            "signature_attached": self.signature_attached,
        }
        return [name for name, passed in items.items() if not passed]


def _as_mapping(data: Union[BaseModel, Mapping[str, Any]]) -> Mapping[str, Any]:
    if isinstance(data, BaseModel):
        return data.model_dump()
    return data


def _filled(value: Any) -> bool:
    # None, "" y listas vacías cuentan como no diligenciados
    return bool(value)


def missing_required_fields(data: Union[BaseModel, Mapping[str, Any]]) -> List[str]:
    """Campos obligatorios vacíos, en el orden de REQUIRED_SUBMISSION_FIELDS"""
    values = _as_mapping(data)
    return [field for field in REQUIRED_SUBMISSION_FIELDS if not _filled(values.get(field))]


def evaluate_checklist(data: Union[BaseModel, Mapping[str, Any]]) -> ChecklistResult:
    """Evaluar los cuatro ítems de la lista de verificación sobre el estado actual"""
    values = _as_mapping(data)
    
    follow_up_required = bool(values.get("follow_up_required"))
    
    return ChecklistResult(
        photos_attached=_filled(values.get("visit_photos")),
        questionnaire_complete=all(_filled(values.get(f)) for f in QUESTIONNAIRE_FIELDS),
        follow_up_added=(not follow_up_required) or _filled(values.get("follow_up_notes")),
        signature_attached=all(_filled(values.get(f)) for f in SIGNATURE_FIELDS),
    )
