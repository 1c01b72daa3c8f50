"""
Ciclo de vida de reportes de visita: borrador, guardado automático,
lista de verificación y puntaje
"""
from .checklist import (
    ChecklistResult,
    REQUIRED_SUBMISSION_FIELDS,
    evaluate_checklist,
    missing_required_fields
)
from .draft import (
    FORM_SECTIONS,
    PERCENTAGE_PAIRS,
    BrandShare,
    VisitDraft,
    customer_snapshot,
    merge_fields,
    required_fields_for_section,
    with_complementary_percentages
)
from .errors import (
    VisitReportError,
    ValidationError,
    ChecklistIncompleteError,
    PersistenceError,
    LifecycleError
)
from .lifecycle import LifecycleState, VisitReportLifecycle
from .scoring import (
    COMMERCIAL_OUTCOME_WEIGHTS,
    calculate_visit_score,
    compute_score,
    get_priority_level
)
from .store import CustomerDirectory, VisitStore

__all__ = [
    # Checklist
    "ChecklistResult",
    "REQUIRED_SUBMISSION_FIELDS",
    "evaluate_checklist",
    "missing_required_fields",
    # Draft
    "FORM_SECTIONS",
    "PERCENTAGE_PAIRS",
    "BrandShare",
    "VisitDraft",
    "customer_snapshot",
    "merge_fields",
    "required_fields_for_section",
    "with_complementary_percentages",
    # Errors
    "VisitReportError",
    "ValidationError",
    "ChecklistIncompleteError",
    "PersistenceError",
    "LifecycleError",
    # Lifecycle
    "LifecycleState",
    "VisitReportLifecycle",
    # Scoring
    "COMMERCIAL_OUTCOME_WEIGHTS",
    "calculate_visit_score",
    "compute_score",
    "get_priority_level",
    # Collaborators
    "CustomerDirectory",
    "VisitStore",
]
