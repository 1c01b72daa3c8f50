"""
Errores del ciclo de vida de un reporte de visita
"""
from typing import Iterable, List


class VisitReportError(Exception):
    """Error base del ciclo de vida"""


class ValidationError(VisitReportError):
    """Faltan campos obligatorios para enviar el reporte"""
    
    def __init__(self, missing_fields: Iterable[str], message: str = None):
        self.missing_fields: List[str] = list(missing_fields)
        super().__init__(
            message or f"Please fill in all required fields: {', '.join(self.missing_fields)}"
        )


class ChecklistIncompleteError(ValidationError):
    """La lista de verificación previa al envío no se cumple (missing_fields queda vacío)"""
    
    def __init__(self, failed_items: Iterable[str]):
        self.failed_items: List[str] = list(failed_items)
        super().__init__(
            [],
            f"Pre-submit checklist incomplete: {', '.join(self.failed_items)}"
        )


class PersistenceError(VisitReportError):
    """Falló una llamada al almacenamiento (crear, actualizar o eliminar)"""
    
    def __init__(self, message: str, status_code: int = None):
        self.status_code = status_code
        super().__init__(message)


class LifecycleError(VisitReportError):
    """Transición no permitida (por ejemplo, enviar dos veces el mismo reporte)"""
