"""
Contratos de los colaboradores del ciclo de vida

Las implementaciones HTTP están en visit_report.clients; las pruebas usan
implementaciones en memoria.
"""
from typing import Any, Dict, Optional, Protocol


class VisitStore(Protocol):
    """Persistencia de reportes de visita. Cada llamada es atómica por sí sola."""
    
    async def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Crear el reporte y devolver el registro guardado (incluye id)"""
        ...
    
    async def update(self, visit_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        ...
    
    async def delete(self, visit_id: str) -> None:
        ...
    
    async def get(self, visit_id: str) -> Optional[Dict[str, Any]]:
        ...


class CustomerDirectory(Protocol):
    """Consulta de clientes para copiar sus datos al reporte"""
    
    async def get_by_id(self, customer_id: str) -> Optional[Dict[str, Any]]:
        ...
