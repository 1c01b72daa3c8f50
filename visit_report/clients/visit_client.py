"""
Cliente HTTP de reportes de visita (implementa VisitStore)
"""
from typing import Any, Dict, Optional
import logging

from .base import ApiClient

logger = logging.getLogger(__name__)


class VisitApiClient(ApiClient):
    """Persistencia de reportes a través del API REST"""
    
    async def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Crear un reporte
        
        Returns:
            Registro guardado, incluye el id asignado
            
        Raises:
            PersistenceError: Si la petición falla o el API no responde 201
        """
        response = await self._request("POST", "/visits", json=data)
        self._raise_for_status(response, 201, "create visit")
        record = self._json(response, "create visit")
        logger.info(f"Reporte {record.get('id')} creado (borrador={record.get('is_draft')})")
        return record
    
    async def update(self, visit_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        response = await self._request("PUT", f"/visits/{visit_id}", json=data)
        self._raise_for_status(response, 200, f"update visit {visit_id}")
        return self._json(response, f"update visit {visit_id}")
    
    async def delete(self, visit_id: str) -> None:
        response = await self._request("DELETE", f"/visits/{visit_id}")
        self._raise_for_status(response, 200, f"delete visit {visit_id}")
    
    async def get(self, visit_id: str) -> Optional[Dict[str, Any]]:
        """Obtener un reporte; None si no existe"""
        response = await self._request("GET", f"/visits/{visit_id}")
        if response.status_code == 404:
            return None
        self._raise_for_status(response, 200, f"fetch visit {visit_id}")
        return self._json(response, f"fetch visit {visit_id}")
