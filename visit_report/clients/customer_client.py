"""
Cliente HTTP de clientes (tiendas)
"""
from typing import Any, Dict, Optional
import logging

from .base import ApiClient

logger = logging.getLogger(__name__)


class CustomerApiClient(ApiClient):
    """Consulta de clientes para copiar sus datos al reporte"""
    
    async def get_by_id(self, customer_id: str) -> Optional[Dict[str, Any]]:
        """
        Obtener un cliente por ID
        
        Returns:
            Dict con el cliente o None si no existe
        """
        response = await self._request("GET", f"/customers/{customer_id}")
        if response.status_code == 404:
            logger.warning(f"Cliente {customer_id} no encontrado")
            return None
        self._raise_for_status(response, 200, f"fetch customer {customer_id}")
        return self._json(response, f"fetch customer {customer_id}")
