"""
Cliente HTTP base para el API de reportes de visita
"""
import httpx
from typing import Any, Optional
import logging

from ..config import settings
from ..lifecycle.errors import PersistenceError

logger = logging.getLogger(__name__)


class ApiClient:
    """
    Cliente autenticado contra el API REST
    
    El token del usuario se recibe explícitamente: cada sesión del formulario
    crea sus propios clientes con las credenciales de quien la abrió.
    """
    
    def __init__(
        self,
        token: str,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = (base_url or settings.VISIT_API_URL).rstrip('/')
        self.timeout = settings.HTTP_TIMEOUT_SECONDS if timeout is None else timeout
        self.token = token
        self.transport = transport
    
    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            headers={"Authorization": f"Bearer {self.token}"},
            transport=self.transport
        )
    
    async def _request(self, method: str, path: str, json: Any = None) -> httpx.Response:
        """
        Ejecutar una petición
        
        Raises:
            PersistenceError: Si hay timeout o error de conexión
        """
        url = f"{self.base_url}{path}"
        try:
            async with self._client() as client:
                return await client.request(method, path, json=json)
        except httpx.TimeoutException:
            logger.warning(f"Timeout en {method} {url}")
            raise PersistenceError(f"Timeout calling {method} {url}")
        except httpx.RequestError as e:
            logger.warning(f"Error de conexión en {method} {url}: {str(e)}")
            raise PersistenceError(f"Connection error calling {method} {url}: {str(e)}")
    
    @staticmethod
    def _raise_for_status(response: httpx.Response, expected: int, action: str) -> None:
        if response.status_code != expected:
            logger.error(f"Error al {action}: {response.status_code} - {response.text}")
            raise PersistenceError(
                f"Failed to {action}: {response.status_code} - {response.text}",
                status_code=response.status_code
            )
    
    @staticmethod
    def _json(response: httpx.Response, action: str) -> Any:
        """
        Cuerpo JSON de una respuesta exitosa
        
        Raises:
            PersistenceError: Si el cuerpo no es JSON válido
        """
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Respuesta inválida al {action}: {str(e)}")
            raise PersistenceError(
                f"Invalid response to {action}: {str(e)}",
                status_code=response.status_code
            )
