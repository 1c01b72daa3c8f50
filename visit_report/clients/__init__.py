"""
Clientes HTTP usados por el ciclo de vida del formulario
"""
from .base import ApiClient
from .visit_client import VisitApiClient
from .customer_client import CustomerApiClient

__all__ = [
    "ApiClient",
    "VisitApiClient",
    "CustomerApiClient"
]
