"""
Schemas Pydantic para validación
"""
from .visit import (
    ShopType,
    CommercialOutcome,
    PriorityLevel,
    BrandShareSchema,
    VisitCreate,
    VisitUpdate,
    VisitResponse,
    VisitDetailResponse,
    VisitListResponse
)
from .customer import (
    CustomerCreate,
    CustomerUpdate,
    CustomerResponse
)
from .configuration import (
    ConfigurationCreate,
    ConfigurationUpdate,
    ConfigurationResponse
)
from .user import (
    UserResponse,
    ProfileUpdate,
    UserAdminUpdate,
    PasswordResetRequest,
    MessageResponse
)

__all__ = [
    # Visit
    "ShopType",
    "CommercialOutcome",
    "PriorityLevel",
    "BrandShareSchema",
    "VisitCreate",
    "VisitUpdate",
    "VisitResponse",
    "VisitDetailResponse",
    "VisitListResponse",
    # Customer
    "CustomerCreate",
    "CustomerUpdate",
    "CustomerResponse",
    # Configuration
    "ConfigurationCreate",
    "ConfigurationUpdate",
    "ConfigurationResponse",
    # User
    "UserResponse",
    "ProfileUpdate",
    "UserAdminUpdate",
    "PasswordResetRequest",
    "MessageResponse",
]
