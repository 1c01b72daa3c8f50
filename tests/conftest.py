"""
Fixtures compartidas: base de datos en memoria, cliente HTTP y tokens
"""
import pytest
from fastapi.testclient import TestClient
from jose import jwt
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from visit_report.config import settings
from visit_report.main import app
from visit_report.models import Base, get_db, User, Customer

# Base de datos de pruebas en memoria (una sola conexión compartida)
SQLALCHEMY_TEST_URL = "sqlite://"

engine = create_engine(
    SQLALCHEMY_TEST_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    """Override database dependency"""
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_database():
    """Crear y limpiar base de datos antes de cada test"""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def db():
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


def make_token(user: User) -> str:
    return jwt.encode(
        {"sub": user.email, "user_id": user.id},
        settings.SECRET_KEY,
        algorithm=settings.ALGORITHM
    )


def create_user(db, email: str, role: str = "user", status: str = "active") -> User:
    user = User(email=email, full_name=email.split("@")[0].title(), role=role, status=status)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def sales_user(db):
    return create_user(db, "rep@canna.com")


@pytest.fixture
def admin_user(db):
    return create_user(db, "admin@canna.com", role="admin")


@pytest.fixture
def auth_headers(sales_user):
    return {"Authorization": f"Bearer {make_token(sales_user)}"}


@pytest.fixture
def admin_headers(admin_user):
    return {"Authorization": f"Bearer {make_token(admin_user)}"}


@pytest.fixture
def customer(db):
    customer = Customer(
        shop_name="Acme Grow",
        shop_type="growshop",
        shop_address="Hauptstraße 12",
        zipcode="10115",
        city="Berlin",
        county="Berlin",
        contact_person="Anna Schmidt",
        contact_email="anna@acmegrow.de"
    )
    db.add(customer)
    db.commit()
    db.refresh(customer)
    return customer


@pytest.fixture
def complete_visit(customer):
    """Payload de un reporte que cumple campos obligatorios y lista de verificación"""
    return {
        "customer_id": customer.id,
        "shop_name": "Acme Grow",
        "shop_type": "growshop",
        "visit_date": "2024-01-01",
        "visit_purpose": "routine_check",
        "product_visibility_score": 50,
        "training_provided": False,
        "commercial_outcome": "information_only",
        "overall_satisfaction": 6,
        "visit_photos": ["https://files.example.com/shelf.jpg"],
        "signature": "data:image/png;base64,iVBORw0KGgo=",
        "signature_signer_name": "Anna Schmidt",
        "signature_date": "2024-01-01T15:30:00Z"
    }
