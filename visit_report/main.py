"""
Visit Report Service
FastAPI Application
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from .config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
logger = logging.getLogger(__name__)

# Crear aplicación FastAPI
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="""
    Servicio de reportes de visitas comerciales a tiendas.

    ## Funcionalidades

    * **Visitas (Visits)**: Borradores con guardado automático, envío final con puntaje y prioridad
    * **Clientes (Customers)**: Tiendas visitadas y sus datos de contacto
    * **Configuración (Configurations)**: Opciones de los selectores del formulario
    * **Usuarios (Users)**: Perfil propio y administración con auditoría
    """,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

# Configurar CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Importar y configurar routers después de crear la app para evitar imports circulares
from .routers import (
    visits_router,
    customers_router,
    configurations_router,
    users_router
)

# Incluir routers
app.include_router(
    visits_router,
    prefix=settings.API_PREFIX,
    tags=["visits"]
)

app.include_router(
    customers_router,
    prefix=settings.API_PREFIX,
    tags=["customers"]
)

app.include_router(
    configurations_router,
    prefix=settings.API_PREFIX,
    tags=["configurations"]
)

app.include_router(
    users_router,
    prefix=settings.API_PREFIX,
    tags=["users"]
)


@app.get("/", include_in_schema=False)
async def root():
    """Redireccionar a la documentación"""
    return RedirectResponse(url="/docs")


@app.get("/health", tags=["Health"])
async def root_health():
    """Health check raíz"""
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION
    }


# Event handlers
@app.on_event("startup")
async def startup_event():
    """Evento de inicio de la aplicación"""
    if settings.AUTO_CREATE_TABLES:
        from .models import init_db
        init_db()
        logger.info("Tablas creadas/verificadas")
    logger.info(f"{settings.APP_NAME} v{settings.APP_VERSION} iniciado")
    logger.info(f"Documentación disponible en: http://{settings.SERVICE_HOST}:{settings.SERVICE_PORT}/docs")
    logger.info(f"Endpoints en: {settings.API_PREFIX}")


@app.on_event("shutdown")
async def shutdown_event():
    """Evento de cierre de la aplicación"""
    logger.info(f"{settings.APP_NAME} detenido")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "visit_report.main:app",
        host=settings.SERVICE_HOST,
        port=settings.SERVICE_PORT,
        reload=settings.DEBUG
    )
