"""
Ciclo de vida de un reporte de visita

Estados: EMPTY (sin id) -> DRAFT_PERSISTED (borrador guardado) -> FINALIZED.

- El borrador se crea una sola vez, al salir de la primera sección con un
  cliente seleccionado. Si la creación falla se libera el cerrojo para
  permitir reintentar.
- Mientras el borrador existe se guarda automáticamente cada
  AUTOSAVE_INTERVAL_SECONDS. Los fallos del guardado automático se registran
  y no cambian el estado.
- Todas las llamadas de creación y actualización pasan por un mismo cerrojo:
  como máximo una escritura en curso por borrador.
- El envío final espera la escritura en curso (guardado o creación del
  borrador), calcula puntaje y prioridad, guarda con is_draft=False y
  cancela el guardado automático. FINALIZED es terminal.
"""
import asyncio
import logging
from contextlib import suppress
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from ..config import settings
from .checklist import ChecklistResult, evaluate_checklist, missing_required_fields
from .draft import FORM_SECTIONS, VisitDraft, customer_snapshot, merge_fields
from .errors import ChecklistIncompleteError, LifecycleError, PersistenceError, ValidationError
from .scoring import compute_score
from .store import CustomerDirectory, VisitStore

logger = logging.getLogger(__name__)

# Campos que solo el ciclo de vida puede asignar
LIFECYCLE_FIELDS = ("id", "is_draft", "calculated_score", "priority_level")


class LifecycleState(str, Enum):
    EMPTY = "empty"
    DRAFT_PERSISTED = "draft_persisted"
    FINALIZED = "finalized"


class VisitReportLifecycle:
    """
    Estado de un formulario de visita abierto

    Hay un solo escritor por borrador (la sesión del formulario); como máximo
    una operación de guardado en curso a la vez.
    """

    def __init__(
        self,
        store: VisitStore,
        customers: Optional[CustomerDirectory] = None,
        draft: Optional[VisitDraft] = None,
        autosave_interval: Optional[float] = None
    ):
        self.store = store
        self.customers = customers
        self.autosave_interval = (
            settings.AUTOSAVE_INTERVAL_SECONDS if autosave_interval is None else autosave_interval
        )

        self._draft = draft or VisitDraft()
        if self._draft.id is None:
            self._state = LifecycleState.EMPTY
        elif self._draft.is_draft:
            self._state = LifecycleState.DRAFT_PERSISTED
        else:
            self._state = LifecycleState.FINALIZED

        self.current_section = 0
        self.error: Optional[str] = None
        self.last_saved: Optional[datetime] = None

        self._draft_created = self._draft.id is not None
        self._persist_lock = asyncio.Lock()
        self._submitting = False
        self._autosave_task: Optional[asyncio.Task] = None

    @classmethod
    async def resume(
        cls,
        store: VisitStore,
        visit_id: str,
        customers: Optional[CustomerDirectory] = None,
        autosave_interval: Optional[float] = None
    ) -> "VisitReportLifecycle":
        """Abrir un reporte existente para seguir editándolo"""
        record = await store.get(visit_id)
        if record is None:
            raise LifecycleError(f"Visit {visit_id} not found")

        lifecycle = cls(
            store,
            customers=customers,
            draft=VisitDraft.model_validate(record),
            autosave_interval=autosave_interval
        )
        if lifecycle.state is LifecycleState.DRAFT_PERSISTED:
            lifecycle._start_autosave()
        return lifecycle

    # ------------------------------------------------------------------
    # Estado
    # ------------------------------------------------------------------

    @property
    def state(self) -> LifecycleState:
        return self._state

    @property
    def draft(self) -> VisitDraft:
        return self._draft

    @property
    def visit_id(self) -> Optional[str]:
        return self._draft.id

    @property
    def is_saving(self) -> bool:
        """True mientras hay una creación o actualización en curso"""
        return self._persist_lock.locked()

    @property
    def autosave_running(self) -> bool:
        return self._autosave_task is not None and not self._autosave_task.done()

    # ------------------------------------------------------------------
    # Edición
    # ------------------------------------------------------------------

    def update_fields(self, partial: Mapping[str, Any]) -> VisitDraft:
        """
        Aplicar una actualización parcial al borrador en memoria

        No persiste nada; limpia el error mostrado. Aplicar dos veces la misma
        actualización deja el mismo estado.
        
        Raises:
            pydantic.ValidationError: un valor fuera de rango (visibilidad 0-100,
                satisfacción 0-10); el borrador queda sin cambios
        """
        if self._state is LifecycleState.FINALIZED:
            logger.warning(f"Se ignoró una edición del reporte finalizado {self.visit_id}")
            return self._draft

        updates = {k: v for k, v in partial.items() if k not in LIFECYCLE_FIELDS}
        self._draft = merge_fields(self._draft, updates)
        self.error = None
        return self._draft

    async def select_customer(self, customer_id: str) -> Optional[Dict[str, Any]]:
        """Seleccionar el cliente y copiar sus datos de tienda y contacto"""
        if self.customers is None:
            raise LifecycleError("No customer directory configured")

        customer = await self.customers.get_by_id(customer_id)
        if customer is None:
            self.error = "Customer not found for the provided ID."
            return None

        self.update_fields(customer_snapshot(customer))
        return customer

    async def advance_section(self, current_index: int) -> int:
        """
        Pasar a la siguiente sección y devolver el índice resultante

        Al salir de la sección 0 se crea el borrador si hay cliente. Sin
        borrador guardado no se avanza.
        """
        if current_index == 0 and self._draft.id is None and self._draft.customer_id:
            await self._create_initial_draft()

        if current_index >= len(FORM_SECTIONS) - 1:
            return current_index

        if self._draft.id is None:
            return current_index

        self.current_section = current_index + 1
        return self.current_section

    def previous_section(self) -> int:
        if self.current_section > 0:
            self.current_section -= 1
        return self.current_section

    def evaluate_checklist(self) -> ChecklistResult:
        return evaluate_checklist(self._draft)

    # ------------------------------------------------------------------
    # Persistencia
    # ------------------------------------------------------------------

    def _payload(self, is_draft: bool) -> Dict[str, Any]:
        data = self._draft.model_dump(mode="json", exclude={"id"})
        data["is_draft"] = is_draft
        if is_draft:
            data["calculated_score"] = None
            data["priority_level"] = None
        return data

    async def _create_initial_draft(self) -> Optional[str]:
        if self._draft_created or not self._draft.customer_id:
            return None

        # Cerrojo: evita una segunda creación mientras la primera está en curso
        self._draft_created = True
        async with self._persist_lock:
            if self._state is not LifecycleState.EMPTY:
                # El envío final ya creó el registro
                return self._draft.id

            try:
                created = await self.store.create(self._payload(is_draft=True))
            except PersistenceError as exc:
                self._draft_created = False
                self.error = "Could not create a new visit report draft."
                logger.error(f"No se pudo crear el borrador inicial: {exc}")
                raise

            self._draft = self._draft.model_copy(update={"id": str(created["id"])})
            self.last_saved = datetime.now(timezone.utc)
            self._state = LifecycleState.DRAFT_PERSISTED
            logger.info(f"Borrador {self._draft.id} creado para el cliente {self._draft.customer_id}")

        self._start_autosave()
        return self._draft.id

    async def save_draft(self) -> bool:
        """
        Guardar el borrador actual (un ciclo del guardado automático)

        No espera: si ya hay una escritura en curso o un envío final, se omite.

        Returns:
            True si se guardó; False si se omitió o falló
        """
        if self._submitting or self._persist_lock.locked():
            return False
        if self._state is not LifecycleState.DRAFT_PERSISTED:
            return False

        visit_id = self._draft.id
        async with self._persist_lock:
            try:
                await self.store.update(visit_id, self._payload(is_draft=True))
            except PersistenceError as exc:
                logger.warning(f"Falló el guardado automático del borrador {visit_id}: {exc}")
                return False

        self.last_saved = datetime.now(timezone.utc)
        return True

    def _start_autosave(self) -> None:
        if self.autosave_running:
            return
        self._autosave_task = asyncio.create_task(self._autosave_loop())

    async def _stop_autosave(self) -> None:
        task = self._autosave_task
        self._autosave_task = None
        if task is None or task.done() or task is asyncio.current_task():
            return
        task.cancel()
        with suppress(asyncio.CancelledError):
            await task

    async def _autosave_loop(self) -> None:
        while self._state is LifecycleState.DRAFT_PERSISTED:
            await asyncio.sleep(self.autosave_interval)
            try:
                await self.save_draft()
            except Exception:
                # El siguiente ciclo vuelve a intentar
                logger.exception(f"Error inesperado en el guardado automático del borrador {self.visit_id}")

    async def submit(self) -> Dict[str, Any]:
        """
        Enviar el reporte final

        Espera a que termine la escritura en curso (guardado automático o
        creación del borrador) y luego guarda con is_draft=False; si el borrador
        ya existe se actualiza en lugar de crear otro registro.

        Raises:
            ValidationError: faltan campos obligatorios
            ChecklistIncompleteError: la lista de verificación no se cumple
            PersistenceError: falló el guardado; el reporte sigue en borrador
            LifecycleError: el reporte ya se envió o hay un envío en curso
        """
        if self._state is LifecycleState.FINALIZED:
            raise LifecycleError(f"Visit report {self.visit_id} was already submitted")
        if self._submitting:
            raise LifecycleError("Submission already in progress")

        missing = missing_required_fields(self._draft)
        if missing:
            error = ValidationError(missing)
            self.error = str(error)
            raise error

        checklist = self.evaluate_checklist()
        if not checklist.all_pass:
            error = ChecklistIncompleteError(checklist.failed_items())
            self.error = str(error)
            raise error

        self._submitting = True
        self.error = None
        try:
            async with self._persist_lock:
                await self._stop_autosave()

                score, priority = compute_score(self._draft)
                payload = self._payload(is_draft=False)
                payload["calculated_score"] = score
                payload["priority_level"] = priority

                if self._draft.id is None:
                    record = await self.store.create(payload)
                    self._draft_created = True
                else:
                    record = await self.store.update(self._draft.id, payload)

                self._draft = self._draft.model_copy(update={
                    "id": str(record.get("id") or self._draft.id),
                    "calculated_score": score,
                    "priority_level": priority,
                    "is_draft": False,
                })
                self._state = LifecycleState.FINALIZED
        except PersistenceError as exc:
            self.error = str(exc)
            logger.error(f"Falló el envío del reporte {self.visit_id}: {exc}")
            if self._state is LifecycleState.DRAFT_PERSISTED:
                self._start_autosave()
            raise
        finally:
            self._submitting = False

        self.last_saved = datetime.now(timezone.utc)
        logger.info(f"Reporte {self.visit_id} enviado: puntaje={score}, prioridad={priority}")
        return record

    async def close(self) -> None:
        """Cerrar la sesión del formulario (cancela el guardado automático)"""
        await self._stop_autosave()
