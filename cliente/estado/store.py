import logging
from collections.abc import Awaitable, Callable
from typing import Any

from cliente.estado import acciones
from cliente.estado.acciones import Accion
from cliente.estado.tarea_slice import ESTADO_INICIAL, EstadoTareas, reducir
from cliente.servicios.tarea_service import ErrorApi, TareaService
from core.domain.models.tarea import EstadoTarea

logger = logging.getLogger(__name__)

Listener = Callable[[EstadoTareas], None]


class TareaStore:
    """
    Contenedor del estado de tareas del cliente.

    Las operaciones asíncronas despachan pending → fulfilled/rejected alrededor
    de una única llamada al servicio. Varias pueden estar en curso a la vez;
    cada resultado se aplica por id al completarse y el último en aplicarse
    gana. Un fallo solo actualiza `error`: el conjunto de trabajo no cambia.

    El store no cierra el servicio: su ciclo de vida es del llamador
    (`async with TareaService() as service`).
    """

    def __init__(
        self, service: TareaService, estado: EstadoTareas = ESTADO_INICIAL
    ) -> None:
        self._service = service
        self._estado = estado
        self._listeners: list[Listener] = []

    @property
    def estado(self) -> EstadoTareas:
        return self._estado

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, accion: Accion) -> EstadoTareas:
        logger.debug(f"dispatch {accion.type}")
        nuevo = reducir(self._estado, accion)
        if nuevo is not self._estado:
            self._estado = nuevo
            for listener in list(self._listeners):
                listener(nuevo)
        return self._estado

    async def _thunk(
        self,
        operacion: str,
        llamada: Callable[[], Awaitable[Any]],
        mensaje_por_defecto: str,
        resultado: Callable[[Any], Any] = lambda r: r,
    ) -> bool:
        self.dispatch(acciones.pending(operacion))
        try:
            respuesta = await llamada()
        except ErrorApi as e:
            logger.warning(f"{operacion} rechazado: {e}")
            self.dispatch(acciones.rejected(operacion, e.message or mensaje_por_defecto))
            return False
        except Exception:
            # Respuesta inesperada (cuerpo vacío, payload con otra forma...).
            logger.exception(f"{operacion} falló")
            self.dispatch(acciones.rejected(operacion, mensaje_por_defecto))
            return False
        self.dispatch(acciones.fulfilled(operacion, resultado(respuesta)))
        return True

    # ── Thunks ────────────────────────────────────────────────────────────────

    async def fetch_tasks(self) -> bool:
        return await self._thunk(
            acciones.FETCH_TASKS,
            self._service.get_all_tasks,
            "Failed to fetch tasks",
        )

    async def create_task(
        self, title: str, status: EstadoTarea | str = EstadoTarea.PENDIENTE
    ) -> bool:
        return await self._thunk(
            acciones.CREATE_TASK,
            lambda: self._service.create_task(title, status),
            "Failed to create task",
        )

    async def update_task(
        self,
        tarea_id: str,
        title: str | None = None,
        status: EstadoTarea | str | None = None,
    ) -> bool:
        return await self._thunk(
            acciones.UPDATE_TASK,
            lambda: self._service.update_task(tarea_id, title=title, status=status),
            "Failed to update task",
        )

    async def delete_task(self, tarea_id: str) -> bool:
        return await self._thunk(
            acciones.DELETE_TASK,
            lambda: self._service.delete_task(tarea_id),
            "Failed to delete task",
            resultado=lambda _: tarea_id,
        )

    async def toggle_task_status(self, tarea_id: str) -> bool:
        return await self._thunk(
            acciones.TOGGLE_TASK_STATUS,
            lambda: self._service.toggle_task_status(tarea_id),
            "Failed to toggle task status",
        )

    # ── Acciones síncronas ────────────────────────────────────────────────────

    def set_filter(self, filtro: str) -> EstadoTareas:
        return self.dispatch(acciones.set_filter(filtro))

    def set_search_term(self, termino: str) -> EstadoTareas:
        return self.dispatch(acciones.set_search_term(termino))

    def clear_filters(self) -> EstadoTareas:
        return self.dispatch(acciones.clear_filters())

    def clear_error(self) -> EstadoTareas:
        return self.dispatch(acciones.clear_error())

    def reset(self) -> EstadoTareas:
        return self.dispatch(acciones.reset_task_state())
