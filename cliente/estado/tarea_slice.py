"""
Estado de tareas del cliente y sus reducers.

Cada reducer es una función pura (estado, acción) -> estado nuevo. El conjunto
de trabajo (`tasks`) refleja lo último que confirmó el servidor; la vista
derivada (`filtered_tasks`) se recalcula con la misma semántica de filtrado
que usa el servidor.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field, replace

from cliente.estado import acciones
from cliente.estado.acciones import Accion
from cliente.servicios.tarea_service import ListadoTareas
from core.domain.models.estadisticas import EstadisticasTareas
from core.domain.models.filtro import FILTRO_TODAS
from core.domain.models.tarea import Tarea
from core.domain.services.filtrado import calcular_estadisticas, filtrar_tareas


@dataclass(frozen=True, slots=True)
class EstadoTareas:
    tasks: tuple[Tarea, ...] = ()
    filtered_tasks: tuple[Tarea, ...] = ()
    loading: bool = False
    error: str | None = None
    filter: str = FILTRO_TODAS
    search_term: str = ""
    stats: EstadisticasTareas = field(default_factory=EstadisticasTareas)


ESTADO_INICIAL = EstadoTareas()

Reducer = Callable[[EstadoTareas, Accion], EstadoTareas]


def _con_tareas(
    estado: EstadoTareas,
    tareas: Iterable[Tarea],
    stats: EstadisticasTareas | None = None,
    **cambios,
) -> EstadoTareas:
    """Sustituye el conjunto de trabajo y recalcula estadísticas y vista."""
    tareas = tuple(tareas)
    return replace(
        estado,
        tasks=tareas,
        stats=stats if stats is not None else calcular_estadisticas(tareas),
        filtered_tasks=tuple(
            filtrar_tareas(tareas, estado.filter, estado.search_term)
        ),
        **cambios,
    )


# ── Síncronos ─────────────────────────────────────────────────────────────────


def _set_filter(estado: EstadoTareas, accion: Accion) -> EstadoTareas:
    return replace(
        estado,
        filter=accion.payload,
        filtered_tasks=tuple(
            filtrar_tareas(estado.tasks, accion.payload, estado.search_term)
        ),
    )


def _set_search_term(estado: EstadoTareas, accion: Accion) -> EstadoTareas:
    return replace(
        estado,
        search_term=accion.payload,
        filtered_tasks=tuple(
            filtrar_tareas(estado.tasks, estado.filter, accion.payload)
        ),
    )


def _clear_filters(estado: EstadoTareas, accion: Accion) -> EstadoTareas:
    return replace(
        estado, filter=FILTRO_TODAS, search_term="", filtered_tasks=estado.tasks
    )


def _clear_error(estado: EstadoTareas, accion: Accion) -> EstadoTareas:
    return replace(estado, error=None)


def _reset(estado: EstadoTareas, accion: Accion) -> EstadoTareas:
    return ESTADO_INICIAL


# ── Asíncronos ────────────────────────────────────────────────────────────────


def _pending_bloqueante(estado: EstadoTareas, accion: Accion) -> EstadoTareas:
    return replace(estado, loading=True, error=None)


def _pending(estado: EstadoTareas, accion: Accion) -> EstadoTareas:
    return replace(estado, error=None)


def _rejected_bloqueante(estado: EstadoTareas, accion: Accion) -> EstadoTareas:
    return replace(estado, loading=False, error=accion.payload)


def _rejected(estado: EstadoTareas, accion: Accion) -> EstadoTareas:
    return replace(estado, error=accion.payload)


def _fetch_fulfilled(estado: EstadoTareas, accion: Accion) -> EstadoTareas:
    listado: ListadoTareas = accion.payload
    return _con_tareas(estado, listado.tareas, listado.estadisticas, loading=False)


def _create_fulfilled(estado: EstadoTareas, accion: Accion) -> EstadoTareas:
    nueva: Tarea = accion.payload
    return _con_tareas(estado, (nueva, *estado.tasks), loading=False)


def _replace_fulfilled(estado: EstadoTareas, accion: Accion) -> EstadoTareas:
    actualizada: Tarea = accion.payload
    if not any(t.id == actualizada.id for t in estado.tasks):
        return estado
    return _con_tareas(
        estado,
        (actualizada if t.id == actualizada.id else t for t in estado.tasks),
    )


def _delete_fulfilled(estado: EstadoTareas, accion: Accion) -> EstadoTareas:
    tarea_id: str = accion.payload
    return _con_tareas(estado, (t for t in estado.tasks if t.id != tarea_id))


def _ciclo(
    operacion: str,
    on_pending: Reducer,
    on_fulfilled: Reducer,
    on_rejected: Reducer,
) -> dict[str, Reducer]:
    return {
        f"{operacion}/{acciones.PENDING}": on_pending,
        f"{operacion}/{acciones.FULFILLED}": on_fulfilled,
        f"{operacion}/{acciones.REJECTED}": on_rejected,
    }


REDUCERS: dict[str, Reducer] = {
    acciones.SET_FILTER: _set_filter,
    acciones.SET_SEARCH_TERM: _set_search_term,
    acciones.CLEAR_FILTERS: _clear_filters,
    acciones.CLEAR_ERROR: _clear_error,
    acciones.RESET_TASK_STATE: _reset,
    **_ciclo(
        acciones.FETCH_TASKS, _pending_bloqueante, _fetch_fulfilled, _rejected_bloqueante
    ),
    **_ciclo(
        acciones.CREATE_TASK, _pending_bloqueante, _create_fulfilled, _rejected_bloqueante
    ),
    **_ciclo(acciones.UPDATE_TASK, _pending, _replace_fulfilled, _rejected),
    **_ciclo(acciones.DELETE_TASK, _pending, _delete_fulfilled, _rejected),
    **_ciclo(acciones.TOGGLE_TASK_STATUS, _pending, _replace_fulfilled, _rejected),
}


def reducir(estado: EstadoTareas, accion: Accion) -> EstadoTareas:
    """
    Reducer raíz. Las acciones desconocidas devuelven el estado sin cambios.
    """
    reducer = REDUCERS.get(accion.type)
    if reducer is None:
        return estado
    return reducer(estado, accion)


# ── Selectores ────────────────────────────────────────────────────────────────


def select_all_tasks(estado: EstadoTareas) -> tuple[Tarea, ...]:
    return estado.tasks


def select_filtered_tasks(estado: EstadoTareas) -> tuple[Tarea, ...]:
    return estado.filtered_tasks


def select_tasks_loading(estado: EstadoTareas) -> bool:
    return estado.loading


def select_tasks_error(estado: EstadoTareas) -> str | None:
    return estado.error


def select_tasks_filter(estado: EstadoTareas) -> str:
    return estado.filter


def select_tasks_search_term(estado: EstadoTareas) -> str:
    return estado.search_term


def select_tasks_stats(estado: EstadoTareas) -> EstadisticasTareas:
    return estado.stats
