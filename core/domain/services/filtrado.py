"""
Semántica de filtrado, búsqueda, orden y estadísticas de tareas.

La comparten el repositorio en memoria, el adaptador Peewee y el estado del
cliente, de modo que la vista derivada del cliente coincide con lo que
devolvería el servidor para los mismos criterios.
"""

from collections.abc import Iterable

from core.domain.models.estadisticas import EstadisticasTareas
from core.domain.models.filtro import (
    FILTRO_TODAS,
    CampoOrden,
    DireccionOrden,
    FiltroTareas,
)
from core.domain.models.tarea import EstadoTarea, Tarea


def _valor_estado(estado: EstadoTarea | str | None) -> str | None:
    if estado is None:
        return None
    if isinstance(estado, EstadoTarea):
        return estado.value
    return None if estado == FILTRO_TODAS else estado


def coincide_estado(tarea: Tarea, estado: EstadoTarea | str | None) -> bool:
    valor = _valor_estado(estado)
    return valor is None or tarea.status.value == valor


def coincide_busqueda(tarea: Tarea, busqueda: str | None) -> bool:
    termino = (busqueda or "").strip().lower()
    return not termino or termino in tarea.title.lower()


def filtrar_tareas(
    tareas: Iterable[Tarea],
    estado: EstadoTarea | str | None = None,
    busqueda: str | None = None,
) -> list[Tarea]:
    """
    Aplica el filtro de estado (exacto, salvo "All") y la búsqueda por
    subcadena sin distinguir mayúsculas. Ambos predicados se combinan con AND.
    """
    return [
        t
        for t in tareas
        if coincide_estado(t, estado) and coincide_busqueda(t, busqueda)
    ]


def ordenar_tareas(
    tareas: Iterable[Tarea],
    campo: CampoOrden = CampoOrden.CREATED_AT,
    direccion: DireccionOrden = DireccionOrden.DESC,
) -> list[Tarea]:
    def clave(tarea: Tarea):
        valor = getattr(tarea, campo.atributo)
        return valor.value if isinstance(valor, EstadoTarea) else valor

    return sorted(tareas, key=clave, reverse=direccion is DireccionOrden.DESC)


def aplicar_filtro(tareas: Iterable[Tarea], filtro: FiltroTareas) -> list[Tarea]:
    seleccion = filtrar_tareas(tareas, filtro.status, filtro.termino_busqueda)
    return ordenar_tareas(seleccion, filtro.sort_by, filtro.sort_order)


def calcular_estadisticas(tareas: Iterable[Tarea]) -> EstadisticasTareas:
    pending = completed = 0
    for tarea in tareas:
        if tarea.status is EstadoTarea.PENDIENTE:
            pending += 1
        else:
            completed += 1
    return EstadisticasTareas(pending=pending, completed=completed)
