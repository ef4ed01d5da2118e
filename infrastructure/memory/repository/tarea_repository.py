from dataclasses import replace

from core.domain.models.estadisticas import EstadisticasTareas
from core.domain.models.filtro import FiltroTareas
from core.domain.models.tarea import Tarea
from core.domain.ports.tarea_repository import TareaRepository
from core.domain.services.filtrado import aplicar_filtro, calcular_estadisticas


class InMemoryTareaRepository(TareaRepository):
    """
    Repositorio en memoria del proceso. Útil en desarrollo y en tests.

    Guarda copias de las tareas para que mutar una entidad devuelta no altere
    el almacén hasta que se llame a save().
    """

    def __init__(self) -> None:
        self._data: dict[str, Tarea] = {}

    def list(self, filtro: FiltroTareas | None = None) -> list[Tarea]:
        tareas = [replace(t) for t in self._data.values()]
        return aplicar_filtro(tareas, filtro or FiltroTareas())

    def save(self, tarea: Tarea) -> None:
        self._data[tarea.id] = replace(tarea)

    def get(self, tarea_id: str) -> Tarea | None:
        tarea = self._data.get(tarea_id)
        return replace(tarea) if tarea is not None else None

    def eliminar(self, tarea_id: str) -> None:
        self._data.pop(tarea_id, None)

    def estadisticas(self) -> EstadisticasTareas:
        return calcular_estadisticas(self._data.values())
