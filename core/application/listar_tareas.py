from dataclasses import dataclass

from core.domain.models.estadisticas import EstadisticasTareas
from core.domain.models.tarea import Tarea
from core.domain.ports.tarea_repository import TareaRepository
from core.domain.validacion import validar_filtro


@dataclass(slots=True)
class ListarTareasCommand:
    status: str | None = None
    search: str | None = None
    sort_by: str | None = None
    sort_order: str | None = None


@dataclass(slots=True)
class ResultadoListado:
    tareas: list[Tarea]
    estadisticas: EstadisticasTareas


class ListarTareasUseCase:
    def __init__(self, repository: TareaRepository) -> None:
        self._repository = repository

    def execute(self, cmd: ListarTareasCommand | None = None) -> ResultadoListado:
        cmd = cmd or ListarTareasCommand()
        filtro = validar_filtro(
            status=cmd.status,
            search=cmd.search,
            sort_by=cmd.sort_by,
            sort_order=cmd.sort_order,
        )
        tareas = self._repository.list(filtro)
        # Las estadísticas describen siempre la colección completa.
        return ResultadoListado(
            tareas=tareas, estadisticas=self._repository.estadisticas()
        )
