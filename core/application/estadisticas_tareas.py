from core.domain.models.estadisticas import EstadisticasTareas
from core.domain.ports.tarea_repository import TareaRepository


class EstadisticasTareasUseCase:
    def __init__(self, repository: TareaRepository) -> None:
        self._repository = repository

    def execute(self) -> EstadisticasTareas:
        return self._repository.estadisticas()
