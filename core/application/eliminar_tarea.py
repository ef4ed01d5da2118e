import logging
from dataclasses import dataclass

from core.application.obtener_tarea import buscar_tarea
from core.domain.models.tarea import Tarea
from core.domain.ports.tarea_repository import TareaRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class EliminarTareaCommand:
    id: str


class EliminarTareaUseCase:
    def __init__(self, repository: TareaRepository) -> None:
        self._repository = repository

    def execute(self, cmd: EliminarTareaCommand) -> Tarea:
        """
        Elimina la tarea de forma definitiva.

        Retorna:
            Tarea: El estado de la tarea antes de borrarla.
        """
        tarea = buscar_tarea(self._repository, cmd.id)
        self._repository.eliminar(cmd.id)
        logger.info(f"Tarea {cmd.id} eliminada")
        return tarea
