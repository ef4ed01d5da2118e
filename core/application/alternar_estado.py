import logging
from collections.abc import Callable
from datetime import datetime

from core.application.obtener_tarea import buscar_tarea
from core.domain.models.tarea import Tarea, ahora_utc
from core.domain.ports.tarea_repository import TareaRepository

logger = logging.getLogger(__name__)


class AlternarEstadoUseCase:
    def __init__(
        self,
        repository: TareaRepository,
        reloj: Callable[[], datetime] = ahora_utc,
    ) -> None:
        self._repository = repository
        self._reloj = reloj

    def execute(self, tarea_id: str) -> Tarea:
        tarea = buscar_tarea(self._repository, tarea_id)
        tarea.alternar_estado(self._reloj())
        self._repository.save(tarea)
        logger.info(f"Tarea {tarea_id} marcada como {tarea.status.value}")
        return tarea
