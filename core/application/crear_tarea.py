import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from core.domain.errors import ErrorCampo, ValidacionError
from core.domain.models.identificador import nuevo_id
from core.domain.models.tarea import EstadoTarea, Tarea, ahora_utc
from core.domain.ports.tarea_repository import TareaRepository
from core.domain.validacion import validar_estado, validar_titulo

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CrearTareaCommand:
    title: str | None = None
    status: str | None = None


class CrearTareaUseCase:
    def __init__(
        self,
        repository: TareaRepository,
        reloj: Callable[[], datetime] = ahora_utc,
    ) -> None:
        self._repository = repository
        self._reloj = reloj

    def execute(self, cmd: CrearTareaCommand) -> Tarea:
        errores: list[ErrorCampo] = []
        titulo = validar_titulo(cmd.title, errores, creacion=True)
        estado: EstadoTarea | None = EstadoTarea.PENDIENTE
        if cmd.status is not None:
            estado = validar_estado(cmd.status, errores)
        if errores or titulo is None or estado is None:
            raise ValidacionError(errores)

        ahora = self._reloj()
        tarea = Tarea(
            id=nuevo_id(),
            title=titulo,
            status=estado,
            created_at=ahora,
            updated_at=ahora,
        )
        self._repository.save(tarea)
        logger.info(f"Tarea {tarea.id} creada ({tarea.status.value})")
        return tarea
