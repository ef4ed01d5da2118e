import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from core.application.obtener_tarea import buscar_tarea
from core.domain.errors import ErrorCampo, IdentificadorInvalidoError, ValidacionError
from core.domain.models.identificador import es_id_valido
from core.domain.models.tarea import Tarea, ahora_utc
from core.domain.ports.tarea_repository import TareaRepository
from core.domain.validacion import validar_estado, validar_titulo

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class EditarTareaCommand:
    """Actualización parcial: los campos a None se dejan como están."""

    title: str | None = None
    status: str | None = None


class EditarTareaUseCase:
    def __init__(
        self,
        repository: TareaRepository,
        reloj: Callable[[], datetime] = ahora_utc,
    ) -> None:
        self._repository = repository
        self._reloj = reloj

    def execute(self, tarea_id: str, cmd: EditarTareaCommand) -> Tarea:
        if not es_id_valido(tarea_id):
            raise IdentificadorInvalidoError(tarea_id)

        errores: list[ErrorCampo] = []
        titulo = None
        if cmd.title is not None:
            titulo = validar_titulo(cmd.title, errores, creacion=False)
        estado = None
        if cmd.status is not None:
            estado = validar_estado(cmd.status, errores)
        if errores:
            raise ValidacionError(errores)

        tarea = buscar_tarea(self._repository, tarea_id)

        cambios = False
        if titulo is not None and titulo != tarea.title:
            tarea.title = titulo
            cambios = True
        if estado is not None and estado is not tarea.status:
            tarea.status = estado
            cambios = True

        if not cambios:
            logger.debug(f"Tarea {tarea_id} sin cambios, no se persiste")
            return tarea

        tarea.tocar(self._reloj())
        self._repository.save(tarea)
        logger.info(f"Tarea {tarea_id} actualizada")
        return tarea
