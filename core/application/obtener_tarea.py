from core.domain.errors import IdentificadorInvalidoError, TareaNoEncontradaError
from core.domain.models.identificador import es_id_valido
from core.domain.models.tarea import Tarea
from core.domain.ports.tarea_repository import TareaRepository


def buscar_tarea(repository: TareaRepository, tarea_id: str) -> Tarea:
    """
    Valida el identificador y obtiene la tarea.

    Raises:
        IdentificadorInvalidoError: Si el id no es un ObjectId bien formado.
        TareaNoEncontradaError: Si no existe ninguna tarea con ese id.
    """
    if not es_id_valido(tarea_id):
        raise IdentificadorInvalidoError(tarea_id)
    tarea = repository.get(tarea_id)
    if tarea is None:
        raise TareaNoEncontradaError(tarea_id)
    return tarea


class ObtenerTareaUseCase:
    def __init__(self, repository: TareaRepository) -> None:
        self._repository = repository

    def execute(self, tarea_id: str) -> Tarea:
        return buscar_tarea(self._repository, tarea_id)
