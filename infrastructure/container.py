import logging
import os
from functools import lru_cache

from core.application.alternar_estado import AlternarEstadoUseCase
from core.application.crear_tarea import CrearTareaUseCase
from core.application.editar_tarea import EditarTareaUseCase
from core.application.eliminar_tarea import EliminarTareaUseCase
from core.application.estadisticas_tareas import EstadisticasTareasUseCase
from core.application.listar_tareas import ListarTareasUseCase
from core.application.obtener_tarea import ObtenerTareaUseCase
from core.domain.ports.tarea_repository import TareaRepository

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_tarea_repository() -> TareaRepository:
    orm = os.getenv("ORM", "mongo").lower()

    # Imports diferidos: cada adaptador abre su conexión al importarse o instanciarse.
    if orm == "peewee":
        from infrastructure.peewee.repository.tarea_repository import (
            PeeweeTareaRepository,
        )

        repository: TareaRepository = PeeweeTareaRepository()
    elif orm == "memory":
        from infrastructure.memory.repository.tarea_repository import (
            InMemoryTareaRepository,
        )

        repository = InMemoryTareaRepository()
    else:
        # Default to MongoDB
        from infrastructure.mongo.repository.tarea_repository import (
            MongoTareaRepository,
        )

        repository = MongoTareaRepository()

    logger.info(f"Repositorio de tareas: {type(repository).__name__}")
    return repository


def preparar_almacen() -> None:
    """
    Prepara el almacén al arrancar (índices en MongoDB).
    """
    repository = get_tarea_repository()
    crear_indices = getattr(repository, "crear_indices", None)
    if crear_indices is not None:
        crear_indices()


def cerrar_almacen() -> None:
    """
    Libera las conexiones abiertas al detener la aplicación.
    """
    from infrastructure.mongo.session.client import close_client

    close_client()


def get_listar_tareas_use_case() -> ListarTareasUseCase:
    return ListarTareasUseCase(repository=get_tarea_repository())


def get_obtener_tarea_use_case() -> ObtenerTareaUseCase:
    return ObtenerTareaUseCase(repository=get_tarea_repository())


def get_crear_tarea_use_case() -> CrearTareaUseCase:
    return CrearTareaUseCase(repository=get_tarea_repository())


def get_editar_tarea_use_case() -> EditarTareaUseCase:
    return EditarTareaUseCase(repository=get_tarea_repository())


def get_eliminar_tarea_use_case() -> EliminarTareaUseCase:
    return EliminarTareaUseCase(repository=get_tarea_repository())


def get_alternar_estado_use_case() -> AlternarEstadoUseCase:
    return AlternarEstadoUseCase(repository=get_tarea_repository())


def get_estadisticas_tareas_use_case() -> EstadisticasTareasUseCase:
    return EstadisticasTareasUseCase(repository=get_tarea_repository())
