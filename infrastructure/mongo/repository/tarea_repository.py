import logging
import re
from typing import Any

from bson import ObjectId
from pymongo import ASCENDING, DESCENDING, TEXT
from pymongo.collection import Collection

from core.domain.models.estadisticas import EstadisticasTareas
from core.domain.models.filtro import DireccionOrden, FiltroTareas
from core.domain.models.tarea import EstadoTarea, Tarea
from core.domain.ports.tarea_repository import TareaRepository
from infrastructure.mongo.models.tarea import TareaMongo
from infrastructure.mongo.session.client import get_db

logger = logging.getLogger(__name__)


class MongoTareaRepository(TareaRepository):
    """
    Implementación de TareaRepository usando MongoDB (Synchronous).
    """

    def __init__(self) -> None:
        self.db = get_db()
        self.collection: Collection[Any] = self.db.tasks

    def crear_indices(self) -> None:
        """
        Crea los índices de apoyo: (status, createdAt desc) y texto sobre title.
        Son solo una ayuda de rendimiento; el comportamiento no depende de ellos.
        """
        self.collection.create_index([("status", ASCENDING), ("createdAt", DESCENDING)])
        self.collection.create_index([("title", TEXT)])
        logger.info("Índices de la colección de tareas verificados")

    def save(self, tarea: Tarea) -> None:
        """
        Guarda o actualiza una tarea en la base de datos.

        Argumentos:
            tarea (Tarea): La tarea a guardar.
        """
        doc = TareaMongo.from_domain(tarea).to_document()
        object_id = doc.pop("_id")

        self.collection.update_one({"_id": object_id}, {"$set": doc}, upsert=True)

    def get(self, tarea_id: str) -> Tarea | None:
        """
        Obtiene una tarea por su ID.

        Argumentos:
            tarea_id (str): El ObjectId de la tarea en hexadecimal.

        Retorna:
            Tarea | None: La tarea encontrada o None si no existe.
        """
        doc = self.collection.find_one({"_id": ObjectId(tarea_id)})
        if not doc:
            return None

        return TareaMongo(**doc).to_domain()

    def list(self, filtro: FiltroTareas | None = None) -> list[Tarea]:
        """
        Lista las tareas que cumplen el filtro, ordenadas según sus criterios.

        Retorna:
            list[Tarea]: Lista de tareas.
        """
        filtro = filtro or FiltroTareas()
        query: dict[str, Any] = {}
        if filtro.status is not None:
            query["status"] = filtro.status.value
        if filtro.termino_busqueda:
            query["title"] = {
                "$regex": re.escape(filtro.termino_busqueda),
                "$options": "i",
            }

        direccion = ASCENDING if filtro.sort_order is DireccionOrden.ASC else DESCENDING
        docs = self.collection.find(query).sort(filtro.sort_by.value, direccion)
        return [TareaMongo(**doc).to_domain() for doc in docs]

    def eliminar(self, tarea_id: str) -> None:
        """
        Elimina una tarea por su ID.

        Argumentos:
            tarea_id (str): El ID de la tarea a eliminar.
        """
        self.collection.delete_one({"_id": ObjectId(tarea_id)})

    def estadisticas(self) -> EstadisticasTareas:
        """
        Cuenta las tareas por estado sobre la colección completa.
        """
        grupos = self.collection.aggregate(
            [{"$group": {"_id": "$status", "count": {"$sum": 1}}}]
        )
        conteos = {grupo["_id"]: grupo["count"] for grupo in grupos}
        return EstadisticasTareas(
            pending=conteos.get(EstadoTarea.PENDIENTE.value, 0),
            completed=conteos.get(EstadoTarea.COMPLETADA.value, 0),
        )
