from datetime import datetime, timezone
from typing import List

from peewee import fn

from core.domain.models.estadisticas import EstadisticasTareas
from core.domain.models.filtro import DireccionOrden, FiltroTareas
from core.domain.models.tarea import EstadoTarea, Tarea
from core.domain.ports.tarea_repository import TareaRepository
from core.domain.services.filtrado import coincide_busqueda
from infrastructure.peewee.model.models import TareaModel
from infrastructure.peewee.session.db import db


def _a_naive_utc(valor: datetime) -> datetime:
    if valor.tzinfo is None:
        return valor
    return valor.astimezone(timezone.utc).replace(tzinfo=None)


def _a_utc(valor: datetime) -> datetime:
    if valor.tzinfo is None:
        return valor.replace(tzinfo=timezone.utc)
    return valor


def _to_domain(tarea_model: TareaModel) -> Tarea:
    return Tarea(
        id=tarea_model.id,
        title=tarea_model.title,
        status=EstadoTarea(tarea_model.status),
        created_at=_a_utc(tarea_model.created_at),
        updated_at=_a_utc(tarea_model.updated_at),
    )


class PeeweeTareaRepository(TareaRepository):
    def __init__(self):
        # Sin migraciones: la tabla se crea al instanciar el repositorio.
        db.connect(reuse_if_open=True)
        db.create_tables([TareaModel], safe=True)

    def save(self, tarea: Tarea) -> None:
        with db.atomic():
            try:
                existing = TareaModel.get(TareaModel.id == tarea.id)
                existing.title = tarea.title
                existing.status = tarea.status.value
                existing.updated_at = _a_naive_utc(tarea.updated_at)
                existing.save()
            except TareaModel.DoesNotExist:
                TareaModel.create(
                    id=tarea.id,
                    title=tarea.title,
                    status=tarea.status.value,
                    created_at=_a_naive_utc(tarea.created_at),
                    updated_at=_a_naive_utc(tarea.updated_at),
                )

    def get(self, tarea_id: str) -> Tarea | None:
        try:
            return _to_domain(TareaModel.get(TareaModel.id == tarea_id))
        except TareaModel.DoesNotExist:
            return None

    def list(self, filtro: FiltroTareas | None = None) -> List[Tarea]:
        filtro = filtro or FiltroTareas()
        query = TareaModel.select()
        if filtro.status is not None:
            query = query.where(TareaModel.status == filtro.status.value)

        columna = getattr(TareaModel, filtro.sort_by.atributo)
        if filtro.sort_order is DireccionOrden.ASC:
            query = query.order_by(columna.asc())
        else:
            query = query.order_by(columna.desc())

        # LIKE trata % y _ como comodines; la subcadena se comprueba en Python.
        tareas = [_to_domain(t) for t in query]
        return [t for t in tareas if coincide_busqueda(t, filtro.termino_busqueda)]

    def eliminar(self, tarea_id: str) -> None:
        query = TareaModel.delete().where(TareaModel.id == tarea_id)
        query.execute()

    def estadisticas(self) -> EstadisticasTareas:
        filas = (
            TareaModel.select(TareaModel.status, fn.COUNT(TareaModel.id))
            .group_by(TareaModel.status)
            .tuples()
        )
        conteos = dict(filas)
        return EstadisticasTareas(
            pending=conteos.get(EstadoTarea.PENDIENTE.value, 0),
            completed=conteos.get(EstadoTarea.COMPLETADA.value, 0),
        )
