from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from core.domain.models.estadisticas import EstadisticasTareas
from core.domain.models.tarea import Tarea


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TareaOut(_CamelModel):
    id: str
    title: str
    status: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, tarea: Tarea) -> "TareaOut":
        return cls(
            id=tarea.id,
            title=tarea.title,
            status=tarea.status.value,
            created_at=tarea.created_at,
            updated_at=tarea.updated_at,
        )


class EstadisticasOut(_CamelModel):
    total: int
    pending: int
    completed: int

    @classmethod
    def from_domain(cls, stats: EstadisticasTareas) -> "EstadisticasOut":
        return cls(**stats.to_dict())


class TareaResponse(_CamelModel):
    success: bool = True
    message: str | None = None
    data: TareaOut


class ListadoResponse(_CamelModel):
    success: bool = True
    count: int
    stats: EstadisticasOut
    data: list[TareaOut]


class EstadisticasResponse(_CamelModel):
    success: bool = True
    data: EstadisticasOut
