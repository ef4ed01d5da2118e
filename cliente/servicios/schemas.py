from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from core.domain.models.estadisticas import EstadisticasTareas
from core.domain.models.tarea import EstadoTarea, Tarea


class TareaPayload(BaseModel):
    """Tarea tal y como la devuelve la API."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    title: str
    status: EstadoTarea
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    def to_domain(self) -> Tarea:
        return Tarea(
            id=self.id,
            title=self.title,
            status=self.status,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class EstadisticasPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    pending: int = 0
    completed: int = 0

    def to_domain(self) -> EstadisticasTareas:
        return EstadisticasTareas(pending=self.pending, completed=self.completed)
