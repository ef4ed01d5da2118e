from datetime import datetime, timezone
from typing import Any

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.domain.models.tarea import EstadoTarea, Tarea


class TareaMongo(BaseModel):
    """
    Modelo de Tarea para MongoDB.
    Representa cómo se almacena la tarea en la colección (campos camelCase).
    """

    id: str = Field(alias="_id")
    title: str
    status: str
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("id", mode="before")
    @classmethod
    def _object_id_a_str(cls, value: Any) -> Any:
        return str(value) if isinstance(value, ObjectId) else value

    @field_validator("created_at", "updated_at")
    @classmethod
    def _asegurar_utc(cls, value: datetime) -> datetime:
        # Un cliente sin tz_aware devuelve fechas naive en UTC.
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    def to_domain(self) -> Tarea:
        """
        Convierte el documento de MongoDB al modelo de dominio.

        Retorna:
            Tarea: La entidad de dominio.
        """
        return Tarea(
            id=self.id,
            title=self.title,
            status=EstadoTarea(self.status),
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    def to_document(self) -> dict[str, Any]:
        """
        Serializa al documento que se guarda, con `_id` como ObjectId nativo.
        """
        doc = self.model_dump(by_alias=True)
        doc["_id"] = ObjectId(self.id)
        return doc

    @classmethod
    def from_domain(cls, tarea: Tarea) -> "TareaMongo":
        """
        Crea una instancia de TareaMongo a partir de una entidad de dominio.

        Argumentos:
            tarea (Tarea): La entidad de dominio.

        Retorna:
            TareaMongo: El modelo de MongoDB.
        """
        return cls(
            id=tarea.id,
            title=tarea.title,
            status=tarea.status.value,
            created_at=tarea.created_at,
            updated_at=tarea.updated_at,
        )
