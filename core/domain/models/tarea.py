from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum


class EstadoTarea(Enum):
    PENDIENTE = "Pending"
    COMPLETADA = "Completed"

    def alternar(self) -> "EstadoTarea":
        if self is EstadoTarea.PENDIENTE:
            return EstadoTarea.COMPLETADA
        return EstadoTarea.PENDIENTE


TITULO_MAX_LEN = 200


@dataclass(slots=True)
class Tarea:
    id: str
    title: str
    created_at: datetime
    updated_at: datetime
    status: EstadoTarea = EstadoTarea.PENDIENTE

    def tocar(self, ahora: datetime) -> None:
        """
        Refresca updated_at sin permitir que retroceda.
        """
        self.updated_at = max(ahora, self.updated_at)

    def alternar_estado(self, ahora: datetime) -> None:
        self.status = self.status.alternar()
        self.tocar(ahora)


def ahora_utc() -> datetime:
    # Precisión de milisegundos, la misma que conserva MongoDB.
    ahora = datetime.now(timezone.utc)
    return ahora.replace(microsecond=ahora.microsecond // 1000 * 1000)
