from abc import ABC, abstractmethod

from core.domain.models.estadisticas import EstadisticasTareas
from core.domain.models.filtro import FiltroTareas
from core.domain.models.tarea import Tarea


class TareaRepository(ABC):
    @abstractmethod
    def list(self, filtro: FiltroTareas | None = None) -> list[Tarea]:
        raise NotImplementedError

    @abstractmethod
    def save(self, tarea: Tarea) -> None:
        raise NotImplementedError

    @abstractmethod
    def get(self, tarea_id: str) -> Tarea | None:
        raise NotImplementedError

    @abstractmethod
    def eliminar(self, tarea_id: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def estadisticas(self) -> EstadisticasTareas:
        raise NotImplementedError
