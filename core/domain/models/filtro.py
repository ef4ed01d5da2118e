from dataclasses import dataclass
from enum import Enum

from core.domain.models.tarea import EstadoTarea

FILTRO_TODAS = "All"
BUSQUEDA_MAX_LEN = 100


class CampoOrden(Enum):
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"
    TITLE = "title"
    STATUS = "status"

    @property
    def atributo(self) -> str:
        """Nombre del atributo equivalente en la entidad Tarea."""
        return _ATRIBUTOS[self]


_ATRIBUTOS = {
    CampoOrden.CREATED_AT: "created_at",
    CampoOrden.UPDATED_AT: "updated_at",
    CampoOrden.TITLE: "title",
    CampoOrden.STATUS: "status",
}


class DireccionOrden(Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True, slots=True)
class FiltroTareas:
    """
    Criterios de listado ya validados.

    status None equivale al centinela "All" (sin filtro de estado).
    """

    status: EstadoTarea | None = None
    search: str = ""
    sort_by: CampoOrden = CampoOrden.CREATED_AT
    sort_order: DireccionOrden = DireccionOrden.DESC

    @property
    def termino_busqueda(self) -> str:
        return self.search.strip()
