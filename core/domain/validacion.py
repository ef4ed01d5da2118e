"""
Reglas de validación de tareas y de criterios de listado.

Las funciones acumulan errores por campo en la lista recibida para que el
llamador pueda informar de todos los problemas de una vez.
"""

from typing import Any

from core.domain.errors import ErrorCampo, ValidacionError
from core.domain.models.filtro import (
    BUSQUEDA_MAX_LEN,
    FILTRO_TODAS,
    CampoOrden,
    DireccionOrden,
    FiltroTareas,
)
from core.domain.models.tarea import TITULO_MAX_LEN, EstadoTarea

MSG_TITULO_REQUERIDO = "Task title is required"
MSG_TITULO_VACIO = "Task title cannot be empty"
MSG_TITULO_LONGITUD = f"Task title must be between 1 and {TITULO_MAX_LEN} characters"
MSG_TITULO_TIPO = "Task title must be a string"
MSG_ESTADO = "Status must be either Pending or Completed"
MSG_FILTRO_ESTADO = "Status filter must be All, Pending, or Completed"
MSG_BUSQUEDA_LONGITUD = f"Search term cannot exceed {BUSQUEDA_MAX_LEN} characters"
MSG_CAMPO_ORDEN = "Sort field must be createdAt, updatedAt, title, or status"
MSG_DIRECCION_ORDEN = "Sort order must be asc or desc"


def validar_titulo(
    valor: Any, errores: list[ErrorCampo], *, creacion: bool = True
) -> str | None:
    """
    Recorta y valida un título.

    Argumentos:
        valor: Título recibido (puede ser None si se omitió).
        errores: Lista donde se acumulan los errores encontrados.
        creacion: En creación un título vacío se reporta como "requerido".

    Retorna:
        str | None: El título recortado, o None si no es válido.
    """
    if valor is None:
        errores.append(ErrorCampo("title", MSG_TITULO_REQUERIDO))
        return None
    if not isinstance(valor, str):
        errores.append(ErrorCampo("title", MSG_TITULO_TIPO))
        return None

    titulo = valor.strip()
    if not titulo:
        mensaje = MSG_TITULO_REQUERIDO if creacion else MSG_TITULO_VACIO
        errores.append(ErrorCampo("title", mensaje))
        return None
    if len(titulo) > TITULO_MAX_LEN:
        errores.append(ErrorCampo("title", MSG_TITULO_LONGITUD))
        return None
    return titulo


def validar_estado(valor: Any, errores: list[ErrorCampo]) -> EstadoTarea | None:
    if isinstance(valor, EstadoTarea):
        return valor
    try:
        return EstadoTarea(valor)
    except ValueError:
        errores.append(ErrorCampo("status", MSG_ESTADO))
        return None


def validar_filtro(
    status: str | None = None,
    search: str | None = None,
    sort_by: str | None = None,
    sort_order: str | None = None,
) -> FiltroTareas:
    """
    Construye un FiltroTareas a partir de parámetros de consulta sin tipar.

    Raises:
        ValidacionError: Si algún parámetro no es aceptable.
    """
    errores: list[ErrorCampo] = []

    estado: EstadoTarea | None = None
    if status and status != FILTRO_TODAS:
        try:
            estado = EstadoTarea(status)
        except ValueError:
            errores.append(ErrorCampo("status", MSG_FILTRO_ESTADO))

    busqueda = (search or "").strip()
    if len(busqueda) > BUSQUEDA_MAX_LEN:
        errores.append(ErrorCampo("search", MSG_BUSQUEDA_LONGITUD))

    campo = CampoOrden.CREATED_AT
    if sort_by:
        try:
            campo = CampoOrden(sort_by)
        except ValueError:
            errores.append(ErrorCampo("sortBy", MSG_CAMPO_ORDEN))

    direccion = DireccionOrden.DESC
    if sort_order:
        try:
            direccion = DireccionOrden(sort_order)
        except ValueError:
            errores.append(ErrorCampo("sortOrder", MSG_DIRECCION_ORDEN))

    if errores:
        raise ValidacionError(errores)

    return FiltroTareas(
        status=estado, search=busqueda, sort_by=campo, sort_order=direccion
    )
