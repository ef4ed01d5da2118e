from fastapi import APIRouter, Depends, Query, status

from backend_fastapi.api.deps import (
    alternar_estado_use_case,
    crear_tarea_use_case,
    editar_tarea_use_case,
    eliminar_tarea_use_case,
    estadisticas_tareas_use_case,
    listar_tareas_use_case,
    obtener_tarea_use_case,
)
from backend_fastapi.api.schemas import (
    EstadisticasOut,
    EstadisticasResponse,
    ListadoResponse,
    TareaOut,
    TareaResponse,
)
from core.application.alternar_estado import AlternarEstadoUseCase
from core.application.crear_tarea import CrearTareaCommand, CrearTareaUseCase
from core.application.editar_tarea import EditarTareaCommand, EditarTareaUseCase
from core.application.eliminar_tarea import EliminarTareaCommand, EliminarTareaUseCase
from core.application.estadisticas_tareas import EstadisticasTareasUseCase
from core.application.listar_tareas import ListarTareasCommand, ListarTareasUseCase
from core.application.obtener_tarea import ObtenerTareaUseCase

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.get(
    "",
    response_model=ListadoResponse,
    summary="Listar tareas con filtro, búsqueda y orden",
)
def listar_tareas(
    estado: str | None = Query(None, alias="status"),
    search: str | None = Query(None),
    sort_by: str | None = Query(None, alias="sortBy"),
    sort_order: str | None = Query(None, alias="sortOrder"),
    use_case: ListarTareasUseCase = Depends(listar_tareas_use_case),
) -> ListadoResponse:
    """
    Obtiene las tareas que cumplen los criterios.

    - **status**: All, Pending o Completed (por defecto All).
    - **search**: Subcadena a buscar en el título, sin distinguir mayúsculas.
    - **sortBy**: createdAt, updatedAt, title o status (por defecto createdAt).
    - **sortOrder**: asc o desc (por defecto desc).

    Las estadísticas se calculan siempre sobre la colección completa.
    """
    resultado = use_case.execute(
        ListarTareasCommand(
            status=estado, search=search, sort_by=sort_by, sort_order=sort_order
        )
    )
    return ListadoResponse(
        count=len(resultado.tareas),
        stats=EstadisticasOut.from_domain(resultado.estadisticas),
        data=[TareaOut.from_domain(t) for t in resultado.tareas],
    )


@router.get(
    "/stats",
    response_model=EstadisticasResponse,
    summary="Estadísticas de la colección",
)
def estadisticas_tareas(
    use_case: EstadisticasTareasUseCase = Depends(estadisticas_tareas_use_case),
) -> EstadisticasResponse:
    return EstadisticasResponse(data=EstadisticasOut.from_domain(use_case.execute()))


@router.get(
    "/{tarea_id}",
    response_model=TareaResponse,
    response_model_exclude_none=True,
    summary="Obtener una tarea",
)
def obtener_tarea(
    tarea_id: str,
    use_case: ObtenerTareaUseCase = Depends(obtener_tarea_use_case),
) -> TareaResponse:
    return TareaResponse(data=TareaOut.from_domain(use_case.execute(tarea_id)))


@router.post(
    "",
    response_model=TareaResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Crear una nueva tarea",
)
def crear_tarea(
    cmd: CrearTareaCommand,
    use_case: CrearTareaUseCase = Depends(crear_tarea_use_case),
) -> TareaResponse:
    """
    Crea una nueva tarea en el sistema.

    - **title**: Título de la tarea (1 a 200 caracteres tras recortar espacios).
    - **status**: Estado inicial (por defecto Pending).
    """
    tarea = use_case.execute(cmd)
    return TareaResponse(
        message="Task created successfully", data=TareaOut.from_domain(tarea)
    )


@router.put(
    "/{tarea_id}",
    response_model=TareaResponse,
    summary="Editar una tarea existente",
)
def editar_tarea(
    tarea_id: str,
    cmd: EditarTareaCommand,
    use_case: EditarTareaUseCase = Depends(editar_tarea_use_case),
) -> TareaResponse:
    """
    Modifica parcialmente una tarea existente.

    - **tarea_id**: Identificador de la tarea a modificar.
    - **title**: Nuevo título (opcional).
    - **status**: Nuevo estado (opcional).
    """
    tarea = use_case.execute(tarea_id, cmd)
    return TareaResponse(
        message="Task updated successfully", data=TareaOut.from_domain(tarea)
    )


@router.delete(
    "/{tarea_id}",
    response_model=TareaResponse,
    summary="Eliminar una tarea",
)
def eliminar_tarea(
    tarea_id: str,
    use_case: EliminarTareaUseCase = Depends(eliminar_tarea_use_case),
) -> TareaResponse:
    """
    Elimina una tarea del sistema y devuelve su último estado.

    - **tarea_id**: Identificador de la tarea a eliminar.
    """
    tarea = use_case.execute(EliminarTareaCommand(id=tarea_id))
    return TareaResponse(
        message="Task deleted successfully", data=TareaOut.from_domain(tarea)
    )


@router.patch(
    "/{tarea_id}/toggle",
    response_model=TareaResponse,
    summary="Alternar el estado entre Pending y Completed",
)
def alternar_estado(
    tarea_id: str,
    use_case: AlternarEstadoUseCase = Depends(alternar_estado_use_case),
) -> TareaResponse:
    tarea = use_case.execute(tarea_id)
    return TareaResponse(
        message=f"Task marked as {tarea.status.value.lower()}",
        data=TareaOut.from_domain(tarea),
    )
