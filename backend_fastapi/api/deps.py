from core.application.alternar_estado import AlternarEstadoUseCase
from infrastructure.container import get_alternar_estado_use_case

from core.application.crear_tarea import CrearTareaUseCase
from infrastructure.container import get_crear_tarea_use_case

from core.application.editar_tarea import EditarTareaUseCase
from infrastructure.container import get_editar_tarea_use_case

from core.application.eliminar_tarea import EliminarTareaUseCase
from infrastructure.container import get_eliminar_tarea_use_case

from core.application.estadisticas_tareas import EstadisticasTareasUseCase
from infrastructure.container import get_estadisticas_tareas_use_case

from core.application.listar_tareas import ListarTareasUseCase
from infrastructure.container import get_listar_tareas_use_case

from core.application.obtener_tarea import ObtenerTareaUseCase
from infrastructure.container import get_obtener_tarea_use_case


def alternar_estado_use_case() -> AlternarEstadoUseCase:
    return get_alternar_estado_use_case()


def crear_tarea_use_case() -> CrearTareaUseCase:
    return get_crear_tarea_use_case()


def editar_tarea_use_case() -> EditarTareaUseCase:
    return get_editar_tarea_use_case()


def eliminar_tarea_use_case() -> EliminarTareaUseCase:
    return get_eliminar_tarea_use_case()


def estadisticas_tareas_use_case() -> EstadisticasTareasUseCase:
    return get_estadisticas_tareas_use_case()


def listar_tareas_use_case() -> ListarTareasUseCase:
    return get_listar_tareas_use_case()


def obtener_tarea_use_case() -> ObtenerTareaUseCase:
    return get_obtener_tarea_use_case()
