import os

os.environ.setdefault("ORM", "memory")

import pytest
from fastapi.testclient import TestClient

from backend_fastapi.api import deps
from backend_fastapi.main import app
from core.application.alternar_estado import AlternarEstadoUseCase
from core.application.crear_tarea import CrearTareaUseCase
from core.application.editar_tarea import EditarTareaUseCase
from core.application.eliminar_tarea import EliminarTareaUseCase
from core.application.estadisticas_tareas import EstadisticasTareasUseCase
from core.application.listar_tareas import ListarTareasUseCase
from core.application.obtener_tarea import ObtenerTareaUseCase
from infrastructure.memory.repository.tarea_repository import InMemoryTareaRepository


@pytest.fixture
def repo() -> InMemoryTareaRepository:
    return InMemoryTareaRepository()


@pytest.fixture
def client(repo):
    """TestClient con todos los casos de uso apuntando a un repositorio en memoria."""
    overrides = {
        deps.listar_tareas_use_case: lambda: ListarTareasUseCase(repo),
        deps.obtener_tarea_use_case: lambda: ObtenerTareaUseCase(repo),
        deps.crear_tarea_use_case: lambda: CrearTareaUseCase(repo),
        deps.editar_tarea_use_case: lambda: EditarTareaUseCase(repo),
        deps.eliminar_tarea_use_case: lambda: EliminarTareaUseCase(repo),
        deps.alternar_estado_use_case: lambda: AlternarEstadoUseCase(repo),
        deps.estadisticas_tareas_use_case: lambda: EstadisticasTareasUseCase(repo),
    }
    app.dependency_overrides.update(overrides)
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()
