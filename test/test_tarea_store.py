import asyncio
from dataclasses import replace
from datetime import datetime, timezone

import pytest
from pytest_mock import MockerFixture

from cliente.estado.store import TareaStore
from cliente.servicios.tarea_service import ErrorApi, ListadoTareas, TareaService
from core.domain.models.estadisticas import EstadisticasTareas
from core.domain.models.identificador import nuevo_id
from core.domain.models.tarea import EstadoTarea, Tarea

T0 = datetime(2026, 6, 1, tzinfo=timezone.utc)


def _tarea(title: str, status: EstadoTarea = EstadoTarea.PENDIENTE) -> Tarea:
    return Tarea(id=nuevo_id(), title=title, status=status, created_at=T0, updated_at=T0)


@pytest.fixture
def service(mocker: MockerFixture):
    return mocker.AsyncMock(spec=TareaService)


@pytest.fixture
def store(service) -> TareaStore:
    return TareaStore(service)


@pytest.fixture
def tareas():
    return [_tarea("Buy milk"), _tarea("Walk dog", EstadoTarea.COMPLETADA)]


@pytest.fixture
async def cargado(store, service, tareas) -> TareaStore:
    service.get_all_tasks.return_value = ListadoTareas(
        tareas, EstadisticasTareas(pending=1, completed=1)
    )
    assert await store.fetch_tasks() is True
    return store


async def test_fetch_tasks_carga_conjunto_y_stats(cargado, tareas):
    estado = cargado.estado

    assert estado.tasks == tuple(tareas)
    assert estado.filtered_tasks == tuple(tareas)
    assert estado.stats.total == 2
    assert estado.loading is False


async def test_fetch_tasks_error_usa_mensaje_del_servidor(store, service):
    service.get_all_tasks.side_effect = ErrorApi("Database unavailable", status=500)

    assert await store.fetch_tasks() is False

    assert store.estado.error == "Database unavailable"
    assert store.estado.loading is False
    assert store.estado.tasks == ()


async def test_fetch_tasks_error_sin_mensaje_usa_generico(store, service):
    service.get_all_tasks.side_effect = ErrorApi(None, status=502)

    await store.fetch_tasks()

    assert store.estado.error == "Failed to fetch tasks"


async def test_fetch_tasks_fallo_inesperado_usa_generico(store, service):
    service.get_all_tasks.side_effect = AttributeError(
        "'NoneType' object has no attribute 'get'"
    )

    assert await store.fetch_tasks() is False

    assert store.estado.loading is False
    assert store.estado.error == "Failed to fetch tasks"


async def test_create_task_respuesta_sin_cuerpo(mocker: MockerFixture):
    async with TareaService(base_url="http://api.test/api") as service:
        mocker.patch.object(service, "request", return_value=None)
        store = TareaStore(service)

        assert await store.create_task("Buy milk") is False

    assert store.estado.loading is False
    assert store.estado.error == "Failed to create task"
    assert store.estado.tasks == ()
    assert service.session is None


async def test_create_task_antepone(cargado, service):
    nueva = _tarea("Nueva")
    service.create_task.return_value = nueva

    assert await cargado.create_task("Nueva") is True

    service.create_task.assert_awaited_once_with("Nueva", EstadoTarea.PENDIENTE)
    assert cargado.estado.tasks[0] == nueva
    assert cargado.estado.stats.pending == 2


async def test_create_task_fallido_no_modifica(cargado, service):
    antes = cargado.estado.tasks
    service.create_task.side_effect = ErrorApi("Validation failed", status=400)

    assert await cargado.create_task("a" * 201) is False

    assert cargado.estado.tasks == antes
    assert cargado.estado.error == "Validation failed"


async def test_update_task(cargado, service, tareas):
    actualizada = replace(tareas[0], title="Buy oat milk")
    service.update_task.return_value = actualizada

    await cargado.update_task(tareas[0].id, title="Buy oat milk")

    service.update_task.assert_awaited_once_with(
        tareas[0].id, title="Buy oat milk", status=None
    )
    assert cargado.estado.tasks[0].title == "Buy oat milk"


async def test_update_task_fallido_mensaje_generico(cargado, service, tareas):
    service.update_task.side_effect = ErrorApi(None)

    await cargado.update_task(tareas[0].id, status="Completed")

    assert cargado.estado.error == "Failed to update task"
    assert cargado.estado.tasks == tuple(tareas)


async def test_toggle_task_status(cargado, service, tareas):
    service.toggle_task_status.return_value = replace(
        tareas[0], status=EstadoTarea.COMPLETADA
    )

    await cargado.toggle_task_status(tareas[0].id)

    assert cargado.estado.tasks[0].status is EstadoTarea.COMPLETADA
    assert cargado.estado.stats.completed == 2


async def test_delete_task(cargado, service, tareas):
    service.delete_task.return_value = tareas[1]

    await cargado.delete_task(tareas[1].id)

    assert [t.id for t in cargado.estado.tasks] == [tareas[0].id]
    assert cargado.estado.stats.total == 1


async def test_delete_task_not_found(cargado, service, tareas):
    service.delete_task.side_effect = ErrorApi("Task not found", status=404)

    await cargado.delete_task(tareas[1].id)

    assert cargado.estado.error == "Task not found"
    assert len(cargado.estado.tasks) == 2


async def test_operaciones_concurrentes_sobre_ids_distintos(cargado, service, tareas):
    async def borrar(tarea_id: str) -> Tarea:
        # El segundo borrado termina antes que el primero.
        await asyncio.sleep(0.02 if tarea_id == tareas[0].id else 0)
        return next(t for t in tareas if t.id == tarea_id)

    service.delete_task.side_effect = borrar

    resultados = await asyncio.gather(
        cargado.delete_task(tareas[0].id), cargado.delete_task(tareas[1].id)
    )

    assert resultados == [True, True]
    assert cargado.estado.tasks == ()
    assert cargado.estado.stats.total == 0


async def test_acciones_sincronas(cargado, tareas):
    cargado.set_filter("Completed")
    assert [t.title for t in cargado.estado.filtered_tasks] == ["Walk dog"]

    cargado.set_search_term("milk")
    assert cargado.estado.filtered_tasks == ()

    cargado.clear_filters()
    assert cargado.estado.filtered_tasks == tuple(tareas)

    cargado.reset()
    assert cargado.estado.tasks == ()


async def test_clear_error(store, service):
    service.get_all_tasks.side_effect = ErrorApi("boom")
    await store.fetch_tasks()

    store.clear_error()

    assert store.estado.error is None


async def test_subscribe_notifica_cambios(store, service, tareas):
    vistos = []
    unsubscribe = store.subscribe(lambda estado: vistos.append(estado.loading))
    service.get_all_tasks.return_value = ListadoTareas(tareas, None)

    await store.fetch_tasks()
    unsubscribe()
    store.set_filter("Pending")

    assert vistos == [True, False]
