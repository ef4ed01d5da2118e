import unittest
from datetime import datetime, timedelta, timezone

from core.application.alternar_estado import AlternarEstadoUseCase
from core.application.crear_tarea import CrearTareaCommand, CrearTareaUseCase
from core.application.editar_tarea import EditarTareaCommand, EditarTareaUseCase
from core.application.eliminar_tarea import EliminarTareaCommand, EliminarTareaUseCase
from core.application.estadisticas_tareas import EstadisticasTareasUseCase
from core.application.listar_tareas import ListarTareasCommand, ListarTareasUseCase
from core.application.obtener_tarea import ObtenerTareaUseCase
from core.domain.errors import (
    IdentificadorInvalidoError,
    TareaNoEncontradaError,
    ValidacionError,
)
from core.domain.models.identificador import es_id_valido, nuevo_id
from core.domain.models.tarea import EstadoTarea
from infrastructure.memory.repository.tarea_repository import InMemoryTareaRepository

T0 = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


class RelojFalso:
    def __init__(self, inicio: datetime = T0) -> None:
        self.ahora = inicio

    def avanzar(self, segundos: int = 1) -> None:
        self.ahora += timedelta(seconds=segundos)

    def __call__(self) -> datetime:
        return self.ahora


class CoreUseCasesTests(unittest.TestCase):
    def setUp(self) -> None:
        self.repo = InMemoryTareaRepository()
        self.reloj = RelojFalso()

    def crear(self, title: str = "Tarea", status: str | None = None):
        return CrearTareaUseCase(self.repo, reloj=self.reloj).execute(
            CrearTareaCommand(title=title, status=status)
        )

    # ── Crear ─────────────────────────────────────────────────────────────────

    def test_crear_tarea_asigna_id_timestamps_y_estado_por_defecto(self) -> None:
        tarea = self.crear("  Buy milk  ")

        self.assertTrue(es_id_valido(tarea.id))
        self.assertEqual(tarea.title, "Buy milk")
        self.assertEqual(tarea.status, EstadoTarea.PENDIENTE)
        self.assertEqual(tarea.created_at, T0)
        self.assertEqual(tarea.updated_at, tarea.created_at)
        self.assertEqual(self.repo.get(tarea.id), tarea)

    def test_crear_tarea_con_estado_explicito(self) -> None:
        tarea = self.crear("Hecha", status="Completed")

        self.assertEqual(tarea.status, EstadoTarea.COMPLETADA)

    def test_crear_tarea_titulo_vacio_no_persiste(self) -> None:
        for titulo in ("", "   ", None):
            with self.subTest(titulo=titulo):
                with self.assertRaises(ValidacionError) as ctx:
                    self.crear(titulo)
                self.assertEqual(ctx.exception.errores[0].field, "title")
                self.assertEqual(
                    ctx.exception.errores[0].message, "Task title is required"
                )
        self.assertEqual(self.repo.list(), [])

    def test_crear_tarea_titulo_demasiado_largo(self) -> None:
        with self.assertRaises(ValidacionError) as ctx:
            self.crear("a" * 201)

        self.assertIn("200", ctx.exception.errores[0].message)
        self.assertEqual(self.repo.estadisticas().total, 0)

    def test_crear_tarea_titulo_de_200_tras_recortar_es_valido(self) -> None:
        tarea = self.crear("  " + "a" * 200 + "  ")

        self.assertEqual(len(tarea.title), 200)

    def test_crear_tarea_estado_invalido_reporta_ambos_campos(self) -> None:
        with self.assertRaises(ValidacionError) as ctx:
            self.crear("", status="Doing")

        campos = {e.field for e in ctx.exception.errores}
        self.assertEqual(campos, {"title", "status"})

    # ── Obtener ───────────────────────────────────────────────────────────────

    def test_obtener_tarea_existente(self) -> None:
        tarea = self.crear("Leer")

        encontrada = ObtenerTareaUseCase(self.repo).execute(tarea.id)

        self.assertEqual(encontrada, tarea)

    def test_obtener_tarea_inexistente_lanza_error(self) -> None:
        with self.assertRaises(TareaNoEncontradaError):
            ObtenerTareaUseCase(self.repo).execute(nuevo_id())

    def test_obtener_tarea_id_mal_formado(self) -> None:
        with self.assertRaises(IdentificadorInvalidoError):
            ObtenerTareaUseCase(self.repo).execute("no-es-un-id")

    # ── Editar ────────────────────────────────────────────────────────────────

    def test_editar_tarea_actualiza_y_refresca_updated_at(self) -> None:
        tarea = self.crear("Inicial")
        self.reloj.avanzar()

        updated = EditarTareaUseCase(self.repo, reloj=self.reloj).execute(
            tarea.id, EditarTareaCommand(title=" Actualizada ", status="Completed")
        )

        self.assertEqual(updated.title, "Actualizada")
        self.assertEqual(updated.status, EstadoTarea.COMPLETADA)
        self.assertEqual(updated.created_at, T0)
        self.assertGreater(updated.updated_at, tarea.updated_at)
        self.assertEqual(self.repo.get(tarea.id), updated)

    def test_editar_tarea_parcial_conserva_campos_omitidos(self) -> None:
        tarea = self.crear("Conservar", status="Completed")

        updated = EditarTareaUseCase(self.repo, reloj=self.reloj).execute(
            tarea.id, EditarTareaCommand(title="Nuevo")
        )

        self.assertEqual(updated.status, EstadoTarea.COMPLETADA)

    def test_editar_tarea_sin_cambios_no_refresca_updated_at(self) -> None:
        tarea = self.crear("Igual")
        self.reloj.avanzar(60)
        use_case = EditarTareaUseCase(self.repo, reloj=self.reloj)

        sin_campos = use_case.execute(tarea.id, EditarTareaCommand())
        mismos_valores = use_case.execute(
            tarea.id, EditarTareaCommand(title="Igual", status="Pending")
        )

        self.assertEqual(sin_campos.updated_at, tarea.updated_at)
        self.assertEqual(mismos_valores.updated_at, tarea.updated_at)
        self.assertEqual(self.repo.get(tarea.id).updated_at, tarea.updated_at)

    def test_editar_tarea_titulo_vacio(self) -> None:
        tarea = self.crear("x")

        with self.assertRaises(ValidacionError) as ctx:
            EditarTareaUseCase(self.repo).execute(tarea.id, EditarTareaCommand(title="  "))

        self.assertEqual(ctx.exception.errores[0].message, "Task title cannot be empty")
        self.assertEqual(self.repo.get(tarea.id).title, "x")

    def test_editar_tarea_inexistente_lanza_error(self) -> None:
        with self.assertRaises(TareaNoEncontradaError):
            EditarTareaUseCase(self.repo).execute(
                nuevo_id(), EditarTareaCommand(title="x")
            )

    def test_editar_tarea_id_mal_formado(self) -> None:
        with self.assertRaises(IdentificadorInvalidoError):
            EditarTareaUseCase(self.repo).execute("123", EditarTareaCommand(title="x"))

    # ── Eliminar ──────────────────────────────────────────────────────────────

    def test_eliminar_tarea_devuelve_estado_previo_y_borra(self) -> None:
        tarea = self.crear("Eliminar")

        eliminada = EliminarTareaUseCase(self.repo).execute(
            EliminarTareaCommand(id=tarea.id)
        )

        self.assertEqual(eliminada, tarea)
        self.assertIsNone(self.repo.get(tarea.id))
        with self.assertRaises(TareaNoEncontradaError):
            ObtenerTareaUseCase(self.repo).execute(tarea.id)

    def test_eliminar_tarea_inexistente_lanza_error(self) -> None:
        with self.assertRaises(TareaNoEncontradaError):
            EliminarTareaUseCase(self.repo).execute(EliminarTareaCommand(id=nuevo_id()))

    # ── Alternar ──────────────────────────────────────────────────────────────

    def test_alternar_estado_dos_veces_vuelve_al_original(self) -> None:
        tarea = self.crear("Alternar")
        use_case = AlternarEstadoUseCase(self.repo, reloj=self.reloj)

        self.reloj.avanzar()
        primera = use_case.execute(tarea.id)
        self.assertEqual(primera.status, EstadoTarea.COMPLETADA)
        self.assertGreater(primera.updated_at, tarea.updated_at)

        self.reloj.avanzar()
        segunda = use_case.execute(tarea.id)
        self.assertEqual(segunda.status, EstadoTarea.PENDIENTE)
        self.assertGreaterEqual(segunda.updated_at, primera.updated_at)

    def test_alternar_no_retrocede_updated_at(self) -> None:
        tarea = self.crear("Reloj")
        self.reloj.ahora = T0 - timedelta(hours=1)

        alternada = AlternarEstadoUseCase(self.repo, reloj=self.reloj).execute(tarea.id)

        self.assertEqual(alternada.updated_at, tarea.updated_at)
        self.assertGreaterEqual(alternada.updated_at, alternada.created_at)

    def test_alternar_id_mal_formado(self) -> None:
        with self.assertRaises(IdentificadorInvalidoError):
            AlternarEstadoUseCase(self.repo).execute("zzzzzzzzzzzzzzzzzzzzzzzz")

    # ── Listar y estadísticas ─────────────────────────────────────────────────

    def test_listar_filtra_por_estado_y_stats_son_globales(self) -> None:
        self.crear("Uno")
        self.crear("Dos", status="Completed")
        self.crear("Tres", status="Completed")

        resultado = ListarTareasUseCase(self.repo).execute(
            ListarTareasCommand(status="Completed", search="")
        )

        self.assertEqual({t.title for t in resultado.tareas}, {"Dos", "Tres"})
        self.assertEqual(resultado.estadisticas.total, 3)
        self.assertEqual(resultado.estadisticas.pending, 1)
        self.assertEqual(resultado.estadisticas.completed, 2)

    def test_listar_orden_por_defecto_created_at_desc(self) -> None:
        self.crear("Primera")
        self.reloj.avanzar()
        self.crear("Segunda")

        resultado = ListarTareasUseCase(self.repo).execute()

        self.assertEqual([t.title for t in resultado.tareas], ["Segunda", "Primera"])

    def test_listar_parametros_invalidos(self) -> None:
        with self.assertRaises(ValidacionError) as ctx:
            ListarTareasUseCase(self.repo).execute(
                ListarTareasCommand(status="Doing", sort_by="priority", sort_order="up")
            )

        campos = [e.field for e in ctx.exception.errores]
        self.assertEqual(campos, ["status", "sortBy", "sortOrder"])

    def test_estadisticas_total_igual_a_suma(self) -> None:
        self.crear("a")
        self.crear("b", status="Completed")

        stats = EstadisticasTareasUseCase(self.repo).execute()

        self.assertEqual(stats.total, stats.pending + stats.completed)
        self.assertEqual(stats.total, len(self.repo.list()))


if __name__ == "__main__":
    unittest.main()
