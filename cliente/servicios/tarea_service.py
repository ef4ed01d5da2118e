"""
Cliente HTTP asíncrono de la API de tareas.

Toda respuesta no 2xx se convierte en ErrorApi con el mensaje que devuelve el
servidor; los fallos de transporte se reportan como error de red. No hay
reintentos: una llamada fallida se informa una vez.
"""

import asyncio
import logging
import os
from dataclasses import dataclass
from types import TracebackType
from typing import Any, Type

from aiohttp import ClientError, ClientSession, ClientTimeout, ContentTypeError

from cliente.servicios.schemas import EstadisticasPayload, TareaPayload
from core.domain.models.estadisticas import EstadisticasTareas
from core.domain.models.tarea import EstadoTarea, Tarea

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:8000/api"
DEFAULT_TIMEOUT_SECS = 10.0
NETWORK_ERROR = "Network error - please check your connection"


class ErrorApi(Exception):
    def __init__(
        self, message: str | None, status: int | None = None, data: Any = None
    ) -> None:
        self.message = message
        self.status = status
        self.data = data
        super().__init__(message or f"API error (status {status})")


@dataclass(slots=True)
class ListadoTareas:
    tareas: list[Tarea]
    estadisticas: EstadisticasTareas | None


class TareaService:
    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECS,
    ) -> None:
        self.base_url = (base_url or os.getenv("API_URL", DEFAULT_API_URL)).rstrip("/")
        self.timeout = ClientTimeout(total=timeout)
        self.session: ClientSession | None = None

    async def __aenter__(self):
        return self

    async def __aexit__(
        self, exc_type: Type[Exception], exc: Exception, tb: TracebackType
    ):
        await self.close()

    def _sesion(self) -> ClientSession:
        # La sesión se crea dentro del event loop que la va a usar.
        if self.session is None or self.session.closed:
            self.session = ClientSession(
                timeout=self.timeout,
                headers={"Content-Type": "application/json"},
            )
        return self.session

    async def close(self) -> None:
        if self.session is not None:
            await self.session.close()
            self.session = None

    async def request(
        self,
        method: str,
        path: str,
        params: dict[str, str] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug(f"🚀 API Request: {method} {url}")
        try:
            async with self._sesion().request(
                method, url, params=params, json=json
            ) as response:
                try:
                    data = await response.json(content_type=None)
                except (ContentTypeError, ValueError):
                    data = None

                if response.status >= 400:
                    message = data.get("message") if isinstance(data, dict) else None
                    logger.error(
                        f"❌ API Response Error: {method} {url} "
                        f"status={response.status} data={data}"
                    )
                    raise ErrorApi(message, status=response.status, data=data)

                logger.debug(f"✅ API Response: {method} {url}")
                return data
        except (ClientError, asyncio.TimeoutError) as e:
            logger.error(f"❌ API Request Error: {method} {url}: {e}")
            raise ErrorApi(NETWORK_ERROR) from e

    @staticmethod
    def _tarea(data: Any) -> Tarea:
        return TareaPayload.model_validate(data["data"]).to_domain()

    async def get_all_tasks(self, **params: str | None) -> ListadoTareas:
        """
        Lista tareas. Acepta status, search, sortBy y sortOrder; los valores
        vacíos no se envían.
        """
        query = {k: v for k, v in params.items() if v is not None and str(v).strip()}
        data = await self.request("GET", "/tasks", params=query or None)
        stats = data.get("stats")
        return ListadoTareas(
            tareas=[TareaPayload.model_validate(t).to_domain() for t in data.get("data", [])],
            estadisticas=EstadisticasPayload.model_validate(stats).to_domain()
            if stats
            else None,
        )

    async def get_task_by_id(self, tarea_id: str) -> Tarea:
        if not tarea_id:
            raise ErrorApi("Task ID is required")
        return self._tarea(await self.request("GET", f"/tasks/{tarea_id}"))

    async def create_task(
        self, title: str, status: EstadoTarea | str = EstadoTarea.PENDIENTE
    ) -> Tarea:
        if not title or not title.strip():
            raise ErrorApi("Task title is required")
        payload = {
            "title": title.strip(),
            "status": status.value if isinstance(status, EstadoTarea) else status,
        }
        return self._tarea(await self.request("POST", "/tasks", json=payload))

    async def update_task(
        self,
        tarea_id: str,
        title: str | None = None,
        status: EstadoTarea | str | None = None,
    ) -> Tarea:
        if not tarea_id:
            raise ErrorApi("Task ID is required")
        payload: dict[str, Any] = {}
        if title is not None:
            payload["title"] = title.strip()
        if status is not None:
            payload["status"] = status.value if isinstance(status, EstadoTarea) else status
        if not payload:
            raise ErrorApi("Task data is required for update")
        return self._tarea(await self.request("PUT", f"/tasks/{tarea_id}", json=payload))

    async def delete_task(self, tarea_id: str) -> Tarea:
        if not tarea_id:
            raise ErrorApi("Task ID is required")
        return self._tarea(await self.request("DELETE", f"/tasks/{tarea_id}"))

    async def toggle_task_status(self, tarea_id: str) -> Tarea:
        if not tarea_id:
            raise ErrorApi("Task ID is required")
        return self._tarea(await self.request("PATCH", f"/tasks/{tarea_id}/toggle"))

    async def delete_multiple_tasks(self, ids: list[str]) -> list[Tarea | BaseException]:
        """
        Elimina varias tareas en paralelo. Devuelve, en el mismo orden que ids,
        la tarea eliminada o la excepción de cada llamada.
        """
        if not ids:
            raise ErrorApi("Task IDs array is required")
        return await asyncio.gather(
            *(self.delete_task(tarea_id) for tarea_id in ids), return_exceptions=True
        )

    async def update_multiple_tasks_status(
        self, ids: list[str], status: EstadoTarea | str
    ) -> list[Tarea | BaseException]:
        if not ids:
            raise ErrorApi("Task IDs array is required")
        try:
            estado = EstadoTarea(status)
        except ValueError:
            raise ErrorApi("Valid status is required (Pending or Completed)") from None
        return await asyncio.gather(
            *(self.update_task(tarea_id, status=estado) for tarea_id in ids),
            return_exceptions=True,
        )
