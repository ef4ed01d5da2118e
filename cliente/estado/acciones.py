from dataclasses import dataclass
from typing import Any

FETCH_TASKS = "tasks/fetchTasks"
CREATE_TASK = "tasks/createTask"
UPDATE_TASK = "tasks/updateTask"
DELETE_TASK = "tasks/deleteTask"
TOGGLE_TASK_STATUS = "tasks/toggleTaskStatus"

SET_FILTER = "tasks/setFilter"
SET_SEARCH_TERM = "tasks/setSearchTerm"
CLEAR_FILTERS = "tasks/clearFilters"
CLEAR_ERROR = "tasks/clearError"
RESET_TASK_STATE = "tasks/resetTaskState"

PENDING = "pending"
FULFILLED = "fulfilled"
REJECTED = "rejected"


@dataclass(frozen=True, slots=True)
class Accion:
    type: str
    payload: Any = None


def pending(operacion: str) -> Accion:
    return Accion(f"{operacion}/{PENDING}")


def fulfilled(operacion: str, payload: Any) -> Accion:
    return Accion(f"{operacion}/{FULFILLED}", payload)


def rejected(operacion: str, mensaje: str) -> Accion:
    return Accion(f"{operacion}/{REJECTED}", mensaje)


def set_filter(filtro: str) -> Accion:
    return Accion(SET_FILTER, filtro)


def set_search_term(termino: str) -> Accion:
    return Accion(SET_SEARCH_TERM, termino)


def clear_filters() -> Accion:
    return Accion(CLEAR_FILTERS)


def clear_error() -> Accion:
    return Accion(CLEAR_ERROR)


def reset_task_state() -> Accion:
    return Accion(RESET_TASK_STATE)
