from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ErrorCampo:
    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


class TareaError(Exception):
    """Base de los errores de dominio de tareas."""


class ValidacionError(TareaError):
    def __init__(self, errores: list[ErrorCampo]) -> None:
        self.errores = errores
        super().__init__(
            "; ".join(f"{e.field}: {e.message}" for e in errores) or "Validation failed"
        )


class TareaNoEncontradaError(TareaError):
    def __init__(self, tarea_id: str) -> None:
        self.tarea_id = tarea_id
        super().__init__(f"Tarea con id {tarea_id} no encontrada")


class IdentificadorInvalidoError(TareaError):
    def __init__(self, tarea_id: object) -> None:
        self.tarea_id = tarea_id
        super().__init__(f"Identificador de tarea mal formado: {tarea_id!r}")
