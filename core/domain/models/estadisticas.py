from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EstadisticasTareas:
    pending: int = 0
    completed: int = 0

    @property
    def total(self) -> int:
        return self.pending + self.completed

    def to_dict(self) -> dict[str, int]:
        return {
            "total": self.total,
            "pending": self.pending,
            "completed": self.completed,
        }
