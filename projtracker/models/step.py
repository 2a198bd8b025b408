"""Step model."""

from dataclasses import dataclass


@dataclass
class Step:
    """
    One step of a project's instructions.
    """

    #: The step ID.
    step_id: int | None = None
    #: The ID of the owning project.
    project_id: int | None = None
    #: The step instructions.
    step_text: str | None = None
    #: Position of the step within its project.
    step_order: int | None = None

    def __str__(self) -> str:
        return f"ID={self.step_id}, stepText={self.step_text}"
