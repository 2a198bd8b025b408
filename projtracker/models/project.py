"""Project model."""

from dataclasses import dataclass, field
from decimal import Decimal

from projtracker.models.category import Category
from projtracker.models.material import Material
from projtracker.models.step import Step
from projtracker.utils import to_fixed_point


@dataclass
class Project:
    """
    Represents a project together with its materials, steps and categories.

    Instances are plain values: they are built in memory, written with an
    explicit data-access call, and never cached between calls.  A project
    read by :meth:`~projtracker.dao.projects.ProjectsDao.fetch_all_projects`
    carries empty child lists; one read by ID carries all of them.

    Hour fields are normalized to two fractional digits on construction.
    """

    #: The project ID, assigned by the store on insert.
    project_id: int | None = None
    #: The project name.
    project_name: str | None = None
    #: Estimated hours to complete.
    estimated_hours: Decimal | None = None
    #: Hours actually spent.
    actual_hours: Decimal | None = None
    #: Difficulty, 1 (easy) to 5 (hard).  Not enforced.
    difficulty: int | None = None
    #: Free-form notes.
    notes: str | None = None
    #: The materials the project needs.
    materials: list[Material] = field(default_factory=list)
    #: The project's steps, in ``step_order``.
    steps: list[Step] = field(default_factory=list)
    #: The categories the project is filed under.
    categories: list[Category] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.estimated_hours is not None:
            self.estimated_hours = to_fixed_point(self.estimated_hours)
        if self.actual_hours is not None:
            self.actual_hours = to_fixed_point(self.actual_hours)

    def __str__(self) -> str:
        return (
            f"ID={self.project_id}, projectName={self.project_name}, "
            f"estimatedHours={self.estimated_hours}, "
            f"actualHours={self.actual_hours}, difficulty={self.difficulty}, "
            f"notes={self.notes}"
        )
