"""Material model."""

from dataclasses import dataclass
from decimal import Decimal

from projtracker.utils import to_fixed_point


@dataclass
class Material:
    """
    A material needed by a project.
    """

    #: The material ID.
    material_id: int | None = None
    #: The ID of the owning project.
    project_id: int | None = None
    #: The material name.
    material_name: str | None = None
    #: How many of this material the project needs.
    num_required: int | None = None
    #: The unit cost.
    cost: Decimal | None = None

    def __post_init__(self) -> None:
        if self.cost is not None:
            self.cost = to_fixed_point(self.cost)

    def __str__(self) -> str:
        return (
            f"ID={self.material_id}, materialName={self.material_name}, "
            f"numRequired={self.num_required}, cost={self.cost}"
        )
