"""Category model."""

from dataclasses import dataclass


@dataclass
class Category:
    """
    A category a project can be filed under.

    Projects and categories are linked through the ``project_category``
    table, which this application only ever reads.
    """

    #: The category ID.
    category_id: int | None = None
    #: The category name.
    category_name: str | None = None

    def __str__(self) -> str:
        return f"ID={self.category_id}, categoryName={self.category_name}"
