"""Projects DAO: SQL for projects and their child rows."""

import logging
from dataclasses import replace
from typing import Final

from sqlalchemy import Connection, Engine, delete, insert, select, update

from projtracker.dao.binding import bind_parameters, extract
from projtracker.dao.transaction import transaction
from projtracker.models import Category, Material, Project, Step
from projtracker.schema import (
    category_table,
    material_table,
    project_category_table,
    project_table,
    step_table,
)

logger = logging.getLogger(__name__)


class ProjectsDao:
    """
    Translates project operations into parameterized SQL.

    Every public method runs in exactly one
    :func:`~projtracker.dao.transaction.transaction`, on its own
    connection.  Nothing is cached between calls.

    Deleting a project relies on the store's ``ON DELETE CASCADE`` foreign
    keys to remove its materials, steps and category links; no child rows
    are deleted here.

    Args:
        engine: The engine to connect through

    """

    #: The columns written on insert and update, in statement order.
    PROJECT_COLUMNS: Final[tuple[str, ...]] = (
        "project_name",
        "estimated_hours",
        "actual_hours",
        "difficulty",
        "notes",
    )

    def __init__(self, engine: Engine) -> None:
        #: The engine every operation connects through.
        self.engine = engine

    def insert_project(self, project: Project) -> Project:
        """
        Insert a project and return it with its new ID.

        ``project.project_id`` is ignored.  The input object is not
        modified.

        Args:
            project: The project to insert

        Raises:
            DbException: the insert failed; nothing was written

        Returns:
            A copy of ``project`` with ``project_id`` set

        """
        with transaction(self.engine) as conn:
            params = bind_parameters(project_table, project, self.PROJECT_COLUMNS)
            result = conn.execute(insert(project_table).values(params))
            project_id = result.inserted_primary_key[0]
        logger.info(f"Inserted project {project_id}: {project.project_name}")
        return replace(
            project,
            project_id=project_id,
            materials=list(project.materials),
            steps=list(project.steps),
            categories=list(project.categories),
        )

    def fetch_all_projects(self) -> list[Project]:
        """
        Fetch every project, ordered by name.

        Only the project's own columns are read; the child lists are
        left empty.

        Returns:
            The projects, possibly an empty list

        """
        stmt = select(project_table).order_by(project_table.c.project_name)
        with transaction(self.engine) as conn:
            rows = conn.execute(stmt).all()
        logger.debug(f"Fetched {len(rows)} projects")
        return [extract(row, Project) for row in rows]

    def fetch_project_by_id(self, project_id: int) -> Project | None:
        """
        Fetch one project with its materials, steps and categories.

        The project row and the three child queries share one transaction,
        so the result is either complete or ``None``.

        Args:
            project_id: The project ID

        Returns:
            The project, or ``None`` if there is no project with that ID

        """
        stmt = select(project_table).where(project_table.c.project_id == project_id)
        with transaction(self.engine) as conn:
            row = conn.execute(stmt).one_or_none()
            if row is None:
                logger.debug(f"Project {project_id} not found")
                return None
            project = extract(row, Project)
            project.materials.extend(self._fetch_materials(conn, project_id))
            project.steps.extend(self._fetch_steps(conn, project_id))
            project.categories.extend(self._fetch_categories(conn, project_id))
        return project

    def modify_project_details(self, project: Project) -> bool:
        """
        Overwrite all mutable columns of ``project``'s row.

        Args:
            project: The project to write; must have a ``project_id``

        Raises:
            ValueError: ``project.project_id`` is ``None``
            DbException: the update failed; nothing was written

        Returns:
            ``True`` if exactly one row was updated

        """
        if project.project_id is None:
            msg = "Cannot update a project that has no project_id"
            raise ValueError(msg)
        with transaction(self.engine) as conn:
            params = bind_parameters(project_table, project, self.PROJECT_COLUMNS)
            stmt = (
                update(project_table)
                .where(project_table.c.project_id == project.project_id)
                .values(params)
            )
            updated = conn.execute(stmt).rowcount == 1
        if updated:
            logger.info(f"Updated project {project.project_id}")
        return updated

    def delete_project(self, project_id: int) -> bool:
        """
        Delete a project.

        Args:
            project_id: The project ID

        Raises:
            DbException: the delete failed; nothing was removed

        Returns:
            ``True`` if exactly one row was deleted

        """
        stmt = delete(project_table).where(project_table.c.project_id == project_id)
        with transaction(self.engine) as conn:
            deleted = conn.execute(stmt).rowcount == 1
        if deleted:
            logger.info(f"Deleted project {project_id}")
        return deleted

    def _fetch_materials(self, conn: Connection, project_id: int) -> list[Material]:
        stmt = (
            select(material_table)
            .where(material_table.c.project_id == project_id)
            .order_by(material_table.c.material_id)
        )
        return [extract(row, Material) for row in conn.execute(stmt).all()]

    def _fetch_steps(self, conn: Connection, project_id: int) -> list[Step]:
        stmt = (
            select(step_table)
            .where(step_table.c.project_id == project_id)
            .order_by(step_table.c.step_order, step_table.c.step_id)
        )
        return [extract(row, Step) for row in conn.execute(stmt).all()]

    def _fetch_categories(self, conn: Connection, project_id: int) -> list[Category]:
        stmt = (
            select(category_table)
            .join(
                project_category_table,
                category_table.c.category_id == project_category_table.c.category_id,
            )
            .where(project_category_table.c.project_id == project_id)
            .order_by(category_table.c.category_name)
        )
        return [extract(row, Category) for row in conn.execute(stmt).all()]
