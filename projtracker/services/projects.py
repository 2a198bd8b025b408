"""Projects service: existence rules on top of the DAO."""

import logging

from projtracker.dao.projects import ProjectsDao
from projtracker.exc import DoesNotExist
from projtracker.models import Project

logger = logging.getLogger(__name__)


class ProjectsService:
    """
    The operations the menu uses.

    Missing projects are reported by raising
    :class:`~projtracker.exc.DoesNotExist` instead of returning ``None`` or
    ``False``.

    Args:
        dao: The data-access object to delegate to

    """

    def __init__(self, dao: ProjectsDao) -> None:
        #: The data-access object.
        self.dao = dao

    def add_project(self, project: Project) -> Project:
        """Insert ``project``; returns it with its new ID."""
        return self.dao.insert_project(project)

    def fetch_all_projects(self) -> list[Project]:
        """All projects ordered by name, without child rows."""
        return self.dao.fetch_all_projects()

    def fetch_project_by_id(self, project_id: int) -> Project:
        """
        Fetch one project with its materials, steps and categories.

        Args:
            project_id: The project ID

        Raises:
            DoesNotExist: there is no project with that ID

        Returns:
            The project

        """
        project = self.dao.fetch_project_by_id(project_id)
        if project is None:
            raise DoesNotExist("Project", project_id)  # noqa: EM101
        return project

    def modify_project_details(self, project: Project) -> None:
        """
        Overwrite a project's details with those of ``project``.

        Args:
            project: The project with every field already set to its new
                value

        Raises:
            DoesNotExist: there is no project with ``project.project_id``

        """
        if not self.dao.modify_project_details(project):
            logger.warning(f"Update of missing project {project.project_id}")
            raise DoesNotExist("Project", project.project_id)  # noqa: EM101

    def delete_project(self, project_id: int) -> None:
        """
        Delete a project and, through the store's cascades, its child rows.

        Args:
            project_id: The project ID

        Raises:
            DoesNotExist: there is no project with that ID

        """
        if not self.dao.delete_project(project_id):
            logger.warning(f"Delete of missing project {project_id}")
            raise DoesNotExist("Project", project_id)  # noqa: EM101
