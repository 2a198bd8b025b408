"""Services package initialization."""

from projtracker.services.projects import ProjectsService

__all__ = ["ProjectsService"]
