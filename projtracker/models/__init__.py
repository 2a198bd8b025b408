"""Data models for the project tracker."""

from projtracker.models.category import Category
from projtracker.models.material import Material
from projtracker.models.project import Project
from projtracker.models.step import Step

__all__ = ["Category", "Material", "Project", "Step"]
