"""Shared pytest fixtures and test helpers for project tracker tests."""

from decimal import Decimal

import pytest
from sqlalchemy import insert

from projtracker.dao import ProjectsDao
from projtracker.db import create_engine_with_path
from projtracker.models import Project
from projtracker.schema import (
    category_table,
    create_schema,
    material_table,
    project_category_table,
    step_table,
)
from projtracker.services import ProjectsService


@pytest.fixture
def engine(tmp_path):
    """Create a temporary SQLite database with the schema in place."""
    engine = create_engine_with_path(tmp_path / "test.db")
    create_schema(engine)

    yield engine

    engine.dispose()


@pytest.fixture
def dao(engine):
    """A DAO bound to the temporary database."""
    return ProjectsDao(engine)


@pytest.fixture
def service(dao):
    """A service bound to the temporary database."""
    return ProjectsService(dao)


@pytest.fixture
def deck():
    """The deck project from the walkthrough, not yet inserted."""
    return Project(
        project_name="Deck",
        estimated_hours=Decimal("10.00"),
        actual_hours=Decimal("0.00"),
        difficulty=3,
        notes="build a deck",
    )


# Test helper functions (not fixtures, but available for import)


def create_test_project(dao, name="Test Project", **kwargs):
    """
    Helper to insert a project with defaults.

    Args:
        dao: ProjectsDao
        name: Project name
        **kwargs: Other Project fields

    Returns:
        The inserted Project, with its ID
    """
    kwargs.setdefault("estimated_hours", Decimal("1.00"))
    kwargs.setdefault("actual_hours", Decimal("0.00"))
    kwargs.setdefault("difficulty", 1)
    kwargs.setdefault("notes", "")
    return dao.insert_project(Project(project_name=name, **kwargs))


def add_material(engine, project_id, name="Screws", num_required=1, cost="1.00"):
    """Insert a material row and return its ID."""
    with engine.begin() as conn:
        result = conn.execute(
            insert(material_table).values(
                project_id=project_id,
                material_name=name,
                num_required=num_required,
                cost=Decimal(cost),
            )
        )
        return result.inserted_primary_key[0]


def add_step(engine, project_id, text="Do it", order=1):
    """Insert a step row and return its ID."""
    with engine.begin() as conn:
        result = conn.execute(
            insert(step_table).values(
                project_id=project_id, step_text=text, step_order=order
            )
        )
        return result.inserted_primary_key[0]


def add_category(engine, project_id, name="Outdoor"):
    """Insert a category, link it to the project, and return its ID."""
    with engine.begin() as conn:
        result = conn.execute(insert(category_table).values(category_name=name))
        category_id = result.inserted_primary_key[0]
        conn.execute(
            insert(project_category_table).values(
                project_id=project_id, category_id=category_id
            )
        )
        return category_id
