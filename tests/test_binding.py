"""Unit tests for parameter binding and row extraction."""

from decimal import Decimal

import pytest
from sqlalchemy import insert, select

from projtracker.dao.binding import bind_parameters, extract
from projtracker.dao.projects import ProjectsDao
from projtracker.exc import DbException
from projtracker.models import Category, Project
from projtracker.schema import category_table, project_table


class TestBindParameters:
    """Test cases for bind_parameters()."""

    def test_keeps_column_order(self, deck):
        """Test the mapping follows the requested column order."""
        params = bind_parameters(project_table, deck, ProjectsDao.PROJECT_COLUMNS)
        assert list(params) == [
            "project_name",
            "estimated_hours",
            "actual_hours",
            "difficulty",
            "notes",
        ]
        assert params["estimated_hours"] == Decimal("10.00")
        assert params["difficulty"] == 3

    def test_accepts_none(self):
        """Test None values are passed through for the store to judge."""
        params = bind_parameters(project_table, Project(), ("project_name", "notes"))
        assert params == {"project_name": None, "notes": None}

    def test_rejects_wrong_type(self, deck):
        """Test a value of the wrong type raises DbException."""
        deck.difficulty = "hard"
        with pytest.raises(DbException, match=r"project\.difficulty"):
            bind_parameters(project_table, deck, ("difficulty",))

    def test_rejects_bool_for_integer(self, deck):
        """Test booleans are not accepted as integers."""
        deck.difficulty = True
        with pytest.raises(DbException):
            bind_parameters(project_table, deck, ("difficulty",))

    def test_rejects_unknown_column(self, deck):
        """Test a column the table lacks raises DbException."""
        with pytest.raises(DbException, match="has no column"):
            bind_parameters(project_table, deck, ("materials",))


class TestExtract:
    """Test cases for extract()."""

    def test_builds_entity_from_row(self, engine):
        """Test row columns fill the matching dataclass fields."""
        with engine.begin() as conn:
            conn.execute(insert(category_table).values(category_name="Garden"))
            row = conn.execute(select(category_table)).one()
        category = extract(row, Category)
        assert category == Category(category_id=1, category_name="Garden")

    def test_leaves_child_collections_empty(self, engine, deck):
        """Test fields without a column keep their defaults."""
        with engine.begin() as conn:
            conn.execute(
                insert(project_table).values(
                    bind_parameters(project_table, deck, ProjectsDao.PROJECT_COLUMNS)
                )
            )
            row = conn.execute(select(project_table)).one()
        project = extract(row, Project)
        assert project.project_name == "Deck"
        assert project.estimated_hours == Decimal("10.00")
        assert project.materials == []
        assert project.steps == []
        assert project.categories == []
