"""Table definitions for the projects store."""

import logging
from decimal import Decimal
from typing import Any

from sqlalchemy import (
    Column,
    Engine,
    ForeignKey,
    Integer,
    MetaData,
    Numeric,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
)
from sqlalchemy.types import TypeDecorator

from projtracker.utils import to_fixed_point

logger = logging.getLogger(__name__)


class FixedPoint(TypeDecorator):
    """
    A ``DECIMAL(7, 2)`` column that always binds and reads two fractional
    digits.

    The underlying :class:`~sqlalchemy.types.Numeric` is declared with
    ``asdecimal=False`` so that backends without native decimals (SQLite)
    do not warn; the conversion back to :class:`~decimal.Decimal` happens
    here instead.
    """

    impl = Numeric
    cache_ok = True

    def __init__(self, precision: int = 7) -> None:
        super().__init__(precision=precision, scale=2, asdecimal=False)

    @property
    def python_type(self) -> type:
        return Decimal

    def process_bind_param(self, value: Any, dialect: Any) -> Decimal | None:
        if value is None:
            return None
        return to_fixed_point(value)

    def process_result_value(self, value: Any, dialect: Any) -> Decimal | None:
        if value is None:
            return None
        return to_fixed_point(value)


#: The metadata every table below is registered on.
metadata = MetaData()

project_table = Table(
    "project",
    metadata,
    Column("project_id", Integer, primary_key=True, autoincrement=True),
    Column("project_name", String(128), nullable=False),
    Column("estimated_hours", FixedPoint()),
    Column("actual_hours", FixedPoint()),
    Column("difficulty", Integer),
    Column("notes", Text),
)

category_table = Table(
    "category",
    metadata,
    Column("category_id", Integer, primary_key=True, autoincrement=True),
    Column("category_name", String(128), nullable=False, unique=True),
)

project_category_table = Table(
    "project_category",
    metadata,
    Column(
        "project_id",
        Integer,
        ForeignKey("project.project_id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "category_id",
        Integer,
        ForeignKey("category.category_id", ondelete="CASCADE"),
        nullable=False,
    ),
    PrimaryKeyConstraint("project_id", "category_id"),
)

material_table = Table(
    "material",
    metadata,
    Column("material_id", Integer, primary_key=True, autoincrement=True),
    Column(
        "project_id",
        Integer,
        ForeignKey("project.project_id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("material_name", String(128), nullable=False),
    Column("num_required", Integer),
    Column("cost", FixedPoint()),
)

step_table = Table(
    "step",
    metadata,
    Column("step_id", Integer, primary_key=True, autoincrement=True),
    Column(
        "project_id",
        Integer,
        ForeignKey("project.project_id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("step_text", Text, nullable=False),
    Column("step_order", Integer, nullable=False),
)


def create_schema(engine: Engine) -> None:
    """
    Create any of the five tables that do not exist yet.

    The data-access operations assume the schema is already there; this is
    only used to bootstrap a local database and in tests.

    Args:
        engine: The engine to create the tables through

    """
    metadata.create_all(engine, checkfirst=True)
    logger.info(f"Ensured schema on {engine.url.render_as_string(hide_password=True)}")
