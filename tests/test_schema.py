"""Unit tests for table definitions and the FixedPoint column type."""

from decimal import Decimal

from sqlalchemy import inspect, insert, select

from projtracker.schema import FixedPoint, create_schema, metadata, project_table


class TestCreateSchema:
    """Test cases for create_schema()."""

    def test_creates_all_tables(self, engine):
        """Test every table exists after create_schema()."""
        names = set(inspect(engine).get_table_names())
        assert {
            "project",
            "material",
            "step",
            "category",
            "project_category",
        } <= names

    def test_is_idempotent(self, engine):
        """Test running it twice is harmless."""
        create_schema(engine)
        assert set(metadata.tables) <= set(inspect(engine).get_table_names())

    def test_child_tables_cascade_on_project_delete(self):
        """Test child foreign keys to project are ON DELETE CASCADE."""
        for name in ("material", "step", "project_category"):
            table = metadata.tables[name]
            fks = [
                fk
                for fk in table.foreign_keys
                if fk.column.table.name == "project"
            ]
            assert len(fks) == 1
            assert fks[0].ondelete == "CASCADE"


class TestFixedPoint:
    """Test cases for the FixedPoint column type."""

    def test_python_type_is_decimal(self):
        """Test the declared Python type is Decimal."""
        assert FixedPoint().python_type is Decimal

    def test_reads_back_two_fractional_digits(self, engine):
        """Test stored values come back as two-digit decimals."""
        with engine.begin() as conn:
            conn.execute(
                insert(project_table).values(
                    project_name="P",
                    estimated_hours=Decimal("10"),
                    actual_hours=Decimal("2.345"),
                )
            )
        with engine.connect() as conn:
            row = conn.execute(
                select(project_table.c.estimated_hours, project_table.c.actual_hours)
            ).one()
        assert row.estimated_hours == Decimal("10.00")
        assert str(row.estimated_hours) == "10.00"
        assert str(row.actual_hours) == "2.35"

    def test_none_stays_none(self, engine):
        """Test NULL is neither bound nor read as a number."""
        with engine.begin() as conn:
            conn.execute(insert(project_table).values(project_name="P"))
        with engine.connect() as conn:
            value = conn.execute(select(project_table.c.estimated_hours)).scalar()
        assert value is None
