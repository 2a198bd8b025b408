"""
Typed parameter binding and row-to-entity extraction.

These are plain functions rather than a base class: any DAO can use them
with any dataclass entity whose field names match its table's column
names.
"""

from collections.abc import Sequence
from dataclasses import fields
from typing import Any, TypeVar

from sqlalchemy import Row, Table

from projtracker.exc import DbException

T = TypeVar("T")


def bind_parameters(
    table: Table, entity: object, columns: Sequence[str]
) -> dict[str, Any]:
    """
    Collect the values of ``columns`` from ``entity`` for a statement on
    ``table``.

    Each value is checked against the Python type of its column, so a
    mismatch fails here rather than being coerced silently by the driver.
    ``None`` is always accepted; ``NOT NULL`` is the store's to enforce.
    The returned dict keeps the order of ``columns``, which becomes the
    column order of an ``INSERT``.

    Args:
        table: The table the statement targets
        entity: The object to read attributes from
        columns: Column names, in statement order

    Raises:
        DbException: a column does not exist, or a value has the wrong type

    Returns:
        A mapping of column name to value, for ``.values()``

    """
    params: dict[str, Any] = {}
    for name in columns:
        if name not in table.c:
            msg = f"Table {table.name} has no column {name}"
            raise DbException(msg)
        value = getattr(entity, name)
        expected = table.c[name].type.python_type
        # bool is an int subclass but never a valid column value here
        if value is not None and (
            isinstance(value, bool) or not isinstance(value, expected)
        ):
            msg = (
                f"Cannot bind {type(value).__name__} value {value!r} to "
                f"{table.name}.{name} ({expected.__name__})"
            )
            raise DbException(msg)
        params[name] = value
    return params


def extract(row: Row, entity_type: type[T]) -> T:
    """
    Build an ``entity_type`` from a result row.

    Every init field of the dataclass whose name is a column in the row is
    filled from it; the rest (child collections, for instance) keep their
    defaults.

    Args:
        row: The result row
        entity_type: A dataclass type

    Returns:
        The new entity

    """
    mapping = row._mapping
    kwargs = {
        f.name: mapping[f.name]
        for f in fields(entity_type)  # type: ignore[arg-type]
        if f.init and f.name in mapping
    }
    return entity_type(**kwargs)
