"""SQLAlchemy engine setup for the project tracker."""

from pathlib import Path
from typing import TYPE_CHECKING, Any, Final, cast

from sqlalchemy import Connection, Engine, create_engine, event
from sqlalchemy.pool import NullPool

from projtracker.utils import get_app_dir

if TYPE_CHECKING:
    import sqlite3

    from projtracker.config import DatabaseSettings

#: The default database name.
DEFAULT_DB_NAME: Final[str] = "projects.db"


def get_project_db_path() -> Path:
    """
    Get the path to the default SQLite database, creating its directory.

    The file lives in a ``projects`` folder under
    :func:`~projtracker.utils.get_app_dir`.

    Returns:
        Path to the database file

    """
    db_path = get_app_dir() / "projects"
    db_path.mkdir(parents=True, exist_ok=True)
    return db_path / DEFAULT_DB_NAME


def _install_sqlite_pragmas(engine: Engine) -> None:
    """
    Turn on foreign keys and WAL mode on every new SQLite connection.

    Foreign keys must be on for ``ON DELETE CASCADE`` to clean up a deleted
    project's materials, steps and category links.

    The pysqlite driver only emits ``BEGIN`` ahead of DML, so reads would run
    in autocommit.  Its own transaction handling is switched off here and
    ``BEGIN`` is emitted whenever SQLAlchemy begins a transaction, so every
    statement in a transaction sees the same snapshot.
    """

    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(
        dbapi_conn: "sqlite3.Connection | Any", _connection_record: Any
    ) -> None:
        """Set SQLite pragmas on connection."""
        dbapi_conn.isolation_level = None
        cursor = cast("sqlite3.Cursor", dbapi_conn.cursor())
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    @event.listens_for(engine, "begin")
    def begin_sqlite_transaction(conn: Connection) -> None:
        """Start the database transaction for reads as well as writes."""
        conn.exec_driver_sql("BEGIN")


def create_engine_with_path(db_path: Path | None = None, echo: bool = False) -> Engine:
    """
    Create a SQLAlchemy engine for a SQLite file.

    Args:
        db_path: Optional path to database file. If None, uses default path.

    Keyword Args:
        echo: Log every statement SQLAlchemy emits

    Returns:
        SQLAlchemy engine

    """
    if db_path is None:
        db_path = get_project_db_path()

    # Create the file if it doesn't exist
    db_path.touch(exist_ok=True)

    # One real connection per operation, closed when the operation ends
    engine = create_engine(f"sqlite:///{db_path}", poolclass=NullPool, echo=echo)
    _install_sqlite_pragmas(engine)
    return engine


def create_engine_from_settings(
    settings: "DatabaseSettings", echo: bool = False
) -> Engine:
    """
    Create a SQLAlchemy engine from :class:`~projtracker.config.DatabaseSettings`.

    No connection is made here; a store that cannot be reached is reported
    by the first operation as :class:`~projtracker.exc.DbUnavailable`.

    Args:
        settings: Where the store lives

    Keyword Args:
        echo: Log every statement SQLAlchemy emits

    Returns:
        SQLAlchemy engine

    """
    url = settings.sqlalchemy_url()
    if url is None:
        return create_engine_with_path(echo=echo)
    engine = create_engine(url, poolclass=NullPool, echo=echo)
    if engine.dialect.name == "sqlite":
        _install_sqlite_pragmas(engine)
    return engine
