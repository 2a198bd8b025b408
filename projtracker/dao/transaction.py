"""Transaction executor: one connection and one transaction per operation."""

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TypeVar

from sqlalchemy import Connection, Engine
from sqlalchemy.exc import DBAPIError, SQLAlchemyError

from projtracker.exc import DbException, DbUnavailable

logger = logging.getLogger(__name__)

T = TypeVar("T")


@contextmanager
def transaction(engine: Engine) -> Iterator[Connection]:
    """
    Open a connection, begin a transaction, and yield the connection.

    On normal exit the transaction is committed.  If the body raises, the
    transaction is rolled back first and then:

    - SQLAlchemy errors are re-raised as :class:`~projtracker.exc.DbException`
      chained to the SQLAlchemy error;
    - anything else propagates unchanged.

    The connection is closed on every exit path.

    Example:
        .. code-block:: python

            with transaction(engine) as conn:
                conn.execute(insert(project_table).values(project_name="Deck"))

    Args:
        engine: The engine to connect through

    Raises:
        DbUnavailable: the connection could not be obtained
        DbException: a statement or the commit failed

    Yields:
        The connection, inside an open transaction

    """
    try:
        conn = engine.connect()
    except DBAPIError as e:
        logger.exception(f"Could not connect to {engine.url!r}")
        raise DbUnavailable(engine.url, e) from e

    with conn:
        trans = conn.begin()
        logger.debug("Transaction started")
        try:
            yield conn
            trans.commit()
        except SQLAlchemyError as e:
            if trans.is_active:
                trans.rollback()
            logger.warning(f"Transaction rolled back: {e!s}")
            raise DbException(str(e), e) from e
        except BaseException:
            if trans.is_active:
                trans.rollback()
            logger.debug("Transaction rolled back")
            raise
        logger.debug("Transaction committed")


def run_in_transaction(engine: Engine, body: Callable[[Connection], T]) -> T:
    """
    Call ``body`` with a connection inside :func:`transaction`.

    Args:
        engine: The engine to connect through
        body: Work to do; its return value is returned after the commit

    Returns:
        Whatever ``body`` returned

    """
    with transaction(engine) as conn:
        return body(conn)
