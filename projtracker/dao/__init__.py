"""Data-access layer: transactions, parameter binding and the projects DAO."""

from projtracker.dao.binding import bind_parameters, extract
from projtracker.dao.projects import ProjectsDao
from projtracker.dao.transaction import run_in_transaction, transaction

__all__ = [
    "ProjectsDao",
    "bind_parameters",
    "extract",
    "run_in_transaction",
    "transaction",
]
