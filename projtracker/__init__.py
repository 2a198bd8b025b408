"""Console project tracker backed by a relational store."""

__version__ = "0.1.0"
