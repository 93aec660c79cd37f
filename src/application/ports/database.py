"""Database ports for the finance tracker.

This module defines the application-layer protocol for accessing the
hosted store's database engine. Infrastructure implementations are expected
to provide concrete adapters that satisfy this port.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the database engine of the hosted store."""

    def get_finance_engine(self) -> Engine:
        """Get the engine for the finance database.

        Returns:
            Engine: SQLAlchemy engine connected to the hosted store.
        """


__all__ = ["DatabaseEnginePort"]
