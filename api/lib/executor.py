"""
Query execution capability for the registry core

The core never opens connections itself: callers hand it an object
implementing QueryExecutor. DuckDBQueryExecutor is the production
implementation; it reads a DuckDB database file and/or Parquet exports of
the registry tables (local or on S3).
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Protocol

import duckdb

from .config import RegistryConfig
from .queries import REGISTRY_TABLES

logger = logging.getLogger(__name__)

Row = Dict[str, Any]


class QueryExecutionError(Exception):
    """Raised when a statement cannot be executed or its result read."""

    pass


class QueryExecutor(Protocol):
    """Anything that runs a parametrized statement and returns rows by name."""

    def execute(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> List[Row]:
        ...


class DuckDBQueryExecutor:
    """Run registry statements on a DuckDB connection."""

    def __init__(self, conn: duckdb.DuckDBPyConnection):
        """
        Initialize executor.

        Args:
            conn: Open DuckDB connection. Ownership stays with the caller.
        """
        self.conn = conn

    @classmethod
    def from_config(cls, config: RegistryConfig) -> "DuckDBQueryExecutor":
        """
        Open a connection described by a RegistryConfig.

        A database file is opened read-only. When a Parquet root is
        configured, every registry table is exposed as a view over its
        Parquet folder.
        """
        if config.database_path:
            conn = duckdb.connect(database=config.database_path, read_only=True)
        else:
            conn = duckdb.connect(database=":memory:")

        executor = cls(conn)
        parquet_root = config.effective_parquet_root
        if parquet_root:
            executor.attach_parquet_views(parquet_root)
        return executor

    def attach_parquet_views(self, parquet_root: str) -> None:
        """
        Create one view per registry table over <root>/<schema>/<table>/**/*.parquet.

        Args:
            parquet_root: Local directory or s3:// prefix
        """
        if parquet_root.startswith("s3://"):
            # Install and load httpfs extension for S3 access
            self.conn.execute("INSTALL httpfs;")
            self.conn.execute("LOAD httpfs;")

        for table in REGISTRY_TABLES:
            schema, name = table.split(".", 1)
            parquet_path = f"{parquet_root}/{schema}/{name}/**/*.parquet"
            self.conn.execute(f"CREATE SCHEMA IF NOT EXISTS {schema}")
            self.conn.execute(
                f"CREATE OR REPLACE VIEW {table} AS "
                f"SELECT * FROM read_parquet('{parquet_path}')"
            )
        logger.info(f"Attached {len(REGISTRY_TABLES)} registry views from {parquet_root}")

    def execute(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> List[Row]:
        """
        Execute a statement with named parameters.

        Args:
            sql: Statement using $name placeholders
            params: {name: value}

        Returns:
            List of {column: value} dicts (empty when no rows match)

        Raises:
            QueryExecutionError: If DuckDB rejects or fails the statement
        """
        logger.debug(f"Executing query: {sql.strip()}")

        try:
            if params:
                result = self.conn.execute(sql, dict(params)).df()
            else:
                result = self.conn.execute(sql).df()
        except duckdb.Error as e:
            raise QueryExecutionError(f"Query failed: {e}") from e

        logger.debug(f"Query returned {len(result)} rows")
        return result.to_dict("records")

    def close(self):
        """Close DuckDB connection."""
        if self.conn:
            self.conn.close()
