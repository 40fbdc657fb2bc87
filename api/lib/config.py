"""
Configuration for the Electoral Registry API

Values are read from the environment (and a .env file when present) once,
at cold start, and passed explicitly into the executor and service layer.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_MAX_ROWS = 500
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class RegistryConfig:
    """Connection and behaviour settings for the registry core.

    Attributes:
        database_path: DuckDB database file holding the registry tables.
                       None means an in-memory database.
        parquet_root: Local directory or s3:// prefix with one Parquet
                      folder per registry table (<root>/<schema>/<table>/).
        s3_bucket: Bucket name; used as parquet root when parquet_root is unset.
        search_max_rows: Maximum rows returned by a search.
        log_level: Logging level name for Lambda handlers.
    """

    database_path: Optional[str] = None
    parquet_root: Optional[str] = None
    s3_bucket: Optional[str] = None
    search_max_rows: int = DEFAULT_SEARCH_MAX_ROWS
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self):
        if self.search_max_rows < 1:
            raise ValueError(f"search_max_rows must be >= 1, got {self.search_max_rows}")

    @property
    def effective_parquet_root(self) -> Optional[str]:
        """Parquet root to attach, preferring an explicit root over the bucket."""
        if self.parquet_root:
            return self.parquet_root.rstrip("/")
        if self.s3_bucket:
            return f"s3://{self.s3_bucket}/registry"
        return None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RegistryConfig":
        """
        Build configuration from environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ after
                     loading a .env file if one exists.

        Returns:
            RegistryConfig

        Raises:
            ValueError: If SEARCH_MAX_ROWS is not a positive integer
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        raw_max_rows = environ.get("SEARCH_MAX_ROWS")
        if raw_max_rows:
            try:
                search_max_rows = int(raw_max_rows)
            except ValueError:
                raise ValueError(f"SEARCH_MAX_ROWS must be an integer, got {raw_max_rows!r}")
        else:
            search_max_rows = DEFAULT_SEARCH_MAX_ROWS

        config = cls(
            database_path=environ.get("REGISTRY_DB_PATH") or None,
            parquet_root=environ.get("REGISTRY_PARQUET_ROOT") or None,
            s3_bucket=environ.get("S3_BUCKET_NAME") or None,
            search_max_rows=search_max_rows,
            log_level=(environ.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
        )
        logger.debug(f"Loaded registry config: {config}")
        return config
