"""
Lambda runtime wiring

Builds the configuration and query executor once per execution
environment so warm invocations reuse the same DuckDB connection.
"""

import logging
from typing import Optional

from .config import RegistryConfig
from .executor import DuckDBQueryExecutor

logger = logging.getLogger(__name__)

_CONFIG: Optional[RegistryConfig] = None
_EXECUTOR: Optional[DuckDBQueryExecutor] = None


def get_config() -> RegistryConfig:
    global _CONFIG
    if _CONFIG is None:
        _CONFIG = RegistryConfig.from_env()
        logging.getLogger().setLevel(_CONFIG.log_level)
    return _CONFIG


def get_executor() -> DuckDBQueryExecutor:
    global _EXECUTOR
    if _EXECUTOR is None:
        _EXECUTOR = DuckDBQueryExecutor.from_config(get_config())
        logger.info("Registry executor initialized")
    return _EXECUTOR


def reset() -> None:
    """Drop cached config and executor (closing the connection)."""
    global _CONFIG, _EXECUTOR
    if _EXECUTOR is not None:
        _EXECUTOR.close()
    _CONFIG = None
    _EXECUTOR = None
