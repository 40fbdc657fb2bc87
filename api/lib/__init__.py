"""Shared API library initialization."""

from .config import RegistryConfig
from .executor import DuckDBQueryExecutor, QueryExecutionError
from .errors import (
    ElectorNotFoundError,
    RegistryError,
    RegistryInternalError,
    RequestValidationError,
    ValidationErrorKind,
)
from .elector_service import lookup_elector, search_electors, list_registry_movements
from .response_formatter import (
    success_response,
    error_response,
    registry_error_response,
    clean_nan_values,
)
from .filter_parser import (
    parse_query_params,
    parse_path_params,
    parse_sections,
    extract_search_filters,
)
from .response_models import ElectorSection

__all__ = [
    "RegistryConfig",
    "DuckDBQueryExecutor",
    "QueryExecutionError",
    "ElectorNotFoundError",
    "RegistryError",
    "RegistryInternalError",
    "RequestValidationError",
    "ValidationErrorKind",
    "lookup_elector",
    "search_electors",
    "list_registry_movements",
    "success_response",
    "error_response",
    "registry_error_response",
    "clean_nan_values",
    "parse_query_params",
    "parse_path_params",
    "parse_sections",
    "extract_search_filters",
    "ElectorSection",
]
