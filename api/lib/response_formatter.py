"""
Response formatting utilities for the Electoral Registry API

Provides consistent JSON response structure with CORS headers.
"""

from typing import Dict, Any, Optional, List, Union
import json
import math
import logging
from pathlib import Path

from pydantic import BaseModel

from .errors import (
    ElectorNotFoundError,
    RegistryError,
    RegistryInternalError,
    RequestValidationError,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Error interno consultando el registro"

# Load version at module initialization (cached for all Lambda invocations)
_VERSION_CACHE = None


def _load_version() -> str:
    """
    Load version string from version.json file.

    Falls back to 'unknown' if file not found.
    """
    global _VERSION_CACHE

    if _VERSION_CACHE is not None:
        return _VERSION_CACHE

    possible_paths = [
        Path("/var/task/version.json"),  # Lambda task root
        Path(__file__).parent.parent / "version.json",  # Relative to lib
    ]

    for version_path in possible_paths:
        try:
            if version_path.exists():
                with open(version_path, "r") as f:
                    _VERSION_CACHE = json.load(f).get("version", "unknown")
                    logger.info(f"Loaded version {_VERSION_CACHE} from {version_path}")
                    return _VERSION_CACHE
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to load version from {version_path}: {e}")

    _VERSION_CACHE = "unknown"
    return _VERSION_CACHE


def clean_nan_values(data: Union[Dict, List, Any]) -> Union[Dict, List, Any]:
    """
    Recursively replace NaN/Inf floats with None.

    Registry rows come back through pandas, where a NULL numeric cell is NaN.
    """
    if isinstance(data, dict):
        return {k: clean_nan_values(v) for k, v in data.items()}
    elif isinstance(data, list):
        return [clean_nan_values(item) for item in data]

    if isinstance(data, float) and (math.isnan(data) or math.isinf(data)):
        return None
    return data


class NaNToNoneEncoder(json.JSONEncoder):
    """Encodes NaN/Inf floats as null for valid JSON output."""

    def encode(self, obj):
        return super().encode(clean_nan_values(obj))


def _to_jsonable(data: Any) -> Any:
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json", exclude_none=False)
    if isinstance(data, list):
        return [_to_jsonable(item) for item in data]
    return data


def success_response(
    data: Any, status_code: int = 200, metadata: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """
    Build success response with consistent structure.

    Args:
        data: Response data (dict, list, or Pydantic model / list of models)
        status_code: HTTP status code (default 200)
        metadata: Optional metadata dict

    Returns:
        API Gateway response dict with CORS headers
    """
    body = {
        "success": True,
        "data": _to_jsonable(data),
        "version": _load_version(),
    }

    if metadata:
        body["metadata"] = metadata

    return {
        "statusCode": status_code,
        "headers": _get_cors_headers(),
        "body": json.dumps(body, cls=NaNToNoneEncoder, default=str, allow_nan=False),
    }


def error_response(
    message: str, status_code: int = 400, details: Optional[Any] = None
) -> Dict[str, Any]:
    """
    Build error response with consistent structure.

    Args:
        message: Error message
        status_code: HTTP status code (400, 404, 500, etc.)
        details: Optional error details

    Returns:
        API Gateway response dict

    Example:
        error_response(
            "Elector no encontrado",
            status_code=404,
            details={'nacionalidad': 'V', 'cedula': 28524669}
        )
    """
    body = {"success": False, "error": {"message": message, "code": status_code}}

    if details:
        body["error"]["details"] = details

    return {
        "statusCode": status_code,
        "headers": _get_cors_headers(),
        "body": json.dumps(body, cls=NaNToNoneEncoder, default=str, allow_nan=False),
    }


def registry_error_response(error: RegistryError) -> Dict[str, Any]:
    """
    Map a registry error onto an error response.

    Internal errors only expose the failing stage, never the underlying
    exception text.
    """
    if isinstance(error, RequestValidationError):
        return error_response(error.message, 400, {"kind": error.kind.value})
    if isinstance(error, ElectorNotFoundError):
        return error_response(str(error), 404, error.key.model_dump())
    if isinstance(error, RegistryInternalError):
        return error_response(INTERNAL_ERROR_MESSAGE, 500, {"stage": error.stage})
    return error_response(INTERNAL_ERROR_MESSAGE, error.status_code)


def _get_cors_headers() -> Dict[str, str]:
    """
    Get CORS headers for API responses.

    Returns:
        Dict of CORS headers
    """
    return {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Methods": "GET, OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token",
        "Content-Type": "application/json",
    }
