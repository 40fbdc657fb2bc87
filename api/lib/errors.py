"""
Error taxonomy for the Electoral Registry API

Validation and not-found outcomes are reported to callers as-is; anything
raised while talking to the registry sources is wrapped in
RegistryInternalError so query text and schema names never reach a response.
"""

from enum import Enum
from typing import Any, Optional


class ValidationErrorKind(str, Enum):
    """Kinds of malformed requests"""

    NO_FILTER_PROVIDED = "NoFilterProvided"
    INVALID_IDENTIFIER = "InvalidIdentifier"
    INVALID_DATE = "InvalidDate"
    INVALID_NATIONALITY = "InvalidNationality"


class RegistryError(Exception):
    """Base exception for registry lookups."""

    status_code = 500


class RequestValidationError(RegistryError):
    """Raised before any query runs when the request is malformed."""

    status_code = 400

    def __init__(self, kind: ValidationErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message


class ElectorNotFoundError(RegistryError):
    """Raised when the identity key has no primary person record."""

    status_code = 404

    def __init__(self, key: Any):
        super().__init__("Elector no encontrado")
        self.key = key


class RegistryInternalError(RegistryError):
    """Raised when a registry source fails during a given stage."""

    status_code = 500

    def __init__(self, stage: str, message: Optional[str] = None):
        super().__init__(message or f"Registry lookup failed during {stage}")
        self.stage = stage
