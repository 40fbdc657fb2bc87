"""
Filter parser for the Electoral Registry API

Parses API Gateway query/path parameters into identity keys, search filter
sets and requested record sections.
"""

import logging
from typing import Any, Dict, FrozenSet, Optional

from .errors import RequestValidationError, ValidationErrorKind
from .response_models import (
    CEDULA_MAX,
    CEDULA_MIN,
    ElectorSection,
    IdentityKey,
    SearchFilterSet,
)

logger = logging.getLogger(__name__)


def parse_nationality(raw: Any) -> str:
    """
    Normalize a nationality parameter to 'V' or 'E'.

    Only the first character counts, so 'v', ' V ' and 'Venezolano' are
    all accepted as 'V'.

    Raises:
        RequestValidationError: INVALID_NATIONALITY
    """
    value = str(raw).strip().upper() if raw is not None else ""
    nationality = value[:1]
    if nationality not in ("V", "E"):
        raise RequestValidationError(
            ValidationErrorKind.INVALID_NATIONALITY, "nacionalidad debe ser V o E"
        )
    return nationality


def parse_cedula(raw: Any) -> int:
    """
    Parse a national ID number in [1, 99_999_999].

    Raises:
        RequestValidationError: INVALID_IDENTIFIER
    """
    if isinstance(raw, bool):
        raise RequestValidationError(ValidationErrorKind.INVALID_IDENTIFIER, "cedula invalida")
    try:
        cedula = int(str(raw).strip()) if raw is not None else 0
    except ValueError:
        raise RequestValidationError(ValidationErrorKind.INVALID_IDENTIFIER, "cedula invalida")

    if cedula < CEDULA_MIN or cedula > CEDULA_MAX:
        raise RequestValidationError(ValidationErrorKind.INVALID_IDENTIFIER, "cedula invalida")
    return cedula


def parse_identity_key(nationality: Any, cedula: Any) -> IdentityKey:
    """Validate raw nationality + national ID into an IdentityKey."""
    return IdentityKey(nacionalidad=parse_nationality(nationality), cedula=parse_cedula(cedula))


def parse_sections(raw: Optional[str]) -> Optional[FrozenSet[ElectorSection]]:
    """
    Parse a comma-separated 'secciones' parameter.

    Examples:
        'persona,cuaderno'  -> {PERSONA, CUADERNO}
        None or ''          -> None (all sections)

    Unknown names are ignored with a warning.
    """
    if raw is None or not raw.strip():
        return None

    sections = set()
    for part in raw.split(","):
        name = part.strip().lower()
        if not name:
            continue
        try:
            sections.add(ElectorSection(name))
        except ValueError:
            logger.warning(f"Ignoring unknown section: {name}")
    return frozenset(sections)


def parse_query_params(event: Dict[str, Any]) -> Dict[str, Any]:
    """Extract query string parameters from an API Gateway event."""
    return dict(event.get("queryStringParameters") or {})


def parse_path_params(event: Dict[str, Any]) -> Dict[str, Any]:
    """Extract path parameters from an API Gateway event."""
    return dict(event.get("pathParameters") or {})


def extract_search_filters(query_params: Dict[str, Any]) -> SearchFilterSet:
    """Build a SearchFilterSet from query parameters, ignoring non-filter keys."""
    return SearchFilterSet.from_params(query_params)
