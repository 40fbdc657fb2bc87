"""
Elector search query builder

Turns a SearchFilterSet into a parametrized query over the denormalized
search view. Every accepted filter contributes one bound parameter and one
"AND <column> = $<name>" fragment; values are always bound as strings and
non-text columns are cast so comparisons do not depend on storage types.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List

from .errors import RequestValidationError, ValidationErrorKind
from .normalizers import normalize_calendar_date
from .queries import SEARCH_COLUMNS, SEARCH_VIEW
from .response_models import CEDULA_MAX, CEDULA_MIN, SearchFilterSet

logger = logging.getLogger(__name__)

NAME_FIELDS = ("primer_nombre", "segundo_nombre", "primer_apellido", "segundo_apellido")


@dataclass
class SearchQuery:
    """Validated predicate fragments and their parameter bindings."""

    predicates: List[str] = field(default_factory=list)
    params: Dict[str, str] = field(default_factory=dict)

    def add(self, name: str, column_expr: str, value: str) -> None:
        self.predicates.append(f"AND {column_expr} = ${name}")
        self.params[name] = value

    def to_sql(self, limit: int) -> str:
        """Render the full SELECT over the search view."""
        select_clause = ", ".join(SEARCH_COLUMNS)
        where_clause = "\n  ".join(self.predicates)
        return (
            f"SELECT {select_clause}\n"
            f"FROM {SEARCH_VIEW}\n"
            f"WHERE 1 = 1\n  {where_clause}\n"
            f"ORDER BY cedula\n"
            f"LIMIT {int(limit)}"
        )


class ElectorSearchQueryBuilder:
    """Build validated search queries from optional filters."""

    def build(self, filters: SearchFilterSet) -> SearchQuery:
        """
        Validate filters and build the query.

        Rules run in a fixed order: nationality, national ID, birth date,
        the four name fields, then voting-center code.

        Args:
            filters: Caller-supplied filters

        Returns:
            SearchQuery with at least one predicate

        Raises:
            RequestValidationError: NO_FILTER_PROVIDED, INVALID_IDENTIFIER
                                    or INVALID_DATE
        """
        if filters.is_blank():
            raise RequestValidationError(
                ValidationErrorKind.NO_FILTER_PROVIDED,
                "Debe indicar al menos un criterio de busqueda",
            )

        query = SearchQuery()
        self._add_nationality(query, filters.nacionalidad)
        self._add_cedula(query, filters.cedula)
        self._add_birth_date(query, filters.fecha_nacimiento)
        for name in NAME_FIELDS:
            self._add_name(query, name, getattr(filters, name))
        self._add_voting_center(query, filters.codigo_centro)

        if not query.predicates:
            raise RequestValidationError(
                ValidationErrorKind.NO_FILTER_PROVIDED,
                "Ningun criterio de busqueda es valido",
            )

        logger.debug(f"Built search with filters: {sorted(query.params)}")
        return query

    def _add_nationality(self, query: SearchQuery, value) -> None:
        if value is None:
            return
        nationality = str(value).strip().upper()
        if nationality in ("V", "E"):
            query.add("nacionalidad", "nacionalidad", nationality)
        elif nationality:
            logger.info(f"Ignoring nationality filter: {value!r}")

    def _add_cedula(self, query: SearchQuery, value) -> None:
        if value is None or not str(value).strip():
            return
        try:
            cedula = int(str(value).strip())
        except ValueError:
            raise RequestValidationError(
                ValidationErrorKind.INVALID_IDENTIFIER, "cedula invalida"
            )
        if cedula < CEDULA_MIN or cedula > CEDULA_MAX:
            raise RequestValidationError(
                ValidationErrorKind.INVALID_IDENTIFIER, "cedula invalida"
            )
        query.add("cedula", "CAST(cedula AS VARCHAR)", str(cedula))

    def _add_birth_date(self, query: SearchQuery, value) -> None:
        if value is None or not value.strip():
            return
        normalized = normalize_calendar_date(value)
        if normalized is None:
            raise RequestValidationError(
                ValidationErrorKind.INVALID_DATE,
                f"fecha_nacimiento invalida: {value}",
            )
        query.add("fecha_nacimiento", "CAST(fecha_nacimiento AS VARCHAR)", normalized)

    def _add_name(self, query: SearchQuery, name: str, value) -> None:
        if value is None or not value.strip():
            return
        query.add(name, f"UPPER({name})", value.strip().upper())

    def _add_voting_center(self, query: SearchQuery, value) -> None:
        if value is None or not value.strip():
            return
        query.add("codigo_centro", "CAST(codigo_centro AS VARCHAR)", value)
