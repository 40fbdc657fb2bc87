"""
Electoral registry operations

The three operations exposed to the request layer. Each takes the query
executor (and configuration where relevant) explicitly and returns model
objects or raises a RegistryError subclass.
"""

import logging
from typing import Any, Iterable, List, Mapping, Optional, Union

from .assembler import AssembledElector, ElectorAssembler
from .config import RegistryConfig
from .errors import RegistryInternalError
from .executor import QueryExecutionError, QueryExecutor
from .filter_parser import parse_identity_key
from .normalizers import normalize_calendar_date
from .query_builder import ElectorSearchQueryBuilder
from .queries import SEARCH_SCHEMA
from .resolvers import resolve_movements
from .response_models import (
    ElectorSection,
    RegistryMovement,
    SearchFilterSet,
    SearchResultRow,
)
from .row_decoder import RowSchemaError, decode_row

logger = logging.getLogger(__name__)


def lookup_elector(
    executor: QueryExecutor,
    nationality: Any,
    cedula: Any,
    sections: Optional[Iterable[ElectorSection]] = None,
) -> AssembledElector:
    """
    Look up one elector across all registry sources.

    Args:
        executor: Query executor for the registry database
        nationality: 'V' or 'E' (case and surrounding spaces ignored)
        cedula: National ID number, 1..99_999_999
        sections: Record sections to populate (default: all)

    Returns:
        AssembledElector with the merged record and its completeness

    Raises:
        RequestValidationError: Bad nationality or national ID
        ElectorNotFoundError: No person record for the key
        RegistryInternalError: A registry query failed
    """
    key = parse_identity_key(nationality, cedula)
    return ElectorAssembler(executor).assemble(key, sections)


def search_electors(
    executor: QueryExecutor,
    filters: Union[SearchFilterSet, Mapping[str, Any]],
    config: Optional[RegistryConfig] = None,
) -> List[SearchResultRow]:
    """
    Search the denormalized elector view by equality filters.

    Args:
        executor: Query executor for the registry database
        filters: SearchFilterSet or a mapping of filter name to value
        config: Supplies the row cap (default RegistryConfig())

    Returns:
        Matching rows, possibly empty

    Raises:
        RequestValidationError: No usable filter, bad national ID or bad date
        RegistryInternalError: The search query failed
    """
    config = config or RegistryConfig()
    if not isinstance(filters, SearchFilterSet):
        filters = SearchFilterSet.from_params(filters)

    query = ElectorSearchQueryBuilder().build(filters)

    try:
        rows = executor.execute(query.to_sql(config.search_max_rows), query.params)
        decoded = [decode_row(row, SEARCH_SCHEMA) for row in rows]
    except (QueryExecutionError, RowSchemaError) as e:
        logger.error(f"Elector search failed: {e}", exc_info=True)
        raise RegistryInternalError("search") from e

    results = []
    for row in decoded:
        row["fecha_nacimiento"] = normalize_calendar_date(row["fecha_nacimiento"])
        results.append(SearchResultRow(**row))

    logger.info(f"Search on {sorted(query.params)} returned {len(results)} rows")
    return results


def list_registry_movements(
    executor: QueryExecutor, nationality: Any, cedula: Any
) -> List[RegistryMovement]:
    """
    List the registry movements of an elector, latest closing first.

    Raises:
        RequestValidationError: Bad nationality or national ID
        RegistryInternalError: The movements query failed
    """
    key = parse_identity_key(nationality, cedula)
    try:
        return resolve_movements(executor, key)
    except (QueryExecutionError, RowSchemaError) as e:
        logger.error(f"Movement lookup failed for {key.nacionalidad}-{key.cedula}: {e}", exc_info=True)
        raise RegistryInternalError("movements") from e
