"""
Lambda handler: GET /v1/re/electores

Equality search over the denormalized elector view.
"""

import logging
from api.lib import (
    RegistryError,
    extract_search_filters,
    parse_query_params,
    registry_error_response,
    search_electors,
    success_response,
    error_response,
)
from api.lib.runtime import get_config, get_executor

logger = logging.getLogger()
logger.setLevel(logging.INFO)


def handler(event, context):
    """
    GET /v1/re/electores?primer_apellido=PEREZ&fecha_nacimiento=1999-05-12

    Query parameters (at least one required):
    - nacionalidad, cedula, fecha_nacimiento
    - primer_nombre, segundo_nombre, primer_apellido, segundo_apellido
    - codigo_centro
    """
    try:
        filters = extract_search_filters(parse_query_params(event))

        results = search_electors(get_executor(), filters, get_config())

        return success_response(results, metadata={'count': len(results)})

    except RegistryError as e:
        return registry_error_response(e)
    except Exception as e:
        logger.error(f"Unexpected search error: {e}", exc_info=True)
        return error_response("Error interno consultando el registro", 500)
