"""
Lambda handler: GET /v1/re/elector

Aggregated elector record: person, roll assignment, voting-center geography
and polling-station role.
"""

import logging
from api.lib import (
    RegistryError,
    lookup_elector,
    parse_query_params,
    parse_sections,
    registry_error_response,
    success_response,
    error_response,
)
from api.lib.runtime import get_executor

logger = logging.getLogger()
logger.setLevel(logging.INFO)


def handler(event, context):
    """
    GET /v1/re/elector?nacionalidad=V&cedula=28524669

    Query parameters:
    - nacionalidad: V or E
    - cedula: national ID number
    - secciones: optional comma-separated subset of
      persona, cuaderno, geografia, miembro_mesa
    """
    try:
        query_params = parse_query_params(event)
        sections = parse_sections(query_params.get('secciones'))

        logger.info(f"Fetching elector: {query_params.get('nacionalidad')}-{query_params.get('cedula')}")

        result = lookup_elector(
            get_executor(),
            query_params.get('nacionalidad'),
            query_params.get('cedula'),
            sections=sections,
        )

        return success_response(
            result.to_response(),
            metadata={'completeness': result.completeness.value}
        )

    except RegistryError as e:
        return registry_error_response(e)
    except Exception as e:
        logger.error(f"Unexpected error fetching elector: {e}", exc_info=True)
        return error_response("Error interno consultando el registro", 500)
