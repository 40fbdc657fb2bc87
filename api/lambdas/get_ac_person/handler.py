"""
Lambda handler: GET /v1/ac/{nacionalidad}/{cedula}

Names-only view of an elector, in the key order the AC front end expects.
"""

import logging
from api.lib import (
    ElectorSection,
    RegistryError,
    lookup_elector,
    parse_path_params,
    registry_error_response,
    success_response,
    error_response,
)
from api.lib.runtime import get_executor

logger = logging.getLogger()
logger.setLevel(logging.INFO)


def handler(event, context):
    """GET /v1/ac/{nacionalidad}/{cedula} - Person record only."""
    try:
        path_params = parse_path_params(event)

        result = lookup_elector(
            get_executor(),
            path_params.get('nacionalidad'),
            path_params.get('cedula'),
            sections=[ElectorSection.PERSONA],
        )

        return success_response(result.record.to_ac_response())

    except RegistryError as e:
        return registry_error_response(e)
    except Exception as e:
        logger.error(f"Unexpected error fetching person: {e}", exc_info=True)
        return error_response("Error interno consultando el registro", 500)
