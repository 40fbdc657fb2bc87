"""
Lambda handler: GET /v1/re/movimientos/{nacionalidad}/{cedula}

Registry movements of an elector, latest closing first.
"""

import logging
from api.lib import (
    RegistryError,
    list_registry_movements,
    parse_path_params,
    registry_error_response,
    success_response,
    error_response,
)
from api.lib.runtime import get_executor

logger = logging.getLogger()
logger.setLevel(logging.INFO)


def handler(event, context):
    """GET /v1/re/movimientos/{nacionalidad}/{cedula} - Registry movements."""
    try:
        path_params = parse_path_params(event)

        movements = list_registry_movements(
            get_executor(),
            path_params.get('nacionalidad'),
            path_params.get('cedula'),
        )

        return success_response(movements, metadata={'count': len(movements)})

    except RegistryError as e:
        return registry_error_response(e)
    except Exception as e:
        logger.error(f"Unexpected error fetching movements: {e}", exc_info=True)
        return error_response("Error interno consultando el registro", 500)
