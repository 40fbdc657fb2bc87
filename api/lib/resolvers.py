"""
Registry resolvers

Each resolver runs one statement against one registry source for an
identity key and decodes the first returned row. Absence of a row is
reported as None; executor failures propagate untouched.
"""

import logging
from typing import List, Optional, Tuple

from .executor import QueryExecutor
from .normalizers import (
    decode_european_date,
    format_geo_location,
    format_schedule,
    normalize_calendar_date,
    truncate_event_date,
)
from .queries import (
    GEOGRAPHY_SCHEMA,
    GEOGRAPHY_SQL,
    MOVEMENTS_SCHEMA,
    MOVEMENTS_SQL,
    PERSON_SCHEMA,
    PERSON_SQL,
    ROLL_SCHEMA,
    ROLL_SQL,
    STATION_ROLE_SCHEMA,
    STATION_ROLE_SQL,
)
from .response_models import (
    NO_APLICA,
    NO_APLICA_CENTRO,
    GeoLocation,
    IdentityKey,
    PersonRecord,
    RegistryMovement,
    RollEntry,
    StationRole,
)
from .row_decoder import decode_row

logger = logging.getLogger(__name__)


def resolve_identity(executor: QueryExecutor, key: IdentityKey) -> Optional[PersonRecord]:
    """
    Look up the primary person record and its objection status.

    Returns:
        PersonRecord, or None if the key has no person record. When the
        source holds several rows for the key the first one wins.
    """
    rows = executor.execute(PERSON_SQL, key.as_params())
    if not rows:
        return None
    if len(rows) > 1:
        logger.warning(f"{len(rows)} person rows for {key.nacionalidad}-{key.cedula}, using first")

    row = decode_row(rows[0], PERSON_SCHEMA)
    objection = row["status_objecion"]

    return PersonRecord(
        primer_nombre=row["primer_nombre"],
        segundo_nombre=row["segundo_nombre"],
        primer_apellido=row["primer_apellido"],
        segundo_apellido=row["segundo_apellido"],
        fecha_nacimiento=normalize_calendar_date(row["fecha_nacimiento_4"]),
        codigo_objecion=str(objection) if objection is not None else None,
        descripcion_objecion=row["descripcion_objecion"],
    )


def resolve_roll(executor: QueryExecutor, key: IdentityKey) -> Optional[RollEntry]:
    """Look up the ballot-roll assignment, or None if the person has none."""
    rows = executor.execute(ROLL_SQL, key.as_params())
    if not rows:
        return None

    row = decode_row(rows[0], ROLL_SCHEMA)
    return RollEntry(
        numero_mesa=row["nu_mesa"],
        numero_pagina=row["nu_pagina"],
        numero_renglon=row["nu_renglon"],
        edad_ultimo_evento=row["nu_edad_al_evento"],
        fecha_ultimo_evento=truncate_event_date(row["fe_evento"]),
        cod_estado=row["cod_estado"],
        cod_municipio=row["cod_municipio"],
        cod_parroquia=row["cod_parroquia"],
        cod_centro=row["nu_centro"],
    )


def resolve_geography(
    executor: QueryExecutor, codes: Tuple[int, int, int, int]
) -> Optional[GeoLocation]:
    """
    Resolve (estado, municipio, parroquia, centro) codes into display names.

    Returns:
        GeoLocation, or None when no voting center matches all four codes
    """
    cod_estado, cod_municipio, cod_parroquia, cod_centro = codes
    rows = executor.execute(
        GEOGRAPHY_SQL,
        {
            "codigo_centro": cod_centro,
            "cod_estado": cod_estado,
            "cod_municipio": cod_municipio,
            "cod_parroquia": cod_parroquia,
        },
    )
    if not rows:
        logger.info(f"No voting center for codes {codes}")
        return None

    row = decode_row(rows[0], GEOGRAPHY_SCHEMA)
    return GeoLocation(
        estado=format_geo_location(cod_estado, row["des_estado"]),
        municipio=format_geo_location(cod_municipio, row["des_municipio"]),
        parroquia=format_geo_location(cod_parroquia, row["des_parroquia"]),
        nombre_centro=row["nombre"],
        direccion_centro=row["direccion"],
    )


def resolve_station_role(executor: QueryExecutor, key: IdentityKey) -> Optional[StationRole]:
    """
    Look up an active polling-station staff assignment.

    Null cells in a found assignment take the same values as the
    not-applicable record.
    """
    rows = executor.execute(STATION_ROLE_SQL, key.as_params())
    if not rows:
        return None

    row = decode_row(rows[0], STATION_ROLE_SCHEMA)
    return StationRole(
        numero_mesa=row["mesa"] if row["mesa"] is not None else 0,
        cargo=row["descripcion_cargo"] or NO_APLICA,
        centro_capacitacion=row["centrocap"] or NO_APLICA_CENTRO,
        nombre_centro_capacitacion=row["nombre_centro_capacitacion"] or NO_APLICA,
        fecha_inicio_capacitacion=decode_european_date(row["tallerdesde"]) or NO_APLICA,
        fecha_culminacion_capacitacion=decode_european_date(row["tallerhasta"]) or NO_APLICA,
        horario_capacitacion=format_schedule(row["horario"]) or NO_APLICA,
        direccion_centro_capacitacion=row["direccion_centro_capacitacion"] or NO_APLICA,
    )


def resolve_movements(executor: QueryExecutor, key: IdentityKey) -> List[RegistryMovement]:
    """List registry movements for a key, latest closing first."""
    rows = executor.execute(MOVEMENTS_SQL, key.as_params())

    movements = []
    for raw in rows:
        row = decode_row(raw, MOVEMENTS_SCHEMA)
        movements.append(RegistryMovement(**{k.upper(): v for k, v in row.items()}))
    return movements
