"""
Pydantic models for the Electoral Registry API

Field names are the JSON keys consumed by the existing front end and must
not be renamed. Usage:

    from api.lib.response_models import IdentityKey, ElectorRecord

    key = IdentityKey(nacionalidad="V", cedula=28524669)
    record = ElectorRecord(nacionalidad=key.nacionalidad, cedula=key.cedula)
    return success_response(record.to_response(ALL_SECTIONS))
"""

from enum import Enum
from typing import Any, Dict, Iterable, Literal, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

NO_APLICA = "No aplica"
NO_APLICA_CENTRO = "0"
CEDULA_MIN = 1
CEDULA_MAX = 99_999_999


# ============================================================================
# Enums
# ============================================================================


class Nationality(str, Enum):
    """Nationality letter of the identity key"""

    VENEZOLANO = "V"
    EXTRANJERO = "E"


class ElectorSection(str, Enum):
    """Sections of an elector record that a caller can request"""

    PERSONA = "persona"
    CUADERNO = "cuaderno"
    GEOGRAFIA = "geografia"
    MIEMBRO_MESA = "miembro_mesa"


ALL_SECTIONS = frozenset(ElectorSection)


# ============================================================================
# Identity
# ============================================================================


class IdentityKey(BaseModel):
    """Nationality + national ID, the join key across registry sources"""

    nacionalidad: Literal["V", "E"] = Field(..., description="V or E")
    cedula: int = Field(..., ge=CEDULA_MIN, le=CEDULA_MAX, description="National ID number")

    model_config = ConfigDict(frozen=True)

    def as_params(self) -> Dict[str, Any]:
        return {"nacionalidad": self.nacionalidad, "cedula": self.cedula}


class PersonRecord(BaseModel):
    """Primary person record with objection status"""

    primer_nombre: Optional[str] = None
    segundo_nombre: Optional[str] = None
    primer_apellido: Optional[str] = None
    segundo_apellido: Optional[str] = None
    fecha_nacimiento: Optional[str] = Field(None, description="YYYY-MM-DD")
    codigo_objecion: Optional[str] = None
    descripcion_objecion: Optional[str] = None


# ============================================================================
# Roll and geography
# ============================================================================


class RollEntry(BaseModel):
    """Ballot-roll assignment of a person"""

    numero_mesa: Optional[int] = None
    numero_pagina: Optional[int] = None
    numero_renglon: Optional[int] = None
    edad_ultimo_evento: Optional[int] = None
    fecha_ultimo_evento: Optional[str] = Field(None, description="YYYY-MM-DD")
    cod_estado: Optional[int] = None
    cod_municipio: Optional[int] = None
    cod_parroquia: Optional[int] = None
    cod_centro: Optional[int] = None

    @property
    def geo_codes(self) -> Optional[Tuple[int, int, int, int]]:
        """(estado, municipio, parroquia, centro) when all four are known."""
        codes = (self.cod_estado, self.cod_municipio, self.cod_parroquia, self.cod_centro)
        if any(c is None for c in codes):
            return None
        return codes


class GeoLocation(BaseModel):
    """Formatted geographic location of a voting center"""

    estado: str = Field(..., description="'13 - MIRANDA'")
    municipio: str = Field(..., description="'08 - PLAZA'")
    parroquia: str = Field(..., description="'01 - GUARENAS'")
    nombre_centro: Optional[str] = None
    direccion_centro: Optional[str] = None


# ============================================================================
# Station role
# ============================================================================


class StationRole(BaseModel):
    """Polling-station staff assignment (miembro de mesa)"""

    numero_mesa: int = 0
    cargo: str = NO_APLICA
    centro_capacitacion: str = NO_APLICA_CENTRO
    nombre_centro_capacitacion: str = NO_APLICA
    fecha_inicio_capacitacion: str = Field(NO_APLICA, description="DD-MM-YYYY")
    fecha_culminacion_capacitacion: str = Field(NO_APLICA, description="DD-MM-YYYY")
    horario_capacitacion: str = Field(NO_APLICA, description="HH:MM-HH:MM")
    direccion_centro_capacitacion: str = NO_APLICA

    @classmethod
    def not_applicable(cls) -> "StationRole":
        """Sentinel record for electors without a station assignment."""
        return cls()


# ============================================================================
# Aggregated record
# ============================================================================


SECTION_FIELDS: Mapping[ElectorSection, Tuple[str, ...]] = {
    ElectorSection.PERSONA: (
        "fecha_nacimiento",
        "primer_nombre",
        "segundo_nombre",
        "primer_apellido",
        "segundo_apellido",
        "codigo_objecion",
        "descripcion_objecion",
    ),
    ElectorSection.CUADERNO: (
        "fecha_ultimo_evento",
        "edad_ultimo_evento",
        "numero_mesa",
        "numero_pagina",
        "numero_renglon",
        "codigo_centro",
    ),
    ElectorSection.GEOGRAFIA: (
        "estado",
        "municipio",
        "parroquia",
        "nombre_centro",
        "direccion_centro",
    ),
    ElectorSection.MIEMBRO_MESA: (
        "miembro_mesa_numero_mesa",
        "miembro_mesa_cargo",
        "miembro_mesa_centro_capacitacion",
        "miembro_mesa_nombre_centro_capacitacion",
        "miembro_mesa_fecha_inicio_capacitacion",
        "miembro_mesa_fecha_culminacion_capacitacion",
        "miembro_mesa_horario_capacitacion",
        "miembro_mesa_direccion_centro_capacitacion",
    ),
}


# Key order of the person-only AC endpoint
AC_PERSON_FIELDS: Tuple[str, ...] = (
    "nacionalidad",
    "cedula",
    "primer_apellido",
    "segundo_apellido",
    "primer_nombre",
    "segundo_nombre",
)


class ElectorRecord(BaseModel):
    """Aggregated elector record returned by GET /v1/re/elector"""

    # Identity key, always echoed verbatim
    nacionalidad: str
    cedula: int

    # Section 1: person
    fecha_nacimiento: Optional[str] = None
    primer_nombre: Optional[str] = None
    segundo_nombre: Optional[str] = None
    primer_apellido: Optional[str] = None
    segundo_apellido: Optional[str] = None
    codigo_objecion: Optional[str] = None
    descripcion_objecion: Optional[str] = None

    # Section 2: roll + geography
    fecha_ultimo_evento: Optional[str] = None
    edad_ultimo_evento: Optional[int] = None
    numero_mesa: Optional[int] = None
    numero_pagina: Optional[int] = None
    numero_renglon: Optional[int] = None

    codigo_centro: Optional[str] = Field(None, description="Always 9 digits")
    estado: Optional[str] = None
    municipio: Optional[str] = None
    parroquia: Optional[str] = None
    nombre_centro: Optional[str] = None
    direccion_centro: Optional[str] = None

    # Section 3: station role
    miembro_mesa_numero_mesa: Optional[int] = None
    miembro_mesa_cargo: Optional[str] = None
    miembro_mesa_centro_capacitacion: Optional[str] = None
    miembro_mesa_nombre_centro_capacitacion: Optional[str] = None
    miembro_mesa_fecha_inicio_capacitacion: Optional[str] = None
    miembro_mesa_fecha_culminacion_capacitacion: Optional[str] = None
    miembro_mesa_horario_capacitacion: Optional[str] = None
    miembro_mesa_direccion_centro_capacitacion: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "nacionalidad": "V",
                "cedula": 28524669,
                "fecha_nacimiento": "1999-05-12",
                "primer_nombre": "MARIA",
                "primer_apellido": "PEREZ",
                "numero_mesa": 3,
                "codigo_centro": "130801001",
                "estado": "13 - MIRANDA",
                "municipio": "08 - PLAZA",
                "parroquia": "01 - GUARENAS",
                "miembro_mesa_numero_mesa": 0,
                "miembro_mesa_cargo": "No aplica",
            }
        }
    )

    def apply_person(self, person: PersonRecord) -> None:
        for name, value in person.model_dump().items():
            setattr(self, name, value)

    def apply_roll(self, roll: RollEntry, codigo_centro: Optional[str]) -> None:
        self.fecha_ultimo_evento = roll.fecha_ultimo_evento
        self.edad_ultimo_evento = roll.edad_ultimo_evento
        self.numero_mesa = roll.numero_mesa
        self.numero_pagina = roll.numero_pagina
        self.numero_renglon = roll.numero_renglon
        self.codigo_centro = codigo_centro

    def apply_geography(self, geo: GeoLocation) -> None:
        for name, value in geo.model_dump().items():
            setattr(self, name, value)

    def apply_station_role(self, role: StationRole) -> None:
        for name, value in role.model_dump().items():
            setattr(self, f"miembro_mesa_{name}", value)

    def to_response(self, sections: Iterable[ElectorSection]) -> Dict[str, Any]:
        """
        Serialize only the identity key plus the requested sections.

        Keys keep the declaration order of the model.
        """
        wanted = {"nacionalidad", "cedula"}
        for section in sections:
            wanted.update(SECTION_FIELDS[ElectorSection(section)])
        return self.model_dump(include=wanted)

    def to_ac_response(self) -> Dict[str, Any]:
        """Names-only view served by GET /v1/ac/{nacionalidad}/{cedula}."""
        data = self.model_dump(include=set(AC_PERSON_FIELDS))
        return {name: data[name] for name in AC_PERSON_FIELDS}


# ============================================================================
# Search
# ============================================================================


class SearchFilterSet(BaseModel):
    """Optional equality filters for GET /v1/re/electores"""

    nacionalidad: Optional[str] = None
    cedula: Optional[Union[int, str]] = None
    fecha_nacimiento: Optional[str] = None
    primer_nombre: Optional[str] = None
    segundo_nombre: Optional[str] = None
    primer_apellido: Optional[str] = None
    segundo_apellido: Optional[str] = None
    codigo_centro: Optional[str] = None

    model_config = ConfigDict(extra="ignore")

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> "SearchFilterSet":
        """Build a filter set from query parameters, ignoring unknown keys."""
        values = {}
        for name in cls.model_fields:
            value = params.get(name)
            if value is None:
                continue
            values[name] = value if name == "cedula" else str(value)
        return cls(**values)

    def is_blank(self) -> bool:
        """True when every filter is absent or whitespace-only."""
        for name in type(self).model_fields:
            value = getattr(self, name)
            if value is not None and str(value).strip():
                return False
        return True


class SearchResultRow(BaseModel):
    """One match of an elector search"""

    nacionalidad: Optional[str] = None
    cedula: Optional[int] = None
    primer_nombre: Optional[str] = None
    segundo_nombre: Optional[str] = None
    primer_apellido: Optional[str] = None
    segundo_apellido: Optional[str] = None
    fecha_nacimiento: Optional[str] = Field(None, description="YYYY-MM-DD")
    codigo_centro: Optional[str] = None


# ============================================================================
# Registry movements
# ============================================================================


class RegistryMovement(BaseModel):
    """A registry movement (movimiento RE) of an elector"""

    CIERRE: Optional[int] = Field(None, description="Closing number")
    NOMBRE_CORTO: Optional[str] = Field(None, description="Closing short name")
    ID_LOTE: Optional[int] = Field(None, description="Batch ID")
    DESCRIPCION_MOVIMIENTO: Optional[str] = Field(None, description="Movement type")
    DESCRIPCION_STATUS: Optional[str] = Field(None, description="Process status")
    FECHA_PROCESO_MOV: Optional[str] = Field(None, description="Processing date")
