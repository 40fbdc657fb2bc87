"""
Elector record assembler

Runs the registry resolvers for one identity key and merges their results:

    INIT -> IDENTITY_LOOKUP -> NOT_FOUND
                            -> ROLL_LOOKUP -> GEO_LOOKUP -> ROLE_LOOKUP -> ASSEMBLED

Only the identity lookup is mandatory. A missing roll entry, voting center
or station assignment leaves its section at defaults; a failing query in
any stage aborts the whole lookup.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import AbstractSet, Iterable, List, Optional

from .errors import ElectorNotFoundError, RegistryInternalError
from .executor import QueryExecutionError, QueryExecutor
from .normalizers import pad_fixed_width
from .resolvers import (
    resolve_geography,
    resolve_identity,
    resolve_roll,
    resolve_station_role,
)
from .response_models import (
    ALL_SECTIONS,
    ElectorRecord,
    ElectorSection,
    IdentityKey,
    StationRole,
)
from .row_decoder import RowSchemaError

logger = logging.getLogger(__name__)


class AssemblyState(str, Enum):
    """States of a single elector lookup"""

    INIT = "init"
    IDENTITY_LOOKUP = "identity_lookup"
    NOT_FOUND = "not_found"
    ROLL_LOOKUP = "roll_lookup"
    GEO_LOOKUP = "geo_lookup"
    ROLE_LOOKUP = "role_lookup"
    ASSEMBLED = "assembled"


class Completeness(str, Enum):
    """Whether every requested optional section found its source row"""

    COMPLETE = "complete"
    PARTIAL = "partial"


@dataclass
class AssembledElector:
    """Outcome of a successful lookup."""

    record: ElectorRecord
    sections: AbstractSet[ElectorSection]
    completeness: Completeness
    states: List[AssemblyState] = field(default_factory=list)

    def to_response(self):
        return self.record.to_response(self.sections)


def normalize_sections(sections: Optional[Iterable[ElectorSection]]) -> AbstractSet[ElectorSection]:
    """Requested sections, always including PERSONA."""
    if sections is None:
        return ALL_SECTIONS
    return frozenset(ElectorSection(s) for s in sections) | {ElectorSection.PERSONA}


class ElectorAssembler:
    """Orchestrate the resolvers for one identity key."""

    def __init__(self, executor: QueryExecutor):
        self.executor = executor
        self.state = AssemblyState.INIT
        self.states = [AssemblyState.INIT]

    def _enter(self, state: AssemblyState) -> None:
        logger.debug(f"Assembler {self.state.value} -> {state.value}")
        self.state = state
        self.states.append(state)

    def assemble(
        self, key: IdentityKey, sections: Optional[Iterable[ElectorSection]] = None
    ) -> AssembledElector:
        """
        Build the elector record for `key`.

        Args:
            key: Validated identity key
            sections: Sections to populate (default: all)

        Returns:
            AssembledElector

        Raises:
            ElectorNotFoundError: If the key has no person record
            RegistryInternalError: If any registry query fails
        """
        wanted = normalize_sections(sections)
        record = ElectorRecord(nacionalidad=key.nacionalidad, cedula=key.cedula)
        missing = []

        try:
            self._enter(AssemblyState.IDENTITY_LOOKUP)
            person = resolve_identity(self.executor, key)
            if person is None:
                self._enter(AssemblyState.NOT_FOUND)
                logger.info(f"Elector not found: {key.nacionalidad}-{key.cedula}")
                raise ElectorNotFoundError(key)
            record.apply_person(person)

            if wanted & {ElectorSection.CUADERNO, ElectorSection.GEOGRAFIA}:
                self._enter(AssemblyState.ROLL_LOOKUP)
                roll = resolve_roll(self.executor, key)
                if roll is None:
                    if ElectorSection.CUADERNO in wanted:
                        missing.append(ElectorSection.CUADERNO)
                else:
                    codigo_centro = (
                        pad_fixed_width(roll.cod_centro, 9) if roll.cod_centro is not None else None
                    )
                    record.apply_roll(roll, codigo_centro)

                if ElectorSection.GEOGRAFIA in wanted:
                    codes = roll.geo_codes if roll is not None else None
                    geo = None
                    if codes is not None:
                        self._enter(AssemblyState.GEO_LOOKUP)
                        geo = resolve_geography(self.executor, codes)
                    if geo is None:
                        missing.append(ElectorSection.GEOGRAFIA)
                    else:
                        record.apply_geography(geo)

            if ElectorSection.MIEMBRO_MESA in wanted:
                self._enter(AssemblyState.ROLE_LOOKUP)
                role = resolve_station_role(self.executor, key)
                if role is None:
                    missing.append(ElectorSection.MIEMBRO_MESA)
                    role = StationRole.not_applicable()
                record.apply_station_role(role)

        except (QueryExecutionError, RowSchemaError) as e:
            logger.error(
                f"Elector lookup failed during {self.state.value} "
                f"for {key.nacionalidad}-{key.cedula}: {e}",
                exc_info=True,
            )
            raise RegistryInternalError(self.state.value) from e

        self._enter(AssemblyState.ASSEMBLED)
        completeness = Completeness.PARTIAL if missing else Completeness.COMPLETE
        logger.info(
            f"Assembled elector {key.nacionalidad}-{key.cedula} "
            f"({completeness.value}, missing={[m.value for m in missing]})"
        )

        return AssembledElector(
            record=record,
            sections=wanted,
            completeness=completeness,
            states=list(self.states),
        )
