"""
Entry point for schematic assembly.

Resolves the design and the wellbore path, then hands off to the provider
for the design's phase.
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Dict, Optional

from apps.schematic.providers.actual import ActualSchematicProvider
from apps.schematic.providers.base import SchematicProvider, SchematicQuery
from apps.schematic.providers.design import DesignSchematicProvider
from apps.schematic.services.schematic_data import Schematic
from apps.well_core.models import Scenario
from apps.well_core.services.reference_resolver import get_design
from apps.well_core.services.wellbore_path import resolve_path

logger = logging.getLogger(__name__)

PROVIDERS: Dict[str, SchematicProvider] = {
    Scenario.PHASE_ACTUAL: ActualSchematicProvider(),
}
DEFAULT_PROVIDER: SchematicProvider = DesignSchematicProvider()


def provider_for_phase(phase: Optional[str]) -> SchematicProvider:
    return PROVIDERS.get(phase, DEFAULT_PROVIDER)


def assemble_schematic(well_id: str, wellbore_id: str, scenario_id: str, as_of: datetime) -> Optional[Schematic]:
    """
    Assemble the schematic of ``wellbore_id`` as of ``as_of``.

    Returns None when the scenario or any wellbore on the path is missing.
    Raises WellborePathCycleError when the parent chain loops.
    """
    logger.info(f"Assembling schematic for well {well_id} wellbore {wellbore_id} scenario {scenario_id} as of {as_of}")

    design = get_design(scenario_id, well_id, wellbore_id)
    if design is None:
        return None

    path = resolve_path(well_id, wellbore_id)
    if not path:
        logger.warning(f"Wellbore path unavailable for well {well_id} wellbore {wellbore_id}")
        return None

    query = SchematicQuery(well_id=well_id, wellbore_id=wellbore_id, scenario_id=scenario_id, as_of=as_of)
    return provider_for_phase(design.phase).assemble(query, design, path)
