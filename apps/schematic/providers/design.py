"""Planned schematic: every record of the scenario's phase, with no installation dates applied."""
from __future__ import annotations

import logging
from typing import List

from apps.schematic.providers.base import SchematicQuery, add_physical_elements, barrier_lookup_for, new_schematic
from apps.schematic.services import schematic_data as sd
from apps.schematic.services import site_facts
from apps.schematic.services.physical import WellboreElementFetcher
from apps.well_core.models import Scenario
from apps.well_core.services.wellbore_path import WellborePathNode

logger = logging.getLogger(__name__)


class DesignSchematicProvider:

    def assemble(self, query: SchematicQuery, design: Scenario, path: List[WellborePathNode]) -> sd.Schematic:
        lookup = barrier_lookup_for(query)
        schematic = new_schematic(query, design, path)

        schematic.wellhead = site_facts.get_wellhead(query.well_id, None, lookup, scenario_id=design.scenario_id)
        schematic.lithology = site_facts.get_lithology(query.well_id, query.wellbore_id, query.scenario_id, lookup)

        fetcher = WellboreElementFetcher(query.well_id, design.phase, None, lookup)
        add_physical_elements(schematic, path, fetcher, include_perforations=False)

        logger.info(f"Design schematic for scenario {design.scenario_id} ({design.phase}) assembled")
        return schematic
