"""As-built schematic: what was in the hole on the requested day."""
from __future__ import annotations

import logging
from typing import List

from django.forms.models import model_to_dict

from apps.barriers.services.annulus import get_annulus_data
from apps.barriers.services.barrier_overlay import DiagramKey
from apps.schematic.providers.base import SchematicQuery, add_physical_elements, barrier_lookup_for, new_schematic
from apps.schematic.services import schematic_data as sd
from apps.schematic.services import site_facts
from apps.schematic.services.fluids import get_fluids
from apps.schematic.services.physical import WellboreElementFetcher
from apps.well_core.models import Scenario
from apps.well_core.services.reference_resolver import get_latest_daily_report
from apps.well_core.services.wellbore_path import WellborePathNode

logger = logging.getLogger(__name__)


class ActualSchematicProvider:

    def assemble(self, query: SchematicQuery, design: Scenario, path: List[WellborePathNode]) -> sd.Schematic:
        lookup = barrier_lookup_for(query)
        schematic = new_schematic(query, design, path)

        schematic.wellhead = site_facts.get_wellhead(query.well_id, query.as_of, lookup)
        schematic.lithology = site_facts.get_lithology(query.well_id, query.wellbore_id, query.scenario_id, lookup)

        fetcher = WellboreElementFetcher(query.well_id, Scenario.PHASE_ACTUAL, query.as_of, lookup)
        add_physical_elements(schematic, path, fetcher)

        # needs the finished casing list and the survey
        schematic.fluids = get_fluids(
            query.well_id,
            query.wellbore_id,
            query.as_of,
            schematic.reference_depths,
            schematic.casings,
            schematic.survey,
            schematic.hole_sections,
            lookup,
        )

        schematic.annulus = get_annulus_data(
            DiagramKey(query.well_id, query.wellbore_id, query.scenario_id, query.as_of)
        )

        schematic.derating_data = site_facts.get_derating_data(query.well_id, query.wellbore_id, query.as_of)

        report = get_latest_daily_report(query.well_id, query.wellbore_id, query.as_of)
        if report is not None:
            schematic.latest_report = model_to_dict(
                report, fields=['report_journal_id', 'event_id', 'report_no', 'date_report', 'status_summary']
            )

        logger.info(
            f"Actual schematic for well {query.well_id}: {len(schematic.casings)} casings, "
            f"{len(schematic.assemblies)} assemblies, {len(schematic.fluids)} fluids"
        )
        return schematic
