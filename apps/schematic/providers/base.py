from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Protocol

from django.conf import settings

from apps.barriers.services.barrier_lookup import BarrierLookup
from apps.schematic.services import schematic_data as sd
from apps.schematic.services import site_facts
from apps.schematic.services.physical import WellboreElementFetcher
from apps.well_core.models import Scenario, WellboreGradient
from apps.well_core.services.reference_resolver import get_pipe_catalogs, get_reference_depths
from apps.well_core.services.wellbore_path import WellborePathNode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SchematicQuery:
    well_id: str
    wellbore_id: str
    scenario_id: str
    as_of: datetime


class SchematicProvider(Protocol):
    """Builds a schematic for one scenario phase over an already resolved wellbore path."""

    def assemble(self, query: SchematicQuery, design: Scenario, path: List[WellborePathNode]) -> sd.Schematic:
        ...


def new_schematic(query: SchematicQuery, design: Scenario, path: List[WellborePathNode]) -> sd.Schematic:
    """Schematic shell with the facts shared by every phase."""
    return sd.Schematic(
        well_id=query.well_id,
        wellbore_id=query.wellbore_id,
        scenario_id=query.scenario_id,
        schematic_date=query.as_of,
        phase=design.phase,
        wellbore_path=[node.wellbore_id for node in path],
        units=dict(settings.SCHEMATIC_UNITS),
        reference_depths=get_reference_depths(query.well_id),
        survey=site_facts.get_survey(design),
        pore_pressure_gradient=site_facts.get_gradient(
            query.well_id, query.wellbore_id, WellboreGradient.KIND_PORE_PRESSURE
        ),
        fracture_gradient=site_facts.get_gradient(query.well_id, query.wellbore_id, WellboreGradient.KIND_FRACTURE),
        temperature_gradient=site_facts.get_gradient(
            query.well_id, query.wellbore_id, WellboreGradient.KIND_TEMPERATURE
        ),
        catalogs=get_pipe_catalogs(),
        logs=site_facts.get_logs(query.well_id, query.wellbore_id),
    )


def add_physical_elements(
    schematic: sd.Schematic,
    path: List[WellborePathNode],
    fetcher: WellboreElementFetcher,
    include_perforations: bool = True,
) -> None:
    """
    Walk the path top to bottom, appending each wellbore's elements cut at
    the kickoff depth of the wellbore that follows it.
    """
    for position, node in enumerate(path):
        next_node: Optional[WellborePathNode] = path[position + 1] if position + 1 < len(path) else None
        logger.info(f"Assembling wellbore {node.name} ({position + 1}/{len(path)})")
        if next_node is not None and next_node.kickoff_md is None:
            logger.warning(
                f"Wellbore {next_node.wellbore_id} has no kickoff depth; {node.wellbore_id} is drawn unclipped"
            )

        schematic.hole_sections.extend(fetcher.hole_sections(node, next_node))
        schematic.casings.extend(fetcher.casings(node, next_node, first_index=len(schematic.casings)))
        schematic.cement_stages.extend(fetcher.cement_stages(node, next_node, schematic.casings))
        schematic.assemblies.extend(fetcher.assemblies(node, next_node))
        if include_perforations:
            schematic.perforations.extend(fetcher.perforations(node, next_node))


def barrier_lookup_for(query: SchematicQuery) -> BarrierLookup:
    return BarrierLookup(query.well_id, query.wellbore_id, query.scenario_id, query.as_of)
