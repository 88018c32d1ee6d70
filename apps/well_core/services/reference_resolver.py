from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional

from django.db import DatabaseError
from django.db.models import Max

from apps.well_core.models import (
    DailyReport,
    Datum,
    HoleSection,
    HoleSectionGroup,
    PipeCatalog,
    Scenario,
    SurveyStation,
)

logger = logging.getLogger(__name__)

SYSTEM_DATUM_MSL = "Mean Sea Level"
SYSTEM_DATUM_NONE = "None"


def round_depth(value: Optional[float], places: int = 1) -> Optional[float]:
    """Round a float sourced depth for display; ``None`` passes through."""
    if value is None:
        return None
    return round(float(value), places)


@dataclass
class ReferenceDepths:
    offshore: bool = False
    air_gap: float = 0.0
    water_depth: float = 0.0
    mudline: float = 0.0
    datum_elevation: Optional[float] = 0.0
    wellhead_depth: Optional[float] = 0.0
    system_datum: str = SYSTEM_DATUM_NONE


def get_design(scenario_id: str, well_id: str, wellbore_id: str) -> Optional[Scenario]:
    """
    Return the scenario row for (scenario, well, wellbore), or None.
    The scenario's phase decides which schematic provider is used.
    """
    try:
        design = (
            Scenario.objects.select_related("def_survey_header")
            .filter(scenario_id=scenario_id, well_id=well_id, wellbore_id=wellbore_id)
            .first()
        )
    except DatabaseError:
        logger.exception(f"Failed to load design {scenario_id} for well {well_id} wellbore {wellbore_id}")
        return None

    if design is None:
        logger.warning(f"No design found for scenario {scenario_id} well {well_id} wellbore {wellbore_id}")
        return None

    logger.info(f"Design data retrieved, current design phase is {design.phase}")
    return design


def get_reference_depths(well_id: str) -> ReferenceDepths:
    """
    Reference depths for the well's default datum.

    Air gap and mudline are both datum elevation minus water depth. With no
    default datum (or on a database error) every depth is 0 and the system
    datum is 'None'.
    """
    try:
        datum = Datum.objects.select_related("well").filter(well_id=well_id, is_default=True).first()
    except DatabaseError:
        logger.exception(f"An error occurred while fetching reference depths for well {well_id}")
        return ReferenceDepths()

    if datum is None:
        logger.warning(f"No default datum found for well {well_id}")
        return ReferenceDepths()

    well = datum.well
    elevation = datum.datum_elevation or 0.0
    water_depth = well.water_depth or 0.0
    air_gap = round_depth(elevation - water_depth)

    return ReferenceDepths(
        offshore=well.is_offshore,
        air_gap=air_gap,
        water_depth=round_depth(water_depth),
        mudline=air_gap,
        datum_elevation=round_depth(datum.datum_elevation),
        wellhead_depth=round_depth(well.wellhead_depth),
        system_datum=SYSTEM_DATUM_MSL,
    )


def get_pipe_catalogs() -> List[Dict[str, Any]]:
    try:
        return list(
            PipeCatalog.objects.values(
                "grade", "od_body", "nominal_weight", "internal_yield_press", "collapse_resistance"
            )
        )
    except DatabaseError:
        logger.exception("Failed to load pipe catalog")
        return []


def get_max_hole_diameter(group: HoleSectionGroup) -> Optional[float]:
    """Largest bit diameter run in the hole section group, rounded for display."""
    result = HoleSection.objects.filter(group=group).aggregate(max_diameter=Max("diameter"))
    return round_depth(result["max_diameter"], 3)


def get_latest_daily_report(well_id: str, wellbore_id: str, as_of: datetime) -> Optional[DailyReport]:
    try:
        return (
            DailyReport.objects.filter(well_id=well_id, wellbore_id=wellbore_id, date_report__lte=as_of)
            .order_by("-date_report")
            .first()
        )
    except DatabaseError:
        logger.exception(f"Failed to load latest daily report for well {well_id} wellbore {wellbore_id}")
        return None


def get_survey_stations(design: Optional[Scenario]) -> List[SurveyStation]:
    """Definitive survey stations of the design's survey header, shallowest first."""
    if design is None or not design.def_survey_header_id:
        logger.warning("No definitive survey header on design; survey is empty")
        return []
    try:
        return list(SurveyStation.objects.filter(header_id=design.def_survey_header_id).order_by("md"))
    except DatabaseError:
        logger.exception(f"An error occurred while fetching survey stations for header {design.def_survey_header_id}")
        return []
