"""
Fluid column of an as-built schematic.

A mud check on the as-of day means the well is being drilled: one
DRILLING segment fills the hole from the datum to total depth. Otherwise
the completion fluids of the latest installation still in place are
drawn, one segment per row.
"""
from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import List, Optional, Tuple

from django.db.models import Q

from apps.barriers.services.barrier_lookup import BarrierLookup
from apps.barriers.services.ref_ids import fluid_ref
from apps.schematic.services import schematic_data as sd
from apps.schematic.services.clipping import isolated
from apps.well_core.models import CompletionFluid, DrillingFluid
from apps.well_core.services.reference_resolver import ReferenceDepths

logger = logging.getLogger(__name__)

KIND_DRILLING = 'DRILLING'
KIND_COMPLETION = 'COMPLETION'


def day_bounds(moment: datetime) -> Tuple[datetime, datetime]:
    """First and last instant of the calendar day containing ``moment``."""
    start = moment.replace(hour=0, minute=0, second=0, microsecond=0)
    return start, start + timedelta(days=1) - timedelta(microseconds=1)


def get_drilling_fluid(well_id: str, wellbore_id: str, as_of: datetime) -> Optional[DrillingFluid]:
    """Latest mud check taken on the as-of day, if any."""
    start, end = day_bounds(as_of)
    return (
        DrillingFluid.objects.filter(
            well_id=well_id,
            wellbore_id=wellbore_id,
            check_date__gte=start,
            check_date__lte=end,
        )
        .order_by('-check_date')
        .first()
    )


def get_completion_fluids(well_id: str, wellbore_id: str, as_of: datetime) -> List[CompletionFluid]:
    """
    Completion fluid rows of the most recent installation still in place
    at the end of the as-of day.
    """
    start, end = day_bounds(as_of)
    base = CompletionFluid.objects.filter(well_id=well_id, wellbore_id=wellbore_id)

    latest = (
        base.filter(install_date__lte=start)
        .filter(Q(removal_date__gte=end) | Q(removal_date__isnull=True))
        .order_by('-install_date')
        .first()
    )
    if latest is None:
        return []

    install_start, install_end = day_bounds(latest.install_date)
    return list(
        base.filter(install_date__gte=install_start, install_date__lte=install_end)
        .filter(Q(removal_date__gte=start) | Q(removal_date__isnull=True))
        .order_by('-install_date', 'md_top')
    )


def total_depth(survey: List[sd.SurveyPoint], hole_sections: List[sd.HoleSection]) -> float:
    """Deepest surveyed MD; the deepest hole section base when there is no survey."""
    if survey:
        return survey[-1].md
    if hole_sections:
        return max(section.base_md for section in hole_sections)
    return 0.0


@isolated(list)
def get_fluids(
    well_id: str,
    wellbore_id: str,
    as_of: datetime,
    depths: ReferenceDepths,
    casings: List[sd.Casing],
    survey: List[sd.SurveyPoint],
    hole_sections: List[sd.HoleSection],
    lookup: BarrierLookup,
) -> List[sd.FluidSegment]:
    casing_index = len(casings) - 1 if casings else None

    drilling = get_drilling_fluid(well_id, wellbore_id, as_of)
    if drilling is not None:
        ref_id = fluid_ref(well_id, wellbore_id, drilling.event_id, drilling.fluid_id)
        datum_top = -(depths.datum_elevation or 0.0)
        end_depth = total_depth(survey, hole_sections)
        logger.info(f"Drilling fluid {drilling.fluid_name} active on {as_of:%Y-%m-%d}")
        return [sd.FluidSegment(
            ref_id=ref_id,
            kind=KIND_DRILLING,
            fluid_type=drilling.fluid_name,
            start_depth=datum_top + (depths.air_gap or 0.0),
            end_depth=end_depth,
            density=drilling.density,
            casing_index=casing_index,
            inside_casing=True,
            barriers=[
                sd.DepthBarrier(barrier_id=hit.barrier_name, from_depth=datum_top, to_depth=end_depth)
                for hit in lookup.for_ref(ref_id)
            ],
            barrier_id=lookup.names(ref_id),
        )]

    segments = []
    for fluid in get_completion_fluids(well_id, wellbore_id, as_of):
        ref_id = fluid_ref(well_id, wellbore_id, fluid.event_id, fluid.completion_fluid_id)
        segments.append(sd.FluidSegment(
            ref_id=ref_id,
            kind=KIND_COMPLETION,
            fluid_type=fluid.fluid_type,
            start_depth=fluid.md_top,
            end_depth=fluid.md_base,
            density=fluid.fluid_density,
            casing_index=casing_index,
            inside_casing=False,
            barriers=[
                sd.DepthBarrier(barrier_id=hit.barrier_name, from_depth=fluid.md_top, to_depth=fluid.md_base)
                for hit in lookup.for_ref(ref_id)
            ],
            barrier_id=lookup.names(ref_id),
        ))
    return segments
