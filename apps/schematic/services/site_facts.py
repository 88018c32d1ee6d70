"""
Path-independent schematic facts: wellhead tree, gradient curves, survey,
lithology column and operational logs. Fetched once per schematic.
"""
from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from django.db.models import Q
from django.forms.models import model_to_dict

from apps.barriers.services.barrier_lookup import BarrierLookup
from apps.barriers.services.ref_ids import (
    formation_ref,
    wellhead_component_ref,
    wellhead_hanger_ref,
    wellhead_outlet_ref,
)
from apps.schematic.services import schematic_data as sd
from apps.schematic.services.clipping import isolated
from apps.well_core.models import (
    FinalLoadSimm,
    LogInterval,
    ScenarioFormationLink,
    WellboreGradient,
    WellheadAnnularPressure,
    WellheadComponent,
    WellheadHanger,
    WellheadOutlet,
)
from apps.well_core.services.reference_resolver import get_survey_stations

logger = logging.getLogger(__name__)

PRESSURE_RELIEF_FIELDS = [
    'annulus', 'sequence_no', 'drain_date', 'drained_fluid_type', 'drained_press_from', 'drained_press_to',
    'drained_volume', 'estimated_fluid_level', 'fluid_density', 'fluid_level', 'max_press', 'comments',
]


# -- wellhead --------------------------------------------------------------

def _installed(qs, install_field: str, removal_field: str, as_of: Optional[datetime]):
    if as_of is None:
        return qs
    return qs.filter(**{f'{install_field}__lte': as_of}).filter(
        Q(**{f'{removal_field}__isnull': True}) | Q(**{f'{removal_field}__gt': as_of})
    )


@isolated(list)
def get_wellhead_outlets(component: WellheadComponent, as_of: Optional[datetime], lookup: BarrierLookup) -> List[sd.WellheadOutlet]:
    qs = _installed(WellheadOutlet.objects.filter(component=component), 'valve_install_date', 'valve_removal_date', as_of)
    outlets = []
    for outlet in qs.order_by('sequence_no'):
        ref_id = wellhead_outlet_ref(
            component.well_id, component.event_id, component.wellhead_id, component.wellhead_comp_id, outlet.outlet_id
        )
        outlets.append(sd.WellheadOutlet(
            ref_id=ref_id,
            comp_type=outlet.comp_type_code,
            sect_type=outlet.sect_type_code,
            location=outlet.outlet_location,
            manufacturer=outlet.valve_make,
            model=outlet.valve_model,
            working_pressure=outlet.outlet_working_press,
            description=f"{outlet.comp_type_code} - {outlet.outlet_location} - {outlet.valve_model} - {outlet.valve_make}",
            barrier_id=lookup.names(ref_id),
        ))
    return outlets


@isolated(list)
def get_wellhead_hangers(component: WellheadComponent, lookup: BarrierLookup) -> List[sd.WellheadHanger]:
    """Hangers of a component; a hanger with no assembly landed in it is not drawn."""
    hangers = []
    for hanger in WellheadHanger.objects.filter(component=component, assembly__isnull=False):
        ref_id = wellhead_hanger_ref(
            component.well_id, component.event_id, component.wellhead_id, component.wellhead_comp_id,
            hanger.wellhead_hanger_id,
        )
        hangers.append(sd.WellheadHanger(
            ref_id=ref_id,
            comp_type=hanger.comp_type_code,
            model=hanger.model,
            size=hanger.hanger_size,
            description=f"{hanger.model} - {hanger.hanger_size} // {hanger.comp_type_code}",
            barrier_id=lookup.names(ref_id),
        ))
    return hangers


@isolated(list)
def get_wellhead_components(
    well_id: str,
    as_of: Optional[datetime],
    lookup: BarrierLookup,
    scenario_id: Optional[str] = None,
) -> List[sd.WellheadComponent]:
    """
    Wellhead components in place on ``as_of``, by sequence number.

    The as-built wellhead has no scenario; pass ``scenario_id`` (and no
    date) for a planned design's own wellhead.
    """
    logger.info(f"Getting wellhead components for well {well_id}")
    qs = WellheadComponent.objects.select_related('wellhead').filter(well_id=well_id)
    if scenario_id is None:
        qs = qs.filter(wellhead__scenario__isnull=True)
    else:
        qs = qs.filter(wellhead__scenario_id=scenario_id)
    qs = _installed(qs, 'install_date', 'removal_date', as_of)

    components = []
    for comp in qs.order_by('sequence_no'):
        ref_id = wellhead_component_ref(comp.well_id, comp.event_id, comp.wellhead_id, comp.wellhead_comp_id)
        components.append(sd.WellheadComponent(
            ref_id=ref_id,
            sect_type=comp.sect_type_code,
            comp_type=comp.comp_type_code,
            manufacturer=comp.make,
            model=comp.model,
            description=(
                f"({comp.wellhead_section}) {comp.sect_type_code} - {comp.comp_type_code} - {comp.make} - {comp.model}"
            ),
            wellhead_section=comp.wellhead_section,
            top_pressure_rating=comp.working_press_rating,
            test_result=comp.test_result,
            test_duration=comp.test_duration,
            test_pressure=comp.test_pressure,
            comments=comp.comments,
            install_date=comp.install_date,
            removal_date=comp.removal_date,
            barrier_id=lookup.names(ref_id),
            outlets=get_wellhead_outlets(comp, as_of, lookup),
            hangers=get_wellhead_hangers(comp, lookup),
        ))
    return components


@isolated(list)
def get_annular_pressures(well_id: str) -> List[sd.AnnularPressure]:
    pressures = []
    qs = WellheadAnnularPressure.objects.filter(well_id=well_id).prefetch_related('pressure_reliefs')
    for reading in qs.order_by('sequence_no'):
        pressures.append(sd.AnnularPressure(
            annulus=reading.annulus,
            pressure=reading.pressure,
            test_date=reading.test_date,
            sequence_no=reading.sequence_no,
            comments=reading.comments,
            pressure_reliefs=[
                model_to_dict(relief, fields=PRESSURE_RELIEF_FIELDS) for relief in reading.pressure_reliefs.all()
            ],
        ))
    return pressures


def get_wellhead(
    well_id: str,
    as_of: Optional[datetime],
    lookup: BarrierLookup,
    scenario_id: Optional[str] = None,
) -> sd.Wellhead:
    return sd.Wellhead(
        components=get_wellhead_components(well_id, as_of, lookup, scenario_id=scenario_id),
        annular_pressures=get_annular_pressures(well_id),
    )


# -- curves ----------------------------------------------------------------

@isolated(list)
def get_gradient(well_id: str, wellbore_id: str, kind: str) -> List[sd.GradientPoint]:
    """One gradient curve (pore pressure, fracture or temperature), shallowest point first."""
    rows = WellboreGradient.objects.filter(well_id=well_id, wellbore_id=wellbore_id, kind=kind).order_by('depth_tvd')
    return [sd.GradientPoint(formation=row.formation, depth_tvd=row.depth_tvd, value=row.value) for row in rows]


def get_survey(design) -> List[sd.SurveyPoint]:
    return [
        sd.SurveyPoint(
            md=station.md,
            inc=station.inclination,
            azi=station.azimuth,
            tvd=station.tvd,
            ns=station.offset_north,
            ew=station.offset_east,
        )
        for station in get_survey_stations(design)
    ]


# -- geology and logs ------------------------------------------------------

@isolated(list)
def get_lithology(well_id: str, wellbore_id: str, scenario_id: str, lookup: BarrierLookup) -> List[sd.LithologyFormation]:
    """Formations logged for the scenario, with their actual picks where one exists."""
    links = (
        ScenarioFormationLink.objects.select_related('formation', 'formation__pick')
        .filter(
            scenario_id=scenario_id,
            formation__well_id=well_id,
            formation__wellbore_id=wellbore_id,
            is_log=True,
        )
        .order_by('formation__prognosed_md')
    )

    formations = []
    for link in links:
        formation = link.formation
        pick = getattr(formation, 'pick', None)
        ref_id = formation_ref(well_id, wellbore_id, formation.wellbore_formation_id)
        formations.append(sd.LithologyFormation(
            ref_id=ref_id,
            lithology=formation.lithology_name,
            label=formation.strat_unit_name,
            description=formation.formation_name,
            top=pick.md_top if pick else None,
            base=pick.md_base if pick else None,
            top_tvd=pick.tvd_top if pick else None,
            base_tvd=pick.tvd_base if pick else None,
            barrier_depth=pick.md_base if pick else None,
            phase=pick.phase if pick else None,
            comments=formation.comments,
            barrier_id=lookup.names(ref_id),
        ))
    return formations


@isolated(list)
def get_logs(well_id: str, wellbore_id: str) -> List[Dict[str, Any]]:
    logs = []
    for interval in LogInterval.objects.filter(well_id=well_id, wellbore_id=wellbore_id).order_by('log_date'):
        logs.append({
            'log_date': interval.log_date,
            'service': interval.service,
            'md_top': interval.md_top,
            'md_base': interval.md_base,
            'reason': interval.reason,
            'assembly_name': interval.assembly_name,
            'comments': json.dumps(interval.comments),
        })
    return logs


# -- casing derating -------------------------------------------------------

@isolated(list)
def get_derating_data(well_id: str, wellbore_id: str, as_of: Optional[datetime]) -> List[sd.DeratingLoad]:
    """Derated casing loads from pressure surveys reported on or before ``as_of``, by sequence."""
    qs = FinalLoadSimm.objects.filter(
        pressure_survey__well_id=well_id,
        pressure_survey__wellbore_id=wellbore_id,
    )
    if as_of is not None:
        qs = qs.filter(pressure_survey__daily_report__date_report__lte=as_of)

    return [
        sd.DeratingLoad(
            pressure_survey_id=load.pressure_survey_id,
            final_load_simm_id=load.final_load_simm_id,
            trapped_volume_id=load.trapped_volume_id,
            assembly_name=load.assembly_name,
            sequence_no=load.sequence_no,
            casing_od=load.casing_od,
            top_interval=load.top_interval,
            base_interval=load.base_interval,
            wear=load.wear,
            ovality=load.ovality,
            nom_burst_pressure=load.nom_burst_pressure,
            nom_collapse_pressure=load.nom_collapse_pressure,
            calc_burst_pressure=load.calc_burst_pressure,
            calc_collapse_pressure=load.calc_collapse_pressure,
            comments=load.comments,
        )
        for load in qs.order_by('sequence_no', 'final_load_simm_id')
    ]
