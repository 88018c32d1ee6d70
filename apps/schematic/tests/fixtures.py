"""Small builders for schematic test data."""

from __future__ import annotations

from datetime import datetime, timezone

from apps.well_core.models import (
    Assembly,
    AssemblyComponent,
    CementJob,
    CementStage,
    Datum,
    DefinitiveSurveyHeader,
    HoleSection,
    HoleSectionGroup,
    Scenario,
    SurveyStation,
    Well,
    Wellbore,
)


def day(n: int, hour: int = 0) -> datetime:
    return datetime(2024, 3, n, hour, tzinfo=timezone.utc)


def make_well(well_id="W1", elevation=30.0):
    well = Well.objects.create(well_id=well_id, well_common_name="Alpha 1", water_depth=0.0)
    Datum.objects.create(datum_id=f"{well_id}-RKB", well=well, datum_name="RKB", datum_elevation=elevation, is_default=True)
    return well


def make_scenario(well, wellbore, scenario_id="SC1", phase=Scenario.PHASE_ACTUAL, survey_mds=(0.0, 3000.0)):
    header = DefinitiveSurveyHeader.objects.create(
        def_survey_header_id=f"{scenario_id}-H", well=well, wellbore=wellbore
    )
    for md in survey_mds:
        SurveyStation.objects.create(header=header, md=md, tvd=md)
    return Scenario.objects.create(
        scenario_id=scenario_id, well=well, wellbore=wellbore, phase=phase, def_survey_header=header
    )


def make_hole_section(wellbore, group_id, top, base, diameter, start=None, phase="ACTUAL"):
    group = HoleSectionGroup.objects.create(
        hole_sect_group_id=group_id,
        well_id=wellbore.well_id,
        wellbore=wellbore,
        hole_name=f"{diameter}in hole",
        phase=phase,
        md_hole_sect_top=top,
        md_hole_sect_base=base,
        date_sect_start=start or day(1),
    )
    HoleSection.objects.create(group=group, diameter=diameter)
    return group


def make_assembly(wellbore, assembly_id, string_type, top, base, date_in=None, phase="ACTUAL", **extra):
    return Assembly.objects.create(
        assembly_id=assembly_id,
        well_id=wellbore.well_id,
        wellbore=wellbore,
        assembly_name=extra.pop("assembly_name", f"{string_type} {assembly_id}"),
        string_type=string_type,
        phase=phase,
        is_casing_liner=string_type in Assembly.CASING_STRING_TYPES,
        md_assembly_top=top,
        md_assembly_base=base,
        date_in=date_in or day(2),
        **extra,
    )


def make_component(assembly, comp_id, sequence_no, comp_type, top, base, **extra):
    return AssemblyComponent.objects.create(
        assembly_comp_id=comp_id,
        assembly=assembly,
        well_id=assembly.well_id,
        wellbore_id=assembly.wellbore_id,
        sequence_no=sequence_no,
        sect_type_code=extra.pop("sect_type_code", "TUB"),
        comp_type_code=comp_type,
        md_top=top,
        md_base=base,
        length=extra.pop("length", base - top),
        **extra,
    )


def make_cement(assembly, job_id, stage_id, top, base, job_type="Primary", start=None, **extra):
    job = CementJob.objects.create(
        cement_job_id=job_id,
        well_id=assembly.well_id,
        wellbore_id=assembly.wellbore_id,
        assembly=assembly,
        job_type=job_type,
        job_start_date=start or day(2),
        **extra,
    )
    return CementStage.objects.create(
        cement_stage_id=stage_id,
        job=job,
        well_id=assembly.well_id,
        wellbore_id=assembly.wellbore_id,
        md_top=top,
        md_base=base,
    )
