"""
Per-wellbore fetches of the physical schematic: hole sections, casings,
cement stages, other assemblies and perforations.

Every fetch takes the wellbore being assembled and its successor on the
path; elements starting below the successor's kickoff depth are dropped
and the rest are cut at it.
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from django.conf import settings
from django.db.models import Q

from apps.barriers.services.barrier_lookup import BarrierLookup
from apps.barriers.services.ref_ids import (
    assembly_component_ref,
    assembly_ref,
    casing_component_ref,
    cement_stage_ref,
    hole_section_ref,
    opening_ref,
)
from apps.schematic.services import schematic_data as sd
from apps.schematic.services.clipping import clamp, isolated, kickoff_md, kickoff_tvd
from apps.well_core.models import (
    Assembly,
    AssemblyComponent,
    CementStage,
    HoleSectionGroup,
    OpeningStatus,
    WellboreIntegrityTest,
    WellboreOpening,
)
from apps.well_core.services.reference_resolver import get_max_hole_diameter, round_depth
from apps.well_core.services.wellbore_path import WellborePathNode

logger = logging.getLogger(__name__)

# Tubing hanger types drawn at a minimum length
MIN_LENGTH_COMP_TYPES = ('TH', 'FLTH')

# Assembly component barrier intervals are drawn just inside the component
BARRIER_INSET = 0.01


def depth_barriers(lookup: BarrierLookup, ref_id: str, top: float, base: float) -> List[sd.DepthBarrier]:
    """Barrier intervals of an element: the stored element depths when set, else the element's own."""
    barriers = []
    for hit in lookup.for_ref(ref_id):
        barriers.append(sd.DepthBarrier(
            barrier_id=hit.barrier_name,
            from_depth=round_depth(hit.top_depth) if hit.top_depth is not None else top,
            to_depth=round_depth(hit.base_depth) if hit.base_depth is not None else base,
            is_combined=hit.top_depth is not None and hit.base_depth is not None,
        ))
    return barriers


class WellboreElementFetcher:
    """
    Fetches the physical elements of one phase.

    With ``as_of`` set only elements installed by that date are returned
    (as-built schematic); with ``as_of=None`` every record of the phase is
    used (planned design).
    """

    def __init__(self, well_id: str, phase: str, as_of: Optional[datetime], lookup: BarrierLookup):
        self.well_id = well_id
        self.phase = phase
        self.as_of = as_of
        self.lookup = lookup

    # -- assemblies ---------------------------------------------------------

    def _assemblies(self, node: WellborePathNode, next_node: Optional[WellborePathNode]):
        qs = Assembly.objects.filter(well_id=self.well_id, wellbore_id=node.wellbore_id, phase=self.phase)
        if self.as_of is not None:
            qs = qs.filter(date_in__lte=self.as_of).filter(Q(date_out__isnull=True) | Q(date_out__gt=self.as_of))
        limit = kickoff_md(next_node)
        if limit is not None:
            qs = qs.filter(md_assembly_top__lte=limit)
        return qs

    @isolated(list)
    def hole_sections(self, node: WellborePathNode, next_node: Optional[WellborePathNode]) -> List[sd.HoleSection]:
        logger.info(f"Fetching hole sections for wellbore {node.name}")
        qs = HoleSectionGroup.objects.filter(well_id=self.well_id, wellbore_id=node.wellbore_id, phase=self.phase)
        if self.as_of is not None:
            qs = qs.filter(date_sect_start__lte=self.as_of)
        limit = kickoff_md(next_node)
        if limit is not None:
            qs = qs.filter(md_hole_sect_top__lte=limit)

        sections = []
        for group in qs.order_by('md_hole_sect_top'):
            ref_id = hole_section_ref(self.well_id, node.wellbore_id, group.hole_sect_group_id)
            base = clamp(group.md_hole_sect_base, limit)
            sections.append(sd.HoleSection(
                ref_id=ref_id,
                name=group.hole_name,
                start_md=group.md_hole_sect_top,
                base_md=base,
                length=base - group.md_hole_sect_top,
                diameter=get_max_hole_diameter(group),
                date_sect_end=group.date_sect_end,
                barrier_id=self.lookup.names(ref_id),
                integrity_tests=self.integrity_tests(node, group),
            ))
        return sections

    @isolated(list)
    def integrity_tests(self, node: WellborePathNode, group: HoleSectionGroup) -> List[sd.IntegrityTest]:
        rows = WellboreIntegrityTest.objects.filter(
            well_id=self.well_id,
            wellbore_id=node.wellbore_id,
            hole_sect_group=group,
            test_type__isnull=False,
        ).order_by('date_test')
        return [
            sd.IntegrityTest(
                test_type=row.test_type,
                date_test=row.date_test,
                lot_md=row.lot_md,
                lot_tvd=row.lot_tvd,
                weight_lot_emw=row.weight_lot_emw,
                weight_lot_amw=row.weight_lot_amw,
                lot_press=row.lot_press,
                total_bh_press=row.total_bh_press,
            )
            for row in rows
        ]

    @isolated(list)
    def casings(
        self,
        node: WellborePathNode,
        next_node: Optional[WellborePathNode],
        first_index: int = 0,
    ) -> List[sd.Casing]:
        """Casing and liner strings, shallowest first. ``index`` counts on from ``first_index``."""
        limit_md = kickoff_md(next_node)
        limit_tvd = kickoff_tvd(next_node)
        qs = (
            self._assemblies(node, next_node)
            .filter(string_type__in=Assembly.CASING_STRING_TYPES)
            .order_by('md_assembly_top', 'md_assembly_base')
        )

        casings = []
        for offset, assembly in enumerate(qs):
            ref_id = assembly_ref(assembly.well_id, assembly.wellbore_id, assembly.assembly_id)
            md_base = clamp(assembly.md_assembly_base, limit_md)
            casings.append(sd.Casing(
                ref_id=ref_id,
                assembly_id=assembly.assembly_id,
                name=assembly.assembly_name,
                string_type=assembly.string_type,
                index=first_index + offset,
                md_top=assembly.md_assembly_top,
                md_base=md_base,
                tvd_top=assembly.tvd_assembly_top,
                tvd_base=clamp(assembly.tvd_assembly_base, limit_tvd),
                assembly_size=assembly.assembly_size,
                is_casing=assembly.is_casing_liner,
                liner=assembly.susp_point,
                components=self.casing_components(assembly, next_node),
                barriers=depth_barriers(self.lookup, ref_id, assembly.md_assembly_top, md_base),
                barrier_id=self.lookup.names(ref_id),
            ))
        return casings

    @isolated(list)
    def casing_components(self, assembly: Assembly, next_node: Optional[WellborePathNode]) -> List[sd.CasingComponent]:
        limit = kickoff_md(next_node)
        qs = AssemblyComponent.objects.filter(assembly=assembly).order_by('sequence_no')
        if limit is not None:
            qs = qs.filter(md_top__lte=limit)

        components = []
        for comp in qs:
            ref_id = casing_component_ref(assembly.well_id, assembly.wellbore_id, assembly.assembly_id, comp.assembly_comp_id)
            md_base = clamp(comp.md_base, limit)
            barrier_names = self.lookup.names(ref_id)
            components.append(sd.CasingComponent(
                ref_id=ref_id,
                component_id=comp.assembly_comp_id,
                sect_type=comp.sect_type_code,
                comp_type='CAS' if comp.comp_type_code == 'LIN' else comp.comp_type_code,
                start_md=comp.md_top,
                bottom_md=md_base,
                length=comp.length,
                joint_count=comp.joints,
                od=comp.od_body,
                id=comp.id_body,
                grade_id=comp.grade_id,
                grade=comp.grade,
                approximate_weight=comp.approximate_weight,
                manufacturer=comp.manufacturer,
                model=comp.model,
                serial_no=comp.serial_no,
                description=comp.catalog_key_desc,
                section_name=assembly.assembly_name,
                press_rating_top=comp.press_rating_top,
                press_rating_bottom=comp.press_rating_bottom,
                burst_pressure=comp.pressure_burst,
                collapse_pressure=comp.pressure_collapse,
                barrier_id=barrier_names,
                barrier_from=comp.md_top if barrier_names else None,
                barrier_to=md_base if barrier_names else None,
            ))
        return components

    @isolated(list)
    def cement_stages(
        self,
        node: WellborePathNode,
        next_node: Optional[WellborePathNode],
        casings: List[sd.Casing],
    ) -> List[sd.CementStage]:
        """
        Cement stages of jobs pumped on this wellbore's strings.
        ``casings`` is the casing list assembled so far; a stage points at
        its string by position in it (None when the string is not drawn).
        """
        limit = kickoff_md(next_node)
        assembly_ids = list(self._assemblies(node, None).values_list('assembly_id', flat=True))
        if not assembly_ids:
            return []

        qs = CementStage.objects.select_related('job', 'job__assembly').filter(
            well_id=self.well_id,
            wellbore_id=node.wellbore_id,
            job__assembly_id__in=assembly_ids,
        )
        if self.as_of is not None:
            qs = qs.filter(job__job_start_date__lte=self.as_of)
        if limit is not None:
            qs = qs.filter(md_top__lte=limit)

        casing_positions = {casing.assembly_id: position for position, casing in enumerate(casings)}

        stages = []
        for stage in qs.order_by('md_top', '-md_base'):
            job = stage.job
            position = casing_positions.get(job.assembly_id)
            casing = casings[position] if position is not None else None
            assembly_name = casing.name if casing else job.assembly.assembly_name

            ref_id = cement_stage_ref(self.well_id, stage.wellbore_id, job.cement_job_id, stage.cement_stage_id)
            md_base = clamp(stage.md_base, limit)
            stages.append(sd.CementStage(
                ref_id=ref_id,
                cement_job_id=job.cement_job_id,
                cement_stage_id=stage.cement_stage_id,
                top_md=stage.md_top,
                bottom_md=md_base,
                casing_index=position,
                assembly_id=job.assembly_id,
                assembly_name=assembly_name,
                assembly_od=casing.assembly_size if casing else job.assembly.assembly_size,
                tvd_top=stage.tvd_top,
                stage_name=job.job_type,
                description=f"{job.job_type} - {assembly_name}",
                plug=job.is_plug,
                drilled=job.is_drilled_out,
                plug_type=job.plug_type,
                date_report=job.date_report,
                casing_test=job.casing_test_press,
                casing_test_duration=job.casing_test_duration,
                casing_test_comment=job.test_comments,
                liner_neg_test_tool=job.is_liner_neg_test_tool,
                liner_emw_neg_test=job.liner_emw_neg_test,
                barriers=depth_barriers(self.lookup, ref_id, stage.md_top, md_base),
                barrier_id=self.lookup.names(ref_id),
            ))
        return stages

    @isolated(list)
    def assemblies(self, node: WellborePathNode, next_node: Optional[WellborePathNode]) -> List[sd.Assembly]:
        """Non-casing strings; outer (deeper-reaching) strings first at equal top depth."""
        limit_tvd = kickoff_tvd(next_node)
        qs = (
            self._assemblies(node, next_node)
            .exclude(string_type__in=Assembly.CASING_STRING_TYPES)
            .order_by('md_assembly_top', '-md_assembly_base')
        )

        assemblies = []
        for assembly in qs:
            ref_id = assembly_ref(assembly.well_id, assembly.wellbore_id, assembly.assembly_id)
            assemblies.append(sd.Assembly(
                ref_id=ref_id,
                assembly_id=assembly.assembly_id,
                name=assembly.assembly_name,
                md_top=assembly.md_assembly_top,
                md_base=clamp(assembly.md_assembly_base, kickoff_md(next_node)),
                tvd_top=assembly.tvd_assembly_top,
                tvd_base=clamp(assembly.tvd_assembly_base, limit_tvd),
                assembly_size=assembly.assembly_size,
                is_casing=assembly.is_casing_liner,
                components=self.assembly_components(assembly, next_node),
                barrier_id=self.lookup.names(ref_id),
            ))
        return assemblies

    @isolated(list)
    def assembly_components(self, assembly: Assembly, next_node: Optional[WellborePathNode]) -> List[sd.AssemblyComponent]:
        limit = kickoff_md(next_node)
        qs = (
            AssemblyComponent.objects.select_related('safety_valve', 'packer')
            .filter(assembly=assembly)
            .order_by('sequence_no')
        )
        if limit is not None:
            qs = qs.filter(md_top__lte=limit)
        rows = list(qs)
        min_length = settings.SCHEMATIC_MIN_COMPONENT_LENGTH

        components = []
        for position, comp in enumerate(rows):
            ref_id = assembly_component_ref(
                comp.sect_type_code, assembly.well_id, assembly.wellbore_id, assembly.assembly_id, comp.assembly_comp_id
            )
            md_top = clamp(comp.md_top, limit)
            md_base = clamp(comp.md_base, limit)

            length = comp.length
            if comp.comp_type_code in MIN_LENGTH_COMP_TYPES and length is not None and length < min_length:
                length = min_length

            sssv = getattr(comp, 'safety_valve', None)
            packer = getattr(comp, 'packer', None)
            barrier_names = self.lookup.names(ref_id)

            components.append(sd.AssemblyComponent(
                ref_id=ref_id,
                component_id=comp.assembly_comp_id,
                sect_type=comp.sect_type_code,
                comp_type=comp.comp_type_code,
                assembly_name=assembly.assembly_name,
                start_md=md_top,
                bottom_md=md_base,
                length=length,
                actual_length=comp.length,
                od=comp.od_body,
                id=comp.id_body,
                manufacturer=comp.manufacturer,
                model=comp.model,
                description=comp.description,
                item_description=comp.catalog_key_desc,
                grade=comp.grade,
                joints=comp.joints,
                approximate_weight=comp.approximate_weight,
                press_rating_top=comp.press_rating_top,
                burst_pressure=comp.pressure_burst,
                collapse_pressure=comp.pressure_collapse,
                recorded_open_press=sssv.recorded_opening_pressure if sssv else None,
                recorded_close_press=sssv.recorded_closing_pressure if sssv else None,
                nominal_press=sssv.nominal_opening_pressure if sssv else None,
                maximum_hydraulics=sssv.maximum_hydraulics_pressure if sssv else None,
                function_test_pass=sssv.function_test_pass_fail if sssv else None,
                pressure_test_above=packer.pressure_test_above if packer else None,
                pressure_test_below=packer.pressure_test_below if packer else None,
                barrier_id=barrier_names,
                barrier_from=md_top + BARRIER_INSET if barrier_names else None,
                barrier_to=md_base - BARRIER_INSET if barrier_names else None,
                is_barrier_closed_at_top=position == 0,
                is_barrier_closed_at_bottom=position == len(rows) - 1,
            ))
        return components

    # -- openings -----------------------------------------------------------

    @isolated(list)
    def perforations(self, node: WellborePathNode, next_node: Optional[WellborePathNode]) -> List[sd.Perforation]:
        """Openings with a status effective on the as-of date; the latest status wins."""
        limit = kickoff_md(next_node)
        qs = WellboreOpening.objects.filter(well_id=self.well_id, wellbore_id=node.wellbore_id)
        if limit is not None:
            qs = qs.filter(md_top__lte=limit)

        perforations = []
        for opening in qs.order_by('md_top'):
            statuses = OpeningStatus.objects.filter(opening=opening)
            if self.as_of is not None:
                statuses = statuses.filter(effective_date__lte=self.as_of)
            latest = statuses.order_by('-effective_date').first()
            if latest is None:
                continue

            ref_id = opening_ref(self.well_id, node.wellbore_id, opening.wellbore_opening_id)
            perforations.append(sd.Perforation(
                ref_id=ref_id,
                name=opening.opening_name,
                start_md=opening.md_top,
                end_md=clamp(opening.md_base, limit),
                status=latest.status,
                barrier_id=self.lookup.names(ref_id),
            ))
        return perforations
