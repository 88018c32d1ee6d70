"""
Plain data containers for an assembled well schematic.

Nothing here touches the database; providers fill these in and the API
layer turns them into JSON with ``Schematic.to_dict``.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from apps.well_core.services.reference_resolver import ReferenceDepths


@dataclass
class DepthBarrier:
    barrier_id: str
    from_depth: Optional[float]
    to_depth: Optional[float]
    is_combined: bool = False


@dataclass
class IntegrityTest:
    test_type: Optional[str]
    date_test: Optional[datetime] = None
    lot_md: Optional[float] = None
    lot_tvd: Optional[float] = None
    weight_lot_emw: Optional[float] = None
    weight_lot_amw: Optional[float] = None
    lot_press: Optional[float] = None
    total_bh_press: Optional[float] = None


@dataclass
class HoleSection:
    ref_id: str
    name: str
    start_md: float
    base_md: float
    length: float
    diameter: Optional[float]
    date_sect_end: Optional[datetime] = None
    barrier_id: str = ""
    integrity_tests: List[IntegrityTest] = field(default_factory=list)


@dataclass
class CasingComponent:
    ref_id: str
    component_id: str
    sect_type: str
    comp_type: str
    start_md: float
    bottom_md: float
    length: Optional[float] = None
    joint_count: Optional[int] = None
    od: Optional[float] = None
    id: Optional[float] = None
    grade_id: Optional[str] = None
    grade: Optional[str] = None
    approximate_weight: Optional[float] = None
    manufacturer: Optional[str] = None
    model: Optional[str] = None
    serial_no: Optional[str] = None
    description: Optional[str] = None
    section_name: Optional[str] = None
    press_rating_top: Optional[float] = None
    press_rating_bottom: Optional[float] = None
    burst_pressure: Optional[float] = None
    collapse_pressure: Optional[float] = None
    barrier_id: str = ""
    barrier_from: Optional[float] = None
    barrier_to: Optional[float] = None


@dataclass
class Casing:
    ref_id: str
    assembly_id: str
    name: str
    string_type: str
    index: int
    md_top: float
    md_base: float
    tvd_top: Optional[float] = None
    tvd_base: Optional[float] = None
    assembly_size: Optional[float] = None
    is_casing: bool = True
    liner: Optional[str] = None
    components: List[CasingComponent] = field(default_factory=list)
    barriers: List[DepthBarrier] = field(default_factory=list)
    barrier_id: str = ""


@dataclass
class AssemblyComponent:
    ref_id: str
    component_id: str
    sect_type: str
    comp_type: str
    assembly_name: str
    start_md: float
    bottom_md: float
    length: Optional[float] = None
    actual_length: Optional[float] = None
    od: Optional[float] = None
    id: Optional[float] = None
    manufacturer: Optional[str] = None
    model: Optional[str] = None
    description: Optional[str] = None
    item_description: Optional[str] = None
    grade: Optional[str] = None
    joints: Optional[int] = None
    approximate_weight: Optional[float] = None
    press_rating_top: Optional[float] = None
    burst_pressure: Optional[float] = None
    collapse_pressure: Optional[float] = None
    # safety valve
    recorded_open_press: Optional[float] = None
    recorded_close_press: Optional[float] = None
    nominal_press: Optional[float] = None
    maximum_hydraulics: Optional[float] = None
    function_test_pass: Optional[str] = None
    # packer
    pressure_test_above: Optional[float] = None
    pressure_test_below: Optional[float] = None
    barrier_id: str = ""
    barrier_from: Optional[float] = None
    barrier_to: Optional[float] = None
    is_barrier_closed_at_top: bool = False
    is_barrier_closed_at_bottom: bool = False
    include_seals: bool = True


@dataclass
class Assembly:
    ref_id: str
    assembly_id: str
    name: str
    md_top: float
    md_base: float
    tvd_top: Optional[float] = None
    tvd_base: Optional[float] = None
    assembly_size: Optional[float] = None
    is_casing: bool = False
    components: List[AssemblyComponent] = field(default_factory=list)
    barrier_id: str = ""


@dataclass
class CementStage:
    ref_id: str
    cement_job_id: str
    cement_stage_id: str
    top_md: float
    bottom_md: float
    casing_index: Optional[int]
    assembly_id: str
    assembly_name: Optional[str] = None
    assembly_od: Optional[float] = None
    tvd_top: Optional[float] = None
    stage_name: str = ""
    description: str = ""
    plug: bool = False
    drilled: bool = False
    plug_type: Optional[str] = None
    date_report: Optional[datetime] = None
    casing_test: Optional[float] = None
    casing_test_duration: Optional[float] = None
    casing_test_comment: Optional[str] = None
    liner_neg_test_tool: Optional[str] = None
    liner_emw_neg_test: Optional[float] = None
    barriers: List[DepthBarrier] = field(default_factory=list)
    barrier_id: str = ""


@dataclass
class Perforation:
    ref_id: str
    name: str
    start_md: float
    end_md: float
    status: Optional[str] = None
    barrier_id: str = ""


@dataclass
class FluidSegment:
    ref_id: str
    kind: str  # DRILLING or COMPLETION
    fluid_type: str
    start_depth: float
    end_depth: Optional[float]
    density: Optional[float] = None
    casing_index: Optional[int] = None
    inside_casing: bool = False
    inside_open_hole: bool = False
    inside_tubing: bool = False
    barriers: List[DepthBarrier] = field(default_factory=list)
    barrier_id: str = ""


@dataclass
class WellheadOutlet:
    ref_id: str
    comp_type: str
    sect_type: str
    location: Optional[str] = None
    manufacturer: Optional[str] = None
    model: Optional[str] = None
    working_pressure: Optional[str] = None
    description: str = ""
    barrier_id: str = ""


@dataclass
class WellheadHanger:
    ref_id: str
    comp_type: str
    model: Optional[str] = None
    size: Optional[float] = None
    description: str = ""
    barrier_id: str = ""
    is_barrier_closed: bool = True
    include_seals: bool = True


@dataclass
class WellheadComponent:
    ref_id: str
    sect_type: str
    comp_type: str
    manufacturer: Optional[str] = None
    model: Optional[str] = None
    description: str = ""
    wellhead_section: Optional[str] = None
    top_pressure_rating: Optional[float] = None
    test_result: Optional[str] = None
    test_duration: Optional[float] = None
    test_pressure: Optional[float] = None
    comments: Optional[str] = None
    install_date: Optional[datetime] = None
    removal_date: Optional[datetime] = None
    barrier_id: str = ""
    outlets: List[WellheadOutlet] = field(default_factory=list)
    hangers: List[WellheadHanger] = field(default_factory=list)


@dataclass
class AnnularPressure:
    annulus: str
    pressure: Optional[float] = None
    test_date: Optional[datetime] = None
    sequence_no: str = ""
    comments: Optional[str] = None
    pressure_reliefs: List[Dict[str, Any]] = field(default_factory=list)


@dataclass
class Wellhead:
    components: List[WellheadComponent] = field(default_factory=list)
    annular_pressures: List[AnnularPressure] = field(default_factory=list)


@dataclass
class LithologyFormation:
    ref_id: str
    lithology: Optional[str]
    label: Optional[str]
    description: str
    top: Optional[float] = None
    base: Optional[float] = None
    top_tvd: Optional[float] = None
    base_tvd: Optional[float] = None
    barrier_depth: Optional[float] = None
    phase: Optional[str] = None
    comments: Optional[str] = None
    barrier_id: str = ""


@dataclass
class SurveyPoint:
    md: float
    inc: Optional[float] = None
    azi: Optional[float] = None
    tvd: Optional[float] = None
    ns: Optional[float] = None
    ew: Optional[float] = None


@dataclass
class GradientPoint:
    formation: str
    depth_tvd: float
    value: float


@dataclass
class DeratingLoad:
    pressure_survey_id: str
    final_load_simm_id: str
    trapped_volume_id: str = ""
    assembly_name: str = ""
    sequence_no: Optional[int] = None
    casing_od: Optional[float] = None
    top_interval: Optional[float] = None
    base_interval: Optional[float] = None
    wear: Optional[float] = None
    ovality: Optional[float] = None
    nom_burst_pressure: Optional[float] = None
    nom_collapse_pressure: Optional[float] = None
    calc_burst_pressure: Optional[float] = None
    calc_collapse_pressure: Optional[float] = None
    comments: str = ""


@dataclass
class Schematic:
    well_id: str
    wellbore_id: str
    scenario_id: str
    schematic_date: Optional[datetime]
    phase: str
    wellbore_path: List[str] = field(default_factory=list)
    units: Dict[str, Any] = field(default_factory=dict)
    reference_depths: ReferenceDepths = field(default_factory=ReferenceDepths)
    wellhead: Wellhead = field(default_factory=Wellhead)
    hole_sections: List[HoleSection] = field(default_factory=list)
    casings: List[Casing] = field(default_factory=list)
    cement_stages: List[CementStage] = field(default_factory=list)
    assemblies: List[Assembly] = field(default_factory=list)
    perforations: List[Perforation] = field(default_factory=list)
    fluids: List[FluidSegment] = field(default_factory=list)
    survey: List[SurveyPoint] = field(default_factory=list)
    pore_pressure_gradient: List[GradientPoint] = field(default_factory=list)
    fracture_gradient: List[GradientPoint] = field(default_factory=list)
    temperature_gradient: List[GradientPoint] = field(default_factory=list)
    lithology: List[LithologyFormation] = field(default_factory=list)
    logs: List[Dict[str, Any]] = field(default_factory=list)
    catalogs: List[Dict[str, Any]] = field(default_factory=list)
    annulus: List[Dict[str, Any]] = field(default_factory=list)
    derating_data: List[DeratingLoad] = field(default_factory=list)
    latest_report: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
