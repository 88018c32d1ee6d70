"""
Composite reference ids: the join key between physical schematic elements
and barrier element rows.

Wire form is ``<Tag>/<seg>+<seg>+...``. Each tag has a fixed segment
layout; parsing validates the segment count against it.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

ASSEMBLY_COMP_PREFIX = "CdAssemblyCompT_"

TAG_LAYOUTS: Dict[str, Tuple[str, ...]] = {
    "CdWellheadCompT": ("well_id", "event_id", "wellhead_id", "wellhead_comp_id"),
    "CdWellheadHangerT": ("well_id", "event_id", "wellhead_id", "wellhead_comp_id", "wellhead_hanger_id"),
    "CdWellheadCompOutletT": ("well_id", "event_id", "wellhead_id", "wellhead_comp_id", "wellhead_outlet_id"),
    "CdWellboreFormationT": ("well_id", "wellbore_id", "wellbore_formation_id"),
    "CdHoleSectGroupT": ("well_id", "wellbore_id", "hole_sect_group_id"),
    "CdAssemblyT": ("well_id", "wellbore_id", "assembly_id"),
    "CdAssemblyComp_Cas": ("well_id", "wellbore_id", "assembly_id", "assembly_comp_id"),
    ASSEMBLY_COMP_PREFIX: ("well_id", "wellbore_id", "assembly_id", "assembly_comp_id"),
    "CdCementStageT": ("well_id", "wellbore_id", "cement_job_id", "cement_stage_id"),
    "CdWellboreOpeningT": ("well_id", "wellbore_id", "wellbore_opening_id"),
    "CdFluidT": ("well_id", "wellbore_id", "event_id", "fluid_id"),
}


@dataclass(frozen=True)
class ElementTypeRule:
    tags: Tuple[str, ...]
    fields: Tuple[str, ...]


# Element type -> accepted tags and the BarrierElement columns it fills.
ELEMENT_TYPE_RULES: Dict[str, ElementTypeRule] = {
    "WELLHEAD": ElementTypeRule(("CdWellheadCompT",), ("wellhead_comp_id",)),
    "HANGER": ElementTypeRule(("CdWellheadHangerT",), ("wellhead_hanger_id",)),
    "OUTLET": ElementTypeRule(("CdWellheadCompOutletT",), ("wellhead_outlet_id",)),
    "FORMATION": ElementTypeRule(("CdWellboreFormationT",), ("wellbore_formation_id",)),
    "HOLE_SECTION": ElementTypeRule(("CdHoleSectGroupT",), ("hole_sect_group_id",)),
    "CASING": ElementTypeRule(("CdAssemblyT", "CdAssemblyComp_Cas"), ("assembly_id", "assembly_comp_id")),
    "ASSEMBLY": ElementTypeRule(("CdAssemblyT",), ("assembly_id",)),
    "ASSEMBLY_COMP": ElementTypeRule((ASSEMBLY_COMP_PREFIX,), ("assembly_id", "assembly_comp_id")),
    "CEMENT": ElementTypeRule(("CdCementStageT",), ("cement_job_id", "cement_stage_id")),
    "PERFORATION": ElementTypeRule(("CdWellboreOpeningT",), ("wellbore_opening_id",)),
    "FLUID": ElementTypeRule(("CdFluidT",), ("fluid_id",)),
}

# Event ids are not always recorded on the source rows.
OPTIONAL_SEGMENTS = frozenset({"event_id"})

SUB_ID_FIELDS: Tuple[str, ...] = tuple(
    sorted({field for rule in ELEMENT_TYPE_RULES.values() for field in rule.fields})
)


class MalformedReferenceId(ValueError):
    """Reference id does not match the layout of its tag or element type."""


def layout_key(tag: str) -> str:
    """Assembly component tags carry the section type as suffix; they share one layout."""
    if tag.startswith(ASSEMBLY_COMP_PREFIX) and len(tag) > len(ASSEMBLY_COMP_PREFIX):
        return ASSEMBLY_COMP_PREFIX
    return tag


@dataclass(frozen=True)
class ReferenceId:
    tag: str
    segments: Tuple[str, ...]

    @classmethod
    def build(cls, tag: str, *segments) -> "ReferenceId":
        ref = cls(tag=tag, segments=tuple("" if s is None else str(s) for s in segments))
        ref.validate()
        return ref

    @classmethod
    def parse(cls, text: str) -> "ReferenceId":
        if not text or "/" not in text:
            raise MalformedReferenceId(f"Reference id {text!r} has no tag separator")
        tag, _, body = text.partition("/")
        ref = cls(tag=tag, segments=tuple(body.split("+")))
        ref.validate()
        return ref

    def validate(self) -> None:
        layout = TAG_LAYOUTS.get(layout_key(self.tag))
        if layout is None:
            raise MalformedReferenceId(f"Unknown reference id tag {self.tag!r}")
        if len(self.segments) != len(layout):
            raise MalformedReferenceId(
                f"{self.tag} expects {len(layout)} segments ({'+'.join(layout)}), got {len(self.segments)}"
            )
        for name, value in zip(layout, self.segments):
            if not value and name not in OPTIONAL_SEGMENTS:
                raise MalformedReferenceId(f"{self.tag} segment {name} is blank")

    @property
    def fields(self) -> Dict[str, str]:
        return dict(zip(TAG_LAYOUTS[layout_key(self.tag)], self.segments))

    def get(self, name: str) -> Optional[str]:
        return self.fields.get(name)

    @property
    def leaf_id(self) -> str:
        return self.segments[-1]

    def encode(self) -> str:
        return f"{self.tag}/{'+'.join(self.segments)}"

    def __str__(self) -> str:
        return self.encode()


def sub_ids_for(element_type: str, ref_id: str) -> Dict[str, Optional[str]]:
    """
    Parse ``ref_id`` for a barrier element of ``element_type`` and return
    every sub-id column, with only the ones belonging to that type set.
    """
    rule = ELEMENT_TYPE_RULES.get((element_type or "").upper())
    if rule is None:
        raise MalformedReferenceId(f"Unknown barrier element type {element_type!r}")

    ref = ReferenceId.parse(ref_id)
    if layout_key(ref.tag) not in rule.tags:
        raise MalformedReferenceId(f"Tag {ref.tag} is not valid for element type {element_type}")

    values: Dict[str, Optional[str]] = {field: None for field in SUB_ID_FIELDS}
    for field in rule.fields:
        values[field] = ref.get(field)
    return values


# Builders used by the schematic assembler.

def wellhead_component_ref(well_id, event_id, wellhead_id, comp_id) -> str:
    return ReferenceId.build("CdWellheadCompT", well_id, event_id, wellhead_id, comp_id).encode()


def wellhead_hanger_ref(well_id, event_id, wellhead_id, comp_id, hanger_id) -> str:
    return ReferenceId.build("CdWellheadHangerT", well_id, event_id, wellhead_id, comp_id, hanger_id).encode()


def wellhead_outlet_ref(well_id, event_id, wellhead_id, comp_id, outlet_id) -> str:
    return ReferenceId.build("CdWellheadCompOutletT", well_id, event_id, wellhead_id, comp_id, outlet_id).encode()


def formation_ref(well_id, wellbore_id, formation_id) -> str:
    return ReferenceId.build("CdWellboreFormationT", well_id, wellbore_id, formation_id).encode()


def hole_section_ref(well_id, wellbore_id, group_id) -> str:
    return ReferenceId.build("CdHoleSectGroupT", well_id, wellbore_id, group_id).encode()


def assembly_ref(well_id, wellbore_id, assembly_id) -> str:
    return ReferenceId.build("CdAssemblyT", well_id, wellbore_id, assembly_id).encode()


def casing_component_ref(well_id, wellbore_id, assembly_id, comp_id) -> str:
    return ReferenceId.build("CdAssemblyComp_Cas", well_id, wellbore_id, assembly_id, comp_id).encode()


def assembly_component_ref(sect_type_code, well_id, wellbore_id, assembly_id, comp_id) -> str:
    tag = f"{ASSEMBLY_COMP_PREFIX}{(sect_type_code or '').upper()}"
    return ReferenceId.build(tag, well_id, wellbore_id, assembly_id, comp_id).encode()


def cement_stage_ref(well_id, wellbore_id, job_id, stage_id) -> str:
    return ReferenceId.build("CdCementStageT", well_id, wellbore_id, job_id, stage_id).encode()


def opening_ref(well_id, wellbore_id, opening_id) -> str:
    return ReferenceId.build("CdWellboreOpeningT", well_id, wellbore_id, opening_id).encode()


def fluid_ref(well_id, wellbore_id, event_id, fluid_id) -> str:
    return ReferenceId.build("CdFluidT", well_id, wellbore_id, event_id, fluid_id).encode()
