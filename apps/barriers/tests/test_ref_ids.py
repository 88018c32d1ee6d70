import pytest

from apps.barriers.services.ref_ids import (
    MalformedReferenceId,
    ReferenceId,
    SUB_ID_FIELDS,
    assembly_component_ref,
    cement_stage_ref,
    fluid_ref,
    sub_ids_for,
)


def test_encode_matches_wire_form():
    ref = cement_stage_ref("W1", "WB1", "JOB9", "STG3")
    assert ref == "CdCementStageT/W1+WB1+JOB9+STG3"

    parsed = ReferenceId.parse(ref)
    assert parsed.tag == "CdCementStageT"
    assert parsed.get("cement_job_id") == "JOB9"
    assert parsed.leaf_id == "STG3"


def test_cement_fills_job_and_stage_only():
    values = sub_ids_for("CEMENT", "CdCementStageT/W1+WB1+JOB9+STG3")
    assert values["cement_job_id"] == "JOB9"
    assert values["cement_stage_id"] == "STG3"
    assert set(values) == set(SUB_ID_FIELDS)
    others = {k: v for k, v in values.items() if k not in ("cement_job_id", "cement_stage_id")}
    assert all(v is None for v in others.values())


def test_casing_component_fills_assembly_and_component():
    values = sub_ids_for("casing", "CdAssemblyComp_Cas/W1+WB1+ASM1+COMP4")
    assert values["assembly_id"] == "ASM1"
    assert values["assembly_comp_id"] == "COMP4"
    assert values["hole_sect_group_id"] is None


def test_assembly_component_tag_carries_section_type():
    ref = assembly_component_ref("tub", "W1", "WB1", "ASM2", "C7")
    assert ref.startswith("CdAssemblyCompT_TUB/")

    values = sub_ids_for("ASSEMBLY_COMP", ref)
    assert values["assembly_id"] == "ASM2"
    assert values["assembly_comp_id"] == "C7"


def test_fluid_ref_allows_missing_event():
    ref = fluid_ref("W1", "WB1", "", "F1")
    assert ref == "CdFluidT/W1+WB1++F1"
    assert sub_ids_for("FLUID", ref)["fluid_id"] == "F1"


@pytest.mark.parametrize(
    "element_type,ref_id",
    [
        ("CEMENT", "CdCementStageT/W1+WB1+STG3"),           # missing job segment
        ("CEMENT", "CdCementStageT/W1++JOB9+STG3"),         # blank wellbore
        ("CEMENT", "CdHoleSectGroupT/W1+WB1+HS1"),          # tag not valid for type
        ("HOLE_SECTION", "CdUnknownT/W1+WB1+HS1"),
        ("HOLE_SECTION", "W1+WB1+HS1"),
        ("PIPE", "CdHoleSectGroupT/W1+WB1+HS1"),
    ],
)
def test_malformed_reference_ids_are_rejected(element_type, ref_id):
    with pytest.raises(MalformedReferenceId):
        sub_ids_for(element_type, ref_id)
