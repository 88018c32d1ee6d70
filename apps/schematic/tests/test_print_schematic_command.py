import json
from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from apps.well_core.models import Wellbore

from apps.schematic.tests.fixtures import make_assembly, make_scenario, make_well


@pytest.fixture
def wellbore(db):
    well = make_well()
    wellbore = Wellbore.objects.create(well=well, wellbore_id="WB1", wellbore_name="Original hole")
    make_scenario(well, wellbore)
    make_assembly(wellbore, "C1", "Casing", 0.0, 995.0)
    return wellbore


def test_prints_schematic_json(wellbore):
    out = StringIO()
    call_command("print_schematic", "--well", "W1", "--wellbore", "WB1", "--scenario", "SC1", "--date", "2024-03-10", stdout=out)

    payload = json.loads(out.getvalue())
    assert payload["wellbore_path"] == ["WB1"]
    assert payload["schematic_date"].startswith("2024-03-10T00:00:00")
    assert [c["assembly_id"] for c in payload["casings"]] == ["C1"]


def test_unknown_scenario_writes_error(wellbore):
    out, err = StringIO(), StringIO()
    call_command("print_schematic", "--well", "W1", "--wellbore", "WB1", "--scenario", "NOPE", "--date", "2024-03-10", stdout=out, stderr=err)

    assert out.getvalue() == ""
    assert json.loads(err.getvalue())["error"] == "not_found"


def test_bad_date_is_rejected(wellbore):
    with pytest.raises(CommandError):
        call_command("print_schematic", "--well", "W1", "--wellbore", "WB1", "--scenario", "SC1", "--date", "10/03/2024")
