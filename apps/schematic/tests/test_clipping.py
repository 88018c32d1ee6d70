from datetime import datetime, timezone

from django.db import DatabaseError

from apps.schematic.services import schematic_data as sd
from apps.schematic.services.clipping import clamp, isolated, kickoff_md, kickoff_tvd
from apps.schematic.services.fluids import day_bounds, total_depth
from apps.well_core.services.wellbore_path import WellborePathNode

SIDETRACK = WellborePathNode("W1", "WB1", "ST01", "WB0", 1500.0, 1450.0)


def test_last_wellbore_is_not_clipped():
    assert kickoff_md(None) is None
    assert clamp(3000.0, kickoff_md(None)) == 3000.0


def test_clamp_at_successor_kickoff():
    limit = kickoff_md(SIDETRACK)
    assert clamp(3000.0, limit) == 1500.0
    assert clamp(1200.0, limit) == 1200.0
    assert clamp(None, limit) is None
    assert kickoff_tvd(SIDETRACK) == 1450.0


def test_isolated_turns_database_error_into_default():
    @isolated(list)
    def broken():
        raise DatabaseError("relation does not exist")

    @isolated(dict)
    def fine():
        return {"ok": True}

    assert broken() == []
    assert fine() == {"ok": True}
    assert broken.__name__ == "broken"


def test_day_bounds():
    start, end = day_bounds(datetime(2024, 3, 10, 14, 30, tzinfo=timezone.utc))
    assert start == datetime(2024, 3, 10, tzinfo=timezone.utc)
    assert end.date() == start.date()
    assert (end.hour, end.minute, end.second) == (23, 59, 59)


def test_total_depth_prefers_survey():
    survey = [sd.SurveyPoint(md=0.0), sd.SurveyPoint(md=3050.0)]
    sections = [sd.HoleSection("r", "h", 0.0, 3100.0, 3100.0, 8.5)]
    assert total_depth(survey, sections) == 3050.0
    assert total_depth([], sections) == 3100.0
    assert total_depth([], []) == 0.0
