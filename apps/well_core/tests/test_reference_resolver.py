from __future__ import annotations

from datetime import datetime, timezone

from django.test import TestCase

from apps.well_core.models import (
    DailyReport,
    Datum,
    DefinitiveSurveyHeader,
    HoleSection,
    HoleSectionGroup,
    Scenario,
    SurveyStation,
    Well,
    Wellbore,
)
from apps.well_core.services.reference_resolver import (
    SYSTEM_DATUM_MSL,
    SYSTEM_DATUM_NONE,
    get_design,
    get_latest_daily_report,
    get_max_hole_diameter,
    get_reference_depths,
    get_survey_stations,
    round_depth,
)


def at(day: int) -> datetime:
    return datetime(2024, 3, day, tzinfo=timezone.utc)


def test_round_depth():
    assert round_depth(1234.5678) == 1234.6
    assert round_depth(8.49999, 3) == 8.5
    assert round_depth(None) is None


class TestReferenceResolver(TestCase):
    def setUp(self):
        self.well = Well.objects.create(well_id="W1", is_offshore=True, water_depth=80.0, wellhead_depth=-80.0)
        self.wellbore = Wellbore.objects.create(well=self.well, wellbore_id="WB1")

    def test_reference_depths_from_default_datum(self):
        Datum.objects.create(datum_id="D0", well=self.well, datum_elevation=10.0, is_default=False)
        Datum.objects.create(datum_id="D1", well=self.well, datum_elevation=105.3, is_default=True)

        depths = get_reference_depths("W1")
        self.assertTrue(depths.offshore)
        self.assertEqual(depths.air_gap, 25.3)
        self.assertEqual(depths.mudline, depths.air_gap)
        self.assertEqual(depths.datum_elevation, 105.3)
        self.assertEqual(depths.water_depth, 80.0)
        self.assertEqual(depths.system_datum, SYSTEM_DATUM_MSL)

    def test_reference_depths_without_datum(self):
        depths = get_reference_depths("W1")
        self.assertEqual(depths.air_gap, 0.0)
        self.assertEqual(depths.system_datum, SYSTEM_DATUM_NONE)

    def test_design_and_survey(self):
        header = DefinitiveSurveyHeader.objects.create(def_survey_header_id="H1", well=self.well, wellbore=self.wellbore)
        SurveyStation.objects.create(header=header, md=2000.0, tvd=1950.0)
        SurveyStation.objects.create(header=header, md=0.0, tvd=0.0)
        Scenario.objects.create(
            scenario_id="SC1", well=self.well, wellbore=self.wellbore, phase=Scenario.PHASE_ACTUAL, def_survey_header=header
        )

        design = get_design("SC1", "W1", "WB1")
        self.assertEqual(design.phase, Scenario.PHASE_ACTUAL)
        self.assertEqual([s.md for s in get_survey_stations(design)], [0.0, 2000.0])

        self.assertIsNone(get_design("SC1", "W1", "OTHER"))
        self.assertEqual(get_survey_stations(None), [])

    def test_max_hole_diameter(self):
        group = HoleSectionGroup.objects.create(
            hole_sect_group_id="HS1", well=self.well, wellbore=self.wellbore, md_hole_sect_top=0.0, md_hole_sect_base=1000.0
        )
        HoleSection.objects.create(group=group, diameter=12.25)
        HoleSection.objects.create(group=group, diameter=17.5)
        self.assertEqual(get_max_hole_diameter(group), 17.5)

    def test_latest_daily_report(self):
        DailyReport.objects.create(report_journal_id="R1", well=self.well, wellbore=self.wellbore, date_report=at(1))
        DailyReport.objects.create(report_journal_id="R2", well=self.well, wellbore=self.wellbore, date_report=at(5))

        self.assertEqual(get_latest_daily_report("W1", "WB1", at(3)).report_journal_id, "R1")
        self.assertIsNone(get_latest_daily_report("W1", "WB1", datetime(2023, 1, 1, tzinfo=timezone.utc)))

