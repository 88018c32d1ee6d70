import json

from django.test import TestCase

from apps.barriers.services.barrier_lookup import BarrierLookup
from apps.schematic.services import site_facts
from apps.well_core.models import (
    DailyReport,
    FinalLoadSimm,
    FormationPick,
    LogInterval,
    PressureSurvey,
    ScenarioFormationLink,
    Wellbore,
    WellboreFormation,
    WellboreGradient,
    Wellhead,
    WellheadAnnularPressure,
    WellheadComponent,
    WellheadHanger,
    WellheadOutlet,
    WellheadPressureRelief,
)

from apps.schematic.tests.fixtures import day, make_assembly, make_scenario, make_well


class TestWellhead(TestCase):
    def setUp(self):
        self.well = make_well()
        self.wellbore = Wellbore.objects.create(well=self.well, wellbore_id="WB1")
        self.lookup = BarrierLookup("W1", "WB1", "SC1", day(10))
        self.plan = make_scenario(self.well, self.wellbore, scenario_id="PL1", phase="PLAN")

        actual = Wellhead.objects.create(wellhead_id="WH1", well=self.well, event_id="EV1")
        planned = Wellhead.objects.create(wellhead_id="WH2", well=self.well, scenario=self.plan)

        self.spool = WellheadComponent.objects.create(
            wellhead_comp_id="WC2", wellhead=actual, well=self.well, event_id="EV1", sequence_no=2,
            sect_type_code="TS", comp_type_code="SPOOL", make="Cameron", model="CTS", wellhead_section="B",
            install_date=day(2),
        )
        WellheadComponent.objects.create(
            wellhead_comp_id="WC1", wellhead=actual, well=self.well, event_id="EV1", sequence_no=1,
            sect_type_code="CH", comp_type_code="HOUSING", make="Cameron", model="C22", wellhead_section="A",
            install_date=day(1),
        )
        WellheadComponent.objects.create(
            wellhead_comp_id="WC0", wellhead=actual, well=self.well, sequence_no=0,
            install_date=day(1), removal_date=day(4),
        )
        WellheadComponent.objects.create(
            wellhead_comp_id="WP1", wellhead=planned, well=self.well, sequence_no=1, install_date=day(25),
        )

        WellheadOutlet.objects.create(
            outlet_id="O1", component=self.spool, comp_type_code="GV", sect_type_code="VALVE",
            outlet_location="Left", valve_make="WKM", valve_model="M", valve_install_date=day(2),
        )
        WellheadOutlet.objects.create(
            outlet_id="O2", component=self.spool, sequence_no=1, valve_install_date=day(2), valve_removal_date=day(6),
        )

        tubing = make_assembly(self.wellbore, "T1", "Tubing", 0.0, 2800.0)
        WellheadHanger.objects.create(
            wellhead_hanger_id="H1", component=self.spool, assembly=tubing, comp_type_code="TH", model="TC-1A", hanger_size=4.5,
        )
        WellheadHanger.objects.create(wellhead_hanger_id="H2", component=self.spool, comp_type_code="TH")

    def test_actual_wellhead_in_place(self):
        components = site_facts.get_wellhead_components("W1", day(10), self.lookup)

        self.assertEqual([c.ref_id for c in components], [
            "CdWellheadCompT/W1+EV1+WH1+WC1",
            "CdWellheadCompT/W1+EV1+WH1+WC2",
        ])
        spool = components[1]
        self.assertEqual(spool.description, "(B) TS - SPOOL - Cameron - CTS")
        self.assertEqual([o.description for o in spool.outlets], ["GV - Left - M - WKM"])
        self.assertEqual(len(spool.hangers), 1)
        self.assertEqual(spool.hangers[0].description, "TC-1A - 4.5 // TH")

    def test_planned_wellhead_ignores_dates(self):
        components = site_facts.get_wellhead_components("W1", None, self.lookup, scenario_id="PL1")
        self.assertEqual([c.ref_id.split("+")[-1] for c in components], ["WP1"])

    def test_annular_pressures_with_reliefs(self):
        reading = WellheadAnnularPressure.objects.create(
            wellhead_ann_press_id="AP1", wellhead_id="WH1", well=self.well, annulus="A", sequence_no="1", pressure=350.0,
        )
        WellheadPressureRelief.objects.create(annular_pressure=reading, annulus="A", drained_volume=2.5, max_press=400.0)

        wellhead = site_facts.get_wellhead("W1", day(10), self.lookup)

        self.assertEqual(len(wellhead.annular_pressures), 1)
        relief = wellhead.annular_pressures[0].pressure_reliefs[0]
        self.assertEqual((relief["drained_volume"], relief["max_press"]), (2.5, 400.0))


class TestCurvesAndGeology(TestCase):
    def setUp(self):
        self.well = make_well()
        self.wellbore = Wellbore.objects.create(well=self.well, wellbore_id="WB1")
        self.scenario = make_scenario(self.well, self.wellbore)
        self.lookup = BarrierLookup("W1", "WB1", "SC1", day(10))

    def test_gradient_is_one_kind_by_depth(self):
        for depth, value in ((2000.0, 9.5), (1000.0, 8.9)):
            WellboreGradient.objects.create(
                well=self.well, wellbore=self.wellbore, kind=WellboreGradient.KIND_PORE_PRESSURE, depth_tvd=depth, value=value
            )
        WellboreGradient.objects.create(
            well=self.well, wellbore=self.wellbore, kind=WellboreGradient.KIND_FRACTURE, depth_tvd=1500.0, value=14.0
        )

        points = site_facts.get_gradient("W1", "WB1", WellboreGradient.KIND_PORE_PRESSURE)
        self.assertEqual([(p.depth_tvd, p.value) for p in points], [(1000.0, 8.9), (2000.0, 9.5)])

    def test_lithology_uses_logged_formations(self):
        shale = WellboreFormation.objects.create(
            wellbore_formation_id="F1", well=self.well, wellbore=self.wellbore, formation_name="Upper shale",
            lithology_name="Shale", strat_unit_name="US", prognosed_md=800.0,
        )
        FormationPick.objects.create(formation=shale, md_top=810.0, md_base=1200.0, phase="ACTUAL")
        sand = WellboreFormation.objects.create(
            wellbore_formation_id="F2", well=self.well, wellbore=self.wellbore, formation_name="Reservoir", prognosed_md=2500.0,
        )
        unlogged = WellboreFormation.objects.create(
            wellbore_formation_id="F3", well=self.well, wellbore=self.wellbore, prognosed_md=100.0,
        )
        ScenarioFormationLink.objects.create(scenario=self.scenario, formation=sand, is_log=True)
        ScenarioFormationLink.objects.create(scenario=self.scenario, formation=shale, is_log=True)
        ScenarioFormationLink.objects.create(scenario=self.scenario, formation=unlogged, is_log=False)

        formations = site_facts.get_lithology("W1", "WB1", "SC1", self.lookup)

        self.assertEqual([f.description for f in formations], ["Upper shale", "Reservoir"])
        self.assertEqual((formations[0].top, formations[0].barrier_depth), (810.0, 1200.0))
        self.assertIsNone(formations[1].top)

    def test_log_comments_are_json_text(self):
        LogInterval.objects.create(
            log_interval_id="L1", well=self.well, wellbore=self.wellbore, log_date=day(4), service="GR",
            comments={"remark": "repeat section"},
        )
        logs = site_facts.get_logs("W1", "WB1")
        self.assertEqual(json.loads(logs[0]["comments"]), {"remark": "repeat section"})


class TestDeratingData(TestCase):
    def setUp(self):
        self.well = make_well()
        self.wellbore = Wellbore.objects.create(well=self.well, wellbore_id="WB1")
        early = self._survey("PS1", "R1", day(3))
        late = self._survey("PS2", "R2", day(15))

        FinalLoadSimm.objects.create(
            final_load_simm_id="FL2", pressure_survey=early, assembly_name="9 5/8 Casing", sequence_no=2,
            casing_od=9.625, top_interval=0.0, base_interval=2000.0, wear=12.0, ovality=0.5,
            nom_burst_pressure=6870.0, calc_burst_pressure=6045.0,
        )
        FinalLoadSimm.objects.create(
            final_load_simm_id="FL1", pressure_survey=early, assembly_name="13 3/8 Casing", sequence_no=1,
            nom_collapse_pressure=2260.0, calc_collapse_pressure=2100.0,
        )
        FinalLoadSimm.objects.create(final_load_simm_id="FL3", pressure_survey=late, sequence_no=0)

    def _survey(self, survey_id, report_id, reported):
        report = DailyReport.objects.create(
            report_journal_id=report_id, well=self.well, wellbore=self.wellbore, date_report=reported
        )
        return PressureSurvey.objects.create(
            pressure_survey_id=survey_id, well=self.well, wellbore=self.wellbore, daily_report=report
        )

    def test_reported_on_or_before_date_by_sequence(self):
        loads = site_facts.get_derating_data("W1", "WB1", day(10))

        self.assertEqual([load.final_load_simm_id for load in loads], ["FL1", "FL2"])
        self.assertEqual(loads[0].calc_collapse_pressure, 2100.0)
        self.assertEqual((loads[1].wear, loads[1].calc_burst_pressure), (12.0, 6045.0))
        self.assertEqual(loads[1].pressure_survey_id, "PS1")

    def test_report_day_itself_is_included(self):
        loads = site_facts.get_derating_data("W1", "WB1", day(15))
        self.assertEqual([load.final_load_simm_id for load in loads], ["FL3", "FL1", "FL2"])

    def test_other_wellbore_has_none(self):
        Wellbore.objects.create(well=self.well, wellbore_id="WB2")
        self.assertEqual(site_facts.get_derating_data("W1", "WB2", day(20)), [])
