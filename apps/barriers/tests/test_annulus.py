from __future__ import annotations

from datetime import datetime, timezone

from django.test import TestCase

from apps.barriers.models import AnnulusElement, AnnulusTest
from apps.barriers.services.annulus import (
    evaluate_annulus,
    get_annulus_data,
    get_annulus_latest_tests,
    set_annulus_element,
)
from apps.barriers.services.barrier_overlay import DiagramKey

KEY = DiagramKey("W1", "WB1", "SC1", datetime(2024, 3, 1, tzinfo=timezone.utc))


class TestAnnulus(TestCase):
    def setUp(self):
        self.element = set_annulus_element(KEY, "A", pressure=500.0, density=1.1)

    def test_evaluate_replaces_tests(self):
        evaluate_annulus(self.element, 900.0, 1900.0, "0", 2900.0, "1")
        evaluate_annulus(self.element, 1000.0, 2000.0, "1", 3000.0, "2", create_user="tester")

        self.assertEqual(AnnulusTest.objects.filter(annulus_element=self.element).count(), 3)
        latest = get_annulus_latest_tests(self.element)
        self.assertEqual(latest.mop_value, 1000.0)
        self.assertEqual(latest.mawop_value, 2000.0)
        self.assertEqual(latest.mawop_location, "1")
        self.assertEqual(latest.maasp_value, 3000.0)
        self.assertEqual(latest.maasp_location, "2")

    def test_maasp_read_without_mawop(self):
        AnnulusTest.objects.create(
            annulus_element=self.element,
            barrier_diagram_id=self.element.barrier_diagram_id,
            well_id="W1",
            wellbore_id="WB1",
            scenario_id="SC1",
            test_type=AnnulusTest.MAASP,
            pressure=3000.0,
            location="2",
            last_test_date=KEY.diagram_date,
        )
        latest = get_annulus_latest_tests(self.element)
        self.assertIsNone(latest.mawop_value)
        self.assertIsNone(latest.mop_value)
        self.assertEqual(latest.maasp_value, 3000.0)
        self.assertEqual(latest.maasp_location, "2")

    def test_replacing_annulus_drops_its_tests(self):
        evaluate_annulus(self.element, 1000.0, 2000.0, "1", 3000.0, "2")
        replaced = set_annulus_element(KEY, "A", pressure=600.0, density=1.2)

        self.assertEqual(AnnulusElement.objects.filter(name="A").count(), 1)
        self.assertNotEqual(replaced.annulus_element_id, self.element.annulus_element_id)
        self.assertFalse(AnnulusTest.objects.exists())

    def test_annulus_data_merges_latest_values(self):
        set_annulus_element(KEY, "B", pressure=None, density=None)
        evaluate_annulus(self.element, 1000.0, 2000.0, "1", 3000.0, "2")

        data = get_annulus_data(KEY)
        self.assertEqual([row["name"] for row in data], ["A", "B"])
        self.assertEqual(data[0]["maasp_value"], 3000.0)
        self.assertIsNone(data[1]["mop_value"])
