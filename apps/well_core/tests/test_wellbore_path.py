from __future__ import annotations

from unittest import mock

from django.db import DatabaseError
from django.test import TestCase

from apps.well_core.models import Well, Wellbore
from apps.well_core.services.wellbore_path import WellborePathCycleError, resolve_path


class TestResolvePath(TestCase):
    def setUp(self):
        self.well = Well.objects.create(well_id="W1", well_common_name="Alpha 1")
        self.original = Wellbore.objects.create(well=self.well, wellbore_id="WB0", wellbore_name="Original hole")
        self.st1 = Wellbore.objects.create(
            well=self.well, wellbore_id="WB1", wellbore_name="ST01", parent_wellbore=self.original, ko_md=2500.0, ko_tvd=2400.0
        )
        self.st2 = Wellbore.objects.create(
            well=self.well, wellbore_id="WB2", wellbore_name="ST02", parent_wellbore=self.st1, ko_md=3200.0, ko_tvd=3000.0
        )

    def test_path_is_top_to_bottom(self):
        path = resolve_path("W1", "WB2")

        self.assertEqual([node.wellbore_id for node in path], ["WB0", "WB1", "WB2"])
        self.assertIsNone(path[0].parent_wellbore_id)
        for previous, node in zip(path, path[1:]):
            self.assertEqual(node.parent_wellbore_id, previous.wellbore_id)
        self.assertEqual(path[1].kickoff_md, 2500.0)

    def test_original_hole_alone(self):
        path = resolve_path("W1", "WB0")
        self.assertEqual(len(path), 1)
        self.assertEqual(path[0].name, "Original hole")

    def test_unknown_wellbore_gives_empty_path(self):
        self.assertEqual(resolve_path("W1", "NOPE"), [])

    def test_parent_outside_well_gives_empty_path(self):
        other = Well.objects.create(well_id="W2")
        foreign = Wellbore.objects.create(well=other, wellbore_id="WBX")
        Wellbore.objects.create(well=self.well, wellbore_id="WB9", parent_wellbore=foreign, ko_md=100.0)

        self.assertEqual(resolve_path("W1", "WB9"), [])

    def test_cycle_raises(self):
        Wellbore.objects.filter(wellbore_id="WB0").update(parent_wellbore_id="WB2")

        with self.assertRaises(WellborePathCycleError):
            resolve_path("W1", "WB2")

    def test_database_error_gives_empty_path(self):
        with mock.patch.object(Wellbore.objects, "filter", side_effect=DatabaseError("connection lost")):
            self.assertEqual(resolve_path("W1", "WB2"), [])
