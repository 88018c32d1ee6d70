from __future__ import annotations

from datetime import datetime, timezone

from django.test import TestCase

from apps.barriers.models import (
    BarrierDiagram,
    BarrierElement,
    BarrierElementTestLink,
    BarrierElementTestLinkAudit,
    BarrierEnvelope,
    BarrierEnvelopeTest,
    BarrierEnvelopeTestAudit,
    BarrierStatus,
)
from apps.barriers.services.barrier_lookup import BarrierLookup, get_element_barriers
from apps.barriers.services.barrier_overlay import (
    DiagramKey,
    get_all_barriers,
    get_or_create_diagram,
    modify_barriers,
)
from apps.barriers.services.evaluation import get_latest_envelope_test, set_barrier_evaluation
from apps.barriers.services.ref_ids import MalformedReferenceId

DAY = datetime(2024, 3, 1, tzinfo=timezone.utc)
KEY = DiagramKey("W1", "WB1", "SC1", DAY)
CEMENT_REF = "CdCementStageT/W1+WB1+JOB1+STG1"
HOLE_REF = "CdHoleSectGroupT/W1+WB1+HS1"


class TestDiagramGetOrCreate(TestCase):
    def test_same_natural_key_returns_same_diagram(self):
        first = get_or_create_diagram(KEY)
        second = get_or_create_diagram(KEY)
        self.assertEqual(first.barrier_diagram_id, second.barrier_diagram_id)
        self.assertEqual(BarrierDiagram.objects.count(), 1)
        self.assertEqual(len(first.barrier_diagram_id), 10)

    def test_other_date_gets_its_own_diagram(self):
        first = get_or_create_diagram(KEY)
        other = get_or_create_diagram(DiagramKey("W1", "WB1", "SC1", datetime(2024, 3, 2, tzinfo=timezone.utc)))
        self.assertNotEqual(first.barrier_diagram_id, other.barrier_diagram_id)


class TestModifyBarriers(TestCase):
    def test_toggle_twice_restores_element_set(self):
        item = {"barrier": "Primary", "element_type": "CEMENT", "ref_id": CEMENT_REF, "top": 1000.0, "base": 1200.0}

        added = modify_barriers(KEY, [item])
        self.assertEqual(added[0].action, "added")
        element = BarrierElement.objects.get(ref_id=CEMENT_REF)
        self.assertEqual(element.cement_job_id, "JOB1")
        self.assertEqual(element.cement_stage_id, "STG1")
        self.assertIsNone(element.hole_sect_group_id)
        self.assertEqual(element.top_depth, 1000.0)

        removed = modify_barriers(KEY, [item])
        self.assertEqual(removed[0].action, "removed")
        self.assertFalse(BarrierElement.objects.exists())
        # envelope and diagram stay
        self.assertEqual(BarrierEnvelope.objects.count(), 1)
        self.assertEqual(BarrierDiagram.objects.count(), 1)

    def test_same_ref_in_two_barriers(self):
        modify_barriers(KEY, [
            {"barrier": "Primary", "element_type": "HOLE_SECTION", "ref_id": HOLE_REF},
            {"barrier": "Secondary", "element_type": "HOLE_SECTION", "ref_id": HOLE_REF},
        ])
        self.assertEqual(BarrierElement.objects.filter(ref_id=HOLE_REF).count(), 2)

        lookup = BarrierLookup("W1", "WB1", "SC1", DAY)
        self.assertEqual(lookup.names(HOLE_REF), "Primary,Secondary")
        self.assertEqual(lookup.names(CEMENT_REF), "")

    def test_element_barriers_for_one_ref(self):
        later = DiagramKey("W1", "WB1", "SC1", datetime(2024, 3, 5, tzinfo=timezone.utc))
        modify_barriers(KEY, [{"barrier": "Primary", "element_type": "HOLE_SECTION", "ref_id": HOLE_REF, "top": 0.0, "base": 900.0}])
        modify_barriers(later, [{"barrier": "Secondary", "element_type": "HOLE_SECTION", "ref_id": HOLE_REF}])
        modify_barriers(later, [{"barrier": "Secondary", "element_type": "CEMENT", "ref_id": CEMENT_REF}])

        on_day = get_element_barriers("W1", "WB1", "SC1", DAY, HOLE_REF)
        self.assertEqual([b.barrier_name for b in on_day], ["Primary"])
        self.assertEqual((on_day[0].top_depth, on_day[0].base_depth), (0.0, 900.0))

        any_day = get_element_barriers("W1", "WB1", "SC1", None, HOLE_REF)
        self.assertEqual([b.barrier_name for b in any_day], ["Primary", "Secondary"])
        self.assertEqual(get_element_barriers("W1", "WB1", "SC2", None, HOLE_REF), [])

    def test_malformed_ref_rolls_back_whole_call(self):
        with self.assertRaises(MalformedReferenceId):
            modify_barriers(KEY, [
                {"barrier": "Primary", "element_type": "HOLE_SECTION", "ref_id": HOLE_REF},
                {"barrier": "Primary", "element_type": "CEMENT", "ref_id": "CdCementStageT/W1+STG1"},
            ])
        self.assertFalse(BarrierElement.objects.exists())
        self.assertFalse(BarrierDiagram.objects.exists())


class TestBarrierEvaluation(TestCase):
    def setUp(self):
        modify_barriers(KEY, [
            {"barrier": "Primary", "element_type": "CEMENT", "ref_id": CEMENT_REF},
            {"barrier": "Primary", "element_type": "HOLE_SECTION", "ref_id": HOLE_REF},
        ])
        self.envelope = BarrierEnvelope.objects.get(name="Primary")

    def _evaluate(self, cement_status, hole_status):
        return set_barrier_evaluation([
            {
                "ref_id": CEMENT_REF,
                "barrier_envelope_id": self.envelope.barrier_envelope_id,
                "status": cement_status,
                "component_ovality": 1.5,
                "details": "CBL ok",
            },
            {
                "ref_id": HOLE_REF,
                "barrier_envelope_id": self.envelope.barrier_envelope_id,
                "status": hole_status,
            },
        ], create_user="tester")

    def test_evaluation_writes_aggregate_status(self):
        tests = self._evaluate(BarrierStatus.EFFECTIVE, BarrierStatus.PARTIALLY_EFFECTIVE)

        self.assertEqual(len(tests), 1)
        self.assertEqual(tests[0].status, BarrierStatus.PARTIALLY_EFFECTIVE)
        self.assertEqual(tests[0].create_user, "tester")
        self.envelope.refresh_from_db()
        self.assertEqual(self.envelope.status, BarrierStatus.PARTIALLY_EFFECTIVE)
        self.assertEqual(BarrierElement.objects.get(ref_id=CEMENT_REF).component_ovality, 1.5)

    def test_reevaluation_replaces_live_rows_and_keeps_audit(self):
        self._evaluate(BarrierStatus.EFFECTIVE, BarrierStatus.EFFECTIVE)
        self._evaluate(BarrierStatus.EFFECTIVE, None)

        self.assertEqual(BarrierEnvelopeTest.objects.count(), 1)
        self.assertEqual(BarrierEnvelopeTest.objects.get().status, BarrierStatus.NOT_EFFECTIVE)
        self.assertEqual(BarrierElementTestLink.objects.count(), 2)
        self.assertEqual(BarrierEnvelopeTestAudit.objects.count(), 2)
        self.assertEqual(BarrierElementTestLinkAudit.objects.count(), 4)
        self.assertGreaterEqual(self.envelope.history.count(), 3)

    def test_unknown_envelope_is_skipped(self):
        tests = set_barrier_evaluation([
            {"ref_id": HOLE_REF, "barrier_envelope_id": "nope", "status": BarrierStatus.EFFECTIVE},
        ])
        self.assertEqual(tests, [])
        self.assertFalse(BarrierEnvelopeTest.objects.exists())

    def test_all_barriers_carry_live_status_and_history(self):
        self._evaluate(BarrierStatus.EFFECTIVE, BarrierStatus.NOT_EFFECTIVE)

        rows = get_all_barriers(KEY)
        self.assertEqual(len(rows), 2)
        by_ref = {row["ref_id"]: row for row in rows}
        self.assertEqual(by_ref[CEMENT_REF]["status"], BarrierStatus.EFFECTIVE)
        self.assertEqual(by_ref[CEMENT_REF]["details"], "CBL ok")
        self.assertEqual(by_ref[HOLE_REF]["envelope_status"], BarrierStatus.NOT_EFFECTIVE)
        self.assertEqual(len(by_ref[HOLE_REF]["element_history"]), 1)
        self.assertEqual(by_ref[HOLE_REF]["envelope_test_user"], "tester")

    def test_latest_envelope_test(self):
        self.assertIsNone(get_latest_envelope_test(self.envelope))

        self._evaluate(BarrierStatus.EFFECTIVE, BarrierStatus.EFFECTIVE)
        latest = get_latest_envelope_test(self.envelope)
        self.assertEqual(latest.status, BarrierStatus.EFFECTIVE)
        self.assertEqual(latest.barrier_diagram_id, self.envelope.barrier_diagram_id)

    def test_all_barriers_without_diagram_is_none(self):
        self.assertIsNone(get_all_barriers(DiagramKey("W1", "WB1", "SC1", datetime(2020, 1, 1, tzinfo=timezone.utc))))
