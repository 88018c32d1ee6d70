"""
End-to-end tests for the barrier and annulus endpoints, authenticated with
a simplejwt access token.
"""

from __future__ import annotations

import json

from django.contrib.auth.models import User
from django.test import Client, TestCase
from rest_framework_simplejwt.tokens import RefreshToken

from apps.barriers.models import AnnulusTest, BarrierDiagram, BarrierElement, BarrierEnvelope, BarrierStatus

ANCHOR = {
    "well_id": "W1",
    "wellbore_id": "WB1",
    "scenario_id": "SC1",
    "schematic_date": "2024-03-01T15:45:00Z",
}
HOLE_REF = "CdHoleSectGroupT/W1+WB1+HS1"


class BarrierApiTest(TestCase):
    def setUp(self):
        self.client = Client()
        self.user = User.objects.create_user(username="integrity", password="testpass123")
        refresh = RefreshToken.for_user(self.user)
        self.headers = {
            "HTTP_AUTHORIZATION": f"Bearer {refresh.access_token}",
        }

    def _post(self, url, payload, **extra):
        headers = {**self.headers, **extra}
        return self.client.post(url, data=json.dumps(payload), content_type="application/json", **headers)

    def _toggle(self, ref_id=HOLE_REF, element_type="hole_section"):
        payload = {
            **ANCHOR,
            "barrier_modify_data": [
                {"barrier": "Primary", "element_type": element_type, "ref_id": ref_id, "top": 10.0, "base": 20.0},
            ],
        }
        return self._post("/api/barriers/modify/", payload)

    def test_requires_authentication(self):
        response = self.client.post("/api/barriers/modify/", data=json.dumps(ANCHOR), content_type="application/json")
        self.assertEqual(response.status_code, 401)

    def test_modify_truncates_date_and_toggles(self):
        response = self._toggle()
        self.assertEqual(response.status_code, 200, response.content)
        self.assertEqual(response.json()["results"][0]["action"], "added")

        diagram = BarrierDiagram.objects.get()
        self.assertEqual((diagram.diagram_date.hour, diagram.diagram_date.minute), (0, 0))

        response = self._toggle()
        self.assertEqual(response.json()["results"][0]["action"], "removed")
        self.assertFalse(BarrierElement.objects.exists())

    def test_malformed_ref_id_is_400(self):
        response = self._toggle(ref_id="CdHoleSectGroupT/W1+HS1")
        self.assertEqual(response.status_code, 400)
        self.assertIn("error", response.json())
        self.assertFalse(BarrierDiagram.objects.exists())

    def test_unknown_element_type_is_400(self):
        response = self._toggle(element_type="PIPE")
        self.assertEqual(response.status_code, 400)

    def test_list_without_diagram_is_404(self):
        response = self._post("/api/barriers/", ANCHOR)
        self.assertEqual(response.status_code, 404)

    def test_evaluate_then_list(self):
        self._toggle()
        envelope = BarrierEnvelope.objects.get()

        response = self._post("/api/barriers/evaluate/", {
            "evaluations": [
                {
                    "ref_id": HOLE_REF,
                    "barrier_envelope_id": envelope.barrier_envelope_id,
                    "status": BarrierStatus.PARTIALLY_EFFECTIVE,
                    "details": "washout",
                },
            ],
        })
        self.assertEqual(response.status_code, 200, response.content)
        tests = response.json()
        self.assertEqual(tests[0]["status"], BarrierStatus.PARTIALLY_EFFECTIVE)
        self.assertEqual(tests[0]["create_user"], "integrity")

        response = self._post("/api/barriers/", ANCHOR)
        self.assertEqual(response.status_code, 200, response.content)
        rows = response.json()
        self.assertEqual(len(rows), 1)
        self.assertEqual(rows[0]["name"], "Primary")
        self.assertEqual(rows[0]["envelope_test_user"], "integrity")
        self.assertIsNotNone(rows[0]["envelope_last_test_date"])
        self.assertEqual(rows[0]["status"], BarrierStatus.PARTIALLY_EFFECTIVE)

        response = self._post("/api/barriers/diagrams/", {k: ANCHOR[k] for k in ("well_id", "wellbore_id", "scenario_id")})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.json()), 1)

    def test_annulus_modify_and_evaluate(self):
        response = self._post("/api/annulus/modify/", {**ANCHOR, "name": "A", "pressure": 500, "density": 1.1})
        self.assertEqual(response.status_code, 200, response.content)
        element_id = response.json()["annulus_element_id"]

        payload = {
            "annulus_element_id": element_id,
            "mop": 1000,
            "mawop": 2000,
            "mawop_point": "1",
            "maasp": 3000,
            "maasp_point": "2",
        }
        self.assertEqual(self._post("/api/annulus/evaluate/", payload).status_code, 200)
        response = self._post("/api/annulus/evaluate/", payload)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.json()), 3)
        self.assertEqual(AnnulusTest.objects.filter(annulus_element_id=element_id).count(), 3)

    def test_annulus_evaluate_unknown_element_is_404(self):
        response = self._post("/api/annulus/evaluate/", {
            "annulus_element_id": "missing",
            "mop": None,
            "mawop": None,
            "maasp": None,
        })
        self.assertEqual(response.status_code, 404)
