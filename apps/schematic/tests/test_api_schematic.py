from __future__ import annotations

import json

from django.contrib.auth.models import User
from django.test import Client, TestCase
from rest_framework_simplejwt.tokens import RefreshToken

from apps.well_core.models import Wellbore

from apps.schematic.tests.fixtures import make_assembly, make_hole_section, make_scenario, make_well

URL = "/api/well-schematic/"
QUERY = {
    "well_id": "W1",
    "wellbore_id": "WB1",
    "scenario_id": "SC1",
    "schematic_date": "2024-03-10",
}


class WellSchematicApiTest(TestCase):
    def setUp(self):
        self.client = Client()
        self.user = User.objects.create_user(username="engineer", password="testpass123")
        refresh = RefreshToken.for_user(self.user)
        self.headers = {
            "HTTP_AUTHORIZATION": f"Bearer {refresh.access_token}",
        }

        well = make_well()
        self.wellbore = Wellbore.objects.create(well=well, wellbore_id="WB1", wellbore_name="Original hole")
        make_scenario(well, self.wellbore)
        make_hole_section(self.wellbore, "HS1", 0.0, 1000.0, 17.5)
        make_assembly(self.wellbore, "C1", "Casing", 0.0, 995.0)

    def _post(self, payload):
        return self.client.post(URL, data=json.dumps(payload), content_type="application/json", **self.headers)

    def test_requires_authentication(self):
        response = self.client.post(URL, data=json.dumps(QUERY), content_type="application/json")
        self.assertEqual(response.status_code, 401)

    def test_returns_schematic(self):
        response = self._post({**QUERY, "schematic_date": "2024-03-10T17:30:00Z"})
        self.assertEqual(response.status_code, 200, response.content)

        body = response.json()
        for key in ("hole_sections", "casings", "cement_stages", "assemblies", "perforations", "fluids",
                    "wellhead", "survey", "lithology", "annulus", "reference_depths", "wellbore_path"):
            self.assertIn(key, body)
        self.assertEqual(body["phase"], "ACTUAL")
        self.assertEqual(body["wellbore_path"], ["WB1"])
        self.assertEqual(body["casings"][0]["ref_id"], "CdAssemblyT/W1+WB1+C1")
        self.assertEqual(body["hole_sections"][0]["diameter"], 17.5)

    def test_unknown_scenario_is_404(self):
        response = self._post({**QUERY, "scenario_id": "MISSING"})
        self.assertEqual(response.status_code, 404)
        self.assertIn("error", response.json())

    def test_missing_field_is_400(self):
        payload = dict(QUERY)
        payload.pop("wellbore_id")
        response = self._post(payload)
        self.assertEqual(response.status_code, 400)

    def test_cyclic_wellbore_chain_is_500(self):
        parent = Wellbore.objects.create(well_id="W1", wellbore_id="WB0", parent_wellbore=self.wellbore, ko_md=10.0)
        self.wellbore.parent_wellbore = parent
        self.wellbore.save()

        response = self._post(QUERY)
        self.assertEqual(response.status_code, 500)
        self.assertIn("corrupt", response.json()["error"])
