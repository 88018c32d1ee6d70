"""
Well schematic endpoint.

POST /api/well-schematic/
{
    "well_id": "W1",
    "wellbore_id": "WB2",
    "scenario_id": "SC1",
    "schematic_date": "2024-03-01"
}
"""

import logging

from rest_framework import status
from rest_framework.authentication import SessionAuthentication
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.authentication import JWTAuthentication

from apps.barriers.serializers.requests import SchematicQuerySerializer
from apps.schematic.services.schematic_service import assemble_schematic
from apps.well_core.services.wellbore_path import WellborePathCycleError

logger = logging.getLogger(__name__)


class WellSchematicView(APIView):
    authentication_classes = [JWTAuthentication, SessionAuthentication]
    permission_classes = [IsAuthenticated]

    def post(self, request):
        query = SchematicQuerySerializer(data=request.data)
        query.is_valid(raise_exception=True)
        data = query.validated_data

        try:
            schematic = assemble_schematic(
                data['well_id'], data['wellbore_id'], data['scenario_id'], data['schematic_date']
            )
        except WellborePathCycleError as e:
            logger.error(f"Corrupt wellbore hierarchy: {e}")
            return Response(
                {"error": f"Wellbore hierarchy is corrupt: {e}"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        if schematic is None:
            return Response(
                {"error": f"No schematic for well {data['well_id']} wellbore {data['wellbore_id']}"},
                status=status.HTTP_404_NOT_FOUND,
            )
        return Response(schematic.to_dict())
