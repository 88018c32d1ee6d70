"""
Barrier overlay endpoints.

POST /api/barriers/            all barrier elements on the diagram for a date
POST /api/barriers/diagrams/   diagrams of a well/wellbore/scenario
POST /api/barriers/modify/     toggle elements in and out of barriers
POST /api/barriers/evaluate/   replace envelope evaluations
"""

import logging

from rest_framework import status
from rest_framework.authentication import SessionAuthentication
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.authentication import JWTAuthentication

from apps.barriers.serializers.barriers import (
    BarrierDiagramSerializer,
    BarrierElementRowSerializer,
    BarrierEnvelopeTestSerializer,
)
from apps.barriers.serializers.requests import (
    BarrierDiagramsQuerySerializer,
    BarriersEvaluateSerializer,
    BarriersModifySerializer,
    SchematicQuerySerializer,
)
from apps.barriers.services.barrier_overlay import get_all_barriers, get_barrier_diagrams, modify_barriers
from apps.barriers.services.evaluation import set_barrier_evaluation
from apps.barriers.services.ref_ids import MalformedReferenceId

logger = logging.getLogger(__name__)


class BarriersListView(APIView):
    authentication_classes = [JWTAuthentication, SessionAuthentication]
    permission_classes = [IsAuthenticated]

    def post(self, request):
        query = SchematicQuerySerializer(data=request.data)
        query.is_valid(raise_exception=True)
        key = query.diagram_key()
        logger.info(f"Getting all barriers for well {key.well_id} wellbore {key.wellbore_id}")

        barriers = get_all_barriers(key)
        if barriers is None:
            return Response({"error": "No barrier diagram for this date"}, status=status.HTTP_404_NOT_FOUND)
        return Response(BarrierElementRowSerializer(barriers, many=True).data)


class BarrierDiagramsView(APIView):
    authentication_classes = [JWTAuthentication, SessionAuthentication]
    permission_classes = [IsAuthenticated]

    def post(self, request):
        query = BarrierDiagramsQuerySerializer(data=request.data)
        query.is_valid(raise_exception=True)
        data = query.validated_data
        logger.info(f"Getting barrier diagrams for well {data['well_id']} wellbore {data['wellbore_id']}")

        diagrams = get_barrier_diagrams(data['well_id'], data['wellbore_id'], data['scenario_id'])
        return Response(BarrierDiagramSerializer(diagrams, many=True).data)


class BarriersModifyView(APIView):
    authentication_classes = [JWTAuthentication, SessionAuthentication]
    permission_classes = [IsAuthenticated]

    def post(self, request):
        payload = BarriersModifySerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        key = payload.diagram_key()
        logger.info(f"Modifying barriers for well {key.well_id} wellbore {key.wellbore_id}")

        try:
            results = modify_barriers(key, payload.validated_data['barrier_modify_data'])
        except MalformedReferenceId as e:
            logger.warning(f"Rejected barrier modification: {e}")
            return Response({"error": str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response({
            "results": [
                {
                    "barrier": r.barrier,
                    "ref_id": r.ref_id,
                    "action": r.action,
                    "barrier_element_id": r.barrier_element_id,
                }
                for r in results
            ]
        })


class BarriersEvaluateView(APIView):
    authentication_classes = [JWTAuthentication, SessionAuthentication]
    permission_classes = [IsAuthenticated]

    def post(self, request):
        payload = BarriersEvaluateSerializer(data=request.data)
        payload.is_valid(raise_exception=True)

        tests = set_barrier_evaluation(
            payload.validated_data['evaluations'],
            create_user=request.user.get_username(),
        )
        return Response(BarrierEnvelopeTestSerializer(tests, many=True).data)
