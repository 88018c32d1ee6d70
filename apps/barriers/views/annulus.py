import logging

from rest_framework import status
from rest_framework.authentication import SessionAuthentication
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.authentication import JWTAuthentication

from apps.barriers.models import AnnulusElement
from apps.barriers.serializers.barriers import AnnulusElementSerializer, AnnulusTestSerializer
from apps.barriers.serializers.requests import AnnulusEvaluateSerializer, AnnulusModifySerializer
from apps.barriers.services.annulus import evaluate_annulus, set_annulus_element

logger = logging.getLogger(__name__)


class AnnulusModifyView(APIView):
    """POST /api/annulus/modify/ - create or replace an annulus on the diagram."""

    authentication_classes = [JWTAuthentication, SessionAuthentication]
    permission_classes = [IsAuthenticated]

    def post(self, request):
        payload = AnnulusModifySerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        data = payload.validated_data

        element = set_annulus_element(
            payload.diagram_key(),
            name=data['name'],
            pressure=data.get('pressure'),
            density=data.get('density'),
        )
        return Response(AnnulusElementSerializer(element).data)


class AnnulusEvaluateView(APIView):
    """POST /api/annulus/evaluate/ - replace MOP/MAWOP/MAASP of an annulus."""

    authentication_classes = [JWTAuthentication, SessionAuthentication]
    permission_classes = [IsAuthenticated]

    def post(self, request):
        payload = AnnulusEvaluateSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        data = payload.validated_data

        element = AnnulusElement.objects.filter(annulus_element_id=data['annulus_element_id']).first()
        if element is None:
            return Response({"error": "Annulus element not found"}, status=status.HTTP_404_NOT_FOUND)

        tests = evaluate_annulus(
            element,
            mop=data['mop'],
            mawop=data['mawop'],
            mawop_location=data.get('mawop_point'),
            maasp=data['maasp'],
            maasp_location=data.get('maasp_point'),
            create_user=data.get('create_user') or request.user.get_username(),
        )
        return Response(AnnulusTestSerializer(tests, many=True).data)
