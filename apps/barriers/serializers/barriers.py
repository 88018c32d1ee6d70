from rest_framework import serializers

from ..models import AnnulusElement, AnnulusTest, BarrierDiagram, BarrierEnvelopeTest


class BarrierDiagramSerializer(serializers.ModelSerializer):
    class Meta:
        model = BarrierDiagram
        fields = [
            'barrier_diagram_id', 'well_id', 'wellbore_id', 'scenario_id', 'diagram_date',
            'description', 'comments', 'status', 'created_at', 'updated_at',
        ]
        read_only_fields = fields


class BarrierEnvelopeTestSerializer(serializers.ModelSerializer):
    name = serializers.CharField(source='barrier_envelope.name', read_only=True)

    class Meta:
        model = BarrierEnvelopeTest
        fields = [
            'barrier_envelope_test_id', 'barrier_envelope', 'name', 'barrier_diagram',
            'status', 'last_test_date', 'create_user',
        ]
        read_only_fields = fields


class AnnulusElementSerializer(serializers.ModelSerializer):
    class Meta:
        model = AnnulusElement
        fields = [
            'annulus_element_id', 'barrier_diagram', 'well_id', 'wellbore_id', 'scenario_id',
            'name', 'pressure', 'density',
        ]
        read_only_fields = fields


class AnnulusTestSerializer(serializers.ModelSerializer):
    class Meta:
        model = AnnulusTest
        fields = ['annulus_test_id', 'annulus_element', 'test_type', 'pressure', 'location', 'last_test_date', 'create_user']
        read_only_fields = fields


class ElementHistorySerializer(serializers.Serializer):
    barrier_envelope_id = serializers.CharField()
    barrier_diagram_id = serializers.CharField()
    barrier_element_id = serializers.CharField(allow_null=True)
    status = serializers.CharField(allow_null=True)
    last_test_date = serializers.DateTimeField()
    create_user = serializers.CharField(allow_blank=True)
    details = serializers.CharField(allow_blank=True)


class BarrierElementRowSerializer(serializers.Serializer):
    """One row of the all-barriers listing."""

    barrier_diagram_id = serializers.CharField()
    barrier_envelope_id = serializers.CharField()
    barrier_element_id = serializers.CharField()
    name = serializers.CharField()
    envelope_status = serializers.CharField(allow_null=True)
    envelope_last_test_date = serializers.DateTimeField(allow_null=True)
    envelope_test_user = serializers.CharField(allow_null=True, allow_blank=True)
    ref_id = serializers.CharField()
    type = serializers.CharField()
    scenario_id = serializers.CharField()
    top_depth = serializers.FloatField(allow_null=True)
    base_depth = serializers.FloatField(allow_null=True)
    component_ovality = serializers.FloatField(allow_null=True)
    component_wearing = serializers.FloatField(allow_null=True)
    status = serializers.CharField(allow_null=True)
    details = serializers.CharField(allow_null=True, allow_blank=True)
    last_test_date = serializers.DateTimeField(allow_null=True)
    create_user = serializers.CharField(allow_null=True, allow_blank=True)
    element_history = ElementHistorySerializer(many=True)
