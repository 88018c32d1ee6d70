"""
Request serializers for the barrier and annulus endpoints.

Every request is anchored on (well_id, wellbore_id, scenario_id,
schematic_date); the date is truncated to the start of its day.
"""

from rest_framework import serializers
from rest_framework.settings import ISO_8601

from apps.barriers.models import BarrierStatus
from apps.barriers.services.barrier_overlay import DiagramKey
from apps.barriers.services.ref_ids import ELEMENT_TYPE_RULES


class SchematicQuerySerializer(serializers.Serializer):
    well_id = serializers.CharField(max_length=32)
    wellbore_id = serializers.CharField(max_length=32)
    scenario_id = serializers.CharField(max_length=32)
    schematic_date = serializers.DateTimeField(
        input_formats=[ISO_8601, '%Y-%m-%d'],
        help_text="As-of date; any time part is dropped",
    )

    def validate_schematic_date(self, value):
        return value.replace(hour=0, minute=0, second=0, microsecond=0)

    def diagram_key(self) -> DiagramKey:
        data = self.validated_data
        return DiagramKey(
            well_id=data['well_id'],
            wellbore_id=data['wellbore_id'],
            scenario_id=data['scenario_id'],
            diagram_date=data['schematic_date'],
        )


class BarrierDiagramsQuerySerializer(serializers.Serializer):
    well_id = serializers.CharField(max_length=32)
    wellbore_id = serializers.CharField(max_length=32)
    scenario_id = serializers.CharField(max_length=32)


class BarrierModifyItemSerializer(serializers.Serializer):
    barrier = serializers.CharField(max_length=64, help_text="Envelope name, e.g. 'Primary'")
    element_type = serializers.ChoiceField(choices=sorted(ELEMENT_TYPE_RULES))
    ref_id = serializers.CharField(max_length=255)
    top = serializers.FloatField(required=False, allow_null=True)
    base = serializers.FloatField(required=False, allow_null=True)

    def to_internal_value(self, data):
        if isinstance(data, dict) and isinstance(data.get('element_type'), str):
            data = {**data, 'element_type': data['element_type'].upper()}
        return super().to_internal_value(data)


class BarriersModifySerializer(SchematicQuerySerializer):
    barrier_modify_data = BarrierModifyItemSerializer(many=True, allow_empty=False)


class BarrierEvaluationItemSerializer(serializers.Serializer):
    ref_id = serializers.CharField(max_length=255)
    barrier_envelope_id = serializers.CharField(max_length=32)
    barrier_diagram_id = serializers.CharField(max_length=32, required=False)
    barrier_element_id = serializers.CharField(max_length=32, required=False)
    status = serializers.ChoiceField(
        choices=[c[0] for c in BarrierStatus.CHOICES],
        required=False,
        allow_null=True,
        allow_blank=True,
        help_text="Missing status counts as Not Effective",
    )
    component_ovality = serializers.FloatField(required=False, allow_null=True)
    component_wearing = serializers.FloatField(required=False, allow_null=True)
    details = serializers.CharField(required=False, allow_blank=True, default='')
    create_user = serializers.CharField(required=False, allow_blank=True)


class BarriersEvaluateSerializer(serializers.Serializer):
    evaluations = BarrierEvaluationItemSerializer(many=True, allow_empty=False)


class AnnulusModifySerializer(SchematicQuerySerializer):
    name = serializers.CharField(max_length=32, help_text="Annulus name, e.g. 'A'")
    pressure = serializers.FloatField(required=False, allow_null=True)
    density = serializers.FloatField(required=False, allow_null=True)


class AnnulusEvaluateSerializer(serializers.Serializer):
    annulus_element_id = serializers.CharField(max_length=32)
    mop = serializers.FloatField(allow_null=True)
    mawop = serializers.FloatField(allow_null=True)
    mawop_point = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    maasp = serializers.FloatField(allow_null=True)
    maasp_point = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    create_user = serializers.CharField(required=False, allow_blank=True)
