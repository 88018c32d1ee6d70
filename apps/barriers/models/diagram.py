from django.db import models
from simple_history.models import HistoricalRecords

from apps.barriers.services.short_ids import make_short_id


class BarrierDiagram(models.Model):
    """
    Barrier annotation layer for one well/wellbore/scenario on one day.

    The natural key is unique so concurrent get-or-create callers converge
    on one row.
    """

    barrier_diagram_id = models.CharField(max_length=32, primary_key=True, default=make_short_id, editable=False)
    well_id = models.CharField(max_length=32, db_index=True)
    wellbore_id = models.CharField(max_length=32)
    scenario_id = models.CharField(max_length=32)
    diagram_date = models.DateTimeField()

    description = models.CharField(max_length=255, blank=True)
    comments = models.TextField(blank=True)
    status = models.CharField(max_length=32, null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'barriers_diagram'
        ordering = ['-diagram_date']
        constraints = [
            models.UniqueConstraint(
                fields=['well_id', 'wellbore_id', 'scenario_id', 'diagram_date'],
                name='uniq_barrier_diagram_natural_key',
            ),
        ]
        indexes = [
            models.Index(fields=['well_id', 'wellbore_id', 'scenario_id'], name='bar_diagram_scope_idx'),
        ]

    def __str__(self) -> str:  # pragma: no cover
        return f"BarrierDiagram<{self.barrier_diagram_id} {self.well_id}/{self.wellbore_id} {self.diagram_date:%Y-%m-%d}>"


class BarrierEnvelope(models.Model):
    """
    Named barrier (e.g. 'Primary', 'Secondary') within a diagram.
    ``status`` holds the aggregate of the latest evaluation; changes are
    kept in the history table.
    """

    barrier_envelope_id = models.CharField(max_length=32, primary_key=True, default=make_short_id, editable=False)
    barrier_diagram = models.ForeignKey(BarrierDiagram, on_delete=models.CASCADE, related_name='envelopes')
    well_id = models.CharField(max_length=32)
    wellbore_id = models.CharField(max_length=32)
    scenario_id = models.CharField(max_length=32)

    name = models.CharField(max_length=64)
    color = models.CharField(max_length=32, null=True, blank=True)
    status = models.CharField(max_length=32, null=True, blank=True)
    sequence_no = models.IntegerField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    history = HistoricalRecords(user_db_constraint=False)

    class Meta:
        db_table = 'barriers_envelope'
        constraints = [
            models.UniqueConstraint(fields=['barrier_diagram', 'name'], name='uniq_barrier_envelope_name'),
        ]

    def __str__(self) -> str:  # pragma: no cover
        return f"BarrierEnvelope<{self.name} @ {self.barrier_diagram_id}>"


class BarrierElement(models.Model):
    """
    Marks one physical element (addressed by ``ref_id``) as part of an
    envelope. Only the sub-id columns matching ``element_type`` are set.
    """

    barrier_element_id = models.CharField(max_length=32, primary_key=True, default=make_short_id, editable=False)
    barrier_envelope = models.ForeignKey(BarrierEnvelope, on_delete=models.CASCADE, related_name='elements')
    barrier_diagram = models.ForeignKey(BarrierDiagram, on_delete=models.CASCADE, related_name='elements')
    well_id = models.CharField(max_length=32)
    wellbore_id = models.CharField(max_length=32)
    scenario_id = models.CharField(max_length=32)

    ref_id = models.CharField(max_length=255, db_index=True)
    element_type = models.CharField(max_length=32)

    wellhead_comp_id = models.CharField(max_length=32, null=True, blank=True)
    wellhead_hanger_id = models.CharField(max_length=32, null=True, blank=True)
    wellhead_outlet_id = models.CharField(max_length=32, null=True, blank=True)
    wellbore_formation_id = models.CharField(max_length=32, null=True, blank=True)
    hole_sect_group_id = models.CharField(max_length=32, null=True, blank=True)
    assembly_id = models.CharField(max_length=32, null=True, blank=True)
    assembly_comp_id = models.CharField(max_length=32, null=True, blank=True)
    cement_job_id = models.CharField(max_length=32, null=True, blank=True)
    cement_stage_id = models.CharField(max_length=32, null=True, blank=True)
    wellbore_opening_id = models.CharField(max_length=32, null=True, blank=True)
    fluid_id = models.CharField(max_length=32, null=True, blank=True)

    top_depth = models.FloatField(null=True, blank=True)
    base_depth = models.FloatField(null=True, blank=True)
    component_ovality = models.FloatField(null=True, blank=True)
    component_wearing = models.FloatField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'barriers_element'
        constraints = [
            models.UniqueConstraint(fields=['barrier_envelope', 'ref_id'], name='uniq_barrier_element_ref'),
        ]
        indexes = [
            models.Index(fields=['well_id', 'wellbore_id', 'scenario_id', 'ref_id'], name='bar_element_scope_ref_idx'),
        ]

    def __str__(self) -> str:  # pragma: no cover
        return f"BarrierElement<{self.element_type} {self.ref_id}>"
