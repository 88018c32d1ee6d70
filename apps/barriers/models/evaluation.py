from django.db import models

from apps.barriers.services.short_ids import make_short_id

from .diagram import BarrierDiagram, BarrierElement, BarrierEnvelope


class BarrierStatus:
    EFFECTIVE = 'Effective'
    PARTIALLY_EFFECTIVE = 'Partially Effective'
    NOT_EFFECTIVE = 'Not Effective'

    CHOICES = [
        (EFFECTIVE, 'Effective'),
        (PARTIALLY_EFFECTIVE, 'Partially Effective'),
        (NOT_EFFECTIVE, 'Not Effective'),
    ]


class BarrierEnvelopeTest(models.Model):
    """Live evaluation of an envelope. Replaced wholesale on each evaluation."""

    barrier_envelope_test_id = models.CharField(max_length=32, primary_key=True, default=make_short_id, editable=False)
    barrier_envelope = models.ForeignKey(BarrierEnvelope, on_delete=models.CASCADE, related_name='tests')
    barrier_diagram = models.ForeignKey(BarrierDiagram, on_delete=models.CASCADE, related_name='envelope_tests')
    well_id = models.CharField(max_length=32)
    wellbore_id = models.CharField(max_length=32)
    scenario_id = models.CharField(max_length=32)

    status = models.CharField(max_length=32, choices=BarrierStatus.CHOICES)
    last_test_date = models.DateTimeField()
    create_user = models.CharField(max_length=150, blank=True)

    class Meta:
        db_table = 'barriers_envelope_test'
        indexes = [
            models.Index(fields=['barrier_envelope', 'barrier_diagram'], name='bar_envtest_env_diag_idx'),
        ]


class BarrierElementTestLink(models.Model):
    """Per-element result belonging to an envelope evaluation."""

    barrier_envelope_test = models.ForeignKey(BarrierEnvelopeTest, on_delete=models.CASCADE, related_name='links')
    barrier_envelope = models.ForeignKey(BarrierEnvelope, on_delete=models.CASCADE, related_name='test_links')
    barrier_diagram = models.ForeignKey(BarrierDiagram, on_delete=models.CASCADE, related_name='element_test_links')
    barrier_element = models.ForeignKey(
        BarrierElement,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='test_links',
    )
    ref_id = models.CharField(max_length=255)

    status = models.CharField(max_length=32, null=True, blank=True)
    component_ovality = models.FloatField(null=True, blank=True)
    component_wearing = models.FloatField(null=True, blank=True)
    details = models.TextField(blank=True)
    last_test_date = models.DateTimeField()
    create_user = models.CharField(max_length=150, blank=True)

    class Meta:
        db_table = 'barriers_element_test_link'


class BarrierEnvelopeTestAudit(models.Model):
    """Append-only copy of every envelope evaluation ever written."""

    barrier_envelope_test_id = models.CharField(max_length=32, db_index=True)
    barrier_envelope_id = models.CharField(max_length=32, db_index=True)
    barrier_diagram_id = models.CharField(max_length=32)
    well_id = models.CharField(max_length=32)
    wellbore_id = models.CharField(max_length=32)
    scenario_id = models.CharField(max_length=32)
    status = models.CharField(max_length=32)
    last_test_date = models.DateTimeField()
    create_user = models.CharField(max_length=150, blank=True)
    audited_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'barriers_envelope_test_audit'


class BarrierElementTestLinkAudit(models.Model):
    """Append-only copy of per-element evaluation results; feeds element history."""

    barrier_envelope_test_id = models.CharField(max_length=32)
    barrier_envelope_id = models.CharField(max_length=32)
    barrier_diagram_id = models.CharField(max_length=32)
    barrier_element_id = models.CharField(max_length=32, null=True, blank=True, db_index=True)
    ref_id = models.CharField(max_length=255)
    status = models.CharField(max_length=32, null=True, blank=True)
    component_ovality = models.FloatField(null=True, blank=True)
    component_wearing = models.FloatField(null=True, blank=True)
    details = models.TextField(blank=True)
    last_test_date = models.DateTimeField()
    create_user = models.CharField(max_length=150, blank=True)
    audited_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'barriers_element_test_link_audit'
        ordering = ['-last_test_date']
