from django.db import models

from apps.barriers.services.short_ids import make_short_id

from .diagram import BarrierDiagram


class AnnulusElement(models.Model):
    """Annulus (A, B, C...) tracked on a barrier diagram with its current pressure and fluid density."""

    annulus_element_id = models.CharField(max_length=32, primary_key=True, default=make_short_id, editable=False)
    barrier_diagram = models.ForeignKey(BarrierDiagram, on_delete=models.CASCADE, related_name='annuli')
    well_id = models.CharField(max_length=32)
    wellbore_id = models.CharField(max_length=32)
    scenario_id = models.CharField(max_length=32)

    name = models.CharField(max_length=32)
    pressure = models.FloatField(null=True, blank=True)
    density = models.FloatField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'barriers_annulus_element'
        ordering = ['name']
        constraints = [
            models.UniqueConstraint(fields=['barrier_diagram', 'name'], name='uniq_annulus_element_name'),
        ]

    def __str__(self) -> str:  # pragma: no cover
        return f"Annulus<{self.name} @ {self.barrier_diagram_id}>"


class AnnulusTest(models.Model):
    """Operating limit for an annulus. One live row per test type."""

    MOP = 'MOP'
    MAWOP = 'MAWOP'
    MAASP = 'MAASP'

    TEST_TYPES = (MOP, MAWOP, MAASP)
    TEST_TYPE_CHOICES = [(t, t) for t in TEST_TYPES]

    annulus_test_id = models.CharField(max_length=32, primary_key=True, default=make_short_id, editable=False)
    annulus_element = models.ForeignKey(AnnulusElement, on_delete=models.CASCADE, related_name='tests')
    barrier_diagram = models.ForeignKey(BarrierDiagram, on_delete=models.CASCADE, related_name='annulus_tests')
    well_id = models.CharField(max_length=32)
    wellbore_id = models.CharField(max_length=32)
    scenario_id = models.CharField(max_length=32)

    test_type = models.CharField(max_length=8, choices=TEST_TYPE_CHOICES)
    pressure = models.FloatField(null=True, blank=True)
    location = models.CharField(max_length=64, null=True, blank=True)
    last_test_date = models.DateTimeField()
    create_user = models.CharField(max_length=150, blank=True)

    class Meta:
        db_table = 'barriers_annulus_test'
        indexes = [
            models.Index(fields=['annulus_element', 'test_type'], name='bar_anntest_elem_type_idx'),
        ]
