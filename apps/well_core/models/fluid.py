from django.db import models

from .well import Well
from .wellbore import Wellbore


class DrillingFluid(models.Model):
    """Daily mud check. A check on the as-of day means the well is being drilled."""

    fluid_id = models.CharField(max_length=32, primary_key=True)
    well = models.ForeignKey(Well, on_delete=models.CASCADE, related_name='drilling_fluids')
    wellbore = models.ForeignKey(Wellbore, on_delete=models.CASCADE, related_name='drilling_fluids')
    event_id = models.CharField(max_length=32, blank=True)
    check_date = models.DateTimeField()
    fluid_name = models.CharField(max_length=128, blank=True)
    density = models.FloatField(null=True, blank=True)

    class Meta:
        db_table = 'well_core_fluid'
        indexes = [
            models.Index(fields=['well', 'wellbore', 'check_date'], name='wc_fluid_well_wb_date_idx'),
        ]


class CompletionFluid(models.Model):
    """Annulus/packer fluid left in place after completion."""

    completion_fluid_id = models.CharField(max_length=32, primary_key=True)
    well = models.ForeignKey(Well, on_delete=models.CASCADE, related_name='completion_fluids')
    wellbore = models.ForeignKey(Wellbore, on_delete=models.CASCADE, related_name='completion_fluids')
    event_id = models.CharField(max_length=32, blank=True)
    fluid_type = models.CharField(max_length=128, blank=True)
    fluid_density = models.FloatField(null=True, blank=True)
    md_top = models.FloatField()
    md_base = models.FloatField()
    install_date = models.DateTimeField()
    removal_date = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'well_core_completion_fluid'
        indexes = [
            models.Index(fields=['well', 'wellbore', 'install_date'], name='wc_compfluid_install_idx'),
        ]
