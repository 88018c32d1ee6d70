from django.db import models

from .well import Well
from .wellbore import Scenario, Wellbore


class WellboreGradient(models.Model):
    """Pore pressure, fracture and temperature curves, one point per row."""

    KIND_PORE_PRESSURE = 'PP'
    KIND_FRACTURE = 'FRAC'
    KIND_TEMPERATURE = 'TEMP'

    KIND_CHOICES = [
        (KIND_PORE_PRESSURE, 'Pore pressure'),
        (KIND_FRACTURE, 'Fracture'),
        (KIND_TEMPERATURE, 'Temperature'),
    ]

    well = models.ForeignKey(Well, on_delete=models.CASCADE, related_name='gradients')
    wellbore = models.ForeignKey(Wellbore, on_delete=models.CASCADE, related_name='gradients')
    kind = models.CharField(max_length=8, choices=KIND_CHOICES, db_index=True)
    formation = models.CharField(max_length=128, blank=True)
    depth_tvd = models.FloatField()
    value = models.FloatField(help_text='Pressure for PP/FRAC, temperature for TEMP')

    class Meta:
        db_table = 'well_core_wellbore_gradient'
        ordering = ['depth_tvd']
        indexes = [
            models.Index(fields=['well', 'wellbore', 'kind'], name='wc_gradient_kind_idx'),
        ]


class WellboreFormation(models.Model):
    wellbore_formation_id = models.CharField(max_length=32, primary_key=True)
    well = models.ForeignKey(Well, on_delete=models.CASCADE, related_name='formations')
    wellbore = models.ForeignKey(Wellbore, on_delete=models.CASCADE, related_name='formations')
    formation_name = models.CharField(max_length=128, blank=True)
    lithology_name = models.CharField(max_length=64, null=True, blank=True)
    strat_unit_name = models.CharField(max_length=128, null=True, blank=True)
    prognosed_md = models.FloatField(null=True, blank=True)
    comments = models.TextField(null=True, blank=True)

    class Meta:
        db_table = 'well_core_wellbore_formation'

    def __str__(self) -> str:  # pragma: no cover
        return f"Formation<{self.formation_name}>"


class FormationPick(models.Model):
    """Actual top/base pick of a formation."""

    formation = models.OneToOneField(WellboreFormation, on_delete=models.CASCADE, related_name='pick')
    md_top = models.FloatField(null=True, blank=True)
    md_base = models.FloatField(null=True, blank=True)
    tvd_top = models.FloatField(null=True, blank=True)
    tvd_base = models.FloatField(null=True, blank=True)
    phase = models.CharField(max_length=16, null=True, blank=True)

    class Meta:
        db_table = 'well_core_formation_pick'


class ScenarioFormationLink(models.Model):
    scenario = models.ForeignKey(Scenario, on_delete=models.CASCADE, related_name='formation_links')
    formation = models.ForeignKey(WellboreFormation, on_delete=models.CASCADE, related_name='scenario_links')
    is_log = models.BooleanField(default=False)

    class Meta:
        db_table = 'well_core_scenario_formation_link'
        constraints = [
            models.UniqueConstraint(fields=['scenario', 'formation'], name='uniq_scenario_formation'),
        ]


class LogInterval(models.Model):
    """Logging run interval with its reason and remarks."""

    log_interval_id = models.CharField(max_length=32, primary_key=True)
    well = models.ForeignKey(Well, on_delete=models.CASCADE, related_name='log_intervals')
    wellbore = models.ForeignKey(Wellbore, on_delete=models.CASCADE, related_name='log_intervals')
    log_date = models.DateTimeField(null=True, blank=True)
    service = models.CharField(max_length=128, blank=True)
    md_top = models.FloatField(null=True, blank=True)
    md_base = models.FloatField(null=True, blank=True)
    reason = models.CharField(max_length=255, null=True, blank=True)
    comments = models.JSONField(null=True, blank=True)
    assembly_name = models.CharField(max_length=128, null=True, blank=True)

    class Meta:
        db_table = 'well_core_log_interval'
        ordering = ['log_date']
